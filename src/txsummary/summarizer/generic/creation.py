from txsummary.summarizer.base import BaseRule
from txsummary.summarizer.context import SummaryContext


class ContractCreationRule(BaseRule):
    RULE_NAME = "ContractCreationRule"

    def can_summarize(self, ctx: SummaryContext) -> bool:
        return ctx.tx.is_contract_creation

    def summarize(self, ctx: SummaryContext) -> str | None:
        return "Deployed new contract"
