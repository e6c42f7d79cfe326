from txsummary.registry import NATIVE_TRANSFER_NAME
from txsummary.summarizer.base import BaseRule
from txsummary.summarizer.context import SummaryContext


class NativeTransferRule(BaseRule):
    """Plain value transfer: empty calldata or an unknown selector carrying value."""

    RULE_NAME = "NativeTransferRule"

    def can_summarize(self, ctx: SummaryContext) -> bool:
        return ctx.function_name in (None, NATIVE_TRANSFER_NAME) and ctx.value > 0

    def summarize(self, ctx: SummaryContext) -> str | None:
        return f"Sent {ctx.native_amount()} → {ctx.target_address}"
