from txsummary.summarizer.base import BaseRule
from txsummary.summarizer.context import SummaryContext


class FinalFallbackRule(BaseRule):
    """Always answers. Must stay last in the rule table."""

    RULE_NAME = "FinalFallbackRule"

    def can_summarize(self, ctx: SummaryContext) -> bool:
        return True

    def summarize(self, ctx: SummaryContext) -> str | None:
        fn = ctx.function_name
        if fn:
            return f"Called {fn}() on {ctx.target_label}"
        if ctx.value > 0:
            return f"Sent {ctx.native_amount()} → {ctx.target_address}"
        return f"Interacted with {ctx.target_label}"
