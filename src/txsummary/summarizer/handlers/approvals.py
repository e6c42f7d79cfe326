from txsummary.summarizer.base import FunctionHandler
from txsummary.summarizer.context import SummaryContext


class ApprovalHandler(FunctionHandler):
    HANDLER_NAME = "ApprovalHandler"
    FUNCTION_HANDLERS = {
        "approve": "_handle_approve",
        "setApprovalForAll": "_handle_set_approval_for_all",
    }

    def _handle_approve(self, ctx: SummaryContext) -> str | None:
        if not ctx.tx.to_address:
            return None
        return f"Approved {ctx.token_symbol(ctx.tx.to_address)} spending"

    def _handle_set_approval_for_all(self, ctx: SummaryContext) -> str | None:
        return f"Set approval for all {ctx.target_label} NFTs"
