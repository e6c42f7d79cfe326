from txsummary.summarizer.base import FunctionHandler
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.formatting import format_address, format_transfer


class PermitHandler(FunctionHandler):
    """EIP-2612 permit on a token, and Permit2 signature transfers."""

    HANDLER_NAME = "PermitHandler"
    FUNCTION_HANDLERS = {
        "permit": "_handle_permit",
        "permitTransferFrom": "_handle_permit_transfer",
    }

    def _handle_permit(self, ctx: SummaryContext) -> str | None:
        if not ctx.tx.to_address:
            return None
        return f"Approved {ctx.token_symbol(ctx.tx.to_address)} spending via permit"

    def _handle_permit_transfer(self, ctx: SummaryContext) -> str | None:
        if not ctx.tx.transfers:
            return None
        t = ctx.tx.transfers[0]
        return (
            f"Sent {format_transfer(t)} → {format_address(t.to_address)} "
            f"via {ctx.contract_name or 'Permit2'}"
        )
