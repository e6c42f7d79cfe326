"""Plain ERC-20 moves plus deposit/withdraw (WETH wrapping or pool deposits)."""

from txsummary.summarizer.base import FunctionHandler
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.formatting import format_address, format_amount, format_transfer


class TokenHandler(FunctionHandler):
    HANDLER_NAME = "TokenHandler"
    FUNCTION_HANDLERS = {
        "transfer": "_handle_transfer",
        "transferFrom": "_handle_transfer",
        "deposit": "_handle_deposit",
        "withdraw": "_handle_withdraw",
    }

    def _handle_transfer(self, ctx: SummaryContext) -> str | None:
        if not ctx.tx.transfers:
            return None
        t = ctx.tx.transfers[0]
        return f"Sent {format_transfer(t)} → {format_address(t.to_address)}"

    def _handle_deposit(self, ctx: SummaryContext) -> str | None:
        if ctx.value > 0:
            return f"Wrapped {ctx.native_amount()} → W{ctx.native_symbol}"
        sent = ctx.sent()
        if sent:
            return f"Deposited {format_transfer(sent[0])} to {ctx.protocol}"
        return None

    def _handle_withdraw(self, ctx: SummaryContext) -> str | None:
        wrapped_symbol = f"W{ctx.native_symbol}"
        for t in ctx.tx.transfers:
            if t.symbol == wrapped_symbol:
                return f"Unwrapped {format_amount(t.amount, t.symbol)} → {ctx.native_symbol}"
        received = ctx.received()
        if received:
            return f"Withdrew {format_transfer(received[0])} from {ctx.protocol}"
        return None
