from txsummary.summarizer.base import BaseRule
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.formatting import format_address, format_transfer


class TransferFallbackRule(BaseRule):
    """Describe the caller's own token flows when nothing more specific matched."""

    RULE_NAME = "TransferFallbackRule"

    def can_summarize(self, ctx: SummaryContext) -> bool:
        return bool(ctx.tx.transfers)

    def summarize(self, ctx: SummaryContext) -> str | None:
        sent = ctx.sent()
        received = ctx.received()
        if sent and received:
            return f"Exchanged {format_transfer(sent[0])} for {format_transfer(received[0])}"
        if sent:
            return f"Sent {format_transfer(sent[0])} → {format_address(sent[0].to_address)}"
        if received:
            return f"Received {format_transfer(received[0])} from {format_address(received[0].from_address)}"
        return None
