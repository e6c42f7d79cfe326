"""SwapRule — caller sends one token and receives a different one."""

from txsummary.decoder.types import Transfer
from txsummary.summarizer.base import BaseRule
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.formatting import format_transfer


def identify_swap(ctx: SummaryContext) -> tuple[Transfer, Transfer] | None:
    """First caller-outgoing and first caller-incoming transfer, if their tokens differ."""
    sent = ctx.first_transfer(from_address=ctx.caller)
    received = ctx.first_transfer(to_address=ctx.caller)
    if sent is None or received is None:
        return None
    if sent.token.lower() == received.token.lower():
        return None
    return sent, received


def describe_swap(sent: Transfer, received: Transfer, venue: str) -> str:
    return f"Swapped {format_transfer(sent)} → {format_transfer(received)} via {venue}"


class SwapRule(BaseRule):
    RULE_NAME = "SwapRule"

    def can_summarize(self, ctx: SummaryContext) -> bool:
        return len(ctx.tx.transfers) >= 2

    def summarize(self, ctx: SummaryContext) -> str | None:
        swap = identify_swap(ctx)
        if swap is None:
            return None
        sent, received = swap
        return describe_swap(sent, received, ctx.contract_name or "DEX")
