"""VaultRule — ERC-4626 style share mints and burns."""

import logging

from txsummary.decoder.codec import format_units
from txsummary.decoder.types import Transfer
from txsummary.summarizer.base import BaseRule
from txsummary.summarizer.context import ZERO_ADDRESS, SummaryContext
from txsummary.summarizer.formatting import format_amount, format_transfer

logger = logging.getLogger(__name__)

VAULT_FUNCTIONS = frozenset({"deposit", "mint", "redeem", "withdraw"})


def _shares(share: Transfer, underlying: Transfer) -> str:
    # Shares are quoted in the underlying's decimals
    return format_amount(format_units(share.raw_amount, underlying.decimals), "shares")


class VaultRule(BaseRule):
    RULE_NAME = "VaultRule"

    def can_summarize(self, ctx: SummaryContext) -> bool:
        return ctx.function_name in VAULT_FUNCTIONS and bool(ctx.tx.transfers)

    def summarize(self, ctx: SummaryContext) -> str | None:
        minted = ctx.first_transfer(from_address=ZERO_ADDRESS, to_address=ctx.caller)
        if minted is not None:
            paid = ctx.first_transfer(from_address=ctx.caller, exclude_token=minted.token)
            if paid is not None:
                logger.debug("Vault deposit into %s on %s", minted.token, ctx.tx.hash)
                return f"Deposited {format_transfer(paid)} → received {_shares(minted, paid)}"

        burned = ctx.first_transfer(from_address=ctx.caller, to_address=ZERO_ADDRESS)
        if burned is not None:
            got = ctx.first_transfer(to_address=ctx.caller, exclude_token=burned.token)
            if got is not None:
                logger.debug("Vault withdrawal from %s on %s", burned.token, ctx.tx.hash)
                return f"Withdrew {format_transfer(got)} → burned {_shares(burned, got)}"

        return None
