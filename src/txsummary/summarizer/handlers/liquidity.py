"""Liquidity provision on AMMs (Uniswap V2/V3, SushiSwap, Curve)."""

from txsummary.decoder.types import Transfer
from txsummary.summarizer.base import FunctionHandler
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.formatting import format_transfer

ADD_FUNCTIONS = (
    "addLiquidity",
    "addLiquidityETH",
    "add_liquidity",
    "increaseLiquidity",
)

REMOVE_FUNCTIONS = (
    "removeLiquidity",
    "removeLiquidityETH",
    "removeLiquidityWithPermit",
    "removeLiquidityETHWithPermit",
    "removeLiquidityETHSupportingFeeOnTransferTokens",
    "removeLiquidityETHWithPermitSupportingFeeOnTransferTokens",
    "remove_liquidity",
    "remove_liquidity_one_coin",
    "remove_liquidity_imbalance",
    "decreaseLiquidity",
)


def _distinct_tokens(transfers: list[Transfer]) -> list[str]:
    """One formatted amount per token, first occurrence wins."""
    seen: set[str] = set()
    parts = []
    for t in transfers:
        key = t.token.lower()
        if key in seen:
            continue
        seen.add(key)
        parts.append(format_transfer(t))
    return parts


class LiquidityHandler(FunctionHandler):
    HANDLER_NAME = "LiquidityHandler"
    FUNCTION_HANDLERS = {
        **{name: "_handle_add" for name in ADD_FUNCTIONS},
        **{name: "_handle_remove" for name in REMOVE_FUNCTIONS},
    }

    def _handle_add(self, ctx: SummaryContext) -> str | None:
        parts = []
        if ctx.value > 0:
            parts.append(ctx.native_amount())
        parts.extend(_distinct_tokens(ctx.sent()))
        if not parts:
            return None
        return f"Added liquidity: {' + '.join(parts)} to {ctx.contract_name or 'pool'}"

    def _handle_remove(self, ctx: SummaryContext) -> str | None:
        parts = _distinct_tokens(ctx.received())
        if not parts:
            return None
        return f"Removed liquidity: {' + '.join(parts)} from {ctx.contract_name or 'pool'}"
