"""Router entry points: multicall wrappers and the direct swap family."""

from txsummary.summarizer.base import FunctionHandler
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.formatting import format_transfer
from txsummary.summarizer.generic.swap import describe_swap, identify_swap

SWAP_FUNCTIONS = (
    # Uniswap V2 style routers
    "swapExactETHForTokens",
    "swapExactTokensForETH",
    "swapExactTokensForTokens",
    "swapETHForExactTokens",
    "swapTokensForExactTokens",
    "swapTokensForExactETH",
    "swapExactETHForTokensSupportingFeeOnTransferTokens",
    "swapExactTokensForETHSupportingFeeOnTransferTokens",
    "swapExactTokensForTokensSupportingFeeOnTransferTokens",
    # Uniswap V3 routers
    "exactInputSingle",
    "exactInput",
    "exactOutputSingle",
    "exactOutput",
    # Aggregators
    "swap",
    "unoswap",
    "uniswapV3Swap",
    "processRoute",
    "transferValueAndprocessRoute",
    # Curve
    "exchange",
    "exchange_underlying",
)


def _pays_out_native(function_name: str) -> bool:
    return "ForETH" in function_name or "ForExactETH" in function_name


class MulticallHandler(FunctionHandler):
    HANDLER_NAME = "MulticallHandler"
    FUNCTION_HANDLERS = {
        "multicall": "_handle_multicall",
        "execute": "_handle_multicall",
    }

    def _handle_multicall(self, ctx: SummaryContext) -> str | None:
        swap = identify_swap(ctx)
        if swap is not None:
            sent, received = swap
            return describe_swap(sent, received, ctx.contract_name or "Uniswap")
        received = ctx.received()
        if received:
            return f"Received {format_transfer(received[0])} via {ctx.contract_name or 'router'}"
        return None


class SwapHandler(FunctionHandler):
    HANDLER_NAME = "SwapHandler"
    FUNCTION_HANDLERS = {name: "_handle_swap" for name in SWAP_FUNCTIONS}

    def _handle_swap(self, ctx: SummaryContext) -> str | None:
        venue = ctx.contract_name or "DEX"
        sent = ctx.sent()
        received = ctx.received()

        if ctx.value > 0 and received:
            return f"Swapped {ctx.native_amount()} → {format_transfer(received[0])} via {venue}"
        if sent and not received:
            if _pays_out_native(ctx.function_name or ""):
                return f"Swapped {format_transfer(sent[0])} → {ctx.native_symbol} via {venue}"
            return f"Swapped {format_transfer(sent[0])} via {venue}"
        if received and not sent:
            return f"Swapped for {format_transfer(received[0])} via {venue}"
        return None
