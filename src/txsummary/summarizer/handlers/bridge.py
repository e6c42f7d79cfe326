from txsummary.summarizer.base import FunctionHandler
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.formatting import format_transfer

BRIDGE_FUNCTIONS = (
    "bridge",
    "bridgeETH",
    "bridgeETHTo",
    "bridgeERC20",
    "bridgeERC20To",
    "depositETH",
    "depositETHTo",
    "depositERC20",
    "depositERC20To",
    "depositEth",
    "outboundTransfer",
    "depositV3",
    "depositForBurn",
)


class BridgeHandler(FunctionHandler):
    HANDLER_NAME = "BridgeHandler"
    FUNCTION_HANDLERS = {name: "_handle_bridge" for name in BRIDGE_FUNCTIONS}

    def _handle_bridge(self, ctx: SummaryContext) -> str | None:
        if ctx.value > 0:
            amount = ctx.native_amount()
        else:
            sent = ctx.sent()
            if not sent:
                return None
            amount = format_transfer(sent[0])
        return f"Bridged {amount} via {ctx.protocol}"
