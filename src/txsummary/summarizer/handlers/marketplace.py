from txsummary.summarizer.base import FunctionHandler
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.formatting import format_transfer

# Seaport 1.x order fulfilment entry points
FULFILL_FUNCTIONS = (
    "fulfillBasicOrder",
    "fulfillBasicOrder_efficient_6GL6yc",
    "fulfillOrder",
    "fulfillAdvancedOrder",
    "fulfillAvailableOrders",
    "fulfillAvailableAdvancedOrders",
    "matchOrders",
    "matchAdvancedOrders",
)


class MarketplaceHandler(FunctionHandler):
    HANDLER_NAME = "MarketplaceHandler"
    FUNCTION_HANDLERS = {name: "_handle_fulfill" for name in FULFILL_FUNCTIONS}

    def _handle_fulfill(self, ctx: SummaryContext) -> str | None:
        if ctx.value > 0:
            payment = ctx.native_amount()
        else:
            sent = ctx.sent()
            if not sent:
                return None
            payment = format_transfer(sent[0])
        return f"Filled {ctx.protocol} order for {payment}"
