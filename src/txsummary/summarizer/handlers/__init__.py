from txsummary.summarizer.handlers.approvals import ApprovalHandler
from txsummary.summarizer.handlers.bridge import BridgeHandler
from txsummary.summarizer.handlers.lending import LendingHandler
from txsummary.summarizer.handlers.liquidity import LiquidityHandler
from txsummary.summarizer.handlers.marketplace import MarketplaceHandler
from txsummary.summarizer.handlers.nft import NFTHandler
from txsummary.summarizer.handlers.permit import PermitHandler
from txsummary.summarizer.handlers.swaps import MulticallHandler, SwapHandler
from txsummary.summarizer.handlers.tokens import TokenHandler

__all__ = [
    "ApprovalHandler",
    "BridgeHandler",
    "LendingHandler",
    "LiquidityHandler",
    "MarketplaceHandler",
    "MulticallHandler",
    "NFTHandler",
    "PermitHandler",
    "SwapHandler",
    "TokenHandler",
]
