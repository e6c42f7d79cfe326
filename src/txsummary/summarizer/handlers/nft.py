from txsummary.summarizer.base import FunctionHandler
from txsummary.summarizer.context import SummaryContext
from txsummary.summarizer.formatting import format_address
from txsummary.summarizer.generic.nft import collection_name, describe_single_nft


class NFTHandler(FunctionHandler):
    HANDLER_NAME = "NFTHandler"
    FUNCTION_HANDLERS = {
        "safeTransferFrom": "_handle_safe_transfer",
        "safeBatchTransferFrom": "_handle_batch_transfer",
    }

    def _handle_safe_transfer(self, ctx: SummaryContext) -> str | None:
        if not ctx.tx.nft_transfers:
            return None
        return describe_single_nft(ctx, ctx.tx.nft_transfers[0])

    def _handle_batch_transfer(self, ctx: SummaryContext) -> str | None:
        nfts = ctx.tx.nft_transfers
        if not nfts:
            return None
        first = nfts[0]
        return (
            f"Batch transferred {len(nfts)} {collection_name(first)} NFTs → "
            f"{format_address(first.to_address)}"
        )
