"""NFTTransferRule — mints, burns, purchases, sales and plain NFT moves."""

from txsummary.decoder.types import NFTTransfer
from txsummary.summarizer.base import BaseRule
from txsummary.summarizer.context import ZERO_ADDRESS, SummaryContext
from txsummary.summarizer.formatting import format_address, format_transfer

# Entry points whose NFT sentences come from the function handlers
HANDLER_ENTRY_POINTS = frozenset({"multicall", "execute", "safeTransferFrom", "safeBatchTransferFrom"})


def collection_name(nft: NFTTransfer) -> str:
    return nft.contract_name or format_address(nft.contract)


def nft_label(nft: NFTTransfer) -> str:
    """"BAYC #1234", or "5× Some Collection #7" for ERC-1155 quantities."""
    label = f"{collection_name(nft)} #{nft.token_id}"
    if nft.quantity > 1:
        return f"{nft.quantity}× {label}"
    return label


def group_label(nfts: list[NFTTransfer]) -> str:
    if len(nfts) == 1:
        return nft_label(nfts[0])
    return f"{len(nfts)} {collection_name(nfts[0])} NFTs"


def describe_single_nft(ctx: SummaryContext, nft: NFTTransfer) -> str:
    label = nft_label(nft)
    if ctx.is_caller(nft.to_address):
        return f"Received {label} from {format_address(nft.from_address)}"
    if ctx.is_caller(nft.from_address):
        return f"Sent {label} → {format_address(nft.to_address)}"
    return f"Transferred {label} → {format_address(nft.to_address)}"


class NFTTransferRule(BaseRule):
    RULE_NAME = "NFTTransferRule"

    def can_summarize(self, ctx: SummaryContext) -> bool:
        return bool(ctx.tx.nft_transfers) and ctx.function_name not in HANDLER_ENTRY_POINTS

    def summarize(self, ctx: SummaryContext) -> str | None:
        minted = ctx.peek_nfts(from_address=ZERO_ADDRESS)
        if minted:
            return f"Minted {group_label(minted)}"

        burned = ctx.peek_nfts(to_address=ZERO_ADDRESS)
        if burned:
            return f"Burned {group_label(burned)}"

        bought = ctx.peek_nfts(to_address=ctx.caller)
        if bought:
            payment = self._payment(ctx)
            if payment:
                return f"Bought {group_label(bought)} for {payment}"

        sold = ctx.peek_nfts(from_address=ctx.caller)
        if sold:
            proceeds = ctx.received()
            if proceeds:
                return f"Sold {group_label(sold)} for {format_transfer(proceeds[0])}"

        nfts = ctx.tx.nft_transfers
        if len(nfts) == 1:
            return describe_single_nft(ctx, nfts[0])
        return f"Transferred {len(nfts)} NFTs"

    @staticmethod
    def _payment(ctx: SummaryContext) -> str | None:
        if ctx.value > 0:
            return ctx.native_amount()
        sent = ctx.sent()
        if sent:
            return format_transfer(sent[0])
        return None
