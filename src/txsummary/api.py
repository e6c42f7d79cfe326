"""Async facade: fetch a transaction over JSON-RPC, decode it and summarize it."""

import asyncio
import logging
import re
from datetime import UTC, datetime

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError, field_serializer

from txsummary.chains import ChainConfig, explorer_url, get_chain
from txsummary.container import Container
from txsummary.decoder import NFTTransfer, RawTransaction, Receipt, Transfer, decode_tx
from txsummary.decoder.codec import parse_quantity
from txsummary.domain.enums import TxStatus
from txsummary.exceptions import InvalidTransactionHashError, TransactionNotFoundError, TxSummaryError
from txsummary.infra.rpc import EVMRPCClient
from txsummary.registry import ReferenceRegistry
from txsummary.summarizer import Summarizer, format_native

logger = logging.getLogger(__name__)

TX_HASH_PATTERN = re.compile(r"^0x[0-9a-fA-F]{64}$")

container = Container()


class SummaryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    hash: str
    chain: str
    summary: str
    from_address: str
    to_address: str | None = None
    status: TxStatus
    value: str  # formatted native amount
    block_number: int | None = None
    timestamp: datetime | None = None
    nonce: int | None = None
    gas_used: int | None = None
    gas_cost: str | None = None  # formatted native amount
    function_name: str | None = None
    function_signature: str | None = None
    contract_name: str | None = None
    transfers: tuple[Transfer, ...] = ()
    nft_transfers: tuple[NFTTransfer, ...] = ()
    explorer_url: str = ""

    @field_serializer("block_number", "nonce", "gas_used", when_used="json")
    def _int_as_str(self, v: int | None) -> str | None:
        return None if v is None else str(v)


def validate_tx_hash(tx_hash: str) -> str:
    if not TX_HASH_PATTERN.match(tx_hash):
        raise InvalidTransactionHashError(tx_hash)
    return tx_hash


async def summarize_tx(
    tx_hash: str,
    chain: str | None = None,
    rpc: str | None = None,
    *,
    client: EVMRPCClient | None = None,
    registry: ReferenceRegistry | None = None,
) -> SummaryResult:
    """Summarize one transaction.

    Raises InvalidTransactionHashError, UnknownChainError or TransactionNotFoundError;
    transport failures surface as ExternalServiceError.
    """
    settings = container.settings()
    validate_tx_hash(tx_hash)
    chain_name = (chain or settings.default_chain).lower()
    chain_config = get_chain(chain_name)

    if client is not None:
        return await _summarize(client, tx_hash, chain_name, chain_config, registry)

    rpc_url = rpc or settings.rpc_url or chain_config.default_rpc
    logger.debug("Using RPC %s for %s", rpc_url, chain_name)
    async with container.http_client() as http:
        return await _summarize(EVMRPCClient(rpc_url, http), tx_hash, chain_name, chain_config, registry)


async def _summarize(
    client: EVMRPCClient,
    tx_hash: str,
    chain_name: str,
    chain_config: ChainConfig,
    registry: ReferenceRegistry | None,
) -> SummaryResult:
    tx_data, receipt_data = await asyncio.gather(
        client.get_transaction(tx_hash),
        _fetch_receipt(client, tx_hash),
    )
    if not tx_data:
        raise TransactionNotFoundError(tx_hash)

    tx = RawTransaction.model_validate(tx_data)
    receipt = _parse_receipt(receipt_data, tx_hash)

    if registry is None:
        registry = container.registry()
        summarizer = container.summarizer()
    else:
        summarizer = Summarizer(registry=registry)

    decoded = decode_tx(tx, receipt, registry)
    symbol = chain_config.native_symbol
    summary = summarizer.summarize(decoded, native_symbol=symbol)

    timestamp = None
    if tx.block_number is not None:
        timestamp = await _fetch_timestamp(client, tx.block_number)

    gas_cost = decoded.gas_cost
    return SummaryResult(
        hash=tx.hash,
        chain=chain_name,
        summary=summary,
        from_address=tx.from_address,
        to_address=tx.to_address,
        status=decoded.status,
        value=format_native(tx.value, symbol),
        block_number=tx.block_number,
        timestamp=timestamp,
        nonce=tx.nonce,
        gas_used=decoded.gas_used,
        gas_cost=format_native(gas_cost, symbol) if gas_cost is not None else None,
        function_name=decoded.function_name,
        function_signature=decoded.function_signature,
        contract_name=decoded.contract_name,
        transfers=decoded.transfers,
        nft_transfers=decoded.nft_transfers,
        explorer_url=explorer_url(chain_name, tx.hash),
    )


async def _fetch_receipt(client: EVMRPCClient, tx_hash: str) -> dict | None:
    try:
        return await client.get_transaction_receipt(tx_hash)
    except (TxSummaryError, httpx.HTTPError) as e:
        logger.warning("Receipt fetch failed for %s, treating as pending: %s", tx_hash, e)
        return None


def _parse_receipt(data: dict | None, tx_hash: str) -> Receipt | None:
    if not data:
        return None
    try:
        return Receipt.model_validate(data)
    except ValidationError as e:
        logger.warning("Unreadable receipt for %s, treating as pending: %s", tx_hash, e)
        return None


async def _fetch_timestamp(client: EVMRPCClient, block_number: int) -> datetime | None:
    try:
        block = await client.get_block(block_number)
    except (TxSummaryError, httpx.HTTPError) as e:
        logger.warning("Block %d fetch failed: %s", block_number, e)
        return None
    if not block or block.get("timestamp") is None:
        return None
    try:
        return datetime.fromtimestamp(parse_quantity(block["timestamp"]), tz=UTC)
    except (ValueError, OverflowError) as e:
        logger.warning("Bad timestamp in block %d: %s", block_number, e)
        return None
