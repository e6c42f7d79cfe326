"""Tests for summarize_tx — the async fetch + decode + summarize facade."""

from unittest.mock import AsyncMock

import httpx
import pytest
from tenacity import wait_none

from txsummary.api import SummaryResult, summarize_tx, validate_tx_hash
from txsummary.decoder.logs import TRANSFER_TOPIC
from txsummary.domain.enums import TxStatus
from txsummary.exceptions import (
    ExternalServiceError,
    InvalidTransactionHashError,
    TransactionNotFoundError,
    UnknownChainError,
)
from txsummary.infra.rpc import EVMRPCClient
from txsummary.registry import ReferenceRegistry, TokenInfo

WALLET = "0x1111111111111111111111111111111111111111"
RECIPIENT = "0x2222222222222222222222222222222222222222"
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
TX_HASH = "0x" + "ab" * 32


def _topic(address: str) -> str:
    return "0x" + "0" * 24 + address[2:]


def _tx_json(**overrides) -> dict:
    data = {
        "hash": TX_HASH,
        "from": WALLET,
        "to": RECIPIENT,
        "value": "0xde0b6b3a7640000",
        "input": "0x",
        "gasPrice": "0x3b9aca00",
        "nonce": "0x7",
        "blockNumber": "0x112a880",
    }
    data.update(overrides)
    return data


def _receipt_json(status: str = "0x1", logs: list | None = None) -> dict:
    return {"status": status, "gasUsed": "0x5208", "effectiveGasPrice": "0x3b9aca00", "logs": logs or []}


def _make_client(tx=None, receipt=None, block=None) -> AsyncMock:
    client = AsyncMock()
    client.get_transaction.return_value = tx
    client.get_transaction_receipt.return_value = receipt
    client.get_block.return_value = block
    return client


class TestValidation:
    def test_valid_hash(self):
        assert validate_tx_hash(TX_HASH) == TX_HASH

    @pytest.mark.parametrize("bad", ["0x1234", "ab" * 32, "0x" + "zz" * 32, "0x" + "ab" * 33])
    def test_invalid_hash(self, bad):
        with pytest.raises(InvalidTransactionHashError):
            validate_tx_hash(bad)

    async def test_invalid_hash_checked_before_fetch(self):
        client = _make_client()
        with pytest.raises(InvalidTransactionHashError):
            await summarize_tx("0xnope", client=client)
        client.get_transaction.assert_not_called()

    async def test_unknown_chain(self):
        client = _make_client()
        with pytest.raises(UnknownChainError):
            await summarize_tx(TX_HASH, chain="solana", client=client)
        client.get_transaction.assert_not_called()


class TestSummarizeTx:
    async def test_native_transfer(self):
        client = _make_client(
            tx=_tx_json(),
            receipt=_receipt_json(),
            block={"timestamp": "0x65a0b5c0"},
        )

        result = await summarize_tx(TX_HASH, chain="ethereum", client=client)

        assert isinstance(result, SummaryResult)
        assert result.summary == "Sent 1.00 ETH → 0x222222…2222"
        assert result.status == TxStatus.SUCCESS
        assert result.value == "1.00 ETH"
        assert result.block_number == 18000000
        assert result.nonce == 7
        assert result.gas_used == 21000
        assert result.gas_cost == "<0.0001 ETH"
        assert result.timestamp is not None
        assert result.timestamp.year == 2024
        assert result.explorer_url == f"https://etherscan.io/tx/{TX_HASH}"
        client.get_block.assert_awaited_once_with(18000000)

    async def test_not_found(self):
        client = _make_client(tx=None)
        with pytest.raises(TransactionNotFoundError):
            await summarize_tx(TX_HASH, client=client)

    async def test_receipt_failure_means_pending(self):
        client = _make_client(tx=_tx_json(blockNumber=None))
        client.get_transaction_receipt.side_effect = ExternalServiceError("down")

        result = await summarize_tx(TX_HASH, client=client)

        assert result.status == TxStatus.PENDING
        assert result.summary == "Sent 1.00 ETH → 0x222222…2222"
        assert result.timestamp is None
        client.get_block.assert_not_called()

    async def test_non_json_receipt_body_means_pending(self, monkeypatch):
        monkeypatch.setattr(EVMRPCClient._call.retry, "wait", wait_none())

        async def post(url, json):
            if json["method"] == "eth_getTransactionByHash":
                return httpx.Response(200, json={"jsonrpc": "2.0", "id": json["id"], "result": _tx_json(blockNumber=None)})
            return httpx.Response(200, text="<html>gateway</html>")

        http = AsyncMock()
        http.post.side_effect = post
        client = EVMRPCClient(rpc_url="https://eth.example", http_client=http)

        result = await summarize_tx(TX_HASH, client=client)

        assert result.status == TxStatus.PENDING
        assert result.summary == "Sent 1.00 ETH → 0x222222…2222"

    async def test_block_failure_leaves_timestamp_empty(self):
        client = _make_client(tx=_tx_json(), receipt=_receipt_json())
        client.get_block.side_effect = ExternalServiceError("down")

        result = await summarize_tx(TX_HASH, client=client)
        assert result.timestamp is None
        assert result.summary.startswith("Sent")

    async def test_failed_tx(self):
        client = _make_client(tx=_tx_json(), receipt=_receipt_json(status="0x0"))
        result = await summarize_tx(TX_HASH, client=client)
        assert result.status == TxStatus.FAILED
        assert result.summary.startswith("❌ FAILED: ")

    async def test_token_transfer_and_json(self):
        log = {
            "address": USDC,
            "topics": [TRANSFER_TOPIC, _topic(WALLET), _topic(RECIPIENT)],
            "data": "0x" + format(500 * 10**6, "064x"),
        }
        client = _make_client(
            tx=_tx_json(to=USDC, value="0x0", input="0xa9059cbb" + "00" * 64),
            receipt=_receipt_json(logs=[log]),
        )

        result = await summarize_tx(TX_HASH, client=client)

        assert result.summary == "Sent 500.00 USDC → 0x222222…2222"
        assert result.function_name == "transfer"
        assert result.transfers[0].raw_amount == 500_000_000
        dumped = result.model_dump(mode="json")
        assert dumped["transfers"][0]["raw_amount"] == "500000000"
        assert dumped["block_number"] == "18000000"

    async def test_custom_registry(self):
        token = "0x5555555555555555555555555555555555555555"
        log = {
            "address": token,
            "topics": [TRANSFER_TOPIC, _topic(WALLET), _topic(RECIPIENT)],
            "data": "0x" + format(250, "064x"),
        }
        client = _make_client(
            tx=_tx_json(to=token, value="0x0", input="0x"),
            receipt=_receipt_json(logs=[log]),
        )
        registry = ReferenceRegistry({}, {}, {token: TokenInfo("FOO", 2)})

        result = await summarize_tx(TX_HASH, client=client, registry=registry)
        assert result.summary == "Sent 2.50 FOO → 0x222222…2222"

    async def test_chain_native_symbol(self):
        client = _make_client(tx=_tx_json(blockNumber=None))
        result = await summarize_tx(TX_HASH, chain="polygon", client=client)
        assert result.summary == "Sent 1.00 MATIC → 0x222222…2222"
        assert result.chain == "polygon"
