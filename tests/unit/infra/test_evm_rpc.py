"""Tests for EVMRPCClient — JSON-RPC communication."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from tenacity import wait_none

from txsummary.exceptions import ExternalServiceError, TxSummaryError
from txsummary.infra.rpc import EVMRPCClient
from txsummary.infra.rpc.client import MAX_ATTEMPTS

TX_HASH = "0x" + "ab" * 32


@pytest.fixture(autouse=True)
def no_backoff(monkeypatch):
    monkeypatch.setattr(EVMRPCClient._call.retry, "wait", wait_none())


@pytest.fixture()
def mock_http():
    return AsyncMock()


@pytest.fixture()
def rpc(mock_http):
    return EVMRPCClient(rpc_url="https://eth.example", http_client=mock_http)


def _mock_response(data: dict, status_code: int = 200):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = data
    return resp


def _payload(mock_http) -> dict:
    call_args = mock_http.post.call_args
    return call_args[1]["json"] if "json" in call_args[1] else call_args[0][1]


class TestGetTransaction:
    async def test_returns_result(self, rpc, mock_http):
        tx = {"hash": TX_HASH, "from": "0x1", "to": "0x2", "value": "0x0", "input": "0x"}
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": tx})

        result = await rpc.get_transaction(TX_HASH)
        assert result["hash"] == TX_HASH
        payload = _payload(mock_http)
        assert payload["method"] == "eth_getTransactionByHash"
        assert payload["params"] == [TX_HASH]
        assert payload["jsonrpc"] == "2.0"

    async def test_not_found_returns_none(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": None})
        assert await rpc.get_transaction(TX_HASH) is None


class TestGetReceiptAndBlock:
    async def test_receipt(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": {"status": "0x1"}})

        result = await rpc.get_transaction_receipt(TX_HASH)
        assert result == {"status": "0x1"}
        assert _payload(mock_http)["method"] == "eth_getTransactionReceipt"

    async def test_block_number_hex_encoded(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({"jsonrpc": "2.0", "id": 1, "result": {"timestamp": "0x10"}})

        await rpc.get_block(255)
        payload = _payload(mock_http)
        assert payload["method"] == "eth_getBlockByNumber"
        assert payload["params"] == ["0xff", False]


class TestRPCErrors:
    async def test_rpc_error_retried_then_raised(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({
            "jsonrpc": "2.0", "id": 1,
            "error": {"code": -32000, "message": "header not found"},
        })

        with pytest.raises(ExternalServiceError, match="header not found"):
            await rpc.get_transaction(TX_HASH)
        assert mock_http.post.call_count == MAX_ATTEMPTS

    async def test_rate_limited_then_recovers(self, rpc, mock_http):
        mock_http.post.side_effect = [
            _mock_response({}, status_code=429),
            _mock_response({"jsonrpc": "2.0", "id": 2, "result": {"hash": TX_HASH}}),
        ]

        result = await rpc.get_transaction(TX_HASH)
        assert result == {"hash": TX_HASH}
        assert mock_http.post.call_count == 2

    async def test_transport_error_wrapped(self, rpc, mock_http):
        mock_http.post.side_effect = httpx.ConnectError("refused")

        with pytest.raises(ExternalServiceError):
            await rpc.get_transaction(TX_HASH)
        assert mock_http.post.call_count == MAX_ATTEMPTS

    async def test_client_error_not_retried(self, rpc, mock_http):
        mock_http.post.return_value = _mock_response({}, status_code=403)

        with pytest.raises(TxSummaryError) as exc:
            await rpc.get_transaction(TX_HASH)
        assert not isinstance(exc.value, ExternalServiceError)
        assert mock_http.post.call_count == 1

    async def test_non_json_body_retried_then_raised(self, rpc, mock_http):
        mock_http.post.return_value = httpx.Response(200, text="<html>gateway</html>")

        with pytest.raises(ExternalServiceError, match="non-JSON"):
            await rpc.get_transaction_receipt(TX_HASH)
        assert mock_http.post.call_count == MAX_ATTEMPTS

    async def test_non_object_body_rejected(self, rpc, mock_http):
        mock_http.post.return_value = httpx.Response(200, json=["not", "an", "object"])

        with pytest.raises(ExternalServiceError, match="malformed"):
            await rpc.get_transaction(TX_HASH)
