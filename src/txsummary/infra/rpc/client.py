"""EVM JSON-RPC client — transaction, receipt and block lookups."""

import logging

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from txsummary.exceptions import ExternalServiceError, TxSummaryError
from txsummary.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 4


class EVMRPCClient:
    """Minimal Ethereum JSON-RPC 2.0 client.

    Transport failures, HTTP 429/5xx, non-JSON bodies and JSON-RPC error objects raise
    ExternalServiceError and are retried with exponential backoff.
    Results are returned as the node's raw JSON objects.
    """

    def __init__(self, rpc_url: str, http_client: RateLimitedClient) -> None:
        self._rpc_url = rpc_url
        self._http = http_client
        self._request_id = 0

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    @retry(
        retry=retry_if_exception_type(ExternalServiceError),
        stop=stop_after_attempt(MAX_ATTEMPTS),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _call(self, method: str, params: list) -> dict | list | str | None:
        """Execute a JSON-RPC call and return the result field."""
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }
        try:
            resp = await self._http.post(self._rpc_url, json=payload)
        except httpx.TransportError as e:
            logger.warning("RPC transport error (%s): %s", method, e)
            raise ExternalServiceError(f"RPC transport error ({method}): {e}") from e

        if resp.status_code == 429 or resp.status_code >= 500:
            logger.warning("RPC %s returned HTTP %d", method, resp.status_code)
            raise ExternalServiceError(f"RPC HTTP {resp.status_code} ({method})")
        if resp.status_code >= 400:
            raise TxSummaryError(f"RPC rejected request ({method}): HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("RPC %s returned a non-JSON body", method)
            raise ExternalServiceError(f"RPC returned non-JSON response ({method})") from e
        if not isinstance(data, dict):
            raise ExternalServiceError(f"RPC returned malformed response ({method})")
        if "error" in data:
            error = data["error"]
            msg = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            raise ExternalServiceError(f"RPC error ({method}): {msg}")

        return data.get("result")

    async def get_transaction(self, tx_hash: str) -> dict | None:
        """eth_getTransactionByHash. None when the node does not know the hash."""
        result = await self._call("eth_getTransactionByHash", [tx_hash])
        return result  # type: ignore[return-value]

    async def get_transaction_receipt(self, tx_hash: str) -> dict | None:
        """eth_getTransactionReceipt. None while pending."""
        result = await self._call("eth_getTransactionReceipt", [tx_hash])
        return result  # type: ignore[return-value]

    async def get_block(self, block_number: int) -> dict | None:
        """eth_getBlockByNumber without full transactions."""
        result = await self._call("eth_getBlockByNumber", [hex(block_number), False])
        return result  # type: ignore[return-value]
