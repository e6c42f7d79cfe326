"""Rate-limited async HTTP transport for JSON-RPC endpoints."""

import asyncio
import time

import httpx

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class RateLimitedClient:
    """Async httpx client with a token bucket in front of every POST.

    Up to ``burst`` requests go out back to back (a transaction and its receipt
    are fetched together); after that requests are released at ``rate_per_second``.
    """

    def __init__(self, rate_per_second: float = 5.0, timeout: float = 30.0, burst: int = 2) -> None:
        if rate_per_second <= 0:
            raise ValueError("rate_per_second must be positive")
        if burst < 1:
            raise ValueError("burst must be at least 1")
        self._rate = rate_per_second
        self._burst = burst
        self._tokens = float(burst)
        self._updated = time.monotonic()
        self._lock = asyncio.Lock()
        self._client = httpx.AsyncClient(timeout=timeout, headers=JSON_HEADERS)

    def _refill(self) -> None:
        now = time.monotonic()
        self._tokens = min(float(self._burst), self._tokens + (now - self._updated) * self._rate)
        self._updated = now

    async def _acquire(self) -> None:
        async with self._lock:
            self._refill()
            if self._tokens < 1:
                await asyncio.sleep((1 - self._tokens) / self._rate)
                self._refill()
            # may dip below zero when sleep returns early; the next caller waits it off
            self._tokens -= 1

    async def post(self, url: str, json: dict | list | None = None) -> httpx.Response:
        await self._acquire()
        return await self._client.post(url, json=json)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RateLimitedClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
