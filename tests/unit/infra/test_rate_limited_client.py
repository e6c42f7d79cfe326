import httpx
import pytest

from txsummary.infra.http import RateLimitedClient


@pytest.fixture()
def slept(monkeypatch):
    calls: list[float] = []

    async def fake_sleep(seconds):
        calls.append(seconds)

    monkeypatch.setattr("txsummary.infra.http.rate_limited_client.asyncio.sleep", fake_sleep)
    return calls


class TestRateLimitedClient:
    def test_rate_must_be_positive(self):
        with pytest.raises(ValueError):
            RateLimitedClient(rate_per_second=0)

    def test_burst_must_be_positive(self):
        with pytest.raises(ValueError):
            RateLimitedClient(burst=0)

    async def test_burst_goes_out_without_waiting(self, slept):
        async with RateLimitedClient(rate_per_second=2.0, burst=2) as client:
            await client._acquire()
            await client._acquire()

        assert slept == []

    async def test_waits_once_bucket_is_empty(self, slept):
        async with RateLimitedClient(rate_per_second=2.0, burst=2) as client:
            for _ in range(3):
                await client._acquire()

        assert len(slept) == 1
        assert 0 < slept[0] <= 0.5

    async def test_single_token_bucket_spaces_every_request(self, slept):
        async with RateLimitedClient(rate_per_second=4.0, burst=1) as client:
            for _ in range(3):
                await client._acquire()

        assert len(slept) == 2

    async def test_post_sends_json(self, slept):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": "0x1"})

        client = RateLimitedClient()
        await client.close()
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with client:
            resp = await client.post("https://rpc.example", json={"method": "eth_chainId"})

        assert resp.json()["result"] == "0x1"
        assert seen[0].method == "POST"
        assert b"eth_chainId" in seen[0].content

    async def test_json_headers(self):
        async with RateLimitedClient() as client:
            assert client._client.headers["content-type"] == "application/json"
