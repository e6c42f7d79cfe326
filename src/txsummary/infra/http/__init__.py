from txsummary.infra.http.rate_limited_client import RateLimitedClient

__all__ = ["RateLimitedClient"]
