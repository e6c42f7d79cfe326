from dependency_injector import containers, providers

from txsummary.config import Settings
from txsummary.infra.http.rate_limited_client import RateLimitedClient
from txsummary.registry import build_default_registry
from txsummary.summarizer import Summarizer


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    registry = providers.Singleton(build_default_registry)

    http_client = providers.Factory(
        RateLimitedClient,
        rate_per_second=settings.provided.rpc_rate_per_second,
        timeout=settings.provided.rpc_timeout,
        burst=settings.provided.rpc_burst,
    )

    summarizer = providers.Singleton(Summarizer, registry=registry)
