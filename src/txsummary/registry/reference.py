"""ReferenceRegistry — read-only selector, contract and token lookups."""

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType

from txsummary.registry.types import SelectorInfo, TokenInfo

# Decimals assumed for tokens missing from the registry
DEFAULT_DECIMALS = 18


def placeholder_symbol(address: str) -> str:
    """Short label for a token without a registry entry, e.g. "0x1234…"."""
    return address[:6] + "…"


class ReferenceRegistry:
    """Immutable bundle of the three lookup tables.

    Keys are lowercase hex; lookups lowercase their argument so callers may pass
    checksummed addresses. A miss is never an error.
    """

    def __init__(
        self,
        selectors: Mapping[str, SelectorInfo],
        contracts: Mapping[str, str],
        tokens: Mapping[str, TokenInfo],
    ) -> None:
        self._selectors = MappingProxyType({k.lower(): v for k, v in selectors.items()})
        self._contracts = MappingProxyType({k.lower(): v for k, v in contracts.items()})
        self._tokens = MappingProxyType({k.lower(): v for k, v in tokens.items()})

    @property
    def selectors(self) -> Mapping[str, SelectorInfo]:
        return self._selectors

    @property
    def contracts(self) -> Mapping[str, str]:
        return self._contracts

    @property
    def tokens(self) -> Mapping[str, TokenInfo]:
        return self._tokens

    def lookup_selector(self, selector: str) -> SelectorInfo | None:
        return self._selectors.get(selector.lower())

    def contract_name(self, address: str) -> str | None:
        return self._contracts.get(address.lower())

    def token_info(self, address: str) -> TokenInfo:
        """Registry entry, or a placeholder symbol with 18 decimals for unknown tokens."""
        info = self._tokens.get(address.lower())
        if info is not None:
            return info
        return TokenInfo(placeholder_symbol(address), DEFAULT_DECIMALS, None)


@lru_cache(maxsize=1)
def build_default_registry() -> ReferenceRegistry:
    """Shared registry built from the bundled tables (constructed once per process)."""
    from txsummary.registry.contracts import KNOWN_CONTRACTS
    from txsummary.registry.selectors import KNOWN_SELECTORS
    from txsummary.registry.tokens import KNOWN_TOKENS

    return ReferenceRegistry(KNOWN_SELECTORS, KNOWN_CONTRACTS, KNOWN_TOKENS)
