from txsummary.registry.reference import (
    DEFAULT_DECIMALS,
    ReferenceRegistry,
    build_default_registry,
    placeholder_symbol,
)
from txsummary.registry.selectors import NATIVE_TRANSFER, NATIVE_TRANSFER_NAME
from txsummary.registry.types import SelectorInfo, TokenInfo

__all__ = [
    "DEFAULT_DECIMALS",
    "NATIVE_TRANSFER",
    "NATIVE_TRANSFER_NAME",
    "ReferenceRegistry",
    "SelectorInfo",
    "TokenInfo",
    "build_default_registry",
    "placeholder_symbol",
]
