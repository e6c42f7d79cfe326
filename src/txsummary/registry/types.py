"""Entry types for the reference tables."""

from typing import NamedTuple


class SelectorInfo(NamedTuple):
    name: str
    signature: str


class TokenInfo(NamedTuple):
    symbol: str
    decimals: int
    name: str | None = None
