"""Hex / ABI word helpers for log decoding. Raise ValueError on malformed input."""

from typing import Any

WORD_HEX = 64  # one 32-byte ABI word in hex digits
ADDRESS_HEX = 40


def strip_0x(value: str) -> str:
    return value[2:] if value[:2] in ("0x", "0X") else value


def is_empty_hex(value: str | None) -> bool:
    return not value or value in ("0x", "0X")


def hex_to_int(value: str) -> int:
    """Big-endian unsigned integer from a hex string ("0x" prefix optional)."""
    digits = strip_0x(value)
    if not digits:
        raise ValueError("empty hex value")
    return int(digits, 16)


def parse_quantity(value: Any) -> Any:
    """Coerce a JSON-RPC quantity ("0x1a", "26", 26) to int. None passes through."""
    if isinstance(value, str):
        if value[:2] in ("0x", "0X"):
            return int(value, 16) if len(value) > 2 else 0
        return int(value)
    return value


def topic_to_address(topic: str) -> str:
    """Last 20 bytes of a 32-byte topic word as a lowercase 0x address."""
    digits = strip_0x(topic)
    if len(digits) != WORD_HEX:
        raise ValueError(f"topic is not a 32-byte word: {topic!r}")
    int(digits, 16)  # validate
    return "0x" + digits[-ADDRESS_HEX:].lower()


def split_words(data: str) -> list[int]:
    """Split an ABI payload into 32-byte unsigned words."""
    digits = strip_0x(data)
    if len(digits) % WORD_HEX:
        digits = digits[: len(digits) - len(digits) % WORD_HEX]
    return [int(digits[i:i + WORD_HEX], 16) for i in range(0, len(digits), WORD_HEX)]


def decode_uint_array(words: list[int], offset: int) -> list[int]:
    """Decode a dynamic uint256[] whose head offset (in bytes) points into ``words``."""
    if offset % 32:
        raise ValueError(f"unaligned array offset: {offset}")
    start = offset // 32
    if start >= len(words):
        raise ValueError(f"array offset {offset} outside payload")
    length = words[start]
    end = start + 1 + length
    if end > len(words):
        raise ValueError(f"array of length {length} overruns payload")
    return words[start + 1:end]


def format_units(raw: int, decimals: int) -> str:
    """Exact decimal string for raw / 10**decimals, trailing zeros stripped ("1.5", "500")."""
    if decimals <= 0:
        return str(raw)
    whole, frac = divmod(raw, 10 ** decimals)
    frac_str = str(frac).rjust(decimals, "0").rstrip("0")
    return f"{whole}.{frac_str}" if frac_str else str(whole)
