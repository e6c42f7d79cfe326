"""Human-readable rendering of amounts and addresses."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from txsummary.decoder.codec import format_units
from txsummary.decoder.types import Transfer

NATIVE_DECIMALS = 18

# Enough digits for a uint256 amount with zero decimals
_PRECISION = 100

_THOUSAND = Decimal(1000)
_MILLION = Decimal(1_000_000)
_DUST = Decimal("0.0001")


def _fixed(value: Decimal, places: int) -> str:
    return str(value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def format_amount(amount: str | int | Decimal, symbol: str) -> str:
    """Compact amount: "0 X", "<0.0001 X", "0.5000 X", "12.34 X", "3.00K X", "1.50M X".

    Thresholds are checked on the unrounded value, so 999.995 renders as "1000.00 X".
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        num = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        if num == 0:
            return f"0 {symbol}"
        if num < _DUST:
            return f"<0.0001 {symbol}"
        if num < 1:
            return f"{_fixed(num, 4)} {symbol}"
        if num < _THOUSAND:
            return f"{_fixed(num, 2)} {symbol}"
        if num < _MILLION:
            return f"{_fixed(num / _THOUSAND, 2)}K {symbol}"
        return f"{_fixed(num / _MILLION, 2)}M {symbol}"


def format_native(wei: int, symbol: str = "ETH") -> str:
    return format_amount(format_units(wei, NATIVE_DECIMALS), symbol)


def format_transfer(transfer: Transfer) -> str:
    return format_amount(transfer.amount, transfer.symbol)


def format_address(address: str) -> str:
    """0x + first 6 hex digits + … + last 4, case preserved: "0xAbCd12…34ef"."""
    if len(address) <= 12:
        return address
    return f"{address[:8]}…{address[-4:]}"
