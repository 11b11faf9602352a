"""Conversion of binary floating point results into currency precision"""

from decimal import ROUND_HALF_EVEN, Decimal

# Decimal digits a double represents exactly (DBL_DIG)
FLOAT_SIGNIFICANT_DIGITS = 15

CENT = Decimal("0.01")


def from_float(value: float) -> Decimal:
    """Convert a binary float into a fixed-point Decimal, once and only here"""
    return Decimal(format(value, f".{FLOAT_SIGNIFICANT_DIGITS}g"))


def round_currency(value: Decimal) -> Decimal:
    """Quantize to cents with banker's rounding (round-half-to-even)"""
    return value.quantize(CENT, rounding=ROUND_HALF_EVEN)


def to_currency(value: float | Decimal) -> Decimal:
    """
    Round a raw computation result to currency precision.

    Floats go through from_float() first, so rounding always operates on a
    decimal representation.

    Example:
        to_currency(2.675)            -> Decimal("2.68")
        to_currency(Decimal("2.665")) -> Decimal("2.66")
    """
    if isinstance(value, float):
        value = from_float(value)
    return round_currency(value)
