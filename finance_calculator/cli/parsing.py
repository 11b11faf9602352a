"""Text input parsing for the console"""

from decimal import Decimal, InvalidOperation


class MalformedInputError(ValueError):
    """Raw text is not a number"""

    pass


def parse_decimal(text: str) -> Decimal:
    """Parse "1500", "1500.50" or "1500,50" into a finite Decimal"""
    try:
        value = Decimal(text.strip().replace(",", "."))
    except (InvalidOperation, AttributeError) as e:
        raise MalformedInputError(f"Not a number: {text!r}") from e
    if not value.is_finite():
        raise MalformedInputError(f"Not a number: {text!r}")
    return value


def parse_int(text: str) -> int:
    """Parse a whole number of months"""
    try:
        return int(text.strip())
    except (ValueError, AttributeError) as e:
        raise MalformedInputError(f"Not a whole number: {text!r}") from e
