"""Input bounds shared by the calculation engines"""

from decimal import Decimal, InvalidOperation
from typing import Iterable, Union

from finance_calculator.domain.exceptions import ValidationError

Number = Union[Decimal, int, float, str]

MAX_AMOUNT = Decimal("10000000")
MAX_TERM_MONTHS = 360
MAX_RATE_PERCENT = Decimal("100")


def to_decimal(value: Number, field: str, label: str) -> Decimal:
    """
    Coerce a numeric input to Decimal.

    Floats are taken through their shortest repr, so 0.1 becomes Decimal("0.1").

    Raises:
        ValidationError: value is not a finite number
    """
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be a number", field=field)

    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, int):
            result = Decimal(value)
        elif isinstance(value, float):
            result = Decimal(repr(value))
        elif isinstance(value, str):
            result = Decimal(value.strip())
        else:
            raise ValidationError(f"{label} must be a number", field=field)
    except InvalidOperation as e:
        raise ValidationError(f"{label} must be a number", field=field) from e

    if not result.is_finite():
        raise ValidationError(f"{label} must be a finite number", field=field)
    return result


def validate_amount(amount: Number, subject: str) -> Decimal:
    """0 < amount <= 10,000,000"""
    label = f"{subject} amount"
    value = to_decimal(amount, "amount", label)
    if value <= 0 or value > MAX_AMOUNT:
        raise ValidationError(
            f"{label} must be greater than 0 and not exceed {MAX_AMOUNT:,}",
            field="amount",
        )
    return value


def validate_term(term_months: int, subject: str) -> int:
    """Whole months, 1 to 360"""
    label = f"{subject} term"
    if isinstance(term_months, bool) or not isinstance(term_months, int):
        raise ValidationError(f"{label} must be a whole number of months", field="term")
    if term_months <= 0 or term_months > MAX_TERM_MONTHS:
        raise ValidationError(
            f"{label} must be between 1 and {MAX_TERM_MONTHS} months",
            field="term",
        )
    return term_months


def validate_rate(annual_rate_percent: Number) -> Decimal:
    """0 < rate < 100"""
    value = to_decimal(annual_rate_percent, "rate", "Interest rate")
    if value <= 0 or value >= MAX_RATE_PERCENT:
        raise ValidationError(
            "Interest rate must be greater than 0% and less than 100%",
            field="rate",
        )
    return value


def validate_currency(code: str, allowed: Iterable[str]) -> str:
    """Normalize a currency code and check it against a closed set"""
    allowed = sorted(allowed)
    normalized = code.strip().upper() if isinstance(code, str) else ""
    if normalized not in allowed:
        raise ValidationError(
            f"Unknown currency code: {code!r}. Use one of {', '.join(allowed)}",
            field="currency",
        )
    return normalized
