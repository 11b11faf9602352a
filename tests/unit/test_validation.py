"""Unit tests for shared input validation"""

from decimal import Decimal

import pytest

from finance_calculator.domain.exceptions import DomainException, ValidationError
from finance_calculator.domain.validation import (
    to_decimal,
    validate_amount,
    validate_currency,
    validate_rate,
    validate_term,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (100, Decimal("100")),
        ("  250.50 ", Decimal("250.50")),
        (0.1, Decimal("0.1")),
        (Decimal("3.14"), Decimal("3.14")),
    ],
)
def test_to_decimal(value, expected):
    assert to_decimal(value, "amount", "Amount") == expected


@pytest.mark.parametrize("value", ["abc", "", None, True, [1], "NaN", "Infinity", float("inf")])
def test_to_decimal_rejects_non_numbers(value):
    with pytest.raises(ValidationError) as exc_info:
        to_decimal(value, "amount", "Amount")

    assert exc_info.value.field == "amount"


def test_validation_error_is_domain_and_value_error():
    error = ValidationError("bad", field="rate")

    assert isinstance(error, DomainException)
    assert isinstance(error, ValueError)
    assert str(error) == "bad"


def test_validate_amount_bounds():
    assert validate_amount(Decimal("0.01"), "Loan") == Decimal("0.01")
    assert validate_amount(10_000_000, "Loan") == Decimal("10000000")

    with pytest.raises(ValidationError, match="^Deposit amount"):
        validate_amount(0, "Deposit")
    with pytest.raises(ValidationError):
        validate_amount(Decimal("10000000.01"), "Loan")


@pytest.mark.parametrize("term", [True, 1.0, "12", Decimal("12")])
def test_validate_term_requires_int(term):
    with pytest.raises(ValidationError, match="whole number"):
        validate_term(term, "Loan")


def test_validate_term_bounds():
    assert validate_term(1, "Loan") == 1
    assert validate_term(360, "Loan") == 360

    with pytest.raises(ValidationError):
        validate_term(0, "Loan")
    with pytest.raises(ValidationError):
        validate_term(361, "Loan")


def test_validate_rate_bounds():
    assert validate_rate(Decimal("0.01")) == Decimal("0.01")
    assert validate_rate("99.9") == Decimal("99.9")

    for rate in (0, 100, Decimal("100.0"), -1):
        with pytest.raises(ValidationError) as exc_info:
            validate_rate(rate)
        assert exc_info.value.field == "rate"


def test_validate_currency_normalizes_code():
    assert validate_currency(" usd ", {"USD", "RUB", "EUR"}) == "USD"


def test_validate_currency_unknown_code():
    with pytest.raises(ValidationError) as exc_info:
        validate_currency("GBP", {"USD", "RUB", "EUR"})

    assert exc_info.value.field == "currency"
    assert "EUR, RUB, USD" in exc_info.value.message
