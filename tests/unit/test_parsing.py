"""Unit tests for console text parsing"""

from decimal import Decimal

import pytest

from finance_calculator.cli.parsing import MalformedInputError, parse_decimal, parse_int


@pytest.mark.parametrize(
    "text, expected",
    [
        ("100000", Decimal("100000")),
        (" 1500.50\n", Decimal("1500.50")),
        ("1500,50", Decimal("1500.50")),
        ("-5", Decimal("-5")),
    ],
)
def test_parse_decimal(text, expected):
    assert parse_decimal(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "12a", "NaN", "inf", "1.2.3"])
def test_parse_decimal_malformed(text):
    with pytest.raises(MalformedInputError):
        parse_decimal(text)


def test_parse_int():
    assert parse_int(" 12 ") == 12


@pytest.mark.parametrize("text", ["", "twelve", "1.5", "12,0"])
def test_parse_int_malformed(text):
    with pytest.raises(MalformedInputError):
        parse_int(text)
