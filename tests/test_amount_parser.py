"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from lifetrack.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$1,234.56", Decimal("1234.56")),
        ("₹1,200", Decimal("1200")),
        ("€ 9.99", Decimal("9.99")),
        ("-5", Decimal("-5")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "$"])
def test_parse_amount_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_amount(text)


@pytest.mark.parametrize("text", ["15 EUR", "usd 15", "Rs. 15", "15 INR"])
def test_parse_amount_strips_currency_codes(text):
    assert parse_amount(text) == Decimal("15")
