"""Unit tests for money, number and date formatting"""

import pytest
from decimal import Decimal

from src.adapter.services.formatting import (
    SUPPORTED_CURRENCIES,
    format_currency,
    format_date,
    format_number,
)


class TestFormatCurrency:

    @pytest.mark.parametrize(
        "amount,currency,expected",
        [
            (Decimal("6510"), "USD", "$6,510.00"),
            (Decimal("1672.005"), "USD", "$1,672.01"),
            (Decimal("80"), "EUR", "€80.00"),
            (Decimal("1234.5"), "GBP", "£1,234.50"),
            (Decimal("1500.4"), "JPY", "¥1,500"),
            (Decimal("99.99"), "CHF", "CHF 99.99"),
            (Decimal("-7.2"), "USD", "-$7.20"),
            (0, "USD", "$0.00"),
        ],
    )
    def test_format(self, amount, currency, expected):
        assert format_currency(amount, currency) == expected

    def test_amount_beyond_default_precision(self):
        amount = Decimal("1E+20") * Decimal("1E+20")

        assert format_currency(amount, "USD") == f"${10 ** 40:,}.00"
        assert format_currency(-amount, "JPY") == f"-¥{10 ** 40:,}"

    def test_long_amount_keeps_every_digit(self):
        amount = Decimal("123456789012345678901234567890123.455")

        assert format_currency(amount, "EUR") == "€123,456,789,012,345,678,901,234,567,890,123.46"

    def test_tiny_negative_rounds_to_unsigned_zero(self):
        assert format_currency(Decimal("-0.001"), "USD") == "$0.00"

    def test_supported_currencies_include_defaults(self):
        assert "USD" in SUPPORTED_CURRENCIES
        assert "EUR" in SUPPORTED_CURRENCIES


class TestFormatNumber:

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Decimal("40"), "40"),
            (Decimal("2.50"), "2.5"),
            (Decimal("8.5"), "8.5"),
            (Decimal("1.100"), "1.1"),
            (Decimal("0"), "0"),
        ],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestFormatDate:

    def test_iso_date(self):
        assert format_date("2025-06-06") == "Jun 06, 2025"

    def test_non_iso_value_is_returned_unchanged(self):
        assert format_date("next week") == "next week"

    def test_empty(self):
        assert format_date("") == ""
