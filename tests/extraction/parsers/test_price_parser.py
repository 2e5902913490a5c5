"""Tests for product_fetcher/extraction/parsers/price_parser.py"""

from decimal import Decimal

import pytest

from product_fetcher.extraction.parsers.price_parser import parse_price, round_price


class TestParsePrice:
    @pytest.mark.parametrize("text, expected", [
        ("29.99", "29.99"),
        ("$29.99", "29.99"),
        ("US $1,299.99", "1299.99"),
        ("1.299,99 €", "1299.99"),
        ("12,50", "12.50"),
        ("1,299", "1299"),
        ("1.299", "1299"),
        ("1,299,000", "1299000"),
        ("0.500", "0.500"),
        ("1'299.00", "1299.00"),
        ("15", "15"),
        ("19.", "19"),
        ("7.5", "7.5"),
    ])
    def test_formats(self, text, expected):
        assert parse_price(text) == Decimal(expected)

    def test_first_number_wins(self):
        assert parse_price("Now 19.99 was 29.99") == Decimal("19.99")

    @pytest.mark.parametrize("text", ["", None, "free", "$"])
    def test_no_number(self, text):
        assert parse_price(text) is None


class TestRoundPrice:
    def test_rounds_half_up(self):
        assert round_price(Decimal("19.995")) == Decimal("20.00")
        assert round_price(Decimal("19.994")) == Decimal("19.99")

    def test_pads_to_cents(self):
        assert round_price(Decimal("15")) == Decimal("15.00")
        assert str(round_price(Decimal("15"))) == "15.00"
