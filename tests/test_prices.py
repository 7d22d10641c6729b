"""Tests for Amadeus price helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from services.amadeus.prices import offer_currency, offer_total, parse_price, price_sort_key


class TestParsePrice:
    """Tests for parse_price."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("123.45", Decimal("123.45")),
            (" 80 ", Decimal("80")),
            (99, Decimal("99")),
            ("0", Decimal("0")),
        ],
    )
    def test_parses_numbers(self, raw: object, expected: Decimal) -> None:
        """Numeric strings and numbers become Decimals."""
        assert parse_price(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "NaN", "Infinity", True, [], {}])
    def test_rejects_unusable_values(self, raw: object) -> None:
        """Anything not a finite number yields None."""
        assert parse_price(raw) is None


class TestOfferHelpers:
    """Tests for offer_total and offer_currency."""

    def test_reads_price_block(self) -> None:
        """Total and currency come from the price object."""
        offer = {"price": {"total": "10.50", "currency": "EUR"}}

        assert offer_total(offer) == Decimal("10.50")
        assert offer_currency(offer) == "EUR"

    def test_non_dict_price(self) -> None:
        """A malformed price block is treated as missing."""
        offer = {"price": "10.50"}

        assert offer_total(offer) is None
        assert offer_currency(offer) is None


class TestPriceSortKey:
    """Tests for price_sort_key."""

    def test_unknown_prices_sort_last(self) -> None:
        """None sorts after every known price, negative ones included."""
        prices = [None, Decimal("5"), Decimal("-1"), None, Decimal("2")]

        assert sorted(prices, key=price_sort_key) == [
            Decimal("-1"),
            Decimal("2"),
            Decimal("5"),
            None,
            None,
        ]
