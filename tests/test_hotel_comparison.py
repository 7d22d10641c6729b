"""Tests for hotel price comparison."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from services.amadeus.hotels import build_hotel_comparison


def _hotel(hotel_id: str, *totals: Any) -> dict[str, Any]:
    return {
        "hotel": {"hotelId": hotel_id, "name": f"Hotel {hotel_id}", "address": {"cityName": "OSAKA"}},
        "offers": [{"price": {"total": total, "currency": "JPY"}} for total in totals],
    }


class TestBuildHotelComparison:
    """Tests for build_hotel_comparison."""

    def test_empty_payload(self) -> None:
        """Missing data gives no rows."""
        assert build_hotel_comparison({}) == []

    def test_row_shape_and_defaults(self) -> None:
        """Offer fields fall back to display defaults."""
        payload = {"data": [{"hotel": {"hotelId": "H1", "name": "One"}, "offers": [{}]}]}

        row = build_hotel_comparison(payload)[0]

        assert row == {
            "hotelId": "H1",
            "hotelName": "One",
            "address": None,
            "prices": [
                {
                    "price": "N/A",
                    "currency": "USD",
                    "roomType": "Standard",
                    "boardType": "Room only",
                }
            ],
            "lowestPrice": None,
        }

    def test_room_and_board_types(self) -> None:
        """Room type and board type come from the offer."""
        payload = {
            "data": [
                {
                    "hotel": {"hotelId": "H1"},
                    "offers": [
                        {
                            "price": {"total": "100", "currency": "EUR"},
                            "room": {"type": "DBL"},
                            "boardType": "BREAKFAST",
                        }
                    ],
                }
            ]
        }

        price = build_hotel_comparison(payload)[0]["prices"][0]

        assert price == {
            "price": "100",
            "currency": "EUR",
            "roomType": "DBL",
            "boardType": "BREAKFAST",
        }

    def test_sorted_by_lowest_price(self) -> None:
        """Hotels rank by their cheapest offer; unpriced ones go last."""
        payload = {
            "data": [
                _hotel("A", "300", "250"),
                _hotel("B"),
                _hotel("C", "180", "400"),
                _hotel("D", "bad"),
            ]
        }

        rows = build_hotel_comparison(payload)

        assert [row["hotelId"] for row in rows] == ["C", "A", "B", "D"]
        assert rows[0]["lowestPrice"] == Decimal("180")
        assert rows[1]["lowestPrice"] == Decimal("250")
