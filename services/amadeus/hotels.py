"""Hotel offer comparison built from Amadeus hotel-offers payloads."""

from __future__ import annotations

from typing import Any

from services.amadeus.prices import parse_price, price_sort_key


def build_hotel_comparison(payload: dict[str, Any]) -> list[dict[str, Any]]:
    """
    Summarize hotel offers for price comparison.

    Each hotel becomes one row with its offers' prices and the lowest
    total. Rows are ordered by lowest price; hotels without a usable
    price come last, keeping their upstream order.

    Args:
        payload: Body of a ``/v2/shopping/hotel-offers`` response.

    Returns:
        Comparison rows.
    """
    rows = [_comparison_row(hotel) for hotel in payload.get("data") or []]
    # a zero lowest price ranks with the unpriced hotels
    rows.sort(key=lambda row: price_sort_key(row["lowestPrice"] or None))
    return rows


def _comparison_row(hotel: dict[str, Any]) -> dict[str, Any]:
    info = hotel.get("hotel") or {}
    offers = hotel.get("offers") or []

    prices = []
    totals = []
    for offer in offers:
        price = offer.get("price") or {}
        room = offer.get("room") or {}
        prices.append(
            {
                "price": price.get("total", "N/A"),
                "currency": price.get("currency", "USD"),
                "roomType": room.get("type", "Standard"),
                "boardType": offer.get("boardType", "Room only"),
            }
        )
        total = parse_price(price.get("total"))
        if total is not None:
            totals.append(total)

    lowest = min(totals) if totals else None

    return {
        "hotelId": info.get("hotelId"),
        "hotelName": info.get("name"),
        "address": info.get("address"),
        "prices": prices,
        "lowestPrice": lowest,
    }
