"""Summary of a single-route flight offers response."""

from __future__ import annotations

from typing import Any

from services.amadeus.prices import offer_total, price_sort_key


def summarize_offers(offers: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Summarize the offers of one flight offers search.

    Args:
        offers: The ``data`` list of a ``/v2/shopping/flight-offers`` response.

    Returns:
        ``totalResults``, the raw price and currency of the first cheapest
        offer, and the validating airline codes in order of appearance.
    """
    summary: dict[str, Any] = {
        "totalResults": len(offers),
        "cheapestPrice": None,
        "cheapestCurrency": None,
        "airlines": [],
    }
    if not offers:
        return summary

    cheapest = min(offers, key=lambda offer: price_sort_key(offer_total(offer)))
    price = cheapest.get("price") or {}
    summary["cheapestPrice"] = price.get("total")
    summary["cheapestCurrency"] = price.get("currency")

    airlines: list[str] = []
    for offer in offers:
        for code in offer.get("validatingAirlineCodes") or []:
            if code not in airlines:
                airlines.append(code)
    summary["airlines"] = airlines

    return summary
