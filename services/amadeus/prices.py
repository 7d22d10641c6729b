"""Price helpers for Amadeus offer payloads."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any


def parse_price(value: Any) -> Decimal | None:
    """
    Parse an Amadeus price amount.

    Amadeus sends amounts as numeric strings (``"123.45"``). Anything that
    is missing, non-numeric or not finite yields None.

    Args:
        value: Raw amount from the payload.

    Returns:
        The amount as a Decimal, or None if it cannot be used for comparison.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite():
        return None
    return amount


def offer_total(offer: dict[str, Any]) -> Decimal | None:
    """Return the parsed ``price.total`` of an offer."""
    price = offer.get("price")
    if not isinstance(price, dict):
        return None
    return parse_price(price.get("total"))


def offer_currency(offer: dict[str, Any]) -> str | None:
    """Return ``price.currency`` of an offer."""
    price = offer.get("price")
    if not isinstance(price, dict):
        return None
    return price.get("currency")


def price_sort_key(price: Decimal | None) -> tuple[bool, Decimal]:
    """Sort key placing known prices ascending and unknown prices last."""
    return (price is None, price if price is not None else Decimal(0))
