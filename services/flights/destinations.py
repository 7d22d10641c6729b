"""Candidate destinations searched by the multi-destination flight search."""

from __future__ import annotations

from services.flights.types import Destination

# Popular destinations from Seoul, in display priority order
POPULAR_DESTINATIONS: tuple[Destination, ...] = (
    Destination("CJU", "Jeju"),
    Destination("NRT", "Tokyo (Narita)"),
    Destination("HND", "Tokyo (Haneda)"),
    Destination("KIX", "Osaka"),
    Destination("FUK", "Fukuoka"),
    Destination("NGO", "Nagoya"),
    Destination("BKK", "Bangkok"),
    Destination("SIN", "Singapore"),
    Destination("HKG", "Hong Kong"),
    Destination("TPE", "Taipei"),
    Destination("PEK", "Beijing"),
    Destination("PVG", "Shanghai"),
    Destination("DPS", "Bali"),
    Destination("MNL", "Manila"),
    Destination("GMP", "Gimpo"),  # domestic
)
