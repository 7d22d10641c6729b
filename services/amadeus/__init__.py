"""Amadeus API client package."""

from services.amadeus.client import (
    FLIGHT_DESTINATIONS_PATH,
    FLIGHT_OFFERS_PATH,
    HOTEL_OFFERS_BY_HOTEL_PATH,
    HOTEL_OFFERS_PATH,
    AmadeusClient,
    AmadeusResponse,
)
from services.amadeus.errors import AmadeusError, AmadeusErrorCode

__all__ = [
    "FLIGHT_DESTINATIONS_PATH",
    "FLIGHT_OFFERS_PATH",
    "HOTEL_OFFERS_BY_HOTEL_PATH",
    "HOTEL_OFFERS_PATH",
    "AmadeusClient",
    "AmadeusError",
    "AmadeusErrorCode",
    "AmadeusResponse",
]
