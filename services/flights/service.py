"""Entry point wiring the multi-destination search to Amadeus."""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.config import get_settings
from services.amadeus.client import AmadeusClient
from services.flights.orchestrator import MultiDestinationSearchOrchestrator
from services.flights.provider import AmadeusFlightOfferProvider

if TYPE_CHECKING:
    from core.config import Settings
    from core.result import Result
    from services.flights.errors import FlightSearchError
    from services.flights.types import FlightSearchRequest, MultiDestinationResult


async def search_multiple_destinations(
    request: FlightSearchRequest,
    settings: Settings | None = None,
) -> Result[MultiDestinationResult, FlightSearchError]:
    """
    Run a multi-destination flight search against Amadeus.

    The HTTP client lives for the duration of this call only.

    Args:
        request: Search request from the API layer.
        settings: Application settings (defaults to ``get_settings()``).

    Returns:
        Result from MultiDestinationSearchOrchestrator.search.
    """
    settings = settings or get_settings()
    client = AmadeusClient.from_settings(settings.amadeus)
    search_settings = settings.flight_search

    orchestrator = MultiDestinationSearchOrchestrator(
        provider=AmadeusFlightOfferProvider(client),
        credential_provider=client.fetch_access_token,
        dispatch_timeout=search_settings.dispatch_timeout,
        max_concurrency=search_settings.max_concurrency,
        default_results_per_destination=search_settings.default_results_per_destination,
        default_overall_max=search_settings.default_overall_max,
    )

    try:
        return await orchestrator.search(request)
    finally:
        await client.close()
