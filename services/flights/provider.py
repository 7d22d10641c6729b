"""Flight offer providers used by the multi-destination search."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.result import Failure, success
from services.amadeus.client import FLIGHT_OFFERS_PATH
from services.flights.types import ProviderResponse

if TYPE_CHECKING:
    from core.result import Result
    from services.amadeus.client import AmadeusClient
    from services.amadeus.errors import AmadeusError
    from services.flights.types import FlightOfferQuery


@runtime_checkable
class FlightOfferProvider(Protocol):
    """Searches flight offers for a single origin/destination pair."""

    async def search(
        self,
        query: FlightOfferQuery,
        credential: str,
    ) -> Result[ProviderResponse, AmadeusError]:
        """
        Search offers for one destination.

        Args:
            query: Search parameters.
            credential: Bearer token for the upstream API.

        Returns:
            Result containing the ProviderResponse (which may itself report
            an upstream error) or AmadeusError for transport failures.
        """
        ...


class AmadeusFlightOfferProvider:
    """FlightOfferProvider backed by the Amadeus Flight Offers Search API."""

    def __init__(self, client: AmadeusClient) -> None:
        """
        Initialize the provider.

        Args:
            client: Amadeus client shared by all dispatches of a search.
        """
        self._client = client

    async def search(
        self,
        query: FlightOfferQuery,
        credential: str,
    ) -> Result[ProviderResponse, AmadeusError]:
        """Search offers for one destination via Amadeus."""
        result = await self._client.get(FLIGHT_OFFERS_PATH, query.to_params(), credential)
        if isinstance(result, Failure):
            return result

        response = result.value
        data = response.payload.get("data")
        offers = tuple(item for item in data if isinstance(item, dict)) if isinstance(data, list) else ()

        return success(
            ProviderResponse(
                status=response.status_code,
                offers=offers,
                errors=response.errors,
            )
        )
