"""Orchestrator for searching flight offers across many destinations."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from core.logging import get_logger
from core.result import Failure, Result, failure, success
from services.amadeus.prices import price_sort_key
from services.flights.destinations import POPULAR_DESTINATIONS
from services.flights.errors import (
    CredentialError,
    DestinationFailure,
    FlightSearchError,
    ValidationError,
)
from services.flights.types import (
    AnnotatedOffer,
    DestinationOutcome,
    MultiDestinationResult,
    SearchSummary,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence
    from decimal import Decimal

    from services.amadeus.errors import AmadeusError
    from services.flights.provider import FlightOfferProvider
    from services.flights.types import Destination, FlightOfferQuery, FlightSearchRequest

    type CredentialProvider = Callable[[], Awaitable[Result[str, AmadeusError]]]

logger = get_logger(__name__)

DEFAULT_DISPATCH_TIMEOUT = 10.0
DEFAULT_RESULTS_PER_DESTINATION = 5
DEFAULT_OVERALL_MAX = 50


class MultiDestinationSearchOrchestrator:
    """
    Searches one origin against every candidate destination in parallel.

    Each destination is searched independently; failures, error statuses,
    empty results and timeouts are recorded on that destination's outcome
    and never abort the other searches. Once every search has settled the
    offers are merged, ranked by price, filtered and capped.
    """

    def __init__(
        self,
        provider: FlightOfferProvider,
        credential_provider: CredentialProvider,
        destinations: Sequence[Destination] = POPULAR_DESTINATIONS,
        dispatch_timeout: float = DEFAULT_DISPATCH_TIMEOUT,
        max_concurrency: int | None = None,
        default_results_per_destination: int = DEFAULT_RESULTS_PER_DESTINATION,
        default_overall_max: int = DEFAULT_OVERALL_MAX,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            provider: Single-destination flight offers provider.
            credential_provider: Coroutine function returning a bearer token.
            destinations: Candidate destinations, in tie-break order.
            dispatch_timeout: Seconds allowed for each destination search.
            max_concurrency: Upper bound on simultaneous destination searches
                (defaults to all destinations at once).
            default_results_per_destination: Offers requested per destination
                when the request sets none.
            default_overall_max: Final result cap when the request sets none.
        """
        self._provider = provider
        self._credential_provider = credential_provider
        self._destinations = tuple(destinations)
        self._dispatch_timeout = dispatch_timeout
        self._max_concurrency = max_concurrency
        self._default_results_per_destination = default_results_per_destination
        self._default_overall_max = default_overall_max

    @property
    def destinations(self) -> tuple[Destination, ...]:
        """Return the candidate destinations."""
        return self._destinations

    async def search(
        self,
        request: FlightSearchRequest,
    ) -> Result[MultiDestinationResult, FlightSearchError]:
        """
        Search every candidate destination and merge the offers.

        Args:
            request: Origin, dates and optional filters.

        Returns:
            Result containing the merged offers and summary, or a
            ValidationError / CredentialError.
        """
        missing = request.missing_fields
        if missing:
            return failure(
                ValidationError(
                    "Missing required parameters.",
                    details=f"{' and '.join(missing)} {'is' if len(missing) == 1 else 'are'} required.",
                )
            )

        overall_max = request.overall_max or self._default_overall_max

        if not self._destinations:
            logger.info("No candidate destinations configured", origin=request.origin)
            return success(aggregate_outcomes([], total_destinations=0, overall_max=overall_max))

        token_result = await self._credential_provider()
        if isinstance(token_result, Failure):
            error = token_result.error
            logger.error(
                "Could not obtain access token for flight search",
                error=str(error),
            )
            return failure(
                CredentialError(
                    "Failed to obtain Amadeus access token",
                    details=error.details if error.details is not None else error.message,
                )
            )

        outcomes = await self._search_all(request, token_result.value)

        result = aggregate_outcomes(
            outcomes,
            total_destinations=len(self._destinations),
            max_price=request.max_price,
            overall_max=overall_max,
        )

        logger.info(
            "Multi-destination search completed",
            origin=request.origin,
            departure_date=str(request.departure_date),
            destinations=result.summary.total_destinations,
            successful=result.summary.succeeded_destinations,
            failed=result.failed_destinations,
            total_flights=result.summary.total_offers,
        )

        return success(result)

    async def _search_all(
        self,
        request: FlightSearchRequest,
        credential: str,
    ) -> list[DestinationOutcome]:
        """Search all destinations in parallel and wait for every one."""
        semaphore = asyncio.Semaphore(self._max_concurrency or len(self._destinations))
        tasks = [
            self._search_destination(
                destination,
                request.for_destination(destination, self._default_results_per_destination),
                credential,
                semaphore,
            )
            for destination in self._destinations
        ]

        # _search_destination never raises, so gather only returns outcomes
        results = await asyncio.gather(*tasks)
        return list(results)

    async def _search_destination(
        self,
        destination: Destination,
        query: FlightOfferQuery,
        credential: str,
        semaphore: asyncio.Semaphore,
    ) -> DestinationOutcome:
        """Search a single destination and settle it into an outcome."""
        try:
            async with semaphore:
                result = await asyncio.wait_for(
                    self._provider.search(query, credential),
                    timeout=self._dispatch_timeout,
                )
        except TimeoutError:
            logger.warning(
                "Destination search timed out",
                destination=destination.code,
                timeout=self._dispatch_timeout,
            )
            return DestinationOutcome.failed(
                destination, DestinationFailure("Search timed out")
            )
        except Exception as e:
            logger.error(
                "Destination search failed",
                destination=destination.code,
                error=str(e),
            )
            return DestinationOutcome.failed(
                destination, DestinationFailure("Search failed", details=str(e))
            )

        if isinstance(result, Failure):
            return DestinationOutcome.failed(
                destination,
                DestinationFailure(result.error.message, details=result.error.details),
            )

        response = result.value
        if response.is_error:
            logger.debug(
                "Destination search returned an error",
                destination=destination.code,
                status=response.status,
            )
            return DestinationOutcome.failed(
                destination,
                DestinationFailure(
                    f"Provider returned status {response.status}",
                    details=response.errors,
                ),
            )

        if not response.offers:
            return DestinationOutcome.failed(destination, DestinationFailure("No flights found"))

        return DestinationOutcome.ok(destination, response.offers)


def aggregate_outcomes(
    outcomes: Sequence[DestinationOutcome],
    total_destinations: int,
    max_price: Decimal | None = None,
    overall_max: int = DEFAULT_OVERALL_MAX,
) -> MultiDestinationResult:
    """
    Merge settled destination outcomes into the final ranked offer list.

    Offers keep the order of their destination in the candidate list and
    the provider's order within a destination; the price sort is stable,
    so equal prices keep that order. Offers without a usable price sort
    last and are dropped whenever ``max_price`` is set.

    Args:
        outcomes: One outcome per candidate destination, in candidate order.
        total_destinations: Size of the candidate list.
        max_price: Drop offers priced above this amount.
        overall_max: Maximum number of offers to keep.

    Returns:
        The merged result and its summary.
    """
    merged = [
        AnnotatedOffer(offer=offer, destination=outcome.destination)
        for outcome in outcomes
        if outcome.succeeded
        for offer in outcome.offers
    ]

    ranked = sorted(merged, key=lambda annotated: price_sort_key(annotated.price))

    if max_price is not None:
        ranked = [
            annotated
            for annotated in ranked
            if annotated.price is not None and annotated.price <= max_price
        ]

    final = ranked[:overall_max]
    cheapest = final[0] if final else None

    summary = SearchSummary(
        total_destinations=total_destinations,
        succeeded_destinations=sum(1 for outcome in outcomes if outcome.succeeded),
        total_offers=len(final),
        cheapest_price=cheapest.price if cheapest else None,
        cheapest_currency=cheapest.currency if cheapest else None,
    )

    return MultiDestinationResult(offers=final, summary=summary, outcomes=list(outcomes))
