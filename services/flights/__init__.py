"""Flight search services package."""

from services.flights.errors import CredentialError, FlightSearchError, ValidationError
from services.flights.orchestrator import MultiDestinationSearchOrchestrator
from services.flights.types import (
    AnnotatedOffer,
    Destination,
    FlightSearchRequest,
    MultiDestinationResult,
    SearchSummary,
)

__all__ = [
    "AnnotatedOffer",
    "CredentialError",
    "Destination",
    "FlightSearchError",
    "FlightSearchRequest",
    "MultiDestinationResult",
    "MultiDestinationSearchOrchestrator",
    "SearchSummary",
    "ValidationError",
]
