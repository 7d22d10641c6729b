"""Types for flight offer searches."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from services.amadeus.prices import offer_currency, offer_total

if TYPE_CHECKING:
    from datetime import date
    from decimal import Decimal

    from services.flights.errors import DestinationFailure


class TravelClass(str, Enum):
    """Cabin classes accepted by the flight offers search."""

    ECONOMY = "ECONOMY"
    PREMIUM_ECONOMY = "PREMIUM_ECONOMY"
    BUSINESS = "BUSINESS"
    FIRST = "FIRST"


@dataclass(frozen=True, slots=True)
class Destination:
    """
    A candidate destination.

    Attributes:
        code: IATA location code (e.g. 'NRT').
        display_name: Human-readable label.
    """

    code: str
    display_name: str

    def as_payload(self) -> dict[str, str]:
        """Return the JSON representation attached to offers."""
        return {"code": self.code, "name": self.display_name}


@dataclass(frozen=True, slots=True)
class FlightOfferQuery:
    """
    Parameters of one flight offers search (one origin, one destination).

    Attributes:
        origin: Origin IATA code.
        destination: Destination IATA code.
        departure_date: Outbound date.
        return_date: Inbound date for round trips.
        adults: Number of adult travellers.
        children: Number of children.
        infants: Number of infants.
        travel_class: Cabin class.
        currency_code: ISO currency for prices.
        max_results: Maximum offers to return.
        non_stop: Only direct flights.
        max_price: Upstream price ceiling (whole currency units).
    """

    origin: str
    destination: str
    departure_date: date
    return_date: date | None = None
    adults: int = 1
    children: int | None = None
    infants: int | None = None
    travel_class: TravelClass | None = None
    currency_code: str | None = None
    max_results: int | None = None
    non_stop: bool | None = None
    max_price: int | None = None

    def to_params(self) -> dict[str, Any]:
        """Return Amadeus query parameters; unset values are omitted."""
        params: dict[str, Any] = {
            "originLocationCode": self.origin,
            "destinationLocationCode": self.destination,
            "departureDate": self.departure_date.isoformat(),
            "adults": self.adults,
        }
        optional: dict[str, Any] = {
            "returnDate": self.return_date.isoformat() if self.return_date else None,
            "children": self.children,
            "infants": self.infants,
            "travelClass": self.travel_class.value if self.travel_class else None,
            "currencyCode": self.currency_code,
            "max": self.max_results,
            "nonStop": self.non_stop,
            "maxPrice": self.max_price,
        }
        params.update({key: value for key, value in optional.items() if value is not None})
        return params


@dataclass(frozen=True, slots=True)
class FlightSearchRequest:
    """
    Request for a search across all candidate destinations.

    Attributes:
        origin: Origin IATA code (mandatory).
        departure_date: Outbound date (mandatory).
        return_date: Inbound date for round trips.
        adults: Adults per booking (defaults to 1 upstream).
        children: Children per booking.
        infants: Infants per booking.
        travel_class: Cabin class.
        currency_code: ISO currency for prices.
        max_results_per_destination: Offers requested per destination.
        non_stop: Only direct flights.
        max_price: Drop offers priced above this amount.
        overall_max: Cap on the merged result list.
    """

    origin: str | None
    departure_date: date | None
    return_date: date | None = None
    adults: int | None = None
    children: int | None = None
    infants: int | None = None
    travel_class: TravelClass | None = None
    currency_code: str | None = None
    max_results_per_destination: int | None = None
    non_stop: bool | None = None
    max_price: Decimal | None = None
    overall_max: int | None = None

    @property
    def missing_fields(self) -> tuple[str, ...]:
        """Names of mandatory fields that are not set."""
        missing = []
        if not self.origin or not self.origin.strip():
            missing.append("originLocationCode")
        if self.departure_date is None:
            missing.append("departureDate")
        return tuple(missing)

    def for_destination(
        self,
        destination: Destination,
        default_max_results: int,
    ) -> FlightOfferQuery:
        """
        Build the query sent for one candidate destination.

        Args:
            destination: The candidate destination.
            default_max_results: Offers requested when the request sets none.

        Returns:
            Query carrying every optional field of this request.
        """
        if self.origin is None or self.departure_date is None:
            msg = "origin and departure_date are required"
            raise ValueError(msg)

        return FlightOfferQuery(
            origin=self.origin.strip().upper(),
            destination=destination.code,
            departure_date=self.departure_date,
            return_date=self.return_date,
            adults=self.adults or 1,
            children=self.children,
            infants=self.infants,
            travel_class=self.travel_class,
            currency_code=self.currency_code.upper() if self.currency_code else None,
            max_results=self.max_results_per_destination or default_max_results,
            non_stop=self.non_stop,
            max_price=int(self.max_price) if self.max_price and self.max_price >= 1 else None,
        )


@dataclass(frozen=True, slots=True)
class ProviderResponse:
    """
    What the flight offers provider returned for one destination.

    Attributes:
        status: HTTP status of the upstream response.
        offers: Raw offer records.
        errors: Upstream ``errors`` field, kept opaque.
    """

    status: int
    offers: tuple[dict[str, Any], ...] = ()
    errors: Any = None

    @property
    def is_error(self) -> bool:
        """Check whether the provider reported a failure."""
        return self.status >= 400 or bool(self.errors)


@dataclass(frozen=True, slots=True)
class AnnotatedOffer:
    """
    A raw offer together with the destination it was found for.

    Attributes:
        offer: Upstream offer record, passed through untouched.
        destination: Candidate destination the offer belongs to.
    """

    offer: dict[str, Any]
    destination: Destination

    @property
    def price(self) -> Decimal | None:
        """Numeric ``price.total``, or None when missing or unparseable."""
        return offer_total(self.offer)

    @property
    def raw_price(self) -> Any:
        """``price.total`` exactly as the provider sent it."""
        price = self.offer.get("price")
        return price.get("total") if isinstance(price, dict) else None

    @property
    def currency(self) -> str | None:
        """``price.currency`` of the offer."""
        return offer_currency(self.offer)

    def as_payload(self) -> dict[str, Any]:
        """Return the offer fields plus ``destinationInfo``."""
        return {**self.offer, "destinationInfo": self.destination.as_payload()}


@dataclass(frozen=True, slots=True)
class DestinationOutcome:
    """
    Settled result of searching one destination.

    Attributes:
        destination: The candidate destination.
        succeeded: Whether usable offers were returned.
        offers: Offers in provider order (empty on failure).
        failure_reason: Why the search failed, if it did.
    """

    destination: Destination
    succeeded: bool
    offers: tuple[dict[str, Any], ...] = ()
    failure_reason: DestinationFailure | None = None

    @classmethod
    def ok(cls, destination: Destination, offers: tuple[dict[str, Any], ...]) -> DestinationOutcome:
        """Create a successful outcome."""
        return cls(destination=destination, succeeded=True, offers=offers)

    @classmethod
    def failed(cls, destination: Destination, reason: DestinationFailure) -> DestinationOutcome:
        """Create a failed outcome."""
        return cls(destination=destination, succeeded=False, failure_reason=reason)


@dataclass(frozen=True, slots=True)
class SearchSummary:
    """
    Counts and cheapest price of a multi-destination search.

    Attributes:
        total_destinations: Number of candidate destinations.
        succeeded_destinations: Destinations that returned offers.
        total_offers: Offers in the final list.
        cheapest_price: Price of the first offer in the final list.
        cheapest_currency: Currency of that offer.
    """

    total_destinations: int
    succeeded_destinations: int
    total_offers: int
    cheapest_price: Decimal | None = None
    cheapest_currency: str | None = None


@dataclass(slots=True)
class MultiDestinationResult:
    """
    Merged outcome of a multi-destination search.

    Attributes:
        offers: Final offers, cheapest first.
        summary: Counts and cheapest price.
        outcomes: One settled outcome per candidate destination.
    """

    offers: list[AnnotatedOffer] = field(default_factory=list)
    summary: SearchSummary = field(default_factory=lambda: SearchSummary(0, 0, 0))
    outcomes: list[DestinationOutcome] = field(default_factory=list)

    @property
    def failed_destinations(self) -> list[str]:
        """Codes of destinations that produced no usable offers."""
        return [o.destination.code for o in self.outcomes if not o.succeeded]
