"""API serializers for query parameters and request bodies."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from rest_framework import serializers

from services.flights.types import FlightOfferQuery, FlightSearchRequest, TravelClass


def _upper_or_none(value: str | None) -> str | None:
    return value.strip().upper() if value else None


class FlightFiltersSerializer(serializers.Serializer):
    """Optional flight search filters shared by the flight endpoints.

    Field names match the query parameters of the public API.
    """

    originLocationCode = serializers.CharField(required=False, max_length=8)
    departureDate = serializers.DateField(required=False)
    returnDate = serializers.DateField(required=False)
    adults = serializers.IntegerField(required=False, min_value=0)
    children = serializers.IntegerField(required=False, min_value=0)
    infants = serializers.IntegerField(required=False, min_value=0)
    travelClass = serializers.CharField(required=False)
    currencyCode = serializers.CharField(required=False, min_length=3, max_length=3)
    max = serializers.IntegerField(required=False, min_value=1)
    nonStop = serializers.CharField(required=False)
    maxPrice = serializers.DecimalField(required=False, max_digits=None, decimal_places=None)

    def validate_maxPrice(self, value: Decimal) -> Decimal:
        """Any positive amount is a valid price ceiling."""
        if value <= 0:
            msg = "Ensure this value is greater than 0."
            raise serializers.ValidationError(msg)
        return value

    def validate_travelClass(self, value: str) -> TravelClass:
        """Accept cabin classes in any letter case."""
        try:
            return TravelClass(value.strip().upper())
        except ValueError as e:
            choices = ", ".join(c.value for c in TravelClass)
            msg = f"Must be one of {choices}."
            raise serializers.ValidationError(msg) from e

    def validate_nonStop(self, value: str) -> bool:
        """Only the literal string 'true' enables non-stop search."""
        return value == "true"


class MultiDestinationQuerySerializer(FlightFiltersSerializer):
    """Query parameters of ``GET /api/flights/offers/multiple``.

    Mandatory fields are checked by the orchestrator, not here, so a
    missing origin or date yields the orchestrator's validation error.
    """

    def to_search_request(self) -> FlightSearchRequest:
        """Build the orchestrator request from validated data."""
        data: dict[str, Any] = self.validated_data
        max_results = data.get("max")
        return FlightSearchRequest(
            origin=_upper_or_none(data.get("originLocationCode")),
            departure_date=data.get("departureDate"),
            return_date=data.get("returnDate"),
            adults=data.get("adults"),
            children=data.get("children"),
            infants=data.get("infants"),
            travel_class=data.get("travelClass"),
            currency_code=_upper_or_none(data.get("currencyCode")),
            max_results_per_destination=max_results,
            non_stop=data.get("nonStop"),
            max_price=data.get("maxPrice"),
            overall_max=max_results,
        )


class FlightOffersQuerySerializer(FlightFiltersSerializer):
    """Query parameters of ``GET /api/flights/offers``."""

    destinationLocationCode = serializers.CharField(required=False, max_length=8)

    REQUIRED = ("originLocationCode", "destinationLocationCode", "departureDate")

    @property
    def missing_fields(self) -> list[str]:
        """Mandatory parameters absent from the validated data."""
        return [name for name in self.REQUIRED if not self.validated_data.get(name)]

    def to_query(self) -> FlightOfferQuery:
        """Build the single-route query from validated data."""
        data: dict[str, Any] = self.validated_data
        departure: date = data["departureDate"]
        max_price = data.get("maxPrice")
        return FlightOfferQuery(
            origin=data["originLocationCode"].strip().upper(),
            destination=data["destinationLocationCode"].strip().upper(),
            departure_date=departure,
            return_date=data.get("returnDate"),
            adults=data.get("adults") or 1,
            children=data.get("children"),
            infants=data.get("infants"),
            travel_class=data.get("travelClass"),
            currency_code=_upper_or_none(data.get("currencyCode")),
            max_results=data.get("max"),
            non_stop=data.get("nonStop"),
            max_price=int(max_price) if max_price is not None and max_price >= 1 else None,
        )


class FlightDestinationsQuerySerializer(serializers.Serializer):
    """Query parameters of ``GET /api/flights/destinations``."""

    origin = serializers.CharField(required=False, max_length=8)
    maxPrice = serializers.IntegerField(required=False, min_value=1)


class HotelOffersQuerySerializer(serializers.Serializer):
    """Query parameters of the hotel endpoints."""

    cityCode = serializers.CharField(required=False, max_length=8)
    hotelIds = serializers.CharField(required=False)
    checkInDate = serializers.DateField(required=False)
    checkOutDate = serializers.DateField(required=False)
    adults = serializers.IntegerField(required=False, min_value=1)

    def to_params(self) -> dict[str, Any]:
        """Return Amadeus query parameters for the provided fields."""
        data: dict[str, Any] = self.validated_data
        params: dict[str, Any] = {}
        if data.get("cityCode"):
            params["cityCode"] = data["cityCode"].strip().upper()
        if data.get("hotelIds"):
            params["hotelIds"] = data["hotelIds"]
        for name in ("checkInDate", "checkOutDate"):
            if data.get(name):
                params[name] = data[name].isoformat()
        if data.get("adults"):
            params["adults"] = data["adults"]
        return params


class UserInputSerializer(serializers.Serializer):
    """Body of user create and update requests."""

    name = serializers.CharField(required=False, allow_blank=True, max_length=200)
    email = serializers.CharField(required=False, allow_blank=True, max_length=254)


class TripInputSerializer(serializers.Serializer):
    """Body of trip create requests."""

    destination = serializers.CharField(required=False, allow_blank=True, max_length=200)
    budget = serializers.IntegerField(required=False, min_value=0)
    peopleCount = serializers.IntegerField(required=False, min_value=0)


class RecommendationQuerySerializer(serializers.Serializer):
    """Query parameters of ``GET /api/recommendations``."""

    budget = serializers.IntegerField(required=False, min_value=0)
    peopleCount = serializers.IntegerField(required=False, min_value=0)
    region = serializers.CharField(required=False)
