"""API views for flight and hotel search and the demo store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from asgiref.sync import async_to_sync
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.serializers import (
    FlightDestinationsQuerySerializer,
    FlightOffersQuerySerializer,
    HotelOffersQuerySerializer,
    MultiDestinationQuerySerializer,
    RecommendationQuerySerializer,
    TripInputSerializer,
    UserInputSerializer,
)
from core.logging import get_logger
from core.result import Failure, failure, success
from services.amadeus.client import (
    FLIGHT_DESTINATIONS_PATH,
    FLIGHT_OFFERS_PATH,
    HOTEL_OFFERS_BY_HOTEL_PATH,
    HOTEL_OFFERS_PATH,
)
from services.amadeus.hotels import build_hotel_comparison
from services.amadeus.service import amadeus_request
from services.flights.errors import ValidationError
from services.flights.service import search_multiple_destinations
from services.flights.summary import summarize_offers
from services.flights.validation import validate_travel_dates
from services.store import get_store

if TYPE_CHECKING:
    from rest_framework.request import Request
    from rest_framework.serializers import Serializer

    from core.result import Result
    from services.amadeus.client import AmadeusResponse
    from services.amadeus.errors import AmadeusError
    from services.flights.types import MultiDestinationResult

logger = get_logger(__name__)

# Amadeus "INVALID DATA RECEIVED"; usually a date or currency the test API rejects
INVALID_DATA_ERROR_CODE = 141

FLIGHT_OFFER_SUGGESTIONS = [
    "The date may be too far in the future (usually only one year ahead is supported).",
    "The test environment may only support certain date ranges.",
    "Try a departure date one to six months from today.",
    "Make sure returnDate is at least one day after departureDate.",
    "Remove currencyCode or try another currency (USD, EUR).",
    "Consider switching to the production environment.",
]

FLIGHT_DESTINATION_SUGGESTIONS = [
    "Flight Inspiration Search only supports a limited set of origin/destination pairs.",
    "Try another origin code (e.g. NRT, ICN, JFK).",
    "Try again without the maxPrice parameter.",
    "Data in the test environment may be limited.",
    "Consider switching to the production environment.",
]

CREDENTIAL_SUGGESTION = (
    "Check that AMADEUS_API_KEY and AMADEUS_API_SECRET are set correctly in the .env file."
)


def _present_params(request: Request) -> dict[str, str]:
    """Return query parameters, treating empty values as absent."""
    return {key: value for key, value in request.query_params.items() if value != ""}


def _error(
    error: Any,
    message: Any,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    **extra: Any,
) -> Response:
    return Response(
        {"success": False, "error": error, "message": message, **extra},
        status=status_code,
    )


def _invalid_params(serializer: Serializer) -> Response:
    return _error("Invalid parameters.", serializer.errors)


def _amadeus_failure(error: AmadeusError) -> Response:
    """Render a transport, parse or credential failure."""
    if error.is_credential_error:
        body: dict[str, Any] = {
            "message": "Failed to obtain Amadeus API token",
            "detail": error.details if error.details is not None else error.message,
            "suggestion": CREDENTIAL_SUGGESTION,
        }
    else:
        body = {
            "message": error.message,
            "detail": error.details if error.details is not None else "Unknown error.",
            "type": error.code.value,
        }
    return Response(
        {"success": False, "error": body},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _upstream_error(
    response: AmadeusResponse,
    params: dict[str, Any],
    suggestions: list[str] | None = None,
) -> Response:
    """Forward an error reported by Amadeus with its status."""
    body: dict[str, Any] = {
        "success": False,
        "error": response.payload,
        "debug": {
            "requestParams": params,
            "responseStatus": response.status_code,
        },
    }
    if suggestions and response.first_error_code == INVALID_DATA_ERROR_CODE:
        body["suggestions"] = suggestions
    upstream_status = response.status_code if response.status_code >= 400 else 500
    return Response(body, status=upstream_status)


def _proxy(
    path: str,
    params: dict[str, Any],
    suggestions: list[str] | None = None,
) -> Result[AmadeusResponse, Response]:
    """Call Amadeus and turn every failure into a ready error response."""
    result = async_to_sync(amadeus_request)(path, params)
    if isinstance(result, Failure):
        return failure(_amadeus_failure(result.error))

    response = result.value
    logger.info("Amadeus responded", path=path, status_code=response.status_code)
    if response.is_error:
        return failure(_upstream_error(response, params, suggestions))
    return success(response)


class MultiDestinationFlightOffersView(APIView):
    """
    Search flight offers from one origin to every popular destination.

    Destinations that fail are left out of the results; inspect
    ``summary.successfulDestinations`` to tell "nothing found" apart from
    "nothing answered".
    """

    def get(self, request: Request) -> Response:
        """Return merged offers, cheapest first, with a summary."""
        serializer = MultiDestinationQuerySerializer(data=_present_params(request))
        if not serializer.is_valid():
            return _invalid_params(serializer)

        search_request = serializer.to_search_request()
        logger.info(
            "Multi-destination flight search requested",
            origin=search_request.origin,
            departure_date=str(search_request.departure_date),
            max_price=str(search_request.max_price) if search_request.max_price else None,
        )

        result = async_to_sync(search_multiple_destinations)(search_request)

        if isinstance(result, Failure):
            error = result.error
            if isinstance(error, ValidationError):
                return _error(error.message, error.details)
            return Response(
                {
                    "success": False,
                    "error": {"message": error.message, "detail": error.details},
                },
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(self._build_payload(result.value))

    def _build_payload(self, result: MultiDestinationResult) -> dict[str, Any]:
        summary = result.summary
        cheapest = result.offers[0] if result.offers else None
        return {
            "success": True,
            "data": {"data": [offer.as_payload() for offer in result.offers]},
            "summary": {
                "totalDestinations": summary.total_destinations,
                "successfulDestinations": summary.succeeded_destinations,
                "totalFlights": summary.total_offers,
                "cheapestPrice": cheapest.raw_price if cheapest else None,
                "cheapestCurrency": summary.cheapest_currency,
            },
        }


class FlightOffersView(APIView):
    """Search flight offers for a single route."""

    def get(self, request: Request) -> Response:
        """Return Amadeus flight offers with a price summary."""
        serializer = FlightOffersQuerySerializer(data=_present_params(request))
        if not serializer.is_valid():
            return _invalid_params(serializer)

        if serializer.missing_fields:
            return _error(
                "Missing required parameters.",
                "originLocationCode, destinationLocationCode and departureDate are required.",
                example={
                    "originLocationCode": "ICN",
                    "destinationLocationCode": "NRT",
                    "departureDate": "2025-03-15",
                    "adults": 1,
                    "max": 10,
                },
            )

        query = serializer.to_query()
        dates = validate_travel_dates(query.departure_date, query.return_date)
        if isinstance(dates, Failure):
            return _error(dates.error.message, dates.error.details)

        params = query.to_params()
        logger.info("Flight offers search requested", params=params)

        result = _proxy(FLIGHT_OFFERS_PATH, params, FLIGHT_OFFER_SUGGESTIONS)
        if isinstance(result, Failure):
            return result.error

        payload = result.value.payload
        return Response(
            {
                "success": True,
                "data": payload,
                "summary": summarize_offers(payload.get("data") or []),
            }
        )


class FlightDestinationsView(APIView):
    """Flight Inspiration Search: where can I fly from an origin."""

    def get(self, request: Request) -> Response:
        """Return destinations reachable from the origin."""
        serializer = FlightDestinationsQuerySerializer(data=_present_params(request))
        if not serializer.is_valid():
            return _invalid_params(serializer)

        origin = serializer.validated_data.get("origin")
        if not origin:
            return _error(
                "The origin parameter is required (e.g. PAR, NRT, ICN).",
                "origin is required.",
            )

        params: dict[str, Any] = {"origin": origin.strip().upper()}
        if serializer.validated_data.get("maxPrice"):
            params["maxPrice"] = serializer.validated_data["maxPrice"]

        result = _proxy(FLIGHT_DESTINATIONS_PATH, params, FLIGHT_DESTINATION_SUGGESTIONS)
        if isinstance(result, Failure):
            return result.error

        return Response({"success": True, "data": result.value.payload})


class HotelOffersView(APIView):
    """Search hotel offers in a city."""

    def get(self, request: Request) -> Response:
        """Return Amadeus hotel offers."""
        serializer = HotelOffersQuerySerializer(data=_present_params(request))
        if not serializer.is_valid():
            return _invalid_params(serializer)

        params = serializer.to_params()
        if "cityCode" not in params:
            return _error(
                "The cityCode parameter is required (e.g. OSA, NRT, ICN).",
                "cityCode is required.",
            )
        params.pop("hotelIds", None)

        result = _proxy(HOTEL_OFFERS_PATH, params)
        if isinstance(result, Failure):
            return result.error

        return Response({"success": True, "data": result.value.payload})


class HotelCompareView(APIView):
    """Compare hotel prices in a city or across given hotels."""

    def get(self, request: Request) -> Response:
        """Return hotels ordered by their lowest offer price."""
        serializer = HotelOffersQuerySerializer(data=_present_params(request))
        if not serializer.is_valid():
            return _invalid_params(serializer)

        params = serializer.to_params()
        if "cityCode" not in params and "hotelIds" not in params:
            return _error(
                "The cityCode or hotelIds parameter is required.",
                "cityCode or hotelIds is required.",
            )

        result = _proxy(HOTEL_OFFERS_PATH, params)
        if isinstance(result, Failure):
            return result.error

        payload = result.value.payload
        return Response(
            {
                "success": True,
                "data": {
                    "comparison": build_hotel_comparison(payload),
                    "original": payload,
                },
            }
        )


class HotelDetailView(APIView):
    """Offers of a single hotel."""

    def get(self, request: Request, hotel_id: str) -> Response:
        """Return Amadeus offers for one hotel."""
        serializer = HotelOffersQuerySerializer(data=_present_params(request))
        if not serializer.is_valid():
            return _invalid_params(serializer)

        params = {
            key: value
            for key, value in serializer.to_params().items()
            if key not in ("cityCode", "hotelIds")
        }
        params = {"hotelIds": hotel_id, **params}

        result = _proxy(HOTEL_OFFERS_BY_HOTEL_PATH, params)
        if isinstance(result, Failure):
            return result.error

        return Response({"success": True, "data": result.value.payload})


class UserListView(APIView):
    """List and create demo users."""

    def get(self, request: Request) -> Response:
        """Return all users."""
        users = get_store().list_users()
        return Response(
            {
                "success": True,
                "data": [user.as_payload() for user in users],
                "message": "Users retrieved successfully.",
            }
        )

    def post(self, request: Request) -> Response:
        """Create a user from ``name`` and ``email``."""
        serializer = UserInputSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_params(serializer)

        name = serializer.validated_data.get("name")
        email = serializer.validated_data.get("email")
        if not name or not email:
            return _error("Missing required fields.", "name and email are required.")

        user = get_store().create_user(name=name, email=email)
        return Response(
            {
                "success": True,
                "data": user.as_payload(),
                "message": "User created successfully.",
            },
            status=status.HTTP_201_CREATED,
        )


class UserDetailView(APIView):
    """Retrieve, update and delete a demo user."""

    def get(self, request: Request, user_id: int) -> Response:
        """Return one user."""
        result = get_store().get_user(user_id)
        if isinstance(result, Failure):
            return _user_not_found(user_id)
        return Response(
            {
                "success": True,
                "data": result.value.as_payload(),
                "message": "User retrieved successfully.",
            }
        )

    def put(self, request: Request, user_id: int) -> Response:
        """Update the provided fields of a user."""
        serializer = UserInputSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_params(serializer)

        result = get_store().update_user(
            user_id,
            name=serializer.validated_data.get("name"),
            email=serializer.validated_data.get("email"),
        )
        if isinstance(result, Failure):
            return _user_not_found(user_id)
        return Response(
            {
                "success": True,
                "data": result.value.as_payload(),
                "message": "User updated successfully.",
            }
        )

    def delete(self, request: Request, user_id: int) -> Response:
        """Delete a user and return it."""
        result = get_store().delete_user(user_id)
        if isinstance(result, Failure):
            return _user_not_found(user_id)
        return Response(
            {
                "success": True,
                "data": result.value.as_payload(),
                "message": "User deleted successfully.",
            }
        )


def _user_not_found(user_id: int) -> Response:
    return _error(
        "User not found.",
        f"No user with ID {user_id}.",
        status_code=status.HTTP_404_NOT_FOUND,
    )


class TripListView(APIView):
    """List and create demo trips."""

    def get(self, request: Request) -> Response:
        """Return all trips."""
        trips = get_store().list_trips()
        return Response(
            {
                "success": True,
                "data": [trip.as_payload() for trip in trips],
                "message": "Trips retrieved successfully.",
            }
        )

    def post(self, request: Request) -> Response:
        """Create a trip from ``destination``, ``budget`` and ``peopleCount``."""
        serializer = TripInputSerializer(data=request.data)
        if not serializer.is_valid():
            return _invalid_params(serializer)

        data = serializer.validated_data
        if not data.get("destination") or not data.get("budget") or not data.get("peopleCount"):
            return _error(
                "Missing required fields.",
                "destination, budget and peopleCount are required.",
            )

        trip = get_store().create_trip(
            destination=data["destination"],
            budget=data["budget"],
            people_count=data["peopleCount"],
        )
        return Response(
            {
                "success": True,
                "data": trip.as_payload(),
                "message": "Trip created successfully.",
            },
            status=status.HTTP_201_CREATED,
        )


class TripDetailView(APIView):
    """Retrieve a demo trip."""

    def get(self, request: Request, trip_id: int) -> Response:
        """Return one trip."""
        result = get_store().get_trip(trip_id)
        if isinstance(result, Failure):
            return _error(
                "Trip not found.",
                f"No trip with ID {trip_id}.",
                status_code=status.HTTP_404_NOT_FOUND,
            )
        return Response(
            {
                "success": True,
                "data": result.value.as_payload(),
                "message": "Trip retrieved successfully.",
            }
        )


class RecommendationsView(APIView):
    """Recommend demo trips by budget, group size and region."""

    def get(self, request: Request) -> Response:
        """Return trips matching the filters."""
        serializer = RecommendationQuerySerializer(data=_present_params(request))
        if not serializer.is_valid():
            return _invalid_params(serializer)

        data = serializer.validated_data
        trips = get_store().recommend_trips(
            budget=data.get("budget"),
            people_count=data.get("peopleCount"),
            region=data.get("region"),
        )
        return Response(
            {
                "success": True,
                "data": [trip.as_payload() for trip in trips],
                "message": "Recommended trips retrieved successfully.",
            }
        )


class HealthCheckView(APIView):
    """API liveness endpoint."""

    def get(self, request: Request) -> Response:
        """Return a timestamped liveness message."""
        return Response(
            {
                "success": True,
                "message": "API server is running.",
                "timestamp": timezone.now().isoformat(),
            }
        )
