"""URL configuration for the API application."""

from django.urls import path

from apps.api.views import (
    FlightDestinationsView,
    FlightOffersView,
    HealthCheckView,
    HotelCompareView,
    HotelDetailView,
    HotelOffersView,
    MultiDestinationFlightOffersView,
    RecommendationsView,
    TripDetailView,
    TripListView,
    UserDetailView,
    UserListView,
)

app_name = "api"

urlpatterns = [
    # Flights
    path(
        "flights/offers/multiple",
        MultiDestinationFlightOffersView.as_view(),
        name="flight-offers-multiple",
    ),
    path("flights/offers", FlightOffersView.as_view(), name="flight-offers"),
    path("flights/destinations", FlightDestinationsView.as_view(), name="flight-destinations"),
    # Hotels; compare must precede the hotel ID route
    path("hotels", HotelOffersView.as_view(), name="hotel-offers"),
    path("hotels/compare", HotelCompareView.as_view(), name="hotel-compare"),
    path("hotels/<str:hotel_id>", HotelDetailView.as_view(), name="hotel-detail"),
    # Demo store
    path("users", UserListView.as_view(), name="user-list"),
    path("users/<int:user_id>", UserDetailView.as_view(), name="user-detail"),
    path("trips", TripListView.as_view(), name="trip-list"),
    path("trips/<int:trip_id>", TripDetailView.as_view(), name="trip-detail"),
    path("recommendations", RecommendationsView.as_view(), name="recommendations"),
    path("health", HealthCheckView.as_view(), name="health"),
]
