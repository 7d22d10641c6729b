"""In-memory store for the demo users and trips endpoints."""

from __future__ import annotations

import threading
from copy import copy
from functools import lru_cache

from core.logging import get_logger
from core.result import Result, failure, success
from services.store.errors import RecordNotFoundError
from services.store.types import TripRecord, UserRecord

logger = get_logger(__name__)

SEED_USERS: tuple[UserRecord, ...] = (
    UserRecord(id=1, name="Hong Gildong", email="hong@example.com"),
    UserRecord(id=2, name="Kim Cheolsu", email="kim@example.com"),
)

SEED_TRIPS: tuple[TripRecord, ...] = (
    TripRecord(id=1, destination="Jeju Island", budget=500000, people_count=2),
    TripRecord(id=2, destination="Busan", budget=300000, people_count=3),
)


def _next_id(ids: list[int]) -> int:
    return max(ids) + 1 if ids else 1


class DemoStore:
    """
    Thread-safe in-memory users and trips.

    Data lives only as long as the process. Records handed out are copies,
    so callers cannot mutate stored state behind the lock.

    Example:
        >>> store = DemoStore()
        >>> store.create_user("Lee", "lee@example.com").id
        3
    """

    def __init__(self) -> None:
        """Initialize the store with the seed records."""
        self._lock = threading.Lock()
        self._users: list[UserRecord] = []
        self._trips: list[TripRecord] = []
        self.reset()

    def reset(self) -> None:
        """Restore the seed records."""
        with self._lock:
            self._users = [copy(user) for user in SEED_USERS]
            self._trips = [copy(trip) for trip in SEED_TRIPS]

    # Users

    def list_users(self) -> list[UserRecord]:
        """Return all users in insertion order."""
        with self._lock:
            return [copy(user) for user in self._users]

    def get_user(self, user_id: int) -> Result[UserRecord, RecordNotFoundError]:
        """Return the user with the given ID."""
        with self._lock:
            user = self._find_user(user_id)
            if user is None:
                return failure(RecordNotFoundError("user", user_id))
            return success(copy(user))

    def create_user(self, name: str, email: str) -> UserRecord:
        """Add a user and return it."""
        with self._lock:
            user = UserRecord(
                id=_next_id([u.id for u in self._users]),
                name=name,
                email=email,
            )
            self._users.append(user)
        logger.info("User created", user_id=user.id)
        return copy(user)

    def update_user(
        self,
        user_id: int,
        name: str | None = None,
        email: str | None = None,
    ) -> Result[UserRecord, RecordNotFoundError]:
        """
        Update the given fields of a user.

        Args:
            user_id: ID of the user.
            name: New name; empty or None keeps the current one.
            email: New email; empty or None keeps the current one.

        Returns:
            Result containing the updated user or RecordNotFoundError.
        """
        with self._lock:
            user = self._find_user(user_id)
            if user is None:
                return failure(RecordNotFoundError("user", user_id))
            if name:
                user.name = name
            if email:
                user.email = email
            return success(copy(user))

    def delete_user(self, user_id: int) -> Result[UserRecord, RecordNotFoundError]:
        """Remove a user and return it."""
        with self._lock:
            user = self._find_user(user_id)
            if user is None:
                return failure(RecordNotFoundError("user", user_id))
            self._users.remove(user)
        logger.info("User deleted", user_id=user_id)
        return success(user)

    def _find_user(self, user_id: int) -> UserRecord | None:
        return next((u for u in self._users if u.id == user_id), None)

    # Trips

    def list_trips(self) -> list[TripRecord]:
        """Return all trips in insertion order."""
        with self._lock:
            return [copy(trip) for trip in self._trips]

    def get_trip(self, trip_id: int) -> Result[TripRecord, RecordNotFoundError]:
        """Return the trip with the given ID."""
        with self._lock:
            trip = next((t for t in self._trips if t.id == trip_id), None)
            if trip is None:
                return failure(RecordNotFoundError("trip", trip_id))
            return success(copy(trip))

    def create_trip(self, destination: str, budget: int, people_count: int) -> TripRecord:
        """Add a trip and return it."""
        with self._lock:
            trip = TripRecord(
                id=_next_id([t.id for t in self._trips]),
                destination=destination,
                budget=budget,
                people_count=people_count,
            )
            self._trips.append(trip)
        logger.info("Trip created", trip_id=trip.id)
        return copy(trip)

    def recommend_trips(
        self,
        budget: int | None = None,
        people_count: int | None = None,
        region: str | None = None,
    ) -> list[TripRecord]:
        """
        Filter trips by simple criteria.

        Args:
            budget: Keep trips whose budget does not exceed this.
            people_count: Keep trips for exactly this many people.
            region: Keep trips whose destination contains this text.

        Returns:
            Matching trips in insertion order.
        """
        return [
            trip
            for trip in self.list_trips()
            if (budget is None or trip.budget <= budget)
            and (people_count is None or trip.people_count == people_count)
            and (not region or region in trip.destination)
        ]


@lru_cache
def get_store() -> DemoStore:
    """Return the process-wide demo store."""
    return DemoStore()
