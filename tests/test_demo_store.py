"""Tests for the in-memory demo store."""

from __future__ import annotations

import pytest

from core.result import Failure, Success
from services.store import DemoStore, RecordNotFoundError, TripRecord, UserRecord


@pytest.fixture()
def store() -> DemoStore:
    """A fresh store with the seed data."""
    return DemoStore()


class TestUsers:
    """Tests for user operations."""

    def test_seed_users(self, store: DemoStore) -> None:
        """Two users are seeded."""
        assert [u.name for u in store.list_users()] == ["Hong Gildong", "Kim Cheolsu"]

    def test_get_user(self, store: DemoStore) -> None:
        """Existing users are found by ID."""
        result = store.get_user(1)

        assert result == Success(UserRecord(id=1, name="Hong Gildong", email="hong@example.com"))

    def test_get_missing_user(self, store: DemoStore) -> None:
        """Unknown IDs are a not-found failure."""
        result = store.get_user(99)

        assert isinstance(result, Failure)
        assert isinstance(result.error, RecordNotFoundError)
        assert result.error.kind == "user"
        assert result.error.record_id == 99

    def test_create_user_assigns_next_id(self, store: DemoStore) -> None:
        """New IDs continue after the highest existing one."""
        user = store.create_user("Lee Younghee", "lee@example.com")

        assert user.id == 3
        assert len(store.list_users()) == 3

    def test_ids_not_reused_below_max(self, store: DemoStore) -> None:
        """Deleting a low ID does not lower the next ID."""
        store.delete_user(1)

        assert store.create_user("Park", "park@example.com").id == 3

    def test_first_id_in_empty_store(self, store: DemoStore) -> None:
        """An empty store starts at 1."""
        store.delete_user(1)
        store.delete_user(2)

        assert store.create_user("Park", "park@example.com").id == 1

    def test_update_user_partial(self, store: DemoStore) -> None:
        """Only provided fields change."""
        result = store.update_user(1, name="Hong", email="")

        assert result == Success(UserRecord(id=1, name="Hong", email="hong@example.com"))

    def test_update_missing_user(self, store: DemoStore) -> None:
        """Updating an unknown user fails."""
        assert isinstance(store.update_user(42, name="x"), Failure)

    def test_delete_user(self, store: DemoStore) -> None:
        """Deleted users are returned and removed."""
        result = store.delete_user(2)

        assert isinstance(result, Success)
        assert result.value.name == "Kim Cheolsu"
        assert isinstance(store.get_user(2), Failure)

    def test_returned_records_are_copies(self, store: DemoStore) -> None:
        """Mutating a returned record does not change the store."""
        store.list_users()[0].name = "changed"

        assert store.get_user(1).unwrap().name == "Hong Gildong"

    def test_reset(self, store: DemoStore) -> None:
        """reset restores the seed data."""
        store.create_user("Park", "park@example.com")

        store.reset()

        assert len(store.list_users()) == 2


class TestTrips:
    """Tests for trip operations."""

    def test_seed_trips(self, store: DemoStore) -> None:
        """Two trips are seeded."""
        assert store.list_trips() == [
            TripRecord(id=1, destination="Jeju Island", budget=500000, people_count=2),
            TripRecord(id=2, destination="Busan", budget=300000, people_count=3),
        ]

    def test_create_and_get_trip(self, store: DemoStore) -> None:
        """Created trips can be fetched."""
        trip = store.create_trip("Gyeongju", 200000, 4)

        assert store.get_trip(trip.id) == Success(trip)

    def test_get_missing_trip(self, store: DemoStore) -> None:
        """Unknown trips are a not-found failure."""
        result = store.get_trip(7)

        assert isinstance(result, Failure)
        assert result.error.kind == "trip"

    def test_payload_uses_camel_case(self, store: DemoStore) -> None:
        """Trip payloads use peopleCount."""
        assert store.list_trips()[0].as_payload() == {
            "id": 1,
            "destination": "Jeju Island",
            "budget": 500000,
            "peopleCount": 2,
        }


class TestRecommendations:
    """Tests for trip recommendations."""

    def test_no_filters(self, store: DemoStore) -> None:
        """Without filters every trip is recommended."""
        assert len(store.recommend_trips()) == 2

    def test_budget_filter(self, store: DemoStore) -> None:
        """Trips above the budget are excluded."""
        assert [t.destination for t in store.recommend_trips(budget=400000)] == ["Busan"]

    def test_people_and_region_filters(self, store: DemoStore) -> None:
        """People count matches exactly and region is a substring."""
        assert [t.id for t in store.recommend_trips(people_count=2)] == [1]
        assert [t.id for t in store.recommend_trips(region="Jeju")] == [1]
        assert store.recommend_trips(region="Seoul") == []
