"""Records kept by the demo store."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(slots=True)
class UserRecord:
    """A demo user."""

    id: int
    name: str
    email: str

    def as_payload(self) -> dict[str, object]:
        """Return the JSON representation."""
        return asdict(self)


@dataclass(slots=True)
class TripRecord:
    """
    A demo trip.

    Attributes:
        id: Record ID.
        destination: Free-text destination name.
        budget: Budget in whole currency units.
        people_count: Number of travellers.
    """

    id: int
    destination: str
    budget: int
    people_count: int

    def as_payload(self) -> dict[str, object]:
        """Return the JSON representation."""
        return {
            "id": self.id,
            "destination": self.destination,
            "budget": self.budget,
            "peopleCount": self.people_count,
        }
