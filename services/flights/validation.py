"""Date rules for single-route flight offer searches."""

from __future__ import annotations

from datetime import date

from core.result import Result, failure, success
from services.flights.errors import ValidationError


def _one_year_after(day: date) -> date:
    try:
        return day.replace(year=day.year + 1)
    except ValueError:
        # 29 February
        return day.replace(year=day.year + 1, day=28)


def validate_travel_dates(
    departure_date: date,
    return_date: date | None = None,
    today: date | None = None,
) -> Result[None, ValidationError]:
    """
    Check that travel dates are within the bookable window.

    The departure must be today or later and at most one year ahead. A
    return date must be after the departure and also within one year.

    Args:
        departure_date: Outbound date.
        return_date: Inbound date, for round trips.
        today: Reference day (defaults to the current date).

    Returns:
        Success(None) or the first rule that was violated.
    """
    today = today or date.today()
    latest = _one_year_after(today)

    if departure_date < today:
        return failure(
            ValidationError(
                "Invalid departure date.",
                details="The departure date must be today or later.",
            )
        )

    if departure_date > latest:
        return failure(
            ValidationError(
                "Departure date is too far in the future.",
                details="The departure date must be within one year from today.",
            )
        )

    if return_date is not None:
        if return_date <= departure_date:
            return failure(
                ValidationError(
                    "Invalid return date.",
                    details="The return date must be after the departure date.",
                )
            )
        if return_date > latest:
            return failure(
                ValidationError(
                    "Return date is too far in the future.",
                    details="The return date must be within one year from today.",
                )
            )

    return success(None)
