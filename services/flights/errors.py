"""Errors raised or recorded by the flight search services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class FlightSearchError(Exception):
    """Error that aborts a flight search as a whole."""

    def __init__(self, message: str, details: Any = None) -> None:
        """Initialize error."""
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(FlightSearchError):
    """The search request is missing mandatory fields or has invalid dates."""


class CredentialError(FlightSearchError):
    """No access token could be obtained for the upstream API."""


@dataclass(frozen=True, slots=True)
class DestinationFailure:
    """
    Why a single destination produced no usable offers.

    Recorded on the destination's outcome; never raised.

    Attributes:
        message: Short description of the failure.
        details: Upstream error payload or exception text.
    """

    message: str
    details: Any = None
