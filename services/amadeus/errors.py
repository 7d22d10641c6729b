"""Error types for the Amadeus API client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AmadeusErrorCode(str, Enum):
    """Error codes for Amadeus client failures."""

    UNKNOWN = "unknown"
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    NETWORK = "network"
    PARSE = "parse"


@dataclass(frozen=True, slots=True)
class AmadeusError:
    """
    Failure of a call to the Amadeus API.

    Attributes:
        code: Error code identifying the kind of failure.
        message: Human-readable error message.
        details: Upstream body or exception text for diagnostics.
        status_code: HTTP status returned by Amadeus, if any.
    """

    code: AmadeusErrorCode
    message: str
    details: object | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"[amadeus] {self.code.value}: {self.message}"

    @property
    def is_credential_error(self) -> bool:
        """Check whether the failure happened while obtaining a token."""
        return self.code in {AmadeusErrorCode.CONFIGURATION, AmadeusErrorCode.AUTHENTICATION}


def ConfigurationError(
    message: str = "AMADEUS_API_KEY or AMADEUS_API_SECRET is not set",
) -> AmadeusError:
    """Create a configuration error."""
    return AmadeusError(code=AmadeusErrorCode.CONFIGURATION, message=message)


def AuthenticationError(
    message: str = "Authentication failed",
    details: object | None = None,
    status_code: int | None = None,
) -> AmadeusError:
    """Create an authentication error."""
    return AmadeusError(
        code=AmadeusErrorCode.AUTHENTICATION,
        message=message,
        details=details,
        status_code=status_code,
    )


def NetworkError(
    message: str = "Network error",
    details: object | None = None,
) -> AmadeusError:
    """Create a network error."""
    return AmadeusError(code=AmadeusErrorCode.NETWORK, message=message, details=details)


def ParseError(
    message: str = "Failed to parse response",
    details: object | None = None,
    status_code: int | None = None,
) -> AmadeusError:
    """Create a parse error."""
    return AmadeusError(
        code=AmadeusErrorCode.PARSE,
        message=message,
        details=details,
        status_code=status_code,
    )
