"""HTTP client for the Amadeus Self-Service APIs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from core.logging import get_logger
from core.result import Result, failure, success
from services.amadeus.errors import (
    AmadeusError,
    AuthenticationError,
    ConfigurationError,
    NetworkError,
    ParseError,
)

if TYPE_CHECKING:
    from core.config import AmadeusSettings

logger = get_logger(__name__)

# Amadeus API paths, relative to the configured base URL
TOKEN_PATH = "/v1/security/oauth2/token"
FLIGHT_OFFERS_PATH = "/v2/shopping/flight-offers"
FLIGHT_DESTINATIONS_PATH = "/v1/shopping/flight-destinations"
HOTEL_OFFERS_PATH = "/v2/shopping/hotel-offers"
HOTEL_OFFERS_BY_HOTEL_PATH = "/v2/shopping/hotel-offers/by-hotel"

DEFAULT_BASE_URL = "https://test.api.amadeus.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class AmadeusResponse:
    """
    Raw response from an Amadeus endpoint.

    Error statuses are returned as data; callers decide what counts as
    failure.

    Attributes:
        status_code: HTTP status code.
        payload: Decoded JSON body.
    """

    status_code: int
    payload: dict[str, Any]

    @property
    def errors(self) -> Any:
        """Return the upstream ``errors`` field, if present."""
        return self.payload.get("errors")

    @property
    def is_error(self) -> bool:
        """Check whether Amadeus reported an error."""
        return self.status_code >= 400 or bool(self.errors)

    @property
    def first_error_code(self) -> int | None:
        """Return the code of the first upstream error, if any."""
        errors = self.errors
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            return errors[0].get("code")
        return None


class AmadeusClient:
    """
    HTTP client for the Amadeus API.

    Uses the OAuth 2.0 client credentials flow. Tokens are requested on
    demand and never cached; callers fetch one per logical operation.

    Attributes:
        api_key: Amadeus API key.
        api_secret: Amadeus API secret.
        base_url: API base URL.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Amadeus API key. May be empty; token requests then fail.
            api_secret: Amadeus API secret.
            base_url: API base URL.
            timeout: Request timeout in seconds.
        """
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: AmadeusSettings) -> AmadeusClient:
        """Build a client from application settings."""
        return cls(
            api_key=settings.api_key,
            api_secret=settings.api_secret.get_secret_value(),
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def fetch_access_token(self) -> Result[str, AmadeusError]:
        """
        Request a new bearer token.

        Returns:
            Result containing the access token or AmadeusError.
        """
        if not self.api_key or not self.api_secret:
            logger.error("Amadeus credentials are not configured")
            return failure(ConfigurationError())

        client = await self._get_client()
        logger.info("Requesting Amadeus access token")

        try:
            response = await client.post(
                f"{self.base_url}{TOKEN_PATH}",
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                data={
                    "grant_type": "client_credentials",
                    "client_id": self.api_key,
                    "client_secret": self.api_secret,
                },
            )
        except httpx.TimeoutException:
            logger.error("Amadeus token request timeout")
            return failure(NetworkError(message="Authentication request timeout"))
        except httpx.RequestError as e:
            logger.error("Amadeus token request error", error=str(e))
            return failure(
                NetworkError(message="Authentication request failed", details=str(e))
            )

        return self._handle_token_response(response)

    def _handle_token_response(self, response: httpx.Response) -> Result[str, AmadeusError]:
        """Handle the OAuth token response."""
        if response.status_code >= 400:
            details = _safe_json(response)
            logger.error(
                "Amadeus token request failed",
                status_code=response.status_code,
                response=details,
            )
            return failure(
                AuthenticationError(
                    message=f"Token request failed with status {response.status_code}",
                    details=details,
                    status_code=response.status_code,
                )
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Failed to parse Amadeus token response", error=str(e))
            return failure(
                ParseError(message="Failed to parse authentication response", details=str(e))
            )

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            logger.error("Amadeus token response has no access_token")
            return failure(
                AuthenticationError(
                    message="access_token missing from token response",
                    details=data,
                    status_code=response.status_code,
                )
            )

        logger.info("Amadeus access token obtained", expires_in=data.get("expires_in"))
        return success(token)

    async def get(
        self,
        path: str,
        params: dict[str, Any],
        token: str,
    ) -> Result[AmadeusResponse, AmadeusError]:
        """
        Make an authenticated GET request.

        Args:
            path: API path, e.g. ``FLIGHT_OFFERS_PATH``.
            params: Query parameters.
            token: Bearer token from ``fetch_access_token``.

        Returns:
            Result containing the AmadeusResponse (any status) or AmadeusError
            for transport and decoding failures.
        """
        client = await self._get_client()

        try:
            response = await client.get(
                f"{self.base_url}{path}",
                params=_encode_params(params),
                headers={
                    "Authorization": f"Bearer {token}",
                    "Accept": "application/json",
                },
            )
        except httpx.TimeoutException:
            logger.error("Amadeus request timeout", path=path)
            return failure(NetworkError(message="Request timeout"))
        except httpx.RequestError as e:
            logger.error("Amadeus request error", path=path, error=str(e))
            return failure(NetworkError(message="Request failed", details=str(e)))

        logger.debug("Amadeus response received", path=path, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(
                "Failed to parse Amadeus response",
                path=path,
                status_code=response.status_code,
                error=str(e),
            )
            return failure(
                ParseError(
                    details=response.text[:500],
                    status_code=response.status_code,
                )
            )

        if not isinstance(payload, dict):
            payload = {"data": payload}

        return success(AmadeusResponse(status_code=response.status_code, payload=payload))

    async def request(
        self,
        path: str,
        params: dict[str, Any],
    ) -> Result[AmadeusResponse, AmadeusError]:
        """
        Fetch a token and make one authenticated GET request.

        Args:
            path: API path.
            params: Query parameters.

        Returns:
            Result containing the AmadeusResponse or AmadeusError.
        """
        token_result = await self.fetch_access_token()
        if token_result.is_failure():
            return token_result
        return await self.get(path, params, token_result.unwrap())


def _encode_params(params: dict[str, Any]) -> dict[str, str]:
    """Drop unset parameters and render booleans the way Amadeus expects."""
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


def _safe_json(response: httpx.Response) -> object:
    """Return the decoded body, or a truncated text body if it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text[:500]
