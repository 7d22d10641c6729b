"""Tests for the Amadeus HTTP client."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from pydantic import SecretStr

from core.config import AmadeusSettings
from core.result import Failure, Success
from services.amadeus.client import (
    FLIGHT_OFFERS_PATH,
    TOKEN_PATH,
    AmadeusClient,
    AmadeusResponse,
)
from services.amadeus.errors import AmadeusErrorCode, ConfigurationError, NetworkError

BASE_URL = "https://test.api.amadeus.com"


def _response(status_code: int, json: Any = None, text: str | None = None) -> httpx.Response:
    request = httpx.Request("GET", BASE_URL)
    if text is not None:
        return httpx.Response(status_code, text=text, request=request)
    return httpx.Response(status_code, json=json, request=request)


@pytest.fixture()
def client() -> AmadeusClient:
    """Create a client for testing."""
    return AmadeusClient(api_key="key", api_secret="secret", base_url=f"{BASE_URL}/")


class TestAmadeusClientInit:
    """Tests for AmadeusClient initialization."""

    def test_strips_trailing_slash(self, client: AmadeusClient) -> None:
        """The base URL is normalized."""
        assert client.base_url == BASE_URL

    def test_from_settings(self) -> None:
        """Settings provide credentials, base URL and timeout."""
        settings = AmadeusSettings(
            api_key="k",
            api_secret=SecretStr("s"),
            base_url="https://api.amadeus.com",
            timeout=5,
        )

        client = AmadeusClient.from_settings(settings)

        assert client.api_key == "k"
        assert client.api_secret == "s"
        assert client.base_url == "https://api.amadeus.com"
        assert client.timeout == 5


class TestAmadeusResponse:
    """Tests for AmadeusResponse helpers."""

    def test_ok_response(self) -> None:
        """A 200 without errors is not an error."""
        response = AmadeusResponse(status_code=200, payload={"data": []})

        assert response.is_error is False
        assert response.first_error_code is None

    def test_error_code(self) -> None:
        """The first upstream error code is exposed."""
        response = AmadeusResponse(
            status_code=400,
            payload={"errors": [{"code": 141, "title": "SYSTEM ERROR HAS OCCURRED"}]},
        )

        assert response.is_error is True
        assert response.first_error_code == 141


class TestFetchAccessToken:
    """Tests for OAuth token requests."""

    @pytest.mark.asyncio
    async def test_missing_credentials(self) -> None:
        """No request is made without credentials."""
        client = AmadeusClient(api_key="", api_secret="")

        with patch.object(client, "_get_client") as mock_get_client:
            result = await client.fetch_access_token()

        assert result == Failure(ConfigurationError())
        mock_get_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_success(self, client: AmadeusClient) -> None:
        """A token is returned and credentials are posted as a form."""
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.post.return_value = _response(
                200, {"access_token": "tok", "expires_in": 1799}
            )
            mock_get_client.return_value = mock_http

            result = await client.fetch_access_token()

        assert result == Success("tok")
        call = mock_http.post.await_args
        assert call.args[0] == f"{BASE_URL}{TOKEN_PATH}"
        assert call.kwargs["data"] == {
            "grant_type": "client_credentials",
            "client_id": "key",
            "client_secret": "secret",
        }

    @pytest.mark.asyncio
    async def test_token_not_cached(self, client: AmadeusClient) -> None:
        """Every call requests a new token."""
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.post.return_value = _response(200, {"access_token": "tok"})
            mock_get_client.return_value = mock_http

            await client.fetch_access_token()
            await client.fetch_access_token()

        assert mock_http.post.await_count == 2

    @pytest.mark.asyncio
    async def test_rejected_credentials(self, client: AmadeusClient) -> None:
        """A 401 becomes an authentication error carrying the body."""
        body = {"error": "invalid_client", "error_description": "Client credentials are invalid"}
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.post.return_value = _response(401, body)
            mock_get_client.return_value = mock_http

            result = await client.fetch_access_token()

        assert isinstance(result, Failure)
        assert result.error.code == AmadeusErrorCode.AUTHENTICATION
        assert result.error.details == body
        assert result.error.status_code == 401
        assert result.error.is_credential_error is True

    @pytest.mark.asyncio
    async def test_missing_access_token(self, client: AmadeusClient) -> None:
        """A 200 without access_token is an authentication error."""
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.post.return_value = _response(200, {"state": "approved"})
            mock_get_client.return_value = mock_http

            result = await client.fetch_access_token()

        assert isinstance(result, Failure)
        assert result.error.code == AmadeusErrorCode.AUTHENTICATION

    @pytest.mark.asyncio
    async def test_unparseable_body(self, client: AmadeusClient) -> None:
        """A non-JSON success body is a parse error."""
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.post.return_value = _response(200, text="<html>")
            mock_get_client.return_value = mock_http

            result = await client.fetch_access_token()

        assert isinstance(result, Failure)
        assert result.error.code == AmadeusErrorCode.PARSE

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc",
        [httpx.ConnectTimeout("timeout"), httpx.ConnectError("refused")],
    )
    async def test_transport_errors(self, client: AmadeusClient, exc: Exception) -> None:
        """Timeouts and connection errors become network errors."""
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.post.side_effect = exc
            mock_get_client.return_value = mock_http

            result = await client.fetch_access_token()

        assert isinstance(result, Failure)
        assert result.error.code == AmadeusErrorCode.NETWORK
        assert result.error.is_credential_error is False


class TestGet:
    """Tests for authenticated GET requests."""

    @pytest.mark.asyncio
    async def test_encodes_params_and_sends_bearer(self, client: AmadeusClient) -> None:
        """None values are dropped and booleans rendered lower-case."""
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.get.return_value = _response(200, {"data": []})
            mock_get_client.return_value = mock_http

            result = await client.get(
                FLIGHT_OFFERS_PATH,
                {"originLocationCode": "ICN", "nonStop": True, "max": 5, "children": None},
                "tok",
            )

        assert result == Success(AmadeusResponse(status_code=200, payload={"data": []}))
        call = mock_http.get.await_args
        assert call.args[0] == f"{BASE_URL}{FLIGHT_OFFERS_PATH}"
        assert call.kwargs["params"] == {"originLocationCode": "ICN", "nonStop": "true", "max": "5"}
        assert call.kwargs["headers"]["Authorization"] == "Bearer tok"

    @pytest.mark.asyncio
    async def test_error_status_is_data(self, client: AmadeusClient) -> None:
        """Upstream error statuses are returned, not raised."""
        body = {"errors": [{"code": 477, "title": "INVALID FORMAT"}]}
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.get.return_value = _response(400, body)
            mock_get_client.return_value = mock_http

            result = await client.get(FLIGHT_OFFERS_PATH, {}, "tok")

        assert isinstance(result, Success)
        assert result.value.status_code == 400
        assert result.value.errors == body["errors"]

    @pytest.mark.asyncio
    async def test_non_object_body_is_wrapped(self, client: AmadeusClient) -> None:
        """A bare JSON list is exposed under data."""
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.get.return_value = _response(200, [1, 2])
            mock_get_client.return_value = mock_http

            result = await client.get(FLIGHT_OFFERS_PATH, {}, "tok")

        assert isinstance(result, Success)
        assert result.value.payload == {"data": [1, 2]}

    @pytest.mark.asyncio
    async def test_timeout(self, client: AmadeusClient) -> None:
        """A timeout is a network error."""
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.get.side_effect = httpx.ReadTimeout("slow")
            mock_get_client.return_value = mock_http

            result = await client.get(FLIGHT_OFFERS_PATH, {}, "tok")

        assert result == Failure(NetworkError(message="Request timeout"))

    @pytest.mark.asyncio
    async def test_non_json_body(self, client: AmadeusClient) -> None:
        """An HTML error page is a parse error."""
        with patch.object(client, "_get_client") as mock_get_client:
            mock_http = AsyncMock()
            mock_http.get.return_value = _response(502, text="<html>Bad Gateway</html>")
            mock_get_client.return_value = mock_http

            result = await client.get(FLIGHT_OFFERS_PATH, {}, "tok")

        assert isinstance(result, Failure)
        assert result.error.code == AmadeusErrorCode.PARSE
        assert result.error.status_code == 502


class TestRequest:
    """Tests for the token-then-GET helper."""

    @pytest.mark.asyncio
    async def test_token_failure_short_circuits(self, client: AmadeusClient) -> None:
        """No GET is made when the token request fails."""
        with (
            patch.object(client, "fetch_access_token") as mock_token,
            patch.object(client, "get") as mock_get,
        ):
            mock_token.return_value = Failure(ConfigurationError())

            result = await client.request(FLIGHT_OFFERS_PATH, {})

        assert result == Failure(ConfigurationError())
        mock_get.assert_not_called()

    @pytest.mark.asyncio
    async def test_uses_fetched_token(self, client: AmadeusClient) -> None:
        """The fetched token is passed to GET."""
        expected = Success(AmadeusResponse(status_code=200, payload={}))
        with (
            patch.object(client, "fetch_access_token") as mock_token,
            patch.object(client, "get") as mock_get,
        ):
            mock_token.return_value = Success("tok")
            mock_get.return_value = expected

            result = await client.request(FLIGHT_OFFERS_PATH, {"a": 1})

        assert result is expected
        mock_get.assert_awaited_once_with(FLIGHT_OFFERS_PATH, {"a": 1}, "tok")


class TestClose:
    """Tests for client lifecycle."""

    @pytest.mark.asyncio
    async def test_close_without_client(self, client: AmadeusClient) -> None:
        """Closing before any request is a no-op."""
        await client.close()

        assert client._client is None

    @pytest.mark.asyncio
    async def test_close_releases_client(self, client: AmadeusClient) -> None:
        """The underlying httpx client is closed and dropped."""
        http = await client._get_client()

        await client.close()

        assert http.is_closed
        assert client._client is None
