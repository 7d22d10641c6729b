"""Tests for health check, landing page and favicon."""

from collections.abc import Iterator
from unittest.mock import patch

import pytest
from django.test import Client
from pydantic import SecretStr

from core.config import AmadeusSettings, Settings


@pytest.fixture()
def configured_settings() -> Iterator[Settings]:
    """Settings with Amadeus credentials."""
    settings = Settings(amadeus=AmadeusSettings(api_key="key", api_secret=SecretStr("secret")))
    with patch("core.health.get_settings", return_value=settings):
        yield settings


@pytest.fixture()
def unconfigured_settings() -> Iterator[Settings]:
    """Settings without Amadeus credentials."""
    settings = Settings(amadeus=AmadeusSettings(api_key="", api_secret=SecretStr("")))
    with patch("core.health.get_settings", return_value=settings):
        yield settings


class TestHealthCheck:
    """Tests for the health check endpoint."""

    @pytest.mark.usefixtures("configured_settings")
    def test_health_check_returns_200(self, test_client: Client) -> None:
        """Health check endpoint should return 200 when credentials are set."""
        response = test_client.get("/health/")

        assert response.status_code == 200
        assert response["Content-Type"] == "application/json"
        assert response.json() == {
            "status": "healthy",
            "checks": {"amadeus": {"status": "healthy", "environment": "test"}},
        }

    @pytest.mark.usefixtures("unconfigured_settings")
    def test_health_check_degraded_without_credentials(self, test_client: Client) -> None:
        """Missing credentials report a degraded service."""
        response = test_client.get("/health/")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "degraded"
        assert data["checks"]["amadeus"]["status"] == "unhealthy"
        assert "AMADEUS_API_KEY" in data["checks"]["amadeus"]["error"]


class TestLandingPage:
    """Tests for the landing page and favicon."""

    def test_landing_page_renders(self, test_client: Client) -> None:
        """The root URL serves the test page."""
        response = test_client.get("/")

        assert response.status_code == 200
        assert b"Travel Proxy API" in response.content
        assert b"app.js" in response.content

    def test_favicon_is_empty(self, test_client: Client) -> None:
        """Favicon requests get an empty 204."""
        response = test_client.get("/favicon.ico")

        assert response.status_code == 204
        assert response.content == b""
