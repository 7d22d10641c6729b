"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

import pytest
from django.test import Client
from rest_framework.test import APIClient

from core.config import get_settings
from services.store import get_store


@pytest.fixture()
def test_client() -> Client:
    """Return a Django test client."""
    return Client()


@pytest.fixture()
def api_client() -> APIClient:
    """Return a DRF API test client."""
    return APIClient()


@pytest.fixture(autouse=True)
def _reset_demo_store() -> Iterator[None]:
    """Give every test the seed users and trips."""
    get_store().reset()
    yield
    get_store().reset()


@pytest.fixture()
def _clear_settings_cache() -> Iterator[None]:
    """Re-read settings from the environment for the duration of a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def future_date() -> date:
    """A departure date comfortably inside the bookable window."""
    return date.today() + timedelta(days=30)
