"""API app configuration."""

from django.apps import AppConfig
from django.conf import settings

from core.logging import configure_logging


class ApiConfig(AppConfig):
    """Configuration for the API application."""

    name = "apps.api"
    verbose_name = "API"

    def ready(self) -> None:
        """Configure structlog once the settings are loaded."""
        configure_logging(
            json_format=settings.LOG_JSON,
            log_level=settings.LOG_LEVEL,
        )
