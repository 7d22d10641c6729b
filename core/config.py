"""
Application configuration using Pydantic Settings.

Typed, validated settings read from environment variables and the
project's .env file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AmadeusSettings(BaseSettings):
    """Amadeus for Developers API settings."""

    model_config = SettingsConfigDict(env_prefix="AMADEUS_")

    api_key: str = Field(default="", description="Amadeus API key (client id)")
    api_secret: SecretStr = Field(
        default=SecretStr(""), description="Amadeus API secret (client secret)"
    )
    base_url: str = Field(
        default="https://test.api.amadeus.com",
        description="Amadeus API base URL (test or production environment)",
    )
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds", gt=0)

    @property
    def is_configured(self) -> bool:
        """Check if Amadeus credentials are configured."""
        return bool(self.api_key and self.api_secret.get_secret_value())

    @property
    def environment(self) -> str:
        """Return "test" for the self-service sandbox, else "production"."""
        return "test" if "//test." in self.base_url else "production"


class FlightSearchSettings(BaseSettings):
    """Tuning for the multi-destination flight search."""

    model_config = SettingsConfigDict(env_prefix="FLIGHT_SEARCH_")

    dispatch_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for a single destination before giving up",
        gt=0,
    )
    max_concurrency: int = Field(
        default=15,
        description="Maximum simultaneous upstream requests per search",
        ge=1,
    )
    default_results_per_destination: int = Field(
        default=5, description="Offers requested per destination when unset", ge=1
    )
    default_overall_max: int = Field(
        default=50, description="Final result cap when the client sends none", ge=1
    )


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")
    secret_key: SecretStr = Field(
        default=SecretStr("django-insecure-change-me-in-production"),
        description="Django secret key",
    )
    allowed_hosts: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["localhost", "127.0.0.1"],
        description="Allowed hosts",
    )
    log_level: str = Field(default="INFO", description="Minimum log level")
    log_json: bool = Field(default=False, description="Emit JSON log lines")

    # Sub-settings
    amadeus: AmadeusSettings = Field(default_factory=AmadeusSettings)
    flight_search: FlightSearchSettings = Field(default_factory=FlightSearchSettings)

    @field_validator("allowed_hosts", mode="before")
    @classmethod
    def parse_allowed_hosts(cls, v: str | list[str]) -> list[str]:
        """Parse allowed hosts from comma-separated string or list."""
        if isinstance(v, str):
            return [h.strip() for h in v.split(",") if h.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the log level name."""
        return v.upper()

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Configured Settings instance.
    """
    return Settings()
