"""
Configuration settings for the Management API client.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from auth0_management.http import normalize_domain


class ManagementApiSettings(BaseSettings):
    """
    Configuration for the Management API client.

    Settings are loaded from environment variables with AUTH0_ prefix.
    Example: AUTH0_DOMAIN, AUTH0_TOKEN, etc.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTH0_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    domain: str = Field(
        ...,
        description="Tenant domain, e.g. tenant.eu.auth0.com"
    )
    token: str = Field(
        ...,
        description="Management API access token"
    )

    # HTTP client settings
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds"
    )
    telemetry: bool = Field(
        default=True,
        description="Send the Auth0-Client telemetry header"
    )

    @field_validator("domain")
    @classmethod
    def strip_scheme(cls, value: str) -> str:
        value = normalize_domain(value)
        if not value:
            raise ValueError("domain must not be empty")
        return value


@lru_cache
def get_settings() -> ManagementApiSettings:
    """
    Get settings singleton.

    Uses lru_cache to ensure settings are only loaded once.

    Raises:
        ValidationError: If required settings are missing
    """
    return ManagementApiSettings()
