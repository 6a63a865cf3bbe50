"""
Configuration management for the Storefront Home API.
"""

from typing import Dict, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    storefront_domain: Optional[str] = Field(
        default=None,
        env="STOREFRONT_DOMAIN"
    )
    storefront_api_version: str = Field(
        default="2024-10",
        env="STOREFRONT_API_VERSION"
    )
    storefront_access_token: Optional[str] = Field(
        default=None,
        env="STOREFRONT_ACCESS_TOKEN"
    )
    storefront_country: Optional[str] = Field(
        default=None,
        env="STOREFRONT_COUNTRY"
    )
    storefront_language: Optional[str] = Field(
        default=None,
        env="STOREFRONT_LANGUAGE"
    )
    request_timeout: float = Field(
        default=30.0,
        env="REQUEST_TIMEOUT"
    )
    site_title: str = Field(
        default="Hydrogen",
        env="SITE_TITLE"
    )
    placeholder_image_url: Optional[str] = Field(
        default=None,
        env="PLACEHOLDER_IMAGE_URL"
    )
    log_level: str = Field(
        default="INFO",
        env="LOG_LEVEL"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


_settings = Settings()


def storefront_endpoint(settings: Settings) -> str:
    """
    Build the Storefront GraphQL endpoint URL.

    Args:
        settings: Application settings.

    Returns:
        Endpoint URL.

    Raises:
        ValueError: If the storefront domain is not configured.
    """
    domain = (settings.storefront_domain or "").strip()
    if not domain:
        raise ValueError("STOREFRONT_DOMAIN is not configured")

    if not domain.startswith(("http://", "https://")):
        domain = f"https://{domain}"

    return f"{domain.rstrip('/')}/api/{settings.storefront_api_version}/graphql.json"


def locale_context(settings: Settings) -> Dict[str, str]:
    """
    Locale/region variables injected into every storefront query.

    Country codes are upper-case ISO 3166 (US), language codes upper-case
    ISO 639 (EN), matching the CountryCode/LanguageCode enums.
    """
    context = {}
    if settings.storefront_country:
        context["country"] = settings.storefront_country.strip().upper()
    if settings.storefront_language:
        context["language"] = settings.storefront_language.strip().upper()
    return context


def get_settings() -> Settings:
    """Get application settings."""
    return _settings
