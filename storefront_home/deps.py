"""
Dependency injection for FastAPI.
"""

from fastapi import HTTPException, status

from storefront_home.config import Settings, get_settings, locale_context, storefront_endpoint
from storefront_home.core.storefront_client import StorefrontClient


# Lazy load settings to avoid blocking on startup
_settings = None

def _get_settings() -> Settings:
    """Lazy get settings."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def settings_dependency() -> Settings:
    """Settings as a FastAPI dependency."""
    return _get_settings()


def is_storefront_configured(settings: Settings) -> bool:
    return bool(settings.storefront_domain and settings.storefront_access_token)


def get_storefront_client() -> StorefrontClient:
    """
    Create a StorefrontClient for the configured shop.

    The caller owns the client and must close it.

    Raises:
        HTTPException: If domain or access token are not configured.
    """
    settings = _get_settings()

    if not is_storefront_configured(settings):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Storefront not configured (need STOREFRONT_DOMAIN and STOREFRONT_ACCESS_TOKEN)"
        )

    locale = locale_context(settings)
    return StorefrontClient(
        endpoint=storefront_endpoint(settings),
        access_token=settings.storefront_access_token,
        country=locale.get("country"),
        language=locale.get("language"),
        timeout=settings.request_timeout
    )
