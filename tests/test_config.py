"""Tests for settings helpers."""

import pytest

from storefront_home.config import Settings, locale_context, storefront_endpoint


def test_endpoint_adds_scheme_and_version():
    settings = Settings(storefront_domain="shop.example.com/", storefront_api_version="2025-01")
    assert storefront_endpoint(settings) == "https://shop.example.com/api/2025-01/graphql.json"


def test_endpoint_requires_domain():
    with pytest.raises(ValueError):
        storefront_endpoint(Settings(storefront_domain=None))


def test_locale_context_upper_cases():
    settings = Settings(storefront_country="us", storefront_language=" en ")
    assert locale_context(settings) == {"country": "US", "language": "EN"}


def test_locale_context_empty():
    assert locale_context(Settings(storefront_country=None, storefront_language=None)) == {}
