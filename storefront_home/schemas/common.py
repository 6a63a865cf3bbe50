"""
Common schemas shared by every endpoint.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = True
    storefront_configured: bool = False


class ErrorResponse(BaseModel):
    """Page-level error, e.g. the featured collection could not be loaded."""
    detail: str


class MetaTag(BaseModel):
    """Document meta entry for the page head."""
    title: str
