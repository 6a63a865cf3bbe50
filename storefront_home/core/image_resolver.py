"""
Image resolver for storefront CDN images.
Normalizes image data for the frontend image renderer.
"""

from typing import Optional, Sequence
from urllib.parse import urlparse, parse_qsl, urlencode, urlunparse

from storefront_home.schemas.home import ImageView
from storefront_home.schemas.storefront import Image

SRCSET_WIDTHS = (200, 400, 600, 800, 1000, 1200, 1600, 2000)
CDN_HOSTS = ("cdn.shopify.com",)

FEATURED_COLLECTION_SIZES = "100vw"
PRODUCT_CARD_SIZES = "(min-width: 45em) 20vw, 50vw"
PRODUCT_CARD_ASPECT_RATIO = "1/1"


def is_cdn_url(url: str) -> bool:
    """Whether the URL is served by a CDN that resizes via ?width=."""
    if not url:
        return False
    host = urlparse(url).netloc.lower()
    return host in CDN_HOSTS or host.endswith(".myshopify.com")


def sized_url(url: str, width: int, height: Optional[int] = None) -> str:
    """
    Add width (and height) query params to a CDN URL.

    Non-CDN URLs are returned unchanged.
    """
    if not is_cdn_url(url):
        return url

    parts = urlparse(url)
    params = [(k, v) for k, v in parse_qsl(parts.query) if k not in ("width", "height")]
    params.append(("width", str(width)))
    if height:
        params.append(("height", str(height)))
    return urlunparse(parts._replace(query=urlencode(params)))


def _aspect_height(width: int, aspect_ratio: Optional[str]) -> Optional[int]:
    if not aspect_ratio:
        return None
    try:
        w, h = (float(x) for x in aspect_ratio.split("/"))
    except ValueError:
        return None
    if w <= 0:
        return None
    return int(round(width * h / w))


def build_srcset(
    url: str,
    max_width: Optional[int] = None,
    aspect_ratio: Optional[str] = None,
    widths: Sequence[int] = SRCSET_WIDTHS
) -> str:
    """
    Build a srcset for a CDN image.

    Args:
        url: Original image URL
        max_width: Intrinsic width; larger candidates are skipped
        aspect_ratio: "w/h" crop applied to every candidate
        widths: Candidate widths

    Returns:
        srcset string, or "" for non-CDN URLs
    """
    if not is_cdn_url(url):
        return ""

    candidates = [w for w in widths if not max_width or w <= max_width] or [widths[0]]
    return ", ".join(
        f"{sized_url(url, w, _aspect_height(w, aspect_ratio))} {w}w"
        for w in candidates
    )


def image_view(
    url: str,
    alt_text: str = "",
    width: Optional[int] = None,
    height: Optional[int] = None,
    sizes: Optional[str] = None,
    aspect_ratio: Optional[str] = None
) -> ImageView:
    """Create an ImageView for a URL/alt pair."""
    return ImageView(
        url=url,
        alt_text=alt_text or "",
        width=width,
        height=height,
        srcset=build_srcset(url, width, aspect_ratio),
        sizes=sizes,
        aspect_ratio=aspect_ratio
    )


def image_view_for(image: Image, sizes: Optional[str] = None, aspect_ratio: Optional[str] = None) -> ImageView:
    """Create an ImageView from a storefront image."""
    return image_view(
        image.url,
        image.alt_text,
        width=image.width,
        height=image.height,
        sizes=sizes,
        aspect_ratio=aspect_ratio
    )
