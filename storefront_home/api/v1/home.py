"""
Homepage API endpoints.
"""

import asyncio
import json
import logging
from typing import Any, List, Optional, Set

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from storefront_home.config import Settings
from storefront_home.deps import get_storefront_client, settings_dependency
from storefront_home.core.homepage import HomepageLoader
from storefront_home.core.storefront_client import StorefrontClient, StorefrontError
from storefront_home.core.views import featured_collection_view, homepage_meta, product_card_views
from storefront_home.schemas.common import ErrorResponse, MetaTag
from storefront_home.schemas.home import HomepageResponse, ProductCardView
from storefront_home.schemas.storefront import Product

logger = logging.getLogger(__name__)

router = APIRouter()

LOADING_PLACEHOLDER = "Loading..."


def _cards(products: Optional[List[Product]], settings: Settings) -> Optional[List[ProductCardView]]:
    if products is None:
        return None
    return product_card_views(products, settings.placeholder_image_url)


def _sse(event: str, data: Any) -> str:
    """Format one Server-Sent Event."""
    return f"event: {event}\ndata: {json.dumps(data)}\n\n"


# Clients waiting for their deferred fetch before closing
_closing: Set["asyncio.Task"] = set()


async def _close_after(client: StorefrontClient, pending: "asyncio.Task") -> None:
    try:
        await asyncio.shield(pending)
    finally:
        await client.close()


def _close_when_settled(client: StorefrontClient, pending: "asyncio.Task") -> "asyncio.Task":
    """
    Close the client once the deferred fetch has finished; never cancel it.

    The returned task is tracked until done, so callers may await it
    (shielded) or drop it.
    """
    closer = asyncio.ensure_future(_close_after(client, pending))
    _closing.add(closer)
    closer.add_done_callback(_closing.discard)
    return closer


async def _load(loader: HomepageLoader, client: StorefrontClient):
    try:
        return await loader.load()
    except StorefrontError as e:
        await client.close()
        logger.error(f"Featured collection failed to load: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error loading featured collection: {str(e)}"
        )
    except Exception:
        await client.close()
        raise


@router.get("/meta", response_model=List[MetaTag])
async def get_meta(settings: Settings = Depends(settings_dependency)):
    """Document meta for the homepage."""
    return homepage_meta(settings.site_title)


@router.get(
    "",
    response_model=HomepageResponse,
    responses={502: {"model": ErrorResponse}, 503: {"model": ErrorResponse}}
)
async def get_homepage(
    client: StorefrontClient = Depends(get_storefront_client),
    settings: Settings = Depends(settings_dependency)
):
    """
    Fully resolved homepage.

    recommended_products is null when recommendations failed to load.
    """
    loader = HomepageLoader(client)
    data = await _load(loader, client)

    try:
        products = await data.recommended()
    finally:
        await asyncio.shield(_close_when_settled(client, data.recommended_products))

    return HomepageResponse(
        meta=homepage_meta(settings.site_title),
        featured_collection=featured_collection_view(data.featured_collection),
        recommended_products=_cards(products, settings)
    )


@router.get("/stream", responses={502: {"model": ErrorResponse}, 503: {"model": ErrorResponse}})
async def stream_homepage(
    client: StorefrontClient = Depends(get_storefront_client),
    settings: Settings = Depends(settings_dependency)
):
    """
    Stream the homepage via Server-Sent Events.

    The featured collection is loaded before the stream starts, so its
    failure is an HTTP error. Events, in order: meta, featured_collection,
    recommended_products_pending, recommended_products (list or null).
    """
    loader = HomepageLoader(client)
    data = await _load(loader, client)

    async def event_generator():
        """Generate SSE events."""
        try:
            meta = homepage_meta(settings.site_title)
            yield _sse("meta", [m.model_dump(mode="json") for m in meta])

            featured = featured_collection_view(data.featured_collection)
            yield _sse("featured_collection", featured.model_dump(mode="json") if featured else None)

            yield _sse("recommended_products_pending", {"placeholder": LOADING_PLACEHOLDER})

            cards = _cards(await data.recommended(), settings)
            yield _sse(
                "recommended_products",
                [card.model_dump(mode="json") for card in cards] if cards is not None else None
            )
        finally:
            await asyncio.shield(_close_when_settled(client, data.recommended_products))

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        }
    )
