"""
Homepage data assembly.

Two independent fetches: the featured collection is critical and awaited
before anything renders; recommended products are deferred and resolved
in the background. A deferred failure is logged and becomes None. Neither
fetch is ever cancelled once issued.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

from storefront_home.core.storefront_client import StorefrontClient
from storefront_home.schemas.storefront import Collection, Product

logger = logging.getLogger(__name__)


@dataclass
class CriticalData:
    """Data the page cannot render without."""
    featured_collection: Optional[Collection] = None


@dataclass
class HomepageData:
    """Critical data plus the pending recommendations."""
    featured_collection: Optional[Collection]
    recommended_products: "asyncio.Task[Optional[List[Product]]]"

    async def recommended(self) -> Optional[List[Product]]:
        """
        Wait for the recommendations.

        Cancelling the waiter does not cancel the fetch itself.
        """
        return await asyncio.shield(self.recommended_products)


class HomepageLoader:
    """Loads the homepage from the storefront."""

    def __init__(self, client: StorefrontClient):
        self.client = client

    async def load_critical(self) -> CriticalData:
        """Fetch the featured collection. Errors propagate to the caller."""
        collection = await self.client.get_featured_collection()
        return CriticalData(featured_collection=collection)

    async def _recommended_or_none(self) -> Optional[List[Product]]:
        try:
            products = await self.client.get_recommended_products()
        except Exception:
            logger.exception("Failed to load recommended products")
            return None
        logger.debug(f"Loaded {len(products)} recommended products")
        return products

    def load_deferred(self) -> "asyncio.Task[Optional[List[Product]]]":
        """
        Start the recommended-products fetch without waiting for it.

        Must be called from a running event loop. The task never raises.
        """
        return asyncio.ensure_future(self._recommended_or_none())

    async def load(self) -> HomepageData:
        """
        Issue both fetches and wait for the critical one only.

        Raises:
            Whatever the featured-collection fetch raised; the deferred
            fetch is allowed to settle first.
        """
        deferred = self.load_deferred()
        try:
            critical = await self.load_critical()
        except Exception:
            await asyncio.shield(deferred)
            raise

        return HomepageData(
            featured_collection=critical.featured_collection,
            recommended_products=deferred
        )
