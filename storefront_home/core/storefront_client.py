"""
Storefront GraphQL API client.
"""

import logging
from typing import Optional, Dict, List, Any
import httpx
from pydantic import ValidationError

from storefront_home.core.queries import FEATURED_COLLECTION_QUERY, RECOMMENDED_PRODUCTS_QUERY
from storefront_home.core.security import sanitize_dict_for_logging, sanitize_string_for_logging
from storefront_home.schemas.storefront import Collection, Product

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-Shopify-Storefront-Access-Token"


class StorefrontError(Exception):
    """Base exception for Storefront API errors."""
    pass


class StorefrontClient:
    """
    Async Storefront API client.

    Read-only: every call is a single GraphQL POST, no retries.
    The locale context (country/language) is merged into every query's
    variables.
    """

    def __init__(
        self,
        endpoint: str,
        access_token: str,
        country: Optional[str] = None,
        language: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize Storefront client.

        Args:
            endpoint: GraphQL endpoint (https://shop.example.com/api/2024-10/graphql.json)
            access_token: Public storefront access token
            country: CountryCode for @inContext (e.g. US)
            language: LanguageCode for @inContext (e.g. EN)
            timeout: Transport timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        if not access_token:
            raise ValueError("Storefront access token is required")

        self.endpoint = endpoint
        self.access_token = access_token
        self.locale: Dict[str, str] = {}
        if country:
            self.locale["country"] = country
        if language:
            self.locale["language"] = language

        self.client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport
        )

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            TOKEN_HEADER: self.access_token,
        }

    def _clean(self, text: str) -> str:
        return sanitize_string_for_logging(text, (self.access_token,))

    async def query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a GraphQL query.

        Args:
            query: GraphQL document
            variables: Query variables (locale context is added)

        Returns:
            The "data" object of the response.

        Raises:
            StorefrontError: On transport errors, non-2xx status, invalid
                JSON or a GraphQL "errors" payload.
        """
        payload_variables = {**self.locale, **(variables or {})}
        headers = self._headers()
        logger.debug(
            f"Storefront query to {self.endpoint}: "
            f"variables={payload_variables}, headers={sanitize_dict_for_logging(headers)}"
        )

        try:
            response = await self.client.post(
                self.endpoint,
                json={"query": query, "variables": payload_variables},
                headers=headers
            )
        except httpx.TimeoutException as e:
            raise StorefrontError(f"Timeout: {self._clean(str(e))}")
        except httpx.RequestError as e:
            raise StorefrontError(f"Request error: {self._clean(str(e))}")

        if response.status_code != 200:
            raise StorefrontError(
                f"HTTP {response.status_code}: {self._clean(response.text[:200])}"
            )

        try:
            body = response.json()
        except ValueError:
            raise StorefrontError(f"Invalid JSON response: {self._clean(response.text[:200])}")

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            raise StorefrontError(f"GraphQL error: {self._clean(messages)}")

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise StorefrontError("Response has no data")

        return data

    async def get_featured_collection(self) -> Optional[Collection]:
        """
        Fetch the most recently updated collection.

        Returns:
            Collection or None if the store has no collections.
        """
        data = await self.query(FEATURED_COLLECTION_QUERY)
        nodes = (data.get("collections") or {}).get("nodes") or []
        if not nodes:
            return None

        try:
            return Collection.model_validate(nodes[0])
        except ValidationError as e:
            raise StorefrontError(f"Unexpected collection shape: {e}")

    async def get_recommended_products(self) -> List[Product]:
        """
        Fetch up to four most recently updated products.

        Returns:
            Products in storefront order.
        """
        data = await self.query(RECOMMENDED_PRODUCTS_QUERY)
        nodes = (data.get("products") or {}).get("nodes") or []

        try:
            return [Product.model_validate(node) for node in nodes]
        except ValidationError as e:
            raise StorefrontError(f"Unexpected product shape: {e}")

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "StorefrontClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
