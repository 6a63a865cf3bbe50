"""
Storefront API data schemas.

Parsed from the camelCase GraphQL payload and immutable afterwards.
Connection fields ({"nodes": [...]}) are flattened into plain lists.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _unwrap_nodes(value: Any) -> Any:
    """Flatten a GraphQL connection into its node list."""
    if value is None:
        return []
    if isinstance(value, dict):
        return value.get("nodes") or []
    return value


class Money(BaseModel):
    """Amount with its ISO 4217 currency code."""
    amount: str
    currency_code: str = Field(alias="currencyCode")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class PriceRange(BaseModel):
    """Min/max variant price of a product."""
    min_variant_price: Money = Field(alias="minVariantPrice")
    max_variant_price: Money = Field(alias="maxVariantPrice")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Image(BaseModel):
    """Product or collection image. Alt text links primary and secondary shots."""
    id: Optional[str] = None
    url: str
    alt_text: str = Field("", alias="altText")
    width: Optional[int] = None
    height: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("alt_text", mode="before")
    @classmethod
    def none_alt_to_empty(cls, v: Optional[str]) -> str:
        return v or ""


class SelectedOption(BaseModel):
    """One axis of variation, e.g. Color=Red."""
    name: str
    value: str

    model_config = ConfigDict(frozen=True)


class Variant(BaseModel):
    """Purchasable configuration of a product."""
    id: str
    selected_options: List[SelectedOption] = Field(default_factory=list, alias="selectedOptions")
    image: Optional[Image] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Product(BaseModel):
    """Recommended product as returned by the storefront."""
    id: str
    title: str
    handle: str
    vendor: str = ""
    price_range: PriceRange = Field(alias="priceRange")
    compare_at_price_range: PriceRange = Field(alias="compareAtPriceRange")
    images: List[Image] = Field(default_factory=list)
    variants: List[Variant] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("images", "variants", mode="before")
    @classmethod
    def flatten_connection(cls, v: Any) -> Any:
        return _unwrap_nodes(v)


class Collection(BaseModel):
    """Featured collection."""
    id: str
    title: str
    handle: str
    image: Optional[Image] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)
