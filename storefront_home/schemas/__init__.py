"""
API schemas - storefront payloads and homepage views.
"""

from storefront_home.schemas.storefront import (
    Money,
    PriceRange,
    Image,
    SelectedOption,
    Variant,
    Product,
    Collection,
)
from storefront_home.schemas.home import (
    ImageView,
    MoneyView,
    SwatchView,
    ProductCardView,
    FeaturedCollectionView,
    HomepageResponse,
)

__all__ = [
    "Money",
    "PriceRange",
    "Image",
    "SelectedOption",
    "Variant",
    "Product",
    "Collection",
    "ImageView",
    "MoneyView",
    "SwatchView",
    "ProductCardView",
    "FeaturedCollectionView",
    "HomepageResponse",
]
