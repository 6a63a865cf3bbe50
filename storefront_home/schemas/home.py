"""
Homepage view schemas - what the renderer receives.

The service only decides which URL, alt text and amount each slot gets;
image and money rendering stay on the client.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from storefront_home.schemas.common import MetaTag


class ImageView(BaseModel):
    """Image handed to the image renderer."""
    url: str
    alt_text: str = ""
    width: Optional[int] = None
    height: Optional[int] = None
    srcset: str = ""
    sizes: Optional[str] = None
    aspect_ratio: Optional[str] = None


class MoneyView(BaseModel):
    """Amount handed to the money renderer."""
    amount: str
    currency_code: str
    formatted: str


class SwatchView(BaseModel):
    """Color swatch button for a product card."""
    value: str
    image: str = Field(..., description="Card image once this swatch is clicked or hovered")
    hover_image: str = Field(..., description="Card image while the card itself is hovered")
    alt_text: str = ""
    aria_label: str = ""
    active: bool = False


class ProductCardView(BaseModel):
    """Recommended product card with swatch-driven image selection"""
    id: str
    title: str
    handle: str
    vendor: str = ""
    url: str
    image: ImageView
    hover_image: ImageView
    price: MoneyView
    compare_at_price: Optional[MoneyView] = None
    on_sale: bool = False
    selected_color: Optional[str] = None
    swatches: List[SwatchView] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "id": "gid://shopify/Product/1",
                "title": "Canvas Tote",
                "handle": "canvas-tote",
                "vendor": "Hydrogen",
                "url": "/products/canvas-tote",
                "image": {"url": "https://cdn.shopify.com/red.jpg", "alt_text": "Red"},
                "hover_image": {"url": "https://cdn.shopify.com/red-2.jpg", "alt_text": "Red"},
                "price": {"amount": "19.0", "currency_code": "USD", "formatted": "$19.00"},
                "compare_at_price": None,
                "on_sale": False,
                "selected_color": "Red",
                "swatches": []
            }
        }


class FeaturedCollectionView(BaseModel):
    """Featured collection banner."""
    id: str
    title: str
    handle: str
    url: str
    image: Optional[ImageView] = None


class HomepageResponse(BaseModel):
    """Fully resolved homepage."""
    meta: List[MetaTag]
    featured_collection: Optional[FeaturedCollectionView] = None
    recommended_products: Optional[List[ProductCardView]] = Field(
        None,
        description="Null when recommendations could not be loaded"
    )
