"""
Homepage view builders.

Turn storefront data into the views handed to the renderer. Product cards
are built from the swatch state machine so the card image, the hover image
and every swatch's image agree with what the client would compute.
"""

import logging
from typing import List, Optional

from storefront_home.core.image_resolver import (
    FEATURED_COLLECTION_SIZES,
    PRODUCT_CARD_ASPECT_RATIO,
    PRODUCT_CARD_SIZES,
    image_view,
    image_view_for,
)
from storefront_home.core.money import has_compare_at_price, money_view
from storefront_home.core.swatches import (
    ProductImagesMissingError,
    SwatchSelector,
    displayed_image,
)
from storefront_home.schemas.common import MetaTag
from storefront_home.schemas.home import (
    FeaturedCollectionView,
    ProductCardView,
    SwatchView,
)
from storefront_home.schemas.storefront import Collection, Image, Product

logger = logging.getLogger(__name__)


def collection_url(handle: str) -> str:
    return f"/collections/{handle}"


def product_url(handle: str) -> str:
    return f"/products/{handle}"


def homepage_meta(site_title: str) -> List[MetaTag]:
    return [MetaTag(title=f"{site_title} | Home")]


def featured_collection_view(collection: Optional[Collection]) -> Optional[FeaturedCollectionView]:
    """Banner view for the featured collection, None if there is none."""
    if collection is None:
        return None

    image = None
    if collection.image:
        image = image_view_for(collection.image, sizes=FEATURED_COLLECTION_SIZES)

    return FeaturedCollectionView(
        id=collection.id,
        title=collection.title,
        handle=collection.handle,
        url=collection_url(collection.handle),
        image=image
    )


def _card_image(url: str, alt_text: str):
    return image_view(
        url,
        alt_text,
        sizes=PRODUCT_CARD_SIZES,
        aspect_ratio=PRODUCT_CARD_ASPECT_RATIO
    )


def product_card_view(product: Product, placeholder_image: Optional[Image] = None) -> ProductCardView:
    """
    Card view for a recommended product in its initial selection state.

    Raises:
        ProductImagesMissingError: If the product has no images and no
            placeholder is given.
    """
    selector = SwatchSelector(product, placeholder_image)
    state = selector.initial_state()
    hovered = selector.card_enter(state)

    swatches = []
    for option in selector.color_options:
        clicked = selector.click(state, option)
        swatches.append(SwatchView(
            value=option.value,
            image=clicked.selected_image,
            hover_image=clicked.secondary_image,
            alt_text=option.alt_text,
            aria_label=option.alt_text,
            active=option.value == state.selected_color
        ))

    compare_at = product.compare_at_price_range.min_variant_price
    on_sale = has_compare_at_price(compare_at)

    # Alt text follows the selection, not the secondary shot.
    return ProductCardView(
        id=product.id,
        title=product.title,
        handle=product.handle,
        vendor=product.vendor,
        url=product_url(product.handle),
        image=_card_image(displayed_image(state), state.selected_alt_text),
        hover_image=_card_image(displayed_image(hovered), hovered.selected_alt_text),
        price=money_view(product.price_range.min_variant_price),
        compare_at_price=money_view(compare_at) if on_sale else None,
        on_sale=on_sale,
        selected_color=state.selected_color,
        swatches=swatches
    )


def product_card_views(products: List[Product], placeholder_url: Optional[str] = None) -> List[ProductCardView]:
    """
    Card views for the recommended grid.

    Products without images are skipped (with a warning) unless a
    placeholder URL is configured.
    """
    placeholder = Image(url=placeholder_url, alt_text="") if placeholder_url else None

    cards = []
    for product in products:
        try:
            cards.append(product_card_view(product, placeholder))
        except ProductImagesMissingError as e:
            logger.warning(f"Skipping product card: {e}")
    return cards
