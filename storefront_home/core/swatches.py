"""
Swatch-driven image selection for product cards.

A product's variants yield color options; hovering or clicking a swatch
swaps the card's primary image, and hovering the card itself shows the
secondary shot. The secondary of an image is the image whose alt text is
the primary's alt text plus "-secondary".

State is an immutable record. Every transition returns a new record built
through `_select`, which recomputes the secondary image from the new alt
text, so the pair never drifts apart.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from storefront_home.schemas.storefront import Image, Product, Variant

COLOR_OPTION_NAME = "Color"
SECONDARY_SUFFIX = "-secondary"


class ProductImagesMissingError(ValueError):
    """Product has no images and no placeholder was supplied."""
    pass


@dataclass(frozen=True)
class ColorOption:
    """Color swatch derived from a variant."""
    value: str
    image: str
    alt_text: str


@dataclass(frozen=True)
class SwatchState:
    """Image selection state of one product card."""
    selected_image: str
    selected_alt_text: str
    secondary_image: str = ""
    selected_color: Optional[str] = None
    hovered_color: Optional[str] = None
    is_hovered: bool = False


def color_option_for(variant: Variant) -> Optional[ColorOption]:
    """Return the variant's color option, or None if it declares no Color."""
    for option in variant.selected_options:
        if option.name == COLOR_OPTION_NAME:
            image = variant.image
            return ColorOption(
                value=option.value,
                image=image.url if image else "",
                alt_text=image.alt_text if image else "",
            )
    return None


def extract_color_options(variants: Sequence[Variant]) -> List[ColorOption]:
    """
    One color option per variant carrying a "Color" selected option.

    Variant order is preserved and options sharing a value are kept.
    """
    options = (color_option_for(variant) for variant in variants)
    return [option for option in options if option is not None]


def secondary_image_url(images: Sequence[Image], alt_text: str, fallback: str) -> str:
    """
    Look up the secondary image for an alt text.

    Args:
        images: Product image list (small, scanned linearly)
        alt_text: Alt text of the primary image
        fallback: URL returned when no secondary exists

    Returns:
        URL of the image whose alt text is alt_text + "-secondary", else fallback.
    """
    wanted = f"{alt_text}{SECONDARY_SUFFIX}"
    for image in images:
        if image.alt_text == wanted:
            return image.url
    return fallback


def displayed_image(state: SwatchState) -> str:
    """Image actually rendered on the card."""
    return state.secondary_image if state.is_hovered else state.selected_image


class SwatchSelector:
    """
    Transitions of the image-selection state machine for one product.

    Color options are extracted when the selector is built; build a new
    selector whenever the product changes.
    """

    def __init__(self, product: Product, placeholder_image: Optional[Image] = None):
        """
        Args:
            product: Product whose images and variants drive the selection
            placeholder_image: Image used as primary when the product has none

        Raises:
            ProductImagesMissingError: If the product has no images and no
                placeholder is given.
        """
        if not product.images and placeholder_image is None:
            raise ProductImagesMissingError(
                f"Product {product.handle} has no images"
            )
        self.product = product
        self.images: List[Image] = list(product.images)
        self.default_image: Image = self.images[0] if self.images else placeholder_image
        self.color_options: List[ColorOption] = extract_color_options(product.variants)

    def option_for(self, value: Optional[str]) -> Optional[ColorOption]:
        """First color option with the given value."""
        if value is None:
            return None
        for option in self.color_options:
            if option.value == value:
                return option
        return None

    def secondary_image_for(self, alt_text: str, selected_image: str) -> str:
        return secondary_image_url(self.images, alt_text, selected_image)

    def _select(self, state: SwatchState, image: str, alt_text: str, **changes) -> SwatchState:
        # Options without an image keep the current selection.
        if not image:
            image, alt_text = state.selected_image, state.selected_alt_text
        if not image:
            image, alt_text = self.default_image.url, self.default_image.alt_text
        return replace(
            state,
            selected_image=image,
            selected_alt_text=alt_text,
            secondary_image=self.secondary_image_for(alt_text, image),
            **changes,
        )

    def initial_state(self) -> SwatchState:
        """First image selected, first color (if any) selected, card not hovered."""
        first_color = self.color_options[0].value if self.color_options else None
        state = SwatchState(
            selected_image=self.default_image.url,
            selected_alt_text=self.default_image.alt_text,
            selected_color=first_color,
        )
        return self._select(state, state.selected_image, state.selected_alt_text)

    def hover_enter(self, state: SwatchState, option: ColorOption) -> SwatchState:
        """Preview a swatch without changing the selected color."""
        return self._select(state, option.image, option.alt_text, hovered_color=option.value)

    def hover_leave(self, state: SwatchState) -> SwatchState:
        """Restore the selected color's image, if a color is selected."""
        option = self.option_for(state.selected_color)
        if option is None:
            return replace(state, hovered_color=None)
        return self._select(state, option.image, option.alt_text, hovered_color=None)

    def click(self, state: SwatchState, option: ColorOption) -> SwatchState:
        """Select a swatch."""
        return self._select(state, option.image, option.alt_text, selected_color=option.value)

    def card_enter(self, state: SwatchState) -> SwatchState:
        return replace(state, is_hovered=True)

    def card_leave(self, state: SwatchState) -> SwatchState:
        return replace(state, is_hovered=False)
