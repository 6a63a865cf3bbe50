"""Tests for homepage view builders."""

import logging

import pytest

from conftest import collection_node, image_node, product_node, variant_node
from storefront_home.core.swatches import ProductImagesMissingError
from storefront_home.core.views import (
    featured_collection_view,
    homepage_meta,
    product_card_view,
    product_card_views,
)
from storefront_home.schemas.storefront import Collection, Product


class TestProductCardView:
    """Tests for product_card_view."""

    def test_initial_images(self, scenario_product, red_url, red_secondary_url):
        card = product_card_view(scenario_product)
        assert card.url == "/products/canvas-tote"
        assert card.image.url == red_url
        assert card.image.alt_text == "Red"
        assert card.image.aspect_ratio == "1/1"
        assert card.hover_image.url == red_secondary_url
        assert card.hover_image.alt_text == "Red"
        assert card.selected_color == "Red"

    def test_swatches(self, scenario_product, red_url, red_secondary_url, blue_url):
        card = product_card_view(scenario_product)
        red, blue = card.swatches
        assert (red.value, red.image, red.hover_image, red.active) == ("Red", red_url, red_secondary_url, True)
        assert (blue.value, blue.image, blue.hover_image, blue.active) == ("Blue", blue_url, blue_url, False)
        assert blue.aria_label == "Blue"

    def test_prices(self, scenario_product):
        card = product_card_view(scenario_product)
        assert card.price.formatted == "$19.00"
        assert card.compare_at_price.formatted == "$25.00"
        assert card.on_sale is True

    def test_no_compare_at_amount(self):
        product = Product.model_validate(product_node(images=[image_node("A")], compare_at=""))
        card = product_card_view(product)
        assert card.compare_at_price is None
        assert card.on_sale is False

    def test_no_color_variants(self):
        product = Product.model_validate(product_node(
            images=[image_node("A")],
            variants=[variant_node(1, [("Size", "M")], "A")],
        ))
        card = product_card_view(product)
        assert card.swatches == []
        assert card.selected_color is None

    def test_swatch_without_image_shows_current_image(self):
        product = Product.model_validate(product_node(
            images=[image_node("A")],
            variants=[
                variant_node(1, [("Color", "Red")], "A"),
                variant_node(2, [("Color", "Blue")]),
            ],
        ))
        card = product_card_view(product)
        blue = card.swatches[1]
        assert blue.image == card.image.url
        assert blue.hover_image == card.image.url

    def test_zero_images_raise(self):
        with pytest.raises(ProductImagesMissingError):
            product_card_view(Product.model_validate(product_node(images=[])))


class TestProductCardViews:
    """Tests for the recommended grid."""

    def test_imageless_products_skipped(self, scenario_product, caplog):
        empty = Product.model_validate(product_node(handle="empty", images=[]))
        with caplog.at_level(logging.WARNING):
            cards = product_card_views([empty, scenario_product])
        assert [c.handle for c in cards] == ["canvas-tote"]
        assert "empty" in caplog.text

    def test_placeholder_used_when_configured(self):
        empty = Product.model_validate(product_node(handle="empty", images=[]))
        cards = product_card_views([empty], placeholder_url="https://example.com/placeholder.png")
        assert cards[0].image.url == "https://example.com/placeholder.png"


def test_featured_collection_view():
    view = featured_collection_view(Collection.model_validate(collection_node()))
    assert view.url == "/collections/summer"
    assert view.image.sizes == "100vw"
    assert view.image.width == 2400


def test_featured_collection_view_none():
    assert featured_collection_view(None) is None


def test_homepage_meta():
    assert [m.title for m in homepage_meta("Hydrogen")] == ["Hydrogen | Home"]
