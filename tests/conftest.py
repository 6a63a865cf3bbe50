"""Shared fixtures: storefront payloads shaped like the GraphQL responses."""

import pytest

from storefront_home.schemas.storefront import Product

CDN = "https://cdn.shopify.com/s/files/1/0001"


def money(amount="19.0", currency="USD"):
    return {"amount": amount, "currencyCode": currency}


def image_node(alt, url=None, width=1000, height=1000):
    return {
        "id": f"gid://shopify/ProductImage/{alt}",
        "url": url or f"{CDN}/{alt.lower()}.jpg",
        "altText": alt,
        "width": width,
        "height": height,
    }


def variant_node(variant_id, options, image_alt=None):
    return {
        "id": f"gid://shopify/ProductVariant/{variant_id}",
        "selectedOptions": [{"name": k, "value": v} for k, v in options],
        "image": (
            {"url": f"{CDN}/{image_alt.lower()}.jpg", "altText": image_alt}
            if image_alt else None
        ),
    }


def product_node(handle="tote", images=None, variants=None, compare_at="25.0", price="19.0"):
    return {
        "id": f"gid://shopify/Product/{handle}",
        "title": handle.title(),
        "handle": handle,
        "vendor": "Hydrogen",
        "priceRange": {
            "minVariantPrice": money(price),
            "maxVariantPrice": money(price),
        },
        "compareAtPriceRange": {
            "minVariantPrice": money(compare_at),
            "maxVariantPrice": money(compare_at),
        },
        "images": {"nodes": images if images is not None else []},
        "variants": {"nodes": variants if variants is not None else []},
    }


def collection_node(handle="summer"):
    return {
        "id": f"gid://shopify/Collection/{handle}",
        "title": handle.title(),
        "handle": handle,
        "image": image_node("Summer banner", width=2400, height=800),
    }


def scenario_node():
    """Red has a secondary shot, Blue does not."""
    return product_node(
        handle="canvas-tote",
        images=[image_node("Red"), image_node("Red-secondary"), image_node("Blue")],
        variants=[
            variant_node(1, [("Color", "Red")], "Red"),
            variant_node(2, [("Color", "Blue")], "Blue"),
        ],
    )


@pytest.fixture
def scenario_product():
    return Product.model_validate(scenario_node())


@pytest.fixture
def red_url():
    return f"{CDN}/red.jpg"


@pytest.fixture
def red_secondary_url():
    return f"{CDN}/red-secondary.jpg"


@pytest.fixture
def blue_url():
    return f"{CDN}/blue.jpg"
