"""Tests for money formatting."""

import pytest

from storefront_home.core.money import format_money, has_compare_at_price, money_view, parse_amount
from storefront_home.schemas.storefront import Money


@pytest.mark.parametrize(
    "amount,currency,expected",
    [
        ("19.0", "USD", "$19.00"),
        ("1234.5", "EUR", "€1,234.50"),
        ("0.005", "GBP", "£0.01"),
        ("1900.0", "JPY", "¥1,900"),
        ("10", "CHF", "CHF 10.00"),
        ("-3.5", "USD", "-$3.50"),
    ],
)
def test_format_money(amount, currency, expected):
    assert format_money(amount, currency) == expected


def test_unparseable_amount_is_passed_through():
    assert format_money("n/a", "USD") == "n/a USD"


def test_parse_amount():
    assert parse_amount("") is None
    assert parse_amount(None) is None
    assert str(parse_amount(" 2.50 ")) == "2.50"


def test_money_view():
    view = money_view(Money(amount="5.0", currency_code="CAD"))
    assert view.formatted == "CA$5.00"
    assert view.amount == "5.0"


def test_has_compare_at_price():
    assert has_compare_at_price(Money(amount="25.0", currency_code="USD"))
    assert not has_compare_at_price(Money(amount="", currency_code="USD"))
    assert not has_compare_at_price(None)
