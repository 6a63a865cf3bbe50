"""
Money formatting for product cards.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from storefront_home.schemas.home import MoneyView
from storefront_home.schemas.storefront import Money

CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "CN¥",
    "INR": "₹",
    "KRW": "₩",
}

# Currencies without minor units
ZERO_DECIMAL_CURRENCIES = {"JPY", "KRW", "VND", "CLP", "ISK"}


def parse_amount(amount: Optional[str]) -> Optional[Decimal]:
    """
    Parse a storefront amount string.

    Returns:
        Decimal, or None for empty/invalid amounts.
    """
    if amount is None or str(amount).strip() == "":
        return None
    try:
        return Decimal(str(amount).strip())
    except InvalidOperation:
        return None


def format_money(amount: Optional[str], currency_code: str) -> str:
    """
    Format amount for display, e.g. ("19.5", "USD") -> "$19.50".

    Unknown currencies are prefixed with their code; unparseable amounts
    are returned as given.
    """
    code = (currency_code or "").upper()
    value = parse_amount(amount)
    if value is None:
        return f"{amount or ''} {code}".strip()

    places = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
    quantum = Decimal(1).scaleb(-places)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    number = f"{abs(rounded):,.{places}f}"
    sign = "-" if rounded < 0 else ""

    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{sign}{symbol}{number}"
    return f"{sign}{code} {number}"


def money_view(money: Money) -> MoneyView:
    """Build the view handed to the money renderer."""
    return MoneyView(
        amount=money.amount,
        currency_code=money.currency_code,
        formatted=format_money(money.amount, money.currency_code)
    )


def has_compare_at_price(money: Optional[Money]) -> bool:
    """Compare-at price is shown only when the storefront returned an amount."""
    return money is not None and bool((money.amount or "").strip())
