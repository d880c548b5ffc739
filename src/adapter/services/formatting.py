"""Money, quantity and date formatting for rendered invoices

Presentation only: the calculation engine always works on raw Decimals.
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext

SUPPORTED_CURRENCIES = ["USD", "EUR", "GBP", "JPY", "CAD", "AUD", "INR", "CNY", "CHF"]

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "CA$",
    "AUD": "A$",
    "INR": "₹",
    "CNY": "CN¥",
}

# Currencies without minor units
ZERO_DECIMAL_CURRENCIES = {"JPY"}


def format_currency(amount, currency: str) -> str:
    """
    Format an amount with its currency symbol, e.g. $1,234.56 or -€10.00

    Codes without a known symbol are prefixed with the code itself
    ("CHF 1,234.56").
    """
    places = Decimal("1") if currency in ZERO_DECIMAL_CURRENCIES else Decimal("0.01")
    value = Decimal(str(amount))
    with localcontext() as ctx:
        # Room for every integer digit plus the minor units
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        value = value.quantize(places, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    digits = f"{value.copy_abs():,.0f}" if places == 1 else f"{value.copy_abs():,.2f}"

    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol:
        return f"{sign}{symbol}{digits}"
    return f"{sign}{currency} {digits}"


def format_number(value) -> str:
    """Plain number without trailing zeros, e.g. 2.50 -> 2.5, 40.000 -> 40"""
    text = f"{Decimal(str(value)):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_date(value: str) -> str:
    """ISO date (YYYY-MM-DD) as 'Jun 06, 2025'; anything else is returned unchanged"""
    if not value:
        return ""
    try:
        return datetime.strptime(value, "%Y-%m-%d").strftime("%b %d, %Y")
    except ValueError:
        return value
