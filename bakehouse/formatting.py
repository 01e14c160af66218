"""
Display formatting with fixed vi-VN conventions.

- Currency: VND, no decimals, "." thousands separator, " ₫" suffix
- Date/time: "HH:MM dd/mm/YYYY" in the shop's timezone
- Missing values render as NOT_AVAILABLE
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Optional

from .dates import to_report_time
from .numbers import to_decimal

NOT_AVAILABLE = "(không có)"
CURRENCY_SYMBOL = "₫"


def format_number(value: Any) -> str:
    """Group an amount by thousands with "." and no decimal places."""
    amount = to_decimal(value) or Decimal("0")
    rounded = int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    grouped = f"{abs(rounded):,}".replace(",", ".")
    return f"-{grouped}" if rounded < 0 else grouped


def format_quantity(value: Any) -> str:
    """Format a quantity keeping up to 2 decimals: "1.250,5"."""
    amount = to_decimal(value) or Decimal("0")
    rounded = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    whole, _, fraction = f"{abs(rounded):,.2f}".partition(".")
    text = whole.replace(",", ".")
    fraction = fraction.rstrip("0")
    if fraction:
        text = f"{text},{fraction}"
    return f"-{text}" if rounded < 0 else text


def format_currency(value: Any) -> str:
    """
    Format a VND amount.

    >>> format_currency(150000)
    '150.000 ₫'
    """
    return f"{format_number(value)} {CURRENCY_SYMBOL}"


def format_date(value: Optional[datetime]) -> str:
    """Format a datetime as "HH:MM dd/mm/YYYY", or NOT_AVAILABLE for None."""
    if value is None:
        return NOT_AVAILABLE
    return to_report_time(value).strftime("%H:%M %d/%m/%Y")


def format_day(value: Optional[date]) -> str:
    """Format a calendar day as "dd/mm/YYYY"."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, datetime):
        value = to_report_time(value).date()
    return value.strftime("%d/%m/%Y")


def field_text(record: Any, path: str, default: str = NOT_AVAILABLE) -> str:
    """
    Render a (possibly nested) field with a fallback.

    Walks a dotted attribute path such as ``"customer.phone"``. Any missing
    link, None, or empty string yields ``default``.
    """
    value = record
    for name in path.split("."):
        if value is None:
            return default
        if isinstance(value, dict):
            value = value.get(name)
        else:
            value = getattr(value, name, None)
    if value is None or value == "":
        return default
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
