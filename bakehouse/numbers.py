"""
Numeric coercion for loosely typed store documents.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Coerce a document value to Decimal.

    Accepts ints, floats, Decimals and numeric strings. Returns None for
    missing, blank, boolean, non-finite or unparseable values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return None
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not result.is_finite():
        return None
    return result


def to_int(value: Any, default: int = 0) -> int:
    """Coerce a document value to int, truncating decimals."""
    number = to_decimal(value)
    if number is None:
        return default
    return int(number)
