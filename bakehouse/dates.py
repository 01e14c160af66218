"""
Date normalization for store values.

The order store mixes representations of the same logical field: ISO
strings, epoch numbers, native datetimes and database timestamp objects.
``parse_date_value`` collapses all of them into one result type:

    ParsedDate(value=datetime)   - the value could be read
    Unparseable(raw=...)         - it could not; callers exclude it

Calendar-day comparisons happen in the shop's timezone (UTC+7, no DST).
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Union

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

REPORT_TZ = timezone(timedelta(hours=7), "ICT")

# Zero-argument conversion methods exposed by timestamp-like objects
TIMESTAMP_CONVERTERS = ("to_datetime", "to_date", "toDate", "ToDatetime")


@dataclass(frozen=True)
class ParsedDate:
    value: datetime


@dataclass(frozen=True)
class Unparseable:
    raw: Any = None


DateResult = Union[ParsedDate, Unparseable]


def _from_string(raw: str) -> DateResult:
    text = raw.strip()
    if not text:
        return Unparseable(raw)
    try:
        return ParsedDate(isoparse(text))
    except (ValueError, OverflowError):
        return Unparseable(raw)


def _from_epoch(raw: Union[int, float]) -> DateResult:
    """Epoch values are milliseconds, as written by the web client."""
    if isinstance(raw, float) and not math.isfinite(raw):
        return Unparseable(raw)
    try:
        return ParsedDate(datetime.fromtimestamp(raw / 1000, tz=timezone.utc))
    except (ValueError, OverflowError, OSError):
        return Unparseable(raw)


def _from_timestamp_object(raw: Any) -> DateResult:
    for name in TIMESTAMP_CONVERTERS:
        converter = getattr(raw, name, None)
        if callable(converter):
            break
    else:
        return Unparseable(raw)

    try:
        converted = converter()
    except Exception as e:
        logger.debug(f"Timestamp conversion {name}() failed: {e}")
        return Unparseable(raw)

    if isinstance(converted, datetime):
        return ParsedDate(converted)
    if isinstance(converted, date):
        return ParsedDate(datetime.combine(converted, datetime.min.time()))
    return Unparseable(raw)


def parse_date_value(value: Any) -> DateResult:
    """
    Normalize a tri-form date value.

    Args:
        value: datetime/date, ISO-8601 string, epoch milliseconds, or an
            object with a zero-argument conversion method
            (``to_datetime``, ``to_date``, ``toDate``, ``ToDatetime``)

    Returns:
        ParsedDate on success, Unparseable for empty input, invalid
        strings/numbers, or a conversion that raises
    """
    if value is None or value == "":
        return Unparseable(value)
    if isinstance(value, datetime):
        return ParsedDate(value)
    if isinstance(value, date):
        return ParsedDate(datetime.combine(value, datetime.min.time()))
    if isinstance(value, str):
        return _from_string(value)
    if isinstance(value, bool):
        return Unparseable(value)
    if isinstance(value, (int, float)):
        return _from_epoch(value)
    return _from_timestamp_object(value)


def parse_date(value: Any) -> Optional[datetime]:
    """Like ``parse_date_value`` but returns the datetime or None."""
    result = parse_date_value(value)
    if isinstance(result, ParsedDate):
        return result.value
    return None


def to_report_time(value: datetime) -> datetime:
    """
    Express a datetime in the shop's timezone.

    Naive datetimes are taken to be shop-local already.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(REPORT_TZ)


def calendar_date(value: Any) -> Optional[date]:
    """
    Truncate a date value to its calendar day in the shop's timezone.

    Accepts anything ``parse_date_value`` accepts. Returns None when the
    value is unparseable.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    parsed = parse_date(value)
    if parsed is None:
        return None
    return to_report_time(parsed).date()
