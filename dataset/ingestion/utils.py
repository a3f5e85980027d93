"""
Utilities for data ingestion
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional

import pytz

from dataset.models import localize_wall_clock


def parse_local_datetime(datetime_str: str, timezone_str: str) -> datetime:
    """
    Parse a local wall-clock datetime string and convert it to UTC

    Args:
        datetime_str: ISO format local datetime (e.g., "2024-03-15T08:30:00")
        timezone_str: IANA timezone of the airport the time belongs to

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValueError: if the string is not an ISO datetime
        pytz.UnknownTimeZoneError: if the timezone is unknown
    """
    dt = datetime.fromisoformat(datetime_str.strip().replace('Z', '+00:00'))

    # Dataset times are local to the airport; honour an explicit offset if present
    if dt.tzinfo is None:
        dt = localize_wall_clock(dt, pytz.timezone(timezone_str))

    return dt.astimezone(pytz.utc)


def parse_price(price_value: Any) -> Decimal:
    """
    Parse a price into an exact Decimal

    Raises:
        ValueError: if the value is not a finite, non-negative number
    """
    try:
        price = Decimal(str(price_value).strip())
    except InvalidOperation as e:
        raise ValueError(f"invalid price {price_value!r}") from e

    if not price.is_finite() or price < 0:
        raise ValueError(f"invalid price {price_value!r}")
    return price


def is_valid_timezone(timezone_str: str) -> bool:
    try:
        pytz.timezone(timezone_str)
    except pytz.UnknownTimeZoneError:
        return False
    return True


def text_or_none(record: Dict, key: str) -> Optional[str]:
    """
    Read a field as stripped text, treating null and blank as missing
    """
    value = record.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def missing_fields(record: Dict, keys: Iterable[str]) -> List[str]:
    return [key for key in keys if text_or_none(record, key) is None]
