"""Date/time formatting in the Brazilian locale style"""

import logging
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


def resolve_time_zone(name: str | None) -> tzinfo:
    """Load an IANA time zone, falling back to UTC when it is unknown"""
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid display time zone '%s'; falling back to UTC", name)
        return timezone.utc


def to_local(value: datetime, tz: tzinfo) -> datetime:
    # Naive timestamps come back from SQLite; they were stored as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz)


def format_datetime_br(value: datetime | None, tz: tzinfo) -> str:
    """Like ``toLocaleString("pt-BR")``: 19/10/2026, 14:05:09"""
    if value is None:
        return ""
    return to_local(value, tz).strftime("%d/%m/%Y, %H:%M:%S")


def format_date_br(value: datetime | None, tz: tzinfo) -> str:
    """Like ``toLocaleDateString("pt-BR")``: 19/10/2026"""
    if value is None:
        return ""
    return to_local(value, tz).strftime("%d/%m/%Y")
