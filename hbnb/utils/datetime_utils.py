"""
Centralized DateTime Utilities
==============================

Timestamps for records are produced and rendered here so every entity
uses the timezone configured by TIMEZONE in hbnb.core.config.

Functions:
- now(): aware datetime in the configured timezone
- to_iso(): render a datetime for a response (seconds precision)
- ensure_aware(): attach UTC to naive datetimes read back from storage
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional

from hbnb.core.config import get_settings

logger = logging.getLogger(__name__)


def _configured_timezone() -> tzinfo:
    """Timezone named by the settings; UTC when the name is unknown."""
    name = get_settings().timezone
    if name.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(name)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{name}', falling back to UTC")
        return dt_timezone.utc


def now() -> datetime:
    """
    Current time for created_at / updated_at.

    Returns:
        timezone-aware datetime
    """
    return datetime.now(_configured_timezone())


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Render a record timestamp, e.g. "2025-01-31T09:15:00Z".

    Naive values are read as the configured timezone; UTC is written
    with a 'Z' suffix.

    Args:
        dt: datetime to render, or None

    Returns:
        ISO 8601 string without microseconds, or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_configured_timezone())

    rendered = dt.replace(microsecond=0).isoformat()
    if dt.tzinfo == dt_timezone.utc:
        return rendered.replace("+00:00", "Z")
    return rendered


def ensure_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Attach UTC to a naive datetime.

    MongoDB hands datetimes back naive but they are always stored in UTC.
    """
    if dt is None or dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=dt_timezone.utc)
