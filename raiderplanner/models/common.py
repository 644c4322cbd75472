# File: raiderplanner/models/common.py

from datetime import date, datetime
from typing import Optional, Union

import pytz

from raiderplanner.core.config_manager import Config


def local_today(tz_name: Optional[str] = None) -> date:
    """
    Current calendar date.

    Uses the given IANA zone, falling back to Config.TIMEZONE and then to
    the system's local date.
    """
    tz_name = tz_name or Config.TIMEZONE
    if tz_name:
        return datetime.now(pytz.timezone(tz_name)).date()
    return date.today()


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """Robustly turn a date, datetime or date string into a date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    for fmt, pattern in Config.DATE_PATTERNS:
        if pattern.match(text):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
    # ISO timestamps ("2026-11-18T09:00:00Z")
    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    except ValueError:
        return None
