"""
Calendar windowing for routes and reports.

Every function takes the reference instant explicitly so results never depend
on the wall clock; only current_time() reads it, and it is a FastAPI
dependency that tests override.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from ..config import APP_TIMEZONE
from .constants import WEEKDAY_NAMES

logger = logging.getLogger(__name__)

# YYYY-MM-DD, optionally followed by a time part which is ignored
_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$")


@dataclass(frozen=True)
class Window:
    """Closed date interval [start, end]"""

    start: date
    end: date

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end


def current_time() -> datetime:
    """Now in the configured application timezone"""
    return datetime.now(ZoneInfo(APP_TIMEZONE))


def week_window(offset: int, now: datetime) -> Window:
    """Monday..Sunday of the ISO week containing now + offset weeks"""
    base = now.date() + timedelta(weeks=offset)
    start = base - timedelta(days=base.weekday())
    return Window(start=start, end=start + timedelta(days=6))


def month_window(offset: int, now: datetime) -> Window:
    """First..last calendar day of the month offset months from now's month"""
    start = now.date().replace(day=1) + relativedelta(months=offset)
    end = start + relativedelta(months=1) - timedelta(days=1)
    return Window(start=start, end=end)


def parse_service_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a YYYY-MM-DD string taking its components literally.

    Returns None for missing or malformed values instead of raising.
    """
    if not isinstance(value, str):
        return None
    match = _DATE_PATTERN.match(value.strip())
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def is_within(value: Optional[str], window: Window) -> bool:
    """Inclusive membership of a date string in window; malformed dates never match"""
    parsed = parse_service_date(value)
    if parsed is None:
        logger.warning(f"⚠️ Invalid date ignored: {value!r}")
        return False
    return window.contains(parsed)


def trailing_month_start(now: datetime) -> date:
    """History keeps dates strictly after this day"""
    return now.date() - relativedelta(months=1)


def weekday_name(now: datetime) -> str:
    return WEEKDAY_NAMES[now.weekday()]


def today_string(now: datetime) -> str:
    return now.date().isoformat()
