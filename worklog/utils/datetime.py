"""Timestamp conversions shared by the models and repositories.

Rows store naive datetimes expressed in ``APP_TIMEZONE``. Everything above
the repositories works with aware values in that same zone.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo

from worklog.config import get_settings


@lru_cache(maxsize=8)
def _zone(name: str) -> tzinfo:
    return ZoneInfo(name)


def app_timezone() -> tzinfo:
    return _zone(get_settings().app_timezone)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Column default: the current app-local time without ``tzinfo``."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Express ``value`` in the app timezone.

    Naive values are read as app-local time, which is how they are stored.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=app_timezone())
    return value.astimezone(app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Convert ``value`` to the naive app-local form stored in the database."""

    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized else None
