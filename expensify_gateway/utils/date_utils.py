"""Date manipulation utilities"""

import calendar
from datetime import date, datetime, timedelta
from typing import List
from zoneinfo import ZoneInfo

from expensify_gateway.config import settings


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def reporting_today(timezone: str | None = None) -> date:
    """Current calendar date in the reporting timezone"""
    return datetime.now(ZoneInfo(timezone or settings.reporting_timezone)).date()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def trailing_window(today: date, days: int = 7) -> List[date]:
    """The `days` most recent dates ending at today, newest first"""
    return [today - timedelta(days=i) for i in range(days)]


def is_same_month(day: date, reference: date) -> bool:
    return day.year == reference.year and day.month == reference.month


def diff_days(later: date, earlier: date) -> int:
    return (later - earlier).days
