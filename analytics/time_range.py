from __future__ import annotations

import calendar
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class TimeRange(str, Enum):
    """Period selector for the stats screen."""
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    ALL_TIME = "MAX"

    def cutoff(self, now: datetime) -> Optional[datetime]:
        """Earliest played_at included in the range, or None for all-time."""
        months = _RANGE_MONTHS.get(self)
        if months is None:
            return None
        return subtract_months(now, months)


_RANGE_MONTHS = {
    TimeRange.THREE_MONTHS: 3,
    TimeRange.SIX_MONTHS: 6,
    TimeRange.ONE_YEAR: 12,
}


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def subtract_months(moment: datetime, months: int) -> datetime:
    """Step back whole calendar months, clamping the day to the target month's length."""
    index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)
