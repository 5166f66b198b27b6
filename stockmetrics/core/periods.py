"""
Reporting periods.

A period token names a window relative to "now". Each token resolves to a
half-open interval ``[start, end)`` and selects the bucket granularity used
for trend charts.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from enum import Enum
from typing import Callable, Optional


class PeriodToken(str, Enum):
    TODAY = "today"
    THIS_WEEK = "this-week"
    THIS_MONTH = "this-month"
    PREVIOUS_MONTH = "previous-month"
    LAST_3_MONTHS = "last-3-months"
    LAST_6_MONTHS = "last-6-months"
    THIS_YEAR = "this-year"


class BucketGranularity(str, Enum):
    HOUR = "hour"
    WEEKDAY = "weekday"
    DAY_OF_MONTH = "day_of_month"
    SHORT_DATE = "short_date"


@dataclass(frozen=True)
class DateRange:
    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


PERIOD_LABELS = {
    PeriodToken.TODAY: "Today",
    PeriodToken.THIS_WEEK: "This Week",
    PeriodToken.THIS_MONTH: "This Month",
    PeriodToken.PREVIOUS_MONTH: "Previous Month",
    PeriodToken.LAST_3_MONTHS: "Last 3 Months",
    PeriodToken.LAST_6_MONTHS: "Last 6 Months",
    PeriodToken.THIS_YEAR: "This Year",
}

# rolling windows, in days back from now. A 30-day window spans the same
# day-of-month twice and a 365-day window the same "Mon D" twice; those
# boundary days share one bucket.
_ROLLING_DAYS = {
    PeriodToken.THIS_WEEK: 7,
    PeriodToken.THIS_MONTH: 30,
    PeriodToken.LAST_3_MONTHS: 90,
    PeriodToken.LAST_6_MONTHS: 180,
    PeriodToken.THIS_YEAR: 365,
}

_GRANULARITY = {
    PeriodToken.TODAY: BucketGranularity.HOUR,
    PeriodToken.THIS_WEEK: BucketGranularity.WEEKDAY,
    PeriodToken.THIS_MONTH: BucketGranularity.DAY_OF_MONTH,
    PeriodToken.PREVIOUS_MONTH: BucketGranularity.DAY_OF_MONTH,
    PeriodToken.LAST_3_MONTHS: BucketGranularity.SHORT_DATE,
    PeriodToken.LAST_6_MONTHS: BucketGranularity.SHORT_DATE,
    PeriodToken.THIS_YEAR: BucketGranularity.SHORT_DATE,
}

_WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_BUCKET_KEYS: dict[BucketGranularity, Callable[[datetime], str]] = {
    BucketGranularity.HOUR: lambda moment: "{:02d}:00".format(moment.hour),
    BucketGranularity.WEEKDAY: lambda moment: _WEEKDAY_NAMES[moment.weekday()],
    BucketGranularity.DAY_OF_MONTH: lambda moment: str(moment.day),
    BucketGranularity.SHORT_DATE: lambda moment: "{} {}".format(
        _MONTH_NAMES[moment.month - 1], moment.day
    ),
}


def parse_period(period) -> PeriodToken:
    """Raises ValueError for anything outside the closed token set."""
    if isinstance(period, PeriodToken):
        return period
    return PeriodToken(period)


def _midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _reference_now(now: Optional[datetime], tz: Optional[tzinfo]) -> datetime:
    if now is None:
        return datetime.now(tz) if tz is not None else datetime.now().astimezone()
    if now.tzinfo is None:
        return now.replace(tzinfo=tz) if tz is not None else now.astimezone()
    return now.astimezone(tz) if tz is not None else now


def resolve_date_range(period, now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> DateRange:
    token = parse_period(period)
    now = _reference_now(now, tz)

    if token is PeriodToken.TODAY:
        return DateRange(start=_midnight(now), end=now)

    if token is PeriodToken.PREVIOUS_MONTH:
        current_month_start = _midnight(now.replace(day=1))
        previous_month_start = (current_month_start - timedelta(days=1)).replace(day=1)
        return DateRange(start=previous_month_start, end=current_month_start)

    return DateRange(start=now - timedelta(days=_ROLLING_DAYS[token]), end=now)


def bucket_granularity(period) -> BucketGranularity:
    return _GRANULARITY[parse_period(period)]


def bucket_key(moment: datetime, granularity: BucketGranularity) -> str:
    return _BUCKET_KEYS[granularity](moment)


def period_label(period) -> str:
    return PERIOD_LABELS[parse_period(period)]


__all__ = [
    "BucketGranularity",
    "DateRange",
    "PERIOD_LABELS",
    "PeriodToken",
    "bucket_granularity",
    "bucket_key",
    "parse_period",
    "period_label",
    "resolve_date_range",
]
