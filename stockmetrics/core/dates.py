import logging
import os
from datetime import date, datetime, time, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

_LOCALTIME_FILE = "/etc/localtime"


def _local_zone() -> tzinfo:
    """The host's zone with its DST rules, not just today's UTC offset."""
    tz_name = os.environ.get("TZ", "").lstrip(":").strip()
    if tz_name:
        try:
            return ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("TZ=%s is not an IANA zone name; trying %s", tz_name, _LOCALTIME_FILE)
    if os.path.exists(_LOCALTIME_FILE):
        with open(_LOCALTIME_FILE, "rb") as handle:
            return ZoneInfo.from_file(handle, key="localtime")
    logger.warning("No tz database entry for the local zone; using the current UTC offset")
    return datetime.now().astimezone().tzinfo


def resolve_timezone(mode: str | None) -> tzinfo:
    """Map a REPORTING_TZ value to a tzinfo ("local", "utc" or an IANA name)."""
    key = (mode or "local").strip()
    if key.lower() == "utc":
        return timezone.utc
    if key.lower() == "local":
        return _local_zone()
    return ZoneInfo(key)


def normalize_datetime(value):
    """Coerce a stored timestamp into an aware datetime.

    Naive values are treated as UTC, which is how the SQL store writes them.
    ISO strings and plain dates are accepted; anything else yields None.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value_text = value.strip()
        if not value_text:
            return None
        try:
            value = datetime.fromisoformat(value_text)
        except ValueError:
            return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    return None


def to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
