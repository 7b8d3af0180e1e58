"""Calendar day keys (YYYY-MM-DD) and date arithmetic."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

DATE_FORMAT = "%Y-%m-%d"


def today(timezone_name: str | None = None) -> str:
    """Return today's day key in local time, or in the given IANA timezone."""
    if timezone_name:
        return format_date(datetime.now(tz=ZoneInfo(timezone_name)))
    return format_date(date.today())


def format_date(value: date) -> str:
    """Return the day key for a date or datetime, using its own calendar day."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def parse_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD day key.

    The result is a plain calendar date, so no timezone shift can move it to
    a neighbouring day.
    """
    try:
        parsed = datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid date key: {value!r}") from exc
    if parsed.isoformat() != value:
        raise ValueError(f"Invalid date key: {value!r}")
    return parsed


def add_days(date_key: str, days: int) -> str:
    """Return the day key shifted by a number of days."""
    return format_date(parse_date(date_key) + timedelta(days=days))
