from datetime import date, datetime, time, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def parse_session_date(value) -> datetime | None:
    """Parse a loosely typed session date into a datetime.

    Accepts datetime, date (midnight), and ISO 8601 strings such as
    '2025-03-04', '2025-03-04T19:30', '2025-03-04T19:30:00Z'.
    Returns None for anything that is missing or does not parse.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        return None
    s = value.strip()
    if s == "":
        return None
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return None


def get_zone(tz_name: str | None) -> tzinfo | None:
    """Resolve a configured timezone name.

    'local', empty or unknown names give None, meaning the system timezone.
    """
    if not tz_name or tz_name == "local":
        return None
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def now_local(tz_name: str | None = None) -> datetime:
    """Current time as an aware datetime in the configured (or system) tz."""
    tz = get_zone(tz_name)
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)


def to_local_datetime(dt: datetime, tz: tzinfo | None = None) -> datetime:
    """Express `dt` as local wall-clock time for calendar bucketing.

    - Naive datetimes are already local wall time and are returned unchanged.
    - Aware datetimes are converted to `tz`, or to the system tz if None.
    """
    if dt.tzinfo is None:
        return dt
    if tz is None:
        return dt.astimezone()
    return dt.astimezone(tz)


def year_bounds(reference: datetime) -> tuple[datetime, datetime]:
    """Jan 1 00:00 of the reference year and of the following year."""
    start = datetime(reference.year, 1, 1, tzinfo=reference.tzinfo)
    end = datetime(reference.year + 1, 1, 1, tzinfo=reference.tzinfo)
    return start, end


def elapsed_year_fraction(reference: datetime) -> float:
    """Share of the reference year that has passed, floored at 0.

    Uses POSIX timestamps so DST shifts count as real elapsed time; naive
    datetimes are read in the system timezone.
    """
    start, end = year_bounds(reference)
    elapsed = max(0.0, reference.timestamp() - start.timestamp())
    total = end.timestamp() - start.timestamp()
    return elapsed / total
