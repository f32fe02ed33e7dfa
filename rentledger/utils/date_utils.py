"""Date manipulation utilities"""

from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

from rentledger.domain.exceptions import ValidationError


def canonical_zone(name: str | None = None) -> tzinfo:
    """Resolve the zone used for all calendar-day comparisons"""
    if name is None:
        from rentledger.config import settings

        name = settings.timezone
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def to_calendar_date(value, field: str = "date", zone: tzinfo | None = None) -> date:
    """
    Normalise a date-like value to a calendar day.

    Accepts date, datetime or ISO-8601 strings ("2024-03-01" or
    "2024-03-01T10:00:00Z"). Aware datetimes are converted to the canonical
    zone first; naive ones are taken as already being in it.

    Raises:
        ValidationError: value is missing or cannot be parsed
    """
    if value is None or value == "":
        raise ValidationError(f"Missing required field: {field}")

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(zone or canonical_zone())
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            # fromisoformat only accepts a trailing "Z" from 3.11 on
            return to_calendar_date(datetime.fromisoformat(text.replace("Z", "+00:00")), field, zone)
        except ValueError as e:
            raise ValidationError(f"Unparsable {field}: {value!r}") from e

    raise ValidationError(f"Unparsable {field}: {value!r}")


def today_in(zone: tzinfo | None = None) -> date:
    """Current calendar day in the canonical zone"""
    return datetime.now(zone or canonical_zone()).date()


def days_between(later: date, earlier: date) -> int:
    """Signed whole days from earlier to later"""
    return (later - earlier).days


def month_start(day: date) -> date:
    return day.replace(day=1)


def add_months(day: date, months: int) -> date:
    """Shift by whole months, keeping the first of the month"""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def months_elapsed(start: date, end: date) -> int:
    """
    Number of monthly rent periods that have fallen due from start through end.

    The start month counts once end's day-of-month reaches start's, so a
    tenancy starting 2024-01-15 has 1 period due on 2024-01-15 and 2 on
    2024-02-15.
    """
    if end < start:
        return 0
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day >= start.day:
        months += 1
    return months
