"""Pure date normalization - one canonical instant for every date representation."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

logger = logging.getLogger(__name__)

DateLike = date | datetime | str


@dataclass(frozen=True)
class DateContext:
    """Snapshot of "now" shared by every decision in one evaluation pass."""

    today: datetime
    tomorrow: datetime
    day_after_tomorrow: datetime

    @classmethod
    def for_day(cls, day: date) -> "DateContext":
        today = datetime.combine(day, time.min, tzinfo=timezone.utc)
        return cls(
            today=today,
            tomorrow=today + timedelta(days=1),
            day_after_tomorrow=today + timedelta(days=2),
        )


def create_date_context(now: datetime | None = None) -> DateContext:
    """
    Build the date context for one categorization or sorting pass.

    The clock is read exactly once.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return DateContext.for_day(now.date())


def to_instant(value: DateLike | None) -> datetime | None:
    """
    Convert any supported date representation to an aware UTC datetime.

    Naive datetimes are read as UTC. Returns None for missing or unparseable
    input instead of raising.
    """
    if value is None:
        return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Ignoring unparseable date: {text!r}")
            return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        try:
            return value.astimezone(timezone.utc)
        except OverflowError:
            logger.debug(f"Ignoring date outside the representable UTC range: {value!r}")
            return None

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)

    logger.debug(f"Ignoring unsupported date type: {type(value).__name__}")
    return None


def normalize_date(value: DateLike | None) -> datetime | None:
    """Truncate a date to its UTC calendar day (midnight, tz-aware)."""
    instant = to_instant(value)
    if instant is None:
        return None
    return datetime.combine(instant.date(), time.min, tzinfo=timezone.utc)


def is_date_urgent(value: DateLike | None, context: DateContext) -> bool:
    """
    Anything before the day after tomorrow is urgent.

    The window is open-ended backwards: a date from last year is urgent too.
    """
    day = normalize_date(value)
    if day is None:
        return False
    return day < context.day_after_tomorrow


def compare_dates(a: DateLike | None, b: DateLike | None) -> int:
    """Compare two dates by calendar day. Unparseable dates sort last."""
    day_a = normalize_date(a)
    day_b = normalize_date(b)

    if day_a is None and day_b is None:
        return 0
    if day_a is None:
        return 1
    if day_b is None:
        return -1
    return (day_a > day_b) - (day_a < day_b)


def days_between(value: DateLike | None, context: DateContext) -> int | None:
    """Days from today until the date (negative if in the past)."""
    day = normalize_date(value)
    if day is None:
        return None
    return (day - context.today).days
