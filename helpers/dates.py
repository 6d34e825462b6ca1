"""Calendar date helpers. Dates are naive ISO calendar dates, never local time."""

from collections.abc import Iterable
from datetime import date, timedelta

MONDAY = 0


def parse_iso(value: str) -> date:
    """Parse 'YYYY-MM-DD'. Raises ValueError on anything else."""
    return date.fromisoformat(value.strip())


def is_monday(d: date) -> bool:
    return d.weekday() == MONDAY


def has_consecutive(dates: Iterable[date]) -> bool:
    """True if any two dates are exactly one day apart."""
    ordered = sorted(dates)
    return any(b - a == timedelta(days=1) for a, b in zip(ordered, ordered[1:]))


def upcoming_dates(today: date, horizon: int) -> list[str]:
    """Next `horizon` days after today (exclusive) as ISO strings."""
    return [(today + timedelta(days=i)).isoformat() for i in range(1, horizon + 1)]


def toggle_date(selection: Iterable[str], value: str) -> frozenset[str]:
    """Selection with `value` added, or removed if already present."""
    current = frozenset(selection)
    return current - {value} if value in current else current | {value}
