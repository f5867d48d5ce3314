"""Helpers for calendar date normalization."""

from datetime import date, datetime


def coerce_date(value: date | str) -> date:
    """Normalize ISO date strings and datetimes to date values.

    Args:
        value: A date, a datetime or a YYYY-MM-DD string.

    Returns:
        date: The calendar day.

    Raises:
        ValueError: If the string is not a valid ISO calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def to_iso(value: date) -> str:
    """Return the YYYY-MM-DD representation of a date."""
    return value.isoformat()


__all__ = ["coerce_date", "to_iso"]
