from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str, field_name: str = "date") -> date:
    """Parse a YYYY-MM-DD string into a date.

    A full ISO timestamp (``2024-01-31T08:00:00Z``) is accepted and its time
    dropped; any other trailing text is rejected.
    """
    raw = str(value).strip()
    try:
        if "T" in raw:
            return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def parse_month(value: str | None) -> date:
    """Parse ``YYYY-MM`` or ``YYYY-MM-DD`` into the first day of that month.

    An empty value means the current month.
    """
    if not value or not str(value).strip():
        return today().replace(day=1)

    raw = str(value).strip()
    for fmt in ("%Y-%m-%d", "%Y-%m"):
        try:
            return datetime.strptime(raw, fmt).date().replace(day=1)
        except ValueError:
            continue
    raise ValidationError("month must be in YYYY-MM-01 format")


def month_bounds(month_start: date) -> tuple[date, date]:
    last_day = calendar.monthrange(month_start.year, month_start.month)[1]
    return month_start.replace(day=1), month_start.replace(day=last_day)


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()
