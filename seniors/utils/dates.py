"""
Date helpers for registry and form dates, which arrive as loose strings.
"""

import re
from datetime import date, datetime
from typing import Optional

from django.utils import timezone


def parse_loose_date(value: str) -> Optional[date]:
    """
    Parse ``YYYY-MM-DD``, ``YYYY/MM/DD``, ``MM-DD-YYYY`` or ``MM/DD/YYYY``.

    A trailing time part (``"1950-01-01 00:00:00"``) is ignored, as is a
    ``T`` separated ISO timestamp. Returns None when nothing parses.
    """
    if not value:
        return None
    cleaned = str(value).strip().split(" ")[0].split("T")[0]
    parts = re.split(r"[-/]", cleaned)
    if len(parts) != 3:
        return None
    try:
        if len(parts[0]) == 4:
            year, month, day = (int(part) for part in parts)
        else:
            month, day, year = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError:
        return None


def calculate_age(birth_date: str, reference: Optional[date] = None) -> int:
    """Whole years between a birth date and ``reference`` (today by default); 0 if unparseable."""
    born = parse_loose_date(birth_date)
    if born is None:
        return 0
    today = reference or timezone.localdate()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return max(age, 0)


def format_date(value) -> str:
    """``"Month D, YYYY"`` for display; ``---`` when empty, the raw value when unparseable."""
    if not value:
        return "---"
    if isinstance(value, datetime):
        value = value.date()
    parsed = value if isinstance(value, date) else parse_loose_date(value)
    if parsed is None:
        return str(value)
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"
