"""Italian calendar helpers for schedule periods (``YYYY-MM``)."""

from __future__ import annotations

import calendar
import re
from datetime import datetime
from typing import Optional, Tuple

MONTH_NAMES = (
    "gennaio", "febbraio", "marzo", "aprile", "maggio", "giugno",
    "luglio", "agosto", "settembre", "ottobre", "novembre", "dicembre",
)

MONTH_ABBREVIATIONS = (
    "gen", "feb", "mar", "apr", "mag", "giu",
    "lug", "ago", "set", "ott", "nov", "dic",
)

_PERIOD_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def parse_period(period_id: str) -> Optional[Tuple[int, int]]:
    """Return ``(year, month)`` for a valid ``YYYY-MM`` id, otherwise None."""
    if not period_id:
        return None
    match = _PERIOD_PATTERN.match(period_id.strip())
    if not match:
        return None
    year, month = int(match.group(1)), int(match.group(2))
    if not (2000 <= year <= 2100 and 1 <= month <= 12):
        return None
    return year, month


def is_valid_period(period_id: str) -> bool:
    return parse_period(period_id) is not None


def days_in_month(period_id: str) -> int:
    """Number of days in the period, 0 when the id is not a month."""
    parsed = parse_period(period_id)
    if parsed is None:
        return 0
    return calendar.monthrange(*parsed)[1]


def month_label(period_id: str) -> str:
    """Human label such as ``ottobre 2026``; falls back to the raw id."""
    parsed = parse_period(period_id)
    if parsed is None:
        return period_id
    year, month = parsed
    return f"{MONTH_NAMES[month - 1]} {year}"


def format_timestamp(moment: datetime) -> str:
    """Format an export timestamp as ``18 ott 2026, 12:43``."""
    return f"{moment.day} {MONTH_ABBREVIATIONS[moment.month - 1]} {moment.year}, {moment:%H:%M}"
