"""Text formatting of schedules: display codes, labels, dates and the table."""

from .dates import days_in_month, format_timestamp, is_valid_period, month_label
from .labels import resolve_shift_label
from .shift_format import display_code

__all__ = [
    "days_in_month",
    "display_code",
    "format_timestamp",
    "is_valid_period",
    "month_label",
    "resolve_shift_label",
]
