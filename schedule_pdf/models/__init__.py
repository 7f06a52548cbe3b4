"""Data models."""

from .page import Page, PageLine
from .schedule import DayCell, Person, ScheduleGrid

__all__ = ["DayCell", "Page", "PageLine", "Person", "ScheduleGrid"]
