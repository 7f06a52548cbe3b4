"""
schedule_pdf - monthly shift schedules rendered to PDF without a PDF library.
"""

from .version import __version__
from .api import build_schedule_pdf, export_schedule_pdf, load_schedule
from .display_config import ShiftDisplayConfig
from .engine.assembler import ExportResult, ScheduleAssembler
from .exceptions import (
    CompilationError,
    LayoutError,
    ScheduleDataError,
    SchedulePdfError,
    SinkUnavailableError,
)
from .export.sinks import FileSink, MemorySink, OutputSink
from .models import Person, ScheduleGrid
from .options import ExportOptions

__all__ = [
    "__version__",
    "build_schedule_pdf",
    "export_schedule_pdf",
    "load_schedule",
    "CompilationError",
    "ExportOptions",
    "ExportResult",
    "FileSink",
    "LayoutError",
    "MemorySink",
    "OutputSink",
    "Person",
    "ScheduleAssembler",
    "ScheduleDataError",
    "ScheduleGrid",
    "SchedulePdfError",
    "ShiftDisplayConfig",
    "SinkUnavailableError",
]
