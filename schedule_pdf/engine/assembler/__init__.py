"""Document assembly: formatter, pagination, PDF compiler and sink."""

from .schedule_assembler import ExportResult, ScheduleAssembler

__all__ = ["ExportResult", "ScheduleAssembler"]
