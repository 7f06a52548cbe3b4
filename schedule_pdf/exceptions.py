"""Custom exceptions for the schedule PDF synthesizer."""

from typing import Optional


class SchedulePdfError(Exception):
    """Base exception for schedule PDF errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class SinkUnavailableError(SchedulePdfError):
    """Exception raised when no output sink can receive the document."""

    pass


class ScheduleDataError(SchedulePdfError):
    """Exception raised when schedule or display config input is malformed."""

    pass


class LayoutError(SchedulePdfError):
    """Exception raised for an impossible pagination configuration."""

    pass


class CompilationError(SchedulePdfError):
    """Exception raised during PDF object graph construction or serialization."""

    pass
