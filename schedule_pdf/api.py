"""
High-level API for schedule PDF export.

Example:
    >>> from schedule_pdf import load_schedule, export_schedule_pdf, FileSink
    >>>
    >>> grid = load_schedule("turni-2026-10.json")
    >>> result = export_schedule_pdf(grid, FileSink("out"))
    >>> result.filename
    'schedule-2026-10.pdf'
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .display_config import ShiftDisplayConfig
from .engine.assembler import ExportResult, ScheduleAssembler
from .exceptions import ScheduleDataError
from .export.sinks import OutputSink
from .models.schedule import ScheduleGrid
from .options import ExportOptions

logger = logging.getLogger(__name__)

__all__ = [
    "build_schedule_pdf",
    "export_schedule_pdf",
    "load_schedule",
]

GridLike = Union[ScheduleGrid, Mapping[str, Any]]


def _as_grid(grid: GridLike) -> ScheduleGrid:
    if isinstance(grid, ScheduleGrid):
        return grid
    return ScheduleGrid.from_dict(grid)


def load_schedule(path: Union[str, Path]) -> ScheduleGrid:
    """
    Load a schedule JSON file.

    Raises:
        ScheduleDataError: If the file cannot be read or is malformed
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ScheduleDataError("Cannot read schedule file", f"{path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ScheduleDataError("Invalid JSON in schedule file", f"{path}: {e}") from e
    return ScheduleGrid.from_dict(data)


def build_schedule_pdf(grid: GridLike, options: Optional[ExportOptions] = None,
                       display_config: Optional[ShiftDisplayConfig] = None,
                       exported_at: Optional[datetime] = None) -> bytes:
    """
    Render a schedule to PDF bytes.

    Args:
        grid: ScheduleGrid or its JSON dict
        options: Export options
        display_config: Shift display configuration for legend labels
        exported_at: Export timestamp (defaults to now)

    Returns:
        PDF file content
    """
    assembler = ScheduleAssembler(options, display_config)
    return assembler.render(_as_grid(grid), exported_at).data


def export_schedule_pdf(grid: GridLike, sink: Optional[OutputSink],
                        options: Optional[ExportOptions] = None,
                        display_config: Optional[ShiftDisplayConfig] = None,
                        exported_at: Optional[datetime] = None) -> ExportResult:
    """
    Render a schedule and deliver it to sink.

    Raises:
        SinkUnavailableError: If sink is None or not available
    """
    assembler = ScheduleAssembler(options, display_config)
    return assembler.export(_as_grid(grid), sink, exported_at)
