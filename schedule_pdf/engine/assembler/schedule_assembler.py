"""
Document assembler: schedule grid to PDF bytes to output sink.

Runs formatter -> pagination -> object graph -> xref writer in one
synchronous pass. Nothing is retained between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional

from ...display_config import ShiftDisplayConfig
from ...exceptions import SinkUnavailableError
from ...export.sinks import OutputSink
from ...formatting.table_formatter import format_schedule
from ...models.page import Page
from ...models.schedule import ScheduleGrid
from ...options import ExportOptions
from ..pagination import PaginationEngine
from ..pdfcompiler.objects import PdfObjectGraphBuilder
from ..pdfcompiler.writer import PdfWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    """Outcome of one export."""

    filename: str
    data: bytes
    page_count: int
    object_count: int
    delivered: Any = None

    @property
    def size(self) -> int:
        return len(self.data)


class ScheduleAssembler:
    """Assembles schedule PDFs with fixed options and display configuration."""

    def __init__(self, options: Optional[ExportOptions] = None,
                 display_config: Optional[ShiftDisplayConfig] = None):
        self.options = options or ExportOptions()
        self.display_config = display_config

    def paginate(self, grid: ScheduleGrid, exported_at: datetime) -> List[Page]:
        """Format the grid and split it into pages."""
        options = self.options
        formatted = format_schedule(grid, options, exported_at, self.display_config)
        engine = PaginationEngine(
            page_capacity=options.lines_per_page,
            header=formatted.header_template(options.title_font_size),
            continuation_header=formatted.continuation_template(
                options.continuation_suffix, options.title_font_size),
            row_separator=formatted.separator,
            line_limit=options.page_line_count,
        )
        return engine.paginate(formatted.rows, formatted.legend_block)

    def render(self, grid: ScheduleGrid, exported_at: Optional[datetime] = None) -> ExportResult:
        """
        Build the PDF for a grid without delivering it.

        Args:
            grid: Schedule to render
            exported_at: Export timestamp (defaults to now); fixing it makes
                the output byte-identical across calls

        Returns:
            ExportResult with the PDF bytes
        """
        exported_at = exported_at or datetime.now().replace(microsecond=0)
        options = self.options

        pages = self.paginate(grid, exported_at)
        builder = PdfObjectGraphBuilder(
            page_size=options.page_size,
            origin=options.text_origin,
            font_name=options.font_name,
            font_size=options.font_size,
            leading=options.line_height,
        )
        document = builder.build(pages, title=pages[0].lines[0].text,
                                 created_at=exported_at, producer=options.producer)
        data = PdfWriter().write(document)

        logger.debug(f"Rendered schedule {grid.period_id}: {len(grid.people)} people, "
                     f"{len(pages)} pages, {document.object_count} objects, {len(data)} bytes")
        return ExportResult(
            filename=options.filename_for(grid.period_id),
            data=data,
            page_count=len(pages),
            object_count=document.object_count,
        )

    def export(self, grid: ScheduleGrid, sink: Optional[OutputSink],
               exported_at: Optional[datetime] = None) -> ExportResult:
        """
        Render a grid and hand the bytes to sink.

        Raises:
            SinkUnavailableError: If sink is missing or unavailable; raised
                before any rendering happens
        """
        if sink is None:
            raise SinkUnavailableError("No output sink available for PDF export")
        if not sink.is_available():
            raise SinkUnavailableError("Output sink is not available", type(sink).__name__)

        result = self.render(grid, exported_at)
        delivered = sink.deliver(result.filename, result.data)
        logger.info(f"Exported {result.filename} ({result.page_count} pages, {result.size:,} bytes)")
        return ExportResult(
            filename=result.filename,
            data=result.data,
            page_count=result.page_count,
            object_count=result.object_count,
            delivered=delivered,
        )
