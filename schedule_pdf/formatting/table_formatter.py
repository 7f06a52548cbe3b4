"""
Content formatter: turns a schedule grid into column-aligned text.

Column widths are computed once from the whole dataset, so every row of the
table has identical widths. No pagination decisions are made here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..display_config import ShiftDisplayConfig
from ..models.page import PageLine
from ..options import ExportOptions
from .dates import format_timestamp, month_label
from .labels import resolve_shift_label
from .shift_format import display_code

if TYPE_CHECKING:
    from ..models.schedule import ScheduleGrid

logger = logging.getLogger(__name__)

COLUMN_GAP = " "
LEGEND_DASH = "–"


class Align(Enum):
    START = "start"
    END = "end"


@dataclass(frozen=True)
class ColumnSpec:
    """Sizing of one table column.

    ``width`` is the rendered width; cells longer than ``max_width`` are
    truncated before padding.
    """

    header: str
    max_width: int
    min_width: int
    align: Align = Align.START

    def __post_init__(self):
        if self.min_width < 1 or self.max_width < self.min_width:
            raise ValueError(f"invalid column bounds for {self.header!r}: "
                             f"min={self.min_width} max={self.max_width}")

    @property
    def width(self) -> int:
        return self.max_width

    def render(self, text: str, marker: str) -> str:
        cell = truncate_cell(text, self.max_width, marker)
        if self.align is Align.END:
            return cell.rjust(self.width)
        return cell.ljust(self.width)


@dataclass
class FormattedSchedule:
    """Raw text produced by the formatter, ready for pagination."""

    title: str
    subtitle: str
    columns: List[ColumnSpec]
    header: str
    separator: str
    rows: List[str] = field(default_factory=list)
    legend: List[str] = field(default_factory=list)
    legend_title: List[str] = field(default_factory=list)

    @property
    def table_width(self) -> int:
        return len(self.separator)

    @property
    def legend_block(self) -> List[str]:
        """Legend title lines followed by the code lines, as placed on the page."""
        return self.legend_title + self.legend

    def header_template(self, title_size: Optional[float] = None) -> List[PageLine]:
        """Full first-page header: title, timestamp, blank, table header, separator."""
        return [
            PageLine(self.title, emphasis=title_size),
            PageLine(self.subtitle),
            PageLine(""),
            PageLine(self.header),
            PageLine(self.separator),
        ]

    def continuation_template(self, suffix: str, title_size: Optional[float] = None) -> List[PageLine]:
        """Shorter header repeated on every page after the first."""
        return [
            PageLine(f"{self.title} {suffix}", emphasis=title_size),
            PageLine(self.header),
            PageLine(self.separator),
        ]


def truncate_cell(text: str, max_width: int, marker: str = "…") -> str:
    """Cut text longer than max_width to max_width characters ending in marker.

    Text exactly at the limit is returned unchanged.
    """
    if len(text) <= max_width:
        return text
    return text[: max_width - 1] + marker


def format_cell(codes: Sequence[str], delimiter: str = ", ", placeholder: str = "-") -> str:
    """Join display codes of one day cell; empty cells render as placeholder."""
    shown = [code for code in (display_code(raw) for raw in codes) if code]
    if not shown:
        return placeholder
    return delimiter.join(shown)


def compute_columns(grid: "ScheduleGrid", options: ExportOptions) -> List[ColumnSpec]:
    """Size the name column from the data and give every day column the fixed width."""
    longest_name = max((len(person.name) for person in grid.people), default=0)
    name_width = max(len(options.name_header), longest_name)
    name_width = min(max(name_width, options.min_name_width), options.max_name_width)

    columns = [ColumnSpec(options.name_header, max_width=name_width, min_width=options.min_name_width)]
    for day in range(1, grid.day_count + 1):
        columns.append(ColumnSpec(str(day), max_width=options.day_width,
                                  min_width=options.day_width, align=Align.END))
    return columns


def format_legend(grid: "ScheduleGrid", config: Optional[ShiftDisplayConfig] = None) -> List[str]:
    """One ``<code> – <label>`` line per legend code."""
    lines = []
    for code in grid.legend_codes():
        label = resolve_shift_label(code, grid.shift_labels, config)
        lines.append(f"{code} {LEGEND_DASH} {label}")
    return lines


def format_schedule(grid: "ScheduleGrid", options: Optional[ExportOptions] = None,
                    exported_at: Optional[datetime] = None,
                    config: Optional[ShiftDisplayConfig] = None) -> FormattedSchedule:
    """Format the whole grid into table rows and a legend block.

    Args:
        grid: Schedule to format
        options: Export options (defaults used when None)
        exported_at: Timestamp shown under the title (defaults to now)
        config: Optional shift display configuration for legend labels

    Returns:
        FormattedSchedule with header, separator, rows and legend lines
    """
    options = options or ExportOptions()
    exported_at = exported_at or datetime.now()

    columns = compute_columns(grid, options)
    marker = options.truncation_marker

    header = COLUMN_GAP.join(column.render(column.header, marker) for column in columns)
    separator = "-" * len(header)

    rows = []
    for index, person in enumerate(grid.people):
        cells = [columns[0].render(person.name, marker)]
        for day_index, column in enumerate(columns[1:]):
            text = format_cell(grid.cell(index, day_index), options.cell_delimiter, options.empty_cell)
            cells.append(column.render(text, marker))
        rows.append(COLUMN_GAP.join(cells))

    title = f"Turni {month_label(grid.period_id)}"
    legend = format_legend(grid, config)
    # Spacer and heading above the codes; omitted with the codes or the heading.
    legend_title = ["", options.legend_heading] if legend and options.legend_heading else []

    formatted = FormattedSchedule(
        title=title,
        subtitle=f"Esportato il {format_timestamp(exported_at)}",
        columns=columns,
        header=header,
        separator=separator,
        rows=rows,
        legend=legend,
        legend_title=legend_title,
    )
    logger.debug(f"Formatted {len(rows)} rows x {len(columns) - 1} days, "
                 f"table width {formatted.table_width}, legend {len(formatted.legend_block)} lines")
    return formatted
