"""Export options: page geometry, typography and table sizing."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Tuple

# A4 landscape in points
A4_LANDSCAPE = (841.89, 595.28)

_UNSAFE_FILENAME_CHARS = re.compile(r"[\\/\x00-\x1f:*?\"<>|]+|\.{2,}")


@dataclass
class ExportOptions:
    """Options controlling how a schedule is laid out in the PDF.

    ``lines_per_page`` caps the content lines (rows, separators, legend) placed
    below each page header; the physical page still bounds every page through
    ``page_line_count``. ``legend_heading=None`` leaves only the code lines.
    """

    page_size: Tuple[float, float] = A4_LANDSCAPE
    margins: Tuple[float, float, float, float] = (36.0, 36.0, 36.0, 36.0)  # top, right, bottom, left
    font_name: str = "Courier"
    font_size: float = 7.0
    title_font_size: float = 10.0
    line_height: float = 10.0
    lines_per_page: Optional[int] = None
    name_header: str = "Medico"
    min_name_width: int = 12
    max_name_width: int = 24
    day_width: int = 4
    cell_delimiter: str = ", "
    empty_cell: str = "-"
    truncation_marker: str = "…"
    legend_heading: Optional[str] = "Legenda codici"
    continuation_suffix: str = "(continua)"
    filename_prefix: str = "schedule"
    producer: str = "schedule-pdf"

    def __post_init__(self):
        width, height = self.page_size
        if width <= 0 or height <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.line_height <= 0:
            raise ValueError("line_height must be positive")
        if self.min_name_width < 1 or self.max_name_width < self.min_name_width:
            raise ValueError(
                f"invalid name width bounds: min={self.min_name_width} max={self.max_name_width}"
            )
        if self.day_width < 1:
            raise ValueError("day_width must be at least 1")
        if self.lines_per_page is not None and self.lines_per_page < 1:
            raise ValueError("lines_per_page must be at least 1")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExportOptions":
        """Create options from a plain dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown export options: {', '.join(sorted(unknown))}")
        values = dict(data)
        for key in ("page_size", "margins"):
            if key in values:
                values[key] = tuple(float(v) for v in values[key])
        return cls(**values)

    @property
    def page_line_count(self) -> int:
        """Text lines that physically fit between the top and bottom margins."""
        top, _, bottom, _ = self.margins
        usable = self.page_size[1] - top - bottom
        return max(1, math.floor(usable / self.line_height))

    @property
    def text_origin(self) -> Tuple[float, float]:
        """Start position for the text cursor (left margin, top margin)."""
        top, _, _, left = self.margins
        return left, self.page_size[1] - top

    def filename_for(self, period_id: str) -> str:
        """Suggested file name; path separators and dot runs in the id are replaced."""
        stem = _UNSAFE_FILENAME_CHARS.sub("-", period_id or "")
        stem = re.sub(r"-{2,}", "-", stem).strip("-. ")
        if not stem:
            return f"{self.filename_prefix}.pdf"
        return f"{self.filename_prefix}-{stem}.pdf"
