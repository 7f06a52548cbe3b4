"""
Pagination engine for schedule tables.

Splits formatted rows and the legend block into pages. The first page
carries the full header template; every following page starts with the
continuation template. Table rows are two-line units (row text + separator)
and are never split across pages.

Room for content on a page is bounded by two limits, either of which may be
omitted: ``page_capacity`` counts content lines below the page's header, and
``line_limit`` counts physical lines including the header.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..exceptions import LayoutError
from ..models.page import Page, PageLine

logger = logging.getLogger(__name__)

ROW_UNIT_LINES = 2


class PaginationEngine:
    """
    Lays out table rows and legend lines on fixed-capacity pages.

    The engine holds only configuration; every call to paginate() builds a
    fresh page list, so repeated calls with the same input are identical.
    """

    def __init__(self, page_capacity: Optional[int], header: Sequence[PageLine],
                 continuation_header: Sequence[PageLine], row_separator: str,
                 line_limit: Optional[int] = None):
        """
        Initialize pagination engine.

        Args:
            page_capacity: Content lines allowed below the header of each page
            header: Full header template for the first page
            continuation_header: Header template for every later page
            row_separator: Text of the line closing each table row
            line_limit: Physical lines on a page, header included

        Raises:
            LayoutError: If no limit is given, a limit is below one line, or
                the first-page header does not fit the physical page
        """
        if page_capacity is None and line_limit is None:
            raise LayoutError("Pagination needs a page capacity or a line limit")
        if page_capacity is not None and page_capacity < 1:
            raise LayoutError("Page capacity must be at least one line", str(page_capacity))
        if line_limit is not None and line_limit < 1:
            raise LayoutError("Line limit must be at least one line", str(line_limit))
        if line_limit is not None and len(header) > line_limit:
            raise LayoutError(
                "Page header does not fit on a page",
                f"{len(header)} header lines, {line_limit} lines per page",
            )

        self.page_capacity = page_capacity
        self.line_limit = line_limit
        self.header = list(header)
        self.continuation_header = list(continuation_header)
        if line_limit is not None:
            self.continuation_header = self.continuation_header[:line_limit]
        self.row_separator = row_separator

    @property
    def first_page_room(self) -> int:
        """Content lines available beneath the first-page header."""
        return self._room(self.header)

    @property
    def continuation_room(self) -> int:
        """Content lines available beneath the continuation header."""
        return self._room(self.continuation_header)

    def paginate(self, rows: Sequence[str], legend: Sequence[str] = ()) -> List[Page]:
        """
        Place rows and then legend lines on pages.

        Args:
            rows: Table row texts, in order
            legend: Legend lines appended after the last row

        Returns:
            Ordered list of pages (at least one)
        """
        pages = [Page(number=1, lines=list(self.header))]
        free = self.first_page_room

        for index, text in enumerate(rows):
            if free < ROW_UNIT_LINES:
                free = self._open_continuation(pages)
                if free < ROW_UNIT_LINES:
                    logger.warning(
                        f"Continuation page holds {free} content lines, "
                        f"fewer than one table row; dropping {len(rows) - index} rows"
                    )
                    break
            pages[-1].lines.append(PageLine(text))
            pages[-1].lines.append(PageLine(self.row_separator))
            free -= ROW_UNIT_LINES

        for index, text in enumerate(legend):
            if free < 1:
                free = self._open_continuation(pages)
                if free < 1:
                    logger.warning(
                        f"Continuation header fills the whole page; dropping "
                        f"{len(legend) - index} legend lines"
                    )
                    break
            pages[-1].lines.append(PageLine(text))
            free -= 1

        logger.debug(f"Paginated {len(rows)} rows and {len(legend)} legend lines into "
                     f"{len(pages)} pages (capacity {self.page_capacity}, limit {self.line_limit})")
        return pages

    def _room(self, header: Sequence[PageLine]) -> int:
        limits = []
        if self.page_capacity is not None:
            limits.append(self.page_capacity)
        if self.line_limit is not None:
            limits.append(max(0, self.line_limit - len(header)))
        return min(limits)

    def _open_continuation(self, pages: List[Page]) -> int:
        pages.append(Page(number=len(pages) + 1, lines=list(self.continuation_header)))
        return self.continuation_room


def data_page_count(row_count: int, line_limit: int, header_lines: int) -> int:
    """Pages needed for row_count rows on pages of line_limit physical lines,
    each spending header_lines on its header."""
    rows_per_page = (line_limit - header_lines) // ROW_UNIT_LINES
    if rows_per_page < 1:
        raise LayoutError("A page cannot hold a single table row",
                          f"line limit {line_limit}, header {header_lines}")
    if row_count == 0:
        return 1
    return -(-row_count // rows_per_page)
