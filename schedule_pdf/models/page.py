"""Page-level text model shared by the pagination engine and the PDF compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class PageLine:
    """One already-formatted text line.

    ``emphasis`` is a font size override for this line (None = body size).
    """

    text: str
    emphasis: Optional[float] = None


@dataclass
class Page:
    """Lines placed on one physical page."""

    number: int
    lines: List[PageLine] = field(default_factory=list)

    @property
    def texts(self) -> List[str]:
        return [line.text for line in self.lines]

    def __len__(self) -> int:
        return len(self.lines)
