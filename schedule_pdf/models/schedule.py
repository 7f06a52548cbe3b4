"""Schedule data model: people x days x shift codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..exceptions import ScheduleDataError
from ..formatting.dates import days_in_month

DayCell = Optional[List[str]]


@dataclass(frozen=True)
class Person:
    id: str
    name: str


@dataclass
class ScheduleGrid:
    """Monthly schedule as delivered by the schedule source.

    ``rows[i][d]`` holds the shift codes of ``people[i]`` on day ``d``
    (0-indexed); ``None`` or an empty list means no assignment.
    """

    period_id: str
    people: List[Person] = field(default_factory=list)
    rows: List[List[DayCell]] = field(default_factory=list)
    shift_labels: Optional[Dict[str, str]] = None
    codes: Optional[List[str]] = None

    def __post_init__(self):
        if len(self.rows) != len(self.people):
            raise ScheduleDataError(
                "Schedule rows do not match people",
                f"{len(self.rows)} rows for {len(self.people)} people",
            )

    @property
    def day_count(self) -> int:
        """Number of day columns in the period."""
        if self.rows:
            return max(len(row) for row in self.rows)
        return days_in_month(self.period_id)

    def cell(self, person_index: int, day_index: int) -> List[str]:
        """Codes for one person/day; short rows read as unassigned days."""
        row = self.rows[person_index]
        if day_index >= len(row):
            return []
        return list(row[day_index] or [])

    def legend_codes(self) -> List[str]:
        """Codes listed first, then any labelled code not already listed."""
        ordered: List[str] = []
        for code in (self.codes or []) + list((self.shift_labels or {}).keys()):
            if code and code not in ordered:
                ordered.append(code)
        return ordered

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScheduleGrid":
        """Build a grid from the schedule API JSON shape.

        Accepts ``periodId`` or ``ym``, ``people``, ``rows``, ``shiftLabels`` or
        ``shiftNames`` and ``codes``. A bare string cell is read as a one-code
        list.

        Raises:
            ScheduleDataError: If the payload is malformed
        """
        if not isinstance(data, Mapping):
            raise ScheduleDataError("Schedule payload must be a JSON object")

        period_id = data.get("periodId") or data.get("ym")
        if not isinstance(period_id, str) or not period_id.strip():
            raise ScheduleDataError("Schedule payload is missing 'periodId'")

        people = []
        for index, raw in enumerate(data.get("people") or []):
            if not isinstance(raw, Mapping) or "id" not in raw:
                raise ScheduleDataError("Invalid person entry", f"index {index}")
            people.append(Person(id=str(raw["id"]), name=str(raw.get("name") or raw["id"])))

        rows = []
        for index, raw_row in enumerate(data.get("rows") or []):
            if not isinstance(raw_row, list):
                raise ScheduleDataError("Schedule row must be a list", f"row {index}")
            rows.append([_parse_cell(cell, index) for cell in raw_row])

        labels = data.get("shiftLabels") or data.get("shiftNames")
        if labels is not None and not isinstance(labels, Mapping):
            raise ScheduleDataError("'shiftLabels' must be an object")

        codes = data.get("codes")
        if codes is not None and not isinstance(codes, list):
            raise ScheduleDataError("'codes' must be a list")

        return cls(
            period_id=period_id.strip(),
            people=people,
            rows=rows,
            shift_labels={str(k): str(v) for k, v in labels.items()} if labels else None,
            codes=[str(code) for code in codes] if codes is not None else None,
        )


def _parse_cell(cell: Any, row_index: int) -> DayCell:
    if cell is None:
        return None
    if isinstance(cell, str):
        return [cell] if cell.strip() else None
    if isinstance(cell, list) and all(isinstance(code, str) for code in cell):
        return list(cell)
    raise ScheduleDataError("Invalid schedule cell", f"row {row_index}: {cell!r}")
