"""
Pytest configuration for schedule_pdf
"""

import json
import logging
import sys
from datetime import datetime

import pytest

from schedule_pdf.models import Person, ScheduleGrid


EXPORTED_AT = datetime(2026, 10, 18, 12, 43)


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leaks between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Only show warnings and errors during tests
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def exported_at():
    """Fixed export timestamp so rendered output is reproducible."""
    return EXPORTED_AT


@pytest.fixture
def sample_grid():
    """Three people over a two-day period with a D/N/R legend."""
    return ScheduleGrid(
        period_id="2026-10",
        people=[
            Person(id="1", name="Rossi Mario"),
            Person(id="2", name="Bianchi Anna"),
            Person(id="3", name="Verdi Luca"),
        ],
        rows=[
            [["D"], None],
            [["N", "R"], ["D"]],
            [None, None],
        ],
        shift_labels={"D": "Day", "N": "Night", "R": "Rest"},
        codes=["D", "N", "R"],
    )


@pytest.fixture
def empty_grid():
    """No people in a 30-day month."""
    return ScheduleGrid(period_id="2026-09", people=[], rows=[])


@pytest.fixture
def make_grid():
    """Factory for grids with many people over a full month."""
    def _make(people_count, days=31, codes=("D", "N")):
        people = [Person(id=str(i), name=f"Persona {i:03d}") for i in range(people_count)]
        rows = [
            [[codes[(i + d) % len(codes)]] if (i + d) % 3 else None for d in range(days)]
            for i in range(people_count)
        ]
        return ScheduleGrid(period_id="2026-10", people=people, rows=rows, codes=list(codes))
    return _make


@pytest.fixture
def schedule_json(tmp_path):
    """Schedule API payload written to a JSON file."""
    payload = {
        "ym": "2026-10",
        "people": [
            {"id": "1", "name": "Rossi Mario"},
            {"id": "2", "name": "Bianchi Anna"},
        ],
        "rows": [
            ["D", None, ["N", "R"]],
            [None, "FT (Festivo) 08:30-18:30", None],
        ],
        "codes": ["D", "N", "R", "FT"],
        "shiftNames": {"D": "Giorno", "N": "Notte"},
    }
    path = tmp_path / "turni-2026-10.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    logging.raiseExceptions = False
