"""
Shift display configuration.

Aliases map raw shift tokens to a normalized token; labels override the
human-readable name shown in the legend. Both are loaded from a JSON file
shaped as ``{"aliases": {...}, "labels": {...}}``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .exceptions import ScheduleDataError

logger = logging.getLogger(__name__)


@dataclass
class ShiftDisplayConfig:
    """Alias and label overrides for shift codes."""

    aliases: Dict[str, str] = field(default_factory=dict)
    labels: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Alias keys are case-insensitive; label keys are stored as given
        # and matched exact/upper/lower in get_label().
        self.aliases = {
            key.strip().lower(): value.strip()
            for key, value in self.aliases.items()
            if key.strip() and value.strip()
        }
        self.labels = {
            key.strip(): value.strip()
            for key, value in self.labels.items()
            if key.strip() and value.strip()
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShiftDisplayConfig":
        """Build config from a parsed JSON object.

        Raises:
            ScheduleDataError: If a section is not a string-to-string mapping
        """
        if not isinstance(data, Mapping):
            raise ScheduleDataError("Shift display config must be a JSON object")

        sections = {}
        for section in ("aliases", "labels"):
            raw = data.get(section) or {}
            if not isinstance(raw, Mapping):
                raise ScheduleDataError(f"Shift display config '{section}' must be an object")
            entries = {}
            for key, value in raw.items():
                if not isinstance(value, str):
                    logger.warning(f"Ignoring non-string {section} entry for '{key}'")
                    continue
                entries[str(key)] = value
            sections[section] = entries

        return cls(aliases=sections["aliases"], labels=sections["labels"])

    @classmethod
    def from_file(cls, path: str | Path) -> "ShiftDisplayConfig":
        """Load config from a JSON file.

        Raises:
            ScheduleDataError: If the file cannot be read or parsed
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ScheduleDataError("Cannot read shift display config", f"{path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ScheduleDataError("Invalid JSON in shift display config", f"{path}: {e}") from e

        config = cls.from_dict(data)
        logger.debug(f"Loaded shift display config from {path}: "
                     f"{len(config.aliases)} aliases, {len(config.labels)} labels")
        return config

    def normalize_token(self, token: str) -> str:
        """Map a raw token to its alias (whole token first, then its leading chunk)."""
        trimmed = (token or "").strip()
        if not trimmed:
            return ""

        alias = self.aliases.get(trimmed.lower())
        if alias:
            return alias

        first_chunk = trimmed.split(" ")[0].strip()
        if first_chunk:
            chunk_alias = self.aliases.get(first_chunk.lower())
            if chunk_alias:
                return chunk_alias

        return trimmed

    def get_label(self, key: Optional[str]) -> Optional[str]:
        """Return the configured label override for key, if any."""
        if not key:
            return None
        trimmed = key.strip()
        if not trimmed:
            return None

        for candidate in (trimmed, trimmed.upper(), trimmed.lower()):
            if candidate in self.labels:
                return self.labels[candidate]
        for label_key, value in self.labels.items():
            if label_key.upper() == trimmed.upper():
                return value
        return None
