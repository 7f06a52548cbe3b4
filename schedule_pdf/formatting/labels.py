"""Resolution of human-readable shift labels for the legend."""

from __future__ import annotations

from typing import Mapping, Optional

from ..display_config import ShiftDisplayConfig


def resolve_shift_label(
    code: str,
    shift_labels: Optional[Mapping[str, str]] = None,
    config: Optional[ShiftDisplayConfig] = None,
) -> str:
    """Resolve the label shown next to a code in the legend.

    Order: configured override for the code, the schedule's own label (or
    the code itself), then overrides for the normalized and the raw label.

    Args:
        code: Shift code as listed in the schedule
        shift_labels: Labels delivered with the schedule
        config: Optional display configuration

    Returns:
        Label text (never empty for a non-empty code)
    """
    config = config or ShiftDisplayConfig()

    direct_override = config.get_label(code)
    if direct_override:
        return direct_override

    label = (shift_labels or {}).get(code) or code
    normalized = config.normalize_token(label)

    override = config.get_label(normalized) or config.get_label(label)
    if override:
        return override

    return label or normalized or code
