"""Helpers for presenting shift codes consistently."""

import re

_WHITESPACE = re.compile(r"\s+")
_LONG_DASHES = re.compile("[–—]")


def display_code(code: str) -> str:
    """Return the compact shift code shown in the table.

    The schedule API may return aliases such as ``"RATM 8:00 - 14:00"`` or
    ``"FT (Festivo) 08:30-18:30"``; only the leading identifier (``"RATM"``,
    ``"FT"``) is kept.

    Args:
        code: Raw code as delivered by the schedule source

    Returns:
        Display code, or an empty string when nothing identifiable is left
    """
    if not code:
        return ""

    normalised = _LONG_DASHES.sub("-", _WHITESPACE.sub(" ", code.strip()))
    without_paren = normalised.split("(")[0].strip()
    if not without_paren:
        return ""

    leading_chunk = without_paren.split(" ")[0].strip()
    return leading_chunk or without_paren
