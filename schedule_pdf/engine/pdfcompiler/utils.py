"""Utility functions for PDF generation."""

from datetime import datetime

# Simple Type1 fonts with /WinAnsiEncoding read string bytes as cp1252.
PDF_TEXT_ENCODING = "cp1252"


def escape_pdf_string(text: str) -> str:
    """Escape special characters in PDF strings.

    Args:
        text: Input string (will be converted to str if not already)

    Returns:
        Escaped string for PDF
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)

    # PDF string escape: \n, \r, \t, \\, \(, \)
    replacements = {
        "\\": "\\\\",
        "(": "\\(",
        ")": "\\)",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }

    result = text
    for char, escaped in replacements.items():
        result = result.replace(char, escaped)

    return result


def encode_pdf_text(text: str) -> bytes:
    """Encode text for a WinAnsi font; characters outside cp1252 become '?'."""
    return text.encode(PDF_TEXT_ENCODING, errors="replace")


def pdf_literal(text: str) -> bytes:
    """Build an escaped, encoded PDF literal string such as ``(Turni \\(1\\))``."""
    return b"(" + encode_pdf_text(escape_pdf_string(text)) + b")"


def format_pdf_number(value: float) -> str:
    """Format number for PDF (limit decimal places).

    Args:
        value: Numeric value

    Returns:
        Formatted string
    """
    formatted = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if formatted in ("", "-0") else formatted


def format_pdf_date(moment: datetime) -> str:
    """Format a timestamp as a PDF date string body (``D:YYYYMMDDHHmmSS``)."""
    return moment.strftime("D:%Y%m%d%H%M%S")
