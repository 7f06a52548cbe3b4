"""Font resources for PDF generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

# Standard 14 fixed-width faces; any of them works without embedding.
MONOSPACE_FONTS = ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique")


@dataclass
class PdfFont:
    """Represents a PDF font resource."""

    name: str  # Base font name (e.g., "Courier")
    alias: str  # PDF alias (e.g., "/F1")
    object_num: Optional[int] = None

    @property
    def resource_key(self) -> str:
        return self.alias.lstrip("/")

    def get_font_dict(self) -> Dict[str, object]:
        """Font object dictionary (Type1, WinAnsiEncoding)."""
        from .objects import PdfName

        return {
            "Type": PdfName("Font"),
            "Subtype": PdfName("Type1"),
            "BaseFont": PdfName(self.name),
            "Encoding": PdfName("WinAnsiEncoding"),
        }


class PdfFontRegistry:
    """Registry for PDF fonts; one alias per base font name."""

    def __init__(self):
        self._fonts: Dict[str, PdfFont] = {}

    def register_font(self, name: str) -> PdfFont:
        """Register a fixed-width font and return its PdfFont.

        Raises:
            ValueError: If the font is not a standard fixed-width face
        """
        if name not in MONOSPACE_FONTS:
            raise ValueError(f"Unsupported font {name!r}; expected one of {', '.join(MONOSPACE_FONTS)}")

        if name not in self._fonts:
            self._fonts[name] = PdfFont(name=name, alias=f"/F{len(self._fonts) + 1}")
        return self._fonts[name]

    def get_font(self, name: str) -> Optional[PdfFont]:
        return self._fonts.get(name)

    def get_resources_dict(self) -> Dict[str, object]:
        """Generate the /Font resources dictionary (alias -> object reference).

        Raises:
            ValueError: If a registered font has no object number yet
        """
        from .objects import PdfRef

        resources = {}
        for font in self._fonts.values():
            if font.object_num is None:
                raise ValueError(f"Font {font.name} has no object number")
            resources[font.resource_key] = PdfRef(font.object_num)
        return resources
