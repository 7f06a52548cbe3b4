"""PDF objects, content streams and the object graph builder."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ...exceptions import CompilationError
from ...models.page import Page
from .resources import PdfFontRegistry
from .utils import format_pdf_date, format_pdf_number, pdf_literal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PdfRef:
    """Indirect object reference (``<num> 0 R``)."""

    object_num: int
    generation: int = 0

    def to_pdf(self) -> str:
        return f"{self.object_num} {self.generation} R"


# Page objects are created before the pages tree exists; their /Parent
# points here until the builder patches it.
PARENT_PLACEHOLDER = PdfRef(0)

_NAME_DELIMITERS = set("()<>[]{}/%#")


@dataclass(frozen=True)
class PdfName:
    """PDF name object (``/Page``); plain str values are always literal strings."""

    value: str

    def __post_init__(self):
        if not self.value or any(
            ch in _NAME_DELIMITERS or not "!" <= ch <= "~" for ch in self.value
        ):
            raise CompilationError("Invalid PDF name", repr(self.value))

    def to_pdf(self) -> str:
        return f"/{self.value}"


def value_to_pdf(value: Any) -> bytes:
    """Serialize a Python value to PDF syntax.

    PdfName values become names and every str becomes a literal string;
    lists become arrays and dicts become dictionaries.
    """
    if isinstance(value, (PdfRef, PdfName)):
        return value.to_pdf().encode("ascii")
    if isinstance(value, dict):
        return dict_to_pdf(value)
    if isinstance(value, (list, tuple)):
        return b"[" + b" ".join(value_to_pdf(item) for item in value) + b"]"
    if isinstance(value, bool):
        return b"true" if value else b"false"
    if isinstance(value, int):
        return str(value).encode("ascii")
    if isinstance(value, float):
        return format_pdf_number(value).encode("ascii")
    if isinstance(value, str):
        return pdf_literal(value)
    raise CompilationError("Cannot serialize value to PDF", repr(value))


def dict_to_pdf(d: Dict[str, Any]) -> bytes:
    """Convert dictionary to PDF format (``<< /Key value ... >>``)."""
    parts = [b"<<"]
    for key, value in d.items():
        clean_key = key.lstrip("/")
        parts.append(b"/" + clean_key.encode("ascii") + b" " + value_to_pdf(value))
    parts.append(b">>")
    return b" ".join(parts)


@dataclass
class PdfStream:
    """Represents a PDF content stream (instructions for drawing)."""

    commands: List[bytes] = field(default_factory=list)

    def write(self, command: str) -> None:
        """Append a raw ASCII PDF command to the stream."""
        if command is None:
            return
        self.commands.append(str(command).encode("ascii"))

    def begin_text(self) -> None:
        self.write("BT")

    def end_text(self) -> None:
        self.write("ET")

    def set_font(self, font_alias: str, font_size: float) -> None:
        self.write(f"{font_alias} {format_pdf_number(font_size)} Tf")

    def set_leading(self, leading: float) -> None:
        self.write(f"{format_pdf_number(leading)} TL")

    def move_to(self, x: float, y: float) -> None:
        self.write(f"{format_pdf_number(x)} {format_pdf_number(y)} Td")

    def show_next_line(self, text: str) -> None:
        """Move to the next line (by the leading) and show text: ``(text) '``."""
        self.commands.append(pdf_literal(text) + b" '")

    def get_content(self) -> bytes:
        """Get stream content as bytes."""
        return b"\n".join(self.commands)

    def get_length(self) -> int:
        """Get stream length in bytes."""
        return len(self.get_content())


def build_page_stream(page: Page, font_alias: str, font_size: float, leading: float,
                      origin: Tuple[float, float]) -> PdfStream:
    """Build the text content stream for one page.

    The cursor starts at origin (top-left of the text area); every line is
    shown with the show-next-line operator, and ``Tf`` is repeated only when
    the size changes from the previous line.
    """
    stream = PdfStream()
    current_size = (page.lines[0].emphasis or font_size) if page.lines else font_size

    stream.begin_text()
    stream.set_font(font_alias, current_size)
    stream.set_leading(leading)
    stream.move_to(*origin)
    for line in page.lines:
        size = line.emphasis or font_size
        if size != current_size:
            stream.set_font(font_alias, size)
            current_size = size
        stream.show_next_line(line.text)
    stream.end_text()
    return stream


@dataclass(frozen=True)
class PdfObject:
    """A sealed indirect object: number and serialized body."""

    id: int
    body: bytes


@dataclass(frozen=True)
class PdfDocument:
    """Represents a complete, sealed PDF document."""

    objects: Tuple[PdfObject, ...]
    catalog_id: int
    info_id: Optional[int] = None

    @property
    def object_count(self) -> int:
        return len(self.objects)


@dataclass
class _PendingObject:
    value: Dict[str, Any]
    stream: Optional[bytes] = None

    def render(self) -> bytes:
        body = dict_to_pdf(self.value)
        if self.stream is None:
            return body
        return body + b"\nstream\n" + self.stream + b"\nendstream"


class PdfObjectGraphBuilder:
    """
    Builds the PDF object list for a sequence of text pages.

    Object numbers derive from the length of the builder's own append-only
    list, starting at 1. Object values stay mutable until build() seals
    the graph; after that the builder rejects any change.
    """

    def __init__(self, page_size: Tuple[float, float], origin: Tuple[float, float],
                 font_name: str = "Courier", font_size: float = 7.0, leading: float = 10.0):
        """
        Initialize object graph builder.

        Args:
            page_size: Media box width and height in points
            origin: Text start position (x, y) on every page
            font_name: Fixed-width base font
            font_size: Body font size in points
            leading: Distance between baselines in points
        """
        self.page_size = page_size
        self.origin = origin
        self.font_size = font_size
        self.leading = leading
        self.font_registry = PdfFontRegistry()
        self.font = self.font_registry.register_font(font_name)
        self._objects: List[_PendingObject] = []
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def allocate(self, value: Dict[str, Any], stream: Optional[bytes] = None) -> int:
        """Append an object and return its number.

        Raises:
            CompilationError: If the builder is already sealed
        """
        if self._sealed:
            raise CompilationError("Cannot allocate objects after the document is sealed")
        self._objects.append(_PendingObject(dict(value), stream))
        return len(self._objects)

    def patch(self, object_num: int, key: str, value: Any) -> None:
        """Replace one dictionary entry of an already allocated object.

        Raises:
            CompilationError: If sealed or the object number is unknown
        """
        if self._sealed:
            raise CompilationError("Cannot patch objects after the document is sealed")
        if not 1 <= object_num <= len(self._objects):
            raise CompilationError("Unknown object number", str(object_num))
        self._objects[object_num - 1].value[key] = value

    def build(self, pages: Sequence[Page], title: Optional[str] = None,
              created_at: Optional[datetime] = None, producer: Optional[str] = None) -> PdfDocument:
        """
        Build and seal the object graph for the given pages.

        Order: shared font, then (content stream, page) per page, pages tree,
        parent patching, catalog, optional document information dictionary.

        Args:
            pages: Pages to render (an empty sequence still yields one blank page)
            title: Document /Title for the info dictionary
            created_at: Document /CreationDate for the info dictionary
            producer: Document /Producer for the info dictionary

        Returns:
            Sealed PdfDocument
        """
        if not pages:
            pages = [Page(number=1)]

        self.font.object_num = self.allocate(self.font.get_font_dict())
        resources = {
            "Font": self.font_registry.get_resources_dict(),
            "ProcSet": [PdfName("PDF"), PdfName("Text")],
        }
        width, height = self.page_size

        page_ids = []
        for page in pages:
            stream = build_page_stream(page, self.font.alias, self.font_size, self.leading, self.origin)
            content = stream.get_content()
            content_id = self.allocate({"Length": len(content)}, stream=content)
            page_id = self.allocate({
                "Type": PdfName("Page"),
                "Parent": PARENT_PLACEHOLDER,
                "MediaBox": [0, 0, float(width), float(height)],
                "Resources": resources,
                "Contents": PdfRef(content_id),
            })
            page_ids.append(page_id)

        pages_id = self.allocate({
            "Type": PdfName("Pages"),
            "Kids": [PdfRef(num) for num in page_ids],
            "Count": len(page_ids),
        })
        for page_id in page_ids:
            self.patch(page_id, "Parent", PdfRef(pages_id))

        catalog_id = self.allocate({"Type": PdfName("Catalog"), "Pages": PdfRef(pages_id)})

        info_id = None
        info = {}
        if title:
            info["Title"] = title
        if producer:
            info["Producer"] = producer
        if created_at is not None:
            info["CreationDate"] = format_pdf_date(created_at)
        if info:
            info_id = self.allocate(info)

        return self.seal(catalog_id, info_id)

    def seal(self, catalog_id: int, info_id: Optional[int] = None) -> PdfDocument:
        """Freeze all objects into a PdfDocument.

        Raises:
            CompilationError: If a reference is unresolved or dangling
        """
        if self._sealed:
            raise CompilationError("Document is already sealed")

        for num, pending in enumerate(self._objects, start=1):
            for ref in _iter_refs(pending.value):
                if ref == PARENT_PLACEHOLDER:
                    raise CompilationError("Unresolved parent reference", f"object {num}")
                if not 1 <= ref.object_num <= len(self._objects):
                    raise CompilationError("Dangling object reference", f"object {num} -> {ref.object_num}")

        self._sealed = True
        objects = tuple(
            PdfObject(id=num, body=pending.render())
            for num, pending in enumerate(self._objects, start=1)
        )
        logger.debug(f"Sealed PDF object graph: {len(objects)} objects, root {catalog_id}")
        return PdfDocument(objects=objects, catalog_id=catalog_id, info_id=info_id)


def _iter_refs(value: Any):
    if isinstance(value, PdfRef):
        yield value
    elif isinstance(value, dict):
        for item in value.values():
            yield from _iter_refs(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _iter_refs(item)
