"""PDF file writer - generates header, objects, xref, and trailer."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ...exceptions import CompilationError
from .objects import PdfDocument, PdfRef, dict_to_pdf

logger = logging.getLogger(__name__)

PDF_HEADER = b"%PDF-1.4\n"
# Comment with bytes >= 128 so transfer tools treat the file as binary.
BINARY_MARKER = b"%\xe2\xe3\xcf\xd3\n"
XREF_FREE_HEAD = b"0000000000 65535 f \n"


class PdfWriter:
    """Serializes a sealed PdfDocument into PDF bytes."""

    def __init__(self):
        self._buffer = bytearray()
        self.xref_table: List[int] = []  # offset per object, in object order
        self.current_offset = 0

    def write(self, document: PdfDocument) -> bytes:
        """Serialize document to bytes.

        Args:
            document: Sealed PdfDocument to write

        Returns:
            Complete PDF file content

        Raises:
            ValueError: If document is None
            CompilationError: If objects are out of order or offsets drift
        """
        if document is None:
            raise ValueError("document cannot be None")

        self._buffer = bytearray()
        self.xref_table = []
        self.current_offset = 0

        self._emit(PDF_HEADER)
        self._emit(BINARY_MARKER)

        for expected, obj in enumerate(document.objects, start=1):
            if obj.id != expected:
                raise CompilationError("Objects must be numbered 1..n in order",
                                       f"expected {expected}, got {obj.id}")
            self._write_object(obj.id, obj.body)

        xref_offset = self.current_offset
        self._write_xref()
        self._write_trailer(xref_offset, document.catalog_id, document.info_id)

        data = bytes(self._buffer)
        self._verify_offsets(data)
        logger.debug(f"Serialized {len(self.xref_table)} objects into {len(data)} bytes "
                     f"(xref at {xref_offset})")
        return data

    def _emit(self, chunk: bytes) -> None:
        self._buffer += chunk
        self.current_offset += len(chunk)

    def _write_object(self, obj_num: int, body: bytes) -> None:
        """Write one indirect object, recording its offset first."""
        self.xref_table.append(self.current_offset)
        self._emit(f"{obj_num} 0 obj\n".encode("ascii"))
        self._emit(body)
        self._emit(b"\nendobj\n")

    def _write_xref(self) -> None:
        """Write xref table (one 20-byte entry per object)."""
        self._emit(b"xref\n")
        self._emit(f"0 {len(self.xref_table) + 1}\n".encode("ascii"))
        self._emit(XREF_FREE_HEAD)
        for offset in self.xref_table:
            self._emit(f"{offset:010d} 00000 n \n".encode("ascii"))

    def _write_trailer(self, xref_offset: int, root_obj_num: int, info_obj_num: Optional[int] = None) -> None:
        """Write trailer, startxref pointer and EOF marker."""
        trailer_dict: Dict[str, object] = {
            "Size": len(self.xref_table) + 1,
            "Root": PdfRef(root_obj_num),
        }
        if info_obj_num is not None:
            trailer_dict["Info"] = PdfRef(info_obj_num)
        self._emit(b"trailer\n")
        self._emit(dict_to_pdf(trailer_dict))
        self._emit(b"\nstartxref\n")
        self._emit(f"{xref_offset}\n".encode("ascii"))
        self._emit(b"%%EOF\n")

    def _verify_offsets(self, data: bytes) -> None:
        for obj_num, offset in enumerate(self.xref_table, start=1):
            token = f"{obj_num} 0 obj".encode("ascii")
            if data[offset:offset + len(token)] != token:
                raise CompilationError("Xref offset does not point at its object",
                                       f"object {obj_num} at {offset}")
