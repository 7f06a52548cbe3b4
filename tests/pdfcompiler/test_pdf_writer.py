"""Tests for the xref/trailer writer."""

import re

import pytest

from schedule_pdf.engine.pdfcompiler import PdfDocument, PdfObject, PdfObjectGraphBuilder, PdfWriter
from schedule_pdf.exceptions import CompilationError
from schedule_pdf.models import Page, PageLine


def _document(page_count=2):
    pages = [
        Page(number=n, lines=[PageLine(f"Pagina {n}"), PageLine("Pèrez – (notte)")])
        for n in range(1, page_count + 1)
    ]
    builder = PdfObjectGraphBuilder((841.89, 595.28), (36.0, 559.28))
    return builder.build(pages, title="Turni", producer="schedule-pdf")


def _xref_entries(data):
    startxref = int(re.search(rb"startxref\n(\d+)\n%%EOF\n$", data).group(1))
    assert data[startxref:startxref + 5] == b"xref\n"
    header, rest = data[startxref + 5:].split(b"\n", 1)
    first, count = (int(part) for part in header.split())
    assert first == 0
    table = rest[: 20 * count]
    return [table[i:i + 20] for i in range(0, len(table), 20)], rest[20 * count:]


@pytest.mark.unit
class TestPdfWriter:
    """File layout and byte offsets."""

    def test_header_and_binary_marker(self):
        data = PdfWriter().write(_document())
        assert data.startswith(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n")
        assert data.endswith(b"%%EOF\n")

    def test_xref_offsets_point_at_objects(self):
        """Every in-use entry points at the first byte of its object."""
        document = _document(3)
        data = PdfWriter().write(document)

        entries, _ = _xref_entries(data)
        assert len(entries) == document.object_count + 1
        assert entries[0] == b"0000000000 65535 f \n"
        for obj_num, entry in enumerate(entries[1:], start=1):
            assert len(entry) == 20
            assert entry.endswith(b" 00000 n \n")
            offset = int(entry[:10])
            assert data[offset:].startswith(f"{obj_num} 0 obj\n".encode())

    def test_trailer(self):
        """Size is object count + 1; Root and Info point at catalog and info."""
        document = _document()
        data = PdfWriter().write(document)

        _, trailer = _xref_entries(data)
        expected = (
            f"trailer\n<< /Size {document.object_count + 1} "
            f"/Root {document.catalog_id} 0 R /Info {document.info_id} 0 R >>\nstartxref\n"
        )
        assert trailer.startswith(expected.encode())

    def test_trailer_without_info(self):
        document = PdfObjectGraphBuilder((100.0, 100.0), (10.0, 90.0)).build([])
        data = PdfWriter().write(document)
        assert b"/Info" not in data
        assert b"/Root 5 0 R >>" in data

    def test_writer_is_reusable(self):
        """One writer serializes several documents identically."""
        writer = PdfWriter()
        first = writer.write(_document())
        assert writer.write(_document()) == first

    def test_objects_out_of_order(self):
        document = PdfDocument(
            objects=(PdfObject(1, b"<< >>"), PdfObject(3, b"<< >>")),
            catalog_id=1,
        )
        with pytest.raises(CompilationError):
            PdfWriter().write(document)

    def test_none_document(self):
        with pytest.raises(ValueError):
            PdfWriter().write(None)
