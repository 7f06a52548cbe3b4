"""Tests for PDF value serialization, content streams and the object graph builder."""

from datetime import datetime

import pytest

from schedule_pdf.engine.pdfcompiler import PdfName, PdfObjectGraphBuilder, PdfRef
from schedule_pdf.engine.pdfcompiler.objects import (
    PARENT_PLACEHOLDER,
    build_page_stream,
    dict_to_pdf,
    value_to_pdf,
)
from schedule_pdf.engine.pdfcompiler.resources import PdfFontRegistry
from schedule_pdf.engine.pdfcompiler.utils import format_pdf_number, pdf_literal
from schedule_pdf.exceptions import CompilationError
from schedule_pdf.models import Page, PageLine


PAGE_SIZE = (841.89, 595.28)
ORIGIN = (36.0, 559.28)


def _page(number, *texts):
    return Page(number=number, lines=[PageLine(text) for text in texts])


def _builder():
    return PdfObjectGraphBuilder(PAGE_SIZE, ORIGIN, font_size=7.0, leading=10.0)


@pytest.mark.unit
class TestValueSerialization:
    """Python values to PDF syntax."""

    @pytest.mark.parametrize("value, expected", [
        (True, b"true"),
        (False, b"false"),
        (3, b"3"),
        (841.89, b"841.89"),
        (10.0, b"10"),
        (PdfName("Page"), b"/Page"),
        ("/x y", b"(/x y)"),
        ("Turni", b"(Turni)"),
        (PdfRef(6), b"6 0 R"),
        ([0, 0, 1.5], b"[0 0 1.5]"),
    ])
    def test_values(self, value, expected):
        assert value_to_pdf(value) == expected

    def test_unsupported_value(self):
        with pytest.raises(CompilationError):
            value_to_pdf(object())

    def test_dict(self):
        """Keys become names; nested values are serialized recursively."""
        assert dict_to_pdf({"Type": PdfName("Pages"), "Kids": [PdfRef(3)], "Count": 1}) == (
            b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>"
        )

    def test_literal_escaping(self):
        """Parentheses and backslashes are escaped."""
        assert pdf_literal("a(b)\\c") == b"(a\\(b\\)\\\\c)"

    def test_literal_encoding(self):
        """Text is cp1252; characters outside it become '?'."""
        assert pdf_literal("Pèrez…–") == b"(P\xe8rez\x85\x96)"
        assert pdf_literal("日") == b"(?)"

    def test_number_format(self):
        assert format_pdf_number(-0.0001) == "0"
        assert format_pdf_number(559.28) == "559.28"


@pytest.mark.unit
class TestPageStream:
    """Text content streams."""

    def test_stream_commands(self):
        """Font set once per size change, origin moved once, one line per operator."""
        page = Page(number=1, lines=[
            PageLine("Turni ottobre 2026", emphasis=10.0),
            PageLine("Esportato il 18 ott 2026, 12:43"),
            PageLine("Medico (1)"),
        ])
        content = build_page_stream(page, "/F1", 7.0, 10.0, ORIGIN).get_content()

        assert content.split(b"\n") == [
            b"BT",
            b"/F1 10 Tf",
            b"10 TL",
            b"36 559.28 Td",
            b"(Turni ottobre 2026) '",
            b"/F1 7 Tf",
            b"(Esportato il 18 ott 2026, 12:43) '",
            b"(Medico \\(1\\)) '",
            b"ET",
        ]

    def test_empty_page_stream(self):
        """An empty page still produces a valid text block."""
        content = build_page_stream(Page(number=1), "/F1", 7.0, 10.0, ORIGIN).get_content()
        assert content == b"BT\n/F1 7 Tf\n10 TL\n36 559.28 Td\nET"


@pytest.mark.unit
class TestFontRegistry:
    """Font resources."""

    def test_aliases(self):
        registry = PdfFontRegistry()
        assert registry.register_font("Courier").alias == "/F1"
        assert registry.register_font("Courier-Bold").alias == "/F2"
        assert registry.register_font("Courier").alias == "/F1"

    def test_rejects_proportional_font(self):
        with pytest.raises(ValueError):
            PdfFontRegistry().register_font("Helvetica")

    def test_resources_need_object_numbers(self):
        registry = PdfFontRegistry()
        registry.register_font("Courier")
        with pytest.raises(ValueError):
            registry.get_resources_dict()


@pytest.mark.unit
class TestObjectGraphBuilder:
    """Object numbering and reference resolution."""

    def test_two_page_numbering(self):
        """Font, (content, page) pairs, pages tree, catalog, info."""
        document = _builder().build(
            [_page(1, "a"), _page(2, "b")],
            title="Turni ottobre 2026",
            created_at=datetime(2026, 10, 18, 12, 43),
            producer="schedule-pdf",
        )

        assert [obj.id for obj in document.objects] == list(range(1, 9))
        assert document.catalog_id == 7
        assert document.info_id == 8

        bodies = {obj.id: obj.body for obj in document.objects}
        assert b"/BaseFont /Courier" in bodies[1]
        assert b"/Encoding /WinAnsiEncoding" in bodies[1]
        for page_id, content_id in ((3, 2), (5, 4)):
            assert b"/Type /Page " in bodies[page_id]
            assert b"/Parent 6 0 R" in bodies[page_id]
            assert f"/Contents {content_id} 0 R".encode() in bodies[page_id]
            assert b"/MediaBox [0 0 841.89 595.28]" in bodies[page_id]
            assert b"/Font << /F1 1 0 R >>" in bodies[page_id]
        assert bodies[6] == b"<< /Type /Pages /Kids [3 0 R 5 0 R] /Count 2 >>"
        assert bodies[7] == b"<< /Type /Catalog /Pages 6 0 R >>"
        assert b"/Title (Turni ottobre 2026)" in bodies[8]
        assert b"/CreationDate (D:20261018124300)" in bodies[8]

    def test_content_length_matches_stream(self):
        """/Length equals the byte length between stream and endstream."""
        document = _builder().build([_page(1, "Pèrez…", "Rossi")])
        body = document.objects[1].body

        head, rest = body.split(b"\nstream\n", 1)
        stream = rest[: -len(b"\nendstream")]
        assert rest.endswith(b"\nendstream")
        assert head == f"<< /Length {len(stream)} >>".encode()
        assert b"(P\xe8rez\x85) '" in stream

    def test_no_pages_yields_blank_page(self):
        """An empty page list still yields one page."""
        document = _builder().build([])
        assert document.object_count == 5
        assert document.info_id is None
        assert b"/Count 1" in document.objects[3].body

    def test_sealed_builder_rejects_changes(self):
        builder = _builder()
        builder.build([_page(1, "a")])

        assert builder.sealed
        with pytest.raises(CompilationError):
            builder.allocate({"Type": PdfName("Font")})
        with pytest.raises(CompilationError):
            builder.patch(1, "Type", PdfName("Font"))
        with pytest.raises(CompilationError):
            builder.seal(1)

    def test_unresolved_parent_is_rejected(self):
        """A page whose parent was never patched cannot be sealed."""
        builder = _builder()
        page_id = builder.allocate({"Type": PdfName("Page"), "Parent": PARENT_PLACEHOLDER})
        with pytest.raises(CompilationError, match="Unresolved parent"):
            builder.seal(page_id)

    def test_dangling_reference_is_rejected(self):
        builder = _builder()
        catalog_id = builder.allocate({"Type": PdfName("Catalog"), "Pages": PdfRef(9)})
        with pytest.raises(CompilationError, match="Dangling"):
            builder.seal(catalog_id)

    def test_patch_unknown_object(self):
        with pytest.raises(CompilationError):
            _builder().patch(3, "Parent", PdfRef(1))

    def test_text_fields_starting_with_slash_stay_strings(self):
        """A producer or title beginning with '/' is written as a literal string."""
        document = _builder().build([_page(1, "a")], title="/Turni", producer="/x y")
        info = document.objects[document.info_id - 1].body
        assert info == b"<< /Title (/Turni) /Producer (/x y) >>"

    @pytest.mark.parametrize("raw", ["", "x y", "a/b", "Tab\t", "(x)"])
    def test_invalid_names_rejected(self, raw):
        with pytest.raises(CompilationError):
            PdfName(raw)
