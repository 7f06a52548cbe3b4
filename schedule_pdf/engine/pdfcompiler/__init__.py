"""PDF compiler - object graph builder and xref writer without external PDF libraries."""

from .objects import PdfDocument, PdfName, PdfObject, PdfObjectGraphBuilder, PdfRef, PdfStream
from .writer import PdfWriter

__all__ = ["PdfDocument", "PdfName", "PdfObject", "PdfObjectGraphBuilder", "PdfRef", "PdfStream", "PdfWriter"]
