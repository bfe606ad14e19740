"""
Host document engine: pages, cursor, text and page break events.

    from pageflow.document import PDFDocument

    doc = PDFDocument("out.pdf", buffer_pages=True)
"""

from .page import Margins, Page, StrokeOp, FillOp, TextOp, LinkOp
from .events import PageEvent, PageEvents, Subscription
from .text import TextMetrics
from .pdf_document import PDFDocument, PageRange, PageBufferError, to_color

__all__ = [
    "Margins",
    "Page",
    "StrokeOp",
    "FillOp",
    "TextOp",
    "LinkOp",
    "PageEvent",
    "PageEvents",
    "Subscription",
    "TextMetrics",
    "PDFDocument",
    "PageRange",
    "PageBufferError",
    "to_color",
]
