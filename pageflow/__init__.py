#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
pageflow - pagination-aware borders and row layouts for ReportLab documents

Two services on top of a cursor-based PDF document:

1. Multi-page rectangles: start_rect()/stop_rect() draw a border around
   whatever is written in between, split into top/middle/bottom pieces
   when the content crosses page breaks.
2. Row layouts: draw_row_label_texts() packs (label, text) items into
   rows, sizes unconstrained items to fill each row, breaks pages between
   rows and can wrap the block in a border that survives those breaks.

Usage:
    from pageflow import PDFDocument

    doc = PDFDocument("report.pdf", margins=50)
    doc.start_rect(r=8, line_width=2).text(long_text).stop_rect()
    doc.draw_row_label_texts(
        [{"label": "Name:", "text": "Jane Doe", "w": 180},
         {"label": "Email:", "text": "jane@example.com", "link": "mailto:jane@example.com"}],
        {"label": {"font": "Helvetica-Bold", "size": 10}, "box": {"radius": 5}, "padding": 12},
    )
    doc.end()

Version: 1.0.0
"""

from .document import PDFDocument, Margins, PageEvent, Subscription, PageBufferError
from .borders import SegmentedBorder, BorderState, MultiPageRectTracker, KAPPA
from .layout import RowLayoutEngine, RowLayoutOptions, RowItem, RowPlan

__all__ = [
    "PDFDocument",
    "Margins",
    "PageEvent",
    "Subscription",
    "PageBufferError",
    "SegmentedBorder",
    "BorderState",
    "MultiPageRectTracker",
    "KAPPA",
    "RowLayoutEngine",
    "RowLayoutOptions",
    "RowItem",
    "RowPlan",
]

__version__ = "1.0.0"
