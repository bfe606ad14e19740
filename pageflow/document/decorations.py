#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Decorations drawn on top of finished content: a development ruler and
a "Page i of n" footer for buffered documents.
"""

from typing import TYPE_CHECKING

from config.constants import RULER_STEP, RULER_TICKS, RULER_FONT_SIZE
from config.logging_config import get_logger

if TYPE_CHECKING:
    from .pdf_document import PDFDocument

logger = get_logger(__name__)


def draw_ruler(doc: 'PDFDocument', x: float = 0, y: float = 0) -> 'PDFDocument':
    """
    Draw tick marks every 10pt along the left and top edges starting at
    (x, y), with a label every 50pt. Cursor and page break flag are left
    as they were.
    """
    x_base, y_base = doc.x, doc.y
    with doc.page_break_suppressed():
        doc.font(doc.settings.default_font).font_size(RULER_FONT_SIZE)
        for i in range(1, RULER_TICKS):
            d = i * RULER_STEP
            if d > doc.page.max_y():
                break
            if i % 5 == 0:
                doc.move_to(x, d + y).line_to(5 + x, d + y)
                doc.text(str(d), 7 + x, (d - 4) + y)
            else:
                doc.move_to(x, d + y).line_to(3 + x, d + y)
        for i in range(1, RULER_TICKS):
            d = i * RULER_STEP
            if d > doc.page.width:
                break
            if i % 5 == 0:
                doc.move_to(d + x, y).line_to(d + x, 5 + y)
                doc.text(str(d), (d - 4) + x, 7 + y)
            else:
                doc.move_to(d + x, y).line_to(d + x, 3 + y)
        doc.stroke()
    doc.x, doc.y = x_base, y_base
    return doc


def stamp_page_numbers(doc: 'PDFDocument', template: str = "Page {page} of {total}") -> 'PDFDocument':
    """
    Write a right-aligned footer just below the bottom margin of every
    buffered page, then flush them.

    The document must be created with buffer_pages=True, otherwise only
    the current page is still in memory and the footer count is wrong.
    """
    if not doc.buffer_pages:
        logger.warning("stamp_page_numbers: buffer_pages is off, only the current page is stamped")
    page_range = doc.buffered_page_range()
    total = len(doc.pages)
    current = doc.page_index
    with doc.page_break_suppressed():
        for index in range(page_range.start, page_range.start + page_range.count):
            doc.switch_to_page(index)
            # font and colour must be set again after every switch
            doc.font(doc.settings.default_font).font_size(8).fill_color("gray")
            doc.text(
                template.format(page=index + 1, total=total),
                doc.page.margins.left,
                doc.page.max_y() + 2,
                width=doc.useful_w,
                align="right",
            )
    doc.fill_color("black")
    doc.switch_to_page(current)
    return doc.flush_pages()
