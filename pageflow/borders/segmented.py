#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Segmented Border

A rectangle border drawn as page-local pieces whose union looks like one
continuous box. The same three-state machine serves the multi-page
rectangle tracker and the row layout's optional block border:

    STARTED --break_segment--> BROKEN --break_segment--> BROKEN
       |                          |
     close (full rect)          close (bottom piece)
       v                          v
     CLOSED                     CLOSED

Version: 1.0.0
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from config.constants import RECT_LINE_WIDTH

if TYPE_CHECKING:
    from pageflow.document.pdf_document import PDFDocument


class BorderState(IntEnum):
    """Lifecycle of a segmented border"""
    CLOSED = 0    # finished, nothing left to draw
    STARTED = 1   # opened, no page break seen yet
    BROKEN = 2    # at least one segment already drawn


@dataclass
class SegmentedBorder:
    """
    One border in progress.

    x, y is the top-left corner of the segment on the current page; y moves
    to the new page's content start after every break. w is fixed for the
    whole lifetime, r is clamped per segment at draw time.
    """
    x: float
    y: float
    w: float
    r: float = 0
    line_width: float = RECT_LINE_WIDTH
    state: BorderState = BorderState.STARTED

    @property
    def is_open(self) -> bool:
        return self.state != BorderState.CLOSED

    def break_segment(self, doc: 'PDFDocument', bottom_y: float) -> 'SegmentedBorder':
        """Draw the piece visible on the page being left and mark the border broken."""
        if self.state == BorderState.CLOSED:
            return self
        h = bottom_y - self.y
        if self.state == BorderState.STARTED:
            doc.rounded_rect_up(self.x, self.y, self.w, h, self.r)
            self._stroke(doc)
        elif self.state == BorderState.BROKEN:
            doc.rounded_rect_mid(self.x, self.y, self.w, h, self.r)
            self._stroke(doc)
        self.state = BorderState.BROKEN
        return self

    def _stroke(self, doc: 'PDFDocument'):
        # the document keeps its own line width for whatever is drawn next
        previous = doc.current_line_width
        doc.line_width(self.line_width).stroke().line_width(previous)

    def resume(self, top_y: float) -> 'SegmentedBorder':
        """Continue on a new page starting at top_y."""
        self.y = top_y
        return self

    def close(self, doc: 'PDFDocument', bottom_y: float) -> 'SegmentedBorder':
        """Draw the final piece: the whole box if never broken, else the bottom."""
        h = bottom_y - self.y
        if self.state == BorderState.STARTED:
            doc.rounded_rect(self.x, self.y, self.w, h, self.r)
            self._stroke(doc)
        elif self.state == BorderState.BROKEN:
            doc.rounded_rect_down(self.x, self.y, self.w, h, self.r)
            self._stroke(doc)
        self.state = BorderState.CLOSED
        return self
