#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Multi-Page Rectangle Tracker

Keeps a stack of open rectangles and follows them across page breaks:
before a break the visible piece of every open rectangle is stroked,
after the break each one restarts at the top of the new page. stop()
closes the most recently started rectangle.

Usage:
    doc.start_rect(x=50, y=100, w=400, r=8, line_width=2)
    doc.text(long_text)          # may break pages any number of times
    doc.stop_rect()

Version: 1.0.0
"""

from typing import List, Optional, TYPE_CHECKING

from config.constants import RECT_FALLBACK_LINE_WIDTH
from config.logging_config import get_logger
from .segmented import SegmentedBorder, BorderState

if TYPE_CHECKING:
    from pageflow.document.events import Subscription
    from pageflow.document.pdf_document import PDFDocument

logger = get_logger(__name__)


class MultiPageRectTracker:
    """Document-scoped stack of rectangles that survive page breaks"""

    def __init__(self, doc: 'PDFDocument'):
        self.doc = doc
        self.stack: List[SegmentedBorder] = []
        self._before_subscription: Optional['Subscription'] = None
        self._after_subscription: Optional['Subscription'] = None

    @property
    def depth(self) -> int:
        return len(self.stack)

    @property
    def subscribed(self) -> bool:
        return self._before_subscription is not None and self._after_subscription is not None

    def active(self) -> List[SegmentedBorder]:
        return [record for record in self.stack if record.is_open]

    def _subscribe(self):
        if self._before_subscription is None:
            self._before_subscription = self.doc.on_before_page_break(self._on_before_page_break)
        if self._after_subscription is None:
            self._after_subscription = self.doc.on_after_page_break(self._on_after_page_break)

    def dispose(self):
        """Drop the page event subscriptions; open rectangles stop following breaks."""
        for subscription in (self._before_subscription, self._after_subscription):
            if subscription is not None:
                subscription.dispose()
        self._before_subscription = None
        self._after_subscription = None

    def start(
        self,
        x: Optional[float] = None,
        y: Optional[float] = None,
        w: Optional[float] = None,
        r: float = 0,
        line_width: Optional[float] = None,
        padding: float = 0,
    ) -> SegmentedBorder:
        """
        Open a rectangle at (x, y), defaulting to the cursor and the useful width.

        Args:
            x, y: Top-left corner (default: current cursor)
            w: Width (default: useful page width)
            r: Corner radius
            line_width: Stroke width; zero falls back to 0.3
            padding: Accepted but not applied yet

        Returns:
            The pushed record
        """
        if padding:
            logger.warning("start_rect: padding is not implemented, ignoring padding=%s", padding)
        self._subscribe()

        if line_width is None:
            line_width = self.doc.settings.rect_line_width
        record = SegmentedBorder(
            x=self.doc.x if x is None else x,
            y=self.doc.y if y is None else y,
            w=w or self.doc.useful_w,
            r=r or 0,
            line_width=line_width or RECT_FALLBACK_LINE_WIDTH,
        )
        self.stack.append(record)
        logger.debug(f"Rect started at ({record.x}, {record.y}) w={record.w}, depth {self.depth}")
        return record

    def stop(self) -> Optional[SegmentedBorder]:
        """Close the most recently started rectangle at the current cursor y."""
        if not self.stack:
            logger.warning("stop_rect: close rect without start_rect")
            return None
        record = self.stack.pop()
        record.close(self.doc, self.doc.y)
        return record

    def _on_before_page_break(self):
        with self.doc.page_break_suppressed():
            for record in self.stack:
                record.break_segment(self.doc, self.doc.y)

    def _on_after_page_break(self):
        for record in self.stack:
            record.resume(self.doc.y)


__all__ = ["MultiPageRectTracker", "BorderState"]
