#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Row Layout Engine

Packs (label, text) items into rows of bounded width and paints them,
breaking pages between rows and optionally wrapping the whole block in a
border that continues across those breaks.

Two passes:
1. measure(): assign items to rows, share each row's leftover width
   among its auto-width items, measure label/text heights at the final
   widths and keep the tallest per row.
2. paint(): walk the rows, add a page before a row that would cross the
   bottom margin, draw labels and texts, close the block border.

Usage:
    engine = RowLayoutEngine(doc)
    engine.draw(
        [{"label": "Name:", "text": "Jane Doe", "w": 180}, "Free text"],
        {"label": {"font": "Helvetica-Bold", "size": 10}, "box": {"radius": 5}},
    )

Version: 1.0.0
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Dict, Any, Iterable, TYPE_CHECKING

from config.constants import (
    BOX_LINE_WIDTH, DEBUG_LINE_WIDTH, ITEM_BOX_LINE_WIDTH,
    DIVIDER_LINE_WIDTH, DIVIDER_INSET,
)
from config.logging_config import get_logger
from pageflow.borders.segmented import SegmentedBorder
from .options import RowLayoutOptions, RowItem, TextStyle

if TYPE_CHECKING:
    from pageflow.document.pdf_document import PDFDocument

logger = get_logger(__name__)


@dataclass
class LineBucket:
    """Bookkeeping for one row during measurement"""
    remaining_width: float = 0
    auto_width_count: int = 0
    max_height: float = 0
    item_count: int = 0


@dataclass
class ItemLayout:
    """Resolved placement of one item"""
    item: RowItem
    is_auto_width: bool
    row_index: int
    width: float
    color: Any = "black"
    label_height: float = 0
    text_height: float = 0


@dataclass
class RowPlan:
    """Result of the measurement pass, consumed by paint()"""
    items: List[ItemLayout]
    lines: List[LineBucket]
    options: RowLayoutOptions

    @property
    def row_count(self) -> int:
        return len(self.lines)

    def row(self, index: int) -> List[ItemLayout]:
        return [layout for layout in self.items if layout.row_index == index]

    def row_extent(self, index: int) -> float:
        """Leading gap plus the items and the gaps between them"""
        row = self.row(index)
        return sum(layout.width for layout in row) + len(row) * self.options.gap


class RowLayoutEngine:
    """
    Lays out label/text items in rows for one document.

    Shares the document's cursor and page break flag, so one layout call
    must finish before the next starts.
    """

    def __init__(self, doc: 'PDFDocument'):
        self.doc = doc

    def draw(self, items: Iterable, options: Optional[Dict[str, Any]] = None) -> 'PDFDocument':
        """Measure and paint items; returns the document."""
        with self.doc.page_break_suppressed():
            plan = self.measure(items, options)
            self.paint(plan)
        logger.debug(f"Row layout drawn: {len(plan.items)} items in {plan.row_count} rows")
        return self.doc

    def _apply_style(self, style: TextStyle):
        if style.font:
            self.doc.font(style.font)
        if style.size:
            self.doc.font_size(style.size)

    # ------------------------------------------------------------------
    # Pass 1: rows and heights
    # ------------------------------------------------------------------

    def measure(self, items: Iterable, options: Optional[Dict[str, Any]] = None) -> RowPlan:
        """
        Assign items to rows and resolve widths and heights.

        Moves the cursor to the block origin. Dividers, when enabled, are
        stroked here at that origin, one per item.
        """
        doc = self.doc
        opts = RowLayoutOptions.from_dict(
            options,
            default_item_w=doc.settings.row_default_item_w,
            padding=doc.settings.row_padding,
        )
        x = opts.x if opts.x is not None else doc.x
        y = opts.y if opts.y is not None else doc.y
        w = opts.w or (doc.page.width - (x + doc.page.margins.right))
        opts = replace(opts, x=x, y=y, w=w)
        doc.set_xy(x, y)

        gap = opts.gap
        capacity = w - gap
        remaining = capacity
        lines = [LineBucket()]
        layouts: List[ItemLayout] = []
        row = 0

        for raw in items:
            item = RowItem.coerce(raw)
            is_auto = not item.w
            width = opts.default_item_w if is_auto else min(item.w, capacity)

            if remaining - width < 0 and lines[row].item_count:
                lines[row].remaining_width = remaining
                lines.append(LineBucket())
                row += 1
                remaining = capacity

            remaining -= width + gap
            lines[row].item_count += 1
            if is_auto:
                lines[row].auto_width_count += 1
            layouts.append(ItemLayout(
                item=item,
                is_auto_width=is_auto,
                row_index=row,
                width=width,
                color=item.color,
                label_height=opts.label.h,
                text_height=opts.text.h,
            ))
        lines[row].remaining_width = remaining

        for layout in layouts:
            line = lines[layout.row_index]
            if layout.is_auto_width:
                layout.width += line.remaining_width / line.auto_width_count
            self._measure_item(layout, line, opts)

            if opts.divider:
                doc.move_to(doc.x + DIVIDER_INSET, doc.y) \
                    .line_to(doc.x + doc.useful_w - DIVIDER_INSET, doc.y) \
                    .line_width(DIVIDER_LINE_WIDTH).stroke()

        return RowPlan(items=layouts, lines=lines, options=opts)

    def _measure_item(self, layout: ItemLayout, line: LineBucket, opts: RowLayoutOptions):
        item = layout.item
        if item.h_text is not None:
            layout.text_height = item.h_text
        elif not opts.text.h:
            self._apply_style(opts.text)
            layout.text_height = self.doc.height_of_string(item.text, width=layout.width, align=item.align)
        line.max_height = max(line.max_height, layout.text_height)

        if not opts.has_label:
            return
        if item.h_label is not None:
            layout.label_height = item.h_label
        elif not opts.label.h:
            self._apply_style(opts.label)
            layout.label_height = self.doc.height_of_string(item.label, width=layout.width, align=item.align)
        stacked = layout.text_height + layout.label_height + opts.padding + opts.item_box.padding
        line.max_height = max(line.max_height, stacked)

    # ------------------------------------------------------------------
    # Pass 2: painting
    # ------------------------------------------------------------------

    def paint(self, plan: RowPlan) -> 'PDFDocument':
        """Draw a measured plan; leaves the cursor at the block's bottom-left."""
        doc = self.doc
        opts = plan.options
        gap = opts.gap
        row_x = opts.x + gap
        cx = row_x
        cy = opts.y + gap

        box = None
        if opts.box is not None:
            box = SegmentedBorder(x=opts.x, y=opts.y, w=opts.w, r=opts.box.radius, line_width=BOX_LINE_WIDTH)

        current = 0
        checked_row = -1
        for layout in plan.items:
            if layout.row_index != current:
                cx = row_x
                cy += plan.lines[current].max_height + gap
                current = layout.row_index

            if checked_row != current:
                checked_row = current
                cy = self._break_if_needed(plan, current, cy, box)

            self._paint_item(layout, cx, cy, opts)
            cx += layout.width + gap

        if plan.items:
            cy += plan.lines[current].max_height

        if box is not None:
            box.close(doc, cy)

        doc.set_xy(opts.x, cy)
        doc.fill_color("black")
        return doc

    def _break_if_needed(self, plan: RowPlan, row: int, cy: float, box: Optional[SegmentedBorder]) -> float:
        """Add a page when the row would cross the bottom margin; returns the row's top."""
        doc = self.doc
        gap = plan.options.gap
        if plan.lines[row].max_height + cy <= doc.page.max_y():
            return cy
        # a row that overflows an empty page is painted where it is
        if cy <= doc.page.content_top + gap:
            logger.debug(f"Row {row} is taller than the page, painting without a break")
            return cy

        if row > 0 and box is not None:
            box.break_segment(doc, cy)
        doc.y = cy
        doc.add_page()
        if box is not None:
            box.resume(doc.y)
        if row > 0:
            return doc.y
        return doc.y + gap

    def _paint_item(self, layout: ItemLayout, cx: float, cy: float, opts: RowLayoutOptions):
        doc = self.doc
        item = layout.item
        doc.fill_color(layout.color)

        text_top = cy
        if opts.has_label:
            self._apply_style(opts.label)
            doc.text(item.label, cx, cy, width=layout.width, height=layout.label_height, align=item.align)
            if opts.debug:
                doc.rect(cx, cy, layout.width, layout.label_height).line_width(DEBUG_LINE_WIDTH).stroke()
            text_top = cy + layout.label_height

        self._apply_style(opts.text)
        doc.text(
            item.text,
            cx,
            text_top,
            width=layout.width,
            height=layout.text_height,
            align=item.align,
            link=item.link,
            underline=bool(item.link),
        )
        if opts.debug:
            doc.rect(cx, text_top, layout.width, layout.text_height).line_width(DEBUG_LINE_WIDTH).stroke()

        if opts.item_box.active:
            p = opts.item_box.padding
            doc.rounded_rect(
                cx - p, text_top - p, layout.width + p * 2, layout.text_height + p * 2, opts.item_box.radius
            ).line_width(ITEM_BOX_LINE_WIDTH).stroke()
