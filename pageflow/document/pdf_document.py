#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PDF Document

Cursor-based, fluent document on top of the ReportLab canvas.

Drawing calls are recorded on the current page's display list in
top-left coordinates and replayed onto a reportlab canvas when the page
is flushed. Without page buffering a page is flushed as soon as the next
one is added; with buffer_pages=True pages stay editable until
flush_pages() or end(), so a footer can be stamped on every page once
the total is known.

Usage:
    doc = PDFDocument("out.pdf", page_size="A4", margins=50)
    doc.font("Helvetica-Bold").font_size(18).text("Title")
    doc.start_rect(r=8, line_width=2)
    doc.text(long_text)
    doc.stop_rect()
    doc.draw_row_label_texts(["Tech", "Design"], {"box": {"radius": 3}})
    doc.end()

Version: 1.0.0
"""

import math
from contextlib import contextmanager
from dataclasses import dataclass
from io import BytesIO
from typing import Optional, List, Dict, Any, Callable, Iterator, Union, BinaryIO

from reportlab.lib import colors
from reportlab.pdfgen import canvas

from config.settings import Settings, settings as default_settings, resolve_page_size
from config.logging_config import get_logger
from pageflow.borders import geometry
from pageflow.borders.tracker import MultiPageRectTracker
from pageflow.layout.row_engine import RowLayoutEngine
from .events import PageEvent, PageEvents, Subscription
from .page import Page, Margins, StrokeOp, FillOp, TextOp, LinkOp
from .text import TextMetrics, register_ttf

logger = get_logger(__name__)


class PageBufferError(ValueError):
    """Raised when a page outside the buffered range is requested"""
    pass


@dataclass
class PageRange:
    """Pages still held in memory: indices start .. start + count - 1"""
    start: int
    count: int


def to_color(value) -> colors.Color:
    """Resolve a colour name, hex string, tuple or Color; unknown values become black."""
    if value is None:
        return colors.black
    if isinstance(value, colors.Color):
        return value
    if isinstance(value, (tuple, list)):
        if len(value) == 4:
            return colors.CMYKColor(*[c / 100.0 if c > 1 else c for c in value])
        return colors.Color(*[c / 255.0 if c > 1 else c for c in value])
    try:
        return colors.toColor(value)
    except ValueError:
        logger.debug(f"Unknown color {value!r}, using black")
        return colors.black


class PDFDocument:
    """
    Page-based document with a text cursor and page break events.

    Coordinates are points from the top-left corner of the page.
    Every drawing method returns the document so calls can be chained.
    """

    def __init__(
        self,
        output: Union[str, BinaryIO, None] = None,
        page_size=None,
        margins=None,
        buffer_pages: Optional[bool] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize document and open the first page.

        Args:
            output: File path or binary stream (in-memory buffer if None)
            page_size: Page size name (A4, letter, ...) or (width, height)
            margins: Number, dict or Margins (default: settings.margin)
            buffer_pages: Keep pages open until flush_pages()/end()
            settings: Settings instance (default: global settings)
        """
        self.settings = settings or default_settings
        self.page_width, self.page_height = resolve_page_size(page_size or self.settings.page_size)
        self.margins = Margins.coerce(self.settings.margin if margins is None else margins)
        self.buffer_pages = self.settings.buffer_pages if buffer_pages is None else buffer_pages

        self.output = BytesIO() if output is None else output
        self._canvas = canvas.Canvas(self.output, pagesize=(self.page_width, self.page_height))
        self.info: Dict[str, str] = {}

        self.events = PageEvents()
        self.no_page_break = False

        self.pages: List[Page] = []
        self._page_index = -1
        self._flushed_count = 0
        self._ended = False

        # Graphics state
        self._font = self.settings.default_font
        self._font_size = self.settings.default_font_size
        self._fill_color = colors.black
        self._stroke_color = colors.black
        self._line_width = 1.0
        self._path: List[tuple] = []

        self.x = self.margins.left
        self.y = self.margins.top

        self.rects = MultiPageRectTracker(self)
        self.rows = RowLayoutEngine(self)

        self.add_page()
        logger.debug(
            f"PDFDocument initialized: {self.page_width}x{self.page_height}pt, "
            f"buffer_pages={self.buffer_pages}"
        )

    # ------------------------------------------------------------------
    # Page model
    # ------------------------------------------------------------------

    @property
    def page(self) -> Page:
        return self.pages[self._page_index]

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def useful_w(self) -> float:
        """Page width minus left and right margins"""
        return self.page.width - (self.page.margins.left + self.page.margins.right)

    @property
    def useful_h(self) -> float:
        """Page height minus top and bottom margins"""
        return self.page.height - (self.page.margins.top + self.page.margins.bottom)

    def add_page(self) -> 'PDFDocument':
        """Start a new page, notifying page break subscribers before and after."""
        self._check_open()
        self.events.emit(PageEvent.BEFORE_PAGE_BREAK)

        page = Page(
            number=len(self.pages) + 1,
            width=self.page_width,
            height=self.page_height,
            margins=Margins(**vars(self.margins)),
        )
        self.pages.append(page)
        self._page_index = len(self.pages) - 1
        self._path = []
        if not self.buffer_pages:
            self._flush_until(self._page_index)

        self.x = page.margins.left
        self.y = page.margins.top
        logger.debug(f"Page {page.number} added")

        self.events.emit(PageEvent.AFTER_PAGE_BREAK)
        return self

    def try_add_page(self, min_size: float) -> 'PDFDocument':
        """Add a page when less than min_size points remain above the bottom margin."""
        if (self.page.max_y() - self.y) < min_size:
            self.add_page()
        return self

    def buffered_page_range(self) -> PageRange:
        return PageRange(start=self._flushed_count, count=len(self.pages) - self._flushed_count)

    def switch_to_page(self, index: int) -> 'PDFDocument':
        """Make a buffered page current again (0-based index)."""
        page_range = self.buffered_page_range()
        if not page_range.start <= index < page_range.start + page_range.count:
            raise PageBufferError(
                f"switch_to_page({index}) out of bounds, current buffer covers pages "
                f"{page_range.start} to {page_range.start + page_range.count - 1}"
            )
        self._page_index = index
        self._path = []
        return self

    def flush_pages(self) -> 'PDFDocument':
        """Write every buffered page to the output."""
        self._flush_until(len(self.pages))
        return self

    def end(self):
        """Flush remaining pages, write metadata and save. Returns the output."""
        self._check_open()
        self.flush_pages()
        self._apply_info()
        self._canvas.save()
        self._ended = True
        self.rects.dispose()
        logger.info(f"Document saved: {len(self.pages)} pages")
        return self.output

    def on_before_page_break(self, handler: Callable[[], None]) -> Subscription:
        return self.events.subscribe(PageEvent.BEFORE_PAGE_BREAK, handler)

    def on_after_page_break(self, handler: Callable[[], None]) -> Subscription:
        return self.events.subscribe(PageEvent.AFTER_PAGE_BREAK, handler)

    @contextmanager
    def page_break_suppressed(self) -> Iterator['PDFDocument']:
        """Disable automatic page breaks, restoring the previous flag on exit."""
        previous = self.no_page_break
        self.no_page_break = True
        try:
            yield self
        finally:
            self.no_page_break = previous

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def set_x(self, x: float) -> 'PDFDocument':
        self.x = x
        return self

    def set_y(self, y: float) -> 'PDFDocument':
        self.y = y
        return self

    def set_xy(self, x: float, y: float) -> 'PDFDocument':
        self.y = y
        self.x = x
        return self

    def inc_x(self, x: float) -> 'PDFDocument':
        self.x += x
        return self

    def inc_y(self, y: float) -> 'PDFDocument':
        self.y += y
        return self

    def inc_xy(self, x: float, y: float) -> 'PDFDocument':
        self.y += y
        self.x += x
        return self

    def start_x(self) -> 'PDFDocument':
        """Return to the left margin"""
        self.x = self.page.margins.left
        return self

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def move_to(self, x: float, y: float) -> 'PDFDocument':
        self._path.append(("M", x, y))
        return self

    def line_to(self, x: float, y: float) -> 'PDFDocument':
        self._path.append(("L", x, y))
        return self

    def bezier_curve_to(self, cp1x, cp1y, cp2x, cp2y, x, y) -> 'PDFDocument':
        self._path.append(("C", cp1x, cp1y, cp2x, cp2y, x, y))
        return self

    def close_path(self) -> 'PDFDocument':
        self._path.append(("Z",))
        return self

    def rect(self, x: float, y: float, w: float, h: float) -> 'PDFDocument':
        self._path.extend(geometry.rect_path(x, y, w, h))
        return self

    def rounded_rect(self, x: float, y: float, w: float, h: float, r: float = 0) -> 'PDFDocument':
        self._path.extend(geometry.rounded_rect_path(x, y, w, h, r))
        return self

    def rounded_rect_up(self, x: float, y: float, w: float, h: float, r: float = 0) -> 'PDFDocument':
        """Top piece of a rectangle crossing a page break"""
        self._path.extend(geometry.rounded_rect_up_path(x, y, w, h, r))
        return self

    def rounded_rect_mid(self, x: float, y: float, w: float, h: float, r: float = 0) -> 'PDFDocument':
        """Middle piece: the two vertical sides"""
        self._path.extend(geometry.rounded_rect_mid_path(x, y, w, h, r))
        return self

    def rounded_rect_down(self, x: float, y: float, w: float, h: float, r: float = 0) -> 'PDFDocument':
        """Bottom piece of a rectangle continued from a previous page"""
        self._path.extend(geometry.rounded_rect_down_path(x, y, w, h, r))
        return self

    def line_width(self, width: float) -> 'PDFDocument':
        self._line_width = width
        return self

    def stroke_color(self, color) -> 'PDFDocument':
        self._stroke_color = to_color(color)
        return self

    def fill_color(self, color) -> 'PDFDocument':
        self._fill_color = to_color(color)
        return self

    def stroke(self) -> 'PDFDocument':
        if self._path:
            self._record(StrokeOp(commands=self._path, line_width=self._line_width, color=self._stroke_color))
        self._path = []
        return self

    def fill(self, color=None) -> 'PDFDocument':
        if color is not None:
            self.fill_color(color)
        if self._path:
            self._record(FillOp(commands=self._path, color=self._fill_color))
        self._path = []
        return self

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def font(self, name: str, size: Optional[float] = None) -> 'PDFDocument':
        self._font = name
        if size:
            self._font_size = size
        return self

    def font_size(self, size: float) -> 'PDFDocument':
        self._font_size = size
        return self

    def register_font(self, name: str, path: str) -> 'PDFDocument':
        """Register a TrueType font file under name."""
        register_ttf(name, path)
        return self

    @property
    def current_font(self) -> str:
        return self._font

    @property
    def current_font_size(self) -> float:
        return self._font_size

    @property
    def current_line_width(self) -> float:
        return self._line_width

    def current_line_height(self) -> float:
        return TextMetrics.line_height(self._font, self._font_size)

    def _default_text_width(self, x: float) -> float:
        return self.page.width - (x + self.page.margins.right)

    def height_of_string(self, text: Optional[str], width: Optional[float] = None, align: str = "left") -> float:
        """Height text would take when wrapped at width with the current font."""
        if width is None:
            width = self._default_text_width(self.x)
        return TextMetrics.height_of_string(text, self._font, self._font_size, width)

    def text(
        self,
        text: Optional[str],
        x: Optional[float] = None,
        y: Optional[float] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
        align: str = "left",
        link: Optional[str] = None,
        underline: bool = False,
    ) -> 'PDFDocument':
        """
        Draw wrapped text at the cursor (or at x, y) and move the cursor below it.

        Lines that would cross the bottom margin continue on a new page
        unless page breaks are suppressed. With height set, lines that do
        not fit inside the box are dropped.
        """
        self._check_open()
        if x is not None:
            self.x = x
        if y is not None:
            self.y = y
        if width is None:
            width = self._default_text_width(self.x)

        lines = TextMetrics.wrap(text, self._font, self._font_size, width)
        line_h = self.current_line_height()
        if height is not None:
            lines = lines[:max(0, int((height + 1e-6) // line_h))] if line_h else lines

        start_x = self.x
        for i, line in enumerate(lines):
            if (
                not self.no_page_break
                and self.y + line_h > self.page.max_y()
                and self.y > self.page.content_top
            ):
                self.add_page()
                self.x = start_x
            self._record(TextOp(
                text=line,
                x=self.x,
                y=self.y,
                width=width,
                font=self._font,
                size=self._font_size,
                color=self._fill_color,
                align=align,
                last_line=i == len(lines) - 1,
            ))
            if underline or link:
                self._decorate_line(line, width, align, line_h, underline, link)
            self.y += line_h
        return self

    def _decorate_line(self, line: str, width: float, align: str, line_h: float, underline: bool, link: Optional[str]):
        line_w = TextMetrics.string_width(line, self._font, self._font_size)
        offset = 0.0
        if align == "right":
            offset = width - line_w
        elif align == "center":
            offset = (width - line_w) / 2
        x = self.x + offset

        if underline:
            thickness = 0.5 if self._font_size < 10 else math.floor(self._font_size / 10)
            underline_y = self.y + TextMetrics.ascent(self._font, self._font_size) + thickness
            self._record(StrokeOp(
                commands=[("M", x, underline_y), ("L", x + line_w, underline_y)],
                line_width=thickness,
                color=self._fill_color,
            ))
        if link:
            self._record(LinkOp(url=link, x=x, y=self.y, width=line_w, height=line_h))

    # ------------------------------------------------------------------
    # Tools built on the primitives
    # ------------------------------------------------------------------

    def start_rect(
        self,
        x: Optional[float] = None,
        y: Optional[float] = None,
        w: Optional[float] = None,
        r: float = 0,
        line_width: Optional[float] = None,
        padding: float = 0,
    ) -> 'PDFDocument':
        """Open a rectangle border that follows the content across page breaks."""
        self.rects.start(x=x, y=y, w=w, r=r, line_width=line_width, padding=padding)
        return self

    def stop_rect(self) -> 'PDFDocument':
        """Close the most recently opened rectangle at the current cursor."""
        self.rects.stop()
        return self

    def draw_row_label_texts(self, items, options: Optional[Dict[str, Any]] = None) -> 'PDFDocument':
        """Lay out (label, text) items in rows; see RowLayoutEngine."""
        return self.rows.draw(items, options)

    def draw_ruler(self, x: float = 0, y: float = 0) -> 'PDFDocument':
        from .decorations import draw_ruler
        return draw_ruler(self, x, y)

    def stamp_page_numbers(self, template: str = "Page {page} of {total}") -> 'PDFDocument':
        from .decorations import stamp_page_numbers
        return stamp_page_numbers(self, template)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _check_open(self):
        if self._ended:
            raise ValueError("Document already ended")

    def _record(self, op):
        page = self.page
        if page.flushed:
            raise PageBufferError(f"Page {page.number} was already flushed")
        page.operations.append(op)

    def _apply_info(self):
        c = self._canvas
        if "Title" in self.info:
            c.setTitle(self.info["Title"])
        if "Author" in self.info:
            c.setAuthor(self.info["Author"])
        if "Subject" in self.info:
            c.setSubject(self.info["Subject"])
        if "Keywords" in self.info:
            c.setKeywords(self.info["Keywords"])

    def _flush_until(self, stop: int):
        for page in self.pages[self._flushed_count:stop]:
            self._render_page(page)
        self._flushed_count = max(self._flushed_count, stop)

    def _render_page(self, page: Page):
        c = self._canvas
        c.setPageSize((page.width, page.height))
        for op in page.operations:
            if isinstance(op, StrokeOp):
                c.setLineWidth(op.line_width)
                c.setStrokeColor(op.color)
                c.drawPath(self._build_path(op.commands, page.height), stroke=1, fill=0)
            elif isinstance(op, FillOp):
                c.setFillColor(op.color)
                c.drawPath(self._build_path(op.commands, page.height), stroke=0, fill=1)
            elif isinstance(op, TextOp):
                self._render_text(op, page.height)
            elif isinstance(op, LinkOp):
                c.linkURL(
                    op.url,
                    (op.x, page.height - (op.y + op.height), op.x + op.width, page.height - op.y),
                    relative=0,
                    thickness=0,
                )
        c.showPage()
        page.flushed = True
        logger.debug(f"Page {page.number} flushed ({len(page.operations)} operations)")

    def _build_path(self, commands, page_height: float):
        path = self._canvas.beginPath()
        for cmd in commands:
            kind = cmd[0]
            if kind == "M":
                path.moveTo(cmd[1], page_height - cmd[2])
            elif kind == "L":
                path.lineTo(cmd[1], page_height - cmd[2])
            elif kind == "C":
                path.curveTo(
                    cmd[1], page_height - cmd[2],
                    cmd[3], page_height - cmd[4],
                    cmd[5], page_height - cmd[6],
                )
            elif kind == "Z":
                path.close()
        return path

    def _render_text(self, op: TextOp, page_height: float):
        c = self._canvas
        baseline = page_height - (op.y + TextMetrics.ascent(op.font, op.size))
        c.setFillColor(op.color)
        c.setFont(op.font, op.size)
        if op.align == "right":
            c.drawRightString(op.x + op.width, baseline, op.text)
        elif op.align == "center":
            c.drawCentredString(op.x + op.width / 2, baseline, op.text)
        elif op.align == "justify" and not op.last_line and " " in op.text.strip():
            gaps = op.text.strip().count(" ")
            slack = op.width - TextMetrics.string_width(op.text, op.font, op.size)
            text_obj = c.beginText(op.x, baseline)
            text_obj.setFont(op.font, op.size)
            text_obj.setWordSpace(max(0.0, slack / gaps))
            text_obj.textOut(op.text)
            c.drawText(text_obj)
        else:
            c.drawString(op.x, baseline, op.text)
