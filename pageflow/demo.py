#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Demo document for pageflow

Renders one PDF that exercises every feature: positioning helpers,
a rectangle spanning several pages, rounded rectangle pieces, the
ruler, three row layouts and a "Page i of n" footer.
"""

import argparse
import sys
from typing import List, Optional

from config.logging_config import get_logger
from pageflow.document import PDFDocument

logger = get_logger(__name__)

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat. Duis aute irure "
    "dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur."
)

FEATURES = [
    "- Multi-page rectangles with automatic page handling",
    "- Positioning helpers (inc_x, inc_y, set_xy, start_x)",
    "- Page break control with try_add_page()",
    "- Development ruler for precise positioning",
    "- Row layouts of labelled items with auto-sized widths",
    "- Page break events for custom page handling",
]

SIMPLE_ITEMS = ["Technology", "Design", "Development", "Marketing", "Sales", "Support"]

FORM_ITEMS = [
    {"label": "Name:", "text": "Maria Silva", "w": 180},
    {"label": "Age:", "text": "35 years", "w": 120},
    {"label": "Email:", "text": "maria@example.com", "link": "mailto:maria@example.com", "w": 200},
    {"label": "Phone:", "text": "+55 11 99999-9999", "w": 160},
    {"label": "Department:", "text": "Technology", "w": 140},
    {"label": "Position:", "text": "Senior Developer", "w": 160},
    {"label": "Address:", "text": "Rua das Flores, 123 - Sao Paulo/SP - Brazil"},
    {"label": "Skills:", "text": "Python, ReportLab, PostgreSQL, Redis, Kubernetes"},
]

TAG_ITEMS = [
    {"text": "Python", "color": "blue"},
    {"text": "ReportLab", "color": "green"},
    {"text": "pydantic", "color": "darkgreen"},
    {"text": "pytest", "color": "brown"},
    {"text": "pypdf", "color": "purple"},
    {"text": "setuptools", "color": "gray"},
]


def heading(doc: PDFDocument, title: str, subtitle: str) -> PDFDocument:
    doc.font("Helvetica-Bold").font_size(18).text(title)
    return doc.font("Helvetica").font_size(12).text(subtitle)


def render_demo(output, paragraphs: int = 15, margin: float = 50) -> PDFDocument:
    """Build the demo document into output and return it (already ended)."""
    doc = PDFDocument(output, margins=margin, buffer_pages=True)
    doc.info["Title"] = "pageflow demo"
    doc.info["Author"] = "pageflow"
    doc.info["Subject"] = "Pagination-aware borders and row layouts"

    # Title page
    doc.font("Helvetica-Bold").font_size(28).text("pageflow demo", 0, 100, width=doc.page.width, align="center")
    doc.font("Helvetica").font_size(16).text("Feature overview", 0, 140, width=doc.page.width, align="center")
    doc.y = 220
    doc.font_size(12)
    for feature in FEATURES:
        doc.inc_y(20)
        doc.text(feature, 100)

    # Multi-page rectangle
    doc.add_page()
    heading(doc, "Multi-Page Rectangle", "The border below follows the text across page breaks.")
    doc.y = 120
    doc.start_rect(x=80, y=doc.y, w=400, r=8, line_width=2)
    doc.x = 100
    doc.inc_y(20)
    doc.font("Helvetica-Bold").font_size(14).text("Content inside a multi-page rectangle")
    doc.inc_y(30)
    doc.font("Helvetica").font_size(11)
    for i in range(paragraphs):
        doc.x = 100
        doc.text(f"Paragraph {i + 1}: {LOREM}", width=360, align="justify")
        doc.inc_y(20)
        doc.try_add_page(100)
    doc.stop_rect()

    # Positioning helpers
    doc.add_page()
    heading(doc, "Positioning Helpers", "Cursor arithmetic for precise placement.")
    doc.set_xy(100, 120).font_size(10).text("set_xy(100, 120) - absolute position")
    doc.inc_x(200).text("inc_x(200) - move right")
    doc.inc_y(30).text("inc_y(30) - move down")
    doc.start_x().inc_y(20).text("start_x() - back to the left margin")
    doc.inc_xy(150, 30).text("inc_xy(150, 30) - move both")

    # Rounded rectangle pieces
    doc.add_page()
    heading(doc, "Rounded Rectangle Pieces", "The three pieces a border is cut into at page breaks.")
    y = 120
    for x, method, caption in (
        (50, doc.rounded_rect_up, "rounded_rect_up()"),
        (250, doc.rounded_rect_mid, "rounded_rect_mid()"),
        (450, doc.rounded_rect_down, "rounded_rect_down()"),
    ):
        method(x, y, 100, 60, 10).line_width(1.5).stroke()
        doc.font_size(10).text(caption, x + 5, y + 25, width=100)

    # Ruler
    doc.add_page()
    heading(doc, "Development Ruler", "Ticks every 10pt, labels every 50pt.")
    doc.draw_ruler(0, 0)
    doc.set_xy(50, 200).font_size(10).text("Ruler drawn at (0, 0)")

    # Row layouts
    doc.add_page()
    heading(doc, "Row Layouts", "Labelled items packed into rows.")
    doc.set_y(120)
    doc.font("Helvetica-Bold").font_size(14).text("Simple text items:")
    doc.inc_y(30)
    doc.draw_row_label_texts(SIMPLE_ITEMS, {
        "text": {"font": "Helvetica", "size": 11},
        "default_item_w": 100,
        "padding": 8,
        "box": {"radius": 3},
    })

    doc.inc_y(50)
    doc.font("Helvetica-Bold").font_size(14).text("Form-style layout with labels:", doc.page.margins.left)
    doc.inc_y(30)
    doc.draw_row_label_texts(FORM_ITEMS, {
        "label": {"font": "Helvetica-Bold", "size": 10},
        "text": {"font": "Helvetica", "size": 10},
        "box": {"radius": 5},
        "padding": 12,
    })

    doc.inc_y(50)
    doc.font("Helvetica-Bold").font_size(14).text("Items with individual borders:", doc.page.margins.left)
    doc.inc_y(30)
    doc.draw_row_label_texts(TAG_ITEMS, {
        "text": {"font": "Helvetica-Bold", "size": 9},
        "no_label": True,
        "default_item_w": 80,
        "padding": 5,
        "item_box": {"active": True, "padding": 4, "radius": 3},
    })

    doc.stamp_page_numbers()
    doc.end()
    logger.info(f"Demo rendered: {len(doc.pages)} pages")
    return doc


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render the pageflow feature demo to a PDF file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default demo
  pageflow-demo demo.pdf

  # Longer multi-page rectangle
  pageflow-demo demo.pdf --paragraphs 40 --margin 40
        """
    )
    parser.add_argument("output", help="Output PDF path")
    parser.add_argument("--paragraphs", type=int, default=15,
                        help="Paragraphs inside the multi-page rectangle (default: 15)")
    parser.add_argument("--margin", type=float, default=50,
                        help="Page margin in points (default: 50)")
    args = parser.parse_args(argv)

    doc = render_demo(args.output, paragraphs=args.paragraphs, margin=args.margin)
    print(f"Demo PDF written to {args.output} ({len(doc.pages)} pages)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
