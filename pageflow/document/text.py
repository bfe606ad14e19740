#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Text measurement on top of reportlab font metrics.
"""

from typing import List, Optional

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from config.constants import TEXT_LINE_GAP_RATIO


class TextMetrics:
    """Line height, wrapping and height of wrapped strings"""

    @staticmethod
    def line_height(font: str, size: float) -> float:
        ascent, descent = pdfmetrics.getAscentDescent(font, size)
        return (ascent - descent) + size * TEXT_LINE_GAP_RATIO

    @staticmethod
    def ascent(font: str, size: float) -> float:
        return pdfmetrics.getAscentDescent(font, size)[0]

    @staticmethod
    def string_width(text: str, font: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, font, size)

    @staticmethod
    def wrap(text: Optional[str], font: str, size: float, width: float) -> List[str]:
        """Split text into lines no wider than width (explicit newlines kept)."""
        if text is None:
            return []
        text = str(text)
        if not text:
            return []
        return simpleSplit(text, font, size, width)

    @classmethod
    def height_of_string(cls, text: Optional[str], font: str, size: float, width: float) -> float:
        lines = cls.wrap(text, font, size, width)
        return len(lines) * cls.line_height(font, size)


def register_ttf(name: str, path: str):
    """Register a TrueType font under name so it can be selected with font()."""
    pdfmetrics.registerFont(TTFont(name, path))
