#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Page Model

A page is a size, a set of margins and a display list of drawing
operations. Operations are recorded in top-left coordinates (y grows
downward) and only converted to reportlab's bottom-left origin when the
page is flushed to the canvas, which is what makes revisiting a buffered
page possible.

Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Any, Optional


PathCommand = Tuple[Any, ...]


@dataclass
class Margins:
    """Page margins in points"""
    top: float = 72
    bottom: float = 72
    left: float = 72
    right: float = 72

    @classmethod
    def uniform(cls, value: float) -> 'Margins':
        return cls(top=value, bottom=value, left=value, right=value)

    @classmethod
    def coerce(cls, value) -> 'Margins':
        """Accept a Margins, a number or a dict with any of the four sides."""
        if isinstance(value, Margins):
            return value
        if isinstance(value, (int, float)):
            return cls.uniform(value)
        if isinstance(value, dict):
            return cls(**{k: v for k, v in value.items() if k in ("top", "bottom", "left", "right")})
        raise ValueError(f"Unsupported margins: {value!r}")


@dataclass
class StrokeOp:
    """A stroked path"""
    commands: List[PathCommand]
    line_width: float
    color: Any


@dataclass
class FillOp:
    """A filled path"""
    commands: List[PathCommand]
    color: Any


@dataclass
class TextOp:
    """One wrapped line of text, y is the top of the line box"""
    text: str
    x: float
    y: float
    width: float
    font: str
    size: float
    color: Any
    align: str = "left"
    last_line: bool = True


@dataclass
class LinkOp:
    """URI annotation covering a rectangle"""
    url: str
    x: float
    y: float
    width: float
    height: float


@dataclass
class Page:
    """A single page and everything drawn on it so far"""
    number: int
    width: float
    height: float
    margins: Margins
    operations: List[Any] = field(default_factory=list)
    flushed: bool = False

    @property
    def content_top(self) -> float:
        return self.margins.top

    def max_y(self) -> float:
        """Lowest ordinate content may reach on this page"""
        return self.height - self.margins.bottom

    def strokes(self) -> List[StrokeOp]:
        return [op for op in self.operations if isinstance(op, StrokeOp)]

    def texts(self) -> List[TextOp]:
        return [op for op in self.operations if isinstance(op, TextOp)]

    def links(self) -> List[LinkOp]:
        return [op for op in self.operations if isinstance(op, LinkOp)]

    def find_text(self, needle: str) -> Optional[TextOp]:
        for op in self.texts():
            if needle in op.text:
                return op
        return None
