#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Rounded Rectangle Geometry

Path builders for whole rounded rectangles and for the three pieces a
rectangle is cut into when it crosses page breaks:

    up    top corners rounded, bottom open     (first page)
    mid   two vertical strokes                 (pages in between)
    down  bottom corners rounded, top open     (last page)

Each builder returns a list of path commands in top-left page
coordinates:

    ("M", x, y)                          move to
    ("L", x, y)                          line to
    ("C", x1, y1, x2, y2, x3, y3)        cubic bezier to
    ("Z",)                               close path

Version: 1.0.0
"""

import math
from typing import List, Tuple, Any

PathCommand = Tuple[Any, ...]

# Control point distance approximating a quarter circle with one cubic bezier
KAPPA = 4.0 * ((math.sqrt(2) - 1.0) / 3.0)


def clamp_radius(r, w: float, h: float) -> float:
    """Corner radius limited to half the width and half the segment height."""
    return max(0.0, min(r or 0, 0.5 * w, 0.5 * h))


def rounded_rect_path(x: float, y: float, w: float, h: float, r: float = 0) -> List[PathCommand]:
    """Closed rectangle with all four corners rounded"""
    r = clamp_radius(r, w, h)
    c = r * (1.0 - KAPPA)
    return [
        ("M", x + r, y),
        ("L", x + w - r, y),
        ("C", x + w - c, y, x + w, y + c, x + w, y + r),
        ("L", x + w, y + h - r),
        ("C", x + w, y + h - c, x + w - c, y + h, x + w - r, y + h),
        ("L", x + r, y + h),
        ("C", x + c, y + h, x, y + h - c, x, y + h - r),
        ("L", x, y + r),
        ("C", x, y + c, x + c, y, x + r, y),
        ("Z",),
    ]


def rounded_rect_up_path(x: float, y: float, w: float, h: float, r: float = 0) -> List[PathCommand]:
    """Left side, rounded top edge, right side; the bottom stays open"""
    r = clamp_radius(r, w, h)
    c = r * (1.0 - KAPPA)
    return [
        ("M", x, y + h),
        ("L", x, y + r),
        ("C", x, y + c, x + c, y, x + r, y),
        ("L", x + w - r, y),
        ("C", x + w - c, y, x + w, y + c, x + w, y + r),
        ("L", x + w, y + h),
    ]


def rounded_rect_mid_path(x: float, y: float, w: float, h: float, r: float = 0) -> List[PathCommand]:
    """Both vertical sides only. r is accepted for a uniform signature."""
    return [
        ("M", x, y + h),
        ("L", x, y),
        ("M", x + w, y + h),
        ("L", x + w, y),
    ]


def rounded_rect_down_path(x: float, y: float, w: float, h: float, r: float = 0) -> List[PathCommand]:
    """Right side, rounded bottom edge, left side; the top stays open"""
    r = clamp_radius(r, w, h)
    c = r * (1.0 - KAPPA)
    return [
        ("M", x + w, y),
        ("L", x + w, y + h - r),
        ("C", x + w, y + h - c, x + w - c, y + h, x + w - r, y + h),
        ("L", x + r, y + h),
        ("C", x + c, y + h, x, y + h - c, x, y + h - r),
        ("L", x, y),
    ]


def rect_path(x: float, y: float, w: float, h: float) -> List[PathCommand]:
    return [
        ("M", x, y),
        ("L", x + w, y),
        ("L", x + w, y + h),
        ("L", x, y + h),
        ("Z",),
    ]
