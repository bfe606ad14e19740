"""
Borders that survive page breaks.

    from pageflow.borders import SegmentedBorder, MultiPageRectTracker
"""

from .geometry import (
    KAPPA,
    clamp_radius,
    rounded_rect_path,
    rounded_rect_up_path,
    rounded_rect_mid_path,
    rounded_rect_down_path,
    rect_path,
)
from .segmented import BorderState, SegmentedBorder
from .tracker import MultiPageRectTracker

__all__ = [
    "KAPPA",
    "clamp_radius",
    "rounded_rect_path",
    "rounded_rect_up_path",
    "rounded_rect_mid_path",
    "rounded_rect_down_path",
    "rect_path",
    "BorderState",
    "SegmentedBorder",
    "MultiPageRectTracker",
]
