"""
Row layouts of (label, text) items.

    from pageflow.layout import RowLayoutEngine, RowLayoutOptions
"""

from .options import RowLayoutOptions, RowItem, TextStyle, BoxOptions, ItemBoxOptions
from .row_engine import RowLayoutEngine, RowPlan, LineBucket, ItemLayout

__all__ = [
    "RowLayoutOptions",
    "RowItem",
    "TextStyle",
    "BoxOptions",
    "ItemBoxOptions",
    "RowLayoutEngine",
    "RowPlan",
    "LineBucket",
    "ItemLayout",
]
