#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Row Layout Options

Plain dataclasses for the options accepted by draw_row_label_texts().
Parsing is permissive: unknown keys are ignored, missing sub-objects
fall back to defaults, and the camelCase spellings used by older
callers (defaultItemW, noLabel, itemBox) are accepted too.

Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union

from config.constants import ROW_DEFAULT_ITEM_W, ROW_PADDING


def _pick(data: Dict[str, Any], *keys, default=None):
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclass
class TextStyle:
    """Font override and optional fixed height for labels or texts"""
    font: Optional[str] = None
    size: Optional[float] = None
    h: float = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'TextStyle':
        data = data or {}
        return cls(
            font=data.get("font") or None,
            size=data.get("size") or None,
            h=data.get("h") or 0,
        )


@dataclass
class BoxOptions:
    """Border around the whole block. padding is parsed but not applied."""
    radius: float = 0
    padding: float = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'BoxOptions':
        data = data or {}
        return cls(radius=data.get("radius") or 0, padding=data.get("padding") or 0)


@dataclass
class ItemBoxOptions:
    """Border around each item's text; padding also widens the gaps between items"""
    radius: float = 0
    padding: float = 0
    active: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ItemBoxOptions':
        data = data or {}
        return cls(
            radius=data.get("radius") or 0,
            padding=data.get("padding") or 0,
            active=bool(data.get("active", False)),
        )


@dataclass
class RowLayoutOptions:
    """
    Options for one row layout call.

    x, y and w are resolved against the document when left as None.
    """
    label: TextStyle = field(default_factory=TextStyle)
    text: TextStyle = field(default_factory=TextStyle)
    default_item_w: float = ROW_DEFAULT_ITEM_W
    padding: float = ROW_PADDING
    debug: bool = False
    x: Optional[float] = None
    y: Optional[float] = None
    w: Optional[float] = None
    no_label: bool = False
    divider: bool = False
    box: Optional[BoxOptions] = None
    item_box: ItemBoxOptions = field(default_factory=ItemBoxOptions)

    @property
    def has_label(self) -> bool:
        return not self.no_label

    @property
    def gap(self) -> float:
        """Horizontal and vertical space between neighbouring items"""
        return self.padding + self.item_box.padding * 2

    @classmethod
    def from_dict(
        cls,
        data: Optional[Dict[str, Any]],
        default_item_w: float = ROW_DEFAULT_ITEM_W,
        padding: float = ROW_PADDING,
    ) -> 'RowLayoutOptions':
        """Build options from a dict; default_item_w and padding fill in missing keys."""
        if isinstance(data, RowLayoutOptions):
            return data
        data = data or {}
        box = data.get("box")
        return cls(
            label=TextStyle.from_dict(data.get("label")),
            text=TextStyle.from_dict(data.get("text")),
            default_item_w=_pick(data, "default_item_w", "defaultItemW", default=default_item_w),
            padding=_pick(data, "padding", default=padding),
            debug=bool(data.get("debug", False)),
            x=data.get("x") or None,
            y=data.get("y") or None,
            w=data.get("w") or None,
            no_label=bool(_pick(data, "no_label", "noLabel", default=False)),
            divider=bool(data.get("divider", False)),
            box=BoxOptions.from_dict(box) if box else None,
            item_box=ItemBoxOptions.from_dict(_pick(data, "item_box", "itemBox")),
        )


@dataclass
class RowItem:
    """One (label, text) pair to lay out"""
    text: str = ""
    label: Optional[str] = None
    w: Optional[float] = None
    color: Any = "black"
    align: str = "left"
    link: Optional[str] = None
    h_label: Optional[float] = None   # fixed heights skip measurement
    h_text: Optional[float] = None

    @classmethod
    def coerce(cls, item: Union[str, Dict[str, Any], 'RowItem']) -> 'RowItem':
        if isinstance(item, RowItem):
            return item
        if isinstance(item, str):
            return cls(text=item)
        return cls(
            text=item.get("text") or "",
            label=item.get("label"),
            w=item.get("w") or None,
            color=item.get("color") or "black",
            align=item.get("align") or "left",
            link=item.get("link") or None,
            h_label=_pick(item, "h_label", "hLabel"),
            h_text=_pick(item, "h_text", "hText"),
        )
