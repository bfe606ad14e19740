#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Tuple

from pydantic_settings import BaseSettings
from reportlab.lib import pagesizes

from .constants import (
    DEFAULT_PAGE_SIZE, DEFAULT_MARGIN, DEFAULT_FONT, DEFAULT_FONT_SIZE,
    RECT_LINE_WIDTH, ROW_DEFAULT_ITEM_W, ROW_PADDING, LOG_LEVEL,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Page sizes in points (width, height)
PAGE_SIZES = {
    "A4": pagesizes.A4,
    "A5": pagesizes.A5,
    "B5": pagesizes.B5,
    "letter": pagesizes.LETTER,
    "legal": pagesizes.LEGAL,
}


def resolve_page_size(page_size) -> Tuple[float, float]:
    """Turn a page size name or (width, height) pair into points."""
    if isinstance(page_size, (tuple, list)):
        width, height = page_size
        return float(width), float(height)
    for name, dims in PAGE_SIZES.items():
        if name.lower() == str(page_size).lower():
            return dims
    raise ValueError(f"Unsupported page size: {page_size}")


class Settings(BaseSettings):
    """Document defaults, overridable through PAGEFLOW_* environment variables"""

    # ========== Page ==========
    page_size: str = DEFAULT_PAGE_SIZE  # A4 | A5 | B5 | letter | legal
    margin: float = DEFAULT_MARGIN
    buffer_pages: bool = False  # keep pages open for switch_to_page()

    # ========== Text ==========
    default_font: str = DEFAULT_FONT
    default_font_size: float = DEFAULT_FONT_SIZE

    # ========== Borders & rows ==========
    rect_line_width: float = RECT_LINE_WIDTH
    row_default_item_w: float = ROW_DEFAULT_ITEM_W
    row_padding: float = ROW_PADDING

    # ========== Logging ==========
    log_level: str = LOG_LEVEL

    class Config:
        env_prefix = "PAGEFLOW_"
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def page_dimensions(self) -> Tuple[float, float]:
        """Get (width, height) in points for the configured page size"""
        return resolve_page_size(self.page_size)


# Global settings instance
settings = Settings()
