"""
Configuration module for pageflow.
"""
from .constants import *
from .logging_config import setup_logger, get_logger, logger
from .settings import Settings, settings, resolve_page_size, PAGE_SIZES

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    'logger',
    # Settings
    'Settings',
    'settings',
    'resolve_page_size',
    'PAGE_SIZES',
    # Constants (all exported via *)
]
