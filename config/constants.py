"""
Centralized constants for pageflow.
All magic numbers used by the document engine and layouts.
"""

# ===========================================
# PAGE
# ===========================================
DEFAULT_PAGE_SIZE = 'A4'
DEFAULT_MARGIN = 72                   # 1 inch, same as the classic PDF engines
DEFAULT_FONT = 'Helvetica'
DEFAULT_FONT_SIZE = 12
TEXT_LINE_GAP_RATIO = 0.231           # Helvetica AFM line gap / units per em

# ===========================================
# BORDERS
# ===========================================
RECT_LINE_WIDTH = 0.7                 # start_rect default
RECT_FALLBACK_LINE_WIDTH = 0.3        # used when a zero line width is passed
BOX_LINE_WIDTH = 0.3                  # row layout block border

# ===========================================
# ROW LAYOUT
# ===========================================
ROW_DEFAULT_ITEM_W = 50
ROW_PADDING = 5
DEBUG_LINE_WIDTH = 0.1
ITEM_BOX_LINE_WIDTH = 0.1
DIVIDER_LINE_WIDTH = 0.4
DIVIDER_INSET = 5

# ===========================================
# RULER
# ===========================================
RULER_STEP = 10
RULER_TICKS = 100
RULER_FONT_SIZE = 8

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/pageflow.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
