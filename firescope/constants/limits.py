"""Limit and threshold constants for the browsing layer.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Navigation limits
# ============================================================================

MIN_VISIBLE_ROWS: Final = 1
PAGE_SIZE_MIN_FLOOR: Final = 1
PAGE_SIZE_MIN_CEILING: Final = 1000

# ============================================================================
# Filter input limits
# ============================================================================

FILTER_CHAR_LIMIT_MIN: Final = 1
FILTER_CHAR_LIMIT_MAX: Final = 1000

__all__ = [
    "FILTER_CHAR_LIMIT_MAX",
    "FILTER_CHAR_LIMIT_MIN",
    "MIN_VISIBLE_ROWS",
    "PAGE_SIZE_MIN_CEILING",
    "PAGE_SIZE_MIN_FLOOR",
]
