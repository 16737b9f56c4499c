"""Default values for settings.

All default values used in BrowseSettings and the per-view layouts.
"""

from typing import Final

# ============================================================================
# Navigation defaults
# ============================================================================

PAGE_SIZE_MIN_DEFAULT: Final = 10
VIEWPORT_HEIGHT_DEFAULT: Final = 1

# ============================================================================
# Filter defaults
# ============================================================================

FILTER_CHAR_LIMIT_DEFAULT: Final = 100

# ============================================================================
# Layout defaults (rows used by headers, footers and the detail panel)
# ============================================================================

TABLE_OVERHEAD_DEFAULT: Final = 8
DETAIL_OVERHEAD_DEFAULT: Final = 8
LOGS_TABLE_OVERHEAD: Final = 10
LOGS_DETAIL_OVERHEAD: Final = 12

__all__ = [
    "DETAIL_OVERHEAD_DEFAULT",
    "FILTER_CHAR_LIMIT_DEFAULT",
    "LOGS_DETAIL_OVERHEAD",
    "LOGS_TABLE_OVERHEAD",
    "PAGE_SIZE_MIN_DEFAULT",
    "TABLE_OVERHEAD_DEFAULT",
    "VIEWPORT_HEIGHT_DEFAULT",
]
