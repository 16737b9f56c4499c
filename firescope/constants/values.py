"""Scalar constants for the browsing layer.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Sort labels
# ============================================================================

SORT_ARROW_ASC: Final = "↑"
SORT_ARROW_DESC: Final = "↓"

# ============================================================================
# Filter placeholders
# ============================================================================

PLACEHOLDER_SESSIONS: Final = "Filter sessions..."
PLACEHOLDER_POLICIES: Final = "Filter policies..."
PLACEHOLDER_NAT_RULES: Final = "Filter NAT rules..."
PLACEHOLDER_LOGS: Final = "Filter logs..."
PLACEHOLDER_REMOTE_USERS: Final = "Filter users..."

# ============================================================================
# Severity ranking (higher is more severe)
# ============================================================================

SEVERITY_RANKS: Final = {
    "critical": 5,
    "high": 4,
    "medium": 3,
    "low": 2,
    "informational": 1,
}

__all__ = [
    "PLACEHOLDER_LOGS",
    "PLACEHOLDER_NAT_RULES",
    "PLACEHOLDER_POLICIES",
    "PLACEHOLDER_REMOTE_USERS",
    "PLACEHOLDER_SESSIONS",
    "SEVERITY_RANKS",
    "SORT_ARROW_ASC",
    "SORT_ARROW_DESC",
]
