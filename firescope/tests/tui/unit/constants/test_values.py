"""Unit tests for scalar constants in constants/values.py.

Tests cover:
- Package re-exports
- Placeholder strings
- Severity ranking order
"""

from __future__ import annotations

import firescope.constants as constants
from firescope.constants import values
from firescope.constants.values import (
    PLACEHOLDER_LOGS,
    PLACEHOLDER_NAT_RULES,
    PLACEHOLDER_POLICIES,
    PLACEHOLDER_REMOTE_USERS,
    PLACEHOLDER_SESSIONS,
    SEVERITY_RANKS,
)

# =============================================================================
# Exports
# =============================================================================


class TestExports:
    """Every exported name must resolve."""

    def test_values_all_resolves(self) -> None:
        for name in values.__all__:
            assert hasattr(values, name), name

    def test_package_all_resolves(self) -> None:
        for name in constants.__all__:
            assert hasattr(constants, name), name


# =============================================================================
# Placeholders
# =============================================================================


class TestPlaceholders:
    """Test filter input placeholders."""

    def test_placeholders_are_filter_prompts(self) -> None:
        for placeholder in (
            PLACEHOLDER_SESSIONS,
            PLACEHOLDER_POLICIES,
            PLACEHOLDER_NAT_RULES,
            PLACEHOLDER_LOGS,
            PLACEHOLDER_REMOTE_USERS,
        ):
            assert placeholder.startswith("Filter ")
            assert placeholder.endswith("...")


# =============================================================================
# Severity
# =============================================================================


class TestSeverityRanks:
    """Test severity ranking."""

    def test_ranks_descend_by_severity(self) -> None:
        order = ["critical", "high", "medium", "low", "informational"]
        ranks = [SEVERITY_RANKS[name] for name in order]
        assert ranks == sorted(ranks, reverse=True)
        assert min(ranks) > 0
