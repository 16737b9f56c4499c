"""Constants module for the Firescope browsing layer.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, labels with Final)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings and layouts

Note: Keyboard bindings are defined in firescope.keyboard module.
"""

from firescope.constants.defaults import (
    FILTER_CHAR_LIMIT_DEFAULT,
    PAGE_SIZE_MIN_DEFAULT,
)
from firescope.constants.enums import (
    LogSortKey,
    LogType,
    NatSortKey,
    PolicySortKey,
    RefreshPolicy,
    RemoteUserSortKey,
    SessionSortKey,
    ViewStatus,
)
from firescope.constants.values import (
    SORT_ARROW_ASC,
    SORT_ARROW_DESC,
)

__all__ = [
    # Defaults
    "FILTER_CHAR_LIMIT_DEFAULT",
    "PAGE_SIZE_MIN_DEFAULT",
    # Labels
    "SORT_ARROW_ASC",
    "SORT_ARROW_DESC",
    # Enums
    "LogSortKey",
    "LogType",
    "NatSortKey",
    "PolicySortKey",
    "RefreshPolicy",
    "RemoteUserSortKey",
    "SessionSortKey",
    "ViewStatus",
]
