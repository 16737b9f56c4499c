"""Keyboard bindings module.

- keys: Textual key name translation (normalize_key)
- tables: table view key reference (TABLE_BROWSE_BINDINGS, LOGS_BROWSE_BINDINGS)
"""

from firescope.keyboard.keys import normalize_key
from firescope.keyboard.tables import LOGS_BROWSE_BINDINGS, TABLE_BROWSE_BINDINGS

__all__ = [
    "LOGS_BROWSE_BINDINGS",
    "TABLE_BROWSE_BINDINGS",
    "normalize_key",
]
