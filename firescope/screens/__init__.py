"""Firescope TUI screens.

Domain Structure:
    - mixins/ - Reusable widget and screen mixins

Note: Table key references are in the keyboard/ package:
    - firescope.keyboard.TABLE_BROWSE_BINDINGS
    - firescope.keyboard.LOGS_BROWSE_BINDINGS
"""

from firescope.screens.mixins import DetailLoaded, ItemsLoaded, TableBrowseMixin

__all__ = [
    "DetailLoaded",
    "ItemsLoaded",
    "TableBrowseMixin",
]
