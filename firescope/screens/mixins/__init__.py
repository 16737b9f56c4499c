"""Screen mixins package for Firescope TUI."""

from firescope.screens.mixins.table_browse_mixin import (
    DetailLoaded,
    ItemsLoaded,
    TableBrowseMixin,
)

__all__ = [
    "DetailLoaded",
    "ItemsLoaded",
    "TableBrowseMixin",
]
