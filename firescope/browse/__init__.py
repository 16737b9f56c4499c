"""Table-browsing core: navigation, filtering, sorting and per-view composition."""

from firescope.browse.controller import (
    BrowseSnapshot,
    BrowseState,
    ViewController,
    ViewSpec,
)
from firescope.browse.detail import DetailState
from firescope.browse.filtering import FilterState, apply_filter, fields_by_name
from firescope.browse.navigation import NavigationState, handle_key
from firescope.browse.sorting import SortEngine, SortKeySpec, SortState

__all__ = [
    "BrowseSnapshot",
    "BrowseState",
    "DetailState",
    "FilterState",
    "NavigationState",
    "SortEngine",
    "SortKeySpec",
    "SortState",
    "ViewController",
    "ViewSpec",
    "apply_filter",
    "fields_by_name",
    "handle_key",
]
