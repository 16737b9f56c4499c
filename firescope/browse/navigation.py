"""Cursor and scroll-window bookkeeping for table views.

Every function here is pure: it takes a ``NavigationState`` and returns a new
one. Out-of-range values are clamped, never rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from firescope.constants.defaults import (
    PAGE_SIZE_MIN_DEFAULT,
    VIEWPORT_HEIGHT_DEFAULT,
)
from firescope.constants.limits import MIN_VISIBLE_ROWS

KEYS_DOWN = frozenset({"down", "j"})
KEYS_UP = frozenset({"up", "k"})
KEYS_HOME = frozenset({"home", "g"})
KEYS_END = frozenset({"end", "G"})
KEYS_PAGE_DOWN = frozenset({"pgdown", "page-down", "ctrl+d"})
KEYS_PAGE_UP = frozenset({"pgup", "page-up", "ctrl+u"})
KEY_TOGGLE_EXPANDED = "enter"
KEY_FILTER = "/"


@dataclass(frozen=True)
class NavigationState:
    """Cursor position, scroll offset and panel flags of one table."""

    cursor: int = 0
    offset: int = 0
    expanded: bool = False
    filter_mode: bool = False
    viewport_height: int = VIEWPORT_HEIGHT_DEFAULT

    def reset_position(self) -> NavigationState:
        return replace(self, cursor=0, offset=0)


def visible_rows(
    height: int,
    overhead: int,
    expanded_overhead: int,
    expanded: bool,
    minimum: int = MIN_VISIBLE_ROWS,
) -> int:
    """Rows left for table items once headers, footers and the detail panel are drawn."""
    rows = height - overhead
    if expanded:
        rows -= expanded_overhead
    return max(rows, minimum)


def page_size(viewport_height: int, page_size_min: int = PAGE_SIZE_MIN_DEFAULT) -> int:
    return max(viewport_height, page_size_min)


def ensure_visible(state: NavigationState, viewport_height: int | None = None) -> NavigationState:
    """Scroll the window so the cursor row is inside it."""
    rows = max(viewport_height if viewport_height is not None else state.viewport_height, 1)
    offset = min(state.offset, state.cursor)
    if state.cursor >= offset + rows:
        offset = state.cursor - rows + 1
    offset = max(offset, 0)
    if offset == state.offset and rows == state.viewport_height:
        return state
    return replace(state, offset=offset, viewport_height=rows)


def ensure_cursor_valid(state: NavigationState, item_count: int) -> NavigationState:
    """Clamp the cursor into ``[0, item_count - 1]`` (0 when empty)."""
    if item_count <= 0:
        if state.cursor == 0 and state.offset == 0:
            return state
        return replace(state, cursor=0, offset=0)
    cursor = min(max(state.cursor, 0), item_count - 1)
    if cursor == state.cursor:
        return state
    return replace(state, cursor=cursor)


def clamp(
    state: NavigationState, item_count: int, viewport_height: int | None = None
) -> NavigationState:
    """Re-establish every cursor/offset invariant after an external change.

    The offset is also pulled back when the list shrank, so the window never
    scrolls past the last row while earlier rows would fit.
    """
    state = ensure_cursor_valid(state, item_count)
    rows = max(viewport_height if viewport_height is not None else state.viewport_height, 1)
    max_offset = max(item_count - rows, 0)
    if state.offset > max_offset:
        state = replace(state, offset=max_offset)
    return ensure_visible(state, rows)


def handle_key(
    state: NavigationState,
    key: str,
    item_count: int,
    viewport_height: int | None = None,
    *,
    page_size_min: int = PAGE_SIZE_MIN_DEFAULT,
) -> tuple[NavigationState, bool]:
    """Apply one navigation key.

    Returns the new state and whether the key was consumed. Movement keys are
    consumed even at the list boundaries so they never leak to outer handlers.
    """
    rows = viewport_height if viewport_height is not None else state.viewport_height
    last = max(item_count - 1, 0)

    if key in KEYS_DOWN:
        cursor = min(state.cursor + 1, last)
    elif key in KEYS_UP:
        cursor = max(state.cursor - 1, 0)
    elif key in KEYS_HOME:
        return replace(state, cursor=0, offset=0), True
    elif key in KEYS_END:
        cursor = last
    elif key in KEYS_PAGE_DOWN:
        cursor = min(state.cursor + page_size(rows, page_size_min), last)
    elif key in KEYS_PAGE_UP:
        cursor = max(state.cursor - page_size(rows, page_size_min), 0)
    elif key == KEY_TOGGLE_EXPANDED:
        return replace(state, expanded=not state.expanded), True
    elif key == KEY_FILTER:
        return replace(state, filter_mode=True), True
    else:
        return state, False

    return clamp(replace(state, cursor=cursor), item_count, rows), True
