"""Generic table-browsing state machine shared by every list view.

A ``ViewController`` owns the raw items of one entity type, the filtered and
sorted lists derived from them, and the navigation state indexing into the
sorted list. All state lives in one immutable ``BrowseState``; every event
builds a new state through pure helpers and swaps it in, so a caller holding
an older ``state`` never sees it change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Generic, TypeVar

from firescope.browse import detail as detail_ops
from firescope.browse.detail import EMPTY_DETAIL, DetailState
from firescope.browse.filtering import (
    FilterState,
    SearchFields,
    apply_filter,
    edit_draft,
)
from firescope.browse.navigation import (
    NavigationState,
    clamp,
    handle_key,
    visible_rows,
)
from firescope.browse.sorting import SortEngine, SortKeySpec, SortState
from firescope.constants.defaults import (
    DETAIL_OVERHEAD_DEFAULT,
    TABLE_OVERHEAD_DEFAULT,
)
from firescope.constants.enums import RefreshPolicy, SortDirection, ViewStatus
from firescope.models.state.browse_settings import BrowseSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

KEY_ESCAPE = "esc"
KEY_COMMIT = "enter"
KEY_CYCLE_SORT = "s"
KEY_TOGGLE_SORT = "S"


@dataclass(frozen=True)
class ViewSpec(Generic[T]):
    """Everything that makes one entity's table different from another's."""

    name: str
    search_fields: SearchFields
    sort_keys: tuple[SortKeySpec[T], ...]
    identity: Callable[[T], Hashable]
    refresh_policy: RefreshPolicy = RefreshPolicy.PRESERVE
    overhead: int = TABLE_OVERHEAD_DEFAULT
    expanded_overhead: int = DETAIL_OVERHEAD_DEFAULT
    placeholder: str = ""
    escape_resets_position: bool = False


@dataclass(frozen=True)
class BrowseState(Generic[T]):
    """Complete state of one table view."""

    sort: SortState
    raw: tuple[T, ...] | None = None
    filtered: tuple[T, ...] = ()
    items: tuple[T, ...] = ()
    error: BaseException | None = None
    loading: bool = False
    width: int = 0
    height: int = 0
    nav: NavigationState = field(default_factory=NavigationState)
    filter: FilterState = field(default_factory=FilterState)
    detail: DetailState = EMPTY_DETAIL

    @property
    def has_data(self) -> bool:
        return self.raw is not None


@dataclass(frozen=True)
class BrowseSnapshot(Generic[T]):
    """Read-only view of a table for the rendering layer."""

    window: tuple[T, ...]
    cursor: int
    cursor_index: int
    offset: int
    viewport_height: int
    expanded: bool
    selected: T | None
    loading: bool
    error: BaseException | None
    has_data: bool
    filter_query: str
    filter_draft: str
    filter_mode: bool
    placeholder: str
    sort_key: Enum
    sort_direction: SortDirection
    sort_label: str
    total_count: int
    filtered_count: int
    detail: DetailState

    @property
    def status(self) -> ViewStatus:
        if self.error is not None:
            return ViewStatus.ERROR
        if self.loading or not self.has_data:
            return ViewStatus.LOADING
        if self.filtered_count == 0:
            return ViewStatus.EMPTY
        return ViewStatus.READY


class ViewController(Generic[T]):
    """Table-browsing state machine for one entity type."""

    def __init__(self, spec: ViewSpec[T], settings: BrowseSettings | None = None) -> None:
        self._spec = spec
        self._settings = settings or BrowseSettings()
        self._sorter: SortEngine[T] = SortEngine(spec.sort_keys)
        self._state: BrowseState[T] = self._finalize(
            BrowseState(sort=self._sorter.initial_state())
        )

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def spec(self) -> ViewSpec[T]:
        return self._spec

    @property
    def settings(self) -> BrowseSettings:
        return self._settings

    @property
    def sorter(self) -> SortEngine[T]:
        return self._sorter

    @property
    def state(self) -> BrowseState[T]:
        return self._state

    @property
    def items(self) -> tuple[T, ...]:
        """The filtered and sorted list navigation indexes into."""
        return self._state.items

    @property
    def cursor(self) -> int:
        return self._state.nav.cursor

    @property
    def offset(self) -> int:
        return self._state.nav.offset

    @property
    def viewport_height(self) -> int:
        return self._state.nav.viewport_height

    @property
    def expanded(self) -> bool:
        return self._state.nav.expanded

    @property
    def filter_mode(self) -> bool:
        return self._state.nav.filter_mode

    @property
    def filter_query(self) -> str:
        return self._state.filter.query

    @property
    def is_filtered(self) -> bool:
        return self._state.filter.active

    @property
    def error(self) -> BaseException | None:
        return self._state.error

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def has_data(self) -> bool:
        return self._state.has_data

    @property
    def sort_label(self) -> str:
        return self._sorter.label(self._state.sort)

    def selected(self) -> T | None:
        return detail_ops.resolve_selected(self._state.items, self._state.nav.cursor)

    def selected_key(self) -> Hashable | None:
        item = self.selected()
        return self._spec.identity(item) if item is not None else None

    # =========================================================================
    # Events
    # =========================================================================

    def set_items(self, items: Iterable[T] | None, error: BaseException | None = None) -> None:
        """Deliver the result of one fetch.

        A fetch error is stored verbatim and the last good lists are kept.
        """
        state = self._state
        if error is not None:
            logger.warning("%s refresh failed: %s", self._spec.name, error)
            self._state = replace(state, error=error, loading=False)
            return

        state = replace(state, raw=tuple(items or ()), error=None, loading=False)
        state = self._refilter(state)
        if self._spec.refresh_policy is RefreshPolicy.RESET:
            state = replace(state, nav=state.nav.reset_position())
        self._state = self._finalize(state)
        logger.debug(
            "%s refreshed: %d raw, %d shown, cursor %d",
            self._spec.name,
            len(self._state.raw or ()),
            len(self._state.items),
            self._state.nav.cursor,
        )

    def set_loading(self, loading: bool) -> None:
        self._state = replace(self._state, loading=loading)

    def set_size(self, width: int, height: int) -> None:
        self._state = self._finalize(replace(self._state, width=width, height=height))

    def set_query(self, query: str) -> None:
        """Commit ``query`` directly, as if typed in filter mode."""
        state = self._state
        state = replace(state, filter=FilterState(query=query, draft=query))
        self._state = self._finalize(self._commit_filter(state))

    def clear_filter(self) -> bool:
        """Clear a committed query. Returns False when no filter was active."""
        if not self._state.filter.query:
            return False
        state = replace(self._state, filter=self._state.filter.clear())
        self._state = self._finalize(self._commit_filter(state))
        logger.debug("%s filter cleared", self._spec.name)
        return True

    def collapse(self) -> bool:
        """Close the detail panel. Returns False when it was not open."""
        if not self._state.nav.expanded:
            return False
        nav = replace(self._state.nav, expanded=False)
        self._state = self._finalize(replace(self._state, nav=nav))
        return True

    def reset_position(self) -> None:
        state = replace(self._state, nav=self._state.nav.reset_position())
        self._state = self._finalize(state)

    def handle_key(self, key: str) -> bool:
        """Process one decoded key press. Returns whether the key was consumed."""
        if self._state.nav.filter_mode:
            self._state = self._finalize(self._filter_key(self._state, key))
            return True

        if key == KEY_ESCAPE:
            return self.collapse() or self.clear_filter()

        state = self._state
        if key == KEY_CYCLE_SORT:
            state = replace(state, sort=self._sorter.cycle(state.sort))
            state = self._resort(state)
            state = replace(state, nav=state.nav.reset_position())
            logger.debug("%s sort: %s", self._spec.name, self._sorter.label(state.sort))
        elif key == KEY_TOGGLE_SORT:
            state = replace(state, sort=self._sorter.toggle(state.sort))
            state = self._resort(state)
        else:
            nav, handled = handle_key(
                state.nav,
                key,
                len(state.items),
                state.nav.viewport_height,
                page_size_min=self._settings.page_size_min,
            )
            if not handled:
                return False
            if nav.filter_mode and not state.nav.filter_mode:
                state = replace(state, filter=state.filter.begin_edit())
            state = replace(state, nav=nav)

        self._state = self._finalize(state)
        return True

    # =========================================================================
    # Detail fetching
    # =========================================================================

    def request_detail(self) -> Hashable | None:
        """Mark extended detail as loading for the selected item.

        Returns the identity the caller should fetch, or None when nothing
        is selected.
        """
        key = self.selected_key()
        if key is None:
            return None
        self._state = replace(self._state, detail=detail_ops.request(key))
        return key

    def detail_loaded(self, key: Hashable, data: Any) -> bool:
        return self._resolve_detail(key, data=data)

    def detail_failed(self, key: Hashable, error: BaseException) -> bool:
        return self._resolve_detail(key, error=error)

    def _resolve_detail(
        self,
        key: Hashable,
        *,
        data: Any = None,
        error: BaseException | None = None,
    ) -> bool:
        before = self._state.detail
        after = detail_ops.resolve_response(
            before, self.selected_key(), key, data=data, error=error
        )
        self._state = replace(self._state, detail=after)
        return after is not before

    # =========================================================================
    # Snapshot
    # =========================================================================

    def visible_items(self) -> tuple[T, ...]:
        nav = self._state.nav
        return self._state.items[nav.offset : nav.offset + nav.viewport_height]

    def snapshot(self) -> BrowseSnapshot[T]:
        state = self._state
        nav = state.nav
        return BrowseSnapshot(
            window=self.visible_items(),
            cursor=nav.cursor - nav.offset,
            cursor_index=nav.cursor,
            offset=nav.offset,
            viewport_height=nav.viewport_height,
            expanded=nav.expanded,
            selected=self.selected(),
            loading=state.loading,
            error=state.error,
            has_data=state.has_data,
            filter_query=state.filter.query,
            filter_draft=state.filter.draft,
            filter_mode=nav.filter_mode,
            placeholder=self._spec.placeholder,
            sort_key=state.sort.key,
            sort_direction=state.sort.direction,
            sort_label=self._sorter.label(state.sort),
            total_count=len(state.raw or ()),
            filtered_count=len(state.items),
            detail=state.detail,
        )

    # =========================================================================
    # Pure helpers
    # =========================================================================

    def _filter_key(self, state: BrowseState[T], key: str) -> BrowseState[T]:
        if key == KEY_COMMIT:
            logger.debug("%s filter committed: %r", self._spec.name, state.filter.draft)
            return self._commit_filter(state)
        if key == KEY_ESCAPE:
            return self._exit_filter(state)
        draft = edit_draft(state.filter.draft, key, self._settings.filter_char_limit)
        return replace(state, filter=replace(state.filter, draft=draft))

    def _exit_filter(self, state: BrowseState[T]) -> BrowseState[T]:
        """Leave filter mode on ``esc``, applying an edited draft.

        Only views with ``escape_resets_position`` move the cursor back to
        the top; the others keep it by index.
        """
        if state.filter.draft == state.filter.query:
            return replace(state, nav=replace(state.nav, filter_mode=False))
        logger.debug("%s filter applied on exit: %r", self._spec.name, state.filter.draft)
        if self._spec.escape_resets_position:
            return self._commit_filter(state)
        nav = replace(state.nav, filter_mode=False)
        return self._refilter(replace(state, filter=state.filter.commit(), nav=nav))

    def _commit_filter(self, state: BrowseState[T]) -> BrowseState[T]:
        nav = replace(state.nav, filter_mode=False).reset_position()
        state = replace(state, filter=state.filter.commit(), nav=nav)
        return self._refilter(state)

    def _refilter(self, state: BrowseState[T]) -> BrowseState[T]:
        filtered = apply_filter(state.raw or (), state.filter.query, self._spec.search_fields)
        return self._resort(replace(state, filtered=tuple(filtered)))

    def _resort(self, state: BrowseState[T]) -> BrowseState[T]:
        return replace(state, items=tuple(self._sorter.apply(state.filtered, state.sort)))

    def _viewport_for(self, state: BrowseState[T]) -> int:
        return visible_rows(
            state.height,
            self._spec.overhead,
            self._spec.expanded_overhead,
            state.nav.expanded,
            self._settings.min_visible_rows,
        )

    def _finalize(self, state: BrowseState[T]) -> BrowseState[T]:
        """Clamp navigation to the current list and drop stale detail."""
        nav = clamp(state.nav, len(state.items), self._viewport_for(state))
        selected = detail_ops.resolve_selected(state.items, nav.cursor)
        selected_key = self._spec.identity(selected) if selected is not None else None
        detail = detail_ops.revalidate(state.detail, selected_key)
        if nav is state.nav and detail is state.detail:
            return state
        return replace(state, nav=nav, detail=detail)

