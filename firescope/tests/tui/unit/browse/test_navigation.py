"""Unit tests for cursor and scroll-window bookkeeping."""

from __future__ import annotations

import pytest

from firescope.browse.navigation import (
    NavigationState,
    clamp,
    ensure_cursor_valid,
    ensure_visible,
    handle_key,
    page_size,
    visible_rows,
)


def _assert_invariants(state: NavigationState, item_count: int) -> None:
    rows = state.viewport_height
    if item_count == 0:
        assert state.cursor == 0
        assert state.offset == 0
        return
    assert 0 <= state.cursor < item_count
    assert 0 <= state.offset <= state.cursor < state.offset + rows


# =============================================================================
# Layout helpers
# =============================================================================


class TestVisibleRows:
    """Tests for visible_rows()."""

    def test_subtracts_table_overhead(self) -> None:
        assert visible_rows(13, 8, 8, expanded=False) == 5

    def test_subtracts_detail_overhead_when_expanded(self) -> None:
        assert visible_rows(30, 8, 8, expanded=True) == 14

    def test_never_below_minimum(self) -> None:
        assert visible_rows(3, 8, 8, expanded=True) == 1
        assert visible_rows(0, 8, 8, expanded=False, minimum=3) == 3


class TestPageSize:
    """Tests for page_size()."""

    def test_uses_viewport_when_larger(self) -> None:
        assert page_size(25, 10) == 25

    def test_uses_minimum_for_small_viewports(self) -> None:
        assert page_size(5, 10) == 10


# =============================================================================
# Invariant helpers
# =============================================================================


class TestEnsureVisible:
    """Tests for ensure_visible()."""

    def test_scrolls_down_to_cursor(self) -> None:
        state = ensure_visible(NavigationState(cursor=7, offset=0), 5)
        assert state.offset == 3
        assert state.viewport_height == 5

    def test_scrolls_up_to_cursor(self) -> None:
        state = ensure_visible(NavigationState(cursor=2, offset=6, viewport_height=5))
        assert state.offset == 2

    def test_returns_same_state_when_already_visible(self) -> None:
        state = NavigationState(cursor=3, offset=1, viewport_height=5)
        assert ensure_visible(state) is state


class TestEnsureCursorValid:
    """Tests for ensure_cursor_valid()."""

    def test_clamps_past_end(self) -> None:
        state = ensure_cursor_valid(NavigationState(cursor=9), 4)
        assert state.cursor == 3

    def test_empty_list_resets_cursor_and_offset(self) -> None:
        state = ensure_cursor_valid(NavigationState(cursor=3, offset=2), 0)
        assert (state.cursor, state.offset) == (0, 0)


class TestClamp:
    """Tests for clamp()."""

    def test_shrunk_list_pulls_cursor_and_offset_back(self) -> None:
        state = clamp(NavigationState(cursor=4, offset=2, viewport_height=5), 2, 5)
        assert (state.cursor, state.offset) == (1, 0)
        _assert_invariants(state, 2)

    def test_window_does_not_scroll_past_last_row(self) -> None:
        state = clamp(NavigationState(cursor=19, offset=15, viewport_height=5), 20, 10)
        assert state.offset == 10
        _assert_invariants(state, 20)

    def test_records_viewport_height(self) -> None:
        state = clamp(NavigationState(), 10, 7)
        assert state.viewport_height == 7


# =============================================================================
# Key handling
# =============================================================================


class TestHandleKey:
    """Tests for handle_key()."""

    @pytest.mark.parametrize("key", ["down", "j"])
    def test_down_moves_cursor(self, key: str) -> None:
        state, handled = handle_key(NavigationState(viewport_height=5), key, 10)
        assert handled
        assert state.cursor == 1

    @pytest.mark.parametrize("key", ["up", "k"])
    def test_up_scrolls_window(self, key: str) -> None:
        start = NavigationState(cursor=5, offset=5, viewport_height=5)
        state, handled = handle_key(start, key, 10)
        assert handled
        assert (state.cursor, state.offset) == (4, 4)

    def test_down_at_last_row_is_consumed_without_moving(self) -> None:
        start = NavigationState(cursor=4, offset=0, viewport_height=5)
        state, handled = handle_key(start, "j", 5)
        assert handled
        assert state.cursor == 4

    def test_up_at_first_row_stays(self) -> None:
        state, handled = handle_key(NavigationState(viewport_height=5), "k", 5)
        assert handled
        assert state.cursor == 0

    def test_movement_on_empty_list(self) -> None:
        for key in ("j", "k", "G", "g", "pgdown", "pgup"):
            state, handled = handle_key(NavigationState(viewport_height=5), key, 0)
            assert handled
            _assert_invariants(state, 0)

    @pytest.mark.parametrize("key", ["end", "G"])
    def test_end_jumps_to_last_row(self, key: str) -> None:
        state, _ = handle_key(NavigationState(viewport_height=5), key, 20)
        assert (state.cursor, state.offset) == (19, 15)

    @pytest.mark.parametrize("key", ["home", "g"])
    def test_home_jumps_to_top(self, key: str) -> None:
        start = NavigationState(cursor=19, offset=15, viewport_height=5)
        state, _ = handle_key(start, key, 20)
        assert (state.cursor, state.offset) == (0, 0)

    def test_page_down_with_viewport_page_size(self) -> None:
        state, _ = handle_key(NavigationState(viewport_height=5), "pgdown", 20, 5, page_size_min=1)
        assert (state.cursor, state.offset) == (5, 1)

    def test_page_down_with_default_minimum_page(self) -> None:
        state, _ = handle_key(NavigationState(viewport_height=5), "page-down", 20, 5)
        assert (state.cursor, state.offset) == (10, 6)

    @pytest.mark.parametrize("key", ["pgup", "page-up", "ctrl+u"])
    def test_page_up_stops_at_top(self, key: str) -> None:
        start = NavigationState(cursor=3, offset=0, viewport_height=5)
        state, _ = handle_key(start, key, 20)
        assert state.cursor == 0

    def test_ctrl_d_pages_down(self) -> None:
        state, _ = handle_key(NavigationState(viewport_height=5), "ctrl+d", 8)
        assert state.cursor == 7

    def test_enter_toggles_expanded(self) -> None:
        state, handled = handle_key(NavigationState(), "enter", 3)
        assert handled and state.expanded
        state, _ = handle_key(state, "enter", 3)
        assert not state.expanded

    def test_slash_enters_filter_mode(self) -> None:
        state, handled = handle_key(NavigationState(), "/", 3)
        assert handled and state.filter_mode

    def test_unknown_key_is_not_consumed(self) -> None:
        start = NavigationState(cursor=1)
        state, handled = handle_key(start, "x", 3)
        assert not handled
        assert state is start

    def test_invariants_hold_over_key_sequence(self) -> None:
        state = NavigationState(viewport_height=4)
        for key in ["j"] * 7 + ["pgdown", "k", "G", "pgup", "g", "pgdown", "pgdown", "end"]:
            state, _ = handle_key(state, key, 23, page_size_min=1)
            _assert_invariants(state, 23)
