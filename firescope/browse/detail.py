"""Expanded-detail selection and on-demand detail fetching.

The detail panel never holds an item reference. It is resolved from the
cursor index after every recomputation, so a reordered list may show a
different item under the same cursor. Extended detail fetched on demand is
keyed by item identity instead, and a response for an item that is no longer
selected is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DetailState:
    """Extended detail for the item identified by ``key``."""

    key: Hashable | None = None
    loading: bool = False
    data: Any = None
    error: BaseException | None = None

    @property
    def is_empty(self) -> bool:
        return self.key is None


EMPTY_DETAIL = DetailState()


def resolve_selected(items: Sequence[T], cursor: int) -> T | None:
    """Item under the cursor, or ``None`` when the list is empty."""
    if 0 <= cursor < len(items):
        return items[cursor]
    return None


def request(key: Hashable) -> DetailState:
    return DetailState(key=key, loading=True)


def resolve_response(
    state: DetailState,
    selected_key: Hashable | None,
    key: Hashable,
    *,
    data: Any = None,
    error: BaseException | None = None,
) -> DetailState:
    """Apply a detail response if it still belongs to the selected item."""
    if selected_key is None or key != selected_key or state.key != key:
        logger.debug("Discarding stale detail response for %r (selected %r)", key, selected_key)
        return state
    return DetailState(key=key, loading=False, data=data, error=error)


def revalidate(state: DetailState, selected_key: Hashable | None) -> DetailState:
    """Drop detail state that no longer matches the selected item."""
    if state.key is None or state.key == selected_key:
        return state
    return EMPTY_DETAIL
