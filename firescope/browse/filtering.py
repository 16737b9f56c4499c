"""Case-insensitive substring filtering and filter-input editing."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any, TypeVar

from firescope.constants.defaults import FILTER_CHAR_LIMIT_DEFAULT

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Extracts the searchable text of one item. Elements may be strings or
# iterables of strings (tags, zones, address lists).
SearchFields = Callable[[Any], Iterable[Any]]


@dataclass(frozen=True)
class FilterState:
    """Committed query plus the draft being typed in filter mode."""

    query: str = ""
    draft: str = ""

    @property
    def active(self) -> bool:
        return normalize_query(self.query) != ""

    def begin_edit(self) -> FilterState:
        return replace(self, draft=self.query)

    def commit(self) -> FilterState:
        return replace(self, query=self.draft)

    def clear(self) -> FilterState:
        return FilterState()


def fields_by_name(*names: str) -> SearchFields:
    """Search-field extractor reading the named attributes of an item."""

    def _fields(item: Any) -> list[Any]:
        return [getattr(item, name, None) for name in names]

    return _fields


def normalize_query(query: str) -> str:
    return query.strip().casefold()


def _iter_text(values: Iterable[Any]) -> Iterable[str]:
    for value in values:
        if value is None:
            continue
        if isinstance(value, str):
            yield value
        elif isinstance(value, Iterable):
            yield from (str(element) for element in value if element is not None)
        else:
            yield str(value)


def matches(item: Any, needle: str, fields: SearchFields) -> bool:
    """True when any searchable field of ``item`` contains ``needle``.

    ``needle`` must already be normalized with :func:`normalize_query`.
    """
    return any(needle in text.casefold() for text in _iter_text(fields(item)))


def apply_filter(items: Sequence[T], query: str, fields: SearchFields) -> list[T]:
    """Return the items matching ``query``, in their original order.

    An empty (or whitespace-only) query returns a shallow copy of ``items``.
    """
    needle = normalize_query(query)
    if not needle:
        return list(items)
    return [item for item in items if matches(item, needle, fields)]


# =============================================================================
# Filter input editing
# =============================================================================

KEY_BACKSPACE = "backspace"
KEY_CLEAR_LINE = "ctrl+u"
KEY_DELETE_WORD = "ctrl+w"
KEY_SPACE = "space"


def _delete_word(text: str) -> str:
    trimmed = text.rstrip()
    cut = trimmed.rfind(" ")
    return trimmed[: cut + 1] if cut >= 0 else ""


def edit_draft(draft: str, key: str, char_limit: int = FILTER_CHAR_LIMIT_DEFAULT) -> str:
    """Apply one key press to the filter draft.

    Printable single characters (and ``space``) are appended up to
    ``char_limit``. Keys that are not editing keys leave the draft unchanged.
    """
    if key == KEY_BACKSPACE:
        return draft[:-1]
    if key == KEY_CLEAR_LINE:
        return ""
    if key == KEY_DELETE_WORD:
        return _delete_word(draft)
    if key == KEY_SPACE:
        key = " "
    if len(key) != 1 or not key.isprintable():
        return draft
    if len(draft) >= char_limit:
        return draft
    return draft + key
