"""Stable multi-key sorting with per-key natural directions."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Generic, TypeVar

from firescope.constants.enums import SortDirection
from firescope.constants.values import SORT_ARROW_ASC, SORT_ARROW_DESC

T = TypeVar("T")


@dataclass(frozen=True)
class SortKeySpec(Generic[T]):
    """One sortable column.

    ``value`` returns a comparable value, or ``None`` when the item has no
    value for this key. ``ascending`` is the direction the key starts in
    when it is selected by cycling.
    """

    key: Enum
    label: str
    value: Callable[[T], Any]
    ascending: bool = True


@dataclass(frozen=True)
class SortState:
    """Active sort key and direction."""

    key: Enum
    ascending: bool = True

    @property
    def direction(self) -> SortDirection:
        return SortDirection.ASC if self.ascending else SortDirection.DESC


class SortEngine(Generic[T]):
    """Sort policy of one entity type: its keys, their order and directions."""

    def __init__(self, specs: Sequence[SortKeySpec[T]]) -> None:
        if not specs:
            raise ValueError("SortEngine needs at least one sort key")
        self._specs: tuple[SortKeySpec[T], ...] = tuple(specs)
        self._by_key: dict[Enum, SortKeySpec[T]] = {spec.key: spec for spec in self._specs}

    @property
    def keys(self) -> tuple[Enum, ...]:
        return tuple(spec.key for spec in self._specs)

    def spec(self, key: Enum) -> SortKeySpec[T]:
        return self._by_key[key]

    def initial_state(self, key: Enum | None = None) -> SortState:
        """State for ``key`` (default: the first key) in its natural direction."""
        spec = self._by_key[key] if key is not None else self._specs[0]
        return SortState(key=spec.key, ascending=spec.ascending)

    def cycle(self, state: SortState) -> SortState:
        """Advance to the next key, wrapping, and reset to its natural direction."""
        index = self.keys.index(state.key) if state.key in self._by_key else -1
        spec = self._specs[(index + 1) % len(self._specs)]
        return SortState(key=spec.key, ascending=spec.ascending)

    @staticmethod
    def toggle(state: SortState) -> SortState:
        return replace(state, ascending=not state.ascending)

    def label(self, state: SortState) -> str:
        arrow = SORT_ARROW_ASC if state.ascending else SORT_ARROW_DESC
        return f"{self._by_key[state.key].label} {arrow}"

    def apply(self, items: Sequence[T], state: SortState) -> list[T]:
        """Return a stably sorted copy of ``items``.

        Items without a value for the key keep their relative order and are
        placed after every item that has one, whatever the direction.
        """
        if not items:
            return []
        value_of = self._by_key[state.key].value

        present: list[tuple[T, Any]] = []
        missing: list[T] = []
        for item in items:
            value = value_of(item)
            if value is None:
                missing.append(item)
            else:
                present.append((item, value))

        present.sort(key=lambda pair: pair[1], reverse=not state.ascending)
        return [item for item, _ in present] + missing
