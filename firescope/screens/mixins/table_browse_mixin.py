"""TableBrowseMixin - route Textual events into a table-browsing controller.

The mixin owns no state of its own. Key presses, resizes and fetch results
are forwarded to ``self.browser`` (a ``ViewController`` or ``LogsView``),
and ``refresh_browse`` is called whenever the visible state may have
changed so the widget can redraw from ``browser.snapshot()``.

Fetch workers report back with ``ItemsLoaded`` and ``DetailLoaded``
messages, which are safe to post from a worker thread.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import Any

from textual import events
from textual.message import Message

from firescope.browse.controller import ViewController
from firescope.constants.enums import LogType
from firescope.keyboard.keys import normalize_key
from firescope.views.logs import LogsView

logger = logging.getLogger(__name__)


# ============================================================================
# Messages for fetch workers
# ============================================================================


class ItemsLoaded(Message):
    """A list fetch finished.

    Attributes:
        items: The fetched items, or None when the fetch failed
        error: The fetch error, if any
        log_type: Target table of a logs view (default: the active tab)
    """

    def __init__(
        self,
        items: Iterable[Any] | None,
        error: BaseException | None = None,
        log_type: LogType | None = None,
    ) -> None:
        super().__init__()
        self.items = items
        self.error = error
        self.log_type = log_type


class DetailLoaded(Message):
    """An on-demand detail fetch finished for the item identified by ``key``."""

    def __init__(
        self,
        key: Hashable,
        data: Any = None,
        error: BaseException | None = None,
    ) -> None:
        super().__init__()
        self.key = key
        self.data = data
        self.error = error


# ============================================================================
# TableBrowseMixin
# ============================================================================


class TableBrowseMixin:
    """Mixin for widgets that display one browsable table.

    Usage:
        class SessionsTable(TableBrowseMixin, Static):
            can_focus = True

            def __init__(self) -> None:
                super().__init__()
                self.browser = new_sessions_view()

            def refresh_browse(self) -> None:
                self.update(render_sessions(self.browser.snapshot()))
    """

    browser: ViewController[Any] | LogsView

    def on_key(self, event: events.Key) -> None:
        key = normalize_key(event.key, event.character)
        if not self.browser.handle_key(key):
            return
        event.stop()
        event.prevent_default()
        self.refresh_browse()

    def on_resize(self, event: events.Resize) -> None:
        self.browser.set_size(event.size.width, event.size.height)
        self.refresh_browse()

    def on_items_loaded(self, message: ItemsLoaded) -> None:
        message.stop()
        if isinstance(self.browser, LogsView):
            self.browser.set_items(message.items, message.error, message.log_type)
        else:
            self.browser.set_items(message.items, message.error)
        self.refresh_browse()

    def on_detail_loaded(self, message: DetailLoaded) -> None:
        message.stop()
        if message.error is not None:
            applied = self.browser.detail_failed(message.key, message.error)
        else:
            applied = self.browser.detail_loaded(message.key, message.data)
        if applied:
            self.refresh_browse()

    def refresh_browse(self) -> None:
        """Redraw from ``self.browser.snapshot()``. Override in the widget."""


__all__ = [
    "DetailLoaded",
    "ItemsLoaded",
    "TableBrowseMixin",
]
