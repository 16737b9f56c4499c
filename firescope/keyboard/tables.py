"""Key reference for table views.

These bindings are shown in the footer and help screen. Table widgets
route the keys themselves through ``TableBrowseMixin.on_key``, so the lists
must not be declared as a widget's ``BINDINGS``.
"""

from textual.binding import Binding

# ============================================================================
# Table browsing
# ============================================================================

TABLE_BROWSE_BINDINGS: list[Binding] = [
    Binding("j,down", "cursor_down", "Down"),
    Binding("k,up", "cursor_up", "Up"),
    Binding("g,home", "cursor_top", "Top"),
    Binding("G,end", "cursor_bottom", "Bottom"),
    Binding("ctrl+d,pagedown", "page_down", "Page Down"),
    Binding("ctrl+u,pageup", "page_up", "Page Up"),
    Binding("enter", "toggle_detail", "Detail"),
    Binding("slash", "filter", "Filter"),
    Binding("escape", "clear", "Clear"),
    Binding("s", "cycle_sort", "Sort"),
    Binding("S", "toggle_sort", "Reverse"),
]

# ============================================================================
# Logs view
# ============================================================================

LOGS_BROWSE_BINDINGS: list[Binding] = [
    *TABLE_BROWSE_BINDINGS,
    Binding("tab", "next_log_type", "Log Type"),
]

__all__ = [
    "LOGS_BROWSE_BINDINGS",
    "TABLE_BROWSE_BINDINGS",
]
