"""Active sessions table."""

from __future__ import annotations

from firescope.browse.controller import ViewController, ViewSpec
from firescope.browse.filtering import fields_by_name
from firescope.browse.sorting import SortKeySpec
from firescope.constants.enums import RefreshPolicy, SessionSortKey
from firescope.constants.values import PLACEHOLDER_SESSIONS
from firescope.models.core.session_info import SessionInfo
from firescope.models.state.browse_settings import BrowseSettings

SESSION_SEARCH_FIELDS: tuple[str, ...] = (
    "application",
    "source_ip",
    "dest_ip",
    "source_zone",
    "dest_zone",
    "rule",
    "user",
)

SESSION_SORT_KEYS: tuple[SortKeySpec[SessionInfo], ...] = (
    SortKeySpec(SessionSortKey.ID, "ID", lambda s: s.id, ascending=True),
    SortKeySpec(SessionSortKey.BYTES, "Bytes", lambda s: s.total_bytes, ascending=False),
    # Most recently started first when descending.
    SortKeySpec(SessionSortKey.AGE, "Age", lambda s: s.start_time, ascending=False),
    SortKeySpec(SessionSortKey.APPLICATION, "App", lambda s: s.application, ascending=True),
)

SESSIONS_VIEW: ViewSpec[SessionInfo] = ViewSpec(
    name="sessions",
    search_fields=fields_by_name(*SESSION_SEARCH_FIELDS),
    sort_keys=SESSION_SORT_KEYS,
    identity=lambda s: s.id,
    refresh_policy=RefreshPolicy.PRESERVE,
    placeholder=PLACEHOLDER_SESSIONS,
    escape_resets_position=True,
)


def new_sessions_view(settings: BrowseSettings | None = None) -> ViewController[SessionInfo]:
    return ViewController(SESSIONS_VIEW, settings)
