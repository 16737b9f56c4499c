"""Multi-type logs view (system, traffic and threat logs behind tabs)."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import Any

from firescope.browse.controller import BrowseSnapshot, ViewController, ViewSpec
from firescope.browse.filtering import fields_by_name
from firescope.browse.sorting import SortKeySpec
from firescope.constants.defaults import LOGS_DETAIL_OVERHEAD, LOGS_TABLE_OVERHEAD
from firescope.constants.enums import LogSortKey, LogType, RefreshPolicy
from firescope.constants.values import PLACEHOLDER_LOGS, SEVERITY_RANKS
from firescope.models.core.log_entry_info import (
    SystemLogInfo,
    ThreatLogInfo,
    TrafficLogInfo,
)
from firescope.models.state.browse_settings import BrowseSettings

logger = logging.getLogger(__name__)

KEY_NEXT_LOG_TYPE = "tab"


def severity_rank(severity: str | None) -> int:
    """Numeric rank of a severity name; unknown values rank lowest."""
    return SEVERITY_RANKS.get((severity or "").strip().lower(), 0)


def _source(entry: Any) -> str:
    return entry.source_ip


def _action(entry: Any) -> str:
    return entry.action


def _time_key() -> SortKeySpec[Any]:
    return SortKeySpec(LogSortKey.TIME, "Time", lambda e: e.time, ascending=False)


def _severity_key() -> SortKeySpec[Any]:
    return SortKeySpec(
        LogSortKey.SEVERITY, "Severity", lambda e: severity_rank(e.severity), ascending=False
    )


# =============================================================================
# Per-type table definitions
# =============================================================================

SYSTEM_LOG_SEARCH_FIELDS: tuple[str, ...] = ("description", "type", "severity")
TRAFFIC_LOG_SEARCH_FIELDS: tuple[str, ...] = (
    "source_ip",
    "dest_ip",
    "application",
    "rule",
    "action",
    "user",
)
THREAT_LOG_SEARCH_FIELDS: tuple[str, ...] = (
    "source_ip",
    "dest_ip",
    "threat_name",
    "severity",
    "action",
    "threat_category",
)

SYSTEM_LOGS_VIEW: ViewSpec[SystemLogInfo] = ViewSpec(
    name="system_logs",
    search_fields=fields_by_name(*SYSTEM_LOG_SEARCH_FIELDS),
    sort_keys=(_time_key(), _severity_key()),
    identity=lambda e: (e.time, e.type, e.description),
    refresh_policy=RefreshPolicy.PRESERVE,
    overhead=LOGS_TABLE_OVERHEAD,
    expanded_overhead=LOGS_DETAIL_OVERHEAD,
    placeholder=PLACEHOLDER_LOGS,
)

TRAFFIC_LOGS_VIEW: ViewSpec[TrafficLogInfo] = ViewSpec(
    name="traffic_logs",
    search_fields=fields_by_name(*TRAFFIC_LOG_SEARCH_FIELDS),
    sort_keys=(
        _time_key(),
        SortKeySpec(LogSortKey.SOURCE, "Source", _source, ascending=True),
        SortKeySpec(LogSortKey.ACTION, "Action", _action, ascending=True),
    ),
    identity=lambda e: (e.serial, e.session_id, e.time),
    refresh_policy=RefreshPolicy.PRESERVE,
    overhead=LOGS_TABLE_OVERHEAD,
    expanded_overhead=LOGS_DETAIL_OVERHEAD,
    placeholder=PLACEHOLDER_LOGS,
)

THREAT_LOGS_VIEW: ViewSpec[ThreatLogInfo] = ViewSpec(
    name="threat_logs",
    search_fields=fields_by_name(*THREAT_LOG_SEARCH_FIELDS),
    sort_keys=(
        _time_key(),
        _severity_key(),
        SortKeySpec(LogSortKey.SOURCE, "Source", _source, ascending=True),
        SortKeySpec(LogSortKey.ACTION, "Action", _action, ascending=True),
    ),
    identity=lambda e: (e.serial, e.session_id, e.threat_id, e.time),
    refresh_policy=RefreshPolicy.PRESERVE,
    overhead=LOGS_TABLE_OVERHEAD,
    expanded_overhead=LOGS_DETAIL_OVERHEAD,
    placeholder=PLACEHOLDER_LOGS,
)

LOG_VIEWS: dict[LogType, ViewSpec[Any]] = {
    LogType.SYSTEM: SYSTEM_LOGS_VIEW,
    LogType.TRAFFIC: TRAFFIC_LOGS_VIEW,
    LogType.THREAT: THREAT_LOGS_VIEW,
}


class LogsView:
    """One table per log type, with ``tab`` switching the active one.

    Keys other than ``tab`` go to the active table. The committed filter
    query follows the user across tabs.
    """

    def __init__(
        self,
        settings: BrowseSettings | None = None,
        active_type: LogType = LogType.SYSTEM,
    ) -> None:
        self._controllers: dict[LogType, ViewController[Any]] = {
            log_type: ViewController(spec, settings) for log_type, spec in LOG_VIEWS.items()
        }
        self._active_type = active_type

    @property
    def active_type(self) -> LogType:
        return self._active_type

    @property
    def active(self) -> ViewController[Any]:
        return self._controllers[self._active_type]

    def controller(self, log_type: LogType) -> ViewController[Any]:
        return self._controllers[log_type]

    # =========================================================================
    # Data refresh
    # =========================================================================

    def set_items(
        self,
        items: Iterable[Any] | None,
        error: BaseException | None = None,
        log_type: LogType | None = None,
    ) -> None:
        """Deliver one fetch result to ``log_type`` (default: the active tab)."""
        self._controllers[log_type or self._active_type].set_items(items, error)

    def set_system_logs(
        self, logs: Iterable[SystemLogInfo] | None, error: BaseException | None = None
    ) -> None:
        self.set_items(logs, error, LogType.SYSTEM)

    def set_traffic_logs(
        self, logs: Iterable[TrafficLogInfo] | None, error: BaseException | None = None
    ) -> None:
        self.set_items(logs, error, LogType.TRAFFIC)

    def set_threat_logs(
        self, logs: Iterable[ThreatLogInfo] | None, error: BaseException | None = None
    ) -> None:
        self.set_items(logs, error, LogType.THREAT)

    def set_error(self, error: BaseException) -> None:
        """Store a fetch error that affected every log type."""
        for controller in self._controllers.values():
            controller.set_items(None, error)

    def set_loading(self, loading: bool) -> None:
        for controller in self._controllers.values():
            controller.set_loading(loading)

    def set_size(self, width: int, height: int) -> None:
        for controller in self._controllers.values():
            controller.set_size(width, height)

    # =========================================================================
    # Keys
    # =========================================================================

    def handle_key(self, key: str) -> bool:
        if key == KEY_NEXT_LOG_TYPE and not self.active.filter_mode:
            self.next_log_type()
            return True
        return self.active.handle_key(key)

    def next_log_type(self) -> LogType:
        order = list(LogType)
        target = order[(order.index(self._active_type) + 1) % len(order)]
        self.switch_to(target)
        return target

    def switch_to(self, log_type: LogType) -> None:
        if log_type is self._active_type:
            return
        query = self.active.filter_query
        self.active.collapse()
        self._active_type = log_type
        controller = self.active
        controller.collapse()
        if controller.filter_query != query:
            controller.set_query(query)
        controller.reset_position()
        logger.debug("Logs view switched to %s", log_type.value)

    # =========================================================================
    # Detail fetching and snapshot
    # =========================================================================

    def request_detail(self) -> Hashable | None:
        return self.active.request_detail()

    def detail_loaded(self, key: Hashable, data: Any) -> bool:
        return self.active.detail_loaded(key, data)

    def detail_failed(self, key: Hashable, error: BaseException) -> bool:
        return self.active.detail_failed(key, error)

    def counts(self) -> dict[LogType, int]:
        """Filtered row count per log type, for the tab bar."""
        return {log_type: len(c.items) for log_type, c in self._controllers.items()}

    def snapshot(self) -> BrowseSnapshot[Any]:
        return self.active.snapshot()


def new_logs_view(settings: BrowseSettings | None = None) -> LogsView:
    return LogsView(settings)
