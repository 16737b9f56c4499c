"""All enum definitions for the browsing layer.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# View State Enums
# =============================================================================

class ViewStatus(Enum):
    """What a table view should render, in precedence order."""

    ERROR = "error"
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"


class RefreshPolicy(Enum):
    """Cursor handling when a view receives a fresh item list."""

    RESET = "reset"
    PRESERVE = "preserve"


class SortDirection(Enum):
    """Sort direction for data tables."""

    ASC = "asc"
    DESC = "desc"


# =============================================================================
# Log Enums
# =============================================================================

class LogType(Enum):
    """Log subtypes shown by the logs view, in tab order."""

    SYSTEM = "system"
    TRAFFIC = "traffic"
    THREAT = "threat"


# =============================================================================
# Sort Key Enums (member order is the cycle order)
# =============================================================================

class SessionSortKey(Enum):
    """Sort keys for the sessions table."""

    ID = "id"
    BYTES = "bytes"
    AGE = "age"
    APPLICATION = "application"


class PolicySortKey(Enum):
    """Sort keys for the security policy table."""

    POSITION = "position"
    NAME = "name"
    HITS = "hits"
    LAST_HIT = "last_hit"


class NatSortKey(Enum):
    """Sort keys for the NAT rule table."""

    POSITION = "position"
    NAME = "name"
    HITS = "hits"
    LAST_HIT = "last_hit"


class LogSortKey(Enum):
    """Sort keys shared by the log tables."""

    TIME = "time"
    SEVERITY = "severity"
    SOURCE = "source"
    ACTION = "action"


class RemoteUserSortKey(Enum):
    """Sort keys for the remote-access users table."""

    USERNAME = "username"
    GATEWAY = "gateway"
    LOGIN_TIME = "login_time"
    DURATION = "duration"
