"""Entity models delivered by the appliance data collaborator."""

from firescope.models.core.log_entry_info import (
    SystemLogInfo,
    ThreatLogInfo,
    TrafficLogInfo,
)
from firescope.models.core.remote_user_info import RemoteUserInfo
from firescope.models.core.rule_info import NatRuleInfo, SecurityRuleInfo
from firescope.models.core.session_info import SessionInfo

__all__ = [
    "NatRuleInfo",
    "RemoteUserInfo",
    "SecurityRuleInfo",
    "SessionInfo",
    "SystemLogInfo",
    "ThreatLogInfo",
    "TrafficLogInfo",
]
