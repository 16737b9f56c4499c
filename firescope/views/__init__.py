"""Per-entity table views built on the generic browsing controller."""

from firescope.views.logs import LogsView, new_logs_view
from firescope.views.policies import new_nat_rules_view, new_policies_view
from firescope.views.remote_users import new_remote_users_view
from firescope.views.sessions import new_sessions_view

__all__ = [
    "LogsView",
    "new_logs_view",
    "new_nat_rules_view",
    "new_policies_view",
    "new_remote_users_view",
    "new_sessions_view",
]
