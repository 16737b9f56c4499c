"""Remote-access VPN users table."""

from __future__ import annotations

from firescope.browse.controller import ViewController, ViewSpec
from firescope.browse.filtering import fields_by_name
from firescope.browse.sorting import SortKeySpec
from firescope.constants.enums import RefreshPolicy, RemoteUserSortKey
from firescope.constants.values import PLACEHOLDER_REMOTE_USERS
from firescope.models.core.remote_user_info import RemoteUserInfo
from firescope.models.state.browse_settings import BrowseSettings

REMOTE_USER_SEARCH_FIELDS: tuple[str, ...] = (
    "username",
    "domain",
    "computer",
    "gateway",
    "client_ip",
    "virtual_ip",
    "source_region",
)

REMOTE_USER_SORT_KEYS: tuple[SortKeySpec[RemoteUserInfo], ...] = (
    SortKeySpec(RemoteUserSortKey.USERNAME, "Username", lambda u: u.username, ascending=True),
    SortKeySpec(RemoteUserSortKey.GATEWAY, "Gateway", lambda u: u.gateway, ascending=True),
    SortKeySpec(
        RemoteUserSortKey.LOGIN_TIME, "Login Time", lambda u: u.login_time, ascending=False
    ),
    SortKeySpec(
        RemoteUserSortKey.DURATION, "Duration", lambda u: u.duration_seconds, ascending=False
    ),
)

REMOTE_USERS_VIEW: ViewSpec[RemoteUserInfo] = ViewSpec(
    name="remote_users",
    search_fields=fields_by_name(*REMOTE_USER_SEARCH_FIELDS),
    sort_keys=REMOTE_USER_SORT_KEYS,
    identity=lambda u: (u.username, u.computer, u.client_ip),
    refresh_policy=RefreshPolicy.PRESERVE,
    placeholder=PLACEHOLDER_REMOTE_USERS,
)


def new_remote_users_view(settings: BrowseSettings | None = None) -> ViewController[RemoteUserInfo]:
    return ViewController(REMOTE_USERS_VIEW, settings)
