"""Unit tests for the sessions, policy, NAT and remote user views."""

from __future__ import annotations

from firescope.constants.enums import (
    NatSortKey,
    PolicySortKey,
    RefreshPolicy,
    RemoteUserSortKey,
    SessionSortKey,
)
from firescope.models.core import SessionInfo
from firescope.views import (
    new_nat_rules_view,
    new_policies_view,
    new_remote_users_view,
    new_sessions_view,
)


class TestSessionsView:
    """Tests for the sessions view configuration."""

    def test_sort_keys_in_cycle_order(self) -> None:
        view = new_sessions_view()
        assert view.sorter.keys == (
            SessionSortKey.ID,
            SessionSortKey.BYTES,
            SessionSortKey.AGE,
            SessionSortKey.APPLICATION,
        )
        assert view.spec.refresh_policy is RefreshPolicy.PRESERVE

    def test_searches_user_and_rule(self) -> None:
        view = new_sessions_view()
        view.set_items(
            [
                SessionInfo(id=1, user="corp\\alice", rule="allow-web"),
                SessionInfo(id=2, user="corp\\bob", rule="allow-dns"),
            ]
        )
        view.set_query("ALICE")
        assert [s.id for s in view.items] == [1]
        view.set_query("allow-dns")
        assert [s.id for s in view.items] == [2]

    def test_age_sort_puts_newest_first(self, sessions) -> None:
        view = new_sessions_view()
        view.set_items(sessions + [SessionInfo(id=99)])
        view.handle_key("s")
        view.handle_key("s")
        assert view.snapshot().sort_label == "Age ↓"
        assert [s.id for s in view.items] == [5, 4, 3, 2, 1, 99]

    def test_identity_is_session_id(self, sessions) -> None:
        view = new_sessions_view()
        view.set_items(sessions)
        assert view.selected_key() == 1


class TestPoliciesView:
    """Tests for the security policy view."""

    def test_filter_matches_tag_element(self, policies) -> None:
        view = new_policies_view()
        view.set_items(policies)
        view.set_query("compliance")
        assert [r.name for r in view.items] == ["block-p2p"]

    def test_filter_matches_zone_list(self, policies) -> None:
        view = new_policies_view()
        view.set_items(policies)
        view.set_query("dmz")
        assert [r.name for r in view.items] == ["allow-dns"]

    def test_sort_key_cycle(self, policies) -> None:
        view = new_policies_view()
        view.set_items(policies)
        assert [r.name for r in view.items] == ["allow-web", "block-p2p", "allow-dns"]

        view.handle_key("s")
        assert view.snapshot().sort_key is PolicySortKey.NAME
        assert [r.name for r in view.items] == ["allow-dns", "allow-web", "block-p2p"]

        view.handle_key("s")
        assert view.snapshot().sort_key is PolicySortKey.HITS
        assert [r.name for r in view.items] == ["allow-dns", "allow-web", "block-p2p"]

        view.handle_key("s")
        assert view.snapshot().sort_key is PolicySortKey.LAST_HIT
        assert [r.name for r in view.items] == ["allow-dns", "allow-web", "block-p2p"]

        view.handle_key("s")
        assert view.snapshot().sort_key is PolicySortKey.POSITION

    def test_uses_reset_refresh_policy(self) -> None:
        view = new_policies_view()
        assert view.spec.refresh_policy is RefreshPolicy.RESET


class TestNatRulesView:
    """Tests for the NAT rule view."""

    def test_filter_matches_translated_addresses(self, nat_rules) -> None:
        view = new_nat_rules_view()
        view.set_items(nat_rules)
        view.set_query("203.0.113")
        assert [r.name for r in view.items] == ["outbound-snat"]
        view.set_query("192.168.10")
        assert [r.name for r in view.items] == ["web-dnat"]

    def test_identity_includes_rule_base(self, nat_rules) -> None:
        view = new_nat_rules_view()
        view.set_items(nat_rules)
        assert view.selected_key() == ("pre", "outbound-snat")

    def test_sort_keys(self) -> None:
        assert new_nat_rules_view().sorter.keys == tuple(NatSortKey)


class TestRemoteUsersView:
    """Tests for the remote users view."""

    def test_filter_matches_region_and_gateway(self, remote_users) -> None:
        view = new_remote_users_view()
        view.set_items(remote_users)
        view.set_query("de")
        assert [u.username for u in view.items] == ["bob"]
        view.set_query("gp-east")
        assert [u.username for u in view.items] == ["alice"]

    def test_duration_sort_puts_unknown_last(self, remote_users) -> None:
        view = new_remote_users_view()
        view.set_items(list(reversed(remote_users)))
        for _ in range(3):
            view.handle_key("s")
        assert view.snapshot().sort_key is RemoteUserSortKey.DURATION
        assert [u.username for u in view.items] == ["alice", "bob"]
        view.handle_key("S")
        assert [u.username for u in view.items] == ["alice", "bob"]

    def test_sorted_by_username_initially(self, remote_users) -> None:
        view = new_remote_users_view()
        view.set_items(list(reversed(remote_users)))
        assert [u.username for u in view.items] == ["alice", "bob"]
        assert view.sort_label == "Username ↑"
