"""Security policy and NAT rule tables.

Both rule bases share the same key order: rulebase position, name, hit
count, last hit. Position and name read naturally ascending; the counters
are most useful largest/most recent first.
"""

from __future__ import annotations

from firescope.browse.controller import ViewController, ViewSpec
from firescope.browse.filtering import fields_by_name
from firescope.browse.sorting import SortKeySpec
from firescope.constants.enums import NatSortKey, PolicySortKey, RefreshPolicy
from firescope.constants.values import PLACEHOLDER_NAT_RULES, PLACEHOLDER_POLICIES
from firescope.models.core.rule_info import NatRuleInfo, SecurityRuleInfo
from firescope.models.state.browse_settings import BrowseSettings

# =============================================================================
# Security policies
# =============================================================================

POLICY_SEARCH_FIELDS: tuple[str, ...] = (
    "name",
    "description",
    "tags",
    "source_zones",
    "dest_zones",
    "sources",
    "destinations",
    "applications",
    "services",
)

POLICY_SORT_KEYS: tuple[SortKeySpec[SecurityRuleInfo], ...] = (
    SortKeySpec(PolicySortKey.POSITION, "Position", lambda r: r.position, ascending=True),
    SortKeySpec(PolicySortKey.NAME, "Name", lambda r: r.name, ascending=True),
    SortKeySpec(PolicySortKey.HITS, "Hits", lambda r: r.hit_count, ascending=False),
    SortKeySpec(PolicySortKey.LAST_HIT, "Last Hit", lambda r: r.last_hit, ascending=False),
)

POLICIES_VIEW: ViewSpec[SecurityRuleInfo] = ViewSpec(
    name="policies",
    search_fields=fields_by_name(*POLICY_SEARCH_FIELDS),
    sort_keys=POLICY_SORT_KEYS,
    identity=lambda r: r.name,
    refresh_policy=RefreshPolicy.RESET,
    placeholder=PLACEHOLDER_POLICIES,
)


def new_policies_view(settings: BrowseSettings | None = None) -> ViewController[SecurityRuleInfo]:
    return ViewController(POLICIES_VIEW, settings)


# =============================================================================
# NAT rules
# =============================================================================

NAT_SEARCH_FIELDS: tuple[str, ...] = (
    "name",
    "description",
    "tags",
    "source_zones",
    "dest_zones",
    "sources",
    "destinations",
    "translated_source",
    "translated_dest",
)

NAT_SORT_KEYS: tuple[SortKeySpec[NatRuleInfo], ...] = (
    SortKeySpec(NatSortKey.POSITION, "Position", lambda r: r.position, ascending=True),
    SortKeySpec(NatSortKey.NAME, "Name", lambda r: r.name, ascending=True),
    SortKeySpec(NatSortKey.HITS, "Hits", lambda r: r.hit_count, ascending=False),
    SortKeySpec(NatSortKey.LAST_HIT, "Last Hit", lambda r: r.last_hit, ascending=False),
)

NAT_RULES_VIEW: ViewSpec[NatRuleInfo] = ViewSpec(
    name="nat_rules",
    search_fields=fields_by_name(*NAT_SEARCH_FIELDS),
    sort_keys=NAT_SORT_KEYS,
    identity=lambda r: (r.rule_base, r.name),
    refresh_policy=RefreshPolicy.RESET,
    placeholder=PLACEHOLDER_NAT_RULES,
)


def new_nat_rules_view(settings: BrowseSettings | None = None) -> ViewController[NatRuleInfo]:
    return ViewController(NAT_RULES_VIEW, settings)
