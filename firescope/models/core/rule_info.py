"""Security policy and NAT rule models."""

from datetime import datetime

from pydantic import BaseModel, Field


class SecurityRuleInfo(BaseModel):
    """Security policy rule with hit counters."""

    name: str
    position: int = 0
    disabled: bool = False
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    rule_type: str = "universal"  # universal, intrazone, interzone
    action: str = ""  # allow, deny, drop, reset-client, reset-server, reset-both

    source_zones: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    source_users: list[str] = Field(default_factory=list)
    negate_source: bool = False

    dest_zones: list[str] = Field(default_factory=list)
    destinations: list[str] = Field(default_factory=list)
    negate_dest: bool = False

    applications: list[str] = Field(default_factory=list)
    services: list[str] = Field(default_factory=list)
    url_categories: list[str] = Field(default_factory=list)

    profile: str = ""
    log_start: bool = False
    log_end: bool = False
    log_forwarding: str = ""

    hit_count: int = 0
    last_hit: datetime | None = None
    first_hit: datetime | None = None
    apps_seen: int = 0


class NatRuleInfo(BaseModel):
    """NAT rule with translation details and hit counters."""

    name: str
    position: int = 0
    disabled: bool = False
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    rule_base: str = "local"  # pre, local, post

    source_zones: list[str] = Field(default_factory=list)
    dest_zones: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    destinations: list[str] = Field(default_factory=list)
    services: list[str] = Field(default_factory=list)
    dest_interface: str = ""

    source_trans_type: str = "none"  # dynamic-ip-and-port, dynamic-ip, static-ip, none
    translated_source: str = ""
    translated_dest: str = ""
    translated_dest_port: str = ""

    nat_type: str = "ipv4"  # ipv4, nat64, nptv6

    hit_count: int = 0
    last_hit: datetime | None = None
    first_hit: datetime | None = None
