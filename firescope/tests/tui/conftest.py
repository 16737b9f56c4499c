"""Shared fixtures for Firescope TUI tests."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from firescope.models.core import (
    NatRuleInfo,
    RemoteUserInfo,
    SecurityRuleInfo,
    SessionInfo,
    SystemLogInfo,
    ThreatLogInfo,
    TrafficLogInfo,
)

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)


def make_sessions(count: int) -> list[SessionInfo]:
    """Sessions with ids ``1..count`` and steadily growing byte counters."""
    return [
        SessionInfo(
            id=index + 1,
            application="web-browsing",
            source_ip=f"10.0.0.{index + 1}",
            dest_ip="8.8.8.8",
            source_zone="trust",
            dest_zone="untrust",
            bytes_in=index * 100,
            bytes_out=index * 10,
            start_time=BASE_TIME + timedelta(minutes=index),
        )
        for index in range(count)
    ]


@pytest.fixture
def sessions() -> list[SessionInfo]:
    return make_sessions(5)


@pytest.fixture
def zone_sessions() -> list[SessionInfo]:
    """Three sessions of which only one originates in the trust zone."""
    return [
        SessionInfo(id=1, application="dns", source_zone="dmz", dest_zone="wan"),
        SessionInfo(id=2, application="ssl", source_zone="trust", dest_zone="wan"),
        SessionInfo(id=3, application="ntp", source_zone="guest", dest_zone="wan"),
    ]


@pytest.fixture
def policies() -> list[SecurityRuleInfo]:
    return [
        SecurityRuleInfo(
            name="allow-web",
            position=1,
            tags=["outbound"],
            source_zones=["trust"],
            dest_zones=["untrust"],
            applications=["web-browsing", "ssl"],
            hit_count=500,
            last_hit=BASE_TIME,
        ),
        SecurityRuleInfo(
            name="block-p2p",
            position=2,
            tags=["Compliance"],
            applications=["bittorrent"],
            hit_count=20,
            last_hit=None,
        ),
        SecurityRuleInfo(
            name="allow-dns",
            position=3,
            source_zones=["trust", "dmz"],
            applications=["dns"],
            hit_count=9000,
            last_hit=BASE_TIME + timedelta(hours=1),
        ),
    ]


@pytest.fixture
def nat_rules() -> list[NatRuleInfo]:
    return [
        NatRuleInfo(
            name="outbound-snat",
            position=1,
            rule_base="pre",
            translated_source="203.0.113.10",
            hit_count=42,
        ),
        NatRuleInfo(
            name="web-dnat",
            position=2,
            translated_dest="192.168.10.5",
            hit_count=7,
        ),
    ]


@pytest.fixture
def system_logs() -> list[SystemLogInfo]:
    return [
        SystemLogInfo(time=BASE_TIME, type="SYSTEM", severity="informational", description="commit succeeded"),
        SystemLogInfo(
            time=BASE_TIME + timedelta(minutes=5),
            type="CONFIG",
            severity="high",
            description="HA link down",
        ),
        SystemLogInfo(
            time=BASE_TIME + timedelta(minutes=1),
            type="SYSTEM",
            severity="medium",
            description="dynamic update installed",
        ),
    ]


@pytest.fixture
def traffic_logs() -> list[TrafficLogInfo]:
    return [
        TrafficLogInfo(time=BASE_TIME, serial="1", session_id=10, source_ip="10.0.0.1", action="allow"),
        TrafficLogInfo(
            time=BASE_TIME + timedelta(minutes=2),
            serial="1",
            session_id=11,
            source_ip="10.0.0.2",
            action="deny",
        ),
    ]


@pytest.fixture
def threat_logs() -> list[ThreatLogInfo]:
    return [
        ThreatLogInfo(
            time=BASE_TIME,
            serial="1",
            session_id=20,
            threat_id=1001,
            threat_name="SMB Brute Force",
            severity="critical",
            source_ip="198.51.100.7",
            action="reset-both",
        ),
        ThreatLogInfo(
            time=BASE_TIME + timedelta(minutes=3),
            serial="1",
            session_id=21,
            threat_id=1002,
            threat_name="EICAR Test File",
            severity="medium",
            source_ip="10.0.0.9",
            action="alert",
        ),
    ]


@pytest.fixture
def remote_users() -> list[RemoteUserInfo]:
    return [
        RemoteUserInfo(
            username="alice",
            computer="alice-laptop",
            client_ip="198.51.100.20",
            gateway="gp-east",
            login_time=BASE_TIME,
            duration_seconds=3600,
            source_region="US",
        ),
        RemoteUserInfo(
            username="bob",
            computer="bob-desktop",
            client_ip="203.0.113.5",
            gateway="gp-west",
            login_time=None,
            duration_seconds=None,
            source_region="DE",
        ),
    ]


@pytest.fixture
def session_factory():
    """Factory building ``count`` sessions via :func:`make_sessions`."""
    return make_sessions
