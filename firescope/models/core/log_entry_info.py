"""Log entry models for the system, traffic and threat log tables."""

from datetime import datetime

from pydantic import BaseModel


class SystemLogInfo(BaseModel):
    """System log entry."""

    time: datetime | None = None
    type: str = ""  # SYSTEM, CONFIG, ...
    severity: str = ""
    description: str = ""


class TrafficLogInfo(BaseModel):
    """Traffic log entry."""

    time: datetime | None = None
    serial: str = ""
    subtype: str = ""  # start, end, drop, deny

    source_ip: str = ""
    dest_ip: str = ""
    source_port: int = 0
    dest_port: int = 0
    source_zone: str = ""
    dest_zone: str = ""

    rule: str = ""
    application: str = ""
    user: str = ""
    session_id: int = 0

    action: str = ""  # allow, deny, drop
    session_end: str = ""

    bytes: int = 0
    packets: int = 0
    duration: int = 0  # seconds
    protocol: str = ""


class ThreatLogInfo(BaseModel):
    """Threat log entry."""

    time: datetime | None = None
    serial: str = ""
    subtype: str = ""  # vulnerability, virus, spyware, url, wildfire, ...

    source_ip: str = ""
    dest_ip: str = ""
    source_port: int = 0
    dest_port: int = 0
    source_zone: str = ""
    dest_zone: str = ""

    rule: str = ""
    application: str = ""
    user: str = ""
    session_id: int = 0

    threat_id: int = 0
    threat_name: str = ""
    threat_category: str = ""
    severity: str = ""
    direction: str = ""

    action: str = ""
    url: str = ""
    filename: str = ""
