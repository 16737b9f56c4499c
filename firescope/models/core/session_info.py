"""Firewall session models."""

from datetime import datetime

from pydantic import BaseModel


class SessionInfo(BaseModel):
    """One entry of the appliance's active session table."""

    id: int
    state: str = ""
    application: str = ""
    protocol: str = ""  # tcp, udp, icmp
    source_ip: str = ""
    source_port: int = 0
    dest_ip: str = ""
    dest_port: int = 0
    source_zone: str = ""
    dest_zone: str = ""
    nat_source_ip: str = ""
    nat_source_port: int = 0
    user: str = ""
    bytes_in: int = 0
    bytes_out: int = 0
    start_time: datetime | None = None
    rule: str = ""

    @property
    def total_bytes(self) -> int:
        return self.bytes_in + self.bytes_out
