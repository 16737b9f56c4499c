"""Remote-access VPN user models."""

from datetime import datetime

from pydantic import BaseModel


class RemoteUserInfo(BaseModel):
    """User connected through the remote-access VPN gateway."""

    username: str
    domain: str = ""
    computer: str = ""
    client_ip: str = ""
    virtual_ip: str = ""
    gateway: str = ""
    client: str = ""  # client version
    login_time: datetime | None = None
    duration_seconds: int | None = None
    bytes_in: int = 0
    bytes_out: int = 0
    source_region: str = ""
