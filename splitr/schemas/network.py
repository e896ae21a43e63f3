"""Schemas for networks, network hosts and OS network facts."""
import ipaddress
import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# OS identifiers are plain strings as printed by route/networksetup/scutil
NetworkInterface = str
NetworkService = str
VPNService = str

IP_OR_HOSTNAME_PATTERN = re.compile(
    r"^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$"
    r"|^(([a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9\-]*[a-zA-Z0-9])\.)+"
    r"([A-Za-z]{2,7}|[A-Za-z][A-Za-z0-9\-]{2,7})$"
)


def is_ipv4_address(address: str) -> bool:
    try:
        ipaddress.IPv4Address(address)
    except ValueError:
        return False
    return True


class NetworkInfo(BaseModel):
    """Subnet facts of a network service, read fresh on every sync."""
    subnet_mask: str
    router: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Subnet Mask: {self.subnet_mask}, Router: {self.router}"


class NetworkCreateRequest(BaseModel):
    """Request schema for creating a network."""
    name: str = Field(..., min_length=1, max_length=255, description="VPN service name as shown by scutil")


class NetworkResponse(BaseModel):
    """Response schema for network."""
    id: int
    name: str
    created_at: datetime

    model_config = {"from_attributes": True}


class NetworkWithStatusResponse(NetworkResponse):
    """Network plus whether its VPN service is currently connected."""
    is_active: bool = False


class NetworkListResponse(BaseModel):
    items: List[NetworkWithStatusResponse]
    total: int


class AddressRequest(BaseModel):
    """Address and optional description shared by host requests."""
    address: str = Field(..., min_length=1, max_length=255, description="IPv4 address or hostname")
    description: Optional[str] = Field(None, max_length=255)

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        v = v.strip()
        if not IP_OR_HOSTNAME_PATTERN.match(v):
            raise ValueError("invalid address")
        return v

    @field_validator("description")
    @classmethod
    def empty_description_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v


class NetworkHostCreateRequest(AddressRequest):
    """Request schema for adding a host to a network."""
    pass


class NetworkHostResponse(BaseModel):
    """Response schema for network host."""
    id: int
    network_id: int
    address: str
    description: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class NetworkHostListResponse(BaseModel):
    items: List[NetworkHostResponse]
    total: int
