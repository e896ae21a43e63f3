"""Schemas for the host catalog."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from splitr.schemas.network import AddressRequest


class HostCreateRequest(AddressRequest):
    """Request schema for saving a host to the catalog."""
    pass


class HostResponse(BaseModel):
    """Response schema for host."""
    id: int
    address: str
    description: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class HostListResponse(BaseModel):
    items: List[HostResponse]
    total: int
