"""Schemas for applied routes."""
from datetime import datetime
from typing import List

from pydantic import BaseModel


class NetworkHostSetupResponse(BaseModel):
    """Response schema for one applied route."""
    id: int
    network_host_id: int
    network_host_ip: str
    subnet_mask: str
    router: str
    created_at: datetime

    model_config = {"from_attributes": True}


class NetworkHostSetupListResponse(BaseModel):
    items: List[NetworkHostSetupResponse]
    total: int


class SyncResponse(BaseModel):
    """Result of a sync or reset run."""
    network_id: int
    routes_applied: int
