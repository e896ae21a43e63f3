"""Schemas for VPN services and Finder reveal."""
from typing import List, Optional

from pydantic import BaseModel


class VPNServiceListResponse(BaseModel):
    items: List[str]


class CurrentVPNResponse(BaseModel):
    name: Optional[str] = None


class RevealRequest(BaseModel):
    path: str
