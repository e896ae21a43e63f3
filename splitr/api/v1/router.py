"""
API v1 router.
"""
from fastapi import APIRouter

from splitr.api.v1.endpoints import health, hosts, network_hosts, networks, vpn

api_router = APIRouter()

# Health check endpoint (no prefix, so it's /api/v1/health)
api_router.include_router(health.router, tags=["health"])

api_router.include_router(networks.router, prefix="/networks", tags=["networks"])
api_router.include_router(network_hosts.router, prefix="/networks", tags=["network-hosts"])
api_router.include_router(vpn.router, prefix="/vpn", tags=["vpn"])
api_router.include_router(hosts.router, prefix="/hosts", tags=["hosts"])
