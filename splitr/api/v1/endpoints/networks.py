"""
Network endpoints: CRUD, route sync/reset and applied routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from splitr.api.v1.deps import get_command_executor, to_http_exception
from splitr.core.database import get_db
from splitr.core.errors import SplitrError
from splitr.schemas.network import (
    NetworkCreateRequest,
    NetworkListResponse,
    NetworkResponse,
    NetworkWithStatusResponse,
)
from splitr.schemas.network_host_setup import (
    NetworkHostSetupListResponse,
    NetworkHostSetupResponse,
    SyncResponse,
)
from splitr.services.command_executor import CommandExecutor
from splitr.services.network_host_setup_service import NetworkHostSetupService
from splitr.services.network_host_setup_store import NetworkHostSetupStore
from splitr.services.network_service import NetworkService

router = APIRouter()


@router.get("", response_model=NetworkListResponse)
def list_networks(
    search: Optional[str] = Query(None, description="Filter by network name"),
    db: Session = Depends(get_db),
    executor: CommandExecutor = Depends(get_command_executor),
):
    """List networks; the one whose VPN is connected is marked active."""
    try:
        networks = NetworkService(db, executor).list_with_status(search=search)
    except SplitrError as e:
        raise to_http_exception(e)

    items = [
        NetworkWithStatusResponse(
            id=network.id,
            name=network.name,
            created_at=network.created_at,
            is_active=is_active,
        )
        for network, is_active in networks
    ]
    return NetworkListResponse(items=items, total=len(items))


@router.post("", response_model=NetworkResponse, status_code=status.HTTP_201_CREATED)
def create_network(
    request: NetworkCreateRequest,
    db: Session = Depends(get_db),
    executor: CommandExecutor = Depends(get_command_executor),
):
    """Register a network named after an OS VPN service."""
    try:
        network = NetworkService(db, executor).add(request.name)
    except SplitrError as e:
        raise to_http_exception(e)
    return NetworkResponse.model_validate(network)


@router.delete("/{network_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_network(
    network_id: int,
    db: Session = Depends(get_db),
    executor: CommandExecutor = Depends(get_command_executor),
):
    """Clear the network's routes, then delete it with its hosts."""
    try:
        NetworkService(db, executor).delete(network_id)
    except SplitrError as e:
        raise to_http_exception(e)


@router.post("/{network_id}/sync", response_model=SyncResponse)
def sync_network(
    network_id: int,
    db: Session = Depends(get_db),
    executor: CommandExecutor = Depends(get_command_executor),
):
    """Route every host of the network through the local gateway."""
    try:
        setups = NetworkHostSetupService(db, executor).sync_by_network_id(network_id)
    except SplitrError as e:
        raise to_http_exception(e)
    return SyncResponse(network_id=network_id, routes_applied=len(setups))


@router.post("/{network_id}/reset", response_model=SyncResponse)
def reset_network(
    network_id: int,
    db: Session = Depends(get_db),
    executor: CommandExecutor = Depends(get_command_executor),
):
    """Remove every additional route of the network."""
    try:
        NetworkHostSetupService(db, executor).reset_by_network_id(network_id)
    except SplitrError as e:
        raise to_http_exception(e)
    return SyncResponse(network_id=network_id, routes_applied=0)


@router.get("/{network_id}/setups", response_model=NetworkHostSetupListResponse)
def list_network_setups(
    network_id: int,
    db: Session = Depends(get_db),
    executor: CommandExecutor = Depends(get_command_executor),
):
    """List the routes applied by the last sync."""
    try:
        NetworkService(db, executor).get(network_id)
        setups = NetworkHostSetupStore(db).list_by_network_id(network_id)
    except SplitrError as e:
        raise to_http_exception(e)

    return NetworkHostSetupListResponse(
        items=[NetworkHostSetupResponse.model_validate(setup) for setup in setups],
        total=len(setups),
    )
