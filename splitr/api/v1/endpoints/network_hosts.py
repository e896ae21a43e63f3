"""
Network host endpoints.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from splitr.api.v1.deps import to_http_exception
from splitr.core.database import get_db
from splitr.core.errors import NetworkNotFoundError, SplitrError
from splitr.models.network import Network
from splitr.schemas.network import NetworkHostCreateRequest, NetworkHostListResponse, NetworkHostResponse
from splitr.services.network_host_service import NetworkHostService

router = APIRouter()


@router.get("/{network_id}/hosts", response_model=NetworkHostListResponse)
def list_network_hosts(
    network_id: int,
    search: Optional[str] = Query(None, description="Filter by address or description"),
    db: Session = Depends(get_db),
):
    if db.get(Network, network_id) is None:
        raise to_http_exception(NetworkNotFoundError(network_id))

    try:
        hosts = NetworkHostService(db).list(network_id, search=search)
    except SplitrError as e:
        raise to_http_exception(e)

    return NetworkHostListResponse(
        items=[NetworkHostResponse.model_validate(host) for host in hosts],
        total=len(hosts),
    )


@router.post("/{network_id}/hosts", response_model=NetworkHostResponse, status_code=status.HTTP_201_CREATED)
def create_network_host(
    network_id: int,
    request: NetworkHostCreateRequest,
    db: Session = Depends(get_db),
):
    """Add a host; routes change on the next sync."""
    try:
        host = NetworkHostService(db).add(network_id, request.address, request.description)
    except SplitrError as e:
        raise to_http_exception(e)
    return NetworkHostResponse.model_validate(host)


@router.delete("/{network_id}/hosts/{network_host_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_network_host(
    network_id: int,
    network_host_id: int,
    db: Session = Depends(get_db),
):
    service = NetworkHostService(db)
    try:
        host = service.get(network_host_id)
        if host.network_id != network_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="network host not found")
        service.delete(network_host_id)
    except SplitrError as e:
        raise to_http_exception(e)
