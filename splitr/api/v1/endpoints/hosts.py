"""
Host catalog endpoints.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from splitr.api.v1.deps import to_http_exception
from splitr.core.database import get_db
from splitr.core.errors import SplitrError
from splitr.schemas.host import HostCreateRequest, HostListResponse, HostResponse
from splitr.services.host_service import HostService

router = APIRouter()


@router.get("", response_model=HostListResponse)
def list_hosts(
    search: Optional[str] = Query(None, description="Filter by address or description"),
    db: Session = Depends(get_db),
):
    try:
        hosts = HostService(db).list(search=search)
    except SplitrError as e:
        raise to_http_exception(e)

    return HostListResponse(
        items=[HostResponse.model_validate(host) for host in hosts],
        total=len(hosts),
    )


@router.post("", response_model=HostResponse, status_code=status.HTTP_201_CREATED)
def create_host(request: HostCreateRequest, db: Session = Depends(get_db)):
    try:
        host = HostService(db).add(request.address, request.description)
    except SplitrError as e:
        raise to_http_exception(e)
    return HostResponse.model_validate(host)


@router.delete("/{host_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_host(host_id: int, db: Session = Depends(get_db)):
    try:
        HostService(db).delete(host_id)
    except SplitrError as e:
        raise to_http_exception(e)
