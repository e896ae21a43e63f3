"""
VPN service endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from splitr.api.v1.deps import get_command_executor, to_http_exception
from splitr.core.database import get_db
from splitr.core.errors import SplitrError, VPNServiceNotFoundError
from splitr.schemas.vpn import CurrentVPNResponse, RevealRequest, VPNServiceListResponse
from splitr.services.command_executor import CommandExecutor
from splitr.services.network_service import NetworkService

router = APIRouter()


@router.get("/services", response_model=VPNServiceListResponse)
def list_vpn_services(
    db: Session = Depends(get_db),
    executor: CommandExecutor = Depends(get_command_executor),
):
    """List L2TP VPN services configured in the OS."""
    try:
        return VPNServiceListResponse(items=NetworkService(db, executor).list_vpn_services())
    except SplitrError as e:
        raise to_http_exception(e)


@router.get("/current", response_model=CurrentVPNResponse)
def get_current_vpn(executor: CommandExecutor = Depends(get_command_executor)):
    """Return the connected VPN service; 404 when none is connected."""
    try:
        return CurrentVPNResponse(name=executor.get_current_vpn())
    except VPNServiceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SplitrError as e:
        raise to_http_exception(e)


@router.post("/reveal", status_code=status.HTTP_204_NO_CONTENT)
def reveal_in_finder(request: RevealRequest, executor: CommandExecutor = Depends(get_command_executor)):
    """Reveal a file (e.g. the log file) in Finder."""
    try:
        executor.open_in_finder(request.path)
    except SplitrError as e:
        raise to_http_exception(e)
