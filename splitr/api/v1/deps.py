"""
Shared endpoint dependencies and error mapping.
"""
import logging

from fastapi import HTTPException, status

from splitr.core.errors import (
    AlreadyExistsError,
    ExecutionFailedError,
    InvalidAddressError,
    NotFoundError,
    ParseNotFoundError,
    SplitrError,
    VPNServiceNotFoundError,
)
from splitr.services.command_executor import CommandExecutor

logger = logging.getLogger(__name__)


def get_command_executor() -> CommandExecutor:
    """Dependency for getting the OS network inspector."""
    return CommandExecutor()


def to_http_exception(error: SplitrError) -> HTTPException:
    """Map a route synchronization error to an HTTP error carrying its message."""
    if isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, AlreadyExistsError):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(error, VPNServiceNotFoundError):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(error, InvalidAddressError):
        status_code = 422
    elif isinstance(error, (ExecutionFailedError, ParseNotFoundError)):
        status_code = status.HTTP_502_BAD_GATEWAY
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if status_code >= 500:
        logger.error(f"Request failed: {error}")
    else:
        logger.warning(f"Request rejected: {error}")
    return HTTPException(status_code=status_code, detail=str(error))
