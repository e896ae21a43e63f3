"""
Service for network host operations.
"""
import logging
from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from splitr.core.config import settings
from splitr.core.errors import (
    InvalidAddressError,
    NetworkHostAlreadyExistsError,
    NetworkHostNotFoundError,
    NetworkNotFoundError,
    StorageError,
)
from splitr.models.network import Network
from splitr.models.network_host import NetworkHost
from splitr.schemas.network import is_ipv4_address

logger = logging.getLogger(__name__)


class NetworkHostService:
    """Keyed persistence for hosts that bypass a network's VPN."""

    def __init__(self, db: Session, resolve_hostnames: Optional[bool] = None):
        self.db = db
        self.resolve_hostnames = settings.RESOLVE_HOSTNAMES if resolve_hostnames is None else resolve_hostnames

    def add(self, network_id: int, address: str, description: Optional[str] = None) -> NetworkHost:
        """
        Add a host to a network.

        Raises:
            NetworkNotFoundError: If the network does not exist
            NetworkHostAlreadyExistsError: If the address is already on the network
            InvalidAddressError: If the address is a host name while resolution is off
        """
        if not self.resolve_hostnames and not is_ipv4_address(address):
            raise InvalidAddressError(address, "hostname resolution is disabled")
        if self.db.get(Network, network_id) is None:
            raise NetworkNotFoundError(network_id)

        network_host = NetworkHost(network_id=network_id, address=address, description=description)
        try:
            self.db.add(network_host)
            self.db.commit()
            self.db.refresh(network_host)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Rejected duplicate host {address} for network {network_id}: {e}")
            raise NetworkHostAlreadyExistsError(address) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"failed to add network host: {e}") from e

        logger.info(f"Added network host {address} (ID: {network_host.id}) to network {network_id}")
        return network_host

    def get(self, network_host_id: int) -> NetworkHost:
        network_host = self.db.get(NetworkHost, network_host_id)
        if network_host is None:
            raise NetworkHostNotFoundError(network_host_id)
        return network_host

    def list(self, network_id: int, search: Optional[str] = None) -> List[NetworkHost]:
        """List hosts of a network ordered by description, falling back to address."""
        statement = select(NetworkHost).where(NetworkHost.network_id == network_id)

        if search:
            term = f"%{search.upper()}%"
            statement = statement.where(
                or_(
                    func.upper(NetworkHost.address).like(term),
                    func.upper(NetworkHost.description).like(term),
                )
            )

        statement = statement.order_by(
            func.upper(func.coalesce(NetworkHost.description, NetworkHost.address)).asc(),
            NetworkHost.id.asc(),
        )

        try:
            return list(self.db.scalars(statement).all())
        except SQLAlchemyError as e:
            raise StorageError(f"failed to list network hosts: {e}") from e

    def list_ids(self, network_id: int) -> List[int]:
        statement = select(NetworkHost.id).where(NetworkHost.network_id == network_id).order_by(NetworkHost.id)
        try:
            return list(self.db.scalars(statement).all())
        except SQLAlchemyError as e:
            raise StorageError(f"failed to list network host ids: {e}") from e

    def delete(self, network_host_id: int) -> None:
        network_host = self.get(network_host_id)
        try:
            self.db.delete(network_host)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"failed to delete network host: {e}") from e

        logger.info(f"Deleted network host {network_host_id}")
