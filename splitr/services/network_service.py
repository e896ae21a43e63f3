"""
Service for network operations.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from splitr.core.errors import NetworkAlreadyExistsError, NetworkNotFoundError, StorageError, VPNServiceNotFoundError
from splitr.models.network import Network
from splitr.schemas.network import VPNService
from splitr.services.command_executor import CommandExecutor
from splitr.services.network_host_setup_service import NetworkHostSetupService

logger = logging.getLogger(__name__)


class NetworkService:
    """Network use cases that touch both the database and the OS."""

    def __init__(
        self,
        db: Session,
        executor: CommandExecutor,
        setup_service: Optional[NetworkHostSetupService] = None,
    ):
        self.db = db
        self.executor = executor
        self.setup_service = setup_service or NetworkHostSetupService(db, executor)

    def add(self, name: str) -> Network:
        """
        Register a VPN network.

        Raises:
            NetworkAlreadyExistsError: If a network with this name exists
        """
        network = Network(name=name)
        try:
            self.db.add(network)
            self.db.commit()
            self.db.refresh(network)
        except IntegrityError as e:
            self.db.rollback()
            raise NetworkAlreadyExistsError(name) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"failed to add network: {e}") from e

        logger.info(f"Added network {name} (ID: {network.id})")
        return network

    def get(self, network_id: int) -> Network:
        network = self.db.get(Network, network_id)
        if network is None:
            raise NetworkNotFoundError(network_id)
        return network

    def list_with_status(self, search: Optional[str] = None) -> List[Tuple[Network, bool]]:
        """
        List networks paired with whether their VPN is currently connected.

        ``search`` keeps networks whose name contains it, ignoring case.
        No connected VPN is a normal state here, not an error.
        """
        statement = select(Network).order_by(Network.name)
        if search:
            statement = statement.where(Network.name.ilike(f"%{search}%"))

        try:
            networks = list(self.db.scalars(statement).all())
        except SQLAlchemyError as e:
            raise StorageError(f"failed to list networks: {e}") from e

        current_vpn: Optional[VPNService] = None
        try:
            current_vpn = self.executor.get_current_vpn()
        except VPNServiceNotFoundError:
            logger.debug("No VPN service is connected")

        return [(network, network.name == current_vpn) for network in networks]

    def delete(self, network_id: int) -> None:
        """
        Delete a network after clearing its routes.

        The reset runs first so OS routes never outlive the network record;
        if it fails the network is kept. A VPN service that no longer exists
        in the OS has no routes left to clear, so deletion goes ahead.
        """
        self.get(network_id)
        try:
            self.setup_service.reset_by_network_id(network_id)
        except VPNServiceNotFoundError as e:
            logger.warning(f"Deleting network {network_id} without clearing OS routes: {e}")

        network = self.get(network_id)
        try:
            self.db.delete(network)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"failed to delete network: {e}") from e

        logger.info(f"Deleted network {network_id}")

    def list_vpn_services(self) -> List[VPNService]:
        return self.executor.list_vpn()
