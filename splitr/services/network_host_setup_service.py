"""
Route synchronization between declared network hosts and the OS.

Sync and reset are full replace / full clear operations. The database and
the OS configuration fail independently and nothing is rolled back, so a
partial failure is repaired by running the same operation again.
"""
import logging
import socket
from typing import List, Optional

from sqlalchemy.orm import Session

from splitr.core.config import settings
from splitr.core.errors import InvalidAddressError, NetworkNotFoundError, SplitrError, VPNServiceNotFoundError
from splitr.models.network import Network
from splitr.models.network_host import NetworkHost
from splitr.models.network_host_setup import NetworkHostSetup
from splitr.schemas.network import NetworkInfo, is_ipv4_address
from splitr.services.command_executor import CommandExecutor
from splitr.services.network_host_service import NetworkHostService
from splitr.services.network_host_setup_store import NetworkHostSetupStore

logger = logging.getLogger(__name__)


class HostResolutionError(SplitrError):
    """Raised when a host name has no IPv4 address."""
    pass


def resolve_ipv4_addresses(address: str) -> List[str]:
    """Resolve a host name to its unique IPv4 addresses, in resolver order."""
    try:
        infos = socket.getaddrinfo(address, None, family=socket.AF_INET, type=socket.SOCK_STREAM)
    except socket.gaierror as e:
        raise HostResolutionError(f"failed to lookup IP for address {address}: {e}") from e

    addresses = list(dict.fromkeys(info[4][0] for info in infos))
    if not addresses:
        raise HostResolutionError(f"no IPv4 addresses found for address {address}")
    return addresses


class NetworkHostSetupService:
    """Applies and clears the additional routes of a network."""

    def __init__(self, db: Session, executor: CommandExecutor, resolve_hostnames: Optional[bool] = None):
        """
        Args:
            db: Database session
            executor: OS network inspector
            resolve_hostnames: Expand host names into IPv4 addresses
                (defaults to settings.RESOLVE_HOSTNAMES)
        """
        self.db = db
        self.executor = executor
        self.store = NetworkHostSetupStore(db)
        self.network_hosts = NetworkHostService(db)
        self.resolve_hostnames = settings.RESOLVE_HOSTNAMES if resolve_hostnames is None else resolve_hostnames

    def sync_by_network_id(self, network_id: int) -> List[NetworkHostSetup]:
        """
        Route every host of the network around its VPN.

        Reads the local subnet facts, replaces the persisted setups of the
        network's hosts and pushes the full set to the VPN service.

        Returns:
            The setups that were applied, in host order
        """
        context = f"sync network {network_id}"
        logger.info(f"Syncing additional routes for network {network_id}")

        try:
            network = self._get_network(network_id)
            self._ensure_vpn_service(network)

            network_info = self._get_current_network_info()
            hosts = self.network_hosts.list(network_id)
            setups = self._build_setups(hosts, network_info)

            self.store.delete_batch_by_network_host_ids([host.id for host in hosts])
            self.store.add_batch(setups)

            self.executor.set_network_additional_routes(network, setups)
        except SplitrError as e:
            raise e.wrap(context)

        logger.info(f"Synced {len(setups)} route(s) for network {network.name} via {network_info.router}")
        return setups

    def reset_by_network_id(self, network_id: int) -> None:
        """Drop the persisted setups of the network and clear its OS routes."""
        context = f"reset network {network_id}"
        logger.info(f"Resetting additional routes for network {network_id}")

        try:
            network = self._get_network(network_id)
            self._ensure_vpn_service(network)

            host_ids = self.network_hosts.list_ids(network_id)
            self.store.delete_batch_by_network_host_ids(host_ids)

            self.executor.set_network_additional_routes(network, [])
        except SplitrError as e:
            raise e.wrap(context)

        logger.info(f"Reset additional routes for network {network.name}")

    def _get_network(self, network_id: int) -> Network:
        network = self.db.get(Network, network_id)
        if network is None:
            raise NetworkNotFoundError(network_id)
        return network

    def _ensure_vpn_service(self, network: Network) -> None:
        # The network name is the only link to the OS VPN service
        if network.name not in self.executor.list_vpn():
            raise VPNServiceNotFoundError(network.name)

    def _get_current_network_info(self) -> NetworkInfo:
        network_interface = self.executor.get_default_network_interface()
        network_service = self.executor.get_network_service_by_network_interface(network_interface)
        return self.executor.get_network_info_by_network_service(network_service)

    def _build_setups(self, hosts: List[NetworkHost], network_info: NetworkInfo) -> List[NetworkHostSetup]:
        setups = []
        for host in hosts:
            for host_ip in self._host_addresses(host.address):
                setups.append(
                    NetworkHostSetup(
                        network_host_id=host.id,
                        network_host_ip=host_ip,
                        subnet_mask=network_info.subnet_mask,
                        router=network_info.router,
                    )
                )
        return setups

    def _host_addresses(self, address: str) -> List[str]:
        if is_ipv4_address(address):
            return [address]
        if not self.resolve_hostnames:
            raise InvalidAddressError(address, "hostname resolution is disabled")
        return resolve_ipv4_addresses(address)
