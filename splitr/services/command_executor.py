"""
Service for reading and changing macOS network configuration.

Wraps route, networksetup, scutil and open. Every call re-queries the OS;
nothing is cached between calls.
"""
import logging
from typing import List, Optional, Sequence

from splitr.core.errors import (
    ExecutionFailedError,
    InterfaceNotFoundError,
    NetworkInfoNotFoundError,
    ServiceNotFoundError,
    VPNServiceNotFoundError,
)
from splitr.models.network import Network
from splitr.models.network_host_setup import NetworkHostSetup
from splitr.schemas.network import NetworkInfo, NetworkInterface, NetworkService, VPNService
from splitr.utils.command_runner import CommandRunner, Runner
from splitr.utils.parsers.networksetup_parser import NetworkInfoParser, NetworkServiceOrderParser
from splitr.utils.parsers.route_parser import RouteOutputParser
from splitr.utils.parsers.scutil_parser import ConnectionListParser

logger = logging.getLogger(__name__)

CMD_ROUTE = "route"
CMD_NETWORKSETUP = "networksetup"
CMD_SCUTIL = "scutil"
CMD_OPEN = "open"

GET_DEFAULT_ROUTE_ARGS = ("get", "default")
LIST_NETWORK_SERVICE_ORDER_ARGS = ("-listnetworkserviceorder",)
GET_INFO_ARGS = ("-getinfo",)
SET_ADDITIONAL_ROUTES_ARGS = ("-setadditionalroutes",)
LIST_CONNECTIONS_ARGS = ("--nc", "list")
REVEAL_IN_FINDER_ARGS = ("-R",)


class CommandExecutor:
    """OS network inspector backed by a process runner."""

    def __init__(self, runner: Optional[Runner] = None):
        """
        Args:
            runner: Process execution boundary; defaults to CommandRunner
        """
        self.runner = runner or CommandRunner()

    def _run(self, operation: str, name: str, *args: str) -> List[str]:
        try:
            return self.runner.run(name, *args)
        except ExecutionFailedError as e:
            raise e.wrap(operation)

    def get_default_network_interface(self) -> NetworkInterface:
        """
        Find the physical interface carrying the default route.

        Raises:
            ExecutionFailedError: If ``route`` fails
            InterfaceNotFoundError: If no ``interface <name>`` line is printed
        """
        operation = "get default network interface"
        output = self._run(operation, CMD_ROUTE, *GET_DEFAULT_ROUTE_ARGS)

        network_interface = RouteOutputParser(output).parse_default_interface()
        if not network_interface:
            raise InterfaceNotFoundError().wrap(operation)

        logger.debug(f"Default network interface: {network_interface}")
        return network_interface

    def get_network_service_by_network_interface(self, network_interface: NetworkInterface) -> NetworkService:
        """
        Map an interface (e.g. ``en0``) to its service name (e.g. ``Wi-Fi``).

        Raises:
            ExecutionFailedError: If ``networksetup`` fails
            ServiceNotFoundError: If no service is bound to the interface
        """
        operation = "get network service by network interface"
        output = self._run(operation, CMD_NETWORKSETUP, *LIST_NETWORK_SERVICE_ORDER_ARGS)

        network_service = NetworkServiceOrderParser(output).parse_service_by_interface(network_interface)
        if not network_service:
            raise ServiceNotFoundError(network_interface).wrap(operation)

        logger.debug(f"Network service for {network_interface}: {network_service}")
        return network_service

    def get_network_info_by_network_service(self, network_service: NetworkService) -> NetworkInfo:
        """
        Read subnet mask and router of a service.

        Raises:
            ExecutionFailedError: If ``networksetup`` fails
            NetworkInfoNotFoundError: If either value is missing
        """
        operation = "get network info by network service"
        output = self._run(operation, CMD_NETWORKSETUP, *GET_INFO_ARGS, network_service)

        network_info = NetworkInfoParser(output).parse_network_info()
        if network_info is None:
            raise NetworkInfoNotFoundError(network_service).wrap(operation)

        logger.debug(f"Network info for {network_service}: {network_info}")
        return network_info

    def set_network_additional_routes(self, network: Network, setups: Sequence[NetworkHostSetup]) -> None:
        """
        Replace the additional routes of the VPN service named ``network.name``.

        Each setup contributes an (ip, subnet mask, router) triple in list
        order. An empty list clears every additional route of the service.
        """
        args = [*SET_ADDITIONAL_ROUTES_ARGS, network.name]
        for setup in setups:
            args.extend(setup.route_arguments())

        self._run("set network additional routes", CMD_NETWORKSETUP, *args)
        logger.info(f"Applied {len(setups)} additional route(s) to VPN service {network.name}")

    def list_vpn(self) -> List[VPNService]:
        """List configured L2TP VPN services; empty when none are configured."""
        output = self._run("list vpn", CMD_SCUTIL, *LIST_CONNECTIONS_ARGS)
        return ConnectionListParser(output).parse_vpn_services()

    def get_current_vpn(self) -> VPNService:
        """
        Return the connected L2TP VPN service.

        Raises:
            ExecutionFailedError: If ``scutil`` fails
            VPNServiceNotFoundError: If no VPN is connected
        """
        output = self._run("get current vpn", CMD_SCUTIL, *LIST_CONNECTIONS_ARGS)

        vpn_service = ConnectionListParser(output).parse_connected_vpn()
        if not vpn_service:
            raise VPNServiceNotFoundError()

        return vpn_service

    def open_in_finder(self, path: str) -> None:
        """Reveal ``path`` in a Finder window."""
        self._run("open in finder", CMD_OPEN, *REVEAL_IN_FINDER_ARGS, path)
