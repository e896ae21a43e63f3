"""
Parsers for ``networksetup`` output.
"""
import re
from typing import Optional

from splitr.schemas.network import NetworkInfo
from splitr.utils.parsers.base_parser import BaseParser

IP_PART = r"(\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})"


class NetworkServiceOrderParser(BaseParser):
    """
    Parser for ``networksetup -listnetworkserviceorder``.

    Output pairs a numbered service line with a hardware descriptor::

        (1) Wi-Fi
        (Hardware Port: Wi-Fi, Device: en0)

    A descriptor only counts when it directly follows its service line.
    """

    # (1) Wi-Fi   /   (*) Disabled Service
    service_pattern = re.compile(r"^\((?:\d+|\*)\)\s+(.+)$")
    device_pattern = re.compile(r"Device: (\w+)")

    def parse_service_by_interface(self, network_interface: str) -> Optional[str]:
        """Return the service name bound to ``network_interface``, or None."""
        current_service = None

        for line in self.lines:
            line_stripped = line.strip()

            service_match = self.service_pattern.match(line_stripped)
            if service_match:
                current_service = service_match.group(1).strip()
                continue

            device_match = self.device_pattern.search(line_stripped)
            if device_match and current_service and device_match.group(1) == network_interface:
                return current_service

            # Anything else, including a non-matching descriptor, breaks the pair
            current_service = None

        return None


class NetworkInfoParser(BaseParser):
    """Parser for ``networksetup -getinfo <service>``."""

    subnet_mask_pattern = re.compile(r"^Subnet mask:\s*" + IP_PART + r"\s*$")
    router_pattern = re.compile(r"^Router:\s*" + IP_PART + r"\s*$")

    def parse_network_info(self) -> Optional[NetworkInfo]:
        """Return subnet mask and router, or None when either is missing."""
        subnet_mask = None
        router = None

        for line in self.lines:
            line_stripped = line.strip()

            if subnet_mask is None:
                mask_match = self.subnet_mask_pattern.match(line_stripped)
                if mask_match:
                    subnet_mask = mask_match.group(1)
                    continue

            if router is None:
                router_match = self.router_pattern.match(line_stripped)
                if router_match:
                    router = router_match.group(1)

        if subnet_mask is None or router is None:
            return None

        return NetworkInfo(subnet_mask=subnet_mask, router=router)
