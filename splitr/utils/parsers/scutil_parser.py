"""
Parser for ``scutil --nc list`` output.
"""
import re
from typing import List, Optional

from splitr.utils.parsers.base_parser import BaseParser

L2TP_TYPE_TAG = "[PPP:L2TP]"
CONNECTED_MARKER = "(Connected)"


class ConnectionListParser(BaseParser):
    """
    Parser for configured network connections.

    Only L2TP services are managed; PPTP and other PPP subtypes are ignored::

        * (Connected)    0A1B... PPP --> L2TP   "Office"   [PPP:L2TP]
    """

    vpn_pattern = re.compile(r'"([^"]+)"\s*' + re.escape(L2TP_TYPE_TAG))

    def _parse_name(self, line: str) -> Optional[str]:
        match = self.vpn_pattern.search(line)
        if not match:
            return None
        return match.group(1)

    def parse_vpn_services(self) -> List[str]:
        """Return every L2TP service name in output order."""
        services = []
        for line in self.lines:
            name = self._parse_name(line)
            if name:
                services.append(name)
        return services

    def parse_connected_vpn(self) -> Optional[str]:
        """Return the first connected L2TP service, or None."""
        for line in self.lines:
            if CONNECTED_MARKER not in line:
                continue

            name = self._parse_name(line)
            if name:
                return name

        return None
