"""
Parser for ``route get default`` output.
"""
from typing import Optional

from splitr.utils.parsers.base_parser import BaseParser

INTERFACE_MARKER = "interface"


class RouteOutputParser(BaseParser):
    """
    Parser for the default route lookup.

    macOS prints the outgoing device as ``  interface: en0``; older builds and
    some fixtures omit the colon. Both forms are accepted.
    """

    def parse_default_interface(self) -> Optional[str]:
        """Return the interface of the first ``interface <name>`` line, or None."""
        for line in self.lines:
            tokens = line.split()
            if len(tokens) != 2:
                continue

            marker, name = tokens
            if marker.rstrip(":") != INTERFACE_MARKER:
                continue

            return name

        return None
