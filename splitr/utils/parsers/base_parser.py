"""
Base parser class for OS command output.
"""
from typing import Iterable, List


class BaseParser:
    """Base class for parsers of line-oriented command output."""

    def __init__(self, lines: Iterable[str]):
        """
        Initialize parser with command output.

        Args:
            lines: Output lines as returned by the command runner
        """
        self.lines: List[str] = list(lines)

    @classmethod
    def from_text(cls, output: str):
        """Build a parser from raw command output."""
        return cls(output.split("\n"))
