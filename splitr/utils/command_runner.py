"""
System command runner for the macOS network configuration tools.
"""
import logging
import subprocess
from typing import List, Optional, Protocol

from splitr.core.config import settings
from splitr.core.errors import ExecutionFailedError

logger = logging.getLogger(__name__)


class Runner(Protocol):
    """Process execution boundary used by the command executor."""

    def run(self, name: str, *args: str) -> List[str]:
        ...


def format_command(name: str, args) -> str:
    return " ".join([name, *args])


def decode_output(raw: Optional[bytes]) -> str:
    # Invalid UTF-8 bytes become U+FFFD
    return (raw or b"").decode("utf-8", errors="replace")


class CommandRunner:
    """Runs a command and returns its stdout split into lines."""

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Seconds before the process is killed. Defaults to
                settings.COMMAND_TIMEOUT; None waits for the command to finish.
        """
        self.timeout = timeout if timeout is not None else settings.COMMAND_TIMEOUT

    def run(self, name: str, *args: str) -> List[str]:
        """
        Execute a system command.

        Args:
            name: Executable name, resolved through PATH
            *args: Positional arguments passed verbatim

        Returns:
            Output lines (stdout split on newlines)

        Raises:
            ExecutionFailedError: If the command is missing, times out or exits non-zero
        """
        command = format_command(name, args)
        logger.info(f"executing command: {command}")

        try:
            result = subprocess.run(
                [name, *args],
                capture_output=True,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            stderr = decode_output(e.stderr).strip()
            raise ExecutionFailedError(
                command,
                f"exit status {e.returncode}" + (f": {stderr}" if stderr else ""),
                returncode=e.returncode,
                stderr=stderr,
            ) from e
        except subprocess.TimeoutExpired as e:
            raise ExecutionFailedError(command, f"timed out after {e.timeout}s") from e
        except OSError as e:
            raise ExecutionFailedError(command, str(e)) from e

        return decode_output(result.stdout).split("\n")
