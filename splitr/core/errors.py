"""
Exception hierarchy for route synchronization.

Every error raised by the inspector, the stores and the synchronizer derives
from SplitrError. Callers add the name of the failing operation with
``wrap()`` so the type stays matchable while the message reads like a chain:
``sync network 3: get default network interface: failed to find ...``.
"""
from typing import Optional


class SplitrError(Exception):
    """Base exception for route synchronization errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def wrap(self, context: str) -> "SplitrError":
        """Prefix the message with the name of the enclosing operation."""
        self.message = f"{context}: {self.message}"
        self.args = (self.message,)
        return self

    def __str__(self) -> str:
        return self.message


class ExecutionFailedError(SplitrError):
    """Raised when an OS command cannot be started or exits non-zero."""

    def __init__(
        self,
        command: str,
        detail: str,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        self.command = command
        self.detail = detail
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"failed to execute command '{command}': {detail}")


class ParseNotFoundError(SplitrError):
    """Raised when a command ran but the expected fact is absent from its output."""
    pass


class InterfaceNotFoundError(ParseNotFoundError):
    def __init__(self):
        super().__init__("failed to find network interface in command output")


class ServiceNotFoundError(ParseNotFoundError):
    def __init__(self, network_interface: str):
        self.network_interface = network_interface
        super().__init__(f"failed to find network service by interface {network_interface}")


class NetworkInfoNotFoundError(ParseNotFoundError):
    def __init__(self, network_service: str):
        self.network_service = network_service
        super().__init__(f"failed to find network info for service {network_service} in command output")


class VPNServiceNotFoundError(SplitrError):
    """No matching VPN service; for the current-VPN lookup this means none is active."""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        message = "vpn service not found"
        if name:
            message = f"vpn service not found: {name}"
        super().__init__(message)


class StorageError(SplitrError):
    """Raised when a database statement fails."""
    pass


class NotFoundError(SplitrError):
    pass


class NetworkNotFoundError(NotFoundError):
    def __init__(self, network_id=None):
        self.network_id = network_id
        super().__init__("network not found" if network_id is None else f"network not found: {network_id}")


class NetworkHostNotFoundError(NotFoundError):
    def __init__(self, network_host_id=None):
        self.network_host_id = network_host_id
        super().__init__(
            "network host not found" if network_host_id is None else f"network host not found: {network_host_id}"
        )


class AlreadyExistsError(SplitrError):
    pass


class NetworkAlreadyExistsError(AlreadyExistsError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"network already exists: {name}")


class NetworkHostAlreadyExistsError(AlreadyExistsError):
    def __init__(self, address: str):
        self.address = address
        super().__init__(f"network host already exists: {address}")


class InvalidAddressError(SplitrError):
    """Raised for a host address that cannot become a route destination."""

    def __init__(self, address: str, reason: str):
        self.address = address
        super().__init__(f"invalid address {address}: {reason}")


class HostNotFoundError(NotFoundError):
    def __init__(self, host_id=None):
        self.host_id = host_id
        super().__init__("host not found" if host_id is None else f"host not found: {host_id}")


class HostAlreadyExistsError(AlreadyExistsError):
    def __init__(self, address: str):
        self.address = address
        super().__init__(f"host already exists: {address}")
