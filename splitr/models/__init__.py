"""Database models."""
from splitr.models.host import Host
from splitr.models.network import Network
from splitr.models.network_host import NetworkHost
from splitr.models.network_host_setup import NetworkHostSetup

__all__ = [
    "Host",
    "Network",
    "NetworkHost",
    "NetworkHostSetup",
]
