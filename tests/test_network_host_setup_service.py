"""
Tests for syncing and resetting the additional routes of a network.
"""
import socket
from unittest.mock import patch

import pytest

from splitr.core.errors import (
    ExecutionFailedError,
    InterfaceNotFoundError,
    InvalidAddressError,
    NetworkNotFoundError,
    StorageError,
    VPNServiceNotFoundError,
)
from splitr.models.network import Network
from splitr.models.network_host import NetworkHost
from splitr.schemas.network import is_ipv4_address
from splitr.services.network_host_setup_service import (
    HostResolutionError,
    NetworkHostSetupService,
    resolve_ipv4_addresses,
)
from splitr.services.network_host_setup_store import NetworkHostSetupStore

ROUTES_CMD = ("networksetup", "-setadditionalroutes")


@pytest.fixture
def service(db_session, executor):
    return NetworkHostSetupService(db_session, executor, resolve_hostnames=False)


def applied_routes(fake_runner):
    return [call[2:] for call in fake_runner.calls_to(*ROUTES_CMD)]


class TestSync:

    def test_round_trip(self, db_session, service, fake_runner, network, network_hosts):
        git, wiki = network_hosts

        setups = service.sync_by_network_id(network.id)

        stored = NetworkHostSetupStore(db_session).list_by_network_host_ids([git.id, wiki.id])
        assert len(stored) == 2
        assert {(s.network_host_id, s.network_host_ip, s.subnet_mask, s.router) for s in stored} == {
            (git.id, "10.20.30.40", "255.255.255.0", "192.168.1.1"),
            (wiki.id, "172.16.0.9", "255.255.255.0", "192.168.1.1"),
        }
        assert [s.network_host_ip for s in setups] == ["10.20.30.40", "172.16.0.9"]
        assert applied_routes(fake_runner) == [(
            "Office VPN",
            "10.20.30.40", "255.255.255.0", "192.168.1.1",
            "172.16.0.9", "255.255.255.0", "192.168.1.1",
        )]

        service.reset_by_network_id(network.id)

        assert NetworkHostSetupStore(db_session).list_by_network_host_ids([git.id, wiki.id]) == []
        assert applied_routes(fake_runner)[-1] == ("Office VPN",)

    def test_reads_local_facts_before_writing(self, service, fake_runner, network, network_hosts):
        service.sync_by_network_id(network.id)

        commands = [call[:2] for call in fake_runner.calls]
        assert commands == [
            ("scutil", "--nc"),
            ("route", "get"),
            ("networksetup", "-listnetworkserviceorder"),
            ("networksetup", "-getinfo"),
            ("networksetup", "-setadditionalroutes"),
        ]
        assert fake_runner.calls[3] == ("networksetup", "-getinfo", "Wi-Fi")

    def test_sync_replaces_previous_rows(self, db_session, service, fake_runner, network, network_hosts):
        service.sync_by_network_id(network.id)
        fake_runner.set_output("networksetup", "-getinfo", ["Subnet mask: 255.255.0.0", "Router: 10.1.0.1"])

        service.sync_by_network_id(network.id)

        stored = NetworkHostSetupStore(db_session).list_by_network_id(network.id)
        assert len(stored) == 2
        assert {(s.subnet_mask, s.router) for s in stored} == {("255.255.0.0", "10.1.0.1")}

    def test_removed_host_drops_out(self, db_session, service, fake_runner, network, network_hosts):
        service.sync_by_network_id(network.id)
        db_session.delete(network_hosts[1])
        db_session.commit()

        service.sync_by_network_id(network.id)

        stored = NetworkHostSetupStore(db_session).list_by_network_id(network.id)
        assert [s.network_host_ip for s in stored] == ["10.20.30.40"]
        assert applied_routes(fake_runner)[-1] == ("Office VPN", "10.20.30.40", "255.255.255.0", "192.168.1.1")

    def test_network_without_hosts_clears_routes(self, db_session, service, fake_runner, network):
        assert service.sync_by_network_id(network.id) == []
        assert applied_routes(fake_runner) == [("Office VPN",)]
        assert NetworkHostSetupStore(db_session).list_by_network_id(network.id) == []

    def test_unknown_network(self, service, fake_runner):
        with pytest.raises(NetworkNotFoundError) as exc_info:
            service.sync_by_network_id(404)

        assert str(exc_info.value) == "sync network 404: network not found: 404"
        assert fake_runner.calls == []

    def test_network_without_vpn_service(self, db_session, service, fake_runner, network, network_hosts):
        fake_runner.set_output("scutil", "--nc", ['* (Disconnected) 1 PPP --> L2TP "Home VPN" [PPP:L2TP]'])

        with pytest.raises(VPNServiceNotFoundError) as exc_info:
            service.sync_by_network_id(network.id)

        assert "Office VPN" in str(exc_info.value)
        assert applied_routes(fake_runner) == []

    def test_local_facts_failure_writes_nothing(self, db_session, service, fake_runner, network, network_hosts):
        service.sync_by_network_id(network.id)
        fake_runner.set_output("route", "get", ["route: writing to routing socket: not in table"])

        with pytest.raises(InterfaceNotFoundError) as exc_info:
            service.sync_by_network_id(network.id)

        assert str(exc_info.value).startswith(f"sync network {network.id}: get default network interface: ")
        assert len(NetworkHostSetupStore(db_session).list_by_network_id(network.id)) == 2
        assert len(applied_routes(fake_runner)) == 1

    def test_os_failure_after_persisting_is_propagated(self, db_session, service, fake_runner, network, network_hosts):
        fake_runner.set_error("networksetup", "-setadditionalroutes")

        with pytest.raises(ExecutionFailedError):
            service.sync_by_network_id(network.id)

        # No rollback: rows stay and a later sync repairs the OS side
        assert len(NetworkHostSetupStore(db_session).list_by_network_id(network.id)) == 2

        fake_runner.set_output("networksetup", "-setadditionalroutes", [""])
        service.sync_by_network_id(network.id)
        assert len(NetworkHostSetupStore(db_session).list_by_network_id(network.id)) == 2

    def test_storage_failure_skips_os(self, service, fake_runner, network, network_hosts):
        with patch.object(service.store, "add_batch", side_effect=StorageError("failed to add batch: disk I/O error")):
            with pytest.raises(StorageError) as exc_info:
                service.sync_by_network_id(network.id)

        assert "failed to add batch" in str(exc_info.value)
        assert applied_routes(fake_runner) == []


class TestReset:

    def test_reset_without_rows(self, service, fake_runner, network, network_hosts):
        service.reset_by_network_id(network.id)
        assert applied_routes(fake_runner) == [("Office VPN",)]

    def test_reset_leaves_other_networks(self, db_session, service, fake_runner, network, network_hosts):
        fake_runner.set_output("scutil", "--nc", [
            '* (Connected) 1 PPP --> L2TP "Office VPN" [PPP:L2TP]',
            '* (Disconnected) 2 PPP --> L2TP "Home VPN" [PPP:L2TP]',
        ])
        home = Network(name="Home VPN")
        db_session.add(home)
        db_session.commit()
        db_session.add(NetworkHost(network_id=home.id, address="192.0.2.10"))
        db_session.commit()

        service.sync_by_network_id(network.id)
        service.sync_by_network_id(home.id)
        service.reset_by_network_id(network.id)

        store = NetworkHostSetupStore(db_session)
        assert store.list_by_network_id(network.id) == []
        assert [s.network_host_ip for s in store.list_by_network_id(home.id)] == ["192.0.2.10"]

    def test_reset_unknown_network(self, service):
        with pytest.raises(NetworkNotFoundError) as exc_info:
            service.reset_by_network_id(12345)
        assert str(exc_info.value).startswith("reset network 12345: ")

    def test_reset_os_failure(self, db_session, service, fake_runner, network, network_hosts):
        service.sync_by_network_id(network.id)
        fake_runner.set_error("networksetup", "-setadditionalroutes")

        with pytest.raises(ExecutionFailedError):
            service.reset_by_network_id(network.id)

        # Store side already cleared; running reset again finishes the job
        assert NetworkHostSetupStore(db_session).list_by_network_id(network.id) == []


class TestHostnameResolution:

    def test_hostnames_expand_to_ipv4_addresses(self, db_session, executor, fake_runner, network):
        db_session.add(NetworkHost(network_id=network.id, address="git.example.com"))
        db_session.commit()
        service = NetworkHostSetupService(db_session, executor, resolve_hostnames=True)

        infos = [
            (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("203.0.113.5", 0)),
            (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("203.0.113.6", 0)),
            (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("203.0.113.5", 0)),
        ]
        with patch("splitr.services.network_host_setup_service.socket.getaddrinfo", return_value=infos):
            setups = service.sync_by_network_id(network.id)

        assert [s.network_host_ip for s in setups] == ["203.0.113.5", "203.0.113.6"]
        assert len(NetworkHostSetupStore(db_session).list_by_network_id(network.id)) == 2

    def test_hostnames_never_reach_networksetup_without_resolution(
        self, db_session, executor, fake_runner, network, network_hosts
    ):
        service = NetworkHostSetupService(db_session, executor, resolve_hostnames=False)
        service.sync_by_network_id(network.id)
        db_session.add(NetworkHost(network_id=network.id, address="git.example.com"))
        db_session.commit()

        with patch("splitr.services.network_host_setup_service.socket.getaddrinfo") as getaddrinfo:
            with pytest.raises(InvalidAddressError) as exc_info:
                service.sync_by_network_id(network.id)

        getaddrinfo.assert_not_called()
        assert str(exc_info.value).startswith(f"sync network {network.id}: invalid address git.example.com")
        # Rejected before the store or the OS is touched
        assert len(applied_routes(fake_runner)) == 1
        assert len(NetworkHostSetupStore(db_session).list_by_network_id(network.id)) == 2

    def test_lookup_failure(self):
        with patch(
            "splitr.services.network_host_setup_service.socket.getaddrinfo",
            side_effect=socket.gaierror(8, "nodename nor servname provided, or not known"),
        ):
            with pytest.raises(HostResolutionError):
                resolve_ipv4_addresses("missing.example.com")

    def test_is_ipv4_address(self):
        assert is_ipv4_address("10.0.0.1")
        assert not is_ipv4_address("git.example.com")
        assert not is_ipv4_address("::1")
