"""
Pytest configuration and fixtures.
"""
import os
import tempfile

# Point settings at a scratch directory before any splitr module is imported
TEST_DATA_DIR = tempfile.mkdtemp(prefix="splitr-tests-")
os.environ.setdefault("SPLITR_DATA_DIR", TEST_DATA_DIR)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from splitr.api.v1.deps import get_command_executor
from splitr.core.database import Base, enable_sqlite_foreign_keys, get_db
from splitr.main import app
from splitr.services.command_executor import CommandExecutor

# Import all models to ensure they register with Base.metadata
from splitr.models import Host, Network, NetworkHost, NetworkHostSetup

from tests.fakes import (
    NETWORK_INFO_OUTPUT,
    NETWORK_SERVICE_ORDER_OUTPUT,
    ROUTE_GET_DEFAULT_OUTPUT,
    SCUTIL_NC_LIST_OUTPUT,
    FakeRunner,
)

# Use file-based SQLite for testing (more reliable than in-memory)
TEST_DATABASE_URL = f"sqlite:///{os.path.join(TEST_DATA_DIR, 'test_splitr.db')}"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    pool_pre_ping=False,
)
enable_sqlite_foreign_keys(test_engine)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """
    Create all tables before tests run and clean up after all tests complete.
    This runs once per test session.
    """
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Provide a database session for tests that need direct DB access.

    Services commit, so tables are emptied after each test instead of rolled back.
    """
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()


@pytest.fixture
def fake_runner():
    """Runner preloaded with the output of a Mac on Wi-Fi with a connected L2TP VPN."""
    runner = FakeRunner()
    runner.set_output("route", "get", ROUTE_GET_DEFAULT_OUTPUT)
    runner.set_output("networksetup", "-listnetworkserviceorder", NETWORK_SERVICE_ORDER_OUTPUT)
    runner.set_output("networksetup", "-getinfo", NETWORK_INFO_OUTPUT)
    runner.set_output("scutil", "--nc", SCUTIL_NC_LIST_OUTPUT)
    return runner


@pytest.fixture
def executor(fake_runner):
    return CommandExecutor(runner=fake_runner)


@pytest.fixture
def network(db_session):
    network = Network(name="Office VPN")
    db_session.add(network)
    db_session.commit()
    db_session.refresh(network)
    return network


@pytest.fixture
def network_hosts(db_session, network):
    hosts = [
        NetworkHost(network_id=network.id, address="10.20.30.40", description="git"),
        NetworkHost(network_id=network.id, address="172.16.0.9", description="wiki"),
    ]
    db_session.add_all(hosts)
    db_session.commit()
    for host in hosts:
        db_session.refresh(host)
    return hosts


@pytest.fixture(scope="function")
def client(db_session, executor):
    """
    Create a test client with database and OS command overrides.

    Requests get their own session from TestingSessionLocal, as FastAPI
    expects; OS commands go to the fake runner.
    """
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_command_executor] = lambda: executor

    yield TestClient(app)

    app.dependency_overrides.clear()
