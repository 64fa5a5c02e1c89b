"""Test configuration and fixtures for the tcpsweep test suite"""

import socket

import pytest


@pytest.fixture
def listener():
    """A TCP socket listening on 127.0.0.1; yields its port"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.bind(("127.0.0.1", 0))
    sock.listen(128)
    yield sock.getsockname()[1]
    sock.close()


@pytest.fixture
def closed_port():
    """A loopback port that was just released and has nothing listening"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.fixture
def no_signal_handlers(monkeypatch):
    """Keep the CLI from replacing pytest's own SIGINT handler"""
    installed = []
    monkeypatch.setattr("tcpsweep.cli.install_interrupt_handler", lambda: installed.append(True))
    return installed


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Tests that open loopback sockets")


def pytest_collection_modifyitems(config, items):
    """Mark tests that use the socket fixtures as integration tests"""
    for item in items:
        if {"listener", "closed_port"} & set(getattr(item, "fixturenames", ())):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
