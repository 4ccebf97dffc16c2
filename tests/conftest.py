# Test configuration
import os

import pytest

from registry_client.client import KeeperClient
from registry_client.config import RegistryConfig
from tests.mock_registry import MockRegistry, MockTransportInjector

# Test environment variables
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT_TYPE", "simple")


@pytest.fixture
def registry():
    """Fresh in-memory registry"""
    return MockRegistry()


@pytest.fixture
def registry_config():
    """Config for a service that registers itself"""
    return RegistryConfig(
        host="registry.local",
        port=59890,
        service_key="core-data",
        service_host="core-data.local",
        service_port=59880,
        check_route="/api/v3/ping",
        check_interval="10s",
    )


@pytest.fixture
def client(registry, registry_config):
    """Client wired to the mock registry"""
    return KeeperClient(registry_config, MockTransportInjector(registry))


@pytest.fixture
def lookup_client(registry):
    """Client that only performs lookups"""
    return KeeperClient(
        RegistryConfig(host="registry.local", service_key="ui"),
        MockTransportInjector(registry),
    )
