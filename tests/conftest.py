import pytest

from hue_discovery.config import DiscoveryConfig


@pytest.fixture
def fast_config():
    return DiscoveryConfig(timeout=0.3)


@pytest.fixture
def fake_socket_factory():
    """Returns a function that builds a factory serving one FakeSocket."""
    def make(sock):
        def factory(config):
            return sock
        return factory
    return make
