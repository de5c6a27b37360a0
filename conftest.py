"""Root conftest.py - session-scoped fixtures."""

import pytest

from pagewait.config import WaitConfig


@pytest.fixture(scope="session")
def config() -> WaitConfig:
    return WaitConfig.from_env()


@pytest.fixture(scope="session")
def fixture_server(config: WaitConfig):
    """Fixture page served from a background thread for the whole session."""
    from pagewait.fixture_server import FixtureServer, create_app

    server = FixtureServer(create_app(), config.fixture_host, config.fixture_port)
    with server:
        yield server
