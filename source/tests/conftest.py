# ABOUTME: Shared pytest fixtures for humctl-wrapper tests
# ABOUTME: Provides an injected configuration and an in-memory Humanitec client

import pytest
from cleo.testers.command_tester import CommandTester

from humctl_wrapper.cli.utils.humanitec import InMemoryClient
from humctl_wrapper.config import Config
from humctl_wrapper.models import Application


@pytest.fixture
def config() -> Config:
    """Configuration with credentials and the table default."""
    return Config(token="test-token", organization="test-org", default_output="table")


@pytest.fixture
def client() -> InMemoryClient:
    """In-memory client holding a single application."""
    return InMemoryClient(apps=[Application(id="test-app", name="Test App")])


@pytest.fixture
def factory_calls() -> list:
    """Keyword arguments of every client factory invocation."""
    return []


@pytest.fixture
def client_factory(client, factory_calls):
    """Client factory that always hands out the in-memory client."""

    def factory(**kwargs):
        factory_calls.append(kwargs)
        return client

    return factory


@pytest.fixture
def run_command(config, client_factory):
    """Run a command class with the injected config and client, return its tester."""

    def run(command_class, args: str = "", cfg: Config = None) -> CommandTester:
        tester = CommandTester(command_class(cfg or config, client_factory))
        tester.execute(args)
        return tester

    return run
