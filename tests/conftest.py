"""
redefine Test Configuration and Fixtures
"""

import pytest

from redefine.config import RedefineConfig, set_config

# Plugin fixture, for runs where the entry point is not installed
from redefine.pytest_plugin import redefine_fixture  # noqa: F401


class Store:
    """Collaborator with plain attributes and a method to stub."""

    base_url = "https://example.invalid"

    def __init__(self):
        self.a = 1
        self.b = 2
        self.calls = []

    def request(self, method, path):
        self.calls.append((method, path))
        return {"method": method, "path": path}


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from default configuration."""
    set_config(RedefineConfig())
    yield
    set_config(None)


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def strict_off():
    set_config(RedefineConfig(strict_lifecycle=False))
