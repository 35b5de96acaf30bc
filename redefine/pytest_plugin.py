"""
pytest_plugin.py - pytest integration

Registered through the `pytest11` entry point. Provides the `redefine`
fixture and the `--redefine-trace` option.
"""

from __future__ import annotations
from typing import Any, Callable, Iterator, List, Mapping, Optional
import logging

import pytest

from redefine.config import DEFAULT_LOG_LEVEL, get_config
from redefine.core.session import OverrideSession, redefine as _redefine
from redefine.log import setup_logging

logger = logging.getLogger(__name__)


def pytest_addoption(parser):
    group = parser.getgroup("redefine")
    group.addoption(
        "--redefine-trace",
        action="store_true",
        default=False,
        help="Log every override applied and restored by redefine.",
    )


def pytest_configure(config):
    settings = get_config()
    if config.getoption("redefine_trace", default=False):
        level = "DEBUG"
    elif settings.log_level.upper() != DEFAULT_LOG_LEVEL:
        level = settings.log_level
    else:
        return
    setup_logging(level, settings.log_file, settings.json_logs)


@pytest.fixture(name="redefine")
def redefine_fixture() -> Iterator[Callable[..., OverrideSession]]:
    """
    Redefine properties for the duration of one test.

    Every session created through the fixture is restored at teardown,
    newest first:

        def test_download(redefine):
            spy = MagicMock()
            redefine(store, request=spy)
            store.fetch("/downloads")
            spy.assert_called_once()
    """
    sessions: List[OverrideSession] = []

    def apply(
        target: Any,
        overrides: Optional[Mapping[str, Any]] = None,
        *,
        by: Optional[str] = None,
        **kw_overrides: Any,
    ) -> OverrideSession:
        session = _redefine(target, overrides, by=by, **kw_overrides)
        sessions.append(session)
        return session

    yield apply

    while sessions:
        sessions.pop().restore()
