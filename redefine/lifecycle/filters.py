"""
lifecycle/filters.py - Per-case override wiring

Applies an override set at the start of every test case and restores it
at the end of the same case. The session travels between the two hooks
on the case's own context, never through shared module state.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Mapping, Optional
import itertools
import logging

import pytest

from redefine.config import get_config
from redefine.core.session import OverrideSession, redefine
from redefine.errors import LifecycleError
from redefine.lifecycle.hooks import CaseContext, LifecycleHooks

logger = logging.getLogger(__name__)

_filter_ids = itertools.count(1)


def _store_key(target: Any) -> str:
    return f"redefine.filter.{next(_filter_ids)}.{type(target).__name__}"


def redefine_filter(
    target: Any,
    overrides: Mapping[str, Any],
    *,
    hooks: Optional[LifecycleHooks] = None,
    by: Optional[str] = None,
) -> Optional[Callable]:
    """
    Redefine `overrides` on `target` around every test case.

    With `hooks`, a before/after pair is registered on that registry and
    nothing is returned. Without it, an autouse pytest fixture is returned;
    bind it to a name in a test module or class for pytest to pick it up:

        class TestDownloads:
            _stub_request = redefine_filter(store, {"request": spy})

    Args:
        target: Object to be redefined
        overrides: Property name -> replacement value
        hooks: Registry to wire into; None for pytest
        by: Force "attr" or "item" access
    """
    overrides = dict(overrides)

    if hooks is None:
        return _pytest_filter(target, overrides, by)

    key = _store_key(target)

    def apply_overrides(ctx: CaseContext) -> None:
        ctx.put(key, redefine(target, overrides, by=by))

    def restore_overrides(ctx: CaseContext) -> None:
        session: Optional[OverrideSession] = ctx.pop(key, None)
        if session is None:
            if get_config().strict_lifecycle:
                raise LifecycleError(key, ctx.name)
            logger.warning(f"No override session under {key!r} for case {ctx.name!r}")
            return
        session.restore()

    hooks.pair(apply_overrides, restore_overrides)
    return None


def _pytest_filter(target: Any, overrides: Dict[str, Any], by: Optional[str]) -> Callable:
    # Each test gets its own generator frame, which holds its session.
    # Assigned inside a test class the fixture is bound, hence *_.
    @pytest.fixture(autouse=True)
    def _redefine_filter(*_):
        session = redefine(target, overrides, by=by)
        try:
            yield session
        finally:
            session.restore()

    return _redefine_filter


class RedefineMixin:
    """
    unittest.TestCase mixin.

    Overrides made through self.redefine() are restored by addCleanup,
    after tearDown, newest first.
    """

    def redefine(
        self,
        target: Any,
        overrides: Optional[Mapping[str, Any]] = None,
        *,
        by: Optional[str] = None,
        **kw_overrides: Any,
    ) -> OverrideSession:
        session = redefine(target, overrides, by=by, **kw_overrides)
        self.addCleanup(session.restore)
        return session
