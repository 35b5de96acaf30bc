"""
core/scoped.py - Scoped overrides

Wraps a single override session around a block of code. The session is
restored however the block exits.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Mapping, Optional, TypeVar

from redefine.core.session import OverrideSession, redefine

T = TypeVar("T")


@contextmanager
def redefining(
    target: Any,
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    by: Optional[str] = None,
    **kw_overrides: Any,
) -> Iterator[OverrideSession]:
    """
    Context manager form of redefine().

    Usage:
        with redefining(store, request=spy) as session:
            store.fetch("/downloads")
        assert session.state is SessionState.RESTORED
    """
    session = redefine(target, overrides, by=by, **kw_overrides)
    try:
        yield session
    finally:
        session.restore()


def redefined(
    target: Any,
    overrides: Mapping[str, Any],
    action: Callable[[], T],
    *,
    by: Optional[str] = None,
) -> T:
    """
    Redefine properties, run `action`, then restore.

    The restore also runs when `action` raises, so a failing assertion
    inside it cannot leave the target mutated.

    Args:
        target: Object to be redefined
        overrides: Property name -> replacement value
        action: Zero-argument callable run while the overrides are in place
        by: Force "attr" or "item" access

    Returns:
        Whatever `action` returns
    """
    with redefining(target, overrides, by=by):
        return action()
