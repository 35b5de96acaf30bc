"""
lifecycle/hooks.py - Per-case hook registry

A small before-each / after-each registry for code that has no test
runner of its own to lean on. Every case gets a fresh CaseContext that
is passed through both hook phases, so state set up for one case never
leaks into another.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TypeVar
import logging
import uuid

logger = logging.getLogger(__name__)

Hook = Callable[["CaseContext"], None]
T = TypeVar("T")

_UNSET = object()


@dataclass
class CaseContext:
    """Scratch storage owned by a single test case."""

    name: str = ""
    case_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    store: Dict[str, Any] = field(default_factory=dict)

    def put(self, key: str, value: Any) -> None:
        self.store[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.store.get(key, default)

    def pop(self, key: str, default: Any = _UNSET) -> Any:
        if default is _UNSET:
            return self.store.pop(key)
        return self.store.pop(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.store


class LifecycleHooks:
    """
    Registry of before-each and after-each callbacks.

    Before-hooks run in registration order. After-hooks run in reverse
    registration order, and only for before-hooks that completed, so
    overrides stacked on the same target unwind innermost first.
    """

    def __init__(self):
        self._before: List[Hook] = []
        self._after: List[Hook] = []
        # after-hook index -> before-hook index it is paired with
        self._pairs: Dict[int, int] = {}

    def before_each(self, callback: Hook) -> Hook:
        """Register a callback to run at the start of every case."""
        self._before.append(callback)
        return callback

    def after_each(self, callback: Hook) -> Hook:
        """Register a callback to run at the end of every case."""
        self._after.append(callback)
        return callback

    def pair(self, before: Hook, after: Hook) -> None:
        """
        Register a before/after pair.

        The after-hook of a pair is skipped when its before-hook did not
        run to completion for the case.
        """
        self.before_each(before)
        self.after_each(after)
        self._pairs[len(self._after) - 1] = len(self._before) - 1

    @property
    def before_hooks(self) -> List[Hook]:
        return list(self._before)

    @property
    def after_hooks(self) -> List[Hook]:
        return list(self._after)

    def run_case(
        self,
        body: Callable[[CaseContext], T],
        name: str = "",
        ctx: Optional[CaseContext] = None,
    ) -> T:
        """
        Run one case: before-hooks, body, then after-hooks.

        After-hooks run even when a before-hook or the body raises. The
        first exception raised is the one that propagates.

        Args:
            body: Callable receiving the case context
            name: Case name, used in logs and errors
            ctx: Context to use instead of a fresh one

        Returns:
            Whatever `body` returns
        """
        ctx = ctx if ctx is not None else CaseContext(name=name)
        completed = 0
        logger.debug(f"Case {ctx.case_id} {ctx.name!r} starting")

        try:
            for hook in self._before:
                hook(ctx)
                completed += 1
            result = body(ctx)
        except BaseException:
            self._run_after(ctx, completed, propagate=False)
            raise

        self._run_after(ctx, completed, propagate=True)
        logger.debug(f"Case {ctx.case_id} {ctx.name!r} finished")
        return result

    def _run_after(self, ctx: CaseContext, completed: int, propagate: bool) -> None:
        pending: Optional[BaseException] = None

        for index in reversed(range(len(self._after))):
            before_index = self._pairs.get(index)
            if before_index is not None and before_index >= completed:
                continue
            try:
                self._after[index](ctx)
            except BaseException as e:
                # pytest.fail and pytest.skip raise BaseException subclasses
                logger.error(f"after_each hook failed for case {ctx.case_id}: {e!r}")
                if pending is None:
                    pending = e

        if pending is not None and propagate:
            raise pending
