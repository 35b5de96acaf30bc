"""
redefine - temporary property overrides for tests

Redefine named properties on an object, keep the originals, and restore
them afterwards:

    restore = redefine(store, {"request": spy})
    ...
    restore()

Scoped and lifecycle-bound variants:
- redefined(target, overrides, action) / redefining(...) context manager
- redefine_filter(target, overrides) for per-case setup and teardown
- the `redefine` pytest fixture and RedefineMixin for unittest
"""

__version__ = "1.0.0"

from redefine.core import (
    MISSING,
    SessionState,
    OverrideSession,
    redefine,
    redefined,
    redefining,
)

from redefine.lifecycle import (
    CaseContext,
    LifecycleHooks,
    redefine_filter,
    RedefineMixin,
)

from redefine.errors import (
    RedefineError,
    LifecycleError,
    SessionStateError,
)

from redefine.config import (
    RedefineConfig,
    load_config,
    get_config,
)

from redefine.log import setup_logging

__all__ = [
    # Override Manager
    "MISSING",
    "SessionState",
    "OverrideSession",
    "redefine",
    "redefined",
    "redefining",
    # Lifecycle
    "CaseContext",
    "LifecycleHooks",
    "redefine_filter",
    "RedefineMixin",
    # Errors
    "RedefineError",
    "LifecycleError",
    "SessionStateError",
    # Config / logging
    "RedefineConfig",
    "load_config",
    "get_config",
    "setup_logging",
]
