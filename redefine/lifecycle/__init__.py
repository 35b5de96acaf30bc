"""
lifecycle/ - Per-case override wiring

Provides the hook registry and the helpers that tie override sessions
to the start and end of each test case.
"""

from .hooks import (
    CaseContext,
    LifecycleHooks,
)

from .filters import (
    redefine_filter,
    RedefineMixin,
)


__all__ = [
    "CaseContext",
    "LifecycleHooks",
    "redefine_filter",
    "RedefineMixin",
]
