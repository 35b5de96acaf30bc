"""
errors.py - redefine error types

Property reads and writes are never wrapped: whatever the interpreter
raises reaches the caller unchanged. These types cover misuse of the
lifecycle wiring only.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum


class ErrorCategory(Enum):
    """Categories of redefine errors."""
    LIFECYCLE = "lifecycle"    # Hook pairing / per-case storage problems
    SESSION = "session"        # Override session misuse


class RedefineError(Exception):
    """
    Base class for redefine errors.

    Provides structured error information with:
    - Error code for programmatic handling
    - Human-readable message
    - Recovery hint
    - Detailed context for debugging
    """

    code: str = "RDF_000"
    category: ErrorCategory = ErrorCategory.SESSION

    def __init__(
        self,
        message: str = "",
        *,
        recovery_hint: str = "",
        details: Optional[Dict[str, Any]] = None,
        **kwargs,
    ):
        self.message = message or self.__class__.__doc__ or "redefine error"
        self.recovery_hint = recovery_hint
        self.details = details or {}
        self.details.update(kwargs)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "recovery_hint": self.recovery_hint,
            "details": self.details,
        }

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.recovery_hint:
            parts.append(f"Hint: {self.recovery_hint}")
        return " ".join(parts)


class LifecycleError(RedefineError):
    """An after-each hook ran without a session from its before-each hook."""

    code = "RDF_001"
    category = ErrorCategory.LIFECYCLE

    def __init__(self, key: str, case_name: str = "", **kwargs):
        message = f"No override session stored under {key!r}"
        if case_name:
            message += f" for case {case_name!r}"

        super().__init__(
            message=message,
            recovery_hint="Register redefine_filter before the case starts, and run "
                          "before-each hooks through the same LifecycleHooks instance.",
            key=key,
            case_name=case_name,
            **kwargs,
        )


class SessionStateError(RedefineError):
    """An override session was used in a state that does not allow it."""

    code = "RDF_002"
    category = ErrorCategory.SESSION

    def __init__(self, session_id: str, state: str, action: str, **kwargs):
        super().__init__(
            message=f"Cannot {action} session {session_id}: it is {state}",
            recovery_hint="Create a new session with redefine() instead of reusing one.",
            session_id=session_id,
            state=state,
            **kwargs,
        )
