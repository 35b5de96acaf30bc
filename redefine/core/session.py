"""
core/session.py - Override sessions

Captures the current values of named properties on a target, applies
replacements, and hands back a session whose call restores the originals.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional
import logging
import uuid

from redefine.config import get_config
from redefine.errors import SessionStateError
from redefine.core.accessors import accessor_for
from redefine.core.sentinel import MISSING

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Override session lifecycle states."""
    PENDING = "pending"
    ACTIVE = "active"
    RESTORED = "restored"


@dataclass
class OverrideSession:
    """
    One capture/apply/restore cycle over a single target.

    The session is the restore action: calling it writes every captured
    original back onto the target, in the order the overrides were given.
    """

    target: Any
    overrides: Dict[str, Any] = field(default_factory=dict)
    by: Optional[str] = None

    session_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    state: SessionState = SessionState.PENDING

    # name -> value seen before apply, MISSING if the target lacked it
    originals: Dict[str, Any] = field(default_factory=dict)

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    restored_at: Optional[datetime] = None

    def __post_init__(self):
        self._accessor = accessor_for(self.target, self.by)

    @property
    def names(self) -> List[str]:
        return list(self.overrides)

    @property
    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def apply(self) -> "OverrideSession":
        """
        Capture originals and write the overrides.

        If a write fails, names already written are put back before the
        error propagates.

        Raises:
            SessionStateError: If the session was already applied
        """
        if self.state != SessionState.PENDING:
            raise SessionStateError(self.session_id, self.state.value, "apply")

        accessor = self._accessor
        written: List[str] = []
        try:
            for name, value in self.overrides.items():
                self.originals[name] = accessor.read(self.target, name)
                accessor.write(self.target, name, value)
                written.append(name)
        except BaseException:
            self._revert(written)
            self.originals.clear()
            raise

        self.state = SessionState.ACTIVE
        self._log("applied", self.overrides)
        return self

    def restore(self) -> None:
        """Write the captured originals back. A second call does nothing."""
        if self.state == SessionState.RESTORED:
            logger.debug(f"Session {self.session_id} already restored")
            return
        if self.state == SessionState.PENDING:
            logger.debug(f"Session {self.session_id} was never applied")
            return

        self._revert(self.names)
        self.state = SessionState.RESTORED
        self.restored_at = datetime.now(timezone.utc)
        self._log("restored", self.originals)

    __call__ = restore

    def __enter__(self) -> "OverrideSession":
        if self.state == SessionState.PENDING:
            self.apply()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.restore()
        return None

    def _revert(self, names: List[str]) -> None:
        accessor = self._accessor
        for name in names:
            original = self.originals[name]
            if original is MISSING:
                accessor.remove(self.target, name)
            else:
                accessor.write(self.target, name, original)

    def _log(self, action: str, values: Mapping[str, Any]) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        if get_config().trace_values:
            detail = ", ".join(f"{k}={v!r}" for k, v in values.items())
        else:
            detail = ", ".join(values)
        logger.debug(
            f"Session {self.session_id} {action} on "
            f"{type(self.target).__name__}: {detail}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "state": self.state.value,
            "target_type": type(self.target).__name__,
            "accessor": self._accessor.kind,
            "names": self.names,
            "absent": [n for n, v in self.originals.items() if v is MISSING],
            "created_at": self.created_at.isoformat(),
            "restored_at": self.restored_at.isoformat() if self.restored_at else None,
        }


def redefine(
    target: Any,
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    by: Optional[str] = None,
    **kw_overrides: Any,
) -> OverrideSession:
    """
    Redefine properties on `target` and return the restore action.

    Args:
        target: Object (or mutable mapping) to be redefined
        overrides: Property name -> replacement value
        by: Force "attr" or "item" access instead of inferring it
        **kw_overrides: Extra overrides, applied after `overrides`

    Returns:
        Active OverrideSession; call it to roll back every override

    Example:
        restore = redefine(store, {"request": spy})
        ...
        restore()
    """
    merged: Dict[str, Any] = dict(overrides or {})
    merged.update(kw_overrides)
    return OverrideSession(target=target, overrides=merged, by=by).apply()
