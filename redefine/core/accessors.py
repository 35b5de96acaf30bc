"""
core/accessors.py - Property access strategies

Attribute targets (objects, modules, classes) are addressed with
getattr/setattr/delattr. Mutable mappings (dict, os.environ, ...) are
addressed by item.
"""

from __future__ import annotations
from collections.abc import MutableMapping
from typing import Any, Optional
import inspect

from redefine.core.sentinel import MISSING


def _is_data_descriptor(obj: Any) -> bool:
    return hasattr(type(obj), "__set__") or hasattr(type(obj), "__delete__")


class AttributeAccessor:
    """
    Reads and writes attributes.

    Reads take the raw entry from the target's own __dict__, so a
    staticmethod or classmethod on a class is restored as the same
    object. A name the target only inherits reads as MISSING and is
    deleted on restore, letting the inherited value show through again.
    Names routed through a data descriptor on the type (a property with
    a setter, for example) are read and restored through the descriptor.
    """

    kind = "attr"

    def read(self, target: Any, name: str) -> Any:
        try:
            own = vars(target)
        except TypeError:
            # __slots__ and builtins have no __dict__
            return getattr(target, name, MISSING)

        if name in own:
            return own[name]

        static = inspect.getattr_static(type(target), name, MISSING)
        if static is not MISSING and _is_data_descriptor(static):
            return getattr(target, name, MISSING)
        return MISSING

    def write(self, target: Any, name: str, value: Any) -> None:
        setattr(target, name, value)

    def remove(self, target: Any, name: str) -> None:
        try:
            own = vars(target)
        except TypeError:
            if hasattr(target, name):
                delattr(target, name)
            return

        if name in own:
            delattr(target, name)


class ItemAccessor:
    """Reads and writes mapping items."""

    kind = "item"

    def read(self, target: Any, name: str) -> Any:
        if name in target:
            return target[name]
        return MISSING

    def write(self, target: Any, name: str, value: Any) -> None:
        target[name] = value

    def remove(self, target: Any, name: str) -> None:
        if name in target:
            del target[name]


_ACCESSORS = {
    AttributeAccessor.kind: AttributeAccessor(),
    ItemAccessor.kind: ItemAccessor(),
}


def accessor_for(target: Any, by: Optional[str] = None):
    """
    Pick the accessor for a target.

    Args:
        target: Object being redefined
        by: "attr" or "item" to force a strategy; None to infer it

    Returns:
        Accessor instance

    Raises:
        ValueError: If `by` names an unknown strategy
    """
    if by is not None:
        try:
            return _ACCESSORS[by]
        except KeyError:
            raise ValueError(
                f"Unknown accessor {by!r}; expected one of {sorted(_ACCESSORS)}"
            ) from None

    if isinstance(target, MutableMapping):
        return _ACCESSORS[ItemAccessor.kind]
    return _ACCESSORS[AttributeAccessor.kind]
