"""
redefine Core Module

Override Manager:
- MISSING sentinel for absent properties
- Attribute / item accessors
- OverrideSession and redefine()
- Scoped helpers redefined() and redefining()
"""

from redefine.core.sentinel import MISSING
from redefine.core.accessors import (
    AttributeAccessor,
    ItemAccessor,
    accessor_for,
)
from redefine.core.session import (
    SessionState,
    OverrideSession,
    redefine,
)
from redefine.core.scoped import (
    redefined,
    redefining,
)

__all__ = [
    "MISSING",
    "AttributeAccessor",
    "ItemAccessor",
    "accessor_for",
    "SessionState",
    "OverrideSession",
    "redefine",
    "redefined",
    "redefining",
]
