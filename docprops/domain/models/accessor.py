"""
Slot accessor domain model.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class MethodKind(Enum):
    """Whether a method specialized on a slot reads it or writes it."""

    READER = "reader"
    WRITER = "writer"


@dataclass(frozen=True)
class SetterName:
    """Compound name of the method that writes ``target``."""

    target: str

    def __str__(self) -> str:
        return f"setter-of({self.target})"


MethodName = Union[str, SetterName]


@dataclass(frozen=True)
class MethodDescriptor:
    """A method specialized on one slot of one class."""

    name: MethodName
    kind: MethodKind
    owner: str
    slot: str


class AccessorRole(Enum):
    """How a slot is exposed to users of its class."""

    READER = "reader"
    WRITER = "writer"
    ACCESSOR = "accessor"


@dataclass(frozen=True)
class SlotAccessor:
    """One (role, name) entry of a slot's accessor relationship."""

    role: AccessorRole
    name: MethodName


SlotRelationship = Tuple[SlotAccessor, ...]


def setter_target_of(name: Optional[MethodName]) -> Optional[str]:
    """Return X when ``name`` is a setter of X, else None."""
    if isinstance(name, SetterName):
        return name.target
    return None
