"""Value kinds — the shape tag every structural helper dispatches on.

Host values are classified once at the boundary. Strings are sequences in
Python but are treated as atoms here, the same way a number is.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence


class ValueKind(enum.Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OPAQUE = "opaque"

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.SEQUENCE, ValueKind.MAPPING)


def kind_of(value: object) -> ValueKind:
    """Classify value. bool is checked before int (bool subclasses int)."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float, complex)):
        return ValueKind.NUMBER
    if isinstance(value, (str, bytes, bytearray)):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    return ValueKind.OPAQUE


class _Identity:
    """Membership key for unhashable values: equal only to itself."""

    __slots__ = ("_id",)

    def __init__(self, value: object) -> None:
        self._id = id(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Identity) and other._id == self._id

    def __hash__(self) -> int:
        return hash(self._id)


def membership_key(value: object) -> object:
    """Key under set semantics: the value if hashable, else its identity.

    Identity keys are only meaningful while value is alive, so callers must
    hold a reference to it for as long as they hold the key.
    """
    try:
        hash(value)
    except TypeError:
        return _Identity(value)
    return value
