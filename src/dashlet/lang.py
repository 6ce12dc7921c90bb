"""Deep equality and deep cloning over plain containers.

Both walk mappings and sequences recursively and treat every other value
as an atom. Neither detects cycles: a self-referencing structure recurses
until Python raises RecursionError.
"""

from __future__ import annotations

from typing import TypeVar

from dashlet._kinds import ValueKind, kind_of

T = TypeVar("T")


def is_equal(value: object, other: object) -> bool:
    """Deep structural equality.

    Mappings match when they hold the same key set (in any order) with
    equal values. Sequences match when they have the same length and equal
    elements in order, so a list equals a tuple with the same items. A
    mapping never equals a sequence. Anything else compares with ==.

    Usage:
        is_equal({"a": [1, {"b": 2}]}, {"a": [1, {"b": 2}]})  # True
        is_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})          # True
        is_equal([1, 2], [2, 1])                              # False
    """
    if value is other:
        return True
    kind = kind_of(value)
    other_kind = kind_of(other)
    if not kind.is_container or not other_kind.is_container:
        if kind.is_container or other_kind.is_container:
            return False
        return value == other
    if kind is not other_kind:
        return False

    if kind is ValueKind.MAPPING:
        if len(value) != len(other):
            return False
        for key in value:
            if key not in other or not is_equal(value[key], other[key]):
                return False
        return True

    if len(value) != len(other):
        return False
    return all(is_equal(a, b) for a, b in zip(value, other))


def clone_deep(value: T) -> T:
    """Recursively copy mappings and sequences.

    Mappings come back as dicts, tuples as tuples, and other sequences as
    lists. Atoms, including opaque objects, are returned as-is and stay
    shared with the original.
    """
    kind = kind_of(value)
    if kind is ValueKind.MAPPING:
        return {key: clone_deep(item) for key, item in value.items()}
    if kind is ValueKind.SEQUENCE:
        items = [clone_deep(item) for item in value]
        return tuple(items) if isinstance(value, tuple) else items
    return value
