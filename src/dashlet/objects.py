"""Object shaping — pick, pick_by, omit, has, last.

All helpers return new containers and never mutate their input. Anything
that is not a mapping is treated as having no keys.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Callable, TypeVar

from dashlet._kinds import ValueKind, kind_of
from dashlet._path import to_path

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

_MISSING = object()


def _keys(paths: Iterable[K] | str) -> Iterable[K]:
    return [paths] if isinstance(paths, str) else paths


def pick(obj: Mapping[K, V], paths: Iterable[K] | str) -> dict[K, V]:
    """New dict holding only the listed keys that exist on obj.

    Usage:
        pick({"a": 1, "b": "2", "c": 3}, ["a", "c"])  # {"a": 1, "c": 3}
    """
    if not isinstance(obj, Mapping):
        return {}
    return {key: obj[key] for key in _keys(paths) if key in obj}


def pick_by(obj: Mapping[K, V], predicate: Callable[[V, K], Any]) -> dict[K, V]:
    """New dict of the entries for which predicate(value, key) is truthy."""
    if not isinstance(obj, Mapping):
        return {}
    return {key: value for key, value in obj.items() if predicate(value, key)}


def omit(obj: Mapping[K, V], paths: Iterable[K] | str) -> dict[K, V]:
    """Shallow copy of obj without the listed keys.

    Nested values are shared with obj, not cloned.
    """
    if not isinstance(obj, Mapping):
        return {}
    result = dict(obj)
    for key in _keys(paths):
        result.pop(key, None)
    return result


def _child(current: object, key: str) -> object:
    """current[key] if key is present, else _MISSING."""
    kind = kind_of(current)
    if kind is ValueKind.MAPPING:
        if key in current:
            return current[key]
        if key.isdecimal() and int(key) in current:
            return current[int(key)]
    elif kind is ValueKind.SEQUENCE:
        if key.isdecimal() and int(key) < len(current):
            return current[int(key)]
    return _MISSING


def has(obj: object, path: str | Sequence) -> bool:
    """Does every segment of path resolve, starting from obj?

    Presence is a membership test, so a key holding None counts. Sequences
    accept in-range non-negative indices only.

    Usage:
        has({"a": [{"b": {"c": 3}}]}, "a[0].b.c")  # True
        has({"a": None}, "a")                      # True
        has({"a": None}, "a.b")                    # False
    """
    if not kind_of(obj).is_container:
        return False
    current = obj
    for key in to_path(path):
        current = _child(current, key)
        if current is _MISSING:
            return False
    return True


def last(seq: Sequence[T]) -> T | None:
    """Final element of seq, or None when it is empty."""
    return seq[-1] if seq else None
