"""Deduplication and symmetric difference over sequences.

Distinctness follows Python set membership: hashable values compare with
hash/==, unhashable ones (dicts, lists) by identity.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any, Callable, TypeVar

from dashlet._kinds import membership_key

T = TypeVar("T")


def uniq(seq: Iterable[T]) -> list[T]:
    """First occurrence of each distinct value, in original order.

    Usage:
        uniq([1, 2, 1, 3])  # [1, 2, 3]
    """
    return uniq_by(seq, lambda item: item)


def uniq_by(seq: Iterable[T], iteratee: Callable[[T], Any]) -> list[T]:
    """Like uniq, but distinctness is decided by iteratee(item)."""
    seen: set = set()
    # Derived keys are kept alive so identity keys stay unique.
    derived: list = []
    result: list[T] = []
    for item in seq:
        computed = iteratee(item)
        key = membership_key(computed)
        if key in seen:
            continue
        seen.add(key)
        derived.append(computed)
        result.append(item)
    return result


def xor(*seqs: Iterable[T]) -> list[T]:
    """Elements that occur exactly once across all inputs, in flattened order.

    Duplicates within a single input count too, so xor([1, 1], [1]) is [].

    Usage:
        xor([2, 1], [2, 3])  # [1, 3]
    """
    combined = [item for seq in seqs for item in seq]
    counts = Counter(membership_key(item) for item in combined)
    return [item for item in combined if counts[membership_key(item)] == 1]
