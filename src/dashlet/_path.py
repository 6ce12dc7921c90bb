"""Path normalization for nested lookups."""

from __future__ import annotations

import re
from collections.abc import Sequence

_BRACKET = re.compile(r"\[(\w+)\]")


def to_path(path: str | Sequence) -> list[str]:
    """Split a path into its key segments.

    Bracket indices are rewritten as dotted keys first, so "a.b[0].c" and
    "a.b.0.c" both become ["a", "b", "0", "c"]. A non-string sequence is
    taken as already split.
    """
    if isinstance(path, str):
        return _BRACKET.sub(r".\1", path).split(".")
    return [str(key) for key in path]
