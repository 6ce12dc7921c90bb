"""Process-scoped state — the only mutable globals in dashlet.

Everything that must outlive a single call lives here, behind an explicit
owner object, so the helper modules themselves stay stateless.
"""

import itertools


class IdCounter:
    """Monotonic id source. Starts at 0 and pre-increments, so the first id is 1."""

    __slots__ = ("_count",)

    def __init__(self) -> None:
        # itertools.count is thread-safe (C-level GIL atomic)
        self._count = itertools.count(1)

    def next(self) -> int:
        return next(self._count)


# Created once at import; never reset or replaced.
ids = IdCounter()
