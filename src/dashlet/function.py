"""debounce() — coalesce bursts of calls into one invocation.

Each call cancels the pending timer and schedules a new one, so func only
runs once the calls stop for `wait` seconds (trailing edge). With
leading=True, func runs immediately on the first call of a burst instead,
and the timer only marks the end of the burst.

Timers come from a scheduler: any callable `scheduler(seconds, callback)`
returning a handle with `.cancel()`. The default starts a daemon
threading.Timer; set_scheduler() swaps the process-wide default, e.g. for
an event loop or a UI toolkit's timer facility.
"""

from __future__ import annotations

import logging
import threading
import types
from typing import Any, Callable

logger = logging.getLogger("dashlet.function")

Scheduler = Callable[[float, Callable[[], None]], Any]


def _thread_timer(seconds: float, callback: Callable[[], None]) -> threading.Timer:
    t = threading.Timer(seconds, callback)
    t.daemon = True
    t.start()
    return t


_scheduler: Scheduler = _thread_timer


def set_scheduler(scheduler: Scheduler | None) -> None:
    """Set the default timer facility for debounce(). None restores threading.Timer.

    Usage:
        loop = asyncio.get_running_loop()
        dashlet.set_scheduler(loop.call_later)

    Wrappers created before the call keep the scheduler they were built with.
    """
    global _scheduler
    _scheduler = scheduler if scheduler is not None else _thread_timer


class Debounced:
    """Callable wrapper returned by debounce(). Holds at most one pending timer."""

    __slots__ = ("_func", "_wait", "_leading", "_scheduler", "_lock", "_pending", "__wrapped__")

    def __init__(
        self,
        func: Callable[..., Any],
        wait: float,
        *,
        leading: bool = False,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._func = func
        self._wait = wait
        self._leading = leading
        self._scheduler = scheduler if scheduler is not None else _scheduler
        self._lock = threading.Lock()
        # (token, handle) of the scheduled callback, or None
        self._pending: tuple[object, Any] | None = None
        self.__wrapped__ = func

    @property
    def pending(self) -> bool:
        """Is a timer currently scheduled?"""
        return self._pending is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        token = object()
        with self._lock:
            call_now = self._leading and self._pending is None
            if self._pending is not None:
                self._pending[1].cancel()
                self._pending = None
            handle = self._scheduler(self._wait, lambda: self._fire(token, args, kwargs))
            self._pending = (token, handle)

        if call_now:
            logger.debug("Leading call to %s", _name(self._func))
            self._func(*args, **kwargs)

    def _fire(self, token: object, args: tuple, kwargs: dict) -> None:
        """Timer callback. Ignored if a later call superseded this timer."""
        with self._lock:
            if self._pending is None or self._pending[0] is not token:
                return
            self._pending = None
        if self._leading:
            return

        logger.debug("Trailing call to %s", _name(self._func))
        try:
            self._func(*args, **kwargs)
        except Exception:
            # Runs on the scheduler's thread — nobody is there to catch it.
            logger.exception("Debounced call to %s failed", _name(self._func))

    def __get__(self, instance, owner=None):
        """Bind like a function, passing the instance as the first argument.

        There is one timer per wrapper, not per instance: calls through
        different instances of the class coalesce into a single burst, and
        only the last caller's invocation runs. Attribute lookups such as
        .pending fall through the bound method to this wrapper.
        """
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __repr__(self) -> str:
        state = "pending" if self._pending is not None else "idle"
        return f"Debounced({_name(self._func)}, wait={self._wait!r}, {state})"


def _name(func: Callable) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def debounce(
    func: Callable[..., Any],
    wait: float,
    *,
    leading: bool = False,
    scheduler: Scheduler | None = None,
) -> Debounced:
    """Wrap func so bursts of calls collapse into a single invocation.

    Trailing (default): func runs `wait` seconds after the last call, with
    that call's arguments.
    Leading: func runs synchronously on the first call of a burst; the rest
    of the burst, and the timer firing, do not call it again.

    Usage:
        saves = []
        save = debounce(lambda doc: saves.append(doc), 0.5)
        save("draft 1")
        save("draft 2")
        # ~0.5s later: saves == ["draft 2"]
    """
    return Debounced(func, wait, leading=leading, scheduler=scheduler)
