"""Textual integration for dashlet. Opt-in — requires textual.

debounce() here schedules on the app's own timers instead of a thread, so
the debounced function runs on the app's event loop where widgets can be
touched safely.

Calls from background threads are marshaled to the loop before any
debounce state is touched: timers are only created, stopped and fired on
the loop thread, and no thread ever waits on the loop while holding the
wrapper's lock.
"""

import functools
import threading

from textual.css.query import NoMatches

from dashlet.function import Debounced


class _TimerHandle:
    """Adapts textual.timer.Timer (stop()) to the scheduler handle protocol (cancel())."""

    __slots__ = ("_timer",)

    def __init__(self, timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()


def is_safe(app) -> bool:
    """Is the app running, so its widget tree can be queried?"""
    return app.is_running


def scheduler(app):
    """Scheduler backed by app.set_timer. Must be called on the app's loop thread."""

    def _schedule(seconds, callback):
        return _TimerHandle(app.set_timer(seconds, callback))

    return _schedule


class AppDebounced(Debounced):
    """Debounced wrapper that runs every call on the app's loop thread."""

    __slots__ = ("_app", "_main")

    def __init__(self, app, func, wait, *, leading=False):
        super().__init__(func, wait, leading=leading, scheduler=scheduler(app))
        self._app = app
        self._main = threading.get_ident()

    def __call__(self, *args, **kwargs) -> None:
        if threading.get_ident() != self._main:
            self._app.call_from_thread(functools.partial(super().__call__, *args, **kwargs))
        else:
            super().__call__(*args, **kwargs)


def debounce(app, func, wait, *, leading=False) -> AppDebounced:
    """debounce() that safely bridges to Textual widgets.

    Call from the app's loop thread (e.g. in on_mount); the wrapper itself
    may then be called from any thread. Skips func while the app is not
    running and swallows NoMatches from widget queries that race with
    screen changes.
    """

    def _guarded(*args, **kwargs):
        if not is_safe(app):
            return
        try:
            func(*args, **kwargs)
        except NoMatches:
            pass

    return AppDebounced(app, _guarded, wait, leading=leading)
