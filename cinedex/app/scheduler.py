"""UI-thread scheduling helper for deferred work and debounced input.

The app layer passes Tk ``after``, ``after_cancel`` and ``after_idle``
callables into this class so every pending timer is tracked by key and can
be cancelled when the window closes. Tests pass plain stubs instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

ScheduleFn = Callable[[int, Callable[[], None]], str]
CancelFn = Callable[[str], None]
IdleFn = Callable[[Callable[[], None]], str]


@dataclass
class TimerHandle:
    """Timer token associated with a single scheduling key.

    Attributes:
        key: Channel key (for example ``live-search``).
        token: Token returned by the UI scheduler implementation.
    """
    key: str
    token: str


class UiScheduler:
    """Run callbacks later on the UI thread, one pending timer per key."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn, idle: Optional[IdleFn] = None) -> None:
        """Store Tk-compatible scheduling functions.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
            idle: Function compatible with ``after_idle(callback)``; when
                omitted, :meth:`run_later` falls back to a 1 ms timer.
        """
        self._schedule = schedule
        self._cancel = cancel
        self._idle = idle
        self._handles: Dict[str, TimerHandle] = {}
        self._log = logging.getLogger(__name__)

    def run_later(self, callback: Callable[[], None]) -> str:
        """Queue ``callback`` to run once the event loop is idle."""
        if self._idle is not None:
            return self._idle(callback)
        return self._schedule(1, callback)

    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> None:
        """Schedule or reschedule ``callback`` for ``key``.

        Args:
            key: Timer channel; a pending timer on the same key is cancelled.
            delay_ms: Delay in milliseconds before callback execution.
            callback: Callable to execute on the UI thread.
        """
        delay = max(1, int(delay_ms))
        self.cancel(key)

        def fire() -> None:
            self._handles.pop(key, None)
            callback()

        token = self._schedule(delay, fire)
        self._handles[key] = TimerHandle(key=key, token=token)

    def debounce(self, key: str, delay_ms: int, callback: Callable[[], None]) -> None:
        """Run ``callback`` once input on ``key`` pauses for ``delay_ms``.

        Every call restarts the timer, so a burst of keystrokes results in a
        single callback after the last one.
        """
        self.schedule(key, delay_ms, callback)

    def cancel(self, key: str) -> None:
        handle = self._handles.pop(key, None)
        if not handle:
            return
        try:
            self._cancel(handle.token)
        except Exception as exc:
            # the timer may already have fired or the window is gone
            self._log.debug("Cancel of timer %s ignored: %s", key, exc)

    def cancel_all(self) -> None:
        for key in list(self._handles.keys()):
            self.cancel(key)

    def is_pending(self, key: str) -> bool:
        return key in self._handles


__all__ = ["TimerHandle", "UiScheduler"]
