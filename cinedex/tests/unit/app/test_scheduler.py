from __future__ import annotations

from typing import Callable, Dict, List

import pytest

from cinedex.app.scheduler import UiScheduler


class WinStub:
    """Minimal Tk ``after`` family with manual firing."""

    def __init__(self) -> None:
        self.pending: Dict[str, tuple] = {}
        self.idle: List[Callable[[], None]] = []
        self.cancelled: List[str] = []
        self._next = 0

    def after(self, delay: int, callback: Callable[[], None]) -> str:
        self._next += 1
        token = f"after#{self._next}"
        self.pending[token] = (delay, callback)
        return token

    def after_cancel(self, token: str) -> None:
        self.cancelled.append(token)
        self.pending.pop(token, None)

    def after_idle(self, callback: Callable[[], None]) -> str:
        self.idle.append(callback)
        return "idle"

    def fire_all(self) -> None:
        pending, self.pending = self.pending, {}
        for _, callback in pending.values():
            callback()


def test_debounce_keeps_only_the_last_callback() -> None:
    win = WinStub()
    scheduler = UiScheduler(win.after, win.after_cancel, win.after_idle)
    calls: List[str] = []

    for text in ("a", "al", "ali"):
        scheduler.debounce("live-search", 300, lambda t=text: calls.append(t))

    assert len(win.pending) == 1
    assert win.cancelled == ["after#1", "after#2"]
    win.fire_all()
    assert calls == ["ali"]
    assert not scheduler.is_pending("live-search")


def test_schedule_clamps_delay_and_tracks_keys() -> None:
    win = WinStub()
    scheduler = UiScheduler(win.after, win.after_cancel)
    scheduler.schedule("a", 0, lambda: None)
    scheduler.schedule("b", 50, lambda: None)

    assert sorted(delay for delay, _ in win.pending.values()) == [1, 50]
    scheduler.cancel_all()
    assert win.pending == {}
    assert not scheduler.is_pending("a")


def test_run_later_prefers_idle_queue() -> None:
    win = WinStub()
    calls: List[int] = []
    UiScheduler(win.after, win.after_cancel, win.after_idle).run_later(lambda: calls.append(1))
    assert len(win.idle) == 1 and not win.pending

    UiScheduler(win.after, win.after_cancel).run_later(lambda: calls.append(2))
    assert [delay for delay, _ in win.pending.values()] == [1]


def test_cancel_tolerates_stale_tokens() -> None:
    def broken_cancel(token: str) -> None:
        raise RuntimeError("window destroyed")

    win = WinStub()
    scheduler = UiScheduler(win.after, broken_cancel)
    scheduler.schedule("k", 10, lambda: None)
    scheduler.cancel("k")
    scheduler.cancel("missing")
    assert not scheduler.is_pending("k")


def test_callback_errors_propagate() -> None:
    win = WinStub()
    scheduler = UiScheduler(win.after, win.after_cancel)

    def boom() -> None:
        raise ValueError("bad")

    scheduler.schedule("k", 10, boom)
    with pytest.raises(ValueError):
        win.fire_all()
