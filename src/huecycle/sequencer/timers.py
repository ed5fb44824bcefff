"""Repeating timers that drive automatic theme advances."""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Callable, Protocol

LOGGER = logging.getLogger(__name__)

Callback = Callable[[], None]


class RepeatingTimer(Protocol):
    """Minimal contract the sequencer needs from a timer."""

    @property
    def is_active(self) -> bool:
        ...

    def start(self, interval: float, callback: Callback) -> None:
        ...

    def stop(self) -> None:
        ...


def _check_interval(interval: float) -> float:
    value = float(interval)
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"Timer interval must be a finite positive number, received {interval!r}")
    return value


class AsyncioRepeatingTimer:
    """Fixed-rate timer on an asyncio (or qasync) event loop.

    Deadlines advance by exactly one interval per tick so the cadence does not
    drift with callback cost; ticks missed while the loop was blocked are
    skipped rather than replayed.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._interval = 0.0
        self._deadline = 0.0
        self._callback: Callback | None = None

    @property
    def is_active(self) -> bool:
        return self._handle is not None

    @property
    def interval(self) -> float:
        return self._interval

    def start(self, interval: float, callback: Callback) -> None:
        if self._handle is not None:
            raise RuntimeError("Timer is already running")
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise RuntimeError("AsyncioRepeatingTimer needs a running loop or an explicit loop") from exc
            self._loop = loop
        self._interval = _check_interval(interval)
        self._callback = callback
        self._deadline = loop.time() + self._interval
        self._handle = loop.call_at(self._deadline, self._fire)

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._callback = None

    def _fire(self) -> None:
        loop = self._loop
        callback = self._callback
        if loop is None or callback is None:
            return
        self._deadline += self._interval
        now = loop.time()
        if self._deadline <= now:
            skipped = int((now - self._deadline) // self._interval) + 1
            LOGGER.debug("Timer fell behind; skipping %d tick(s)", skipped)
            self._deadline += skipped * self._interval
        # reschedule first so the callback may stop the timer
        self._handle = loop.call_at(self._deadline, self._fire)
        callback()


class QtRepeatingTimer:
    """Timer backed by ``QTimer`` for hosts running a plain Qt event loop."""

    def __init__(self, parent: Any | None = None) -> None:
        try:  # Local import to avoid mandatory PySide6 dependency at import time.
            from PySide6.QtCore import Qt, QTimer
        except ImportError as exc:  # pragma: no cover - depends on desktop stack
            raise RuntimeError("PySide6 must be installed to use QtRepeatingTimer.") from exc

        self._timer = QTimer(parent)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._callback: Callback | None = None

    @property
    def is_active(self) -> bool:
        return bool(self._timer.isActive())

    def start(self, interval: float, callback: Callback) -> None:
        if self._timer.isActive():
            raise RuntimeError("Timer is already running")
        self._timer.setInterval(int(round(_check_interval(interval) * 1000)))
        self._callback = callback
        self._timer.timeout.connect(self._on_timeout)
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        if self._callback is not None:
            self._timer.timeout.disconnect(self._on_timeout)
            self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()


__all__ = ["AsyncioRepeatingTimer", "Callback", "QtRepeatingTimer", "RepeatingTimer"]
