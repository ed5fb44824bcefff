"""Tests for the asyncio and Qt repeating timers."""

from __future__ import annotations

import asyncio
import math
import time

import pytest

from huecycle.sequencer.timers import AsyncioRepeatingTimer, QtRepeatingTimer


@pytest.mark.asyncio
async def test_asyncio_timer_fires_repeatedly_until_stopped() -> None:
    timer = AsyncioRepeatingTimer()
    ticks: list[float] = []
    done = asyncio.Event()
    loop = asyncio.get_running_loop()

    def on_tick() -> None:
        ticks.append(loop.time())
        if len(ticks) == 3:
            timer.stop()
            done.set()

    timer.start(0.01, on_tick)
    assert timer.is_active
    assert timer.interval == pytest.approx(0.01)

    await asyncio.wait_for(done.wait(), timeout=2.0)
    await asyncio.sleep(0.05)

    assert len(ticks) == 3
    assert not timer.is_active
    assert ticks == sorted(ticks)


@pytest.mark.asyncio
async def test_asyncio_timer_rejects_double_start_and_bad_interval() -> None:
    timer = AsyncioRepeatingTimer()
    with pytest.raises(ValueError):
        timer.start(0, lambda: None)
    assert not timer.is_active

    timer.start(1.0, lambda: None)
    with pytest.raises(RuntimeError):
        timer.start(1.0, lambda: None)
    timer.stop()
    timer.stop()
    assert not timer.is_active


@pytest.mark.asyncio
async def test_asyncio_timer_skips_missed_ticks() -> None:
    timer = AsyncioRepeatingTimer()
    ticks = 0

    def on_tick() -> None:
        nonlocal ticks
        ticks += 1

    timer.start(0.01, on_tick)
    # block the loop for several intervals
    time.sleep(0.08)
    await asyncio.sleep(0.015)
    timer.stop()

    assert 1 <= ticks <= 3


def test_asyncio_timer_requires_a_loop() -> None:
    with pytest.raises(RuntimeError):
        AsyncioRepeatingTimer().start(1.0, lambda: None)


def test_asyncio_timer_with_explicit_loop() -> None:
    loop = asyncio.new_event_loop()
    try:
        timer = AsyncioRepeatingTimer(loop)
        calls: list[int] = []

        def on_tick() -> None:
            calls.append(1)
            timer.stop()
            loop.stop()

        timer.start(0.01, on_tick)
        loop.run_forever()
        assert calls == [1]
    finally:
        loop.close()


def test_qt_timer_drives_callback(qtbot) -> None:  # type: ignore[no-untyped-def]
    timer = QtRepeatingTimer()
    calls: list[int] = []

    timer.start(0.01, lambda: calls.append(1))
    assert timer.is_active
    qtbot.waitUntil(lambda: len(calls) >= 2, timeout=2000)

    timer.stop()
    assert not timer.is_active
    count = len(calls)
    qtbot.wait(50)
    assert len(calls) == count


def test_qt_timer_rejects_double_start(qtbot) -> None:  # type: ignore[no-untyped-def]
    timer = QtRepeatingTimer()
    timer.start(1.0, lambda: None)
    with pytest.raises(RuntimeError):
        timer.start(1.0, lambda: None)
    timer.stop()
    with pytest.raises(ValueError):
        timer.start(-1.0, lambda: None)


@pytest.mark.parametrize("interval", [math.nan, math.inf, -math.inf])
def test_timers_reject_non_finite_intervals(qtbot, interval: float) -> None:  # type: ignore[no-untyped-def]
    loop = asyncio.new_event_loop()
    try:
        asyncio_timer = AsyncioRepeatingTimer(loop)
        with pytest.raises(ValueError):
            asyncio_timer.start(interval, lambda: None)
        assert not asyncio_timer.is_active
    finally:
        loop.close()

    qt_timer = QtRepeatingTimer()
    with pytest.raises(ValueError):
        qt_timer.start(interval, lambda: None)
    assert not qt_timer.is_active


@pytest.mark.asyncio
async def test_asyncio_timer_with_nan_interval_never_fires() -> None:
    timer = AsyncioRepeatingTimer()
    calls: list[int] = []

    with pytest.raises(ValueError):
        timer.start(math.nan, lambda: calls.append(1))
    await asyncio.sleep(0.05)

    assert calls == []
