"""Tests for the timed theme rotation."""

from __future__ import annotations

import dataclasses
import logging
import math

import pytest

from huecycle.events import Event, EventBus, RotationFailed, SequencerStarted, SequencerStopped, ThemeApplied
from huecycle.sequencer import SequencerState, ThemeSequencer, TransitionTiming
from huecycle.styling import InMemorySurface, StyleTarget, registry_keys
from huecycle.theme import Theme, builtin_catalog
from tests.helpers import ManualTimer, make_theme


def _recording_bus() -> tuple[EventBus[Event], list[Event]]:
    bus: EventBus[Event] = EventBus()
    received: list[Event] = []
    for event_type in (SequencerStarted, ThemeApplied, RotationFailed, SequencerStopped):
        bus.subscribe(event_type, received.append)
    return bus, received


class TestTransitionTiming:
    def test_defaults_match_three_second_cadence(self) -> None:
        timing = TransitionTiming()
        assert (timing.period, timing.transition, timing.hold) == (3.0, 2.0, 1.0)

    @pytest.mark.parametrize(
        ("period", "transition"),
        [
            (0.0, 0.0),
            (-1.0, 0.0),
            (3.0, -0.5),
            (2.0, 2.5),
            (math.nan, 0.0),
            (math.inf, 2.0),
            (3.0, math.nan),
            (math.inf, math.inf),
        ],
    )
    def test_rejects_invalid_cadence(self, period: float, transition: float) -> None:
        with pytest.raises(ValueError):
            TransitionTiming(period=period, transition=transition)


class TestStart:
    def test_start_applies_first_theme_and_arms_timer(
        self, rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
    ) -> None:
        sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer)
        sequencer.start()

        assert sequencer.state is SequencerState.RUNNING
        assert sequencer.cursor == 0
        assert surface.theme is rainbow[0]
        assert surface.passes == 1
        assert manual_timer.interval == 3.0
        assert manual_timer.is_active

    def test_cycle_is_hue_ordered_once_on_construction(
        self, rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
    ) -> None:
        sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer)
        assert [theme.name for theme in sequencer.cycle] == ["red", "orange", "yellow", "green", "blue"]
        assert sequencer.current is sequencer.cycle[0]

    def test_start_twice_is_rejected(
        self, rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
    ) -> None:
        sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer)
        sequencer.start()
        with pytest.raises(RuntimeError):
            sequencer.start()
        assert manual_timer.starts == 1

    def test_empty_catalog_does_nothing(
        self, surface: InMemorySurface, manual_timer: ManualTimer, caplog: pytest.LogCaptureFixture
    ) -> None:
        sequencer = ThemeSequencer([], surface, timer=manual_timer)
        with caplog.at_level(logging.WARNING):
            sequencer.start()

        assert sequencer.state is SequencerState.IDLE
        assert sequencer.current is None
        assert surface.passes == 0
        assert manual_timer.starts == 0
        assert "empty" in caplog.text
        with pytest.raises(RuntimeError):
            sequencer.advance()

    def test_custom_timing_sets_timer_interval(
        self, rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
    ) -> None:
        timing = TransitionTiming(period=5.0, transition=1.5)
        sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer, timing=timing)
        sequencer.start()
        assert manual_timer.interval == 5.0
        assert sequencer.timing.hold == pytest.approx(3.5)

    def test_handler_stopping_during_first_apply_keeps_timer_idle(
        self, rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
    ) -> None:
        bus: EventBus[Event] = EventBus()
        sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer, event_bus=bus)
        bus.subscribe(ThemeApplied, lambda event: sequencer.stop(reason="immediate"))

        sequencer.start()

        assert sequencer.state is SequencerState.STOPPED
        assert manual_timer.starts == 0


class TestAdvance:
    def test_ticks_walk_the_cycle_and_wrap(
        self, rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
    ) -> None:
        sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer)
        sequencer.start()
        seen = [surface.theme]
        for _ in range(len(rainbow)):
            manual_timer.fire()
            seen.append(surface.theme)

        assert seen[:-1] == list(sequencer.cycle)
        assert seen[-1] is sequencer.cycle[0]
        assert sequencer.cursor == 0

    def test_single_theme_reapplies_itself(self, surface: InMemorySurface, manual_timer: ManualTimer) -> None:
        only = make_theme("solo", "#8B5CF6")
        sequencer = ThemeSequencer([only], surface, timer=manual_timer)
        sequencer.start()
        manual_timer.fire(3)

        assert sequencer.cursor == 0
        assert surface.theme is only
        assert surface.passes == 4

    def test_every_target_is_written_once_per_apply(
        self, rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
    ) -> None:
        sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer)
        sequencer.start()
        manual_timer.fire(2)

        keys = [update.key for update in surface.last_pass]
        assert keys == registry_keys()
        assert {update.value for update in surface.last_pass if update.target is StyleTarget.SCROLLBAR} == {
            sequencer.current.primary  # type: ignore[union-attr]
        }

    def test_no_stale_values_survive_a_switch(self, surface: InMemorySurface, manual_timer: ManualTimer) -> None:
        red = make_theme("red", "#FF0000")
        blue = make_theme("blue", "#0000FF")
        sequencer = ThemeSequencer([red, blue], surface, timer=manual_timer)
        sequencer.start()
        manual_timer.fire()

        assert surface.theme is blue
        assert not any("#FF0000" in value or "255, 0, 0" in value for value in surface.values.values())

    def test_manual_advance_returns_applied_theme(
        self, rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
    ) -> None:
        sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer)
        theme = sequencer.advance()
        assert theme is sequencer.cycle[1]
        assert surface.theme is theme

    def test_refined_cycle_keeps_seed(self, surface: InMemorySurface, manual_timer: ManualTimer) -> None:
        sequencer = ThemeSequencer(builtin_catalog, surface, timer=manual_timer, refine=True)
        assert sequencer.cycle[0] is builtin_catalog[0]
        assert len(sequencer.cycle) == len(builtin_catalog)


class TestFailureAndStop:
    def test_failed_tick_halts_rotation(
        self, surface: InMemorySurface, manual_timer: ManualTimer, caplog: pytest.LogCaptureFixture
    ) -> None:
        good = make_theme("good", "#FF0000")
        broken = dataclasses.replace(make_theme("broken", "#FF1000"), glow_color_2="")
        bus, received = _recording_bus()
        sequencer = ThemeSequencer([good, broken], surface, timer=manual_timer, event_bus=bus)
        sequencer.start()

        with caplog.at_level(logging.ERROR):
            manual_timer.fire(3)

        assert sequencer.state is SequencerState.STOPPED
        assert not manual_timer.is_active
        assert surface.theme is good
        assert surface.passes == 1
        failures = [event for event in received if isinstance(event, RotationFailed)]
        assert len(failures) == 1
        assert "glow_color_2" in failures[0].error
        assert isinstance(received[-1], SequencerStopped)
        assert received[-1].reason == "failed"
        assert "halting" in caplog.text

    def test_stop_is_idempotent(
        self, rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
    ) -> None:
        bus, received = _recording_bus()
        sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer, event_bus=bus)
        sequencer.start()
        sequencer.stop()
        sequencer.stop()

        assert manual_timer.stops == 1
        assert sum(isinstance(event, SequencerStopped) for event in received) == 1
        manual_timer.fire()
        assert surface.passes == 1

    def test_stopped_sequencer_cannot_restart(
        self, rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
    ) -> None:
        sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer)
        sequencer.start()
        sequencer.stop()
        with pytest.raises(RuntimeError):
            sequencer.start()


def test_events_follow_the_rotation(
    rainbow: list[Theme], surface: InMemorySurface, manual_timer: ManualTimer
) -> None:
    bus, received = _recording_bus()
    sequencer = ThemeSequencer(rainbow, surface, timer=manual_timer, event_bus=bus)
    sequencer.start()
    manual_timer.fire(2)
    sequencer.stop(reason="done")

    applied = [event for event in received if isinstance(event, ThemeApplied)]
    assert [event.index for event in applied] == [0, 1, 2]
    assert [event.name for event in applied] == [theme.name for theme in sequencer.cycle[:3]]
    assert all(event.cycle_length == 5 for event in applied)

    started = [event for event in received if isinstance(event, SequencerStarted)]
    assert started == [SequencerStarted(cycle=tuple(t.name for t in sequencer.cycle), period=3.0)]
    assert received[-1] == SequencerStopped(reason="done")
