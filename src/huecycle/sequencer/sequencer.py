"""Timed rotation through the ordered theme cycle."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from ..events import Event, EventBus, RotationFailed, SequencerStarted, SequencerStopped, ThemeApplied
from ..styling.surfaces import StyleSurface
from ..styling.targets import compose_styles
from ..theme.models import Theme
from ..theme.ordering import refine_cycle, sort_by_color_similarity
from .timers import AsyncioRepeatingTimer, RepeatingTimer

LOGGER = logging.getLogger(__name__)


class SequencerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True, slots=True)
class TransitionTiming:
    """Cadence of the rotation: each period is a transition followed by a static hold."""

    period: float = 3.0
    transition: float = 2.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.period) or self.period <= 0:
            raise ValueError(f"Rotation period must be a finite positive number, received {self.period!r}")
        if not math.isfinite(self.transition) or self.transition < 0:
            raise ValueError(f"Transition duration must be finite and non-negative, received {self.transition!r}")
        if self.transition > self.period:
            raise ValueError(
                f"Transition ({self.transition}s) cannot exceed the rotation period ({self.period}s)"
            )

    @property
    def hold(self) -> float:
        return self.period - self.transition


class ThemeSequencer:
    """Owns the theme cycle, the rotation cursor and the timer advancing it.

    The cycle is computed once on construction. :meth:`start` applies the first
    theme and arms the timer; every tick then calls :meth:`advance`. A tick that
    raises halts the rotation instead of propagating into the host's loop.
    """

    def __init__(
        self,
        catalog: Iterable[Theme] | None,
        surface: StyleSurface,
        *,
        timer: RepeatingTimer | None = None,
        timing: TransitionTiming | None = None,
        event_bus: EventBus | None = None,
        refine: bool = False,
    ) -> None:
        ordered = sort_by_color_similarity(catalog)
        if refine:
            ordered = refine_cycle(ordered)
        self._cycle: Tuple[Theme, ...] = tuple(ordered)
        self._surface = surface
        self._timer: RepeatingTimer = timer if timer is not None else AsyncioRepeatingTimer()
        self._timing = timing or TransitionTiming()
        self._events = event_bus
        self._cursor = 0
        self._state = SequencerState.IDLE

    @property
    def cycle(self) -> Tuple[Theme, ...]:
        return self._cycle

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> Theme | None:
        if not self._cycle:
            return None
        return self._cycle[self._cursor]

    @property
    def state(self) -> SequencerState:
        return self._state

    @property
    def timing(self) -> TransitionTiming:
        return self._timing

    def start(self) -> None:
        """Apply the first theme of the cycle and begin automatic rotation."""

        if self._state is not SequencerState.IDLE:
            raise RuntimeError(f"Sequencer cannot start from state '{self._state.value}'")
        if not self._cycle:
            LOGGER.warning("Theme catalog is empty; rotation not started")
            return

        self._cursor = 0
        self.apply(self._cycle[0])
        if self._state is not SequencerState.IDLE:
            # a ThemeApplied handler stopped the rotation already
            return
        self._timer.start(self._timing.period, self._on_tick)
        self._state = SequencerState.RUNNING
        LOGGER.info(
            "Theme rotation started: %d themes, %.3gs period (%.3gs transition, %.3gs hold)",
            len(self._cycle),
            self._timing.period,
            self._timing.transition,
            self._timing.hold,
        )
        self._publish(SequencerStarted(cycle=tuple(theme.name for theme in self._cycle), period=self._timing.period))

    def advance(self) -> Theme:
        """Move the cursor one step around the cycle and apply the theme there."""

        if not self._cycle:
            raise RuntimeError("Cannot advance an empty theme cycle")
        self._cursor = (self._cursor + 1) % len(self._cycle)
        theme = self._cycle[self._cursor]
        self.apply(theme)
        return theme

    def apply(self, theme: Theme) -> None:
        """Push every registry value for ``theme`` to the surface.

        Values already written stay written if a later one fails; there is no
        rollback across targets.
        """

        updates = compose_styles(theme)
        for update in updates:
            self._surface.set_style(update)
        self._surface.commit(theme)
        LOGGER.debug("Applied theme %s (%d style values)", theme.name, len(updates))
        self._publish(
            ThemeApplied(name=theme.name, title=theme.title, index=self._cursor, cycle_length=len(self._cycle))
        )

    def stop(self, reason: str = "stopped") -> None:
        """Tear down the timer; safe to call more than once."""

        if self._state is SequencerState.STOPPED:
            return
        self._timer.stop()
        self._state = SequencerState.STOPPED
        LOGGER.info("Theme rotation stopped (%s)", reason)
        self._publish(SequencerStopped(reason=reason))

    def _on_tick(self) -> None:
        try:
            self.advance()
        except Exception as exc:
            LOGGER.exception("Theme rotation failed; halting further advances")
            self._publish(RotationFailed(error=str(exc)))
            self.stop(reason="failed")

    def _publish(self, event: Event) -> None:
        if self._events is not None:
            self._events.publish(event)


__all__ = ["SequencerState", "ThemeSequencer", "TransitionTiming"]
