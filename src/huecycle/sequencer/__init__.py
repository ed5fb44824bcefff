"""Rotation state machine and the timers that drive it."""

from .sequencer import SequencerState, ThemeSequencer, TransitionTiming
from .timers import AsyncioRepeatingTimer, QtRepeatingTimer, RepeatingTimer

__all__ = [
    "AsyncioRepeatingTimer",
    "QtRepeatingTimer",
    "RepeatingTimer",
    "SequencerState",
    "ThemeSequencer",
    "TransitionTiming",
]
