"""Shared test helpers and stub classes.

Import from here instead of duplicating these classes in individual test files.
"""

from __future__ import annotations

from typing import Any, Callable

from huecycle.theme import Theme


class ManualTimer:
    """Timer stub whose ticks are fired explicitly by the test.

    Example:
        timer = ManualTimer()
        sequencer = ThemeSequencer(themes, surface, timer=timer)
        sequencer.start()
        timer.fire(3)
    """

    def __init__(self) -> None:
        self.interval: float | None = None
        self.starts = 0
        self.stops = 0
        self._callback: Callable[[], None] | None = None

    @property
    def is_active(self) -> bool:
        return self._callback is not None

    def start(self, interval: float, callback: Callable[[], None]) -> None:
        self.interval = interval
        self.starts += 1
        self._callback = callback

    def stop(self) -> None:
        self.stops += 1
        self._callback = None

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self._callback is None:
                return
            self._callback()


def make_theme(name: str, primary: str, **overrides: Any) -> Theme:
    """Build a complete theme whose every color derives from ``primary``."""

    rgb = ", ".join(str(int(primary.lstrip("#")[i : i + 2], 16)) for i in (0, 2, 4))
    payload: dict[str, Any] = {
        "name": name,
        "title": name.title(),
        "primary": primary,
        "primary_light": primary,
        "primary_rgb": rgb,
        "secondary": primary,
        "secondary_rgb": rgb,
        "accent": primary,
        "accent_rgb": rgb,
        "gradient": f"linear-gradient(135deg, {primary} 0%, {primary} 100%)",
        "glow_color_1": primary,
        "glow_color_2": primary,
        "glow_color_3": primary,
        "bg_color_1": "#0F0F23",
        "bg_color_2": "#1A1A2E",
        "bg_color_3": "#16162A",
        "bg_gradient": "linear-gradient(135deg, #0F0F23 0%, #1A1A2E 100%)",
        "nav_gradient": f"linear-gradient(135deg, {primary} 0%, {primary} 100%)",
        "section_gradient_1": "linear-gradient(180deg, #0F0F23 0%, #1A1A2E 100%)",
        "section_gradient_2": "linear-gradient(180deg, #1A1A2E 0%, #16162A 100%)",
    }
    payload.update(overrides)
    return Theme.from_dict(payload)
