"""Qt surface that animates an application or widget palette between themes."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from PySide6.QtCore import QEasingCurve, QVariantAnimation
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from ..theme.color import blend_colors, parse_hex_color
from ..theme.models import ColorTuple, Theme
from .surfaces import InMemorySurface, StyleKey
from .targets import StyleTarget

LOGGER = logging.getLogger(__name__)

# QPalette role name -> root custom property feeding it
PALETTE_ROLES: Mapping[str, str] = {
    "Window": "--color-background",
    "Base": "--color-background-secondary",
    "AlternateBase": "--bg-color-3",
    "Button": "--color-background-secondary",
    "Highlight": "--color-primary",
    "Link": "--color-accent",
    "LinkVisited": "--color-primary-light",
}
_FOREGROUND: ColorTuple = (235, 235, 235)
_FOREGROUND_ROLES = ("WindowText", "Text", "ButtonText", "HighlightedText")


def resolve_palette_colors(values: Mapping[StyleKey, str]) -> Dict[str, ColorTuple]:
    """Pick the palette colors out of the root variables of a completed pass."""

    root = {
        prop: value for (target, _selector, prop), value in values.items() if target is StyleTarget.ROOT_VARIABLES
    }
    colors = {role: parse_hex_color(root[prop]) for role, prop in PALETTE_ROLES.items() if prop in root}
    for role in _FOREGROUND_ROLES:
        colors[role] = _FOREGROUND
    return colors


class QtPaletteSurface(InMemorySurface):
    """Push theme colors into a ``QPalette``, blending over the transition window."""

    def __init__(self, target: Any | None = None, *, transition_seconds: float = 2.0) -> None:
        super().__init__()
        self._target = target
        self._transition_ms = max(0, int(transition_seconds * 1000))
        self._current: Dict[str, ColorTuple] = {}
        self._animation: QVariantAnimation | None = None

    @property
    def current_colors(self) -> Dict[str, ColorTuple]:
        return dict(self._current)

    def commit(self, theme: Theme) -> None:
        super().commit(theme)
        goal = resolve_palette_colors(self.values)
        start = dict(self._current) or goal
        if self._animation is not None:
            self._animation.stop()
            self._animation = None
        if self._transition_ms == 0 or start == goal:
            self._paint(goal)
            return

        animation = QVariantAnimation()
        animation.setStartValue(0.0)
        animation.setEndValue(1.0)
        animation.setDuration(self._transition_ms)
        animation.setEasingCurve(QEasingCurve.Type.InOutQuad)
        animation.valueChanged.connect(
            lambda t: self._paint({role: blend_colors(start.get(role, rgb), rgb, float(t)) for role, rgb in goal.items()})
        )
        animation.finished.connect(lambda: self._paint(goal))
        self._animation = animation
        animation.start()
        LOGGER.debug("Animating palette to %s over %d ms", theme.name, self._transition_ms)

    def _paint(self, colors: Mapping[str, ColorTuple]) -> None:
        self._current = dict(colors)
        target = self._target if self._target is not None else QApplication.instance()
        if target is None:
            return
        palette = QPalette(target.palette())
        for role_name, rgb in colors.items():
            palette.setColor(getattr(QPalette.ColorRole, role_name), QColor(*rgb))
        target.setPalette(palette)


__all__ = ["PALETTE_ROLES", "QtPaletteSurface", "resolve_palette_colors"]
