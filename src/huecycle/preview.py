"""Small Qt window that hosts the rotation for local previewing."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from .events import EventBus, ThemeApplied
from .theme.models import Theme

_SWATCH_FIELDS = ("primary", "primary_light", "secondary", "accent")


class ThemePreviewWindow(QWidget):
    """Shows the active theme's title, position in the cycle and base colors.

    The window background is animated by a
    :class:`~huecycle.styling.qt_surface.QtPaletteSurface` targeting this
    widget; the window itself only follows :class:`ThemeApplied` events.
    """

    def __init__(self, event_bus: EventBus, themes: Sequence[Theme], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._themes = {theme.name: theme for theme in themes}
        self.setWindowTitle("huecycle")
        self.setObjectName("theme_preview_window")
        self.resize(420, 220)

        self._title = QLabel("", self)
        self._title.setObjectName("theme_title_label")
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = self._title.font()
        font.setPointSize(font.pointSize() + 6)
        self._title.setFont(font)

        self._position = QLabel("", self)
        self._position.setObjectName("theme_position_label")
        self._position.setAlignment(Qt.AlignmentFlag.AlignCenter)

        swatch_row = QHBoxLayout()
        self._swatches: dict[str, QFrame] = {}
        for field_name in _SWATCH_FIELDS:
            swatch = QFrame(self)
            swatch.setObjectName(f"swatch_{field_name}")
            swatch.setMinimumSize(64, 48)
            swatch_row.addWidget(swatch)
            self._swatches[field_name] = swatch

        layout = QVBoxLayout(self)
        layout.addWidget(self._title)
        layout.addWidget(self._position)
        layout.addLayout(swatch_row)

        event_bus.subscribe(ThemeApplied, self._on_theme_applied)

    def _on_theme_applied(self, event: ThemeApplied) -> None:
        theme = self._themes.get(event.name)
        self._title.setText(event.title)
        self._position.setText(f"{event.index + 1} / {event.cycle_length}")
        if theme is None:
            return
        for field_name, swatch in self._swatches.items():
            color = getattr(theme, field_name)
            swatch.setStyleSheet(f"background-color: {color}; border-radius: 6px;")
            swatch.setToolTip(f"{field_name}: {color}")


__all__ = ["ThemePreviewWindow"]
