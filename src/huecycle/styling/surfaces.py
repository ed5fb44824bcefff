"""Rendering surfaces that receive the style values produced for a theme."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Protocol, Tuple

from ..theme.models import Theme
from .targets import StyleTarget, StyleUpdate, target_spec

LOGGER = logging.getLogger(__name__)

StyleKey = Tuple[StyleTarget, str, str]


class StyleSurface(Protocol):
    """Host side of the style registry.

    ``set_style`` is called once per registry entry and ``commit`` once after
    the full pass. Interpolating old values into new ones is the surface's job.
    """

    def set_style(self, update: StyleUpdate) -> None:
        ...

    def commit(self, theme: Theme) -> None:
        ...


class InMemorySurface:
    """Surface that keeps the latest value of every style key."""

    def __init__(self) -> None:
        self.values: Dict[StyleKey, str] = {}
        self.last_pass: List[StyleUpdate] = []
        self.passes = 0
        self.theme: Theme | None = None
        self._pending: List[StyleUpdate] = []

    def set_style(self, update: StyleUpdate) -> None:
        self.values[update.key] = update.value
        self._pending.append(update)

    def commit(self, theme: Theme) -> None:
        self.last_pass = self._pending
        self._pending = []
        self.passes += 1
        self.theme = theme

    def value(self, target: StyleTarget, prop: str, selector: str | None = None) -> str:
        return self.values[(target, selector or target_spec(target).selector, prop)]


class StyleSheetSurface(InMemorySurface):
    """Render the current values as a CSS document, optionally written to disk.

    Non-custom properties get a ``transition`` declaration so the browser
    animates each change over ``transition_seconds``.
    """

    def __init__(self, path: Path | str | None = None, *, transition_seconds: float = 2.0, easing: str = "ease") -> None:
        super().__init__()
        self._path = Path(path).expanduser() if path else None
        self._transition_seconds = transition_seconds
        self._easing = easing

    @property
    def path(self) -> Path | None:
        return self._path

    def render(self) -> str:
        blocks: Dict[str, Dict[str, str]] = {}
        for (_target, selector, prop), value in self.values.items():
            blocks.setdefault(selector, {})[prop] = value

        lines: List[str] = []
        if self.theme is not None:
            lines.append(f"/* theme: {self.theme.title} */")
        for selector, declarations in blocks.items():
            lines.append(f"{selector} {{")
            for prop, value in declarations.items():
                lines.append(f"  {prop}: {value};")
            animated = [prop for prop in declarations if not prop.startswith("--")]
            if animated and self._transition_seconds > 0:
                duration = f"{self._transition_seconds:g}s {self._easing}"
                transition = ", ".join(f"{prop} {duration}" for prop in animated)
                lines.append(f"  transition: {transition};")
            lines.append("}")
        return "\n".join(lines) + "\n"

    def commit(self, theme: Theme) -> None:
        super().commit(theme)
        if self._path is None:
            return
        body = self.render()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Stylesheet for %s written to %s", theme.name, self._path)


__all__ = ["InMemorySurface", "StyleKey", "StyleSheetSurface", "StyleSurface"]
