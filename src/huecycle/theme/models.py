"""Data structures describing rotating page themes."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Sequence, Tuple

ColorTuple = Tuple[int, int, int]


class FormatError(ValueError):
    """Raised when a color string cannot be parsed."""


class IncompleteThemeError(ValueError):
    """Raised when a theme lacks one of the fields every style target needs."""

    def __init__(self, theme_name: str, missing: Sequence[str]) -> None:
        self.theme_name = theme_name
        self.missing = tuple(missing)
        super().__init__(f"Theme '{theme_name}' is missing required fields: {', '.join(self.missing)}")


def _clamp_channel(value: Any) -> int:
    channel = int(value)
    if channel < 0:
        return 0
    if channel > 255:
        return 255
    return channel


def normalize_color(value: Any) -> ColorTuple:
    """Convert ``value`` into an RGB tuple, accepting hex strings, ``"r, g, b"`` or sequences."""

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise FormatError("Color strings cannot be empty")
        if "," in text:
            parts = [part.strip() for part in text.split(",") if part.strip()]
            if len(parts) != 3:
                raise FormatError(f"Color '{value}' must have exactly 3 components")
            try:
                return tuple(_clamp_channel(int(part, 10)) for part in parts)  # type: ignore[return-value]
            except ValueError as exc:
                raise FormatError(f"Color '{value}' has non-numeric components") from exc
        from .color import parse_hex_color

        return parse_hex_color(text)

    if isinstance(value, Sequence):
        items = list(value)
        if len(items) != 3:
            raise FormatError(f"RGB sequences must contain 3 values, received {value!r}")
        return tuple(_clamp_channel(component) for component in items)  # type: ignore[return-value]

    raise TypeError(f"Cannot convert {type(value)!r} to an RGB color")


@dataclass(frozen=True, slots=True)
class Theme:
    """One complete palette: base colors plus the composites derived from them."""

    name: str
    title: str
    primary: str
    primary_light: str
    primary_rgb: ColorTuple
    secondary: str
    secondary_rgb: ColorTuple
    accent: str
    accent_rgb: ColorTuple
    gradient: str
    glow_color_1: str
    glow_color_2: str
    glow_color_3: str
    bg_color_1: str
    bg_color_2: str
    bg_color_3: str
    bg_gradient: str
    nav_gradient: str
    section_gradient_1: str
    section_gradient_2: str

    @property
    def hue(self) -> float:
        from .color import hex_to_hue

        return hex_to_hue(self.primary)

    def missing_fields(self) -> list[str]:
        """Return the names of required fields that are absent or blank."""

        missing: list[str] = []
        for name in REQUIRED_FIELDS:
            value = getattr(self, name, None)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
            elif name.endswith("_rgb") and (not isinstance(value, tuple) or len(value) != 3):
                missing.append(name)
        return missing

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            payload[item.name] = list(value) if isinstance(value, tuple) else value
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Theme":
        if "name" not in payload:
            raise ValueError("Theme payload missing 'name'")
        name = str(payload["name"]).strip().lower()
        missing = [
            key
            for key in REQUIRED_FIELDS
            if payload.get(key) is None or (isinstance(payload.get(key), str) and not payload[key].strip())
        ]
        if missing:
            raise IncompleteThemeError(name, missing)
        data: Dict[str, Any] = {"name": name, "title": str(payload.get("title") or name.title()).strip()}
        for key in REQUIRED_FIELDS:
            value = payload[key]
            data[key] = normalize_color(value) if key.endswith("_rgb") else str(value).strip()
        return cls(**data)


REQUIRED_FIELDS: tuple[str, ...] = tuple(item.name for item in fields(Theme) if item.name not in {"name", "title"})


def require_complete(theme: Theme) -> Theme:
    """Return ``theme`` unchanged or raise :class:`IncompleteThemeError`."""

    missing = theme.missing_fields()
    if missing:
        raise IncompleteThemeError(getattr(theme, "name", "<unnamed>"), missing)
    return theme


__all__ = [
    "ColorTuple",
    "FormatError",
    "IncompleteThemeError",
    "REQUIRED_FIELDS",
    "Theme",
    "normalize_color",
    "require_complete",
]
