"""Settings dataclass and persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, get_args, get_type_hints

from ..sequencer.sequencer import TransitionTiming

__all__ = ["Settings", "SettingsStore", "active_env_overrides"]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".huecycle"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_SETTINGS_VERSION = 1
_ENV_PREFIX = "HUECYCLE_"
_ENV_OVERRIDES: Mapping[str, str] = {
    "HUECYCLE_STYLESHEET": "stylesheet_path",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "HUECYCLE_REFINE_ORDER": "refine_order",
    "HUECYCLE_DEBUG_LOGGING": "debug_logging",
}
_FLOAT_ENV_OVERRIDES: Mapping[str, str] = {
    "HUECYCLE_PERIOD": "period_seconds",
    "HUECYCLE_TRANSITION": "transition_seconds",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}
_FALSE_VALUES = {"0", "false", "no", "off", "disabled"}


@dataclass(slots=True)
class Settings:
    """Rotation configuration; the theme catalog itself is not configurable."""

    period_seconds: float = 3.0
    transition_seconds: float = 2.0
    refine_order: bool = False
    stylesheet_path: str | None = None
    debug_logging: bool = False

    def timing(self) -> TransitionTiming:
        return TransitionTiming(period=float(self.period_seconds), transition=float(self.transition_seconds))


class SettingsStore:
    """Persistence adapter for :class:`Settings`.

    Precedence, lowest first: defaults, the JSON file, CLI overrides, then
    ``HUECYCLE_*`` environment variables.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or _DEFAULT_SETTINGS_PATH

    @property
    def path(self) -> Path:
        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> Settings:
        """Load settings from disk, applying CLI/environment overrides when present."""

        payload = self._read_payload()
        settings = Settings()
        if payload:
            settings = Settings(**_coerce_fields(payload, source=str(self._path)))

        if overrides:
            settings = self._apply_overrides(settings, overrides, source="CLI")

        settings = self._apply_env_overrides(settings)
        return self._validated(settings)

    def save(self, settings: Settings) -> Path:
        """Persist settings to disk with atomic file writes."""

        payload = asdict(settings)
        payload["version"] = _SETTINGS_VERSION
        body = json.dumps(payload, indent=2, sort_keys=True)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Settings saved to %s", self._path)
        return self._path

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
            data = json.loads(text)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("Settings file %s must contain a JSON object", self._path)
            return {}
        return data

    def _apply_overrides(
        self,
        settings: Settings,
        overrides: Mapping[str, Any],
        *,
        source: str = "runtime",
    ) -> Settings:
        filtered = _coerce_fields(
            {key: value for key, value in overrides.items() if value is not None}, source=source
        )
        if filtered:
            LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
            settings = replace(settings, **filtered)
        return settings

    def _apply_env_overrides(self, settings: Settings) -> Settings:
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value
        for env_name, field_name in _FLOAT_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            try:
                overrides[field_name] = float(value)
            except ValueError:
                LOGGER.warning("Environment override %s=%s is not a valid float", env_name, value)
        if overrides:
            settings = self._apply_overrides(settings, overrides, source="environment")
        return settings

    def _validated(self, settings: Settings) -> Settings:
        try:
            settings.timing()
        except (TypeError, ValueError) as exc:
            defaults = Settings()
            LOGGER.warning(
                "Invalid rotation timing (%s); using %ss period and %ss transition",
                exc,
                defaults.period_seconds,
                defaults.transition_seconds,
            )
            settings = replace(
                settings, period_seconds=defaults.period_seconds, transition_seconds=defaults.transition_seconds
            )
        return settings


def _coerce_fields(payload: Mapping[str, Any], *, source: str) -> Dict[str, Any]:
    """Keep known fields, converted to their annotated type; drop the rest with a warning."""

    hints = get_type_hints(Settings)
    allowed = {field.name for field in fields(Settings)}
    coerced: Dict[str, Any] = {}
    for key, value in payload.items():
        if key not in allowed:
            continue
        try:
            coerced[key] = _coerce_field(hints[key], value)
        except (TypeError, ValueError) as exc:
            LOGGER.warning("Ignoring setting %s=%r from %s: %s", key, value, source, exc)
    return coerced


def _coerce_field(annotation: Any, value: Any) -> Any:
    args = get_args(annotation)
    if value is None:
        if type(None) in args:
            return None
        raise TypeError("a value is required")
    target = next((arg for arg in args if arg is not type(None)), annotation)
    if target is bool:
        if isinstance(value, bool):
            return value
        lowered = value.strip().lower() if isinstance(value, str) else None
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError("expected a boolean")
    if target is float:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise TypeError("expected a number")
        return float(value)
    if target is str:
        if not isinstance(value, str):
            raise TypeError("expected a string")
        return value
    return value


def active_env_overrides() -> list[str]:
    return sorted(name for name in os.environ if name.startswith(_ENV_PREFIX))
