"""Service layer helpers (configuration persistence)."""

from .settings import Settings, SettingsStore

__all__ = ["Settings", "SettingsStore"]
