"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest

# Qt widgets in the suite never need a real display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from huecycle.styling import InMemorySurface  # noqa: E402
from huecycle.theme import Theme  # noqa: E402
from tests.helpers import ManualTimer, make_theme  # noqa: E402


@pytest.fixture
def rainbow() -> list[Theme]:
    return [
        make_theme("red", "#FF0000"),
        make_theme("blue", "#0000FF"),
        make_theme("green", "#00FF00"),
        make_theme("orange", "#FF8000"),
        make_theme("yellow", "#FFFF00"),
    ]


@pytest.fixture
def surface() -> InMemorySurface:
    return InMemorySurface()


@pytest.fixture
def manual_timer() -> ManualTimer:
    return ManualTimer()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("HUECYCLE_"):
            monkeypatch.delenv(name, raising=False)
