"""Command line entry point and bootstrap helpers for huecycle."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import json
import logging
import os
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, TextIO, cast, get_args, get_origin, get_type_hints

from .events import EventBus, SequencerStopped, ThemeApplied
from .sequencer import AsyncioRepeatingTimer, RepeatingTimer, SequencerState, ThemeSequencer
from .services.settings import Settings, SettingsStore, active_env_overrides
from .styling.surfaces import StyleSheetSurface, StyleSurface
from .theme import Theme, ThemeCatalog, builtin_catalog, hex_to_hue, hue_distance
from .utils import logging as logging_utils

_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}
_FALSE_VALUES = {"0", "false", "no", "off", "disabled"}
_LOGGER = logging.getLogger(__name__)
_DEFAULT_STYLESHEET = "huecycle-theme.css"


@dataclass(slots=True)
class QtRuntime:
    """Container returned by :func:`create_qapp`."""

    app: Any
    loop: asyncio.AbstractEventLoop


def configure_logging(debug: bool = False, *, to_file: bool = True, force: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging_utils.setup_logging(level, to_file=to_file, force=force)
    _LOGGER.debug("Logging configured (level=%s)", logging.getLevelName(level))
    _install_qt_message_handler()


def load_settings(
    path: Optional[Path] = None,
    *,
    store: SettingsStore | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """Load persisted settings or fall back to defaults."""

    active_store = store or SettingsStore(path)
    try:
        return active_store.load(overrides=overrides)
    except OSError as exc:
        _LOGGER.warning("Failed to load settings from %s: %s", active_store.path, exc)
        return Settings()


def build_sequencer(
    settings: Settings,
    surface: StyleSurface,
    *,
    timer: RepeatingTimer | None = None,
    event_bus: EventBus | None = None,
    catalog: Sequence[Theme] | None = None,
) -> ThemeSequencer:
    """Wire a sequencer over the shipped catalog using the configured timing."""

    return ThemeSequencer(
        catalog if catalog is not None else builtin_catalog,
        surface,
        timer=timer,
        timing=settings.timing(),
        event_bus=event_bus,
        refine=settings.refine_order,
    )


def create_qapp() -> QtRuntime:
    """Create a qasync-powered QApplication instance."""

    try:  # Local import to avoid mandatory PySide6 dependency at import time.
        from PySide6.QtWidgets import QApplication
    except ImportError as exc:  # pragma: no cover - depends on desktop stack
        raise RuntimeError("PySide6 must be installed to open the preview window.") from exc

    try:
        from qasync import QEventLoop
    except ImportError as exc:  # pragma: no cover - depends on env setup
        raise RuntimeError("qasync is required to run the async Qt event loop.") from exc

    app = cast(Any, QApplication.instance() or QApplication(sys.argv))
    app.setApplicationName("huecycle")
    app.setStyle("Fusion")

    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)
    try:
        app.aboutToQuit.connect(loop.stop)  # type: ignore[attr-defined]
    except AttributeError:  # pragma: no cover - in case of mock QApplication
        pass
    return QtRuntime(app=app, loop=loop)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point invoked by the `huecycle` console script."""

    args = _parse_cli_args(argv)
    debug = _env_flag("HUECYCLE_DEBUG", default=False)
    one_shot = bool(args.list or args.stylesheet or args.dump_catalog or args.dump_settings)
    configure_logging(debug, to_file=not one_shot)

    settings_path = args.settings_path or os.environ.get("HUECYCLE_SETTINGS_PATH")
    resolved_path = Path(settings_path).expanduser() if settings_path else None
    store = SettingsStore(resolved_path)
    try:
        cli_overrides = _coerce_cli_overrides(args.overrides or [])
    except ValueError as exc:
        print(f"Invalid --set override: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    settings = load_settings(resolved_path, store=store, overrides=cli_overrides or None)

    if args.dump_settings:
        _dump_settings(settings, store, overrides=cli_overrides)
        return
    if args.dump_catalog:
        _dump_catalog(builtin_catalog)
        return
    if args.list:
        _print_cycle(build_sequencer(settings, StyleSheetSurface()).cycle)
        return
    if args.stylesheet:
        try:
            theme = builtin_catalog.resolve(args.stylesheet)
        except KeyError:
            print(
                f"Unknown theme '{args.stylesheet}'. Available: {', '.join(builtin_catalog.names())}",
                file=sys.stderr,
            )
            raise SystemExit(2)
        _print_stylesheet(theme, settings)
        return

    if settings.debug_logging and not debug:
        configure_logging(True, force=True)

    if args.headless:
        try:
            asyncio.run(run_headless(settings, ticks=args.ticks))
        except KeyboardInterrupt:  # pragma: no cover - manual shutdown path
            _LOGGER.info("Shutdown requested by user.")
        return

    _run_preview(settings)


async def run_headless(settings: Settings, *, ticks: int | None = None) -> ThemeSequencer:
    """Rotate themes on the running asyncio loop, rewriting the stylesheet each tick.

    With ``ticks`` set, the rotation stops after that many automatic advances.
    """

    loop = asyncio.get_running_loop()
    bus: EventBus = EventBus()
    surface = StyleSheetSurface(
        settings.stylesheet_path or _DEFAULT_STYLESHEET, transition_seconds=settings.transition_seconds
    )
    sequencer = build_sequencer(settings, surface, timer=AsyncioRepeatingTimer(loop), event_bus=bus)
    finished = asyncio.Event()
    applied = 0

    def _on_applied(event: ThemeApplied) -> None:
        nonlocal applied
        applied += 1
        _LOGGER.info("Theme %d/%d: %s", event.index + 1, event.cycle_length, event.title)
        if ticks is not None and applied > ticks:
            sequencer.stop(reason="tick limit reached")

    def _on_stopped(event: SequencerStopped) -> None:
        finished.set()

    bus.subscribe(ThemeApplied, _on_applied)
    bus.subscribe(SequencerStopped, _on_stopped)

    sequencer.start()
    if sequencer.state is not SequencerState.RUNNING:
        return sequencer
    _LOGGER.info("Writing stylesheet to %s", surface.path)
    try:
        await finished.wait()
    finally:
        sequencer.stop(reason="shutdown")
    return sequencer


def _run_preview(settings: Settings) -> None:
    from .preview import ThemePreviewWindow
    from .styling.qt_surface import QtPaletteSurface

    runtime = create_qapp()
    bus: EventBus = EventBus()
    window = ThemePreviewWindow(bus, builtin_catalog)
    surface = QtPaletteSurface(window, transition_seconds=settings.transition_seconds)
    sequencer = build_sequencer(settings, surface, timer=AsyncioRepeatingTimer(runtime.loop), event_bus=bus)
    window.show()
    sequencer.start()

    loop = runtime.loop
    try:
        loop.run_forever()
    except KeyboardInterrupt:  # pragma: no cover - manual shutdown path
        _LOGGER.info("Shutdown requested by user.")
    finally:
        sequencer.stop(reason="shutdown")
        _drain_event_loop(loop)
        loop.close()


def _print_cycle(cycle: Sequence[Theme], stream: TextIO | None = None) -> None:
    destination = stream or sys.stdout
    previous: float | None = None
    for position, theme in enumerate(cycle, start=1):
        hue = hex_to_hue(theme.primary)
        step = "" if previous is None else f"  (+{hue_distance(previous, hue):.1f}°)"
        destination.write(f"{position:>2}. {theme.name:<16} {theme.title:<16} hue {hue:6.1f}°{step}\n")
        previous = hue
    if len(cycle) > 1 and previous is not None:
        wrap = hue_distance(previous, hex_to_hue(cycle[0].primary))
        destination.write(f"    wrap-around to {cycle[0].name}: {wrap:.1f}°\n")


def _print_stylesheet(theme: Theme, settings: Settings, stream: TextIO | None = None) -> None:
    from .styling.targets import compose_styles

    surface = StyleSheetSurface(transition_seconds=settings.transition_seconds)
    for update in compose_styles(theme):
        surface.set_style(update)
    surface.commit(theme)
    (stream or sys.stdout).write(surface.render())


def _dump_catalog(catalog: ThemeCatalog, stream: TextIO | None = None) -> None:
    destination = stream or sys.stdout
    json.dump([theme.to_dict() for theme in catalog], destination, indent=2, ensure_ascii=False)
    destination.write("\n")


def _dump_settings(
    settings: Settings,
    store: SettingsStore,
    *,
    overrides: Mapping[str, Any],
    stream: TextIO | None = None,
) -> None:
    destination = stream or sys.stdout
    metadata = {
        "path": str(store.path),
        "cli_overrides": sorted(overrides.keys()),
        "environment_variables": active_env_overrides(),
    }
    json.dump({"settings": asdict(settings), "meta": metadata}, destination, indent=2)
    destination.write("\n")


def _env_flag(name: str, *, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _drain_event_loop(loop: asyncio.AbstractEventLoop) -> None:
    """Cancel outstanding tasks before closing the loop."""

    if loop.is_closed():
        return

    async def _cleanup() -> None:
        current_task = None
        with contextlib.suppress(RuntimeError):
            current_task = asyncio.current_task(loop=loop)
        tasks = [task for task in asyncio.all_tasks(loop) if not task.done() and task is not current_task]
        if tasks:
            _LOGGER.debug("Canceling %s pending asyncio task(s) before shutdown.", len(tasks))
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
        with contextlib.suppress(RuntimeError, NotImplementedError):
            await loop.shutdown_asyncgens()

    try:
        loop.run_until_complete(_cleanup())
    except RuntimeError as exc:  # pragma: no cover - loop already running
        _LOGGER.debug("Unable to drain asyncio loop: %s", exc)


def _install_qt_message_handler() -> None:
    """Redirect Qt warnings to the Python logging stack when available."""

    try:
        from PySide6.QtCore import QtMsgType, qInstallMessageHandler
    except ImportError:  # pragma: no cover - PySide6 optional for one-shot commands
        return

    level_map = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _handler(mode, context, message):  # type: ignore[no-untyped-def]
        del context
        logging.getLogger("PySide6").log(level_map.get(mode, logging.INFO), message)

    qInstallMessageHandler(_handler)


def _parse_cli_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="huecycle",
        description="Rotate the page color themes in hue order, or inspect the cycle.",
    )
    actions = parser.add_mutually_exclusive_group()
    actions.add_argument("--list", action="store_true", help="Print the ordered theme cycle and exit.")
    actions.add_argument("--stylesheet", metavar="NAME", help="Print the CSS for one theme and exit.")
    actions.add_argument("--dump-catalog", action="store_true", help="Print the theme catalog as JSON and exit.")
    actions.add_argument(
        "--dump-settings", action="store_true", help="Print the effective settings payload and exit."
    )
    actions.add_argument(
        "--headless",
        action="store_true",
        help="Rotate without a window, rewriting the stylesheet file on every tick.",
    )
    parser.add_argument(
        "--ticks", type=int, metavar="N", help="With --headless, stop after N automatic advances."
    )
    parser.add_argument("--settings-path", metavar="PATH", help="Override the default ~/.huecycle/settings.json path.")
    parser.add_argument(
        "--set",
        dest="overrides",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help="Override persisted settings for this run (repeatable).",
    )
    args = parser.parse_args(argv)
    if args.ticks is not None:
        if not args.headless:
            parser.error("--ticks requires --headless")
        if args.ticks < 1:
            parser.error("--ticks must be a positive integer")
    return args


def _coerce_cli_overrides(items: Sequence[str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if not items:
        return overrides

    fields = Settings.__dataclass_fields__  # type: ignore[attr-defined]
    type_hints = get_type_hints(Settings)
    for entry in items:
        if "=" not in entry:
            raise ValueError(f"Override '{entry}' must use KEY=VALUE syntax.")
        key, raw_value = entry.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError("Override is missing a field name.")
        if key not in fields:
            raise ValueError(f"Unknown setting '{key}'.")
        overrides[key] = _coerce_value(type_hints.get(key, fields[key].type), raw_value.strip())
    return overrides


def _coerce_value(annotation: Any, raw_value: str) -> Any:
    optional = type(None) in get_args(annotation)
    if optional and raw_value.lower() in {"none", "null", ""}:
        return None
    target = _resolve_annotation(annotation)
    if target is bool:
        return _parse_bool(raw_value)
    if target is int:
        return int(raw_value, 10)
    if target is float:
        return float(raw_value)
    return raw_value


def _resolve_annotation(annotation: Any) -> Any:
    if get_origin(annotation) is None:
        return annotation
    args = [arg for arg in get_args(annotation) if arg is not type(None)]
    return args[0] if args else annotation


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Cannot coerce '{value}' to a boolean.")


if __name__ == "__main__":  # pragma: no cover
    main()
