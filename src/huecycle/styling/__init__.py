"""Style registry and the surfaces that render it.

The Qt surface lives in :mod:`huecycle.styling.qt_surface` so the registry can
be used without a Qt installation.
"""

from .targets import StyleBinding, StyleTarget, StyleUpdate, TargetSpec, compose_styles, registry_keys, target_spec
from .surfaces import InMemorySurface, StyleSheetSurface, StyleSurface

__all__ = [
    "InMemorySurface",
    "StyleBinding",
    "StyleSheetSurface",
    "StyleSurface",
    "StyleTarget",
    "StyleUpdate",
    "TargetSpec",
    "compose_styles",
    "registry_keys",
    "target_spec",
]
