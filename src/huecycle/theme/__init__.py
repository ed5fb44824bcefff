"""Theme module consolidating palette data, hue math and cycle ordering."""

from .models import (
    REQUIRED_FIELDS,
    ColorTuple,
    FormatError,
    IncompleteThemeError,
    Theme,
    normalize_color,
    require_complete,
)
from .color import blend_colors, hex_to_hsl, hex_to_hue, hue_difference, hue_distance, parse_hex_color, to_hex
from .catalog import ThemeCatalog, build_builtin_themes, builtin_catalog
from .ordering import adjacent_hue_distances, cycle_cost, refine_cycle, sort_by_color_similarity

__all__ = [
    "REQUIRED_FIELDS",
    "ColorTuple",
    "FormatError",
    "IncompleteThemeError",
    "Theme",
    "ThemeCatalog",
    "adjacent_hue_distances",
    "blend_colors",
    "build_builtin_themes",
    "builtin_catalog",
    "cycle_cost",
    "hex_to_hsl",
    "hex_to_hue",
    "hue_difference",
    "hue_distance",
    "normalize_color",
    "parse_hex_color",
    "refine_cycle",
    "require_complete",
    "sort_by_color_similarity",
    "to_hex",
]
