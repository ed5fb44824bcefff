"""The shipped theme catalog and a read-only registry over it."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Sequence

from .models import Theme

LOGGER = logging.getLogger(__name__)

_BUILTIN_PAYLOADS: tuple[Mapping[str, Any], ...] = (
    {
        "name": "dream-violet",
        "title": "Dream Violet",
        "primary": "#8B5CF6",
        "primary_light": "#A78BFA",
        "primary_rgb": "139, 92, 246",
        "secondary": "#06B6D4",
        "secondary_rgb": "6, 182, 212",
        "accent": "#F472B6",
        "accent_rgb": "244, 114, 182",
        "gradient": "linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
        "glow_color_1": "#8B5CF6",
        "glow_color_2": "#F472B6",
        "glow_color_3": "#06B6D4",
        "bg_color_1": "#0F0F23",
        "bg_color_2": "#1A1A2E",
        "bg_color_3": "#16162a",
        "bg_gradient": "linear-gradient(135deg, #0F0F23 0%, #1a1a3e 50%, #2d1b4e 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(102, 126, 234, 0.85) 0%, rgba(118, 75, 162, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #0F0F23 0%, #1a1a3e 100%)",
        "section_gradient_2": "linear-gradient(180deg, #1A1A2E 0%, #2d1b4e 100%)",
    },
    {
        "name": "ocean-blue",
        "title": "Ocean Blue",
        "primary": "#0EA5E9",
        "primary_light": "#38BDF8",
        "primary_rgb": "14, 165, 233",
        "secondary": "#06B6D4",
        "secondary_rgb": "6, 182, 212",
        "accent": "#22D3EE",
        "accent_rgb": "34, 211, 238",
        "gradient": "linear-gradient(135deg, #0EA5E9 0%, #06B6D4 100%)",
        "glow_color_1": "#0EA5E9",
        "glow_color_2": "#06B6D4",
        "glow_color_3": "#22D3EE",
        "bg_color_1": "#0a1628",
        "bg_color_2": "#0f2137",
        "bg_color_3": "#0c1a2e",
        "bg_gradient": "linear-gradient(135deg, #0a1628 0%, #0f2a40 50%, #0a2035 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(14, 165, 233, 0.85) 0%, rgba(6, 182, 212, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #0a1628 0%, #0f2a40 100%)",
        "section_gradient_2": "linear-gradient(180deg, #0f2137 0%, #0a2035 100%)",
    },
    {
        "name": "sakura-pink",
        "title": "Sakura Pink",
        "primary": "#EC4899",
        "primary_light": "#F472B6",
        "primary_rgb": "236, 72, 153",
        "secondary": "#F43F5E",
        "secondary_rgb": "244, 63, 94",
        "accent": "#FB7185",
        "accent_rgb": "251, 113, 133",
        "gradient": "linear-gradient(135deg, #EC4899 0%, #F43F5E 100%)",
        "glow_color_1": "#EC4899",
        "glow_color_2": "#F472B6",
        "glow_color_3": "#FB7185",
        "bg_color_1": "#1a0a14",
        "bg_color_2": "#2a1020",
        "bg_color_3": "#200d1a",
        "bg_gradient": "linear-gradient(135deg, #1a0a14 0%, #2d1025 50%, #3a1530 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(236, 72, 153, 0.85) 0%, rgba(244, 63, 94, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #1a0a14 0%, #2d1025 100%)",
        "section_gradient_2": "linear-gradient(180deg, #2a1020 0%, #3a1530 100%)",
    },
    {
        "name": "emerald",
        "title": "Emerald",
        "primary": "#10B981",
        "primary_light": "#34D399",
        "primary_rgb": "16, 185, 129",
        "secondary": "#14B8A6",
        "secondary_rgb": "20, 184, 166",
        "accent": "#2DD4BF",
        "accent_rgb": "45, 212, 191",
        "gradient": "linear-gradient(135deg, #10B981 0%, #14B8A6 100%)",
        "glow_color_1": "#10B981",
        "glow_color_2": "#34D399",
        "glow_color_3": "#2DD4BF",
        "bg_color_1": "#0a1a14",
        "bg_color_2": "#0f2a20",
        "bg_color_3": "#0c201a",
        "bg_gradient": "linear-gradient(135deg, #0a1a14 0%, #0f2d22 50%, #0a2a1c 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(16, 185, 129, 0.85) 0%, rgba(20, 184, 166, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #0a1a14 0%, #0f2d22 100%)",
        "section_gradient_2": "linear-gradient(180deg, #0f2a20 0%, #0a2a1c 100%)",
    },
    {
        "name": "sunset-orange",
        "title": "Sunset Orange",
        "primary": "#F97316",
        "primary_light": "#FB923C",
        "primary_rgb": "249, 115, 22",
        "secondary": "#EAB308",
        "secondary_rgb": "234, 179, 8",
        "accent": "#FBBF24",
        "accent_rgb": "251, 191, 36",
        "gradient": "linear-gradient(135deg, #F97316 0%, #EAB308 100%)",
        "glow_color_1": "#F97316",
        "glow_color_2": "#FB923C",
        "glow_color_3": "#FBBF24",
        "bg_color_1": "#1a120a",
        "bg_color_2": "#2a1c0f",
        "bg_color_3": "#20160c",
        "bg_gradient": "linear-gradient(135deg, #1a120a 0%, #2d1f10 50%, #3a2815 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(249, 115, 22, 0.85) 0%, rgba(234, 179, 8, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #1a120a 0%, #2d1f10 100%)",
        "section_gradient_2": "linear-gradient(180deg, #2a1c0f 0%, #3a2815 100%)",
    },
    {
        "name": "aurora-cyan",
        "title": "Aurora Cyan",
        "primary": "#06B6D4",
        "primary_light": "#22D3EE",
        "primary_rgb": "6, 182, 212",
        "secondary": "#10B981",
        "secondary_rgb": "16, 185, 129",
        "accent": "#34D399",
        "accent_rgb": "52, 211, 153",
        "gradient": "linear-gradient(135deg, #06B6D4 0%, #10B981 100%)",
        "glow_color_1": "#06B6D4",
        "glow_color_2": "#22D3EE",
        "glow_color_3": "#34D399",
        "bg_color_1": "#0a1618",
        "bg_color_2": "#0f2225",
        "bg_color_3": "#0c1c1e",
        "bg_gradient": "linear-gradient(135deg, #0a1618 0%, #0f2830 50%, #0a2028 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(6, 182, 212, 0.85) 0%, rgba(16, 185, 129, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #0a1618 0%, #0f2830 100%)",
        "section_gradient_2": "linear-gradient(180deg, #0f2225 0%, #0a2028 100%)",
    },
    {
        "name": "rose-red",
        "title": "Rose Red",
        "primary": "#E11D48",
        "primary_light": "#FB7185",
        "primary_rgb": "225, 29, 72",
        "secondary": "#BE123C",
        "secondary_rgb": "190, 18, 60",
        "accent": "#FDA4AF",
        "accent_rgb": "253, 164, 175",
        "gradient": "linear-gradient(135deg, #E11D48 0%, #BE123C 100%)",
        "glow_color_1": "#E11D48",
        "glow_color_2": "#FB7185",
        "glow_color_3": "#FDA4AF",
        "bg_color_1": "#1a0a0e",
        "bg_color_2": "#2a0f16",
        "bg_color_3": "#200c12",
        "bg_gradient": "linear-gradient(135deg, #1a0a0e 0%, #2d1018 50%, #3a1520 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(225, 29, 72, 0.85) 0%, rgba(190, 18, 60, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #1a0a0e 0%, #2d1018 100%)",
        "section_gradient_2": "linear-gradient(180deg, #2a0f16 0%, #3a1520 100%)",
    },
    {
        "name": "starry-indigo",
        "title": "Starry Indigo",
        "primary": "#6366F1",
        "primary_light": "#818CF8",
        "primary_rgb": "99, 102, 241",
        "secondary": "#8B5CF6",
        "secondary_rgb": "139, 92, 246",
        "accent": "#A78BFA",
        "accent_rgb": "167, 139, 250",
        "gradient": "linear-gradient(135deg, #6366F1 0%, #8B5CF6 100%)",
        "glow_color_1": "#6366F1",
        "glow_color_2": "#818CF8",
        "glow_color_3": "#A78BFA",
        "bg_color_1": "#0e0e1e",
        "bg_color_2": "#14142e",
        "bg_color_3": "#101026",
        "bg_gradient": "linear-gradient(135deg, #0e0e1e 0%, #181838 50%, #201848 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(99, 102, 241, 0.85) 0%, rgba(139, 92, 246, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #0e0e1e 0%, #181838 100%)",
        "section_gradient_2": "linear-gradient(180deg, #14142e 0%, #201848 100%)",
    },
    {
        "name": "mint",
        "title": "Mint",
        "primary": "#14B8A6",
        "primary_light": "#2DD4BF",
        "primary_rgb": "20, 184, 166",
        "secondary": "#0D9488",
        "secondary_rgb": "13, 148, 136",
        "accent": "#5EEAD4",
        "accent_rgb": "94, 234, 212",
        "gradient": "linear-gradient(135deg, #14B8A6 0%, #0D9488 100%)",
        "glow_color_1": "#14B8A6",
        "glow_color_2": "#2DD4BF",
        "glow_color_3": "#5EEAD4",
        "bg_color_1": "#0a1614",
        "bg_color_2": "#0f2220",
        "bg_color_3": "#0c1c1a",
        "bg_gradient": "linear-gradient(135deg, #0a1614 0%, #0f2a26 50%, #0a2420 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(20, 184, 166, 0.85) 0%, rgba(13, 148, 136, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #0a1614 0%, #0f2a26 100%)",
        "section_gradient_2": "linear-gradient(180deg, #0f2220 0%, #0a2420 100%)",
    },
    {
        "name": "amber-gold",
        "title": "Amber Gold",
        "primary": "#F59E0B",
        "primary_light": "#FBBF24",
        "primary_rgb": "245, 158, 11",
        "secondary": "#D97706",
        "secondary_rgb": "217, 119, 6",
        "accent": "#FCD34D",
        "accent_rgb": "252, 211, 77",
        "gradient": "linear-gradient(135deg, #F59E0B 0%, #D97706 100%)",
        "glow_color_1": "#F59E0B",
        "glow_color_2": "#FBBF24",
        "glow_color_3": "#FCD34D",
        "bg_color_1": "#1a140a",
        "bg_color_2": "#2a1e0f",
        "bg_color_3": "#20180c",
        "bg_gradient": "linear-gradient(135deg, #1a140a 0%, #2d2210 50%, #3a2c15 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(245, 158, 11, 0.85) 0%, rgba(217, 119, 6, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #1a140a 0%, #2d2210 100%)",
        "section_gradient_2": "linear-gradient(180deg, #2a1e0f 0%, #3a2c15 100%)",
    },
    {
        "name": "violet",
        "title": "Violet",
        "primary": "#7C3AED",
        "primary_light": "#8B5CF6",
        "primary_rgb": "124, 58, 237",
        "secondary": "#6D28D9",
        "secondary_rgb": "109, 40, 217",
        "accent": "#A78BFA",
        "accent_rgb": "167, 139, 250",
        "gradient": "linear-gradient(135deg, #7C3AED 0%, #6D28D9 100%)",
        "glow_color_1": "#7C3AED",
        "glow_color_2": "#8B5CF6",
        "glow_color_3": "#A78BFA",
        "bg_color_1": "#120a1a",
        "bg_color_2": "#1c0f2a",
        "bg_color_3": "#160c20",
        "bg_gradient": "linear-gradient(135deg, #120a1a 0%, #1f1030 50%, #2a1540 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(124, 58, 237, 0.85) 0%, rgba(109, 40, 217, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #120a1a 0%, #1f1030 100%)",
        "section_gradient_2": "linear-gradient(180deg, #1c0f2a 0%, #2a1540 100%)",
    },
    {
        "name": "coral",
        "title": "Coral",
        "primary": "#FB7185",
        "primary_light": "#FDA4AF",
        "primary_rgb": "251, 113, 133",
        "secondary": "#F43F5E",
        "secondary_rgb": "244, 63, 94",
        "accent": "#FECDD3",
        "accent_rgb": "254, 205, 211",
        "gradient": "linear-gradient(135deg, #FB7185 0%, #F43F5E 100%)",
        "glow_color_1": "#FB7185",
        "glow_color_2": "#FDA4AF",
        "glow_color_3": "#FECDD3",
        "bg_color_1": "#1a0e10",
        "bg_color_2": "#2a1418",
        "bg_color_3": "#201014",
        "bg_gradient": "linear-gradient(135deg, #1a0e10 0%, #2d1820 50%, #3a2028 100%)",
        "nav_gradient": "linear-gradient(135deg, rgba(251, 113, 133, 0.85) 0%, rgba(244, 63, 94, 0.85) 100%)",
        "section_gradient_1": "linear-gradient(180deg, #1a0e10 0%, #2d1820 100%)",
        "section_gradient_2": "linear-gradient(180deg, #2a1418 0%, #3a2028 100%)",
    },
)


def build_builtin_themes() -> List[Theme]:
    """Materialize the shipped catalog in its authored order."""

    return [Theme.from_dict(payload) for payload in _BUILTIN_PAYLOADS]


class ThemeCatalog(Sequence[Theme]):
    """Immutable, name-addressable sequence of themes.

    The catalog is validated once on construction; duplicate names are rejected
    so that lookups stay unambiguous.
    """

    def __init__(self, themes: Iterable[Theme] | None = None) -> None:
        items = tuple(themes) if themes is not None else tuple(build_builtin_themes())
        index: Dict[str, Theme] = {}
        for theme in items:
            key = theme.name.lower()
            if key in index:
                raise ValueError(f"Theme '{theme.name}' already registered")
            index[key] = theme
        self._themes = items
        self._index = index
        LOGGER.debug("Theme catalog ready with %d theme(s)", len(items))

    def __getitem__(self, position):  # type: ignore[override]
        return self._themes[position]

    def __len__(self) -> int:
        return len(self._themes)

    def __iter__(self) -> Iterator[Theme]:
        return iter(self._themes)

    def names(self) -> List[str]:
        return [theme.name for theme in self._themes]

    def resolve(self, name: str) -> Theme:
        key = (name or "").strip().lower()
        theme = self._index.get(key)
        if theme is None:
            raise KeyError(f"Unknown theme '{name}'")
        return theme


builtin_catalog = ThemeCatalog()


__all__ = ["ThemeCatalog", "build_builtin_themes", "builtin_catalog"]
