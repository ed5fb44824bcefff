"""Arrange themes into a rotation cycle with small hue jumps between neighbours."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from .color import hex_to_hue, hue_distance
from .models import Theme

LOGGER = logging.getLogger(__name__)

_EPSILON = 1e-9


def sort_by_color_similarity(catalog: Iterable[Theme] | None) -> List[Theme]:
    """Return a new list ordered by greedy nearest-neighbour over primary hues.

    The first catalog entry always stays first. From the last placed theme the
    closest unvisited hue is appended next; ties go to the earliest catalog
    position. This keeps each step locally optimal but gives no global bound on
    any single jump.
    """

    themes = list(catalog) if catalog is not None else []
    if len(themes) <= 1:
        return themes

    hues = [hex_to_hue(theme.primary) for theme in themes]
    unvisited = list(range(1, len(themes)))
    order = [0]
    while unvisited:
        last_hue = hues[order[-1]]
        # unvisited stays in catalog order, so min() keeps the earliest index on ties
        nearest = min(unvisited, key=lambda index: hue_distance(last_hue, hues[index]))
        unvisited.remove(nearest)
        order.append(nearest)

    ordered = [themes[index] for index in order]
    LOGGER.debug("Ordered %d themes: %s", len(ordered), [theme.name for theme in ordered])
    return ordered


def adjacent_hue_distances(cycle: Sequence[Theme], *, wrap: bool = False) -> List[float]:
    """Hue distance of every consecutive pair, optionally including last→first."""

    hues = [hex_to_hue(theme.primary) for theme in cycle]
    distances = [hue_distance(a, b) for a, b in zip(hues, hues[1:])]
    if wrap and len(hues) > 1:
        distances.append(hue_distance(hues[-1], hues[0]))
    return distances


def cycle_cost(cycle: Sequence[Theme]) -> float:
    """Total hue travel around the closed cycle."""

    return sum(adjacent_hue_distances(cycle, wrap=True))


def refine_cycle(cycle: Sequence[Theme], *, max_passes: int = 50) -> List[Theme]:
    """Improve a closed tour with 2-opt moves while keeping the first theme fixed.

    Returns a new list whose :func:`cycle_cost` is never greater than the input's.
    """

    tour = list(cycle)
    size = len(tour)
    if size < 4:
        return tour

    hues = [hex_to_hue(theme.primary) for theme in tour]
    for _ in range(max_passes):
        improved = False
        for i in range(1, size - 1):
            for j in range(i + 1, size):
                before, first = hues[i - 1], hues[i]
                last, after = hues[j], hues[(j + 1) % size]
                delta = (
                    hue_distance(before, last)
                    + hue_distance(first, after)
                    - hue_distance(before, first)
                    - hue_distance(last, after)
                )
                if delta < -_EPSILON:
                    tour[i : j + 1] = reversed(tour[i : j + 1])
                    hues[i : j + 1] = reversed(hues[i : j + 1])
                    improved = True
        if not improved:
            break
    return tour


__all__ = [
    "adjacent_hue_distances",
    "cycle_cost",
    "refine_cycle",
    "sort_by_color_similarity",
]
