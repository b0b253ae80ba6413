"""Line-of-sight checks along the puzzle's view axes, plus the +X occlusion fill."""

from __future__ import annotations

from typing import Collection, Container, Iterable

from block_guess.lattice import in_bounds
from block_guess.models import GeneratorConfig, Point, ViewDir


def _ray(point: Point, direction: ViewDir, config: GeneratorConfig) -> range:
    x, _, z = point
    if direction is ViewDir.XP:
        return range(x + 1, config.size_x)
    if direction is ViewDir.XN:
        return range(x - 1, -1, -1)
    return range(z + 1, config.size_z)


def is_visible_from(point: Point, occupied: Container[Point], direction: ViewDir, config: GeneratorConfig) -> bool:
    """True when nothing occupied sits between ``point`` and the board edge along ``direction``."""
    x, y, z = point
    if direction is ViewDir.ZP:
        return not any((x, y, step) in occupied for step in _ray(point, direction, config))
    return not any((step, y, z) in occupied for step in _ray(point, direction, config))


def hidden_points(occupied: Collection[Point], config: GeneratorConfig) -> list[Point]:
    """Return the points no configured view direction can see."""
    return [
        point
        for point in occupied
        if not any(is_visible_from(point, occupied, view, config) for view in config.views)
    ]


def satisfies_visibility(occupied: Collection[Point], config: GeneratorConfig) -> bool:
    for point in occupied:
        if not any(is_visible_from(point, occupied, view, config) for view in config.views):
            return False
    return True


def fill_occluded_xp(points: Iterable[Point], config: GeneratorConfig) -> list[Point]:
    """Solidify every (y, z) column from x=0 up to its deepest occupied cube.

    Seen from the +X viewer, each column then reads as one solid run ending at
    the furthest cube. The input order is kept and new cubes are appended
    column by column.
    """
    filled: dict[Point, None] = dict.fromkeys(points)
    deepest: dict[tuple[int, int], int] = {}
    for x, y, z in filled:
        if x > deepest.get((y, z), -1):
            deepest[(y, z)] = x

    for (y, z), max_x in deepest.items():
        for x in range(max_x + 1):
            point = (x, y, z)
            if in_bounds(point, config):
                filled.setdefault(point, None)
    return list(filled)
