"""Integer lattice helpers for face-adjacent voxel neighborhoods."""

from __future__ import annotations

from typing import Container, Iterator

from block_guess.models import GeneratorConfig, Point

FACE_DIRECTIONS: tuple[Point, ...] = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)


def neighbors6(point: Point) -> Iterator[Point]:
    """Yield the six face-adjacent neighbors of ``point``."""
    x, y, z = point
    for dx, dy, dz in FACE_DIRECTIONS:
        yield x + dx, y + dy, z + dz


def in_bounds(point: Point, config: GeneratorConfig) -> bool:
    x, y, z = point
    return 0 <= x < config.size_x and 0 <= y < config.size_y and 0 <= z < config.size_z


def is_fully_interior(point: Point, occupied: Container[Point]) -> bool:
    """True when every face neighbor of ``point`` is occupied."""
    return all(neighbor in occupied for neighbor in neighbors6(point))
