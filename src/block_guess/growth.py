"""Randomized connected growth that never creates a fully enclosed cube."""

from __future__ import annotations

import logging

from block_guess.lattice import in_bounds, neighbors6
from block_guess.models import GeneratorConfig, Point
from block_guess.random_source import RandomSource

logger = logging.getLogger("block_guess.growth")

_FULL_DEGREE = 6


def _place_if_not_enclosing(candidate: Point, degrees: dict[Point, int]) -> bool:
    """Add ``candidate`` unless it would leave some cube with all six faces covered.

    ``degrees`` maps each occupied point to its count of occupied neighbors.
    Since no occupied point is enclosed before the insertion, only the
    candidate itself and its occupied neighbors can become enclosed.
    """
    touching = [neighbor for neighbor in neighbors6(candidate) if neighbor in degrees]
    if len(touching) == _FULL_DEGREE:
        return False
    if any(degrees[neighbor] == _FULL_DEGREE - 1 for neighbor in touching):
        return False

    degrees[candidate] = len(touching)
    for neighbor in touching:
        degrees[neighbor] += 1
    return True


def grow_connected(target_count: int, config: GeneratorConfig, rng: RandomSource) -> list[Point] | None:
    """Grow a 6-connected shape of ``target_count`` cubes inside the board.

    Returns the points in insertion order, or ``None`` when every frontier
    cube is exhausted before the target size is reached.
    """
    start = (
        rng.randint(0, config.size_x - 1),
        rng.randint(0, config.size_y - 1),
        rng.randint(0, config.size_z - 1),
    )
    degrees: dict[Point, int] = {start: 0}
    frontier: list[Point] = [start]

    while len(degrees) < target_count:
        index = rng.randrange(len(frontier))
        base = frontier[index]
        candidates = [
            neighbor for neighbor in neighbors6(base) if in_bounds(neighbor, config) and neighbor not in degrees
        ]

        placed: Point | None = None
        if candidates:
            rng.shuffle(candidates)
            for candidate in candidates:
                if _place_if_not_enclosing(candidate, degrees):
                    placed = candidate
                    break

        if placed is not None:
            frontier.append(placed)
            continue

        frontier.pop(index)
        if not frontier:
            logger.debug(
                "growth_frontier_exhausted",
                extra={"target_count": target_count, "reached": len(degrees)},
            )
            return None

    return list(degrees)
