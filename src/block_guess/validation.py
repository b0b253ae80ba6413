"""Invariant checks for generated shapes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Collection, Iterable

from block_guess.lattice import in_bounds, is_fully_interior, neighbors6
from block_guess.models import GeneratedShape, GeneratorConfig, Point
from block_guess.visibility import hidden_points


def is_connected(points: Iterable[Point]) -> bool:
    """True when the face-adjacency graph over ``points`` has one component."""
    remaining = set(points)
    if not remaining:
        return True

    start = next(iter(remaining))
    queue = deque([start])
    remaining.discard(start)
    while queue:
        current = queue.popleft()
        for neighbor in neighbors6(current):
            if neighbor in remaining:
                remaining.discard(neighbor)
                queue.append(neighbor)
    return not remaining


def interior_points(points: Collection[Point]) -> list[Point]:
    occupied = set(points)
    return [point for point in occupied if is_fully_interior(point, occupied)]


@dataclass(slots=True)
class ShapeReport:
    """Summary of which success-path invariants a shape violates."""

    size: int
    violations: list[str] = field(default_factory=list)
    hidden: list[Point] = field(default_factory=list)
    out_of_bounds: list[Point] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


def check_points(points: Collection[Point], config: GeneratorConfig) -> ShapeReport:
    occupied = set(points)
    report = ShapeReport(size=len(points))

    if len(occupied) != len(points):
        report.violations.append("duplicate points")

    report.out_of_bounds = [point for point in occupied if not in_bounds(point, config)]
    if report.out_of_bounds:
        report.violations.append(f"{len(report.out_of_bounds)} point(s) outside the board")

    if not occupied:
        report.violations.append("shape is empty")
    elif not is_connected(occupied):
        report.violations.append("shape is not connected")

    if not config.block_count_min <= len(occupied) <= config.block_count_max:
        report.violations.append(
            f"size {len(occupied)} outside [{config.block_count_min}, {config.block_count_max}]"
        )

    report.hidden = hidden_points(occupied, config)
    if report.hidden:
        report.violations.append(f"{len(report.hidden)} point(s) hidden from every view")

    return report


def check_shape(shape: GeneratedShape, config: GeneratorConfig | None = None) -> ShapeReport:
    """Check ``shape`` against the config it was generated with (or ``config``)."""
    report = check_points(shape.blocks, config or shape.config)
    if shape.answer != len(shape.blocks):
        report.violations.append(f"answer {shape.answer} does not match {len(shape.blocks)} blocks")
    return report
