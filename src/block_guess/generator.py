"""Retry/fallback orchestration that turns growth attempts into puzzle shapes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from block_guess.growth import grow_connected
from block_guess.models import GeneratedShape, GeneratorConfig, Point
from block_guess.random_source import RandomSource, make_rng
from block_guess.visibility import fill_occluded_xp, satisfies_visibility

FALLBACK_ORIGIN: Point = (0, 0, 0)


class GenerationState(str, Enum):
    """States of the attempt/retry/fallback loop."""

    ATTEMPT = "attempt"
    RETRY = "retry"
    SUCCESS = "success"
    FALLBACK = "fallback"


class RejectReason(str, Enum):
    GROWTH_FAILED = "growth_failed"
    SIZE_OUT_OF_RANGE = "size_out_of_range"
    NOT_VISIBLE = "not_visible"


@dataclass(slots=True)
class AttemptOutcome:
    """Result of a single generation attempt."""

    state: GenerationState
    target_count: int
    points: list[Point] | None = None
    reason: RejectReason | None = None


class ShapeGenerator:
    """Produces connected, visible block shapes for the block-count puzzle."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        rng: RandomSource | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = (config or GeneratorConfig()).normalized()
        self._rng = rng if rng is not None else make_rng()
        self._logger = logger or logging.getLogger("block_guess.generator")

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    def generate(self) -> GeneratedShape:
        """Run attempts until one passes every check, else return the fallback shape."""
        state = GenerationState.ATTEMPT
        attempts = 0
        outcome: AttemptOutcome | None = None

        while state is not GenerationState.FALLBACK:
            if state is GenerationState.SUCCESS and outcome is not None and outcome.points is not None:
                self._logger.info(
                    "shape_generated",
                    extra={"attempts": attempts, "size": len(outcome.points), "target_count": outcome.target_count},
                )
                return GeneratedShape.from_points(outcome.points, config=self._config, attempts=attempts)

            if state is GenerationState.RETRY and outcome is not None:
                self._logger.debug(
                    "shape_attempt_rejected",
                    extra={
                        "attempt": attempts,
                        "reason": outcome.reason.value if outcome.reason else None,
                        "target_count": outcome.target_count,
                        "size": len(outcome.points) if outcome.points is not None else None,
                    },
                )
                state = GenerationState.ATTEMPT
                continue

            if attempts >= self._config.max_tries:
                state = GenerationState.FALLBACK
                continue

            attempts += 1
            outcome = self.attempt_once()
            state = outcome.state

        return self._fallback(attempts)

    def attempt_once(self) -> AttemptOutcome:
        """Grow, fill, and validate one candidate shape."""
        config = self._config
        target_count = self._rng.randint(config.block_count_min, config.block_count_max)
        points = grow_connected(target_count, config, self._rng)
        if points is None:
            return AttemptOutcome(GenerationState.RETRY, target_count, reason=RejectReason.GROWTH_FAILED)

        if config.fill_enabled:
            points = fill_occluded_xp(points, config)

        if not config.block_count_min <= len(points) <= config.block_count_max:
            return AttemptOutcome(GenerationState.RETRY, target_count, points, RejectReason.SIZE_OUT_OF_RANGE)

        if not satisfies_visibility(frozenset(points), config):
            return AttemptOutcome(GenerationState.RETRY, target_count, points, RejectReason.NOT_VISIBLE)

        return AttemptOutcome(GenerationState.SUCCESS, target_count, points)

    def _fallback(self, attempts: int) -> GeneratedShape:
        # Best-effort: truncation below may disconnect the shape or break visibility.
        config = self._config
        points = grow_connected(config.block_count_min, config, self._rng) or [FALLBACK_ORIGIN]
        if config.fill_enabled:
            points = fill_occluded_xp(points, config)
        if len(points) > config.block_count_max:
            points = points[: config.block_count_max]

        self._logger.warning(
            "shape_fallback_used",
            extra={"attempts": attempts, "max_tries": config.max_tries, "size": len(points)},
        )
        return GeneratedShape.from_points(points, config=config, fallback=True, attempts=attempts)


def generate_shape(
    config: GeneratorConfig | None = None,
    *,
    rng: RandomSource | None = None,
    seed: int | None = None,
    **overrides: Any,
) -> GeneratedShape:
    """Generate one puzzle shape.

    ``overrides`` replace individual ``GeneratorConfig`` fields. When ``rng`` is
    omitted, a private RNG seeded with ``seed`` is used.
    """
    effective = config or GeneratorConfig()
    if overrides:
        effective = effective.with_overrides(**overrides)
    source = rng if rng is not None else make_rng(seed)
    return ShapeGenerator(effective, rng=source).generate()
