"""Domain records shared by the generator, validation helpers, and CLI."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Iterable

Point = tuple[int, int, int]


class ViewDir(str, Enum):
    """Axis directions a viewer can look along toward the shape."""

    XP = "XP"
    XN = "XN"
    ZP = "ZP"

    @classmethod
    def parse(cls, value: ViewDir | str) -> ViewDir:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown view direction {value!r}; expected one of {allowed}") from exc


DEFAULT_VIEWS: tuple[ViewDir, ...] = (ViewDir.XP, ViewDir.XN, ViewDir.ZP)


@dataclass(slots=True, frozen=True)
class GeneratorConfig:
    """Board, block-count range, and view constraints for one generation request."""

    size_x: int = 5
    size_y: int = 4
    size_z: int = 5
    block_count_min: int = 6
    block_count_max: int = 14
    views: tuple[ViewDir, ...] = DEFAULT_VIEWS
    initial_view: ViewDir = ViewDir.XP
    fill_occluded_in_initial_view: bool = True
    max_tries: int = 800

    def __post_init__(self) -> None:
        object.__setattr__(self, "views", tuple(ViewDir.parse(view) for view in self.views))
        object.__setattr__(self, "initial_view", ViewDir.parse(self.initial_view))

    @property
    def size(self) -> Point:
        return self.size_x, self.size_y, self.size_z

    @property
    def fill_enabled(self) -> bool:
        """Whether the occlusion fill runs after growth."""
        return self.fill_occluded_in_initial_view and self.initial_view is ViewDir.XP

    def normalized(self) -> GeneratorConfig:
        """Return a copy clamped into a structurally usable range.

        Dimensions and the minimum count are raised to at least 1, the maximum
        count is raised to the minimum, and an empty view set falls back to all
        three directions. ``max_tries`` is left alone so that ``<= 0`` still
        means "go straight to the fallback".
        """
        block_count_min = max(1, int(self.block_count_min))
        return replace(
            self,
            size_x=max(1, int(self.size_x)),
            size_y=max(1, int(self.size_y)),
            size_z=max(1, int(self.size_z)),
            block_count_min=block_count_min,
            block_count_max=max(block_count_min, int(self.block_count_max)),
            views=self.views or DEFAULT_VIEWS,
            max_tries=int(self.max_tries),
        )

    def with_overrides(self, **overrides: Any) -> GeneratorConfig:
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["views"] = [view.value for view in self.views]
        payload["initial_view"] = self.initial_view.value
        return payload


@dataclass(slots=True, frozen=True)
class GeneratedShape:
    """A generated puzzle shape and the block count players must guess."""

    blocks: tuple[Point, ...]
    answer: int
    fallback: bool = False
    attempts: int = 0
    config: GeneratorConfig = field(default_factory=GeneratorConfig, compare=False, repr=False)

    @classmethod
    def from_points(
        cls,
        points: Iterable[Point],
        *,
        config: GeneratorConfig,
        fallback: bool = False,
        attempts: int = 0,
    ) -> GeneratedShape:
        blocks = tuple(points)
        return cls(blocks=blocks, answer=len(blocks), fallback=fallback, attempts=attempts, config=config)

    def to_dict(self) -> dict[str, Any]:
        return {
            "blocks": [{"x": x, "y": y, "z": z} for x, y, z in self.blocks],
            "answer": self.answer,
            "fallback": self.fallback,
            "attempts": self.attempts,
        }
