from __future__ import annotations

from block_guess.models import DEFAULT_VIEWS, GeneratorConfig, ViewDir

# Count ranges per cubic board edge; any other edge uses the largest range.
BOARD_COUNT_RANGES: dict[int, tuple[int, int]] = {
    3: (4, 10),
    4: (6, 18),
    5: (8, 26),
}
DEFAULT_BOARD_SIZE = 5


def count_range_for(size: int) -> tuple[int, int]:
    return BOARD_COUNT_RANGES.get(size, BOARD_COUNT_RANGES[DEFAULT_BOARD_SIZE])


def config_for_board_size(size: int, *, max_tries: int = 800) -> GeneratorConfig:
    """Cubic board preset with the count range suited to its edge length."""
    block_count_min, block_count_max = count_range_for(size)
    return GeneratorConfig(
        size_x=size,
        size_y=size,
        size_z=size,
        block_count_min=block_count_min,
        block_count_max=block_count_max,
        views=DEFAULT_VIEWS,
        initial_view=ViewDir.XP,
        fill_occluded_in_initial_view=True,
        max_tries=max_tries,
    )
