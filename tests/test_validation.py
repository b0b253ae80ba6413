from __future__ import annotations

from block_guess.models import GeneratedShape, GeneratorConfig
from block_guess.validation import check_points, check_shape, interior_points, is_connected


def test_is_connected() -> None:
    assert is_connected([])
    assert is_connected([(0, 0, 0), (0, 1, 0), (0, 1, 1)])
    # Diagonal contact does not count.
    assert not is_connected([(0, 0, 0), (1, 1, 0)])


def test_interior_points() -> None:
    plus = [(1, 1, 1), (0, 1, 1), (2, 1, 1), (1, 0, 1), (1, 2, 1), (1, 1, 0), (1, 1, 2)]
    assert interior_points(plus) == [(1, 1, 1)]
    assert interior_points(plus[:-1]) == []


def test_check_points_collects_every_violation() -> None:
    config = GeneratorConfig(size_x=3, size_y=1, size_z=3, block_count_min=5, block_count_max=6)
    report = check_points([(0, 0, 0), (1, 0, 0), (2, 0, 0), (1, 0, 1), (0, 0, 5)], config)

    assert not report.ok
    assert report.out_of_bounds == [(0, 0, 5)]
    assert (1, 0, 0) in report.hidden
    assert "shape is not connected" in report.violations


def test_check_shape_passes_valid_shape() -> None:
    config = GeneratorConfig(size_x=3, size_y=1, size_z=1, block_count_min=2, block_count_max=3)
    shape = GeneratedShape.from_points([(0, 0, 0), (1, 0, 0)], config=config)
    assert check_shape(shape).ok


def test_check_shape_flags_wrong_answer() -> None:
    config = GeneratorConfig(size_x=3, size_y=1, size_z=1, block_count_min=1, block_count_max=3)
    shape = GeneratedShape(blocks=((0, 0, 0),), answer=2, config=config)
    assert any("answer" in violation for violation in check_shape(shape).violations)
