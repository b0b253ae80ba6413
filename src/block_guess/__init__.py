"""Procedural shape generator for the block-count guessing puzzle."""

from .generator import GenerationState, ShapeGenerator, generate_shape
from .models import GeneratedShape, GeneratorConfig, Point, ViewDir
from .presets import config_for_board_size
from .random_source import RandomSource, make_rng
from .validation import ShapeReport, check_shape, is_connected

__all__ = [
    "GeneratedShape",
    "GenerationState",
    "GeneratorConfig",
    "Point",
    "RandomSource",
    "ShapeGenerator",
    "ShapeReport",
    "ViewDir",
    "check_shape",
    "config_for_board_size",
    "generate_shape",
    "is_connected",
    "make_rng",
]
