"""CLI startup entrypoint for block-guess."""

from __future__ import annotations

import json

import typer
from rich import print

from block_guess.config import settings
from block_guess.generator import generate_shape
from block_guess.logging_setup import configure_logging
from block_guess.models import GeneratedShape, GeneratorConfig, ViewDir
from block_guess.presets import BOARD_COUNT_RANGES, config_for_board_size
from block_guess.validation import check_shape

app = typer.Typer(help="Block-count puzzle shape generator")


@app.callback()
def main(log_level: str = typer.Option(None, help="Logging level, e.g. DEBUG/INFO/WARNING")) -> None:
    configure_logging(log_level or settings.log_level)


def _build_config(
    *,
    size: int | None,
    size_x: int | None,
    size_y: int | None,
    size_z: int | None,
    count_min: int | None,
    count_max: int | None,
    views: list[str] | None,
    initial_view: str | None,
    fill: bool | None,
    max_tries: int | None,
) -> GeneratorConfig:
    config = config_for_board_size(size, max_tries=settings.max_tries) if size else settings.generator_config()

    overrides: dict[str, object] = {}
    for name, value in (
        ("size_x", size_x),
        ("size_y", size_y),
        ("size_z", size_z),
        ("block_count_min", count_min),
        ("block_count_max", count_max),
        ("fill_occluded_in_initial_view", fill),
        ("max_tries", max_tries),
    ):
        if value is not None:
            overrides[name] = value
    if views:
        overrides["views"] = tuple(views)
    if initial_view:
        overrides["initial_view"] = initial_view

    try:
        return config.with_overrides(**overrides)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _generate(config: GeneratorConfig, seed: int | None) -> GeneratedShape:
    return generate_shape(config, seed=seed if seed is not None else settings.seed)


_VIEW_HELP = f"View direction to satisfy ({'/'.join(view.value for view in ViewDir)}); repeatable"


@app.command("show-config")
def show_config() -> None:
    """Show the effective generator configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "seed": settings.seed,
            "generator": settings.generator_config().to_dict(),
        }
    )


@app.command()
def presets() -> None:
    """List the cubic board presets and their block-count ranges."""
    print({f"{size}x{size}x{size}": {"min": low, "max": high} for size, (low, high) in BOARD_COUNT_RANGES.items()})


@app.command()
def generate(
    size: int = typer.Option(None, help="Cubic board edge; selects a preset count range"),
    size_x: int = typer.Option(None, help="Board size along X"),
    size_y: int = typer.Option(None, help="Board size along Y"),
    size_z: int = typer.Option(None, help="Board size along Z"),
    count_min: int = typer.Option(None, "--min", help="Minimum block count"),
    count_max: int = typer.Option(None, "--max", help="Maximum block count"),
    view: list[str] = typer.Option(None, "--view", help=_VIEW_HELP),
    initial_view: str = typer.Option(None, help="Initial camera view (fill only runs for XP)"),
    fill: bool = typer.Option(None, "--fill/--no-fill", help="Solidify columns hidden in the initial view"),
    max_tries: int = typer.Option(None, help="Attempts before the fallback shape is used"),
    seed: int = typer.Option(None, help="RNG seed for a reproducible shape"),
    as_json: bool = typer.Option(False, "--json", help="Print the shape as JSON"),
) -> None:
    """Generate a shape and print its blocks and answer."""
    config = _build_config(
        size=size,
        size_x=size_x,
        size_y=size_y,
        size_z=size_z,
        count_min=count_min,
        count_max=count_max,
        views=view,
        initial_view=initial_view,
        fill=fill,
        max_tries=max_tries,
    )
    shape = _generate(config, seed)
    if as_json:
        typer.echo(json.dumps(shape.to_dict()))
        return
    print(shape.to_dict())


@app.command()
def check(
    size: int = typer.Option(None, help="Cubic board edge; selects a preset count range"),
    view: list[str] = typer.Option(None, "--view", help=_VIEW_HELP),
    max_tries: int = typer.Option(None, help="Attempts before the fallback shape is used"),
    seed: int = typer.Option(None, help="RNG seed for a reproducible shape"),
) -> None:
    """Generate a shape and report any invariant it violates."""
    config = _build_config(
        size=size,
        size_x=None,
        size_y=None,
        size_z=None,
        count_min=None,
        count_max=None,
        views=view,
        initial_view=None,
        fill=None,
        max_tries=max_tries,
    )
    shape = _generate(config, seed)
    report = check_shape(shape)
    print(
        {
            "answer": shape.answer,
            "fallback": shape.fallback,
            "attempts": shape.attempts,
            "violations": report.violations,
        }
    )
    if not report.ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
