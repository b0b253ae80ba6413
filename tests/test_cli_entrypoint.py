from __future__ import annotations

import importlib
import json

import pytest


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("block_guess.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_generate_json_output() -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from block_guess.main import app

    result = CliRunner().invoke(app, ["generate", "--size", "3", "--seed", "1", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout.strip().splitlines()[-1])
    assert payload["answer"] == len(payload["blocks"])
    assert not payload["fallback"]
    assert 4 <= payload["answer"] <= 10
    assert all(0 <= block[axis] < 3 for block in payload["blocks"] for axis in ("x", "y", "z"))


def test_generate_is_reproducible_with_seed() -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from block_guess.main import app

    runner = CliRunner()
    args = ["generate", "--size-x", "4", "--size-y", "3", "--size-z", "4", "--min", "5", "--max", "9", "--seed", "8", "--json"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)

    assert first.exit_code == 0
    assert first.stdout == second.stdout


def test_generate_rejects_unknown_view() -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from block_guess.main import app

    result = CliRunner().invoke(app, ["generate", "--view", "YP"])

    assert result.exit_code == 2


def test_check_and_presets_commands() -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from block_guess.main import app

    runner = CliRunner()
    check = runner.invoke(app, ["check", "--size", "3", "--seed", "5"])
    assert check.exit_code == 0, check.output
    assert "violations" in check.stdout

    presets = runner.invoke(app, ["presets"])
    assert presets.exit_code == 0
    assert "3x3x3" in presets.stdout

    shown = runner.invoke(app, ["show-config"])
    assert shown.exit_code == 0
    assert "block-guess" in shown.stdout
