from __future__ import annotations

from block_guess.config import Settings


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("BLOCK_GUESS_BOARD_SIZE_X", "3")
    monkeypatch.setenv("BLOCK_GUESS_BLOCK_COUNT_MAX", "9")
    monkeypatch.setenv("BLOCK_GUESS_SEED", "42")
    monkeypatch.setenv("BLOCK_GUESS_FILL_OCCLUDED_IN_INITIAL_VIEW", "false")

    settings = Settings(_env_file=None)
    config = settings.generator_config()

    assert settings.seed == 42
    assert config.size_x == 3
    assert config.block_count_max == 9
    assert not config.fill_occluded_in_initial_view


def test_settings_defaults(monkeypatch) -> None:
    for name in ("BOARD_SIZE_X", "BLOCK_COUNT_MAX", "SEED", "LOG_LEVEL"):
        monkeypatch.delenv(f"BLOCK_GUESS_{name}", raising=False)

    settings = Settings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.seed is None
    assert settings.generator_config().size == (5, 4, 5)
