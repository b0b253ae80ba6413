"""Runtime configuration for block-guess."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from block_guess.models import GeneratorConfig


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="BLOCK_GUESS_", env_file=".env", extra="ignore")

    app_name: str = "block-guess"
    log_level: str = "WARNING"
    board_size_x: int = Field(default=5, description="Board width along X.")
    board_size_y: int = Field(default=4, description="Board height along Y.")
    board_size_z: int = Field(default=5, description="Board depth along Z.")
    block_count_min: int = 6
    block_count_max: int = 14
    max_tries: int = Field(default=800, description="Generation attempts before the fallback shape is used.")
    fill_occluded_in_initial_view: bool = True
    seed: int | None = Field(default=None, description="Fixed RNG seed for reproducible shapes.")

    def generator_config(self) -> GeneratorConfig:
        return GeneratorConfig(
            size_x=self.board_size_x,
            size_y=self.board_size_y,
            size_z=self.board_size_z,
            block_count_min=self.block_count_min,
            block_count_max=self.block_count_max,
            fill_occluded_in_initial_view=self.fill_occluded_in_initial_view,
            max_tries=self.max_tries,
        )


settings = Settings()
