"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested values use a double underscore, e.g. ``RUNNER_JUMP__RISE_FRAMES=6``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..game.loop import GameConfig


class JumpSettings(BaseModel):
    """Jump arc, in frames."""

    rise_frames: int = Field(default=8, ge=1)
    hover_frames: int = Field(default=6, ge=0)


class ObstacleSettings(BaseModel):
    """Spawn gaps between obstacle passes, in frames."""

    min_gap: int = Field(default=20, ge=0)
    max_gap: int = Field(default=60, ge=0)
    first_gap: int | None = Field(default=None, ge=0)


class DifficultySettings(BaseModel):
    """Score and difficulty progression."""

    curve: Literal["ramp", "checkpoints"] = "ramp"
    score_step: int = Field(default=2, ge=0)
    max_difficulty: int = Field(default=20, ge=0)

    # Ramp
    ramp_slope: int = Field(default=20, ge=0)
    score_ceiling: int = Field(default=4000, gt=0)

    # Checkpoints
    checkpoints: list[int] = Field(default=[200, 500, 1000, 2000, 4000])
    delay_step_ms: int = Field(default=3, ge=0)
    min_delay_ms: int = Field(default=10, ge=0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="RUNNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Environment
    frontend: Literal["terminal", "simulator"] = "terminal"
    debug: bool = False
    log_file: Path = Path("asciirunner.log")

    # Viewport and pacing. Minimum sizes are checked when the game starts.
    width: int = 80
    height: int = 32
    frame_delay_ms: int = Field(default=25, ge=0)
    seed: int | None = None
    player_column: int = 8

    # Nested settings
    jump: JumpSettings = Field(default_factory=JumpSettings)
    obstacle: ObstacleSettings = Field(default_factory=ObstacleSettings)
    difficulty: DifficultySettings = Field(default_factory=DifficultySettings)

    @property
    def is_simulator(self) -> bool:
        """Check if the pygame window frontend is selected."""
        return self.frontend == "simulator"

    def to_game_config(self) -> GameConfig:
        """Flatten into the dataclass the game loop consumes."""
        return GameConfig(
            width=self.width,
            height=self.height,
            frame_delay_ms=self.frame_delay_ms,
            seed=self.seed,
            player_column=self.player_column,
            rise_frames=self.jump.rise_frames,
            hover_frames=self.jump.hover_frames,
            min_gap=self.obstacle.min_gap,
            max_gap=self.obstacle.max_gap,
            first_gap=self.obstacle.first_gap,
            score_step=self.difficulty.score_step,
            curve=self.difficulty.curve,
            max_difficulty=self.difficulty.max_difficulty,
            ramp_slope=self.difficulty.ramp_slope,
            score_ceiling=self.difficulty.score_ceiling,
            checkpoints=list(self.difficulty.checkpoints),
            delay_step_ms=self.difficulty.delay_step_ms,
            min_delay_ms=self.difficulty.min_delay_ms,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
