"""Gameplay: viewport, player, obstacle, difficulty and the loop driver."""

from .viewport import Viewport, MIN_WIDTH, MIN_HEIGHT
from .player import Player
from .obstacle import Obstacle, ObstaclePhase, spawn_gap_bounds
from .difficulty import DifficultyCurve, RampCurve, CheckpointCurve, ScoreKeeper
from .loop import GameConfig, GameLoop, GameState, RunResult, EndCause

__all__ = [
    "Viewport",
    "MIN_WIDTH",
    "MIN_HEIGHT",
    "Player",
    "Obstacle",
    "ObstaclePhase",
    "spawn_gap_bounds",
    "DifficultyCurve",
    "RampCurve",
    "CheckpointCurve",
    "ScoreKeeper",
    "GameConfig",
    "GameLoop",
    "GameState",
    "RunResult",
    "EndCause",
]
