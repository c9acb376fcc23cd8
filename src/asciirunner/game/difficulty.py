"""Score keeping and difficulty curves."""

from abc import ABC, abstractmethod
import logging

from ..core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class DifficultyCurve(ABC):
    """Maps a score to a difficulty level and a frame delay.

    Implementations must be non-decreasing in score, never negative,
    and saturate at ``max_difficulty``.
    """

    name: str = "base"

    def __init__(self, max_difficulty: int) -> None:
        if max_difficulty < 0:
            raise ConfigurationError("max_difficulty must not be negative")
        self.max_difficulty = max_difficulty

    @abstractmethod
    def level(self, score: int) -> int:
        """Difficulty for a score."""
        ...

    def frame_delay(self, base_ms: int, level: int) -> int:
        """Frame delay at a difficulty level. Constant by default."""
        return base_ms


class RampCurve(DifficultyCurve):
    """Continuous ramp: ``score * slope // score_ceiling``, clamped."""

    name = "ramp"

    def __init__(self, max_difficulty: int, slope: int, score_ceiling: int) -> None:
        super().__init__(max_difficulty)
        if slope < 0 or score_ceiling <= 0:
            raise ConfigurationError("Ramp needs slope >= 0 and score_ceiling > 0")
        self.slope = slope
        self.score_ceiling = score_ceiling

    def level(self, score: int) -> int:
        raw = max(0, score) * self.slope // self.score_ceiling
        return min(self.max_difficulty, raw)


class CheckpointCurve(DifficultyCurve):
    """Discrete steps: one level per score checkpoint reached.

    Each level also shortens the frame delay by ``delay_step_ms``,
    down to ``min_delay_ms``.
    """

    name = "checkpoints"

    def __init__(
        self,
        max_difficulty: int,
        checkpoints: list[int],
        delay_step_ms: int = 0,
        min_delay_ms: int = 0,
    ) -> None:
        super().__init__(max_difficulty)
        if delay_step_ms < 0 or min_delay_ms < 0:
            raise ConfigurationError("Checkpoint delays must not be negative")
        self.checkpoints = sorted(checkpoints)
        self.delay_step_ms = delay_step_ms
        self.min_delay_ms = min_delay_ms

    def level(self, score: int) -> int:
        reached = sum(1 for checkpoint in self.checkpoints if score >= checkpoint)
        return min(self.max_difficulty, reached)

    def frame_delay(self, base_ms: int, level: int) -> int:
        floor = min(base_ms, self.min_delay_ms)
        return max(floor, base_ms - level * self.delay_step_ms)


class ScoreKeeper:
    """Adds the score step every active frame and tracks difficulty."""

    def __init__(self, curve: DifficultyCurve, step: int = 2) -> None:
        if step < 0:
            raise ConfigurationError("Score step must not be negative")
        self.curve = curve
        self.step = step
        self.score = 0
        self.difficulty = curve.level(0)

    def advance(self) -> bool:
        """
        Add one frame's score.

        Returns:
            True if the difficulty level went up
        """
        self.score += self.step
        level = self.curve.level(self.score)
        changed = level != self.difficulty
        if changed:
            logger.info(f"Difficulty {self.difficulty} -> {level} at score {self.score}")
        self.difficulty = level
        return changed

    def frame_delay(self, base_ms: int) -> int:
        return self.curve.frame_delay(base_ms, self.difficulty)
