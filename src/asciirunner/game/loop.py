"""
Game loop driver.

Each frame runs in a fixed order:

    1. render the buffer
    2. scroll left and regenerate the trailing column
    3. clear the dynamic band
    4. poll input, start a jump if grounded
    5. advance the jump
    6. count down or paint and move the obstacle
    7. collision-gated player draw
    8. score, difficulty, sleep, reset cursor

Scrolling and clearing come before any painting so entities are never
shifted or erased after they are drawn.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
import logging
import random
import time

from ..core.errors import ConfigurationError
from ..core.events import EventBus, EventType
from ..core.state import JumpState
from ..graphics.framebuffer import FrameBuffer
from ..hardware.base import Clock, Display, Key, KeyInput
from .difficulty import CheckpointCurve, DifficultyCurve, RampCurve, ScoreKeeper
from .obstacle import Obstacle, check_gap_range
from .player import Player
from .viewport import Viewport

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Startup parameters for one session."""
    width: int = 80
    height: int = 32
    frame_delay_ms: int = 25
    seed: int | None = None

    # Player
    player_column: int = 8
    rise_frames: int = 8
    hover_frames: int = 6

    # Obstacle spawn gaps, in frames
    min_gap: int = 20
    max_gap: int = 60
    first_gap: int | None = None

    # Score and difficulty
    score_step: int = 2
    curve: str = "ramp"
    max_difficulty: int = 20
    ramp_slope: int = 20
    score_ceiling: int = 4000
    checkpoints: list[int] = field(default_factory=lambda: [200, 500, 1000, 2000, 4000])
    delay_step_ms: int = 3
    min_delay_ms: int = 10

    def build_curve(self) -> DifficultyCurve:
        if self.curve == "ramp":
            return RampCurve(self.max_difficulty, self.ramp_slope, self.score_ceiling)
        if self.curve == "checkpoints":
            return CheckpointCurve(
                self.max_difficulty,
                self.checkpoints,
                delay_step_ms=self.delay_step_ms,
                min_delay_ms=self.min_delay_ms,
            )
        raise ConfigurationError(f"Unknown difficulty curve: {self.curve}")

    def validate(self) -> None:
        """
        Check every startup parameter without allocating a session.

        Raises:
            ConfigurationError: on the first parameter that cannot be played
        """
        viewport = Viewport(self.width, self.height)
        viewport.validate_column(self.player_column)
        viewport.validate_jump(self.rise_frames, self.hover_frames)
        check_gap_range(self.min_gap, self.max_gap)
        ScoreKeeper(self.build_curve(), step=self.score_step)


class EndCause(Enum):
    """Why a run ended."""
    COLLISION = auto()
    QUIT = auto()
    FRAME_LIMIT = auto()


@dataclass
class RunResult:
    """Outcome of a finished run."""
    score: int
    frames: int
    difficulty: int
    cause: EndCause
    seed: int

    @property
    def collided(self) -> bool:
        return self.cause is EndCause.COLLISION


@dataclass
class GameState:
    """Everything that changes during a session, owned by the loop."""
    viewport: Viewport
    buffer: FrameBuffer
    player: Player
    obstacle: Obstacle
    scorer: ScoreKeeper
    rng: random.Random
    seed: int
    frame: int = 0
    game_over: bool = False
    end_cause: EndCause | None = None

    @classmethod
    def create(cls, config: GameConfig) -> "GameState":
        """
        Validate the configuration and build a fresh session.

        Raises:
            ConfigurationError: viewport, jump or column do not fit
            ResourceExhaustedError: the buffer could not be allocated
        """
        viewport = Viewport(config.width, config.height)
        player = Player(
            viewport,
            config.player_column,
            config.rise_frames,
            config.hover_frames,
        )

        seed = config.seed if config.seed is not None else time.time_ns()
        rng = random.Random(seed)

        buffer = viewport.create_buffer(rng)
        obstacle = Obstacle(
            viewport,
            config.min_gap,
            config.max_gap,
            rng,
            first_gap=config.first_gap,
        )
        scorer = ScoreKeeper(config.build_curve(), step=config.score_step)

        return cls(
            viewport=viewport,
            buffer=buffer,
            player=player,
            obstacle=obstacle,
            scorer=scorer,
            rng=rng,
            seed=seed,
        )

    def result(self) -> RunResult:
        return RunResult(
            score=self.scorer.score,
            frames=self.frame,
            difficulty=self.scorer.difficulty,
            cause=self.end_cause or EndCause.FRAME_LIMIT,
            seed=self.seed,
        )


class GameLoop:
    """
    Drives a session at a fixed cadence until the player collides.

    The loop is the only writer of the game state. Sleep is the only
    suspension point and game over is only checked between frames.
    """

    def __init__(
        self,
        config: GameConfig,
        display: Display,
        keys: KeyInput,
        clock: Clock,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config
        self.display = display
        self.keys = keys
        self.clock = clock
        self.event_bus = event_bus or EventBus()

        self.state = GameState.create(config)
        self.state.player.add_state_listener(self._on_jump_state)
        logger.info(
            f"GameLoop ready: {config.width}x{config.height}, seed={self.state.seed}, "
            f"curve={self.state.scorer.curve.name}"
        )

    def _on_jump_state(self, old: JumpState, new: JumpState) -> None:
        if old is JumpState.GROUNDED:
            self.event_bus.publish(EventType.JUMP_STARTED, frame=self.state.frame)
        elif new is JumpState.GROUNDED:
            self.event_bus.publish(EventType.LANDED, frame=self.state.frame)

    def status_line(self) -> str:
        scorer = self.state.scorer
        return f"SCORE {scorer.score:05d}  LEVEL {scorer.difficulty:02d}"

    @property
    def frame_delay_ms(self) -> int:
        return self.state.scorer.frame_delay(self.config.frame_delay_ms)

    def step(self) -> bool:
        """
        Run one frame.

        Returns:
            True once the session has ended
        """
        state = self.state
        if state.game_over:
            return True

        # 1-3: render, scroll, clear
        self.display.write_frame(state.buffer, self.status_line())
        state.buffer.scroll_left()
        state.buffer.clear_band()

        # 4: input
        key = self.keys.poll_key()
        if key is Key.QUIT:
            logger.info(f"Quit requested at frame {state.frame}")
            self._end(EndCause.QUIT)
            return True
        if key is Key.JUMP:
            state.player.request_jump()

        # 5: jump
        state.player.update()

        # 6: obstacle
        outcome = state.obstacle.step(state.buffer, state.scorer.difficulty)
        if outcome.spawned:
            self.event_bus.publish(EventType.OBSTACLE_SPAWNED, frame=state.frame)
        if outcome.cleared:
            self.event_bus.publish(
                EventType.OBSTACLE_CLEARED, frame=state.frame, next_gap=outcome.next_gap
            )

        # 7: collision-gated draw
        if state.player.try_draw(state.buffer):
            self.event_bus.publish(
                EventType.COLLISION,
                frame=state.frame,
                row=state.player.row,
                column=state.player.column,
            )
            self._end(EndCause.COLLISION)
            return True

        # 8: progression and pacing
        if state.scorer.advance():
            self.event_bus.publish(
                EventType.DIFFICULTY_CHANGED,
                frame=state.frame,
                difficulty=state.scorer.difficulty,
            )
        state.frame += 1
        self.event_bus.publish(EventType.TICK, frame=state.frame, score=state.scorer.score)
        self.clock.sleep_millis(self.frame_delay_ms)
        self.display.reset_cursor()
        return False

    def _end(self, cause: EndCause) -> None:
        self.state.game_over = True
        self.state.end_cause = cause

    def run(self, max_frames: int | None = None) -> RunResult:
        """
        Run frames until the session ends or ``max_frames`` complete.

        The final buffer is written once more with a game-over status.
        """
        state = self.state
        while not self.step():
            if max_frames is not None and state.frame >= max_frames:
                self._end(EndCause.FRAME_LIMIT)
                break

        result = state.result()
        self.display.write_frame(
            state.buffer, f"GAME OVER  {self.status_line()}"
        )
        self.event_bus.publish(
            EventType.GAME_OVER,
            score=result.score,
            frames=result.frames,
            cause=result.cause.name,
        )
        logger.info(
            f"Run ended ({result.cause.name}) at frame {result.frames} "
            f"with score {result.score}"
        )
        return result
