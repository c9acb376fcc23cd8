"""
Main entry point for asciirunner.

Loads settings, configures logging and runs one session on the selected
frontend: the curses terminal or the pygame simulator window.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config.settings import Settings, get_settings
from .core.errors import ConfigurationError, ResourceExhaustedError
from .core.events import Event, EventBus, EventType
from .game.loop import GameLoop, RunResult

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_file: Path | None = None, console: bool = True) -> None:
    """Configure logging.

    The terminal frontend owns the screen, so it logs to the file only.
    Calling this again replaces the handlers of the previous call.
    """
    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler())
    if log_file is not None:
        # Truncate on each run for fresh logs
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )

    # Reduce noise from per-frame modules
    logging.getLogger("asciirunner.core.state").setLevel(logging.INFO)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="asciirunner",
        description="Jump over obstacles in a scrolling ASCII landscape.",
    )
    parser.add_argument("--width", type=int, help="viewport width in columns")
    parser.add_argument("--height", type=int, help="viewport height in rows")
    parser.add_argument("--seed", type=int, help="RNG seed (default: time-derived)")
    parser.add_argument("--delay", type=int, dest="frame_delay_ms", help="base frame delay in ms")
    parser.add_argument("--frontend", choices=["terminal", "simulator"])
    parser.add_argument("--curve", choices=["ramp", "checkpoints"], help="difficulty curve")
    parser.add_argument("--debug", action="store_true", default=None, help="verbose logging")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return settings with every CLI flag that was given applied on top."""
    update = {}
    for name in ("width", "height", "seed", "frame_delay_ms", "frontend", "debug"):
        value = getattr(args, name)
        if value is not None:
            update[name] = value
    if args.curve is not None:
        update["difficulty"] = settings.difficulty.model_copy(update={"curve": args.curve})
    return settings.model_copy(update=update)


def log_gameplay_events(event_bus: EventBus) -> None:
    """Mirror notable gameplay events into the log."""

    def on_event(event: Event) -> None:
        logger.debug(f"{event.type.name} {event.data}")

    for event_type in (
        EventType.JUMP_STARTED,
        EventType.OBSTACLE_SPAWNED,
        EventType.OBSTACLE_CLEARED,
        EventType.DIFFICULTY_CHANGED,
    ):
        event_bus.subscribe(event_type, on_event)


def run_terminal(settings: Settings) -> RunResult:
    """Run one session in the terminal via curses."""
    import curses

    from .hardware.clock import SystemClock
    from .hardware.terminal import TerminalDisplay, TerminalKeyboard

    config = settings.to_game_config()

    def session(stdscr: "curses.window") -> RunResult:
        display = TerminalDisplay(stdscr, config.width, config.height)
        keys = TerminalKeyboard(stdscr)
        event_bus = EventBus()
        log_gameplay_events(event_bus)
        loop = GameLoop(config, display, keys, SystemClock(), event_bus=event_bus)
        return loop.run()

    return curses.wrapper(session)


def run_simulator(settings: Settings) -> RunResult:
    """Run one session in the pygame simulator window."""
    from .simulator.window import SimulatorWindow

    config = settings.to_game_config()
    window = SimulatorWindow(config.width, config.height)
    try:
        event_bus = EventBus()
        log_gameplay_events(event_bus)
        loop = GameLoop(config, window, window, window, event_bus=event_bus)
        return loop.run()
    finally:
        window.close()


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    args = parse_args(argv)
    try:
        settings = apply_overrides(get_settings(), args)
    except ValidationError as e:
        print(f"asciirunner: invalid settings\n{e}", file=sys.stderr)
        sys.exit(2)

    setup_logging(
        settings.debug,
        log_file=settings.log_file,
        console=settings.is_simulator,
    )
    logger.info(f"asciirunner starting ({settings.frontend})")

    try:
        # Fail before a frontend takes over the screen
        settings.to_game_config().validate()
        if settings.is_simulator:
            result = run_simulator(settings)
        else:
            result = run_terminal(settings)
    except (ConfigurationError, ResourceExhaustedError) as e:
        logger.error(f"Cannot start: {e}")
        print(f"asciirunner: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return

    print(f"Final score: {result.score} ({result.cause.name.lower()}, seed {result.seed})")
    logger.info("asciirunner stopped")


if __name__ == "__main__":
    main()
