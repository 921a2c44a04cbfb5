"""Main entry point for a console round of twenty-one."""

import argparse
import sys

from config import GameConfig, load_config
from console_ui.boundary import ConsoleBoundary, IOBoundary, connect
from twentyone.errors import InvariantViolation
from twentyone.game.engine import GameOutcome, TwentyOneGame
from twentyone.game.events import EventType
from twentyone.game.state import GameState
from twentyone.logging_utils import get_logger, setup_logging

log = get_logger("console_ui.main")

EXIT_OK = 0
EXIT_INPUT_CLOSED = 1
EXIT_FATAL = 2

# Events logged at debug level when a round stops on a fatal error
RECENT_EVENTS = 5


def run_round(game: TwentyOneGame, boundary: IOBoundary) -> GameOutcome | None:
    """
    Drive one round from setup to game over.

    The boundary is asked to terminate once the round is over.
    """
    game.setup()

    while not game.is_over:
        if game.state == GameState.INPUT:
            game.prompt()
            game.handle_command(boundary.read_command())
        elif game.state == GameState.CHECKING:
            game.check()
        else:
            raise InvariantViolation(f"Control loop stuck in state {game.state}")

    outcome = game.outcome
    boundary.terminate()
    return outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play one round of twenty-one",
        epilog="Options left out fall back to TWENTYONE_SEED, TWENTYONE_DECKS, "
        "TWENTYONE_ACE_TOKEN and LOG_LEVEL.",
    )
    parser.add_argument("--seed", type=int, help="Seed for the shuffle (default: random)")
    parser.add_argument("--decks", type=int, help="Number of decks in the dealer pile (default 1)")
    parser.add_argument("--ace-token", help="Text shown for aces (default '1')")
    parser.add_argument("--log-level", help="Logging level (default WARNING)")
    return parser


def main(argv: list[str] | None = None, boundary: IOBoundary | None = None) -> int:
    """Command line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_config = load_config()
        game_config = GameConfig(
            num_decks=app_config.game.num_decks if args.decks is None else args.decks,
            seed=app_config.game.seed if args.seed is None else args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    setup_logging("DEBUG" if app_config.debug else args.log_level or app_config.logging.level)

    game = TwentyOneGame(game_config)
    boundary = boundary or ConsoleBoundary()
    connect(game, boundary, ace_token=args.ace_token or app_config.display.ace_token)

    try:
        run_round(game, boundary)
    except InvariantViolation as e:
        log.critical(f"Round stopped: {e}")
        for event in game.events.history[-RECENT_EVENTS:]:
            log.debug(f"Before failure: {event}")
        boundary.report(f"Fatal error: {e}")
        return EXIT_FATAL
    except (EOFError, KeyboardInterrupt):
        log.info("Input closed before the round ended")
        boundary.report("Input closed, round abandoned.")
        return EXIT_INPUT_CLOSED

    log.info(f"Player drew {len(game.events.of_type(EventType.CARD_DRAWN))} cards")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
