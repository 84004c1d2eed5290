"""Main entry point for the console Twenty-One game."""

from random import Random

from config import AppConfig, config
from twentyone.game import TwentyOneGame
from twentyone.logging_utils import get_logger, setup_logging
from console_ui.console import Console
from console_ui.renderer import GOODBYE_MESSAGE, ConsoleRenderer

NAME_PROMPT = "What's your name?"

logger = get_logger(__name__)


def build_game(console: Console, app_config: AppConfig = config) -> TwentyOneGame:
    """Ask for the player's name and wire a game to the console."""
    name = console.ask_open(NAME_PROMPT, app_config.rules.dealer_name)
    rng = Random(app_config.seed) if app_config.seed is not None else None

    game = TwentyOneGame(name, console, rules=app_config.rules, rng=rng)
    ConsoleRenderer(console).attach(game.events)
    return game


def main(console: Console | None = None, app_config: AppConfig = config) -> int:
    """Entry point for the console UI."""
    setup_logging(app_config.log_level)
    console = console or Console(clear_screen=app_config.clear_screen)

    try:
        console.clear()
        game = build_game(console, app_config)
        game.start()
    except (KeyboardInterrupt, EOFError):
        logger.debug("Input closed, leaving the game")
        console.blank_line()
        console.display(GOODBYE_MESSAGE)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
