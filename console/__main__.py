import argparse
import logging
import sys

from config import config
from console.app import ConsoleApp
from core.game import DeckExhausted
from logging_utils import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play blackjack against the dealer")
    parser.add_argument("--chips", type=int, default=config.game.starting_chips)
    parser.add_argument("--bet", type=int, default=config.game.default_bet, help="Default bet")
    parser.add_argument("--log-level", default=config.logging.level)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    app = ConsoleApp(starting_chips=args.chips, default_bet=args.bet)
    try:
        return app.run()
    except DeckExhausted:
        logger.exception("Round aborted")
        return 1
    except (EOFError, KeyboardInterrupt):
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
