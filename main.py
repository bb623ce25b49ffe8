#!/usr/bin/env python3

import argparse
import sys

from heroforge.game.config import GameConfig
from heroforge.game.game import Game


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Create a Human and an Orc hero family and run their actions"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write the factory, action and event log to stderr after the run"
    )
    args = parser.parse_args(argv)

    config = GameConfig(enable_debug_logging=args.debug)

    game = Game(config)

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130

    if config.enable_debug_logging:
        game.log_manager.write(sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
