from __future__ import annotations

import json
import logging
import sys

from .config import build_settings, parse_args
from .errors import LabyrinthError
from .game import generate_maze
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else logging.WARNING)

    try:
        settings = build_settings(args)
        maze = generate_maze(settings)
    except LabyrinthError as exc:
        logger.error("Maze generation failed: %s", exc)
        return 2

    if args.ascii:
        print(maze.ascii())
    else:
        # Print JSON summary so it can be diffed across runs
        print(json.dumps(maze.to_dict(), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
