"""Logging bootstrap and inspection entry point."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from .config import CONFIG, Config
from .utils.cli.command_parser import parse_command
from .utils.cli.commands import execute

logger = logging.getLogger(__name__)


def configure_logging(config: Config = CONFIG) -> None:
    """Apply the global and per-module log levels from ``config``."""

    numeric_level = getattr(logging, config.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    for module_name, level_str in config.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse ``argv`` as a single slash command, run it and print its output."""

    configure_logging()
    argv = sys.argv[1:] if argv is None else argv
    parsed = parse_command(" ".join(argv) if argv else "/help")
    if parsed is None:
        logger.error("Commands start with '/'. Type /help for available commands.")
        return 2

    lines = execute(parsed.name, parsed.args)
    for line in lines:
        print(line)
    return 0 if lines else 1


if __name__ == "__main__":
    sys.exit(main())
