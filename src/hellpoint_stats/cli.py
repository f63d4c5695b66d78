from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from . import __version__
from .errors import HellpointStatsError
from .paths import get_save_dir
from .report import format_report, select_save
from .saves import list_save_files, load_saves

logger = logging.getLogger("hellpoint_stats.cli")

# Log level name for the CLI (DEBUG shows the resolved paths and parsed files)
ENV_LOG_LEVEL = "HELLPOINT_STATS_LOG"


def _setup_logging() -> None:
    level_name = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hellpoint-stats",
        description="Print the name, level and playtime of a Hellpoint save",
        epilog=f"hellpoint-stats {__version__}",
    )
    p.add_argument(
        "name",
        nargs="?",
        default=None,
        help=(
            "Character name of the save to show (default: most recently modified save). "
            "Put names starting with '-' after '--', e.g. hellpoint-stats -- -Sister"
        ),
    )
    return p


def run(name: Optional[str] = None) -> str:
    """Locate, load and select a save; return its report line."""
    save_dir = get_save_dir()
    files = list_save_files(save_dir)
    saves = load_saves(files)
    return format_report(select_save(saves, name))


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging()

    try:
        line = run(args.name)
    except HellpointStatsError as e:
        logger.debug("Aborting", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
