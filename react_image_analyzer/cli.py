"""Command-line entry point for the React image analyzer."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from .config import DEFAULT_PROJECT_PATH, PROGRAM_NAME, VERSION
from .pipeline import run_analysis

logger = logging.getLogger("react_image_analyzer.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Analyze React and image files for accessibility and quality",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_PROJECT_PATH,
        help="Path to React project (default: %(default)s)",
    )
    parser.add_argument("-V", "--version", action="version", version=VERSION)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
        force=True,
    )
    try:
        asyncio.run(run_analysis(args.path))
    except Exception:  # pylint: disable=broad-except
        logger.exception("❌ Analysis failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
