"""Command-line argument parsing for dev-statusline."""

import argparse
from typing import List, Optional

from dev_statusline.__version__ import __version__
from dev_statusline.constants import BAR_WIDTH, CACHE_FILE, CACHE_TTL_SECONDS, MAX_DIR_LENGTH


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="dev-statusline",
        description="Render a two-line terminal statusline from a JSON snapshot read on stdin",
        epilog="Line 1: user, model, directory and git state. "
        "Line 2: context usage, cost, session duration and lines changed.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output on stderr")
    parser.add_argument("--version", action="version", version=f"dev-statusline {__version__}")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show debug information and write it to ~/.dev-statusline/dev-statusline.log",
    )
    parser.add_argument(
        "--cache-file",
        default=str(CACHE_FILE),
        metavar="PATH",
        help=f"Git status cache file (default: {CACHE_FILE})",
    )
    parser.add_argument(
        "--cache-ttl",
        type=float,
        default=CACHE_TTL_SECONDS,
        metavar="SECONDS",
        help=f"Seconds a cached git status stays fresh (default: {CACHE_TTL_SECONDS:g})",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Query git directly without reading or writing the cache",
    )
    parser.add_argument("--refresh", action="store_true", help="Force a git status cache refresh")
    parser.add_argument("--no-color", action="store_true", help="Print without ANSI styling")
    parser.add_argument(
        "--bar-width",
        type=int,
        default=BAR_WIDTH,
        metavar="N",
        help=f"Context bar width in cells (default: {BAR_WIDTH})",
    )
    parser.add_argument(
        "--max-dir-length",
        type=int,
        default=MAX_DIR_LENGTH,
        metavar="N",
        help=f"Show only the last path segment above this length (default: {MAX_DIR_LENGTH})",
    )

    return parser.parse_args(argv)
