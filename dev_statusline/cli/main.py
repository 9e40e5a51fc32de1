"""Command-line entry point for dev-statusline"""

import os
import sys
from typing import List, Optional, TextIO, Tuple

from rich.console import Console
from rich.text import Text

from dev_statusline.config import Config
from dev_statusline.core import Statusline
from dev_statusline.exceptions import SnapshotError, StatuslineError
from dev_statusline.logging_config import get_logger, setup_logging
from dev_statusline.models.snapshot import StatusSnapshot
from dev_statusline.cli.args import parse_args

logger = get_logger(__name__)


def make_console(color: bool = True, file: Optional[TextIO] = None) -> Console:
    """Create the console the statusline is printed through.

    The host reads stdout through a pipe, so terminal mode is forced when
    colors are wanted.
    """
    return Console(
        file=file if file is not None else sys.stdout,
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )


def write_lines(console: Console, lines: Tuple[Text, Text]) -> None:
    """Print both lines; the second one is left unterminated."""
    location, usage = lines
    console.print(location)
    console.print(usage, end="")


def build_config(parsed_args) -> Config:
    """Build config from parsed arguments, falling back to defaults if invalid."""
    # NO_COLOR disables all styling, not just colors
    color = not parsed_args.no_color and not os.environ.get("NO_COLOR")
    try:
        return Config(
            cache_file=parsed_args.cache_file,
            cache_ttl=parsed_args.cache_ttl,
            use_cache=not parsed_args.no_cache,
            refresh=parsed_args.refresh,
            color=color,
            bar_width=parsed_args.bar_width,
            max_dir_length=parsed_args.max_dir_length,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )
    except ValueError as e:
        logger.warning(f"Invalid configuration, using defaults: {e}")
        return Config(
            color=color,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )


def read_snapshot(stream: TextIO) -> StatusSnapshot:
    """Read one snapshot from the stream; undecodable input yields the defaults."""
    try:
        return StatusSnapshot.from_json(stream.read())
    except SnapshotError as e:
        logger.warning(f"{e}; rendering defaults")
        return StatusSnapshot()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read snapshot: {e}; rendering defaults")
        return StatusSnapshot()


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)

    # Setup logging before anything can log
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    config = build_config(parsed_args)
    if config.debug:
        for key, value in config.to_dict().items():
            logger.debug(f"config {key}: {value}")

    console = make_console(color=config.color, file=stdout)
    snapshot = read_snapshot(stdin if stdin is not None else sys.stdin)
    statusline = Statusline(config)

    try:
        lines = statusline.render(snapshot)
    except KeyboardInterrupt:
        return 1
    except StatuslineError as e:
        logger.warning(f"{e}; rendering without git status")
        lines = statusline.render_fallback(snapshot)
    except Exception as e:
        logger.error(f"Error: {e}")
        if config.debug:
            logger.exception("Rendering failed")
        lines = statusline.render_fallback(snapshot)

    write_lines(console, lines)
    return 0


if __name__ == "__main__":
    sys.exit(main())
