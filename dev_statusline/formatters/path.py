"""Working directory formatting utilities."""

import os
from typing import Optional

from dev_statusline.constants import HOME_MARKER, MAX_DIR_LENGTH


def shorten_path(path: str, home: Optional[str] = None, max_length: int = MAX_DIR_LENGTH) -> str:
    """
    Shorten a directory for display.

    The home directory prefix is replaced with ``~``. If the result is still
    longer than ``max_length``, only the final path segment is kept.

    Args:
        path: Absolute directory path
        home: Home directory (defaults to the current user's)
        max_length: Longest displayed path before collapsing

    Returns:
        Display string, empty if path is empty

    Example:
        "/home/dev/src/app" -> "~/src/app"
    """
    if not path:
        return ""

    if home is None:
        home = os.path.expanduser("~")
    home = home.rstrip("/")

    short = path
    if home and (path == home or path.startswith(home + "/")):
        short = HOME_MARKER + path[len(home):]

    if len(short) > max_length:
        # Trailing slashes would leave an empty final segment
        short = path.rstrip("/").rsplit("/", 1)[-1] or path
    return short
