"""Shared constants for dev-statusline."""

import tempfile
from enum import Enum
from pathlib import Path


class Style(Enum):
    """Semantic styles used when composing the statusline."""

    INFO = "info"
    WARN = "warn"
    DANGER = "danger"
    DIM = "dim"
    BOLD = "bold"
    ACCENT = "accent"


# Terminal styles (Rich style names), resolved to escape sequences at render time
STYLE_MAP = {
    Style.INFO: "green",
    Style.WARN: "yellow",
    Style.DANGER: "red",
    Style.DIM: "dim",
    Style.BOLD: "bold",
    Style.ACCENT: "cyan",
}


# Context bar
BAR_WIDTH = 15
BAR_FILLED = "█"
BAR_EMPTY = "░"
BAR_WARN_THRESHOLD = 70
BAR_DANGER_THRESHOLD = 90

# Directory display
HOME_MARKER = "~"
MAX_DIR_LENGTH = 30

# Git indicator symbols
SYMBOL_STAGED = "+"
SYMBOL_MODIFIED = "~"
SYMBOL_UNTRACKED = "?"

# Segment separators
SEPARATOR = " | "
GAP = "  "

# Snapshot defaults
DEFAULT_MODEL_NAME = "?"

# Git status cache
CACHE_FILE = Path(tempfile.gettempdir()) / "dev-statusline-git-cache"
CACHE_TTL_SECONDS = 5.0
CACHE_FIELD_DELIMITER = "|"
CACHE_FIELD_COUNT = 4

# Log location used in debug mode
LOG_DIR = Path.home() / ".dev-statusline"
LOG_FILE = LOG_DIR / "dev-statusline.log"
