"""Formatting utilities for dev-statusline.

This package provides the pieces the statusline is assembled from,
organized into logical modules:
- style: Semantic style to Rich text conversion
- path: Working directory display
- usage: Context bar, cost, duration and line-change formatting
- git: Branch and change indicator formatting
"""

# Style helpers
from .style import styled, rich_style

# Path formatters
from .path import shorten_path

# Usage formatters
from .usage import (
    context_bar,
    context_bar_style,
    filled_cells,
    format_cost,
    format_duration,
    format_lines_changed,
)

# Git formatters
from .git import format_git_indicators, format_git_segment

__all__ = [
    # Style
    "styled",
    "rich_style",
    # Path
    "shorten_path",
    # Usage
    "context_bar",
    "context_bar_style",
    "filled_cells",
    "format_cost",
    "format_duration",
    "format_lines_changed",
    # Git
    "format_git_indicators",
    "format_git_segment",
]
