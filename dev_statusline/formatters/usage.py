"""Context usage, cost and session formatting utilities."""

from typing import Optional

from rich.text import Text

from dev_statusline.constants import (
    BAR_DANGER_THRESHOLD,
    BAR_EMPTY,
    BAR_FILLED,
    BAR_WARN_THRESHOLD,
    BAR_WIDTH,
    Style,
)
from dev_statusline.formatters.style import rich_style, styled


def filled_cells(percentage: int, width: int = BAR_WIDTH) -> int:
    """
    Number of filled bar cells for a usage percentage.

    Args:
        percentage: Context window usage, 0-100
        width: Total number of cells

    Returns:
        floor(percentage * width / 100), clamped to [0, width]
    """
    return min(max(percentage * width // 100, 0), width)


def context_bar_style(percentage: int) -> Style:
    """Pick the bar style: danger from 90%, warn from 70%, info below."""
    if percentage >= BAR_DANGER_THRESHOLD:
        return Style.DANGER
    if percentage >= BAR_WARN_THRESHOLD:
        return Style.WARN
    return Style.INFO


def context_bar(percentage: int, width: int = BAR_WIDTH) -> Text:
    """
    Render the context usage bar.

    Args:
        percentage: Context window usage, 0-100
        width: Total number of cells

    Returns:
        Styled Text of exactly ``width`` cells
    """
    filled = filled_cells(percentage, width)
    bar = BAR_FILLED * filled + BAR_EMPTY * (width - filled)
    return styled(bar, context_bar_style(percentage))


def format_cost(cost_usd: float) -> str:
    """Format a dollar amount with two decimals, e.g. 1.5 -> "$1.50"."""
    return f"${cost_usd:.2f}"


def format_duration(duration_ms: int) -> str:
    """
    Format a session duration.

    Args:
        duration_ms: Duration in milliseconds

    Returns:
        "1h 2m" from one hour, "2m 5s" from one minute, otherwise "45s"
    """
    seconds = max(duration_ms, 0) // 1000
    if seconds >= 3600:
        return f"{seconds // 3600}h {(seconds % 3600) // 60}m"
    if seconds >= 60:
        return f"{seconds // 60}m {seconds % 60}s"
    return f"{seconds}s"


def format_lines_changed(added: int, removed: int) -> Optional[Text]:
    """Format "+added -removed", or None when nothing changed."""
    if added <= 0 and removed <= 0:
        return None
    text = Text()
    text.append(f"+{added}", style=rich_style(Style.INFO))
    text.append(" ")
    text.append(f"-{removed}", style=rich_style(Style.DANGER))
    return text
