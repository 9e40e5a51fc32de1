"""Git branch and change indicator formatting utilities."""

from typing import Optional

from rich.text import Text

from dev_statusline.constants import (
    SYMBOL_MODIFIED,
    SYMBOL_STAGED,
    SYMBOL_UNTRACKED,
    Style,
)
from dev_statusline.formatters.style import rich_style, styled
from dev_statusline.models.git_status import GitStatus


def format_git_indicators(status: GitStatus) -> Text:
    """
    Format change counts as space-separated indicators.

    Args:
        status: Git status to format

    Returns:
        Text such as "+2 ~1 ?3"; counts of zero are left out, so a clean
        tree yields empty Text
    """
    parts = [
        (SYMBOL_STAGED, status.staged, Style.INFO),
        (SYMBOL_MODIFIED, status.modified, Style.WARN),
        (SYMBOL_UNTRACKED, status.untracked, Style.DANGER),
    ]
    indicators = [styled(f"{symbol}{count}", style) for symbol, count, style in parts if count > 0]
    return Text(" ").join(indicators)


def format_git_segment(status: GitStatus) -> Optional[Text]:
    """Format the branch name followed by its indicators, or None outside a repository."""
    if not status.in_repo:
        return None

    segment = Text()
    segment.append(status.branch, style=rich_style(Style.ACCENT))
    indicators = format_git_indicators(status)
    if indicators:
        segment.append(" ")
        segment.append_text(indicators)
    return segment
