"""Semantic style helpers."""

from rich.text import Text

from dev_statusline.constants import STYLE_MAP, Style


def rich_style(style: Style) -> str:
    """Map a semantic style to its Rich style name."""
    return STYLE_MAP[style]


def styled(text: str, style: Style) -> Text:
    """Wrap text in a Rich Text span carrying a semantic style."""
    return Text(text, style=rich_style(style))
