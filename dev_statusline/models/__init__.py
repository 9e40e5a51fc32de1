"""Data models for dev-statusline."""

from .snapshot import StatusSnapshot
from .git_status import GitStatus

__all__ = ["StatusSnapshot", "GitStatus"]
