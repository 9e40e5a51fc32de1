"""Services for dev-statusline."""

from .git_service import GitService
from .cache_service import GitStatusCache

__all__ = ["GitService", "GitStatusCache"]
