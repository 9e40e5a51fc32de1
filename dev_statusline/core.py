"""Core functionality for dev-statusline"""

import os
from typing import Callable, Optional, Tuple, Union

from rich.text import Text

from dev_statusline.config import Config
from dev_statusline.constants import GAP, SEPARATOR, Style
from dev_statusline.exceptions import CacheError
from dev_statusline.formatters import (
    context_bar,
    format_cost,
    format_duration,
    format_git_segment,
    format_lines_changed,
    shorten_path,
    styled,
)
from dev_statusline.logging_config import get_logger
from dev_statusline.models.git_status import GitStatus
from dev_statusline.models.snapshot import StatusSnapshot
from dev_statusline.services.cache_service import GitStatusCache
from dev_statusline.services.git_service import GitService

logger = get_logger(__name__)


class Statusline:
    """Turns a status snapshot plus local git state into two styled lines."""

    def __init__(
        self,
        config: Union[Config, dict, None] = None,
        cache: Optional[GitStatusCache] = None,
        git_service_factory: Callable[[str], GitService] = GitService,
        home: Optional[str] = None,
    ):
        """Initialize Statusline.

        Args:
            config: Configuration dict or Config object
            cache: Git status cache; built from the config when omitted
            git_service_factory: Creates the git service for a directory
            home: Home directory used to shorten paths (defaults to the user's)
        """
        if config is None:
            config = Config()
        elif isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.cache = cache if cache is not None else GitStatusCache(config.cache_file, config.cache_ttl)
        self.git_service_factory = git_service_factory
        self.home = home if home is not None else os.path.expanduser("~")

    def resolve_user(self, snapshot: StatusSnapshot) -> str:
        """Get the git user.name for the snapshot's working directory."""
        if not snapshot.current_dir:
            return ""
        return self.git_service_factory(snapshot.current_dir).get_user_name()

    def resolve_git_status(self, snapshot: StatusSnapshot) -> GitStatus:
        """Get git status for the working directory, going through the cache.

        The cache is refreshed only when it is stale (or a refresh is forced) and
        the working directory is known; otherwise the cached record is reused,
        whichever directory wrote it.
        """
        cwd = snapshot.current_dir

        if not self.config.use_cache:
            return self.git_service_factory(cwd).collect_status() if cwd else GitStatus()

        if cwd and (self.config.refresh or self.cache.is_stale()):
            logger.debug(f"Refreshing git status cache for {cwd}")
            if self.config.refresh:
                # A forced refresh never falls back to the previous record
                self.cache.clear()
            status = self.git_service_factory(cwd).collect_status()
            try:
                self.cache.write(status)
            except CacheError as e:
                logger.warning(f"Failed to save cache: {e}")
                return status
        else:
            logger.debug("Reusing git status cache")

        return self.cache.read()

    def build_location_line(self, snapshot: StatusSnapshot, user: str, git_status: GitStatus) -> Text:
        """Build line 1: user, model, version, directory and git segment."""
        line = Text()
        if user:
            line.append_text(styled(f"@{user}", Style.DIM))
            line.append(GAP)
        line.append_text(styled(f"[{snapshot.model_name}]", Style.BOLD))
        if snapshot.version:
            line.append(" ")
            line.append_text(styled(f"v{snapshot.version}", Style.DIM))
        line.append(GAP)
        line.append(shorten_path(snapshot.current_dir, home=self.home, max_length=self.config.max_dir_length))

        git_segment = format_git_segment(git_status)
        if git_segment is not None:
            line.append(SEPARATOR)
            line.append_text(git_segment)
        return line

    def build_usage_line(self, snapshot: StatusSnapshot) -> Text:
        """Build line 2: context bar, percentage, cost, duration and line changes."""
        pct = snapshot.used_percentage
        line = Text()
        line.append_text(context_bar(pct, self.config.bar_width))
        line.append(f" {pct}%")
        line.append(SEPARATOR)
        line.append_text(styled(format_cost(snapshot.total_cost_usd), Style.WARN))
        line.append(SEPARATOR)
        line.append(format_duration(snapshot.total_duration_ms))

        lines_changed = format_lines_changed(snapshot.lines_added, snapshot.lines_removed)
        if lines_changed is not None:
            line.append(SEPARATOR)
            line.append_text(lines_changed)
        return line

    def render(self, snapshot: StatusSnapshot) -> Tuple[Text, Text]:
        """Render both statusline lines for a snapshot."""
        user = self.resolve_user(snapshot)
        git_status = self.resolve_git_status(snapshot)
        return (
            self.build_location_line(snapshot, user, git_status),
            self.build_usage_line(snapshot),
        )

    def render_fallback(self, snapshot: Optional[StatusSnapshot] = None) -> Tuple[Text, Text]:
        """Render without consulting git or the cache."""
        snapshot = snapshot or StatusSnapshot()
        return (
            self.build_location_line(snapshot, "", GitStatus()),
            self.build_usage_line(snapshot),
        )
