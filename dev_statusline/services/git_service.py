"""Git operations service"""
import os
from typing import Optional

# Without a git binary, importing GitPython would fail; queries degrade instead
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

import git  # noqa: E402

from dev_statusline.exceptions import GitOperationError
from dev_statusline.logging_config import get_logger
from dev_statusline.models.git_status import GitStatus

logger = get_logger(__name__)

# Keep git from refreshing the index (and taking its lock) on read-only queries
GIT_ENVIRONMENT = {"GIT_OPTIONAL_LOCKS": "0"}


class GitService:
    """Read-only Git queries for a working directory."""

    def __init__(self, path: str):
        """Initialize the service.

        Args:
            path: Directory to query; it does not have to be a repository root
        """
        self.path = path

    def _get_git(self) -> Optional[git.Git]:
        """Get a git command wrapper running in the directory, or None if it doesn't exist."""
        if not self.path or not os.path.isdir(self.path):
            return None
        cmd = git.Git(self.path)
        cmd.update_environment(**GIT_ENVIRONMENT)
        return cmd

    def run(self, operation: str, *args: str) -> str:
        """Run a git subcommand in the directory.

        Args:
            operation: Subcommand in GitPython form, e.g. "rev_parse"
            *args: Arguments passed through to git

        Returns:
            Command output with the trailing newline stripped

        Raises:
            GitOperationError: If the directory is missing or git fails
        """
        cmd = self._get_git()
        if cmd is None:
            raise GitOperationError(operation, self.path, "directory does not exist")
        try:
            return getattr(cmd, operation)(*args)
        except git.exc.GitCommandError as e:
            stderr = (e.stderr or "").strip()
            message = f"exit {e.status}: {stderr}" if stderr else f"exit {e.status}"
            raise GitOperationError(operation, self.path, message) from e
        except (git.exc.GitError, OSError) as e:
            raise GitOperationError(operation, self.path, str(e)) from e

    def _run(self, operation: str, *args: str) -> Optional[str]:
        """Run a git subcommand, returning None on failure."""
        try:
            return self.run(operation, *args)
        except GitOperationError as e:
            logger.debug(str(e))
            return None

    def _count_lines(self, operation: str, *args: str) -> int:
        output = self._run(operation, *args)
        if not output:
            return 0
        return len(output.splitlines())

    def get_user_name(self) -> str:
        """Get the configured user.name for the directory (includeIf rules apply)."""
        return (self._run("config", "user.name") or "").strip()

    def is_work_tree(self) -> bool:
        """Check whether the directory is inside a git working tree."""
        return (self._run("rev_parse", "--is-inside-work-tree") or "").strip() == "true"

    def get_branch(self) -> str:
        """Get the current branch name, or the abbreviated commit id when detached."""
        branch = self._run("symbolic_ref", "--short", "HEAD")
        if not branch:
            branch = self._run("rev_parse", "--short", "HEAD")
        return (branch or "").strip()

    def count_staged(self) -> int:
        """Count files with changes staged for the next commit."""
        return self._count_lines("diff", "--cached", "--numstat")

    def count_modified(self) -> int:
        """Count tracked files with unstaged changes."""
        return self._count_lines("diff", "--numstat")

    def count_untracked(self) -> int:
        """Count untracked files, honoring ignore rules."""
        return self._count_lines("ls_files", "--others", "--exclude-standard")

    def collect_status(self) -> GitStatus:
        """Collect branch and change counts; never raises.

        Returns:
            GitStatus with an empty branch when the directory is not a working tree
        """
        if not self.is_work_tree():
            logger.debug(f"{self.path or '<none>'} is not inside a git working tree")
            return GitStatus()

        status = GitStatus(
            branch=self.get_branch(),
            staged=self.count_staged(),
            modified=self.count_modified(),
            untracked=self.count_untracked(),
        )
        logger.debug(f"Collected git status for {self.path}: {status}")
        return status
