"""Pytest fixtures for dev-statusline tests"""
import io
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest
from rich.console import Console

from dev_statusline.config import Config
from dev_statusline.models.git_status import GitStatus
from dev_statusline.services.cache_service import GitStatusCache
from dev_statusline.services.git_service import GitService


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path_factory):
    """Keep the developer's git config and color preferences out of the tests."""
    global_config = tmp_path_factory.mktemp("gitconfig") / "config"
    global_config.write_text("")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def cache_file(temp_dir):
    """Path of a cache record private to the test."""
    return temp_dir / "git-cache"


@pytest.fixture
def cache(cache_file):
    """Git status cache with the default freshness window."""
    return GitStatusCache(cache_file, ttl=5)


@pytest.fixture
def config(cache_file):
    """Configuration pointing at the test cache."""
    return Config(cache_file=cache_file, cache_ttl=5, color=False)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    # Initialize repository
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    # Create initial commit on main branch
    readme = repo_path / "README.md"
    readme.write_text("# Test Repository\n")
    notes = repo_path / "notes.txt"
    notes.write_text("notes\n")
    repo.index.add(["README.md", "notes.txt"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    yield repo

    # Cleanup
    repo.close()


@pytest.fixture
def dirty_repo(git_repo):
    """Repository with 1 staged, 2 modified and 3 untracked files."""
    repo_path = Path(git_repo.working_dir)

    (repo_path / "staged.txt").write_text("staged\n")
    git_repo.index.add(["staged.txt"])

    (repo_path / "README.md").write_text("# Changed\n")
    (repo_path / "notes.txt").write_text("changed notes\n")

    for name in ("a.txt", "b.txt", "c.txt"):
        (repo_path / name).write_text("untracked\n")

    return git_repo


@pytest.fixture
def mock_git_service():
    """Create a mock GitService reporting a dirty feature branch."""
    service = Mock(spec=GitService)
    service.get_user_name = Mock(return_value="jane")
    service.collect_status = Mock(
        return_value=GitStatus(branch="feature/x", staged=2, modified=1, untracked=3)
    )
    return service


@pytest.fixture
def mock_git_factory(mock_git_service):
    """Factory handing out the mock git service for any directory."""
    return Mock(return_value=mock_git_service)


@pytest.fixture
def snapshot_data():
    """A complete snapshot payload as the host sends it."""
    return {
        "model": {"display_name": "Opus"},
        "workspace": {"current_dir": "/work/app", "project_dir": "/work/app"},
        "context_window": {"used_percentage": 48.7},
        "cost": {
            "total_cost_usd": 1.5,
            "total_duration_ms": 125000,
            "total_lines_added": 120,
            "total_lines_removed": 14,
        },
        "version": "1.0.3",
    }


@pytest.fixture
def render_ansi():
    """Render Rich text to ANSI the way the CLI prints it."""

    def render(text, end=""):
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            force_terminal=True,
            color_system="standard",
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )
        console.print(text, end=end)
        return buffer.getvalue()

    return render
