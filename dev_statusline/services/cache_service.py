"""Cache service for the most recent git status record."""
import os
import tempfile
import time
from pathlib import Path
from typing import Optional, Union

from dev_statusline.constants import CACHE_FILE, CACHE_TTL_SECONDS
from dev_statusline.exceptions import CacheError
from dev_statusline.logging_config import get_logger
from dev_statusline.models.git_status import GitStatus

logger = get_logger(__name__)


class GitStatusCache:
    """Single-record git status cache shared by every invocation on the host.

    The record is refreshed when the file is missing or older than the TTL.
    Concurrent writers are not locked out; the last writer wins.
    """

    def __init__(self, path: Union[str, Path] = CACHE_FILE, ttl: float = CACHE_TTL_SECONDS):
        """Initialize the cache.

        Args:
            path: Location of the cache record
            ttl: Freshness window in seconds
        """
        self.path = Path(path)
        self.ttl = ttl

    def age(self, now: Optional[float] = None) -> Optional[float]:
        """Seconds since the record was last written, or None if there is no record."""
        try:
            mtime = self.path.stat().st_mtime
        except OSError:
            return None
        return (time.time() if now is None else now) - mtime

    def is_stale(self, now: Optional[float] = None) -> bool:
        """Check whether the record is missing or older than the TTL."""
        age = self.age(now)
        if age is None:
            logger.debug(f"No cache file at {self.path}")
            return True
        return age > self.ttl

    def read(self) -> GitStatus:
        """Read the cached record; a missing or unreadable file yields an empty status."""
        try:
            record = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return GitStatus()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read cache: {e}")
            return GitStatus()
        return GitStatus.from_record(record)

    def write(self, status: GitStatus) -> None:
        """Write the record atomically.

        Raises:
            CacheError: If the record could not be written
        """
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Atomic write: write to temp file in the same directory, then rename
            fd, temp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(status.to_record() + "\n")
                f.flush()
            os.replace(temp_path, self.path)
            temp_path = None
            logger.debug(f"Saved git status cache: {status.to_record()}")
        except OSError as e:
            raise CacheError(str(self.path), str(e)) from e
        finally:
            # Clean up temp file if the rename didn't happen
            if temp_path is not None:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass

    def clear(self) -> None:
        """Remove the cache record."""
        try:
            self.path.unlink()
            logger.info("Cache cleared")
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to clear cache: {e}")
