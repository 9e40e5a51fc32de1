"""Custom exceptions for dev-statusline"""

from typing import Optional


class StatuslineError(Exception):
    """Base exception for all dev-statusline errors."""
    pass


class GitOperationError(StatuslineError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, path: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.path = path
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if path:
            error_msg += f" in '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class SnapshotError(StatuslineError):
    """Exception raised when the status snapshot cannot be decoded."""

    def __init__(self, message: Optional[str] = None):
        self.message = message

        error_msg = "Could not decode status snapshot"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class CacheError(StatuslineError):
    """Exception raised when the git status cache cannot be used."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = f"Cache file '{path}' is unusable"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
