"""Git working tree status model"""
from dataclasses import dataclass

from dev_statusline.constants import CACHE_FIELD_COUNT, CACHE_FIELD_DELIMITER


def _parse_count(field: str) -> int:
    try:
        return max(int(field.strip()), 0)
    except ValueError:
        return 0


@dataclass(frozen=True)
class GitStatus:
    """Branch and change counts for a working directory.

    An empty branch means the directory is not inside a working tree.
    """
    branch: str = ""
    staged: int = 0
    modified: int = 0
    untracked: int = 0

    @property
    def in_repo(self) -> bool:
        return bool(self.branch)

    def to_record(self) -> str:
        """Serialize as the pipe-delimited cache record."""
        if not self.branch:
            return CACHE_FIELD_DELIMITER * (CACHE_FIELD_COUNT - 1)
        return CACHE_FIELD_DELIMITER.join(
            [self.branch, str(self.staged), str(self.modified), str(self.untracked)]
        )

    @classmethod
    def from_record(cls, record: str) -> "GitStatus":
        """Parse a cache record; missing or malformed fields fall back to defaults."""
        first_line = record.splitlines()[0] if record else ""
        # Branch names may themselves contain the delimiter
        fields = first_line.rsplit(CACHE_FIELD_DELIMITER, CACHE_FIELD_COUNT - 1)
        fields += [""] * (CACHE_FIELD_COUNT - len(fields))
        branch, staged, modified, untracked = fields[:CACHE_FIELD_COUNT]
        return cls(
            branch=branch.strip(),
            staged=_parse_count(staged),
            modified=_parse_count(modified),
            untracked=_parse_count(untracked),
        )
