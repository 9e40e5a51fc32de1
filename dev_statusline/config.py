"""Configuration handling for dev-statusline"""

from dataclasses import dataclass, field
from pathlib import Path

from dev_statusline.constants import (
    BAR_WIDTH,
    CACHE_FILE,
    CACHE_TTL_SECONDS,
    MAX_DIR_LENGTH,
)


@dataclass
class Config:
    """Configuration for dev-statusline with validation."""

    # Git status cache
    cache_file: Path = field(default_factory=lambda: CACHE_FILE)
    cache_ttl: float = CACHE_TTL_SECONDS
    use_cache: bool = True
    refresh: bool = False  # Force refresh, ignore cache freshness

    # Rendering
    color: bool = True
    bar_width: int = BAR_WIDTH
    max_dir_length: int = MAX_DIR_LENGTH

    # Diagnostics
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_cache_file()
        self._validate_cache_ttl()
        self._validate_bar_width()
        self._validate_max_dir_length()

    def _validate_cache_file(self):
        """Validate cache_file and normalize it to a Path."""
        if not str(self.cache_file).strip():
            raise ValueError("cache_file cannot be empty")
        self.cache_file = Path(self.cache_file).expanduser()

    def _validate_cache_ttl(self):
        """Validate cache_ttl is not negative."""
        if self.cache_ttl < 0:
            raise ValueError(f"cache_ttl cannot be negative, got {self.cache_ttl}")

    def _validate_bar_width(self):
        """Validate bar_width is positive."""
        if self.bar_width <= 0:
            raise ValueError(f"bar_width must be positive, got {self.bar_width}")

    def _validate_max_dir_length(self):
        """Validate max_dir_length is positive."""
        if self.max_dir_length <= 0:
            raise ValueError(f"max_dir_length must be positive, got {self.max_dir_length}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "cache_file": str(self.cache_file),
            "cache_ttl": self.cache_ttl,
            "use_cache": self.use_cache,
            "refresh": self.refresh,
            "color": self.color,
            "bar_width": self.bar_width,
            "max_dir_length": self.max_dir_length,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "cache_file",
            "cache_ttl",
            "use_cache",
            "refresh",
            "color",
            "bar_width",
            "max_dir_length",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
