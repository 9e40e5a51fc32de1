"""Tests for Config"""
from pathlib import Path

import pytest

from dev_statusline.config import Config
from dev_statusline.constants import CACHE_FILE


class TestConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Test default values."""
        config = Config()
        assert config.cache_file == CACHE_FILE
        assert config.cache_ttl == 5
        assert config.use_cache is True
        assert config.color is True
        assert config.bar_width == 15
        assert config.max_dir_length == 30

    def test_cache_file_normalized(self):
        """Test that string paths become Paths with ~ expanded."""
        config = Config(cache_file="~/statusline-cache")
        assert isinstance(config.cache_file, Path)
        assert config.cache_file == Path.home() / "statusline-cache"

    @pytest.mark.parametrize("kwargs", [
        {"cache_ttl": -1},
        {"bar_width": 0},
        {"max_dir_length": 0},
        {"cache_file": " "},
    ])
    def test_invalid_values(self, kwargs):
        """Test that invalid values are rejected."""
        with pytest.raises(ValueError):
            Config(**kwargs)

    def test_zero_ttl_allowed(self):
        """Test that a zero TTL is valid."""
        assert Config(cache_ttl=0).cache_ttl == 0

    def test_dict_round_trip(self, cache_file):
        """Test to_dict and from_dict."""
        config = Config(cache_file=cache_file, cache_ttl=1.5, color=False)
        restored = Config.from_dict(config.to_dict())
        assert restored == config

    def test_from_dict_ignores_unknown_keys(self):
        """Test that unknown keys are dropped."""
        config = Config.from_dict({"bar_width": 20, "theme": "dark"})
        assert config.bar_width == 20
        assert config.get("theme") is None
        assert config.get("bar_width") == 20
