"""Version information for dev-statusline."""

__version__ = "0.1.0"
