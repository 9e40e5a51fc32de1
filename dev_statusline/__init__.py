"""
dev-statusline - A git-aware two-line terminal statusline
"""

from .__version__ import __version__
from .core import Statusline
from .cli.main import main

__all__ = ["Statusline", "main", "__version__"]
