"""
git-worktree-setup - Create a seeded git worktree for a development branch
"""

from .__version__ import __version__
from .core import WorktreeSetup
from .cli.main import main

__all__ = ["WorktreeSetup", "main", "__version__"]
