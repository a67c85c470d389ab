"""Version information for git-worktree-setup."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("git-worktree-setup")
except PackageNotFoundError:
    # Running from source without an installed distribution
    __version__ = "0.0.0+unknown"
