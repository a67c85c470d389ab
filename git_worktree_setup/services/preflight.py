"""Preflight checks: repository location and worktree target path."""

import os
from pathlib import Path
from typing import Optional

from git_worktree_setup.config import Config
from git_worktree_setup.constants import WORKTREE_BASE_SUFFIX
from git_worktree_setup.exceptions import PreconditionError, WorktreeExistsError
from git_worktree_setup.logging_config import get_logger
from git_worktree_setup.models.worktree import WorktreeTarget

logger = get_logger(__name__)


def default_worktree_base(repo_root: Path) -> Path:
    """`<repo>/../<repo-name>.worktrees`"""
    return repo_root.parent / f"{repo_root.name}{WORKTREE_BASE_SUFFIX}"


def configured_base(config: Config, repo_root: Path) -> Path:
    """Base directory as configured, not yet created or resolved."""
    if config.worktree_base:
        return Path(os.path.expanduser(config.worktree_base))
    return default_worktree_base(repo_root)


def prepare_target(config: Config, repo_root: Path, cwd: Optional[Path] = None) -> WorktreeTarget:
    """
    Create the base directory and compute the absolute worktree path.

    Relative bases are taken relative to `cwd` (default: the working directory).

    Raises:
        PreconditionError: the base directory cannot be created
        WorktreeExistsError: the target path is already taken
    """
    if not config.branch:
        raise PreconditionError("Branch name must be resolved before preflight")

    base_dir = configured_base(config, repo_root)
    if not base_dir.is_absolute():
        base_dir = (cwd or Path.cwd()) / base_dir

    try:
        base_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PreconditionError(f"Cannot create worktree base directory {base_dir}: {e}") from e

    base_dir = base_dir.resolve()
    target = WorktreeTarget.from_base(repo_root, base_dir, config.branch)
    logger.info(f"Worktree target: {target.path}")

    if target.path.exists() or target.path.is_symlink():
        raise WorktreeExistsError(str(target.path))

    return target
