"""Git-related services for git-worktree-setup."""

from .repository import GitRepository, find_repo_root
from .worktrees import WorktreeService, clean_git_stderr, parse_worktree_porcelain, worktree_add_args

__all__ = [
    "GitRepository",
    "WorktreeService",
    "clean_git_stderr",
    "find_repo_root",
    "parse_worktree_porcelain",
    "worktree_add_args",
]
