"""Data models for git-worktree-setup."""

from .worktree import BranchStrategy, WorktreeInfo, WorktreeTarget

__all__ = ["BranchStrategy", "WorktreeInfo", "WorktreeTarget"]
