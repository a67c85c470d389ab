"""Worktree data models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class BranchStrategy(Enum):
    """How the new worktree obtains its branch, in priority order."""
    LOCAL_BRANCH = "local-branch"  # Attach to an existing local branch
    REMOTE_TRACKING = "remote-tracking"  # New local branch tracking origin/<branch>
    FROM_SOURCE = "from-source"  # New branch based on the chosen source branch
    FROM_HEAD = "from-head"  # New branch based on the current HEAD


@dataclass(frozen=True)
class WorktreeTarget:
    """Resolved location of the worktree to create."""

    repo_root: Path
    base_dir: Path
    path: Path
    branch: str

    @classmethod
    def from_base(cls, repo_root: Path, base_dir: Path, branch: str) -> "WorktreeTarget":
        """Join the base directory with the branch name; `/` in the branch nests directories."""
        return cls(repo_root=repo_root, base_dir=base_dir, path=base_dir / branch, branch=branch)


@dataclass
class WorktreeInfo:
    """Information about a git worktree."""

    path: str
    branch_name: str
    commit_sha: str
    is_main: bool  # Is this the main working tree?
    is_orphaned: bool  # Directory missing?

    def __str__(self) -> str:
        """String representation of worktree."""
        branch = f"[{self.branch_name}]" if self.branch_name else "(detached HEAD)"
        main_marker = " (main)" if self.is_main else ""
        orphaned_marker = " [orphaned]" if self.is_orphaned else ""
        return f"{self.path}  {self.commit_sha[:7]} {branch}{main_marker}{orphaned_marker}"
