"""Worktree operations service for git-worktree-setup."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import git

from git_worktree_setup.exceptions import GitOperationError
from git_worktree_setup.logging_config import get_logger
from git_worktree_setup.models.worktree import BranchStrategy, WorktreeInfo

logger = get_logger(__name__)


def worktree_add_args(
    strategy: BranchStrategy,
    branch: str,
    path: Path,
    source_branch: Optional[str] = None,
    remote_name: str = "origin",
) -> List[str]:
    """Build the arguments of the single `git worktree add` call for a strategy."""
    if strategy is BranchStrategy.LOCAL_BRANCH:
        return ["add", str(path), branch]
    if strategy is BranchStrategy.REMOTE_TRACKING:
        return ["add", "--track", "-b", branch, str(path), f"{remote_name}/{branch}"]
    if strategy is BranchStrategy.FROM_SOURCE:
        if not source_branch:
            raise ValueError("FROM_SOURCE strategy requires a source branch")
        return ["add", "-b", branch, str(path), source_branch]
    return ["add", "-b", branch, str(path)]


def clean_git_stderr(stderr: str) -> str:
    """Drop the `stderr: '...'` wrapper GitPython puts around captured output."""
    stderr = stderr.strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip()
        if len(stderr) >= 2 and stderr[0] == stderr[-1] == "'":
            stderr = stderr[1:-1].strip()
    return stderr


def parse_worktree_porcelain(output: str) -> List[WorktreeInfo]:
    """Parse `git worktree list --porcelain` output.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name
        (blank line between worktrees)
    """
    worktree_list: List[WorktreeInfo] = []
    current_worktree: Dict[str, Any] = {}

    def flush():
        path = current_worktree.get("path", "")
        if path:
            worktree_list.append(
                WorktreeInfo(
                    path=path,
                    branch_name=current_worktree.get("branch", ""),
                    commit_sha=current_worktree.get("HEAD", ""),
                    is_main=not worktree_list,  # First entry is always the main worktree
                    is_orphaned=not os.path.exists(path),
                )
            )
        current_worktree.clear()

    for line in output.split("\n"):
        line = line.strip()

        if not line:
            flush()
            continue

        if line.startswith("worktree "):
            current_worktree["path"] = line.split(" ", 1)[1]
        elif line.startswith("HEAD "):
            current_worktree["HEAD"] = line.split(" ", 1)[1]
        elif line.startswith("branch "):
            branch_ref = line.split(" ", 1)[1]
            if branch_ref.startswith("refs/heads/"):
                current_worktree["branch"] = branch_ref[len("refs/heads/"):]
            else:
                current_worktree["branch"] = ""
        elif line.startswith("detached"):
            current_worktree["branch"] = ""

    # Last entry may lack a trailing blank line
    flush()
    return worktree_list


class WorktreeService:
    """Service for listing and creating git worktrees."""

    def __init__(self, repo_path: str):
        """Initialize the worktree service.

        Args:
            repo_path: Path to the git repository
        """
        self.repo_path = repo_path

    def _get_repo(self):
        """Open the repository at repo_path."""
        return git.Repo(self.repo_path)

    def get_worktree_info(self) -> List[WorktreeInfo]:
        """Get detailed information about all worktrees.

        Returns:
            List of WorktreeInfo objects, empty if the listing fails
        """
        try:
            output = self._get_repo().git.worktree("list", "--porcelain")
        except git.exc.GitCommandError as e:
            logger.debug(f"Could not list worktrees: {e}")
            return []

        worktree_list = parse_worktree_porcelain(output)
        logger.debug(f"Found {len(worktree_list)} worktrees")
        for wt in worktree_list:
            logger.debug(f"  {wt}")
        return worktree_list

    def add_worktree(self, args: Sequence[str]) -> None:
        """Run `git worktree <args>`.

        Raises:
            GitOperationError: if git exits with a failure
        """
        command = ["git", "worktree", *args]
        logger.info(f"Running: {' '.join(command)}")
        try:
            output = self._get_repo().git.worktree(*args)
        except git.exc.GitCommandError as e:
            stderr = (e.stderr if hasattr(e, "stderr") else str(e)) or ""
            status = e.status if isinstance(e.status, int) else None
            raise GitOperationError("worktree add", command, status, clean_git_stderr(stderr)) from e
        if output:
            logger.debug(output)
