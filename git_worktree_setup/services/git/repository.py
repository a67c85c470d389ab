"""Repository queries and worktree creation for git-worktree-setup."""

from pathlib import Path
from typing import List, Optional, Union

import git

from git_worktree_setup.logging_config import get_logger
from git_worktree_setup.models.worktree import BranchStrategy, WorktreeInfo, WorktreeTarget
from git_worktree_setup.services.git.worktrees import WorktreeService, worktree_add_args

logger = get_logger(__name__)


class GitRepository:
    """The git capabilities the setup pipeline needs.

    Every query opens a fresh `git.Repo`; GitPython repos are lightweight and
    nothing here is cached, so refs created by a previous step are always seen.
    """

    def __init__(self, repo_path: Union[str, Path], remote_name: str = "origin"):
        self.repo_path = str(repo_path)
        self.remote_name = remote_name
        self.worktree_service = WorktreeService(self.repo_path)

    @classmethod
    def discover(cls, start: Union[str, Path, None] = None, remote_name: str = "origin") -> Optional["GitRepository"]:
        """Find the repository containing `start` (default: the working directory).

        Returns:
            GitRepository rooted at the top-level working tree, or None outside a repository
        """
        root = find_repo_root(start)
        if root is None:
            return None
        return cls(root, remote_name=remote_name)

    @property
    def root(self) -> Path:
        return Path(self.repo_path)

    def _get_repo(self):
        return git.Repo(self.repo_path)

    def _ref_exists(self, ref: str) -> bool:
        try:
            self._get_repo().git.show_ref("--verify", "--quiet", ref)
            return True
        except git.exc.GitCommandError:
            return False

    def has_local_branch(self, branch_name: str) -> bool:
        """Check refs/heads/<branch_name>."""
        exists = self._ref_exists(f"refs/heads/{branch_name}")
        logger.debug(f"Local branch {branch_name}: {'found' if exists else 'missing'}")
        return exists

    def has_remote_branch(self, branch_name: str) -> bool:
        """Check refs/remotes/<remote>/<branch_name>."""
        exists = self._ref_exists(f"refs/remotes/{self.remote_name}/{branch_name}")
        logger.debug(
            f"Remote branch {self.remote_name}/{branch_name}: {'found' if exists else 'missing'}"
        )
        return exists

    def branch_exists(self, branch_name: str) -> bool:
        """True when the branch exists locally or as a remote-tracking ref."""
        return self.has_local_branch(branch_name) or self.has_remote_branch(branch_name)

    def local_branches(self) -> List[str]:
        """Local branch names, sorted like `git branch`."""
        return sorted(head.name for head in self._get_repo().heads)

    def current_branch(self) -> Optional[str]:
        """Name of the checked-out branch, or None on a detached HEAD or unborn branch."""
        try:
            return self._get_repo().active_branch.name
        except TypeError:
            return None

    def worktrees(self) -> List[WorktreeInfo]:
        return self.worktree_service.get_worktree_info()

    def start_point(self, source_branch: Optional[str]) -> Optional[str]:
        """Ref to base a new branch on; a source known only on the remote becomes <remote>/<source>."""
        if not source_branch or self.has_local_branch(source_branch):
            return source_branch
        if self.has_remote_branch(source_branch):
            return f"{self.remote_name}/{source_branch}"
        return source_branch

    def create_worktree(
        self,
        target: WorktreeTarget,
        strategy: BranchStrategy,
        source_branch: Optional[str] = None,
    ) -> None:
        """Issue the one `git worktree add` call for the chosen strategy.

        Raises:
            GitOperationError: if git exits with a failure
        """
        args = worktree_add_args(
            strategy, target.branch, target.path, self.start_point(source_branch), self.remote_name
        )
        self.worktree_service.add_worktree(args)


def find_repo_root(start: Union[str, Path, None] = None) -> Optional[Path]:
    """Absolute path of the top-level working tree containing `start`, if any."""
    try:
        repo = git.Repo(start or Path.cwd(), search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
        return None
    try:
        working_tree = repo.working_tree_dir
    finally:
        repo.close()
    if working_tree is None:
        # Bare repository
        return None
    return Path(working_tree).resolve()
