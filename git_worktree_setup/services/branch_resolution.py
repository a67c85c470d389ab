"""Branch resolution strategy selection."""

from typing import Optional

from git_worktree_setup.logging_config import get_logger
from git_worktree_setup.models.worktree import BranchStrategy

logger = get_logger(__name__)


def resolve_strategy(branch: str, source_branch: Optional[str], refs) -> BranchStrategy:
    """
    Pick how the worktree gets its branch.

    Priority: existing local branch, then remote-tracking branch, then the
    given source branch, then the current HEAD.

    Args:
        branch: Name of the branch the worktree will check out
        source_branch: Branch to base a brand-new branch on, if any
        refs: Object providing has_local_branch(name) and has_remote_branch(name)

    Returns:
        The selected BranchStrategy
    """
    if refs.has_local_branch(branch):
        strategy = BranchStrategy.LOCAL_BRANCH
    elif refs.has_remote_branch(branch):
        strategy = BranchStrategy.REMOTE_TRACKING
    elif source_branch:
        strategy = BranchStrategy.FROM_SOURCE
    else:
        strategy = BranchStrategy.FROM_HEAD

    logger.info(f"Branch strategy for {branch}: {strategy.value}")
    return strategy


def describe_strategy(
    strategy: BranchStrategy, branch: str, source_branch: Optional[str] = None, remote_name: str = "origin"
) -> str:
    """Success message printed after the worktree was created."""
    if strategy is BranchStrategy.LOCAL_BRANCH:
        return f"Created worktree from existing local branch: {branch}"
    if strategy is BranchStrategy.REMOTE_TRACKING:
        return f"Created worktree tracking remote branch: {remote_name}/{branch}"
    if strategy is BranchStrategy.FROM_SOURCE:
        return f"Created worktree with new branch '{branch}' based on '{source_branch}'"
    return f"Created worktree with new branch: {branch}"
