"""Pipeline step services for git-worktree-setup."""
