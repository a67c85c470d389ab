"""Custom exceptions for git-worktree-setup"""

from typing import Optional, Sequence


class WorktreeSetupError(Exception):
    """Base exception for all git-worktree-setup errors."""

    exit_code = 1


class SetupAborted(WorktreeSetupError):
    """Raised when the user declines the confirmation prompt."""

    exit_code = 0

    def __init__(self, message: str = "Aborted."):
        super().__init__(message)


class UsageError(WorktreeSetupError):
    """Exception raised for malformed command-line arguments."""
    pass


class PreconditionError(WorktreeSetupError):
    """Exception raised when the environment does not allow the setup to proceed."""
    pass


class NotAGitRepositoryError(PreconditionError):
    """Exception raised when no repository root can be discovered."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        super().__init__("Not in a git repository!")


class WorktreeExistsError(PreconditionError):
    """Exception raised when the target worktree directory already exists."""

    def __init__(self, path: str):
        self.path = path
        self.hint = f"To remove it: git worktree remove --force {path}"
        super().__init__(f"Worktree already exists at: {path}")


class SourceBranchNotFoundError(PreconditionError):
    """Exception raised when the chosen source branch is neither local nor remote."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"Source branch '{branch}' does not exist")


class EmptyInputError(PreconditionError):
    """Exception raised when a required prompt receives no answer."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"{field_name} cannot be empty")


class ExternalCommandError(WorktreeSetupError):
    """Exception raised when an external command exits with a failure."""

    def __init__(
        self,
        operation: str,
        command: Optional[Sequence[str]] = None,
        status: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        self.operation = operation
        self.command = list(command) if command else []
        self.status = status
        self.stderr = stderr.strip() if stderr else None

        error_msg = f"Command '{operation}' failed"
        if status is not None:
            error_msg += f" (exit {status})"
        if self.stderr:
            error_msg += f": {self.stderr}"

        super().__init__(error_msg)


class GitOperationError(ExternalCommandError):
    """Exception raised for errors in Git operations."""

    def __init__(
        self,
        operation: str,
        command: Optional[Sequence[str]] = None,
        status: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        super().__init__(f"git {operation}", command, status, stderr)
