"""Interactive collection of the source branch and new branch name."""

import dataclasses

from git_worktree_setup.config import Config, validate_branch_name
from git_worktree_setup.constants import MessageStyle
from git_worktree_setup.exceptions import (
    EmptyInputError,
    PreconditionError,
    SetupAborted,
    SourceBranchNotFoundError,
)
from git_worktree_setup.logging_config import get_logger
from git_worktree_setup.services.display_service import DisplayService

logger = get_logger(__name__)

AFFIRMATIVE_ANSWERS = {"", "y", "yes"}


class InteractivePrompter:
    """Asks for the missing invocation values and confirms the plan.

    Args:
        repository: Provides local_branches(), worktrees(), current_branch()
            and branch_exists(name)
        terminal: Provides ask(prompt) -> str
        display: DisplayService used for everything that is not a prompt
    """

    def __init__(self, repository, terminal, display: DisplayService):
        self.repository = repository
        self.terminal = terminal
        self.display = display

    def default_source(self, config: Config) -> str:
        """CLI --source, else the checked-out branch, else the fallback name."""
        return (
            config.source_branch
            or self.repository.current_branch()
            or config.fallback_source_branch
        )

    def run(self, config: Config, base_display: str) -> Config:
        """
        Walk through the prompts and return the resolved configuration.

        Args:
            config: Configuration without a branch name
            base_display: Worktree base directory as shown in the summary

        Returns:
            A new Config with branch and source_branch filled in

        Raises:
            SourceBranchNotFoundError: the chosen source branch does not exist
            EmptyInputError: no new branch name was entered
            SetupAborted: the user declined the confirmation
        """
        self.display.header("Git Worktree Setup", leading_blank=False)
        self.display.line()

        self.display.branch_list(self.repository.local_branches(), config.branch_preview_limit)
        self.display.worktree_list(self.repository.worktrees())

        source_branch = self._ask_source_branch(config)
        branch = self._ask_branch_name()

        self.display.line("Summary:", MessageStyle.STEP)
        self.display.line(f"  Source branch: {source_branch}")
        self.display.line(f"  New branch:    {branch}")
        self.display.line(f"  Directory:     {base_display}/{branch}")
        self.display.line()

        answer = self.terminal.ask("Continue? [Y/n] ").strip().lower()
        if answer not in AFFIRMATIVE_ANSWERS:
            logger.info(f"Confirmation declined with answer {answer!r}")
            self.display.line("Aborted.")
            raise SetupAborted()

        try:
            return dataclasses.replace(config, branch=branch, source_branch=source_branch)
        except ValueError as e:
            raise PreconditionError(str(e)) from e

    def _ask_source_branch(self, config: Config) -> str:
        default = self.default_source(config)
        self.display.line("Which branch should the new worktree be based on?", MessageStyle.WARNING)
        self.display.line(f"(Press Enter for default: {default})", MessageStyle.HINT)
        self.display.line()

        source_branch = self.terminal.ask("Source branch: ").strip() or default
        if not self.repository.branch_exists(source_branch):
            raise SourceBranchNotFoundError(source_branch)

        self.display.success(f"Using source branch: {source_branch}")
        self.display.line()
        return source_branch

    def _ask_branch_name(self) -> str:
        self.display.line("Enter the name for the new worktree/branch:", MessageStyle.WARNING)
        self.display.line(
            "(Examples: feature/new-dashboard, bugfix/login-issue, testing)", MessageStyle.HINT
        )
        self.display.line()

        branch = self.terminal.ask("New branch name: ").strip()
        self.display.line()
        if not branch:
            raise EmptyInputError("Branch name")
        try:
            validate_branch_name(branch)
        except ValueError as e:
            raise PreconditionError(str(e)) from e
        return branch
