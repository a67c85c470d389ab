"""Display and formatting service for setup progress"""
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_worktree_setup.constants import (
    CLI_COLORS,
    HEADER_RULE,
    SYMBOL_ERROR,
    SYMBOL_STEP,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    MessageStyle,
)
from git_worktree_setup.logging_config import get_logger
from git_worktree_setup.models.worktree import WorktreeInfo

console = Console(highlight=False)
logger = get_logger(__name__)


def _styled(style_type: str, text: str) -> str:
    color = CLI_COLORS[style_type]
    return f"[{color}]{text}[/{color}]"


def format_summary(worktree_path: Path, branch: str) -> str:
    """Final instructions as Rich markup."""
    path = escape(str(worktree_path))
    hint = CLI_COLORS[MessageStyle.HINT]
    warn = CLI_COLORS[MessageStyle.WARNING]
    return (
        f"\n[{CLI_COLORS[MessageStyle.SUCCESS]}]Worktree created successfully![/]\n"
        f"\n[{hint}]Location:[/] {path}"
        f"\n[{hint}]Branch:[/]   {escape(branch)}\n"
        f"\n[{warn}]To enter the worktree, run:[/]\n"
        f"\n    cd {path}\n"
        f"\n[{warn}]To list all worktrees:[/]\n"
        f"\n    git worktree list\n"
        f"\n[{warn}]To remove this worktree later:[/]\n"
        f"\n    git worktree remove {path}\n"
    )


class DisplayService:
    """Colored status lines for each pipeline step."""

    def __init__(self, output: Optional[Console] = None):
        self.console = output or console

    def step(self, message: str) -> None:
        self.console.print(_styled(MessageStyle.STEP, f"\n{SYMBOL_STEP} {escape(message)}"))

    def success(self, message: str) -> None:
        self.console.print(_styled(MessageStyle.SUCCESS, f"{SYMBOL_SUCCESS} {escape(message)}"))

    def warning(self, message: str) -> None:
        logger.debug(f"warning: {message}")
        self.console.print(_styled(MessageStyle.WARNING, f"{SYMBOL_WARNING} {escape(message)}"))

    def error(self, message: str) -> None:
        self.console.print(_styled(MessageStyle.ERROR, f"{SYMBOL_ERROR} {escape(message)}"))

    def hint(self, message: str) -> None:
        self.console.print(f"  {escape(message)}")

    def line(self, message: str = "", style_type: Optional[str] = None) -> None:
        text = escape(message)
        self.console.print(_styled(style_type, text) if style_type else text)

    def header(self, title: str, leading_blank: bool = True) -> None:
        rule = _styled(MessageStyle.HEADER, HEADER_RULE)
        if leading_blank:
            self.console.print()
        self.console.print(rule)
        self.console.print(_styled(MessageStyle.HEADER, f"  {escape(title)}"))
        self.console.print(rule)

    def branch_list(self, branches: List[str], limit: int) -> None:
        """Show at most `limit` branch names and how many were left out."""
        self.line("Existing local branches:", MessageStyle.STEP)
        for name in branches[:limit]:
            self.line(f"  {name}")
        if len(branches) > limit:
            self.console.print(
                "  " + _styled(MessageStyle.WARNING, f"... and {len(branches) - limit} more")
            )
        self.line()

    def worktree_list(self, worktrees: List[WorktreeInfo]) -> None:
        self.line("Current worktrees:", MessageStyle.STEP)
        for wt in worktrees:
            self.line(f"  {wt}")
        self.line()

    def summary(self, worktree_path: Path, branch: str) -> None:
        self.header("Setup Complete!")
        self.console.print(format_summary(worktree_path, branch))
