"""Line-based terminal input for the interactive prompts."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from git_worktree_setup.exceptions import PreconditionError


class RichTerminal:
    """Reads answers from the user through a Rich console."""

    def __init__(self, output: Optional[Console] = None):
        self.console = output or Console(highlight=False)

    def ask(self, prompt: str) -> str:
        """Print `prompt` and return the line typed by the user, without the newline."""
        try:
            return self.console.input(escape(prompt))
        except EOFError as e:
            raise PreconditionError("Input stream closed before an answer was given") from e
