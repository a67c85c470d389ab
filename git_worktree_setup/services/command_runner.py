"""Running external commands other than git."""

import subprocess
from pathlib import Path
from typing import Sequence, Union

from git_worktree_setup.exceptions import ExternalCommandError
from git_worktree_setup.logging_config import get_logger

logger = get_logger(__name__)


class CommandRunner:
    """Runs a command to completion with output going straight to the terminal."""

    def run(self, command: Sequence[str], cwd: Union[str, Path]) -> None:
        """
        Run `command` in `cwd`.

        Raises:
            ExternalCommandError: the command could not be started or exited nonzero
        """
        logger.info(f"Running: {' '.join(command)} (in {cwd})")
        try:
            completed = subprocess.run(list(command), cwd=str(cwd), check=False)
        except OSError as e:
            raise ExternalCommandError(" ".join(command), command, stderr=str(e)) from e

        if completed.returncode != 0:
            raise ExternalCommandError(" ".join(command), command, completed.returncode)
        logger.debug(f"{command[0]} finished successfully")
