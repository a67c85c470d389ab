"""Environment file seeding for new worktrees."""

import shutil
from pathlib import Path
from typing import List

from git_worktree_setup.config import Config
from git_worktree_setup.constants import TITLE_COMMENT
from git_worktree_setup.logging_config import get_logger
from git_worktree_setup.models.worktree import WorktreeTarget
from git_worktree_setup.services.display_service import DisplayService

logger = get_logger(__name__)


def title_lines(title_variable: str, branch: str) -> str:
    """Block appended to the worktree's environment file."""
    return f"\n{TITLE_COMMENT}\n{title_variable}={branch}\n"


class EnvironmentSeeder:
    """Copies environment files from the main repository into a worktree."""

    def __init__(self, config: Config, display: DisplayService):
        self.config = config
        self.display = display

    def candidate_files(self, repo_root: Path) -> List[Path]:
        """Environment files to copy, primary first, each at most once."""
        candidates: List[Path] = []
        for name in (self.config.env_file, self.config.env_local_file):
            path = repo_root / name
            if path.is_file():
                candidates.append(path)

        for path in sorted(repo_root.glob(self.config.env_variant_pattern)):
            if path.is_file() and path not in candidates:
                candidates.append(path)
        return candidates

    def seed(self, target: WorktreeTarget) -> List[str]:
        """
        Copy environment files and append the title variable.

        Returns:
            Names of the files that were copied
        """
        repo_root = target.repo_root
        if not (repo_root / self.config.env_file).is_file():
            self.display.warning(f"{self.config.env_file} not found in main repository")

        copied = []
        for source in self.candidate_files(repo_root):
            shutil.copy(source, target.path / source.name)
            logger.debug(f"Copied {source} -> {target.path / source.name}")
            self.display.success(f"Copied {source.name}")
            copied.append(source.name)

        if not copied:
            self.display.warning(f"No {self.config.env_file} files found to copy")

        self.append_title(target)
        return copied

    def append_title(self, target: WorktreeTarget) -> None:
        """Append the title variable to the environment file, creating it if needed."""
        env_path = target.path / self.config.env_file
        with open(env_path, "a", encoding="utf-8") as f:
            f.write(title_lines(self.config.title_variable, target.branch))
        self.display.success(
            f"Set {self.config.title_variable}={target.branch} in {self.config.env_file}"
        )
