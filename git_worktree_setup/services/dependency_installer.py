"""Dependency installation and code generation inside a new worktree."""

import json
from pathlib import Path
from typing import List, Optional

from git_worktree_setup.config import Config
from git_worktree_setup.logging_config import get_logger
from git_worktree_setup.services.display_service import DisplayService

logger = get_logger(__name__)


def read_manifest_scripts(manifest_path: Path) -> Optional[dict]:
    """The manifest's `scripts` table, or None if the manifest is missing or unreadable."""
    try:
        with open(manifest_path, encoding="utf-8") as f:
            manifest = json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read {manifest_path}: {e}")
        return None

    if not isinstance(manifest, dict):
        return None
    scripts = manifest.get("scripts")
    return scripts if isinstance(scripts, dict) else {}


class DependencyInstaller:
    """Runs the package manager's install and generate commands."""

    def __init__(self, config: Config, runner, display: DisplayService):
        self.config = config
        self.runner = runner
        self.display = display

    @property
    def install_command(self) -> List[str]:
        return [self.config.package_manager, *self.config.install_args]

    @property
    def generate_command(self) -> List[str]:
        return [self.config.package_manager, "run", self.config.generate_script]

    def install(self, worktree_path: Path) -> bool:
        """Install dependencies if the worktree has a manifest.

        Returns:
            True if the install command ran
        """
        manifest = self.config.manifest_file
        if not (worktree_path / manifest).is_file():
            self.display.warning(
                f"No {manifest} found, skipping {self.config.package_manager} install"
            )
            return False

        self.runner.run(self.install_command, cwd=worktree_path)
        self.display.success(f"{self.config.package_manager} install completed")
        return True

    def has_generate_script(self, worktree_path: Path) -> bool:
        scripts = read_manifest_scripts(worktree_path / self.config.manifest_file)
        return bool(scripts) and self.config.generate_script in scripts

    def generate(self, worktree_path: Path) -> bool:
        """Run the generate script if the manifest declares it.

        Returns:
            True if the generate command ran
        """
        script = self.config.generate_script
        if not self.has_generate_script(worktree_path):
            self.display.warning(
                f"{script} script not found in {self.config.manifest_file}, skipping"
            )
            return False

        self.runner.run(self.generate_command, cwd=worktree_path)
        self.display.success(f"{script} completed")
        return True
