"""Sharing configuration between the main repository and a worktree."""

import shutil

from git_worktree_setup.config import Config
from git_worktree_setup.logging_config import get_logger
from git_worktree_setup.models.worktree import WorktreeTarget
from git_worktree_setup.services.display_service import DisplayService

logger = get_logger(__name__)


class SharedConfigLinker:
    """Symlinks the shared config directory and copies the shared document."""

    def __init__(self, config: Config, display: DisplayService):
        self.config = config
        self.display = display

    def link_shared_dir(self, target: WorktreeTarget) -> bool:
        """Symlink the shared directory so both trees see the same content."""
        name = self.config.shared_config_dir
        source = target.repo_root / name
        link = target.path / name

        if not source.is_dir():
            self.display.warning(f"{name} directory not found in main repository")
            return False
        if link.exists() or link.is_symlink():
            self.display.warning(f"{name} already exists in worktree, not linking")
            return False

        link.symlink_to(source, target_is_directory=True)
        logger.debug(f"Symlinked {link} -> {source}")
        self.display.success(f"Symlinked {name} → {source}")
        return True

    def copy_shared_doc(self, target: WorktreeTarget) -> bool:
        """Copy the shared document; the worktree copy is independent afterwards."""
        name = self.config.shared_doc_file
        source = target.repo_root / name

        if not source.is_file():
            self.display.warning(f"{name} not found in main repository")
            return False

        shutil.copy(source, target.path / name)
        self.display.success(f"Copied {name}")
        return True
