"""Configuration handling for git-worktree-setup"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, Tuple

from git_worktree_setup import constants


def validate_branch_name(branch: str) -> None:
    """Reject branch names that cannot form a directory under the worktree base.

    Raises:
        ValueError: surrounding whitespace, an absolute path or a `..` segment
    """
    if branch != branch.strip():
        raise ValueError(f"branch must not have surrounding whitespace, got '{branch}'")
    if Path(branch).is_absolute() or ".." in Path(branch).parts:
        raise ValueError(f"branch must be a relative name, got '{branch}'")


@dataclass(frozen=True)
class Config:
    """Configuration for a single worktree setup run, validated on creation."""

    # Invocation
    branch: Optional[str] = None
    source_branch: Optional[str] = None
    worktree_base: Optional[str] = None  # None = next to the repository
    skip_install: bool = False

    # Output
    verbose: bool = False
    debug: bool = False

    # Project conventions
    env_file: str = constants.ENV_FILE
    env_local_file: str = constants.ENV_LOCAL_FILE
    env_variant_pattern: str = constants.ENV_VARIANT_PATTERN
    title_variable: str = constants.TITLE_VARIABLE
    shared_config_dir: str = constants.SHARED_CONFIG_DIR
    shared_doc_file: str = constants.SHARED_DOC_FILE

    # Dependency installation
    manifest_file: str = constants.MANIFEST_FILE
    package_manager: str = constants.PACKAGE_MANAGER
    install_args: Tuple[str, ...] = field(default=constants.INSTALL_ARGS)
    generate_script: str = constants.GENERATE_SCRIPT

    # Git
    remote_name: str = constants.DEFAULT_REMOTE
    fallback_source_branch: str = constants.FALLBACK_SOURCE_BRANCH
    branch_preview_limit: int = constants.BRANCH_PREVIEW_LIMIT

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_branch()
        self._validate_worktree_base()
        self._validate_names()
        self._validate_preview_limit()

    @property
    def interactive(self) -> bool:
        """Interactive mode is used whenever no branch name was given."""
        return not self.branch

    def _validate_branch(self):
        if self.branch:
            validate_branch_name(self.branch)

    def _validate_worktree_base(self):
        """Validate worktree_base is not blank when given."""
        if self.worktree_base is not None and not self.worktree_base.strip():
            raise ValueError("worktree_base cannot be empty")

    def _validate_names(self):
        """Validate file and command names are not empty."""
        for name in (
            "env_file",
            "title_variable",
            "manifest_file",
            "package_manager",
            "generate_script",
            "remote_name",
            "fallback_source_branch",
        ):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"{name} cannot be empty")

    def _validate_preview_limit(self):
        """Validate branch_preview_limit is positive."""
        if self.branch_preview_limit <= 0:
            raise ValueError(
                f"branch_preview_limit must be positive, got {self.branch_preview_limit}"
            )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
