"""Shared constants for git-worktree-setup."""

# Project conventions seeded into every new worktree
ENV_FILE = ".env"
ENV_LOCAL_FILE = ".env.local"
ENV_VARIANT_PATTERN = ".env.*"
TITLE_VARIABLE = "WORKTREE_TITLE"
TITLE_COMMENT = "# Worktree browser tab title"
SHARED_CONFIG_DIR = ".claude"
SHARED_DOC_FILE = "CLAUDE.md"

# Dependency installation
MANIFEST_FILE = "package.json"
PACKAGE_MANAGER = "npm"
INSTALL_ARGS = ("install", "--legacy-peer-deps")
GENERATE_SCRIPT = "baml:generate"

# Git
DEFAULT_REMOTE = "origin"
FALLBACK_SOURCE_BRANCH = "main"
WORKTREE_BASE_SUFFIX = ".worktrees"
BRANCH_PREVIEW_LIMIT = 10

# Exported for a calling shell session
WORKTREE_PATH_ENV = "WORKTREE_PATH"


# Symbol constants
SYMBOL_STEP = "▶"
SYMBOL_SUCCESS = "✓"
SYMBOL_WARNING = "⚠"
SYMBOL_ERROR = "✗"
HEADER_RULE = "═" * 60


# Message styles (Rich color names)
class MessageStyle:
    """Style types for status lines."""

    STEP = "step"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    HEADER = "header"
    HINT = "hint"


CLI_COLORS = {
    MessageStyle.STEP: "blue",
    MessageStyle.SUCCESS: "green",
    MessageStyle.WARNING: "yellow",
    MessageStyle.ERROR: "red",
    MessageStyle.HEADER: "cyan",
    MessageStyle.HINT: "cyan",
}


USAGE_EXAMPLES = """\
Examples:
  {prog}                                    # Interactive mode
  {prog} feature/new-dashboard              # Create from current branch
  {prog} feature/new-dashboard -s main      # Create from main branch
  {prog} bugfix/login-issue --source develop
  {prog} testing --no-install
"""
