"""Allow `python -m git_worktree_setup`."""

import sys

from git_worktree_setup.cli.main import main

sys.exit(main())
