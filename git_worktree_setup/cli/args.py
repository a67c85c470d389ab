"""Command-line argument parsing for git-worktree-setup."""

import argparse
from typing import Optional, Sequence

from git_worktree_setup.__version__ import __version__
from git_worktree_setup.constants import USAGE_EXAMPLES
from git_worktree_setup.exceptions import UsageError

PROG = "git-worktree-setup"


class HelpRequested(UsageError):
    """-h/--help was given; the usage is printed and the run fails."""

    def __init__(self):
        super().__init__("")


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser(prog: str = PROG) -> ArgumentParser:
    """Build the argument parser."""
    parser = ArgumentParser(
        prog=prog,
        usage=f"{prog} [branch-name] [options]",
        description=(
            "Create a git worktree for a branch and seed it with environment files, "
            "shared configuration and installed dependencies. "
            "If no branch-name is provided, interactive mode will prompt for input."
        ),
        epilog=USAGE_EXAMPLES.format(prog=prog),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("branch", nargs="?", metavar="branch-name", help="Branch to create or check out")
    parser.add_argument(
        "-s", "--source", metavar="<branch>", help="Source branch to base the new worktree on"
    )
    parser.add_argument(
        "-b",
        "--base",
        metavar="<path>",
        help="Custom worktree base directory (default: ../<repo>.worktrees)",
    )
    parser.add_argument(
        "-n",
        "--no-install",
        action="store_true",
        help="Skip dependency install and the generate step",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"{prog} {__version__}")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None, prog: str = PROG) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Raises:
        UsageError: unknown option, missing option value or more than one branch name
        HelpRequested: -h/--help was given
    """
    parser = build_parser(prog)
    args = parser.parse_args(argv)
    if args.help:
        raise HelpRequested()
    return args
