"""Command-line interface for git-worktree-setup"""

import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from git_worktree_setup.cli.args import PROG, HelpRequested, build_parser, parse_args
from git_worktree_setup.config import Config
from git_worktree_setup.core import Outcome, WorktreeSetup
from git_worktree_setup.exceptions import UsageError, WorktreeExistsError
from git_worktree_setup.logging_config import setup_logging
from git_worktree_setup.services.display_service import DisplayService

console = Console(highlight=False)


def build_config(parsed_args) -> Config:
    """Build the invocation config from parsed arguments."""
    try:
        return Config(
            branch=parsed_args.branch or None,
            source_branch=parsed_args.source or None,
            worktree_base=parsed_args.base,
            skip_install=parsed_args.no_install,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )
    except ValueError as e:
        raise UsageError(str(e)) from e


def main(argv: Optional[Sequence[str]] = None, output: Optional[Console] = None) -> int:
    """Main entry point for the application."""
    out = output or console
    display = DisplayService(out)
    debug = False
    try:
        try:
            parsed_args = parse_args(argv)
            config = build_config(parsed_args)
        except UsageError as e:
            if not isinstance(e, HelpRequested):
                display.error(str(e))
            out.print(build_parser(PROG).format_help(), markup=False, end="")
            return e.exit_code

        debug = config.debug
        setup_logging(verbose=config.verbose, debug=config.debug)

        if config.debug:
            out.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                out.print(f"  {key}: {value}", markup=False)

        result = WorktreeSetup(config, display=display).run()

        if result.outcome is Outcome.FAILED:
            display.error(str(result.error))
            if isinstance(result.error, WorktreeExistsError):
                display.hint(result.error.hint)
        return result.exit_code
    except KeyboardInterrupt:
        out.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        out.print(f"[red]Error: {escape(str(e))}[/red]")
        if debug:
            out.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
