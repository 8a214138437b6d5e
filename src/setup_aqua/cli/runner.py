"""CLI runner orchestration.

This module handles command dispatch and execution for the setup-aqua CLI.
"""

from __future__ import annotations

from argparse import Namespace
from typing import Iterable, Optional

from importlib.metadata import version, PackageNotFoundError

from setup_aqua.actions.commands import is_github_actions
from setup_aqua.cli.arguments import build_parser
from setup_aqua.cli.commands.install import InstallCommand
from setup_aqua.cli.commands.install_path import InstallPathCommand
from setup_aqua.cli.commands.run import RunCommand
from setup_aqua.cli.exit_codes import EXIT_SUCCESS
from setup_aqua.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get setup-aqua version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("setup-aqua")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from setup_aqua import __version__
        return __version__


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        """Initialize CLIRunner with parser and commands."""
        self.parser = build_parser()
        self._version = get_version()
        self.install_cmd = InstallCommand()
        self.install_path_cmd = InstallPathCommand()
        self.run_cmd = RunCommand()

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None

        # Handle top-level --help specially to return 0
        if argv_list and argv_list[0] in ("-h", "--help"):
            self.parser.print_help()
            return EXIT_SUCCESS

        args = self.parser.parse_args(argv_list)

        # Configure logging as early as possible
        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = getattr(args, "command", None)

        if command == "install":
            return self.install_cmd.execute(args)
        elif command == "install-path":
            return self.install_path_cmd.execute(args)
        elif command == "run":
            return self.run_cmd.execute(args)
        elif is_github_actions():
            # Bare invocation from an action step: inputs come from INPUT_*.
            return self.run_cmd.execute(self._default_run_args())
        else:
            self.parser.print_help()
            return EXIT_SUCCESS

    def _default_run_args(self) -> Namespace:
        return self.parser.parse_args(["run"])
