"""Install command implementation."""

from __future__ import annotations

from argparse import Namespace

from setup_aqua.actions import commands as workflow
from setup_aqua.bootstrap.errors import InstallError
from setup_aqua.bootstrap.installer import BootstrapInstaller
from setup_aqua.cli.commands import Command
from setup_aqua.cli.exit_codes import EXIT_BOOTSTRAP_FAILURE, EXIT_SUCCESS
from setup_aqua.core.logging import get_logger

LOGGER = get_logger(__name__)


class InstallCommand(Command):
    """Bootstraps aqua and converges it to the requested version."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "install"

    def execute(self, args: Namespace) -> int:
        installer = BootstrapInstaller(timeout=args.timeout)
        try:
            installer.install(args.aqua_version)
        except InstallError as e:
            LOGGER.error(f"Bootstrap failed [{e.kind}]: {e}")
            if workflow.is_github_actions():
                workflow.error(str(e))
            return EXIT_BOOTSTRAP_FAILURE
        return EXIT_SUCCESS
