"""Install-path command implementation."""

from __future__ import annotations

from argparse import Namespace

from setup_aqua.bootstrap.errors import UnsupportedPlatformError
from setup_aqua.bootstrap.paths import resolve_bin_dir, resolve_install_path
from setup_aqua.bootstrap.platform import detect_os
from setup_aqua.cli.commands import Command
from setup_aqua.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from setup_aqua.core.logging import get_logger

LOGGER = get_logger(__name__)


class InstallPathCommand(Command):
    """Prints where aqua is (or will be) installed."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "install-path"

    def execute(self, args: Namespace) -> int:
        os_name = args.os_name
        if os_name is None:
            try:
                os_name = detect_os()
            except UnsupportedPlatformError as e:
                LOGGER.error(str(e))
                return EXIT_INVALID_USAGE

        if args.bin_dir:
            print(resolve_bin_dir(os_name))
        else:
            print(resolve_install_path(os_name))
        return EXIT_SUCCESS
