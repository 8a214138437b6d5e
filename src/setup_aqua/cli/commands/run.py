"""Run command implementation.

Runs the whole setup-aqua action. This is also what a bare ``setup-aqua``
does inside a GitHub Actions job.
"""

from __future__ import annotations

from argparse import Namespace
from typing import Any, Dict

from setup_aqua.actions import commands as workflow
from setup_aqua.actions.runner import AquaCommandError, ActionRunner
from setup_aqua.bootstrap.errors import InstallError
from setup_aqua.cli.commands import Command
from setup_aqua.cli.exit_codes import (
    EXIT_BOOTSTRAP_FAILURE,
    EXIT_COMMAND_ERROR,
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
)
from setup_aqua.config.loader import ConfigError, load_inputs
from setup_aqua.core.logging import get_logger

LOGGER = get_logger(__name__)

_OVERRIDE_KEYS = (
    "aqua_version",
    "github_token",
    "working_directory",
    "aqua_opts",
    "policy_allow",
    "skip_install_aqua",
    "enable_aqua_install",
)


def args_to_overrides(args: Namespace) -> Dict[str, Any]:
    """Collect the run flags that were actually given."""
    return {key: getattr(args, key, None) for key in _OVERRIDE_KEYS}


class RunCommand(Command):
    """Runs the setup-aqua action."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "run"

    def execute(self, args: Namespace) -> int:
        """Execute the run command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code: 0 = success, 2 = aqua command failed,
            3 = invalid inputs, 4 = bootstrap failed.
        """
        try:
            inputs = load_inputs(
                config_path=getattr(args, "config", None),
                cli_overrides=args_to_overrides(args),
            )
        except ConfigError as e:
            return self._fail(str(e), EXIT_INVALID_USAGE)

        try:
            ActionRunner(inputs=inputs).run()
        except InstallError as e:
            return self._fail(f"Bootstrap failed [{e.kind}]: {e}", EXIT_BOOTSTRAP_FAILURE)
        except AquaCommandError as e:
            return self._fail(str(e), EXIT_COMMAND_ERROR)

        return EXIT_SUCCESS

    def _fail(self, message: str, exit_code: int) -> int:
        LOGGER.error(message)
        if workflow.is_github_actions():
            workflow.error(message)
        return exit_code
