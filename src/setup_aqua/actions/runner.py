"""The setup-aqua action flow.

Puts aqua's bin directory on PATH, installs aqua unless it is already
available and skipping was requested, then optionally allows a policy and
runs ``aqua i``.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from typing import Callable, Dict, List, MutableMapping, Optional

from setup_aqua.actions import commands
from setup_aqua.bootstrap.installer import BootstrapInstaller, InstallResult
from setup_aqua.bootstrap.paths import resolve_bin_dir
from setup_aqua.bootstrap.platform import detect_os
from setup_aqua.config.models import ActionInputs
from setup_aqua.core.logging import get_logger
from setup_aqua.core.subprocess_runner import format_command, run_command

LOGGER = get_logger(__name__)

# aqua reads this variable for GitHub API access
TOKEN_ENV = "AQUA_GITHUB_TOKEN"

Installer = Callable[[Optional[str]], InstallResult]


class AquaCommandError(Exception):
    """An aqua command run by the action exited unsuccessfully."""

    def __init__(self, command: List[str], exit_code: Optional[int], reason: str = "") -> None:
        self.command = list(command)
        self.exit_code = exit_code
        self.reason = reason
        detail = f"exit code {exit_code}" if exit_code is not None else reason
        super().__init__(f"Command failed: {format_command(self.command)} ({detail})")


@dataclass
class ActionRunner:
    """Runs the action for one set of inputs.

    Attributes:
        inputs: Parsed action inputs.
        environ: Environment to update and pass to aqua (defaults to os.environ).
        installer: Callable performing the bootstrap install (defaults to a
            BootstrapInstaller reading the same environment).
    """

    inputs: ActionInputs
    environ: Optional[MutableMapping[str, str]] = None
    installer: Optional[Installer] = None

    def __post_init__(self) -> None:
        if self.environ is None:
            self.environ = os.environ
        if self.installer is None:
            self.installer = BootstrapInstaller(environ=self.environ).install

    def run(self) -> Optional[InstallResult]:
        """Execute the action.

        Returns:
            The install result, or None if the install was skipped.

        Raises:
            InstallError: If bootstrapping aqua fails.
            AquaCommandError: If ``aqua policy allow`` or ``aqua i`` fails.
        """
        bin_dir = resolve_bin_dir(detect_os(), self.environ)
        commands.add_path(bin_dir, self.environ)
        LOGGER.debug(f"Added {bin_dir} to PATH")

        result = self._install_aqua()

        policy_args = self.inputs.policy_allow_args()
        if policy_args:
            self._run_aqua(policy_args)

        if self.inputs.enable_aqua_install:
            with commands.group("aqua install"):
                self._run_aqua(["i", *self.inputs.aqua_opts])

        return result

    def _install_aqua(self) -> Optional[InstallResult]:
        if self.inputs.skip_install_aqua and self._aqua_available():
            LOGGER.info("[INFO] Installing aqua is skipped")
            return None
        return self.installer(self.inputs.aqua_version)

    def _aqua_available(self) -> bool:
        cmd = [self._aqua_executable(), "--version"]
        try:
            result = run_command(cmd, env=self.environ, capture_output=True)
        except OSError:
            return False
        return result.returncode == 0

    def _aqua_executable(self) -> str:
        return shutil.which("aqua", path=self.environ.get("PATH")) or "aqua"

    def _command_env(self) -> Dict[str, str]:
        env = dict(self.environ)
        if self.inputs.github_token:
            env[TOKEN_ENV] = self.inputs.github_token
        return env

    def _run_aqua(self, args: List[str]) -> None:
        cmd = [self._aqua_executable(), *args]
        try:
            result = run_command(
                cmd,
                cwd=self.inputs.working_directory,
                env=self._command_env(),
            )
        except OSError as e:
            raise AquaCommandError(cmd, None, reason=str(e)) from e

        if result.returncode != 0:
            raise AquaCommandError(cmd, result.returncode)


def run_action(
    inputs: ActionInputs,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Optional[InstallResult]:
    """Run the setup-aqua action for ``inputs``."""
    return ActionRunner(inputs=inputs, environ=environ).run()
