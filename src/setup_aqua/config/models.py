"""Typed action inputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

DEFAULT_AQUA_OPTS = ["-l"]


@dataclass
class ActionInputs:
    """Inputs of the setup-aqua action.

    Attributes:
        aqua_version: Version aqua is converged to (required).
        github_token: Token exported to aqua commands as AQUA_GITHUB_TOKEN.
        enable_aqua_install: Run ``aqua i`` after installing aqua.
        aqua_opts: Extra arguments for ``aqua i``.
        policy_allow: "true" to allow the default policy, or a policy file path.
        skip_install_aqua: Skip the install when aqua is already on PATH.
        working_directory: Directory aqua commands run in.
    """

    aqua_version: str
    github_token: str = ""
    enable_aqua_install: bool = True
    aqua_opts: List[str] = field(default_factory=lambda: list(DEFAULT_AQUA_OPTS))
    policy_allow: Optional[str] = None
    skip_install_aqua: bool = False
    working_directory: Path = field(default_factory=Path.cwd)

    def policy_allow_args(self) -> Optional[List[str]]:
        """Arguments for ``aqua policy allow``, or None when not requested."""
        if not self.policy_allow:
            return None
        args = ["policy", "allow"]
        if self.policy_allow != "true":
            args.append(self.policy_allow)
        return args
