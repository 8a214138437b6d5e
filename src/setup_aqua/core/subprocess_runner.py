"""Subprocess runner for the aqua binary.

Output of long-running commands (``update-aqua``, ``aqua i``) is passed
through to the job log as it is produced; short queries capture it instead.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Mapping, Optional, Union

from setup_aqua.core.logging import get_logger

LOGGER = get_logger(__name__)


def format_command(cmd: List[str]) -> str:
    return " ".join(str(part) for part in cmd)


def run_command(
    cmd: List[str],
    cwd: Optional[Union[str, Path]] = None,
    env: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
    capture_output: bool = False,
) -> subprocess.CompletedProcess:
    """Run a command and wait for it to finish.

    Args:
        cmd: Command and arguments to run.
        cwd: Working directory for the command.
        env: Full environment for the child (defaults to the current one).
        timeout: Timeout in seconds (default: none).
        capture_output: Capture stdout/stderr as text instead of
            inheriting the parent's streams.

    Returns:
        CompletedProcess; a non-zero return code is not raised.

    Raises:
        subprocess.TimeoutExpired: If the command times out.
        OSError: If the command cannot be started.
    """
    LOGGER.info(format_command(cmd))
    return subprocess.run(
        [str(part) for part in cmd],
        capture_output=capture_output,
        text=True,
        encoding="utf-8",
        errors="replace",
        cwd=str(cwd) if cwd is not None else None,
        env=dict(env) if env is not None else None,
        timeout=timeout,
        check=False,
    )
