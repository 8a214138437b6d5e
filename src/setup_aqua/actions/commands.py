"""GitHub Actions workflow commands.

See https://docs.github.com/actions/using-workflows/workflow-commands-for-github-actions
"""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, MutableMapping, Optional, TextIO

GITHUB_PATH_ENV = "GITHUB_PATH"


def is_github_actions(environ: Optional[MutableMapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get("GITHUB_ACTIONS") == "true"


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, message: str = "", output: Optional[TextIO] = None) -> None:
    out = output or sys.stdout
    out.write(f"::{command}::{_escape_data(message)}\n")
    out.flush()


def error(message: str, output: Optional[TextIO] = None) -> None:
    issue_command("error", message, output)


def warning(message: str, output: Optional[TextIO] = None) -> None:
    issue_command("warning", message, output)


@contextmanager
def group(title: str, output: Optional[TextIO] = None) -> Iterator[None]:
    """Fold everything printed inside the block into a collapsible group."""
    issue_command("group", title, output)
    try:
        yield
    finally:
        issue_command("endgroup", "", output)


def add_path(path: Path, environ: Optional[MutableMapping[str, str]] = None) -> None:
    """Prepend ``path`` to PATH for this process and for later job steps.

    Later steps pick the entry up from the file named by $GITHUB_PATH; when
    not running in GitHub Actions only the current process is affected.
    """
    env = os.environ if environ is None else environ

    github_path = env.get(GITHUB_PATH_ENV)
    if github_path:
        with open(github_path, "a", encoding="utf-8") as f:
            f.write(f"{path}{os.linesep}")

    current = env.get("PATH", "")
    env["PATH"] = f"{path}{os.pathsep}{current}" if current else str(path)
