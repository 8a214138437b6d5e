"""setup-aqua command line interface."""

from __future__ import annotations

from typing import Iterable, Optional

from setup_aqua.cli.runner import CLIRunner


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code.
    """
    return CLIRunner().run(argv)


__all__ = ["CLIRunner", "main"]
