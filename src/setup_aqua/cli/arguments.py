"""Argument parser construction for the setup-aqua CLI.

This module builds the argument parser with subcommands:
- setup-aqua install      - Bootstrap aqua and converge it to a version
- setup-aqua install-path - Print where aqua is installed
- setup-aqua run          - Run the full action (install, policy, aqua i)
"""

from __future__ import annotations

import argparse
from pathlib import Path

from setup_aqua.bootstrap.download import DEFAULT_TIMEOUT
from setup_aqua.bootstrap.platform import SUPPORTED_OS


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show setup-aqua version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Prefix log lines with level and logger name.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _build_install_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'install' subcommand parser."""
    install_parser = subparsers.add_parser(
        "install",
        help="Bootstrap aqua for this platform.",
        description=(
            "Download the pinned aqua release, verify its checksum and "
            "let it update itself to the requested version."
        ),
    )
    install_parser.add_argument(
        "--aqua-version",
        dest="aqua_version",
        help="aqua version to converge to (default: aqua's own default).",
    )
    install_parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Download timeout in seconds (default: {DEFAULT_TIMEOUT:g}).",
    )


def _build_install_path_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'install-path' subcommand parser."""
    path_parser = subparsers.add_parser(
        "install-path",
        help="Print the path aqua is installed to.",
        description="Print the aqua install path without installing anything.",
    )
    path_parser.add_argument(
        "--os",
        dest="os_name",
        choices=sorted(SUPPORTED_OS),
        help="Operating system to compute the path for (default: current).",
    )
    path_parser.add_argument(
        "--bin-dir",
        action="store_true",
        help="Print the bin directory instead of the binary path.",
    )


def _build_run_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'run' subcommand parser."""
    run_parser = subparsers.add_parser(
        "run",
        help="Run the setup-aqua action.",
        description=(
            "Install aqua, optionally allow a policy and run 'aqua i'. "
            "Inputs are read from INPUT_* variables, a YAML file and flags."
        ),
    )
    run_parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with action inputs.",
    )
    run_parser.add_argument(
        "--aqua-version",
        dest="aqua_version",
        help="aqua version to install.",
    )
    run_parser.add_argument(
        "--github-token",
        dest="github_token",
        help="Token passed to aqua as AQUA_GITHUB_TOKEN.",
    )
    run_parser.add_argument(
        "--working-directory",
        dest="working_directory",
        help="Directory aqua commands run in.",
    )
    run_parser.add_argument(
        "--aqua-opts",
        dest="aqua_opts",
        help="Options for 'aqua i' (default: -l).",
    )
    run_parser.add_argument(
        "--policy-allow",
        dest="policy_allow",
        help="'true' or a policy file to pass to 'aqua policy allow'.",
    )
    run_parser.add_argument(
        "--skip-install-aqua",
        dest="skip_install_aqua",
        action="store_true",
        default=None,
        help="Skip installing aqua when it is already available.",
    )
    run_parser.add_argument(
        "--no-aqua-install",
        dest="enable_aqua_install",
        action="store_false",
        default=None,
        help="Do not run 'aqua i'.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="setup-aqua",
        description="Securely bootstrap aqua in CI jobs.",
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(dest="command", title="commands")
    _build_install_parser(subparsers)
    _build_install_path_parser(subparsers)
    _build_run_parser(subparsers)

    return parser
