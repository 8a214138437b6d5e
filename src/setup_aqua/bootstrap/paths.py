"""Path resolution for the installed aqua binary.

The bootstrap never writes to these locations itself; ``aqua update-aqua``
places the binary there. They are computed for reporting and for adding the
bin directory to PATH.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

# Environment variable overriding the whole aqua root directory
AQUA_ROOT_DIR_ENV = "AQUA_ROOT_DIR"

# XDG data home, used as the parent of the default root on Unix-like hosts
XDG_DATA_HOME_ENV = "XDG_DATA_HOME"

# Directory name under the platform data directory
DEFAULT_ROOT_DIR_NAME = "aquaproj-aqua"

# Shell snippets printed for operators who want to reproduce the PATH entry
_INSTALL_DIR_TEMPLATES = {
    "windows": "${AQUA_ROOT_DIR:-$HOME/AppData/Local/aquaproj-aqua}/bin",
    "default": "${AQUA_ROOT_DIR:-${XDG_DATA_HOME:-$HOME/.local/share}/aquaproj-aqua}/bin",
}


def get_aqua_root(os_name: str, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Get the aqua root directory.

    Resolution order:
    1. AQUA_ROOT_DIR environment variable (if set)
    2. windows: ~/AppData/Local/aquaproj-aqua
    3. others: ${XDG_DATA_HOME:-~/.local/share}/aquaproj-aqua

    Args:
        os_name: Normalized OS name (darwin, linux, windows).
        environ: Environment to read overrides from (defaults to os.environ).

    Returns:
        Path to the aqua root directory.
    """
    env = os.environ if environ is None else environ

    aqua_root = env.get(AQUA_ROOT_DIR_ENV)
    if aqua_root:
        return Path(aqua_root)

    if os_name == "windows":
        return Path.home() / "AppData" / "Local" / DEFAULT_ROOT_DIR_NAME

    xdg_data_home = env.get(XDG_DATA_HOME_ENV)
    data_home = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
    return data_home / DEFAULT_ROOT_DIR_NAME


def resolve_bin_dir(os_name: str, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Directory holding the aqua binary and the shims it installs."""
    return get_aqua_root(os_name, environ) / "bin"


def resolve_install_path(os_name: str, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Get the final location of the aqua binary after self-update.

    Args:
        os_name: Normalized OS name (darwin, linux, windows).
        environ: Environment to read overrides from (defaults to os.environ).

    Returns:
        Path to aqua (or aqua.exe on windows).
    """
    name = "aqua.exe" if os_name == "windows" else "aqua"
    return resolve_bin_dir(os_name, environ) / name


def install_dir_template(os_name: str) -> str:
    """Shell expression that evaluates to the bin directory."""
    return _INSTALL_DIR_TEMPLATES["windows" if os_name == "windows" else "default"]
