"""Platform detection for the aqua bootstrap.

Detects OS and architecture to determine which aqua release artifact to
download.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from typing import Optional

from setup_aqua.bootstrap.errors import UnsupportedPlatformError

# Supported operating systems (lowercase)
SUPPORTED_OS = frozenset({"darwin", "linux", "windows"})

# Supported architectures (normalized)
SUPPORTED_ARCH = frozenset({"amd64", "arm64"})

# OS normalization map (platform.system() and Node-style names)
_OS_MAP = {
    "darwin": "darwin",
    "linux": "linux",
    "windows": "windows",
    "win32": "windows",
}

# Architecture normalization map
_ARCH_MAP = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "arm64": "arm64",
    "aarch64": "arm64",
}


def normalize_os(system: str) -> Optional[str]:
    """Normalize an operating system name.

    Args:
        system: Raw OS string, e.g. from platform.system().

    Returns:
        Normalized OS name or None if unknown.
    """
    return _OS_MAP.get(system.lower())


def normalize_arch(machine: str) -> Optional[str]:
    """Normalize architecture string to standard form.

    Args:
        machine: Raw architecture string from platform.machine()

    Returns:
        Normalized architecture string or None if unknown.
    """
    return _ARCH_MAP.get(machine.lower())


def detect_os() -> str:
    """Detect the current operating system.

    Returns:
        Lowercase OS name (darwin, linux, windows).

    Raises:
        UnsupportedPlatformError: If the OS is not supported.
    """
    system = platform.system()
    normalized = normalize_os(system)
    if normalized is None:
        raise UnsupportedPlatformError("os", system, SUPPORTED_OS)
    return normalized


def detect_arch() -> str:
    """Detect the current CPU architecture.

    Returns:
        Normalized architecture string (amd64 or arm64).

    Raises:
        UnsupportedPlatformError: If the architecture is not supported.
    """
    machine = platform.machine()
    normalized = normalize_arch(machine)
    if normalized is None:
        raise UnsupportedPlatformError("arch", machine, SUPPORTED_ARCH)
    return normalized


@dataclass(frozen=True)
class PlatformInfo:
    """Information about the current platform.

    Attributes:
        os: Operating system (darwin, linux, windows).
        arch: CPU architecture (amd64, arm64).
    """

    os: str
    arch: str

    @property
    def is_windows(self) -> bool:
        return self.os == "windows"

    def is_supported(self) -> bool:
        """Check if this platform is supported."""
        return self.os in SUPPORTED_OS and self.arch in SUPPORTED_ARCH

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"


def get_platform_info() -> PlatformInfo:
    """Detect and return current platform information.

    Returns:
        PlatformInfo with detected OS and architecture.

    Raises:
        UnsupportedPlatformError: If the platform is not supported.
    """
    return PlatformInfo(os=detect_os(), arch=detect_arch())
