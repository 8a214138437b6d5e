"""
Bootstrap module for installing aqua.

This module handles:
- Platform detection (OS + architecture)
- Locating the pinned release artifact and its checksum
- Secure download and SHA-256 verification
- Archive extraction
- Self-update of the extracted binary to the requested version
"""

from setup_aqua.bootstrap.artifact import Artifact, locate
from setup_aqua.bootstrap.checksums import BOOTSTRAP_VERSION, CHECKSUMS
from setup_aqua.bootstrap.errors import (
    ChecksumMismatchError,
    DownloadFailedError,
    ExtractionFailedError,
    InstallError,
    NoChecksumError,
    PermissionSetFailedError,
    SelfUpdateFailedError,
    UnsupportedPlatformError,
    VersionQueryFailedError,
)
from setup_aqua.bootstrap.installer import BootstrapInstaller, InstallResult, install
from setup_aqua.bootstrap.paths import resolve_bin_dir, resolve_install_path
from setup_aqua.bootstrap.platform import PlatformInfo, get_platform_info

__all__ = [
    "Artifact",
    "BOOTSTRAP_VERSION",
    "BootstrapInstaller",
    "CHECKSUMS",
    "ChecksumMismatchError",
    "DownloadFailedError",
    "ExtractionFailedError",
    "InstallError",
    "InstallResult",
    "NoChecksumError",
    "PermissionSetFailedError",
    "PlatformInfo",
    "SelfUpdateFailedError",
    "UnsupportedPlatformError",
    "VersionQueryFailedError",
    "get_platform_info",
    "install",
    "locate",
    "resolve_bin_dir",
    "resolve_install_path",
]
