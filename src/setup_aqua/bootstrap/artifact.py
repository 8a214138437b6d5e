"""Release artifact resolution for the pinned aqua bootstrap version."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from setup_aqua.bootstrap.checksums import BOOTSTRAP_VERSION, CHECKSUMS
from setup_aqua.bootstrap.errors import NoChecksumError
from setup_aqua.bootstrap.extract import ArchiveKind
from setup_aqua.bootstrap.platform import PlatformInfo

TOOL_NAME = "aqua"

# Fixed release host; only the pinned version and a computed filename fill it in.
RELEASE_URL_TEMPLATE = "https://github.com/aquaproj/aqua/releases/download/{version}/{filename}"


@dataclass(frozen=True)
class Artifact:
    """A release archive to fetch and verify.

    Attributes:
        filename: Archive file name, e.g. aqua_linux_amd64.tar.gz.
        url: Download URL on the release host.
        expected_digest: Pinned SHA-256 hex digest of the archive.
        kind: Archive format used to pick the extraction strategy.
    """

    filename: str
    url: str
    expected_digest: str
    kind: ArchiveKind


def archive_kind(platform_info: PlatformInfo) -> ArchiveKind:
    return ArchiveKind.ZIP if platform_info.is_windows else ArchiveKind.TAR_GZ


def artifact_filename(platform_info: PlatformInfo) -> str:
    """Return the release archive name for a platform.

    Example: "aqua_linux_amd64.tar.gz", "aqua_windows_arm64.zip"
    """
    extension = archive_kind(platform_info).extension
    return f"{TOOL_NAME}_{platform_info.os}_{platform_info.arch}.{extension}"


def binary_name(platform_info: PlatformInfo) -> str:
    return f"{TOOL_NAME}.exe" if platform_info.is_windows else TOOL_NAME


def construct_download_url(filename: str, version: str = BOOTSTRAP_VERSION) -> str:
    return RELEASE_URL_TEMPLATE.format(version=version, filename=filename)


def locate(
    platform_info: PlatformInfo,
    version: str = BOOTSTRAP_VERSION,
    checksums: Mapping[str, str] = CHECKSUMS,
) -> Artifact:
    """Resolve the download URL and pinned digest for a platform.

    Args:
        platform_info: Target platform.
        version: Bootstrap release tag the checksum table belongs to.
        checksums: Mapping of archive file name to SHA-256 hex digest.

    Returns:
        The artifact to download.

    Raises:
        NoChecksumError: If the table has no digest for the archive.
    """
    filename = artifact_filename(platform_info)
    expected = checksums.get(filename)
    if not expected:
        raise NoChecksumError(filename)
    return Artifact(
        filename=filename,
        url=construct_download_url(filename, version),
        expected_digest=expected,
        kind=archive_kind(platform_info),
    )
