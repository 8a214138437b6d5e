"""Archive extraction for verified aqua release artifacts.

Only regular files are materialized. Members that would land outside the
destination directory (absolute paths, ``..`` segments) abort extraction.
"""

from __future__ import annotations

import re
import shutil
import tarfile
import zipfile
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Callable, Dict

from setup_aqua.bootstrap.errors import ExtractionFailedError, PermissionSetFailedError
from setup_aqua.core.logging import get_logger

LOGGER = get_logger(__name__)

EXECUTABLE_MODE = 0o755

# Windows drive prefix such as "C:"
_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:")


class ArchiveKind(str, Enum):
    """Archive formats used by aqua releases."""

    TAR_GZ = "tar.gz"
    ZIP = "zip"

    @property
    def extension(self) -> str:
        return self.value


def _safe_target(dest_dir: Path, member_name: str, archive_path: Path) -> Path:
    """Map an archive member name to a path confined to ``dest_dir``.

    Raises:
        ExtractionFailedError: If the member escapes the destination.
    """
    normalized = member_name.replace("\\", "/")
    pure = PurePosixPath(normalized)
    if pure.is_absolute() or ".." in pure.parts or _DRIVE_PATTERN.match(normalized):
        raise ExtractionFailedError(str(archive_path), "unsafe path in archive", member=member_name)

    root = dest_dir.resolve()
    target = (root / Path(*pure.parts)).resolve()
    if not target.is_relative_to(root):
        raise ExtractionFailedError(str(archive_path), "path traversal detected", member=member_name)
    return target


def _write_member(source, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "wb") as out:
        shutil.copyfileobj(source, out)


def _extract_tarball(archive_path: Path, dest_dir: Path) -> None:
    """Extract regular files from a .tar.gz archive."""
    with tarfile.open(archive_path, "r:gz") as tar:
        for member in tar:
            if member.isdir():
                continue
            if not member.isfile():
                LOGGER.debug(f"Skipping non-regular archive member: {member.name}")
                continue
            target = _safe_target(dest_dir, member.name, archive_path)
            source = tar.extractfile(member)
            if source is None:
                continue
            with source:
                _write_member(source, target)


def _extract_zip(archive_path: Path, dest_dir: Path) -> None:
    """Extract regular files from a .zip archive."""
    with zipfile.ZipFile(archive_path, "r") as zf:
        for info in zf.infolist():
            if info.is_dir():
                continue
            target = _safe_target(dest_dir, info.filename, archive_path)
            with zf.open(info) as source:
                _write_member(source, target)


_EXTRACTORS: Dict[ArchiveKind, Callable[[Path, Path], None]] = {
    ArchiveKind.TAR_GZ: _extract_tarball,
    ArchiveKind.ZIP: _extract_zip,
}


def extract_archive(
    archive_path: Path,
    dest_dir: Path,
    kind: ArchiveKind,
    binary_name: str,
) -> Path:
    """Extract an archive and locate the binary at its root.

    Args:
        archive_path: Verified archive to unpack.
        dest_dir: Directory to extract into (created if missing).
        kind: Archive format.
        binary_name: Expected file name of the binary inside the archive.

    Returns:
        Path to the extracted binary.

    Raises:
        ExtractionFailedError: If the archive is corrupt, unsafe, or lacks
            the binary.
    """
    LOGGER.debug(f"Extracting {archive_path.name} to {dest_dir}")
    dest_dir.mkdir(parents=True, exist_ok=True)

    try:
        _EXTRACTORS[kind](archive_path, dest_dir)
    except ExtractionFailedError:
        raise
    except (tarfile.TarError, zipfile.BadZipFile, EOFError, OSError) as e:
        raise ExtractionFailedError(str(archive_path), str(e)) from e

    binary_path = dest_dir / binary_name
    if not binary_path.is_file():
        raise ExtractionFailedError(
            str(archive_path), "binary not found in archive", member=binary_name
        )
    return binary_path


def make_executable(path: Path) -> None:
    """Set mode 0755 on an extracted binary.

    Raises:
        PermissionSetFailedError: If the mode cannot be changed.
    """
    try:
        path.chmod(EXECUTABLE_MODE)
    except OSError as e:
        raise PermissionSetFailedError(str(path), str(e)) from e
