"""Error taxonomy for the aqua bootstrap installer.

Every failure of an install attempt is raised as a subclass of
``InstallError``. Each subclass carries a stable ``kind`` identifier plus the
structured context a caller needs to log a precise diagnostic.
"""

from __future__ import annotations

from typing import Optional, Sequence


class InstallError(Exception):
    """Base class for bootstrap installer failures."""

    kind: str = "install_error"


class UnsupportedPlatformError(InstallError):
    """The host OS or CPU architecture has no aqua release artifact."""

    kind = "unsupported_platform"

    def __init__(self, dimension: str, value: str, supported: Sequence[str]) -> None:
        self.dimension = dimension
        self.value = value
        self.supported = tuple(supported)
        label = "operating system" if dimension == "os" else "architecture"
        super().__init__(
            f"Unsupported {label}: {value}. "
            f"Supported: {', '.join(sorted(self.supported))}"
        )


class NoChecksumError(InstallError):
    """The checksum table has no entry for the resolved artifact."""

    kind = "no_checksum"

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"No checksum found for {filename}")


class DownloadFailedError(InstallError):
    """Fetching the release artifact failed."""

    kind = "download_failed"

    def __init__(
        self,
        url: str,
        status: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.url = url
        self.status = status
        self.reason = reason
        if status is not None:
            detail = f"HTTP {status}" + (f" - {reason}" if reason else "")
        else:
            detail = reason or "unknown error"
        super().__init__(f"Failed to download {url}: {detail}")


class ChecksumMismatchError(InstallError):
    """The downloaded archive does not match its pinned digest."""

    kind = "checksum_mismatch"

    def __init__(self, expected: str, actual: str, path: Optional[str] = None) -> None:
        self.expected = expected
        self.actual = actual
        self.path = path
        super().__init__(
            f"Checksum verification failed. Expected: {expected}, Got: {actual}"
        )


class ExtractionFailedError(InstallError):
    """The archive could not be unpacked or did not contain the binary."""

    kind = "extraction_failed"

    def __init__(self, archive: str, reason: str, member: Optional[str] = None) -> None:
        self.archive = archive
        self.reason = reason
        self.member = member
        message = f"Failed to extract {archive}: {reason}"
        if member:
            message += f" ({member})"
        super().__init__(message)


class PermissionSetFailedError(InstallError):
    """The extracted binary could not be made executable."""

    kind = "permission_set_failed"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to set executable permission on {path}: {reason}")


class _CommandError(InstallError):
    def __init__(self, command: Sequence[str], exit_code: Optional[int], reason: str = "") -> None:
        self.command = list(command)
        self.exit_code = exit_code
        self.reason = reason
        detail = f"exit code {exit_code}" if exit_code is not None else reason
        super().__init__(f"{self._what}: {' '.join(self.command)} ({detail})")

    _what = "Command failed"


class SelfUpdateFailedError(_CommandError):
    """``aqua update-aqua`` did not succeed."""

    kind = "self_update_failed"
    _what = "aqua self-update failed"


class VersionQueryFailedError(_CommandError):
    """``aqua -v`` on the installed binary did not succeed.

    This is the only non-fatal installer error: it is logged, never raised
    out of ``install()``.
    """

    kind = "version_query_failed"
    _what = "aqua version query failed"
