"""Bootstrap installer for aqua.

Downloads the pinned aqua release for the host platform, verifies it against
the pinned checksum table, extracts it into a private temporary directory and
lets the extracted binary upgrade itself (``aqua update-aqua``) to the
requested version.
"""

from __future__ import annotations

import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from setup_aqua.bootstrap.artifact import Artifact, binary_name, locate
from setup_aqua.bootstrap.checksums import BOOTSTRAP_VERSION, CHECKSUMS
from setup_aqua.bootstrap.download import DEFAULT_TIMEOUT, download_file, verify_checksum
from setup_aqua.bootstrap.errors import SelfUpdateFailedError, VersionQueryFailedError
from setup_aqua.bootstrap.extract import extract_archive, make_executable
from setup_aqua.bootstrap.paths import install_dir_template, resolve_install_path
from setup_aqua.bootstrap.platform import PlatformInfo, get_platform_info
from setup_aqua.core.logging import get_logger
from setup_aqua.core.subprocess_runner import run_command

LOGGER = get_logger(__name__)

WORKSPACE_PREFIX = "setup-aqua-"

_BANNER_RULE = "=" * 63


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a successful install.

    Attributes:
        platform: Platform the artifact was resolved for.
        artifact: The verified bootstrap archive.
        install_path: Where aqua lives after self-update.
        version_output: Output of ``aqua -v``, or None if the query failed.
    """

    platform: PlatformInfo
    artifact: Artifact
    install_path: Path
    version_output: Optional[str] = None


@dataclass
class BootstrapInstaller:
    """Runs one bootstrap install attempt per ``install()`` call.

    Each attempt gets its own temporary workspace which is removed before
    ``install()`` returns or raises. Nothing is retried; the caller decides
    whether to start over.
    """

    platform_info: Optional[PlatformInfo] = None
    bootstrap_version: str = BOOTSTRAP_VERSION
    checksums: Mapping[str, str] = field(default_factory=lambda: CHECKSUMS)
    timeout: Optional[float] = DEFAULT_TIMEOUT
    temp_root: Optional[Path] = None
    environ: Optional[Mapping[str, str]] = None

    def install(self, version: Optional[str] = None) -> InstallResult:
        """Install aqua, converging it to ``version``.

        Args:
            version: Target aqua version (e.g. "v2.56.0"). If omitted, aqua
                updates to its own default.

        Returns:
            InstallResult describing the installed binary.

        Raises:
            InstallError: On any failure before the final version query.
        """
        # Resolution happens before any network or filesystem access.
        platform_info = self.platform_info or get_platform_info()
        artifact = locate(platform_info, self.bootstrap_version, self.checksums)
        install_path = resolve_install_path(platform_info.os, self.environ)

        LOGGER.info(f"Installing aqua {self.bootstrap_version} for bootstrapping...")

        workspace = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=self.temp_root))
        try:
            binary = self._bootstrap_binary(platform_info, artifact, workspace)
            self._self_update(binary, version)
            self._print_banner(platform_info, install_path)
            version_output = self._query_version(install_path)
        finally:
            self._cleanup(workspace)

        return InstallResult(
            platform=platform_info,
            artifact=artifact,
            install_path=install_path,
            version_output=version_output,
        )

    def _bootstrap_binary(
        self, platform_info: PlatformInfo, artifact: Artifact, workspace: Path
    ) -> Path:
        """Download, verify, extract and chmod the bootstrap binary."""
        archive_path = workspace / artifact.filename
        download_file(artifact.url, archive_path, timeout=self.timeout)
        verify_checksum(archive_path, artifact.expected_digest)

        binary = extract_archive(
            archive_path,
            workspace / "extract",
            artifact.kind,
            binary_name(platform_info),
        )
        make_executable(binary)
        return binary

    def _self_update(self, binary: Path, version: Optional[str]) -> None:
        cmd: List[str] = [str(binary), "update-aqua"]
        if version:
            cmd.append(version)

        try:
            result = run_command(cmd)
        except OSError as e:
            raise SelfUpdateFailedError(cmd, None, reason=str(e)) from e

        if result.returncode != 0:
            raise SelfUpdateFailedError(cmd, result.returncode)

    def _print_banner(self, platform_info: PlatformInfo, install_path: Path) -> None:
        LOGGER.info("")
        LOGGER.info(_BANNER_RULE)
        LOGGER.info(f"aqua is installed into {install_path}")
        LOGGER.info('Please add the path to the environment variable "PATH"')
        LOGGER.info(f"export PATH={install_dir_template(platform_info.os)}:$PATH")
        LOGGER.info(_BANNER_RULE)
        LOGGER.info("")

    def _query_version(self, install_path: Path) -> Optional[str]:
        """Run ``aqua -v`` on the installed binary.

        Failure here is logged only; the install already succeeded.
        """
        cmd = [str(install_path), "-v"]
        try:
            result = run_command(cmd, capture_output=True)
        except OSError as e:
            LOGGER.warning(str(VersionQueryFailedError(cmd, None, reason=str(e))))
            return None

        if result.returncode != 0:
            LOGGER.warning(str(VersionQueryFailedError(cmd, result.returncode)))
            return None

        output = (result.stdout or "").strip()
        if output:
            LOGGER.info(output)
        return output

    def _cleanup(self, workspace: Path) -> None:
        try:
            shutil.rmtree(workspace)
        except OSError as e:
            LOGGER.warning(f"Failed to remove temporary directory {workspace}: {e}")
            return
        if workspace.exists():
            LOGGER.warning(f"Temporary directory still present after cleanup: {workspace}")


def install(version: Optional[str] = None, timeout: Optional[float] = DEFAULT_TIMEOUT) -> InstallResult:
    """Install aqua for the current host, converging it to ``version``."""
    return BootstrapInstaller(timeout=timeout).install(version)
