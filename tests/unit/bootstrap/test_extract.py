"""Tests for archive extraction."""

from __future__ import annotations

import io
import os
import stat
import sys
import tarfile
from pathlib import Path
from typing import Callable

import pytest

from setup_aqua.bootstrap.errors import ExtractionFailedError, PermissionSetFailedError
from setup_aqua.bootstrap.extract import (
    EXECUTABLE_MODE,
    ArchiveKind,
    extract_archive,
    make_executable,
)
from tests.unit.conftest import FAKE_AQUA, add_tar_file


class TestArchiveKind:
    """Tests for ArchiveKind."""

    def test_extensions(self) -> None:
        assert ArchiveKind.TAR_GZ.extension == "tar.gz"
        assert ArchiveKind.ZIP.extension == "zip"


class TestExtractTarball:
    """Tests for .tar.gz extraction."""

    def test_extracts_binary_at_root(self, aqua_tarball: Path, tmp_path: Path) -> None:
        dest = tmp_path / "out"
        binary = extract_archive(aqua_tarball, dest, ArchiveKind.TAR_GZ, "aqua")

        assert binary == dest / "aqua"
        assert binary.read_bytes() == FAKE_AQUA
        assert (dest / "README.md").exists()

    def test_binary_is_executable_after_make_executable(
        self, aqua_tarball: Path, tmp_path: Path
    ) -> None:
        binary = extract_archive(aqua_tarball, tmp_path / "out", ArchiveKind.TAR_GZ, "aqua")
        make_executable(binary)

        assert stat.S_IMODE(binary.stat().st_mode) == EXECUTABLE_MODE
        assert os.access(binary, os.X_OK)

    def test_preserves_relative_paths(
        self, make_tarball: Callable[..., Path], tmp_path: Path
    ) -> None:
        archive = make_tarball({"aqua": FAKE_AQUA, "docs/nested/guide.md": b"guide"})
        dest = tmp_path / "out"
        extract_archive(archive, dest, ArchiveKind.TAR_GZ, "aqua")

        assert (dest / "docs" / "nested" / "guide.md").read_bytes() == b"guide"

    def test_missing_binary(self, make_tarball: Callable[..., Path], tmp_path: Path) -> None:
        archive = make_tarball({"README.md": b"no binary here"})
        with pytest.raises(ExtractionFailedError, match="binary not found") as exc:
            extract_archive(archive, tmp_path / "out", ArchiveKind.TAR_GZ, "aqua")

        assert exc.value.member == "aqua"
        assert exc.value.kind == "extraction_failed"

    def test_binary_in_subdirectory_is_not_found(
        self, make_tarball: Callable[..., Path], tmp_path: Path
    ) -> None:
        archive = make_tarball({"bin/aqua": FAKE_AQUA})
        with pytest.raises(ExtractionFailedError):
            extract_archive(archive, tmp_path / "out", ArchiveKind.TAR_GZ, "aqua")

    def test_rejects_parent_traversal(
        self, make_tarball: Callable[..., Path], tmp_path: Path
    ) -> None:
        archive = make_tarball({"aqua": FAKE_AQUA, "../../escaped.txt": b"pwned"})
        dest = tmp_path / "a" / "b" / "out"

        with pytest.raises(ExtractionFailedError, match="unsafe path") as exc:
            extract_archive(archive, dest, ArchiveKind.TAR_GZ, "aqua")

        assert exc.value.member == "../../escaped.txt"
        assert not (tmp_path / "a" / "escaped.txt").exists()
        assert not (tmp_path / "escaped.txt").exists()

    def test_rejects_etc_passwd_traversal(
        self, make_tarball: Callable[..., Path], tmp_path: Path
    ) -> None:
        archive = make_tarball({"../../etc/passwd": b"root::0:0::/:/bin/sh\n"})
        with pytest.raises(ExtractionFailedError):
            extract_archive(archive, tmp_path / "out", ArchiveKind.TAR_GZ, "aqua")

        assert not (tmp_path / "etc").exists()

    @pytest.mark.skipif(sys.platform == "win32", reason="colons are not valid in Windows file names")
    def test_allows_colon_in_member_name(
        self, make_tarball: Callable[..., Path], tmp_path: Path
    ) -> None:
        archive = make_tarball({"aqua": FAKE_AQUA, "notes:v2.txt": b"ok"})
        dest = tmp_path / "out"

        extract_archive(archive, dest, ArchiveKind.TAR_GZ, "aqua")

        assert (dest / "notes:v2.txt").read_bytes() == b"ok"

    def test_rejects_drive_letter_member(
        self, make_tarball: Callable[..., Path], tmp_path: Path
    ) -> None:
        archive = make_tarball({"aqua": FAKE_AQUA, "C:evil.txt": b"pwned"})
        with pytest.raises(ExtractionFailedError, match="unsafe path") as exc:
            extract_archive(archive, tmp_path / "out", ArchiveKind.TAR_GZ, "aqua")

        assert exc.value.member == "C:evil.txt"

    def test_rejects_absolute_member(
        self, make_tarball: Callable[..., Path], tmp_path: Path
    ) -> None:
        target = tmp_path / "absolute.txt"
        archive = make_tarball({str(target): b"pwned"})
        with pytest.raises(ExtractionFailedError):
            extract_archive(archive, tmp_path / "out", ArchiveKind.TAR_GZ, "aqua")

        assert not target.exists()

    def test_skips_symlinks(self, tmp_path: Path) -> None:
        archive = tmp_path / "links.tar.gz"
        with tarfile.open(archive, "w:gz") as tar:
            add_tar_file(tar, "aqua", FAKE_AQUA)
            link = tarfile.TarInfo("passwd")
            link.type = tarfile.SYMTYPE
            link.linkname = "/etc/passwd"
            tar.addfile(link)

        dest = tmp_path / "out"
        extract_archive(archive, dest, ArchiveKind.TAR_GZ, "aqua")

        assert not (dest / "passwd").exists()
        assert not (dest / "passwd").is_symlink()

    def test_skips_directory_entries(self, tmp_path: Path) -> None:
        archive = tmp_path / "dirs.tar.gz"
        with tarfile.open(archive, "w:gz") as tar:
            directory = tarfile.TarInfo("../outside")
            directory.type = tarfile.DIRTYPE
            tar.addfile(directory)
            add_tar_file(tar, "aqua", FAKE_AQUA)

        extract_archive(archive, tmp_path / "out", ArchiveKind.TAR_GZ, "aqua")
        assert not (tmp_path / "outside").exists()

    def test_corrupt_archive(self, tmp_path: Path) -> None:
        archive = tmp_path / "corrupt.tar.gz"
        archive.write_bytes(b"this is not gzip")
        with pytest.raises(ExtractionFailedError):
            extract_archive(archive, tmp_path / "out", ArchiveKind.TAR_GZ, "aqua")


class TestExtractZip:
    """Tests for .zip extraction."""

    def test_extracts_exe(self, make_zip: Callable[..., Path], tmp_path: Path) -> None:
        archive = make_zip({"aqua.exe": b"MZ fake", "README.md": b"# aqua\n"})
        dest = tmp_path / "out"

        binary = extract_archive(archive, dest, ArchiveKind.ZIP, "aqua.exe")

        assert binary == dest / "aqua.exe"
        assert binary.read_bytes() == b"MZ fake"

    def test_rejects_traversal(self, make_zip: Callable[..., Path], tmp_path: Path) -> None:
        archive = make_zip({"aqua.exe": b"MZ", "../evil.dll": b"pwned"})
        dest = tmp_path / "deep" / "out"

        with pytest.raises(ExtractionFailedError):
            extract_archive(archive, dest, ArchiveKind.ZIP, "aqua.exe")

        assert not (tmp_path / "deep" / "evil.dll").exists()

    def test_rejects_backslash_traversal(
        self, make_zip: Callable[..., Path], tmp_path: Path
    ) -> None:
        archive = make_zip({"..\\..\\evil.dll": b"pwned"})
        with pytest.raises(ExtractionFailedError):
            extract_archive(archive, tmp_path / "out", ArchiveKind.ZIP, "aqua.exe")

    def test_not_a_zip(self, tmp_path: Path) -> None:
        archive = tmp_path / "aqua.zip"
        archive.write_bytes(io.BytesIO(b"garbage").getvalue())
        with pytest.raises(ExtractionFailedError):
            extract_archive(archive, tmp_path / "out", ArchiveKind.ZIP, "aqua.exe")


class TestMakeExecutable:
    """Tests for make_executable."""

    def test_sets_0755(self, tmp_path: Path) -> None:
        path = tmp_path / "aqua"
        path.write_bytes(FAKE_AQUA)
        path.chmod(0o600)

        make_executable(path)

        assert stat.S_IMODE(path.stat().st_mode) == 0o755

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(PermissionSetFailedError) as exc:
            make_executable(tmp_path / "missing")

        assert exc.value.kind == "permission_set_failed"
        assert exc.value.path == str(tmp_path / "missing")
