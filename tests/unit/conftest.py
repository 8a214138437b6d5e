"""Shared fixtures for unit tests."""

from __future__ import annotations

import hashlib
import io
import tarfile
import zipfile
from pathlib import Path
from typing import Callable, Dict

import pytest

FAKE_AQUA = b"#!/bin/sh\necho 'aqua version 2.55.1'\n"


def add_tar_file(tar: tarfile.TarFile, name: str, data: bytes, mode: int = 0o644) -> None:
    info = tarfile.TarInfo(name)
    info.size = len(data)
    info.mode = mode
    tar.addfile(info, io.BytesIO(data))


def build_tarball(path: Path, members: Dict[str, bytes]) -> Path:
    with tarfile.open(path, "w:gz") as tar:
        for name, data in members.items():
            add_tar_file(tar, name, data)
    return path


def build_zip(path: Path, members: Dict[str, bytes]) -> Path:
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in members.items():
            zf.writestr(name, data)
    return path


def sha256_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


@pytest.fixture
def make_tarball(tmp_path: Path) -> Callable[..., Path]:
    """Factory building a .tar.gz under tmp_path from name -> bytes."""

    def _make(members: Dict[str, bytes], name: str = "aqua_linux_amd64.tar.gz") -> Path:
        return build_tarball(tmp_path / name, members)

    return _make


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[..., Path]:
    """Factory building a .zip under tmp_path from name -> bytes."""

    def _make(members: Dict[str, bytes], name: str = "aqua_windows_amd64.zip") -> Path:
        return build_zip(tmp_path / name, members)

    return _make


@pytest.fixture
def aqua_tarball(make_tarball: Callable[..., Path]) -> Path:
    """A release-shaped tarball with aqua at its root."""
    return make_tarball({"aqua": FAKE_AQUA, "README.md": b"# aqua\n", "LICENSE": b"MIT\n"})
