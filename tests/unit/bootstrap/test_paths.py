"""Tests for install path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from setup_aqua.bootstrap.paths import (
    AQUA_ROOT_DIR_ENV,
    XDG_DATA_HOME_ENV,
    get_aqua_root,
    install_dir_template,
    resolve_bin_dir,
    resolve_install_path,
)


class TestResolveInstallPath:
    """Tests for resolve_install_path."""

    def test_windows_default_is_local_app_data(self) -> None:
        path = resolve_install_path("windows", environ={})
        assert path == Path.home() / "AppData" / "Local" / "aquaproj-aqua" / "bin" / "aqua.exe"

    def test_windows_with_root_override(self, tmp_path: Path) -> None:
        path = resolve_install_path("windows", environ={AQUA_ROOT_DIR_ENV: str(tmp_path)})
        assert path == tmp_path / "bin" / "aqua.exe"

    def test_windows_ignores_xdg_data_home(self, tmp_path: Path) -> None:
        path = resolve_install_path("windows", environ={XDG_DATA_HOME_ENV: str(tmp_path)})
        assert not str(path).startswith(str(tmp_path))

    @pytest.mark.parametrize("os_name", ["linux", "darwin"])
    def test_unix_default(self, os_name: str) -> None:
        path = resolve_install_path(os_name, environ={})
        assert path == Path.home() / ".local" / "share" / "aquaproj-aqua" / "bin" / "aqua"

    def test_unix_xdg_data_home(self, tmp_path: Path) -> None:
        path = resolve_install_path("linux", environ={XDG_DATA_HOME_ENV: str(tmp_path)})
        assert path == tmp_path / "aquaproj-aqua" / "bin" / "aqua"

    def test_root_override_wins_over_xdg(self, tmp_path: Path) -> None:
        root = tmp_path / "root"
        env = {AQUA_ROOT_DIR_ENV: str(root), XDG_DATA_HOME_ENV: str(tmp_path / "xdg")}
        assert resolve_install_path("linux", environ=env) == root / "bin" / "aqua"

    def test_empty_override_is_ignored(self) -> None:
        assert get_aqua_root("linux", environ={AQUA_ROOT_DIR_ENV: ""}) == get_aqua_root("linux", environ={})

    def test_reads_process_environment_by_default(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(AQUA_ROOT_DIR_ENV, str(tmp_path))
        assert resolve_install_path("darwin") == tmp_path / "bin" / "aqua"


class TestResolveBinDir:
    """Tests for resolve_bin_dir."""

    def test_bin_dir_is_parent_of_install_path(self, tmp_path: Path) -> None:
        env = {AQUA_ROOT_DIR_ENV: str(tmp_path)}
        assert resolve_bin_dir("linux", env) == resolve_install_path("linux", env).parent


class TestInstallDirTemplate:
    """Tests for the PATH hint shown to operators."""

    def test_windows_template(self) -> None:
        assert install_dir_template("windows") == "${AQUA_ROOT_DIR:-$HOME/AppData/Local/aquaproj-aqua}/bin"

    def test_unix_template(self) -> None:
        assert "XDG_DATA_HOME" in install_dir_template("linux")
