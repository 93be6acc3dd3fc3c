"""Tests for hostos.platform.environment module."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from hostos.platform.environment import (
    OverlayEnvironment,
    StaticEnvironment,
    SystemEnvironment,
)


class TestSystemEnvironment:
    """Test the live environment accessor."""

    def test_os_name_on_windows_avoids_platform_system(self) -> None:
        with (
            patch("hostos.platform.environment._sys.platform", "win32"),
            patch("hostos.platform.environment._platform.system") as system,
        ):
            assert SystemEnvironment().os_name() == "Windows"
            system.assert_not_called()

    def test_os_name_elsewhere(self) -> None:
        with (
            patch("hostos.platform.environment._sys.platform", "linux"),
            patch("hostos.platform.environment._platform.system", return_value="Linux"),
        ):
            assert SystemEnvironment().os_name() == "Linux"

    def test_arch_is_lowercased(self) -> None:
        with (
            patch("hostos.platform.environment._sys.platform", "darwin"),
            patch("hostos.platform.environment._platform.machine", return_value="ARM64"),
        ):
            assert SystemEnvironment().arch() == "arm64"

    def test_arch_on_windows_reads_processor_env(self) -> None:
        with (
            patch("hostos.platform.environment._sys.platform", "win32"),
            patch.dict(
                os.environ,
                {"PROCESSOR_ARCHITECTURE": "x86", "PROCESSOR_ARCHITEW6432": "AMD64"},
            ),
        ):
            assert SystemEnvironment().arch() == "amd64"

    def test_getenv(self) -> None:
        with patch.dict(os.environ, {"HOSTOS_TEST_VAR": "value"}):
            assert SystemEnvironment().getenv("HOSTOS_TEST_VAR") == "value"
        assert SystemEnvironment().getenv("HOSTOS_TEST_VAR_UNSET") is None

    def test_separators_match_host(self) -> None:
        env = SystemEnvironment()
        assert env.path_separator == os.pathsep
        assert os.sep in env.sep_chars

    def test_is_file(self, tmp_path: Path) -> None:
        (tmp_path / "tool").write_text("", encoding="utf-8")
        env = SystemEnvironment()
        assert env.is_file(tmp_path / "tool") is True
        assert env.is_file(tmp_path) is False
        assert env.is_file(tmp_path / "missing") is False


class TestStaticEnvironment:
    """Test the fixed environment used by tests and overrides."""

    def test_defaults(self) -> None:
        env = StaticEnvironment()
        assert env.os_name() == ""
        assert env.arch() == ""
        assert env.getenv("PATH") is None
        assert env.path_separator == ":"
        assert env.sep_chars == ("/",)

    def test_frozen(self) -> None:
        env = StaticEnvironment()
        with pytest.raises(AttributeError):
            env.name = "Linux"  # type: ignore[misc]

    def test_files_set(self) -> None:
        env = StaticEnvironment(files=frozenset({"/usr/bin/foo"}))
        assert env.is_file(Path("/usr/bin/foo")) is True
        assert env.is_file(Path("/usr/bin/bar")) is False

    def test_files_none_uses_filesystem(self, tmp_path: Path) -> None:
        (tmp_path / "foo").write_text("", encoding="utf-8")
        env = StaticEnvironment()
        assert env.is_file(tmp_path / "foo") is True


class TestOverlayEnvironment:
    """Test overriding selected values."""

    def test_overrides_name_and_arch(self) -> None:
        base = StaticEnvironment(name="Linux", version="6.1", machine="x86_64")
        env = OverlayEnvironment(base, name="SunOS", machine="sparc")
        assert env.os_name() == "SunOS"
        assert env.arch() == "sparc"
        assert env.os_version() == "6.1"

    def test_falls_back_to_base(self) -> None:
        base = StaticEnvironment(name="Linux", machine="x86_64", variables={"PATH": "/bin"})
        env = OverlayEnvironment(base)
        assert env.os_name() == "Linux"
        assert env.arch() == "x86_64"
        assert env.getenv("PATH") == "/bin"

    def test_variables_shadow_base(self) -> None:
        base = StaticEnvironment(variables={"PATH": "/bin", "HOME": "/root"})
        env = OverlayEnvironment(base, variables={"PATH": "/opt/bin"})
        assert env.getenv("PATH") == "/opt/bin"
        assert env.getenv("HOME") == "/root"

    def test_delegates_files_and_separators(self) -> None:
        base = StaticEnvironment(pathsep=";", files=frozenset({"/a/foo"}))
        env = OverlayEnvironment(base, name="Windows")
        assert env.path_separator == ";"
        assert env.is_file(Path("/a/foo")) is True
