"""Tests for hostos.output.console module."""

from __future__ import annotations

import pytest

from hostos.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.INFO) == "info"
        assert str(Style.HEADER) == "header"


class TestMockConsole:
    """Test MockConsole capture."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_prefixes(self) -> None:
        console = MockConsole()
        console.info("note")
        console.error("failed")
        console.warning("careful")
        assert console.messages == ["info: note", "error: failed", "warning: careful"]
        assert console.outputs[0].style == Style.INFO

    def test_detail(self) -> None:
        console = MockConsole()
        console.detail("native prefix", "linux-amd64")
        assert console.outputs[0] == OutputRecord("native prefix: linux-amd64", Style.INFO)

    def test_has_error(self) -> None:
        console = MockConsole()
        console.print("fine")
        assert console.has_error() is False
        console.error("bad")
        assert console.has_error() is True

    def test_find_and_text(self) -> None:
        console = MockConsole()
        console.header("Platform: linux")
        console.print("/usr/bin")
        assert len(console.find("linux")) == 1
        assert console.text == "Platform: linux\n/usr/bin"

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.detail("a", "b")


class TestRichConsole:
    """Test RichConsole writes to stdout."""

    def test_detail_and_print(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.detail("family", "linux")
        console.print("[not markup]", Style.DIM)
        out = capsys.readouterr().out
        assert "family:" in out
        assert "linux" in out
        assert "[not markup]" in out

    def test_error_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().error("missing")
        assert "error: missing" in capsys.readouterr().out

    def test_info_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().info("using config hostos.toml")
        assert "info: using config hostos.toml" in capsys.readouterr().out
