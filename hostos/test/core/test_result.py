"""Tests for hostos.core.result module."""

from __future__ import annotations

import pytest

from hostos.core.result import Err, Ok, Result


class TestResult:
    def test_ok_holds_value(self) -> None:
        assert Ok(42).value == 42

    def test_err_holds_error(self) -> None:
        assert Err("boom").error == "boom"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]

    def test_pattern_matching(self) -> None:
        result: Result[int, str] = Err("bad")
        match result:
            case Ok():
                pytest.fail("expected Err")
            case Err(error):
                assert error == "bad"
