"""Tests for giveup.core.errors module."""

import pytest

from giveup.core.errors import ExitCode


class TestExitCodeValues:
    def test_ok_is_zero(self) -> None:
        assert ExitCode.OK == 0

    def test_failure_is_one(self) -> None:
        assert ExitCode.FAILURE == 1


class TestExitCodeUsage:
    """Test that ExitCode works well as exit codes."""

    def test_can_use_as_int(self) -> None:
        code: int = ExitCode.FAILURE
        assert code == 1

    def test_only_two_codes(self) -> None:
        assert sorted(code.value for code in ExitCode) == [0, 1]

    def test_invalid_lookup_raises(self) -> None:
        with pytest.raises(ValueError):
            ExitCode(2)
