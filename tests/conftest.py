"""
Shared test fixtures and helpers for the cert-codec test suite.

Provides a fixed evaluation instant and ResultAssertions, expressive
assert helpers for Result values that produce clear failure messages.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TypeVar

import pytest

from cert_codec.config import CodecSettings
from cert_codec.result import ErrorCode, FailureDescription, Result

T = TypeVar("T")

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture()
def now() -> datetime:
    """A fixed, timezone-aware evaluation instant."""
    return NOW


@pytest.fixture()
def settings() -> CodecSettings:
    """Default settings, ignoring any .env file on the developer machine."""
    return CodecSettings(_env_file=None)  # type: ignore[call-arg]


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T], message: str = "") -> T:
        """Assert the Result is a Success and return the value."""
        context = f" — {message}" if message else ""
        assert result.is_success(), (
            f"Expected Success but got Failure("
            f"{result.error().code.value}: {result.error().message!r}){context}"
        )
        return result.value()

    @staticmethod
    def assert_failure(
        result: Result[T],
        expected_code: ErrorCode | None = None,
        message: str = "",
    ) -> FailureDescription:
        """Assert the Result is a Failure, optionally checking the error code."""
        context = f" — {message}" if message else ""
        assert result.is_failure(), f"Expected Failure but got Success({result.value()!r}){context}"
        error = result.error()
        if expected_code is not None:
            assert error.code == expected_code, (
                f"Expected error code {expected_code.value} "
                f"but got {error.code.value}: {error.message!r}{context}"
            )
        return error

    @staticmethod
    def assert_failure_message_contains(result: Result[T], substring: str) -> None:
        error = ResultAssertions.assert_failure(result)
        assert substring.lower() in error.message.lower(), (
            f"Expected failure message to contain {substring!r} but message was: {error.message!r}"
        )
