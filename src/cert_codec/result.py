"""
Result — the success/failure track for every fallible operation.

A Result[T] is either Success(value: T) or Failure(error: FailureDescription).
The codecs and classifiers never fail; only operations that validate outside
input (service payloads, form choices, date strings) return a Result.
Errors propagate through .flat_map() without try/except:

    resolve(key_type, mode)
      .map(lambda kt: GenerateRemote(..., key_type=kt.identifier))
      .peek(lambda req: log.info("request.built", kind=req.ENDPOINT))

Pattern matching works on both tracks:

    match result:
        case Success(request):
            ...
        case Failure(err):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@unique
class ErrorCode(Enum):
    """Structured error codes for the failure track."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    """A form value or input string is unusable as given."""

    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"
    """A service response does not match the expected wire shape."""

    UNKNOWN_KEY_TYPE = "UNKNOWN_KEY_TYPE"
    """A key-type identifier is in neither catalog."""

    UNSUPPORTED_KEY_TYPE = "UNSUPPORTED_KEY_TYPE"
    """A known key type that the selected issuance mode does not offer."""

    UNRECOGNIZED_CA = "UNRECOGNIZED_CA"
    """A CA name that is not Local, Remote or ACME-prefixed."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure descriptor: error code, message, optional exception, timestamp.

    >>> desc = FailureDescription(ErrorCode.UNKNOWN_KEY_TYPE, "Unknown key type: 'DSA1024'")
    >>> desc.code
    <ErrorCode.UNKNOWN_KEY_TYPE: 'UNKNOWN_KEY_TYPE'>
    """

    code: ErrorCode
    message: str
    exception: BaseException | None = field(default=None, repr=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


class Result(Generic[T]):
    """
    Either Success(value) or Failure(error).

    All transformations short-circuit on failure, so callers only write the
    success path.

        >>> Result.success(32).map(lambda bits: bits | 64).value()
        96
        >>> Result.failure(ErrorCode.VALIDATION_ERROR, "no domains").is_failure()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value(self) -> T:
        """Extract the success value. Raises ValueError on a Failure."""
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise ValueError(f"Cannot get value from a Failure: {err.message}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> FailureDescription:
        """Extract the failure description. Raises ValueError on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Transformations ────────────────────────

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[FailureDescription], R],
    ) -> R:
        """Apply one of two functions depending on the track."""
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Result[U]:
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """Chain a Result-returning function. Short-circuits on failure."""
        match self:
            case Success(v):
                return mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def ensure(
        self,
        predicate: Callable[[T], bool],
        code: ErrorCode,
        message: str,
    ) -> Result[T]:
        """
        Validate the success value against a condition.

            Result.success(form).ensure(
                lambda f: bool(f.domains),
                ErrorCode.VALIDATION_ERROR, "ACME requests need at least one domain",
            )
        """
        return self.flat_map(
            lambda v: Success(v) if predicate(v) else Result.failure(code, message)
        )

    def peek(self, action: Callable[[T], Any]) -> Result[T]:
        """Run a side effect (logging) on the success value."""
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[FailureDescription], Any]) -> Result[T]:
        match self:
            case Failure(err):
                action(err)
        return self

    def get_or_else(self, default: T) -> T:
        match self:
            case Success(v):
                return v
            case _:
                return default

    # ──────────────────────── Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T]:
        return Success(value)

    @staticmethod
    def failure(
        code: ErrorCode,
        message: str,
        exception: BaseException | None = None,
    ) -> Result[Any]:
        return Failure(FailureDescription(code=code, message=message, exception=exception))

    @staticmethod
    def from_computation(
        computation: Callable[[], T],
        error_code: ErrorCode,
        error_message: str,
    ) -> Result[T]:
        """
        Run a computation that may raise and capture the exception as a Failure.

            return Result.from_computation(
                lambda: Entries.model_validate_json(raw),
                ErrorCode.MALFORMED_PAYLOAD,
                "Invalid entries payload",
            )
        """
        try:
            return Result.success(computation())
        except Exception as e:
            return Result.failure(error_code, f"{error_message}: {e}", e)

    @staticmethod
    def from_optional(value: T | None, code: ErrorCode, message: str) -> Result[T]:
        if value is not None:
            return Result.success(value)
        return Result.failure(code, message)

    def __bool__(self) -> bool:
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[T]):
    """The success track; `case Success(v)` binds the wrapped value."""

    _value: T

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Result[T]):
    """The failure track; `case Failure(err)` binds the FailureDescription."""

    _error: FailureDescription

    def __repr__(self) -> str:
        return f"Failure({self._error.code.value}: {self._error.message!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return self._error.code == other._error.code and self._error.message == other._error.message
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Failure", self._error.code, self._error.message))
