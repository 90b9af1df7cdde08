"""Date helpers for HTML date inputs (YYYY-MM-DD, always UTC)."""

from __future__ import annotations

from datetime import UTC, date, datetime, time

from cert_codec.result import ErrorCode, Result


def date_to_input(value: datetime) -> str:
    """Format the UTC calendar date of `value`; naive values are taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.date().isoformat()


def input_to_date(value: str) -> Result[datetime]:
    """Parse a YYYY-MM-DD input into UTC midnight of that day."""
    return Result.from_computation(
        lambda: datetime.combine(date.fromisoformat(value.strip()), time.min, tzinfo=UTC),
        ErrorCode.VALIDATION_ERROR,
        f"Invalid date input {value!r}",
    )
