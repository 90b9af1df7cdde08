"""
Validity classification — valid, expiring soon, or expired.

    expiry <  now                  → EXPIRED
    expiry <  now + 7 days         → EXPIRING
    otherwise                      → VALID

Both comparisons are strict, so an expiry exactly seven days out is VALID.
`now` is always passed in; the status is never stored because `now` moves.
Naive datetimes are read as UTC.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Final

EXPIRY_WARNING_WINDOW: Final = timedelta(days=7)


class ValidityStatus(Enum):
    VALID = "valid"
    EXPIRING = "expiring"
    EXPIRED = "expired"


def as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


def classify(expiry: datetime, now: datetime) -> ValidityStatus:
    expiry = as_utc(expiry)
    now = as_utc(now)
    if expiry < now:
        return ValidityStatus.EXPIRED
    if expiry < now + EXPIRY_WARNING_WINDOW:
        return ValidityStatus.EXPIRING
    return ValidityStatus.VALID
