"""
Entry views — the read path from service responses to display rows.

    raw JSON → parse_* (pydantic validation, Result) → Entries / CAs / EntryDetails
             → entry_views(entries, now) → EntryView (key type lookup + validity status)
             → ca_views(cas)             → CAView (CA classification)

Malformed responses become Result.failure(MALFORMED_PAYLOAD); nothing raises.
Every view in one entry_views() call is evaluated against the same `now`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel

from cert_codec import key_types
from cert_codec.classifiers import ca as ca_classifier
from cert_codec.classifiers import validity
from cert_codec.classifiers.ca import CAClass
from cert_codec.classifiers.validity import ValidityStatus
from cert_codec.domain.payloads import CA, CAs, Entries, Entry, EntryDetails
from cert_codec.key_types import KeyType, UnknownKeyType
from cert_codec.result import ErrorCode, FailureDescription, Result

log = structlog.get_logger()

M = TypeVar("M", bound=BaseModel)

type RawPayload = bytes | str | Mapping[str, Any]


def _load(model: type[M], raw: RawPayload) -> M:
    if isinstance(raw, (bytes, str)):
        return model.model_validate_json(raw)
    return model.model_validate(raw)


def _parse(model: type[M], raw: RawPayload) -> Result[M]:
    def _log_failure(err: FailureDescription) -> None:
        log.warning("entries.parse_failed", payload=model.__name__, error=err.message)

    return Result.from_computation(
        lambda: _load(model, raw),
        ErrorCode.MALFORMED_PAYLOAD,
        f"Invalid {model.__name__} payload",
    ).peek_failure(_log_failure)


def parse_entries(raw: RawPayload) -> Result[Entries]:
    return _parse(Entries, raw)


def parse_cas(raw: RawPayload) -> Result[CAs]:
    return _parse(CAs, raw)


def parse_details(raw: RawPayload) -> Result[EntryDetails]:
    return _parse(EntryDetails, raw)


@dataclass(frozen=True, slots=True)
class EntryView:
    """
    An entry ready for display.

    `validity` is None for entries without a certificate expiry (keys and
    requests). `key_type` is UnknownKeyType for identifiers in no catalog,
    so the raw identifier can still be shown.
    """

    entry: Entry
    key_type: KeyType | UnknownKeyType
    validity: ValidityStatus | None


@dataclass(frozen=True, slots=True)
class CAView:
    ca: CA
    kind: CAClass


def entry_view(entry: Entry, now: datetime) -> EntryView:
    status = None
    if entry.crt and entry.valid_to is not None:
        status = validity.classify(entry.valid_to, now)
    return EntryView(entry=entry, key_type=key_types.lookup(entry.key_type), validity=status)


def entry_views(entries: Entries, now: datetime) -> list[EntryView]:
    return [entry_view(entry, now) for entry in entries.entries]


def ca_views(cas: CAs) -> list[CAView]:
    return [CAView(ca=ca, kind=ca_classifier.classify(ca.name)) for ca in cas.cas]
