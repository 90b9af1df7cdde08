"""
Service payloads — typed request and response bodies of the issuing service.

Field-exact mirrors of the service's JSON. Nothing here sends or receives
anything; the generate requests only name the path they belong to.

Response side:   AboutInfo, Entries/Entry, EntryDetails, CAs/CA, ErrorResponse
Query side:      EntriesFilter, IssuersFilter
Request side:    GenerateLocal, GenerateRemote, GenerateACME
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator

from cert_codec.domain.extensions import (
    WIRE_MODEL_CONFIG,
    BasicConstraintsSpec,
    ExtKeyUsageSpec,
    KeyUsageSpec,
)


class AboutInfo(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    version: str = ""
    timestamp: str = ""


class EntriesFilter(BaseModel):
    """Paging window for the entry listing; limit <= 0 means everything."""

    model_config = WIRE_MODEL_CONFIG

    start: int = Field(default=0, ge=0)
    limit: int = 0


class Entry(BaseModel):
    """
    One store entry as listed by the service.

    `ca` is the entry's own CA flag (BasicConstraints CA=true), not an issuer
    name. Request-only entries carry empty validity strings, which parse to None.
    Only certificate and request entries have a serial; the others send null.
    """

    model_config = WIRE_MODEL_CONFIG

    name: str
    dn: str = ""
    serial: int | None = None
    key_type: str = ""
    key: bool = False
    crt: bool = False
    csr: bool = False
    crl: bool = False
    ca: bool = False
    valid_from: datetime | None = None
    valid_to: datetime | None = None

    @field_validator("valid_from", "valid_to", mode="before")
    @classmethod
    def empty_timestamp_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class Entries(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    entries: list[Entry] = Field(default_factory=list)
    start: int = 0
    total: int = 0


class EntryDetailsAttribute(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    key: str
    value: str


class EntryDetailsGroup(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    title: str
    attributes: list[EntryDetailsAttribute] = Field(default_factory=list)


class EntryDetails(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    name: str
    groups: list[EntryDetailsGroup] = Field(default_factory=list)


class CA(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    name: str


class CAs(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    cas: list[CA] = Field(default_factory=list)


class IssuersFilter(BaseModel):
    """Issuer query: entries whose KeyUsage covers every bit of `key_usage`."""

    model_config = WIRE_MODEL_CONFIG

    key_usage: int = Field(default=0, ge=0)


class ErrorResponse(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    message: str


class GenerateLocal(BaseModel):
    """Certificate signed by the local store (self-signed when `issuer` is empty)."""

    model_config = WIRE_MODEL_CONFIG
    ENDPOINT: ClassVar[str] = "/api/generate/local"

    name: str
    ca: str
    dn: str
    key_type: str
    issuer: str = ""
    valid_from: datetime
    valid_to: datetime
    key_usage: KeyUsageSpec = Field(default_factory=KeyUsageSpec)
    ext_key_usage: ExtKeyUsageSpec = Field(default_factory=ExtKeyUsageSpec)
    basic_constraints: BasicConstraintsSpec = Field(default_factory=BasicConstraintsSpec)


class GenerateRemote(BaseModel):
    """Certificate signing request to be signed by an outside CA."""

    model_config = WIRE_MODEL_CONFIG
    ENDPOINT: ClassVar[str] = "/api/generate/remote"

    name: str
    ca: str
    dn: str
    key_type: str


class GenerateACME(BaseModel):
    """Certificate obtained from the ACME provider named by `ca`."""

    model_config = WIRE_MODEL_CONFIG
    ENDPOINT: ClassVar[str] = "/api/generate/acme"

    name: str
    ca: str
    domains: list[str]
    key_type: str


type GenerateRequest = GenerateLocal | GenerateRemote | GenerateACME
