"""
CA classification — what kind of issuer a CA name refers to.

The service names its issuers "Local", "Remote" and "ACME:<provider>" for
each configured ACME provider. Checks run in that order. Any other name is
an UnrecognizedCA that keeps the raw name for display; classification never
raises and is recomputed on every call.
"""

from __future__ import annotations

from dataclasses import dataclass

from cert_codec.key_types import IssuanceMode

LOCAL_CA_NAME = "Local"
REMOTE_CA_NAME = "Remote"
ACME_CA_PREFIX = "ACME:"


@dataclass(frozen=True, slots=True)
class LocalCA:
    """Certificates signed inside the store."""

    @property
    def name(self) -> str:
        return LOCAL_CA_NAME


@dataclass(frozen=True, slots=True)
class RemoteCA:
    """Certificate signing requests to be signed elsewhere."""

    @property
    def name(self) -> str:
        return REMOTE_CA_NAME


@dataclass(frozen=True, slots=True)
class AcmeCA:
    provider: str

    @property
    def name(self) -> str:
        return acme_ca_name(self.provider)


@dataclass(frozen=True, slots=True)
class UnrecognizedCA:
    name: str


type CAClass = LocalCA | RemoteCA | AcmeCA | UnrecognizedCA


def classify(name: str | None) -> CAClass:
    ca = name or ""
    if ca == LOCAL_CA_NAME:
        return LocalCA()
    if ca == REMOTE_CA_NAME:
        return RemoteCA()
    if ca.startswith(ACME_CA_PREFIX):
        return AcmeCA(provider=ca[len(ACME_CA_PREFIX):])
    return UnrecognizedCA(name=ca)


def is_local_ca(name: str | None) -> bool:
    return isinstance(classify(name), LocalCA)


def is_remote_ca(name: str | None) -> bool:
    return isinstance(classify(name), RemoteCA)


def is_acme_ca(name: str | None) -> bool:
    return isinstance(classify(name), AcmeCA)


def acme_ca_name(provider: str) -> str:
    return ACME_CA_PREFIX + provider


def issuance_mode(name: str | None) -> IssuanceMode:
    """ACME CAs draw from the restricted key-type catalog, everything else from the general one."""
    return IssuanceMode.ACME if is_acme_ca(name) else IssuanceMode.GENERAL
