"""
Key-type catalogs — the asymmetric key types offered per issuance mode.

Two fixed, ordered catalogs pair a display label with the identifier the
issuing service understands:

  GENERAL  — every key type the service can generate (Local and Remote CAs)
  ACME     — the subset an ACME issuer accepts (no ED25519, no P-224/P-521,
             no RSA 8192)

Order is presentation order and is never re-sorted. Catalog membership is a
closed set: an identifier outside it is reported as UnknownKeyType rather
than synthesized into a new entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cert_codec.result import ErrorCode, Result


class IssuanceMode(Enum):
    """Which catalog applies to a generate request."""

    GENERAL = "general"
    ACME = "acme"


@dataclass(frozen=True, slots=True)
class KeyType:
    """A catalog member: display label plus wire identifier."""

    label: str
    identifier: str


@dataclass(frozen=True, slots=True)
class UnknownKeyType:
    """A wire identifier found in no catalog; displayed as the raw identifier."""

    identifier: str

    @property
    def label(self) -> str:
        return self.identifier


GENERAL_KEY_TYPES: tuple[KeyType, ...] = (
    KeyType("ECDSA P-224", "ECDSA224"),
    KeyType("ECDSA P-256", "ECDSA256"),
    KeyType("ECDSA P-384", "ECDSA384"),
    KeyType("ECDSA P-521", "ECDSA521"),
    KeyType("ED25519", "ED25519"),
    KeyType("RSA 2048", "RSA2048"),
    KeyType("RSA 3072", "RSA3072"),
    KeyType("RSA 4096", "RSA4096"),
    KeyType("RSA 8192", "RSA8192"),
)

_ACME_IDENTIFIERS = frozenset({"ECDSA256", "ECDSA384", "RSA2048", "RSA3072", "RSA4096"})

ACME_KEY_TYPES: tuple[KeyType, ...] = tuple(
    key_type for key_type in GENERAL_KEY_TYPES if key_type.identifier in _ACME_IDENTIFIERS
)

_CATALOGS: dict[IssuanceMode, tuple[KeyType, ...]] = {
    IssuanceMode.GENERAL: GENERAL_KEY_TYPES,
    IssuanceMode.ACME: ACME_KEY_TYPES,
}

_BY_IDENTIFIER: dict[str, KeyType] = {key_type.identifier: key_type for key_type in GENERAL_KEY_TYPES}


def list_for(mode: IssuanceMode) -> tuple[KeyType, ...]:
    """Return the ordered catalog for the given issuance mode."""
    return _CATALOGS[mode]


def lookup(identifier: str) -> KeyType | UnknownKeyType:
    """Find a key type by wire identifier, or wrap the raw identifier as unknown."""
    return _BY_IDENTIFIER.get(identifier) or UnknownKeyType(identifier)


def is_supported(identifier: str, mode: IssuanceMode) -> bool:
    return any(key_type.identifier == identifier for key_type in _CATALOGS[mode])


def resolve(identifier: str, mode: IssuanceMode) -> Result[KeyType]:
    """
    Resolve a wire identifier to a catalog member usable in the given mode.

    Returns Result.failure(UNKNOWN_KEY_TYPE) for identifiers in no catalog and
    Result.failure(UNSUPPORTED_KEY_TYPE) for known key types the mode excludes.
    """
    match lookup(identifier):
        case UnknownKeyType():
            return Result.failure(ErrorCode.UNKNOWN_KEY_TYPE, f"Unknown key type: {identifier!r}")
        case KeyType() as key_type if key_type in _CATALOGS[mode]:
            return Result.success(key_type)
        case _:
            return Result.failure(
                ErrorCode.UNSUPPORTED_KEY_TYPE,
                f"Key type {identifier!r} is not available for {mode.value} issuance",
            )
