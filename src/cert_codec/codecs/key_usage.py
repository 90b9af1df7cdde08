"""
KeyUsage codec — bitmask ⇄ per-usage boolean flags.

The bit layout is fixed by KeyUsageFlag and nowhere else:

    1 digitalSignature    16 keyAgreement     128 encipherOnly
    2 contentCommitment   32 keyCertSign      256 decipherOnly
    4 keyEncipherment     64 crlSign
    8 dataEncipherment

Each member name, lower-cased, is the matching KeyUsageFlags attribute, and
camel-cased it is the name used in entry details.

decode() accepts every bit pattern. Bits above the nine defined positions
land in KeyUsageFlags.unknown_bits and encode() puts them back, so a mask
written by a newer service survives a read/edit/write cycle.

Round-trip law: decode(encode(flags).key_usage) == flags.
"""

from __future__ import annotations

import operator
from enum import CONTINUOUS, UNIQUE, IntFlag, verify
from functools import reduce

import structlog
from cryptography import x509
from pydantic.alias_generators import to_camel

from cert_codec.domain.extensions import KeyUsageSpec
from cert_codec.domain.forms import KeyUsageFlags
from cert_codec.domain.payloads import IssuersFilter
from cert_codec.result import ErrorCode, Result

log = structlog.get_logger()


@verify(UNIQUE, CONTINUOUS)
class KeyUsageFlag(IntFlag):
    """X.509 KeyUsage bits as sent on the wire."""

    DIGITAL_SIGNATURE = 1
    CONTENT_COMMITMENT = 2
    KEY_ENCIPHERMENT = 4
    DATA_ENCIPHERMENT = 8
    KEY_AGREEMENT = 16
    KEY_CERT_SIGN = 32
    CRL_SIGN = 64
    ENCIPHER_ONLY = 128
    DECIPHER_ONLY = 256


KNOWN_BITS: int = int(reduce(operator.or_, KeyUsageFlag, KeyUsageFlag(0)))


def _attribute(flag: KeyUsageFlag) -> str:
    return flag.name.lower()  # type: ignore[union-attr]


def decode(bitmask: int) -> KeyUsageFlags:
    """
    Split a wire bitmask into one boolean per usage. Never fails.

    The wire mask is unsigned. A negative value keeps its nine defined bits
    and drops the rest, since its high bits cannot be re-encoded.
    """
    if bitmask < 0:
        log.warning("key_usage.negative_mask", bitmask=bitmask)
        unknown_bits = 0
    else:
        unknown_bits = bitmask & ~KNOWN_BITS
    if unknown_bits:
        log.debug("key_usage.unknown_bits", bitmask=bitmask, unknown_bits=unknown_bits)
    return KeyUsageFlags(
        **{_attribute(flag): bool(bitmask & flag) for flag in KeyUsageFlag},
        unknown_bits=unknown_bits,
    )


def to_mask(flags: KeyUsageFlags) -> KeyUsageFlag:
    """OR together the bits of every asserted usage (unknown bits excluded)."""
    return reduce(
        operator.or_,
        (flag for flag in KeyUsageFlag if getattr(flags, _attribute(flag))),
        KeyUsageFlag(0),
    )


def encode(flags: KeyUsageFlags) -> KeyUsageSpec:
    """
    Pack flags into an enabled KeyUsage spec.

    All-false flags give enabled=True, key_usage=0: the extension is present
    with no usage asserted, which is not the same as leaving it out.
    """
    return KeyUsageSpec(enabled=True, key_usage=int(to_mask(flags)) | flags.unknown_bits)


def decode_spec(spec: KeyUsageSpec) -> KeyUsageFlags | None:
    """Decode a wire spec; None when the extension is disabled."""
    if not spec.enabled:
        return None
    return decode(spec.key_usage)


def describe(flags: KeyUsageFlags) -> str:
    """Comma-separated names of the asserted usages, in bit order."""
    names = [to_camel(_attribute(flag)) for flag in KeyUsageFlag if getattr(flags, _attribute(flag))]
    if flags.unknown_bits:
        names.append(f"unknown(0x{flags.unknown_bits:x})")
    return ", ".join(names)


def issuers_filter(flags: KeyUsageFlags) -> IssuersFilter:
    """Build the issuer query for entries that carry at least these usages."""
    return IssuersFilter(key_usage=int(to_mask(flags)))


def to_x509(spec: KeyUsageSpec) -> Result[x509.KeyUsage | None]:
    """
    Convert a wire spec into a cryptography KeyUsage value.

    Success(None) when the extension is disabled. cryptography rejects
    encipherOnly/decipherOnly without keyAgreement; that comes back as
    Result.failure(VALIDATION_ERROR).
    """
    if not spec.enabled:
        return Result.success(None)
    flags = decode(spec.key_usage)
    return Result.from_computation(
        lambda: x509.KeyUsage(**{_attribute(flag): getattr(flags, _attribute(flag)) for flag in KeyUsageFlag}),
        ErrorCode.VALIDATION_ERROR,
        "Key usage combination is not representable",
    )
