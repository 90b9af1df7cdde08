"""
Form structs — the per-toggle boolean view of each extension.

These are what a certificate-generation form edits and what the read path
hands back for display. All are frozen dataclasses; editing a toggle means
`dataclasses.replace(flags, key_cert_sign=True)`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

PATH_LEN_UNCONSTRAINED = -1

# Bits 1..256 of the KeyUsage mask (codecs.key_usage.KeyUsageFlag).
KEY_USAGE_DEFINED_BITS = 0x1FF


@dataclass(frozen=True, slots=True)
class KeyUsageFlags:
    """
    One independent flag per KeyUsage bit; any subset is valid.

    `unknown_bits` carries mask bits outside the nine defined positions
    through a decode/encode round trip. Forms leave it at 0. It must be
    non-negative and disjoint from the defined bits; anything else raises
    ValueError, so each mask has exactly one flags value.
    """

    digital_signature: bool = False
    content_commitment: bool = False
    key_encipherment: bool = False
    data_encipherment: bool = False
    key_agreement: bool = False
    key_cert_sign: bool = False
    crl_sign: bool = False
    encipher_only: bool = False
    decipher_only: bool = False
    unknown_bits: int = 0

    def __post_init__(self) -> None:
        if self.unknown_bits < 0:
            raise ValueError(f"unknown_bits must be non-negative, got {self.unknown_bits}")
        if self.unknown_bits & KEY_USAGE_DEFINED_BITS:
            raise ValueError(f"unknown_bits 0x{self.unknown_bits:x} overlaps the defined KeyUsage bits")


@dataclass(frozen=True, slots=True)
class ExtKeyUsageForm:
    """Extended key usage purposes. Combinations are not validated here."""

    any: bool = False
    server_auth: bool = False
    client_auth: bool = False
    code_signing: bool = False
    email_protection: bool = False
    ipsec_end_system: bool = False
    ipsec_tunnel: bool = False
    ipsec_user: bool = False
    time_stamping: bool = False
    ocsp_signing: bool = False
    microsoft_server_gated_crypto: bool = False
    netscape_server_gated_crypto: bool = False
    microsoft_commercial_code_signing: bool = False
    microsoft_kernel_code_signing: bool = False


@dataclass(frozen=True, slots=True)
class BasicConstraintsForm:
    """CA flag and path length; -1 means no path length constraint, 0 means none below."""

    ca: bool = False
    path_len_constraint: int = PATH_LEN_UNCONSTRAINED

    @property
    def is_path_len_constrained(self) -> bool:
        return self.path_len_constraint >= 0


@dataclass(frozen=True, slots=True)
class GenerateForm:
    """
    Everything a generate dialog collects, independent of the CA kind.

    Which fields matter depends on the CA the user picked:
      - Local: dn, key_type, issuer, validity window, the three extensions
      - Remote: dn, key_type
      - ACME: domains, key_type

    An extension set to None is disabled and sent with enabled=False.
    """

    name: str
    ca: str
    key_type: str
    dn: str = ""
    issuer: str = ""
    valid_from: datetime | None = None
    valid_to: datetime | None = None
    domains: tuple[str, ...] = ()
    key_usage: KeyUsageFlags | None = None
    ext_key_usage: ExtKeyUsageForm | None = None
    basic_constraints: BasicConstraintsForm | None = None
