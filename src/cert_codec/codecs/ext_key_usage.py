"""
ExtendedKeyUsage codec — field-for-field copy between wire spec and form.

No packing: both sides have one boolean per purpose. The only contract is
that encode() forces enabled=True. Purpose combinations (including `any`
alongside specific purposes) pass through untouched; conflicts are for the
issuing service to judge.
"""

from __future__ import annotations

from dataclasses import fields

from cryptography import x509
from cryptography.x509.oid import ExtendedKeyUsageOID
from pydantic.alias_generators import to_camel

from cert_codec.domain.extensions import ExtKeyUsageSpec
from cert_codec.domain.forms import ExtKeyUsageForm

PURPOSES: tuple[str, ...] = tuple(f.name for f in fields(ExtKeyUsageForm))

# Purposes cryptography has no constant for use their registered OIDs.
PURPOSE_OIDS: dict[str, x509.ObjectIdentifier] = {
    "any": ExtendedKeyUsageOID.ANY_EXTENDED_KEY_USAGE,
    "server_auth": ExtendedKeyUsageOID.SERVER_AUTH,
    "client_auth": ExtendedKeyUsageOID.CLIENT_AUTH,
    "code_signing": ExtendedKeyUsageOID.CODE_SIGNING,
    "email_protection": ExtendedKeyUsageOID.EMAIL_PROTECTION,
    "ipsec_end_system": x509.ObjectIdentifier("1.3.6.1.5.5.7.3.5"),
    "ipsec_tunnel": x509.ObjectIdentifier("1.3.6.1.5.5.7.3.6"),
    "ipsec_user": x509.ObjectIdentifier("1.3.6.1.5.5.7.3.7"),
    "time_stamping": ExtendedKeyUsageOID.TIME_STAMPING,
    "ocsp_signing": ExtendedKeyUsageOID.OCSP_SIGNING,
    "microsoft_server_gated_crypto": x509.ObjectIdentifier("1.3.6.1.4.1.311.10.3.3"),
    "netscape_server_gated_crypto": x509.ObjectIdentifier("2.16.840.1.113730.4.1"),
    "microsoft_commercial_code_signing": x509.ObjectIdentifier("1.3.6.1.4.1.311.2.1.22"),
    "microsoft_kernel_code_signing": x509.ObjectIdentifier("1.3.6.1.4.1.311.61.1.1"),
}


def decode(spec: ExtKeyUsageSpec) -> ExtKeyUsageForm:
    """Copy each purpose flag from the wire spec; `enabled` is not consulted."""
    return ExtKeyUsageForm(**{purpose: getattr(spec, purpose) for purpose in PURPOSES})


def encode(form: ExtKeyUsageForm) -> ExtKeyUsageSpec:
    """Copy each purpose flag into an enabled wire spec."""
    return ExtKeyUsageSpec(enabled=True, **{purpose: getattr(form, purpose) for purpose in PURPOSES})


def decode_spec(spec: ExtKeyUsageSpec) -> ExtKeyUsageForm | None:
    """Decode a wire spec; None when the extension is disabled."""
    if not spec.enabled:
        return None
    return decode(spec)


def describe(form: ExtKeyUsageForm) -> str:
    return ", ".join(to_camel(purpose) for purpose in PURPOSES if getattr(form, purpose))


def to_x509(spec: ExtKeyUsageSpec) -> x509.ExtendedKeyUsage | None:
    """Map the asserted purposes to their OIDs, in purpose order; None when disabled."""
    if not spec.enabled:
        return None
    return x509.ExtendedKeyUsage([PURPOSE_OIDS[purpose] for purpose in PURPOSES if getattr(spec, purpose)])
