"""
BasicConstraints codec — CA flag and path length, copied as-is.

The path length is passed through whatever its value; -1 is the
"unconstrained" sentinel and 0 means no intermediate CA may follow.
Rejecting values below -1 is left to the form.
"""

from __future__ import annotations

from cryptography import x509

from cert_codec.domain.extensions import BasicConstraintsSpec
from cert_codec.domain.forms import PATH_LEN_UNCONSTRAINED, BasicConstraintsForm

__all__ = [
    "PATH_LEN_UNCONSTRAINED",
    "decode",
    "decode_spec",
    "describe",
    "encode",
    "to_x509",
]


def decode(spec: BasicConstraintsSpec) -> BasicConstraintsForm:
    """Copy the CA flag and path length; `enabled` is not consulted."""
    return BasicConstraintsForm(ca=spec.ca, path_len_constraint=spec.path_len_constraint)


def encode(form: BasicConstraintsForm) -> BasicConstraintsSpec:
    """Wrap the CA flag and path length in an enabled wire spec."""
    return BasicConstraintsSpec(enabled=True, ca=form.ca, path_len_constraint=form.path_len_constraint)


def decode_spec(spec: BasicConstraintsSpec) -> BasicConstraintsForm | None:
    """Decode a wire spec; None when the extension is disabled."""
    if not spec.enabled:
        return None
    return decode(spec)


def describe(form: BasicConstraintsForm) -> str:
    """E.g. 'CA = true, pathLenConstraint = 0', 'CA = true' or 'CA = false'."""
    if not form.ca:
        return "CA = false"
    if form.is_path_len_constrained:
        return f"CA = true, pathLenConstraint = {form.path_len_constraint}"
    return "CA = true"


def to_x509(spec: BasicConstraintsSpec) -> x509.BasicConstraints | None:
    """
    Convert a wire spec into a cryptography BasicConstraints value.

    A path length is only carried for CA certificates with a constraint >= 0;
    everything else is unconstrained. None when the extension is disabled.
    """
    if not spec.enabled:
        return None
    path_length = spec.path_len_constraint if spec.ca and spec.path_len_constraint >= 0 else None
    return x509.BasicConstraints(ca=spec.ca, path_length=path_length)
