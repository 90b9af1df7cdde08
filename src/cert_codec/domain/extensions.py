"""
Wire extension specs — the JSON shapes exchanged with the issuing service.

Three independent, frozen pydantic models. Each carries the `enabled`
presence flag: enabled=False means the extension is left out of the
certificate and the remaining fields are ignored, not defaulted.

Python attributes are snake_case; the wire uses camelCase
(keyUsage, pathLenConstraint, serverAuth, ...). Both names are accepted on
input, the camelCase names are emitted on output.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

WIRE_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    validate_by_name=True,
    validate_by_alias=True,
    serialize_by_alias=True,
    frozen=True,
)


class KeyUsageSpec(BaseModel):
    """KeyUsage extension: a single unsigned bitmask (see codecs.key_usage.KeyUsageFlag)."""

    model_config = WIRE_MODEL_CONFIG

    enabled: bool = False
    key_usage: int = Field(default=0, ge=0)


class ExtKeyUsageSpec(BaseModel):
    """ExtendedKeyUsage extension: one boolean per purpose."""

    model_config = WIRE_MODEL_CONFIG

    enabled: bool = False
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


class BasicConstraintsSpec(BaseModel):
    """BasicConstraints extension: CA flag plus path length (-1 = unconstrained)."""

    model_config = WIRE_MODEL_CONFIG

    enabled: bool = False
    ca: bool = False
    path_len_constraint: int = -1


type ExtensionSpec = KeyUsageSpec | ExtKeyUsageSpec | BasicConstraintsSpec
