"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from CERT_CODEC_* environment variables
  - Fall back to a .env file at the project root
  - Validate defaults against the key-type catalogs at startup

The expiry warning window is a fixed rule, not a setting.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cert_codec.key_types import IssuanceMode, is_supported

# src/cert_codec/config.py → project root .env, independent of the working directory.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


def _require_key_type(value: str, mode: IssuanceMode) -> str:
    value = value.strip()
    if not is_supported(value, mode):
        raise ValueError(f"Key type {value!r} is not in the {mode.value} key-type catalog")
    return value


class CodecSettings(BaseSettings):
    """
    Settings for form defaults and logging.

    Load order (highest priority first):
      1. Environment variables (CERT_CODEC_LOG_LEVEL, CERT_CODEC_DEFAULT_KEY_TYPE, ...)
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="CERT_CODEC_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    log_format: Literal["console", "json"] = Field(default="console")

    default_key_type: str = Field(
        default="ECDSA256",
        description="Key type preselected for Local and Remote requests",
    )
    default_acme_key_type: str = Field(
        default="ECDSA256",
        description="Key type preselected for ACME requests",
    )
    default_validity_days: int = Field(
        default=365,
        ge=1,
        description="Length of the validity window preselected for Local certificates",
    )

    @field_validator("default_key_type")
    @classmethod
    def validate_default_key_type(cls, value: str) -> str:
        return _require_key_type(value, IssuanceMode.GENERAL)

    @field_validator("default_acme_key_type")
    @classmethod
    def validate_default_acme_key_type(cls, value: str) -> str:
        return _require_key_type(value, IssuanceMode.ACME)
