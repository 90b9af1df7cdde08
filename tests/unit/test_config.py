"""
Unit tests for CodecSettings — environment loading and catalog validation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cert_codec.config import CodecSettings


def _load() -> CodecSettings:
    return CodecSettings(_env_file=None)  # type: ignore[call-arg]


class TestDefaults:
    def test_defaults(self, settings: CodecSettings) -> None:
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"
        assert settings.default_key_type == "ECDSA256"
        assert settings.default_acme_key_type == "ECDSA256"
        assert settings.default_validity_days == 365


class TestEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN CERT_CODEC_* variables in the environment
        WHEN settings load
        THEN they override the defaults.
        """
        monkeypatch.setenv("CERT_CODEC_LOG_FORMAT", "json")
        monkeypatch.setenv("CERT_CODEC_DEFAULT_KEY_TYPE", "ED25519")
        monkeypatch.setenv("CERT_CODEC_DEFAULT_VALIDITY_DAYS", "90")
        settings = _load()
        assert settings.log_format == "json"
        assert settings.default_key_type == "ED25519"
        assert settings.default_validity_days == 90

    def test_key_type_is_stripped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CERT_CODEC_DEFAULT_KEY_TYPE", " RSA4096 ")
        assert _load().default_key_type == "RSA4096"


class TestValidation:
    def test_unknown_default_key_type_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CERT_CODEC_DEFAULT_KEY_TYPE", "DSA1024")
        with pytest.raises(ValidationError, match="general key-type catalog"):
            _load()

    def test_acme_default_must_be_acme_type(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        GIVEN an ACME default that only the general catalog offers
        WHEN settings load
        THEN validation fails at startup.
        """
        monkeypatch.setenv("CERT_CODEC_DEFAULT_ACME_KEY_TYPE", "ED25519")
        with pytest.raises(ValidationError, match="acme key-type catalog"):
            _load()

    def test_validity_days_must_be_positive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CERT_CODEC_DEFAULT_VALIDITY_DAYS", "0")
        with pytest.raises(ValidationError):
            _load()

    def test_log_format_is_restricted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CERT_CODEC_LOG_FORMAT", "xml")
        with pytest.raises(ValidationError):
            _load()
