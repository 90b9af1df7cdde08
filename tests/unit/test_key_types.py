"""
Unit tests for the key-type catalogs.

Covers catalog contents and ordering, lookup of unknown identifiers,
and mode-aware resolution into Results.
"""

from __future__ import annotations

from cert_codec import key_types
from cert_codec.key_types import (
    ACME_KEY_TYPES,
    GENERAL_KEY_TYPES,
    IssuanceMode,
    KeyType,
    UnknownKeyType,
)
from cert_codec.result import ErrorCode
from tests.conftest import ResultAssertions


class TestCatalogs:
    def test_general_catalog_order(self) -> None:
        assert [kt.identifier for kt in GENERAL_KEY_TYPES] == [
            "ECDSA224",
            "ECDSA256",
            "ECDSA384",
            "ECDSA521",
            "ED25519",
            "RSA2048",
            "RSA3072",
            "RSA4096",
            "RSA8192",
        ]

    def test_labels(self) -> None:
        assert GENERAL_KEY_TYPES[0] == KeyType("ECDSA P-224", "ECDSA224")
        assert GENERAL_KEY_TYPES[-1] == KeyType("RSA 8192", "RSA8192")

    def test_acme_catalog_has_five_entries(self) -> None:
        assert [kt.identifier for kt in ACME_KEY_TYPES] == [
            "ECDSA256",
            "ECDSA384",
            "RSA2048",
            "RSA3072",
            "RSA4096",
        ]

    def test_acme_is_ordered_subset_of_general(self) -> None:
        """
        GIVEN both catalogs
        WHEN the general catalog is filtered to ACME members
        THEN the result equals the ACME catalog in the same order.
        """
        assert tuple(kt for kt in GENERAL_KEY_TYPES if kt in ACME_KEY_TYPES) == ACME_KEY_TYPES

    def test_identifiers_are_unique(self) -> None:
        identifiers = [kt.identifier for kt in GENERAL_KEY_TYPES]
        assert len(identifiers) == len(set(identifiers))

    def test_list_for(self) -> None:
        assert key_types.list_for(IssuanceMode.GENERAL) is GENERAL_KEY_TYPES
        assert key_types.list_for(IssuanceMode.ACME) is ACME_KEY_TYPES


class TestLookup:
    def test_known_identifier(self) -> None:
        assert key_types.lookup("RSA2048") == KeyType("RSA 2048", "RSA2048")

    def test_unknown_identifier_keeps_raw_value(self) -> None:
        """
        GIVEN an identifier in no catalog
        WHEN looked up
        THEN an UnknownKeyType is returned and displays the raw identifier.
        """
        found = key_types.lookup("DSA1024")
        assert found == UnknownKeyType("DSA1024")
        assert found.label == "DSA1024"

    def test_lookup_is_case_sensitive(self) -> None:
        assert isinstance(key_types.lookup("rsa2048"), UnknownKeyType)


class TestIsSupported:
    def test_ed25519_is_general_only(self) -> None:
        assert key_types.is_supported("ED25519", IssuanceMode.GENERAL) is True
        assert key_types.is_supported("ED25519", IssuanceMode.ACME) is False

    def test_unknown_is_never_supported(self) -> None:
        assert key_types.is_supported("DSA1024", IssuanceMode.GENERAL) is False


class TestResolve:
    def test_resolves_acme_member(self) -> None:
        result = key_types.resolve("RSA3072", IssuanceMode.ACME)
        assert ResultAssertions.assert_success(result) == KeyType("RSA 3072", "RSA3072")

    def test_unknown_identifier_fails(self) -> None:
        result = key_types.resolve("DSA1024", IssuanceMode.GENERAL)
        ResultAssertions.assert_failure(result, ErrorCode.UNKNOWN_KEY_TYPE)
        ResultAssertions.assert_failure_message_contains(result, "DSA1024")

    def test_general_only_type_rejected_for_acme(self) -> None:
        """
        GIVEN a key type in the general catalog only
        WHEN resolved for ACME issuance
        THEN the failure is UNSUPPORTED_KEY_TYPE, not UNKNOWN_KEY_TYPE.
        """
        result = key_types.resolve("RSA8192", IssuanceMode.ACME)
        ResultAssertions.assert_failure(result, ErrorCode.UNSUPPORTED_KEY_TYPE)
        ResultAssertions.assert_failure_message_contains(result, "acme")
