"""Tests for encoding profiles."""

import dataclasses

import pytest

from cryptouri.encoding import (
    DASHERIZED_ENCODING,
    URI_ENCODING,
    Encodable,
    EncodingProfile,
    ObjectKind,
)


class TestProfiles:
    """Tests for the built-in profiles."""

    def test_uri_profile(self) -> None:
        """Test the URI profile constants."""
        assert URI_ENCODING.digest_scheme == "crypto:hash:"
        assert URI_ENCODING.public_key_scheme == "crypto:pub:key:"
        assert URI_ENCODING.secret_key_scheme == "crypto:sec:key:"
        assert URI_ENCODING.signature_scheme == "crypto:sig:"
        assert URI_ENCODING.delimiter == ":"
        assert URI_ENCODING.combine == "+"
        assert URI_ENCODING.fragment_delimiter == "#"

    def test_dasherized_profile(self) -> None:
        """Test the dasherized profile constants."""
        assert DASHERIZED_ENCODING.digest_scheme == "crypto-hash-"
        assert DASHERIZED_ENCODING.public_key_scheme == "crypto-pub-key-"
        assert DASHERIZED_ENCODING.secret_key_scheme == "crypto-sec-key-"
        assert DASHERIZED_ENCODING.signature_scheme == "crypto-sig-"
        assert DASHERIZED_ENCODING.delimiter == "-"
        assert DASHERIZED_ENCODING.combine == "_"
        assert DASHERIZED_ENCODING.fragment_delimiter is None

    def test_schemes_end_with_delimiter(self) -> None:
        """Test that every scheme ends with its profile's delimiter."""
        for profile in (URI_ENCODING, DASHERIZED_ENCODING):
            for _, scheme in profile.schemes():
                assert scheme.endswith(profile.delimiter)

    def test_schemes_mutually_exclusive(self) -> None:
        """Test that no scheme is a prefix of another within a profile."""
        for profile in (URI_ENCODING, DASHERIZED_ENCODING):
            schemes = [scheme for _, scheme in profile.schemes()]
            for scheme in schemes:
                assert [s for s in schemes if s.startswith(scheme)] == [scheme]

    def test_scheme_order(self) -> None:
        """Test that schemes are matched digest, public key, secret key, signature."""
        assert [kind for kind, _ in URI_ENCODING.schemes()] == [
            ObjectKind.DIGEST,
            ObjectKind.PUBLIC_KEY,
            ObjectKind.SECRET_KEY,
            ObjectKind.SIGNATURE,
        ]

    def test_scheme_for(self) -> None:
        """Test selecting a scheme by object kind."""
        assert URI_ENCODING.scheme_for(ObjectKind.SECRET_KEY) == "crypto:sec:key:"
        assert DASHERIZED_ENCODING.scheme_for(ObjectKind.SIGNATURE) == "crypto-sig-"

    def test_profiles_are_immutable(self) -> None:
        """Test that profiles cannot be modified at runtime."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            URI_ENCODING.delimiter = "/"  # type: ignore[misc]


class TestProfileValidation:
    """Tests for EncodingProfile construction."""

    def test_ambiguous_schemes_rejected(self) -> None:
        """Test that a scheme starting with another scheme is rejected."""
        with pytest.raises(ValueError, match="Ambiguous"):
            EncodingProfile(
                name="broken",
                digest_scheme="crypto:",
                public_key_scheme="crypto:pub:",
                secret_key_scheme="crypto:sec:",
                signature_scheme="crypto:sig:",
                delimiter=":",
                combine="+",
            )

    def test_custom_profile(self) -> None:
        """Test that a non-ambiguous custom profile is accepted."""
        profile = EncodingProfile(
            name="custom",
            digest_scheme="c.h.",
            public_key_scheme="c.p.",
            secret_key_scheme="c.s.",
            signature_scheme="c.g.",
            delimiter=".",
            combine="~",
        )
        assert profile.fragment_delimiter is None


class TestEncodable:
    """Tests for the Encodable base."""

    def test_requires_algorithm_id_and_payload(self) -> None:
        """Test that a subclass must implement both hooks before it can be created."""

        class PayloadOnly(Encodable):
            KIND = ObjectKind.DIGEST

            def _payload(self) -> bytes:
                return bytes(32)

        with pytest.raises(TypeError):
            PayloadOnly()

    def test_minimal_subclass_encodes(self) -> None:
        """Test that implementing both hooks is enough to serialize."""

        class Zeros(Encodable):
            KIND = ObjectKind.DIGEST

            def algorithm_id(self, profile: EncodingProfile) -> str:
                return "sha256"

            def _payload(self) -> bytes:
                return bytes(32)

        assert Zeros().to_uri_string().startswith("crypto:hash:sha256:")
        assert Zeros().to_dasherized_string().startswith("crypto-hash-sha256-")
