"""Cryptographic algorithm registry for CryptoURI."""

from __future__ import annotations

from enum import Enum

from .errors import AlgorithmInvalidError


class Algorithm(str, Enum):
    """Algorithms with a CryptoURI identifier.

    The set is closed: adding an algorithm means adding a member here and
    a typed object for it.
    """

    # NIST SHA-256 digest algorithm (FIPS 180-4)
    SHA256 = "sha256"

    # Ed25519 elliptic curve digital signature algorithm (RFC 8032)
    ED25519 = "ed25519"

    # AES in Galois/Counter Mode
    AES128GCM = "aes128gcm"
    AES256GCM = "aes256gcm"

    # ChaCha20Poly1305 AEAD (RFC 8439)
    CHACHA20POLY1305 = "chacha20poly1305"

    # HKDF (RFC 5869) instantiated with HMAC-SHA-256
    HKDFSHA256 = "hkdfsha256"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, identifier: str) -> Algorithm:
        """Parse an algorithm identifier.

        Identifiers are case-sensitive ASCII, e.g. ``"ed25519"``.

        Args:
            identifier: The algorithm identifier to parse.

        Returns:
            The matching Algorithm.

        Raises:
            AlgorithmInvalidError: If the identifier is not recognized.
        """
        try:
            return cls(identifier)
        except ValueError:
            raise AlgorithmInvalidError(identifier) from None
