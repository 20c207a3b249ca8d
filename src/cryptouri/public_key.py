"""Public key types."""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric import ed25519

from .algorithm import Algorithm
from .constants import ED25519_PUBLIC_KEY_SIZE
from .encoding import ObjectKind
from .errors import AlgorithmInvalidError
from .objects import BytesLike, PublicBytes


class PublicKey(PublicBytes):
    """Base class for asymmetric public keys."""

    KIND = ObjectKind.PUBLIC_KEY

    @classmethod
    def new(cls, alg_id: str, data: BytesLike) -> PublicKey:
        """Create a public key for the given algorithm identifier.

        Args:
            alg_id: The algorithm identifier, e.g. ``"ed25519"``.
            data: The encoded public key.

        Returns:
            The typed public key.

        Raises:
            AlgorithmInvalidError: If the algorithm has no public keys.
            LengthInvalidError: If the data has the wrong length.
        """
        key_type = PUBLIC_KEY_TYPES.get(Algorithm.parse(alg_id))
        if key_type is None:
            raise AlgorithmInvalidError(alg_id, f"Not a public key algorithm: {alg_id!r}")
        return key_type(data)

    def ed25519_key(self) -> Ed25519PublicKey | None:
        """Return this key if it is an Ed25519 public key, else None."""
        return self if isinstance(self, Ed25519PublicKey) else None

    def is_ed25519_key(self) -> bool:
        """Is this an Ed25519 public key?"""
        return self.ed25519_key() is not None


class Ed25519PublicKey(PublicKey):
    """Ed25519 public key (compressed Edwards-y coordinate)."""

    ALGORITHM = Algorithm.ED25519
    SIZE = ED25519_PUBLIC_KEY_SIZE

    @classmethod
    def from_cryptography(cls, key: ed25519.Ed25519PublicKey) -> Ed25519PublicKey:
        """Wrap a ``cryptography`` Ed25519 public key."""
        return cls(key.public_bytes_raw())

    def to_cryptography(self) -> ed25519.Ed25519PublicKey:
        """Convert to a ``cryptography`` Ed25519 public key.

        Raises:
            ValueError: If the bytes are not a valid curve point.
        """
        return ed25519.Ed25519PublicKey.from_public_bytes(self._bytes)


PUBLIC_KEY_TYPES: dict[Algorithm, type[PublicKey]] = {
    Algorithm.ED25519: Ed25519PublicKey,
}
