"""Digest (i.e. hash) types."""

from __future__ import annotations

from .algorithm import Algorithm
from .constants import SHA256_DIGEST_SIZE
from .encoding import ObjectKind
from .errors import AlgorithmInvalidError
from .objects import BytesLike, PublicBytes


class Digest(PublicBytes):
    """Base class for digests of keys or other data."""

    KIND = ObjectKind.DIGEST

    @classmethod
    def new(cls, alg_id: str, data: BytesLike) -> Digest:
        """Create a digest for the given algorithm identifier.

        Args:
            alg_id: The algorithm identifier, e.g. ``"sha256"``.
            data: The digest bytes.

        Returns:
            The typed digest.

        Raises:
            AlgorithmInvalidError: If the algorithm is not a digest algorithm.
            LengthInvalidError: If the data has the wrong length.
        """
        digest_type = DIGEST_TYPES.get(Algorithm.parse(alg_id))
        if digest_type is None:
            raise AlgorithmInvalidError(alg_id, f"Not a digest algorithm: {alg_id!r}")
        return digest_type(data)

    def sha256_digest(self) -> Sha256Digest | None:
        """Return this digest if it is SHA-256, else None."""
        return self if isinstance(self, Sha256Digest) else None

    def is_sha256_digest(self) -> bool:
        """Is this a SHA-256 digest?"""
        return self.sha256_digest() is not None


class Sha256Digest(Digest):
    """NIST SHA-256 digest."""

    ALGORITHM = Algorithm.SHA256
    SIZE = SHA256_DIGEST_SIZE


DIGEST_TYPES: dict[Algorithm, type[Digest]] = {
    Algorithm.SHA256: Sha256Digest,
}
