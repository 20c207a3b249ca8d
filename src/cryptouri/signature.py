"""Digital signature types."""

from __future__ import annotations

from .algorithm import Algorithm
from .constants import ED25519_SIGNATURE_SIZE
from .encoding import ObjectKind
from .errors import AlgorithmInvalidError
from .objects import BytesLike, PublicBytes


class Signature(PublicBytes):
    """Base class for signatures."""

    KIND = ObjectKind.SIGNATURE

    @classmethod
    def new(cls, alg_id: str, data: BytesLike) -> Signature:
        """Create a signature for the given algorithm identifier.

        Raises:
            AlgorithmInvalidError: If the algorithm is not a signature algorithm.
            LengthInvalidError: If the data has the wrong length.
        """
        signature_type = SIGNATURE_TYPES.get(Algorithm.parse(alg_id))
        if signature_type is None:
            raise AlgorithmInvalidError(alg_id, f"Not a signature algorithm: {alg_id!r}")
        return signature_type(data)

    def ed25519_signature(self) -> Ed25519Signature | None:
        """Return this signature if it is Ed25519, else None."""
        return self if isinstance(self, Ed25519Signature) else None

    def is_ed25519_signature(self) -> bool:
        """Is this an Ed25519 signature?"""
        return self.ed25519_signature() is not None


class Ed25519Signature(Signature):
    """Ed25519 (RFC 8032) signature, R || S."""

    ALGORITHM = Algorithm.ED25519
    SIZE = ED25519_SIGNATURE_SIZE


SIGNATURE_TYPES: dict[Algorithm, type[Signature]] = {
    Algorithm.ED25519: Ed25519Signature,
}
