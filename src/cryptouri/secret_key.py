"""Secret key types.

All secret keys own their key material and wipe it on ``zeroize()``, on
leaving a ``with`` block and on garbage collection.
"""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives.ciphers.aead import AESGCM, ChaCha20Poly1305

from .algorithm import Algorithm
from .constants import (
    AES128_KEY_SIZE,
    AES256_KEY_SIZE,
    CHACHA20POLY1305_KEY_SIZE,
    ED25519_SECRET_KEY_SIZE,
    HKDFSHA256_KEY_SIZE,
)
from .encoding import URI_ENCODING, EncodingProfile, ObjectKind
from .errors import AlgorithmInvalidError, ParseError
from .objects import BytesLike, SecretBytes


class SecretKey(SecretBytes):
    """Base class for symmetric and asymmetric secret keys."""

    KIND = ObjectKind.SECRET_KEY

    @classmethod
    def new(cls, alg_id: str, data: BytesLike, combine: str = URI_ENCODING.combine) -> SecretKey:
        """Create a secret key for the given algorithm identifier.

        An identifier containing ``combine`` is an HKDF combination such as
        ``hkdfsha256+aes256gcm``.

        Args:
            alg_id: The algorithm identifier or combination.
            data: The key material. It is copied; the caller wipes its own buffer.
            combine: Character joining combined algorithm identifiers.

        Returns:
            The typed secret key.

        Raises:
            AlgorithmInvalidError: If the algorithm has no secret keys or the
                combination is not HKDF with a valid target algorithm.
            ParseError: If a combination does not have exactly two algorithms.
            LengthInvalidError: If the data has the wrong length.
        """
        if combine and combine in alg_id:
            return HkdfSha256Key.from_combination(alg_id, data, combine)

        key_type = SECRET_KEY_TYPES.get(Algorithm.parse(alg_id))
        if key_type is None:
            raise AlgorithmInvalidError(alg_id, f"Not a secret key algorithm: {alg_id!r}")
        return key_type(data)

    def aes128gcm_key(self) -> Aes128GcmKey | None:
        """Return this key if it is an AES-128-GCM key, else None."""
        return self if isinstance(self, Aes128GcmKey) else None

    def is_aes128gcm_key(self) -> bool:
        """Is this an AES-128-GCM key?"""
        return self.aes128gcm_key() is not None

    def aes256gcm_key(self) -> Aes256GcmKey | None:
        """Return this key if it is an AES-256-GCM key, else None."""
        return self if isinstance(self, Aes256GcmKey) else None

    def is_aes256gcm_key(self) -> bool:
        """Is this an AES-256-GCM key?"""
        return self.aes256gcm_key() is not None

    def chacha20poly1305_key(self) -> ChaCha20Poly1305Key | None:
        """Return this key if it is a ChaCha20Poly1305 key, else None."""
        return self if isinstance(self, ChaCha20Poly1305Key) else None

    def is_chacha20poly1305_key(self) -> bool:
        """Is this a ChaCha20Poly1305 key?"""
        return self.chacha20poly1305_key() is not None

    def ed25519_key(self) -> Ed25519SecretKey | None:
        """Return this key if it is an Ed25519 secret key, else None."""
        return self if isinstance(self, Ed25519SecretKey) else None

    def is_ed25519_key(self) -> bool:
        """Is this an Ed25519 secret key?"""
        return self.ed25519_key() is not None

    def hkdfsha256_key(self) -> HkdfSha256Key | None:
        """Return this key if it is HKDF-SHA-256 input key material, else None."""
        return self if isinstance(self, HkdfSha256Key) else None

    def is_hkdfsha256_key(self) -> bool:
        """Is this HKDF-SHA-256 input key material?"""
        return self.hkdfsha256_key() is not None


class Aes128GcmKey(SecretKey):
    """AES-128 in Galois/Counter Mode (GCM)."""

    ALGORITHM = Algorithm.AES128GCM
    SIZE = AES128_KEY_SIZE

    def to_aead(self) -> AESGCM:
        """Hand the key to a ``cryptography`` AESGCM cipher.

        The cipher keeps its own copy of the key, outside this key's wipe.
        """
        return AESGCM(bytes(self.expose_secret()))


class Aes256GcmKey(SecretKey):
    """AES-256 in Galois/Counter Mode (GCM)."""

    ALGORITHM = Algorithm.AES256GCM
    SIZE = AES256_KEY_SIZE

    def to_aead(self) -> AESGCM:
        """Hand the key to a ``cryptography`` AESGCM cipher.

        The cipher keeps its own copy of the key, outside this key's wipe.
        """
        return AESGCM(bytes(self.expose_secret()))


class ChaCha20Poly1305Key(SecretKey):
    """ChaCha20Poly1305 AEAD key (RFC 8439)."""

    ALGORITHM = Algorithm.CHACHA20POLY1305
    SIZE = CHACHA20POLY1305_KEY_SIZE

    def to_aead(self) -> ChaCha20Poly1305:
        """Hand the key to a ``cryptography`` ChaCha20Poly1305 cipher.

        The cipher keeps its own copy of the key, outside this key's wipe.
        """
        return ChaCha20Poly1305(bytes(self.expose_secret()))


class Ed25519SecretKey(SecretKey):
    """Ed25519 secret key (the 32-byte seed of RFC 8032)."""

    ALGORITHM = Algorithm.ED25519
    SIZE = ED25519_SECRET_KEY_SIZE

    @classmethod
    def from_cryptography(cls, key: ed25519.Ed25519PrivateKey) -> Ed25519SecretKey:
        """Wrap a ``cryptography`` Ed25519 private key."""
        return cls(key.private_bytes_raw())

    def to_cryptography(self) -> ed25519.Ed25519PrivateKey:
        """Convert to a ``cryptography`` Ed25519 private key.

        The returned key holds its own copy of the seed, outside this key's wipe.
        """
        return ed25519.Ed25519PrivateKey.from_private_bytes(bytes(self.expose_secret()))


class HkdfSha256Key(SecretKey):
    """HKDF-SHA-256 input key material.

    Optionally names the algorithm of the key it is meant to derive, in
    which case it encodes as a combination, e.g.
    ``crypto:sec:key:hkdfsha256+aes256gcm:...``.
    """

    ALGORITHM = Algorithm.HKDFSHA256
    SIZE = HKDFSHA256_KEY_SIZE

    def __init__(self, data: BytesLike, derived_alg: Algorithm | str | None = None) -> None:
        if derived_alg is not None:
            derived_alg = Algorithm.parse(derived_alg)
            if derived_alg is Algorithm.HKDFSHA256:
                raise AlgorithmInvalidError(
                    str(derived_alg), "HKDF-SHA-256 cannot be combined with itself"
                )
        super().__init__(data)
        self._derived_alg = derived_alg

    @classmethod
    def from_combination(cls, alg_id: str, data: BytesLike, combine: str) -> HkdfSha256Key:
        """Create a key from a combined identifier like ``hkdfsha256+aes256gcm``.

        Raises:
            ParseError: If the identifier does not hold exactly two algorithms.
            AlgorithmInvalidError: If the first algorithm is not HKDF-SHA-256 or
                the second is unknown or HKDF-SHA-256 itself.
            LengthInvalidError: If the data has the wrong length.
        """
        tokens = alg_id.split(combine)
        if len(tokens) != 2:
            raise ParseError(
                f"Expected two algorithms joined by {combine!r}, got {len(tokens)}: {alg_id!r}"
            )

        kdf_id, derived_id = tokens
        if Algorithm.parse(kdf_id) is not cls.ALGORITHM:
            raise AlgorithmInvalidError(
                kdf_id, f"Only {cls.ALGORITHM} keys can be combined, got {kdf_id!r}"
            )
        return cls(data, derived_alg=Algorithm.parse(derived_id))

    @property
    def derived_alg(self) -> Algorithm | None:
        """Algorithm of the key this material is meant to derive, if any."""
        return self._derived_alg

    def algorithm_id(self, profile: EncodingProfile) -> str:
        if self._derived_alg is None:
            return str(self.ALGORITHM)
        return f"{self.ALGORITHM}{profile.combine}{self._derived_alg}"

    def copy(self) -> HkdfSha256Key:
        return type(self)(self.expose_secret(), derived_alg=self._derived_alg)

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is True:
            return self._derived_alg == other._derived_alg  # type: ignore[attr-defined]
        return result

    __hash__ = None  # type: ignore[assignment]


SECRET_KEY_TYPES: dict[Algorithm, type[SecretKey]] = {
    Algorithm.AES128GCM: Aes128GcmKey,
    Algorithm.AES256GCM: Aes256GcmKey,
    Algorithm.CHACHA20POLY1305: ChaCha20Poly1305Key,
    Algorithm.ED25519: Ed25519SecretKey,
    Algorithm.HKDFSHA256: HkdfSha256Key,
}
