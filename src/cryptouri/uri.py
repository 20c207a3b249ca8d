"""CryptoUri: URI-based format for encoding cryptographic objects."""

from __future__ import annotations

import logging
from types import TracebackType

from .digest import Digest
from .encoding import DASHERIZED_ENCODING, URI_ENCODING, EncodingProfile, ObjectKind
from .errors import CryptoUriError, SchemeInvalidError
from .objects import CryptoObject, SecretBytes
from .parts import Parts, decode_parts
from .public_key import PublicKey
from .secret_key import SecretKey
from .signature import Signature

logger = logging.getLogger("cryptouri")


class CryptoUri:
    """A decoded CryptoURI: one typed object plus an optional fragment.

    Example:
        ```python
        from cryptouri import CryptoUri

        uri = CryptoUri.parse_uri(
            "crypto:pub:key:ed25519:6adfsqvzky9t042tlmfujeq88g8wzuhnm2nzxfd0qgdx3ac82ydqf03cvv"
        )
        key = uri.public_key.ed25519_key()
        ```

    Attributes:
        value: The typed digest, public key, secret key or signature.
        fragment: Annotation after ``#`` (URI encoding only). Not covered by
            the checksum.
    """

    def __init__(self, value: CryptoObject, fragment: str | None = None) -> None:
        if not isinstance(value, (Digest, PublicKey, SecretKey, Signature)):
            raise TypeError(f"Not a CryptoURI object: {type(value).__name__}")
        self.value = value
        self.fragment = fragment

    @classmethod
    def parse(cls, uri: str, profile: EncodingProfile) -> CryptoUri:
        """Parse a CryptoURI using the given encoding profile.

        Args:
            uri: The encoded string.
            profile: The encoding profile the string uses.

        Returns:
            The decoded CryptoUri.

        Raises:
            SchemeInvalidError: If the prefix names no known object kind.
            AlgorithmInvalidError: If the algorithm is unknown for that kind.
            LengthInvalidError: If the payload has the wrong length.
            ParseError: If the string is malformed.
            ChecksumInvalidError: If the checksum does not match.
        """
        try:
            with decode_parts(uri, profile) as parts:
                value = _build_object(parts, profile)
        except CryptoUriError as e:
            logger.debug("Rejected %s CryptoURI: %s", profile.name, type(e).__name__)
            raise
        return cls(value, parts.fragment)

    @classmethod
    def parse_uri(cls, uri: str) -> CryptoUri:
        """Parse a CryptoURI in URI generic syntax (``crypto:...``)."""
        return cls.parse(uri, URI_ENCODING)

    @classmethod
    def parse_dasherized(cls, token: str) -> CryptoUri:
        """Parse a CryptoURI in "dasherized" encoding (``crypto-...``)."""
        return cls.parse(token, DASHERIZED_ENCODING)

    @property
    def kind(self) -> ObjectKind:
        """Kind of object this URI carries."""
        return self.value.KIND

    @property
    def digest(self) -> Digest | None:
        """The digest, if this URI carries one."""
        return self.value if isinstance(self.value, Digest) else None

    @property
    def public_key(self) -> PublicKey | None:
        """The public key, if this URI carries one."""
        return self.value if isinstance(self.value, PublicKey) else None

    @property
    def secret_key(self) -> SecretKey | None:
        """The secret key, if this URI carries one."""
        return self.value if isinstance(self.value, SecretKey) else None

    @property
    def signature(self) -> Signature | None:
        """The signature, if this URI carries one."""
        return self.value if isinstance(self.value, Signature) else None

    def is_digest(self) -> bool:
        return self.kind is ObjectKind.DIGEST

    def is_public_key(self) -> bool:
        return self.kind is ObjectKind.PUBLIC_KEY

    def is_secret_key(self) -> bool:
        return self.kind is ObjectKind.SECRET_KEY

    def is_signature(self) -> bool:
        return self.kind is ObjectKind.SIGNATURE

    def to_string(self, profile: EncodingProfile) -> str:
        """Encode with the given profile, appending the fragment if the profile allows one."""
        encoded = self.value.to_string(profile)
        if self.fragment is None:
            return encoded
        if profile.fragment_delimiter is None:
            logger.debug("Omitting fragment: %s encoding has no fragments", profile.name)
            return encoded
        return encoded + profile.fragment_delimiter + self.fragment

    def to_uri_string(self) -> str:
        """Encode in URI generic syntax, including any fragment."""
        return self.to_string(URI_ENCODING)

    def to_dasherized_string(self) -> str:
        """Encode in "dasherized" format. Fragments are not representable and are omitted."""
        return self.to_string(DASHERIZED_ENCODING)

    def zeroize(self) -> None:
        """Wipe the carried object if it is secret."""
        if isinstance(self.value, SecretBytes):
            self.value.zeroize()

    def __enter__(self) -> CryptoUri:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.zeroize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CryptoUri):
            return NotImplemented
        return self.value == other.value and self.fragment == other.fragment

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CryptoUri({self.value!r}, fragment={self.fragment!r})"


def _build_object(parts: Parts, profile: EncodingProfile) -> CryptoObject:
    """Dispatch decoded parts to the constructor for their scheme."""
    for kind, scheme in profile.schemes():
        if not parts.prefix.startswith(scheme):
            continue

        alg_id = parts.prefix[len(scheme) :]
        if kind is ObjectKind.DIGEST:
            return Digest.new(alg_id, parts.data)
        if kind is ObjectKind.PUBLIC_KEY:
            return PublicKey.new(alg_id, parts.data)
        if kind is ObjectKind.SECRET_KEY:
            return SecretKey.new(alg_id, parts.data, combine=profile.combine)
        if kind is ObjectKind.SIGNATURE:
            return Signature.new(alg_id, parts.data)

    raise SchemeInvalidError(parts.prefix)


def parse_uri(uri: str) -> CryptoUri:
    """Parse a CryptoURI in URI generic syntax."""
    return CryptoUri.parse_uri(uri)


def parse_dasherized(token: str) -> CryptoUri:
    """Parse a CryptoURI in "dasherized" encoding."""
    return CryptoUri.parse_dasherized(token)
