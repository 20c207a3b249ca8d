"""String encoding profiles for CryptoURI."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from .parts import encode_parts


class ObjectKind(str, Enum):
    """Kinds of objects a CryptoURI can carry."""

    DIGEST = "digest"
    PUBLIC_KEY = "public_key"
    SECRET_KEY = "secret_key"
    SIGNATURE = "signature"


@dataclass(frozen=True)
class EncodingProfile:
    """Characters and scheme prefixes used to encode CryptoURIs.

    Attributes:
        name: Short name of the profile, for diagnostics.
        digest_scheme: Scheme prefix for digests.
        public_key_scheme: Scheme prefix for public keys.
        secret_key_scheme: Scheme prefix for secret keys.
        signature_scheme: Scheme prefix for signatures.
        delimiter: Bech32 delimiter separating the human-readable part from the data.
        combine: Character joining two algorithm identifiers into a combination.
        fragment_delimiter: Character introducing an un-checksummed fragment,
            or None if the profile has no fragments.
    """

    name: str
    digest_scheme: str
    public_key_scheme: str
    secret_key_scheme: str
    signature_scheme: str
    delimiter: str
    combine: str
    fragment_delimiter: str | None = None

    def __post_init__(self) -> None:
        schemes = self.schemes()
        for kind, scheme in schemes:
            for other_kind, other in schemes:
                if kind is not other_kind and scheme.startswith(other):
                    raise ValueError(
                        f"Ambiguous {self.name} profile: {kind.value} scheme {scheme!r} "
                        f"starts with {other_kind.value} scheme {other!r}"
                    )

    def schemes(self) -> list[tuple[ObjectKind, str]]:
        """Return (kind, scheme) pairs in matching priority order."""
        return [
            (ObjectKind.DIGEST, self.digest_scheme),
            (ObjectKind.PUBLIC_KEY, self.public_key_scheme),
            (ObjectKind.SECRET_KEY, self.secret_key_scheme),
            (ObjectKind.SIGNATURE, self.signature_scheme),
        ]

    def scheme_for(self, kind: ObjectKind) -> str:
        """Return the scheme prefix for an object kind."""
        for candidate, scheme in self.schemes():
            if candidate is kind:
                return scheme
        raise ValueError(f"Unknown object kind: {kind!r}")


# Normal URI encoding
URI_ENCODING = EncodingProfile(
    name="uri",
    digest_scheme="crypto:hash:",
    public_key_scheme="crypto:pub:key:",
    secret_key_scheme="crypto:sec:key:",
    signature_scheme="crypto:sig:",
    delimiter=":",
    combine="+",
    fragment_delimiter="#",
)

# URI-embeddable (a.k.a. "dasherized") encoding
DASHERIZED_ENCODING = EncodingProfile(
    name="dasherized",
    digest_scheme="crypto-hash-",
    public_key_scheme="crypto-pub-key-",
    secret_key_scheme="crypto-sec-key-",
    signature_scheme="crypto-sig-",
    delimiter="-",
    combine="_",
    fragment_delimiter=None,
)


class Encodable(ABC):
    """Mixin for objects that serialize to CryptoURI strings.

    Subclasses set ``KIND`` and implement ``algorithm_id`` and ``_payload``;
    everything else is shared.
    """

    KIND: ObjectKind

    @abstractmethod
    def algorithm_id(self, profile: EncodingProfile) -> str:
        """Return the algorithm field of the prefix for this object."""

    @abstractmethod
    def _payload(self) -> bytes | memoryview:
        """Return the bytes to place in the data part."""

    def to_string(self, profile: EncodingProfile) -> str:
        """Encode this object with the given profile.

        Args:
            profile: The encoding profile to use.

        Returns:
            The checksummed CryptoURI string.
        """
        prefix = profile.scheme_for(self.KIND) + self.algorithm_id(profile)
        return encode_parts(prefix, self._payload(), profile)

    def to_uri_string(self) -> str:
        """Encode this object in URI generic syntax."""
        return self.to_string(URI_ENCODING)

    def to_dasherized_string(self) -> str:
        """Encode this object in URI-embeddable "dasherized" format."""
        return self.to_string(DASHERIZED_ENCODING)
