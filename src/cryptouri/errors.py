"""Error hierarchy for CryptoURI."""

from __future__ import annotations


class CryptoUriError(Exception):
    """Base exception for all CryptoURI errors."""

    pass


class SchemeInvalidError(CryptoUriError):
    """Prefix matches none of the digest, public key, secret key or signature schemes.

    Attributes:
        prefix: The full human-readable prefix that failed to match.
    """

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"Unknown CryptoURI prefix: {prefix!r}")


class AlgorithmInvalidError(CryptoUriError):
    """Unknown or unsupported algorithm identifier.

    Attributes:
        algorithm: The offending algorithm identifier.
    """

    def __init__(self, algorithm: str, message: str | None = None) -> None:
        self.algorithm = algorithm
        super().__init__(message or f"Unknown or unsupported algorithm: {algorithm!r}")


class LengthInvalidError(CryptoUriError):
    """Payload length does not match the algorithm's fixed size.

    Attributes:
        actual: The length that was supplied.
        expected: The length the algorithm requires.
    """

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"Invalid length: {actual} bytes, expected {expected}")


class ParseError(CryptoUriError):
    """Malformed CryptoURI structure."""

    pass


class ChecksumInvalidError(CryptoUriError):
    """The Bech32 checksum did not match.

    Indicates the string was corrupted or mistyped in transit.
    """

    pass
