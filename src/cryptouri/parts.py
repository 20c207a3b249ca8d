"""Split CryptoURI strings into prefix, payload and fragment."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType
from typing import TYPE_CHECKING

from . import transport
from .utils.zeroize import zeroize

if TYPE_CHECKING:
    from .encoding import EncodingProfile


@dataclass
class Parts:
    """Decoded parts of a CryptoURI.

    The payload may be secret key material: use the instance as a context
    manager, or call ``zeroize()``, once the typed object has been built.

    Attributes:
        prefix: Scheme plus algorithm identifier, without the payload.
        data: The raw payload bytes.
        fragment: Everything after the fragment delimiter, if present.
            Not covered by the checksum.
    """

    prefix: str
    data: bytearray
    fragment: str | None = None

    def zeroize(self) -> None:
        """Overwrite the payload with zeros."""
        zeroize(self.data)

    def __enter__(self) -> Parts:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.zeroize()


def decode_parts(uri: str, profile: EncodingProfile) -> Parts:
    """Decode a CryptoURI string into its parts.

    The fragment (if the profile supports one) is split off at the first
    fragment delimiter before the checksum is verified, so it can be edited
    freely without invalidating the string.

    Args:
        uri: The CryptoURI string.
        profile: The encoding profile the string uses.

    Returns:
        The decoded Parts.

    Raises:
        ParseError: If the string is structurally malformed.
        ChecksumInvalidError: If the checksum does not match.
    """
    fragment = None
    if profile.fragment_delimiter is not None:
        head, sep, tail = uri.partition(profile.fragment_delimiter)
        if sep:
            uri, fragment = head, tail

    prefix, data = transport.decode(uri, profile.delimiter)
    return Parts(prefix=prefix, data=data, fragment=fragment)


def encode_parts(prefix: str, data: bytes | bytearray | memoryview, profile: EncodingProfile) -> str:
    """Encode a prefix and payload as a checksummed string.

    Fragments are not handled here; callers append them after the
    checksummed segment.

    Args:
        prefix: Scheme plus algorithm identifier.
        data: The payload bytes.
        profile: The encoding profile to use.

    Returns:
        The checksummed string.
    """
    return transport.encode(prefix, data, profile.delimiter)
