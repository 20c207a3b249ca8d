"""Bech32 checksummed transport with a configurable delimiter.

BIP-173 fixes the separator between the human-readable part and the data
to ``1`` and caps strings at 90 characters. CryptoURIs need ``:`` or ``-``
as the separator and carry payloads (64-byte signatures) that exceed the
cap, so this module frames strings itself and uses the ``bech32`` package
only for the checksum and 8-to-5 bit regrouping.

Checksums use the original Bech32 constant (not Bech32m) over the whole
human-readable part; the delimiter itself is not covered.
"""

from __future__ import annotations

from bech32 import CHARSET, bech32_create_checksum, bech32_verify_checksum, convertbits

from .constants import BECH32_CHECKSUM_LENGTH
from .errors import ChecksumInvalidError, ParseError
from .utils.zeroize import zeroize

_CHARSET_REV = {c: i for i, c in enumerate(CHARSET)}


def encode(hrp: str, data: bytes | bytearray | memoryview, delimiter: str) -> str:
    """Encode binary data as a Bech32 string.

    Args:
        hrp: The human-readable part (scheme prefix plus algorithm identifier).
        data: The payload bytes.
        delimiter: Character separating ``hrp`` from the encoded payload.

    Returns:
        The lowercase checksummed string.

    Raises:
        ParseError: If the human-readable part is empty or contains
            characters outside printable ASCII.
    """
    _validate_hrp(hrp)

    data5 = convertbits(data, 8, 5, True)
    try:
        checksum = bech32_create_checksum(hrp, data5)
        return hrp + delimiter + "".join(CHARSET[d] for d in data5 + checksum)
    finally:
        zeroize(data5)


def decode(bech: str, delimiter: str) -> tuple[str, bytearray]:
    """Decode a Bech32 string into its human-readable part and payload.

    Args:
        bech: The checksummed string.
        delimiter: Character separating the human-readable part from the payload.

    Returns:
        Tuple of (human-readable part, payload). The payload is a fresh
        bytearray the caller owns and is expected to wipe.

    Raises:
        ParseError: If the string is structurally malformed.
        ChecksumInvalidError: If the checksum does not match.
    """
    if any(ord(c) < 33 or ord(c) > 126 for c in bech):
        raise ParseError("Bech32 string contains non-printable or non-ASCII characters")

    if bech.lower() != bech and bech.upper() != bech:
        raise ParseError("Bech32 string uses mixed case")
    bech = bech.lower()

    pos = bech.rfind(delimiter)
    if pos < 1:
        raise ParseError(f"Missing {delimiter!r} delimiter or empty prefix")
    if pos + BECH32_CHECKSUM_LENGTH + 1 > len(bech):
        raise ParseError("Bech32 data part is shorter than the checksum")

    hrp = bech[:pos]
    try:
        data5 = [_CHARSET_REV[c] for c in bech[pos + 1 :]]
    except KeyError as e:
        raise ParseError(f"Invalid Bech32 character: {e.args[0]!r}") from None

    try:
        if not bech32_verify_checksum(hrp, data5):
            raise ChecksumInvalidError(f"Bech32 checksum mismatch for prefix {hrp!r}")

        decoded = convertbits(data5[:-BECH32_CHECKSUM_LENGTH], 5, 8, False)
        if decoded is None:
            raise ParseError("Invalid Bech32 padding")

        try:
            return hrp, bytearray(decoded)
        finally:
            zeroize(decoded)
    finally:
        zeroize(data5)


def _validate_hrp(hrp: str) -> None:
    """Validate that a human-readable part can be framed."""
    if not hrp:
        raise ParseError("Bech32 prefix must not be empty")
    if any(ord(c) < 33 or ord(c) > 126 for c in hrp):
        raise ParseError(f"Bech32 prefix contains invalid characters: {hrp!r}")
