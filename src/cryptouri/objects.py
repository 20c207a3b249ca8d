"""Fixed-size containers shared by all CryptoURI object kinds."""

from __future__ import annotations

import hmac
from types import TracebackType
from typing import Any

from .algorithm import Algorithm
from .encoding import Encodable, EncodingProfile
from .errors import LengthInvalidError
from .utils.zeroize import zeroize

BytesLike = bytes | bytearray | memoryview


class CryptoObject(Encodable):
    """A fixed-size byte string tagged with its algorithm.

    Concrete classes set ``ALGORITHM`` and ``SIZE``.
    """

    ALGORITHM: Algorithm
    SIZE: int

    @property
    def algorithm(self) -> Algorithm:
        """The algorithm this object belongs to."""
        return self.ALGORITHM

    def algorithm_id(self, profile: EncodingProfile) -> str:
        """Return the algorithm identifier; combined keys override this."""
        return str(self.ALGORITHM)

    @classmethod
    def _check_length(cls, data: BytesLike) -> None:
        if len(data) != cls.SIZE:
            raise LengthInvalidError(actual=len(data), expected=cls.SIZE)

    def __len__(self) -> int:
        return self.SIZE


class PublicBytes(CryptoObject):
    """Non-secret fixed-size value (digest, public key, signature).

    Immutable, hashable and compared by value.
    """

    def __init__(self, data: BytesLike) -> None:
        self._check_length(data)
        self._bytes = bytes(data)

    def to_bytes(self) -> bytes:
        """Return the raw bytes."""
        return self._bytes

    def __bytes__(self) -> bytes:
        return self._bytes

    def _payload(self) -> bytes:
        return self._bytes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicBytes):
            return NotImplemented
        return type(self) is type(other) and self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._bytes))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._bytes.hex()!r})"


class SecretBytes(CryptoObject):
    """Secret fixed-size value whose buffer is zeroed at end of life.

    The key owns a private bytearray. ``expose_secret()`` lends a read-only
    view of it without copying. ``zeroize()``, leaving a ``with`` block, or
    garbage collection overwrite the buffer with zeros; after that the key
    can no longer be exposed or encoded.

    Bytes passed to the constructor are copied; wiping the caller's own
    buffer is the caller's responsibility.
    """

    def __init__(self, data: BytesLike) -> None:
        # Rejected payloads are never copied into the buffer
        self._check_length(data)
        self._secret = bytearray(data)
        self._zeroized = False

    def expose_secret(self) -> memoryview:
        """Borrow the key bytes as a read-only view.

        Returns:
            A read-only memoryview over the key's own buffer.

        Raises:
            ValueError: If the key has been zeroized.
        """
        if self._zeroized:
            raise ValueError(f"{type(self).__name__} has been zeroized")
        return memoryview(self._secret).toreadonly()

    def _payload(self) -> memoryview:
        return self.expose_secret()

    @property
    def is_zeroized(self) -> bool:
        """Whether the key material has been wiped."""
        return self._zeroized

    def zeroize(self) -> None:
        """Overwrite the key material with zeros. Safe to call repeatedly."""
        zeroize(self._secret)
        self._zeroized = True

    def copy(self) -> SecretBytes:
        """Return an independent key with its own wiped-on-dispose buffer."""
        return type(self)(self.expose_secret())

    def __copy__(self) -> SecretBytes:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> SecretBytes:
        return self.copy()

    def __reduce__(self) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    def __enter__(self) -> SecretBytes:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.zeroize()

    def __del__(self) -> None:
        # __init__ may have raised before the buffer existed
        if hasattr(self, "_secret"):
            self.zeroize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretBytes):
            return NotImplemented
        if self._zeroized or other._zeroized:
            return False
        return type(self) is type(other) and hmac.compare_digest(self._secret, other._secret)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<redacted>)"
