"""Helpers for wiping secret material from memory."""

from __future__ import annotations


def zeroize(buffer: bytearray | list[int]) -> None:
    """Overwrite every element of a mutable buffer with zero, in place.

    The buffer keeps its length so that any outstanding memoryview still
    refers to valid (zeroed) storage.

    Args:
        buffer: The bytearray or list of ints to wipe.
    """
    for i in range(len(buffer)):
        buffer[i] = 0
