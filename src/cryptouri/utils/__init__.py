"""Utility modules for CryptoURI."""

from .zeroize import zeroize

__all__ = ["zeroize"]
