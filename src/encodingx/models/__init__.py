"""Payload carriers for encodingx."""

from __future__ import annotations

from .carrier import Bytes, make_bytes, new_bytes

__all__ = [
    "Bytes",
    "make_bytes",
    "new_bytes",
]
