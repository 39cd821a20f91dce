"""The uniform Encoding contract and its dispatch helpers."""

from __future__ import annotations

from .base import Encoding, EncodingStyle, decode, encode, marshal, unmarshal
from .dispatch import assign_bytes, assign_value, is_raw, to_bytes, to_plain

__all__ = [
    "Encoding",
    "EncodingStyle",
    "marshal",
    "unmarshal",
    "encode",
    "decode",
    "assign_bytes",
    "assign_value",
    "is_raw",
    "to_bytes",
    "to_plain",
]
