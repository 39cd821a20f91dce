"""Built-in encodings.

Byte-oriented (style BYTES): Hex, HexTier, HexTierRand, Lazy, Base64,
Base64URL, CloudFrontURLSafe. Structural (style STRUCT): JSON, MsgPack, TOML,
FlatBuffers.
"""

from __future__ import annotations

from .base64_codec import Base64, Base64URL, CloudFrontURLSafe
from .flatbuffers_codec import FlatBufferMarshaler, FlatBuffers, FlatBufferUnmarshaler
from .hex import Hex, HexTier, HexTierRand
from .json_codec import JSON
from .lazy import Lazy
from .msgpack_codec import MsgPack
from .toml_codec import TOML

__all__ = [
    "Hex",
    "HexTier",
    "HexTierRand",
    "Lazy",
    "Base64",
    "Base64URL",
    "CloudFrontURLSafe",
    "JSON",
    "MsgPack",
    "TOML",
    "FlatBuffers",
    "FlatBufferMarshaler",
    "FlatBufferUnmarshaler",
]
