"""encodingx: pluggable encoding registry

A uniform marshal/unmarshal contract over many serialization formats, with
encodings selected, chained and reversed by name.

Key Features:
- Tiered hex framing (Hex, HexTier with zlib, HexTierRand) whose output length
  only grows through 16, 32, 64, 128, ... characters
- Transport encodings: base64, URL-safe base64, CloudFront URL-safe base64
- Structural encodings: JSON, MessagePack, TOML, FlatBuffers
- Chains such as JSON -> HexTier, reversible with reverse()

Quick Start:
    >>> from encodingx import ChainEncoding, Bytes, lookup
    >>>
    >>> hex_tier = lookup("HexTier")
    >>> text = hex_tier.marshal(b"hello world")
    >>> sink = Bytes()
    >>> hex_tier.unmarshal(text, sink)
    >>> sink.data
    b'hello world'
    >>>
    >>> chain = ChainEncoding(["JSON", "Hex"], ["Hex", "JSON"])
    >>> result = {}
    >>> chain.unmarshal(chain.marshal({"code": 0}), result)
    >>> result
    {'code': 0}
"""

from __future__ import annotations

from .chain import ChainEncoding, empty
from .codecs import (
    JSON,
    TOML,
    Base64,
    Base64URL,
    CloudFrontURLSafe,
    FlatBufferMarshaler,
    FlatBuffers,
    FlatBufferUnmarshaler,
    Hex,
    HexTier,
    HexTierRand,
    Lazy,
    MsgPack,
)
from .encoding import Encoding, EncodingStyle, decode, encode, marshal, unmarshal
from .exceptions import (
    EncodingxError,
    InvalidDataError,
    MissingEncodingError,
    RegistryFrozenError,
    WrongEncodingStyleError,
    WrongValueTypeError,
)
from .framing import TierConfig
from .models import Bytes, make_bytes, new_bytes
from .registry import Registry, RegistryBuilder, default_registry, lookup

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Encoding",
    "EncodingStyle",
    "marshal",
    "unmarshal",
    "encode",
    "decode",
    # Carrier
    "Bytes",
    "new_bytes",
    "make_bytes",
    # Registry
    "Registry",
    "RegistryBuilder",
    "default_registry",
    "lookup",
    # Chains
    "ChainEncoding",
    "empty",
    # Encodings
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
    # Configuration
    "TierConfig",
    # Exceptions
    "EncodingxError",
    "WrongValueTypeError",
    "InvalidDataError",
    "MissingEncodingError",
    "WrongEncodingStyleError",
    "RegistryFrozenError",
    # Version
    "__version__",
]
