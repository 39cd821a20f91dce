"""Tiered hex encodings.

All three encodings write a power-of-two frame as lowercase hex, so the output
is 16, 32, 64, 128, ... characters long:

- Hex: [length][raw payload][zero padding]
- HexTier: [length][zlib-compressed payload][zero padding]
- HexTierRand: [key][length ^ key][payload ^ key][random padding], floor 32 chars

For HexTier the length prefix counts compressed bytes, not the original payload.
"""

from __future__ import annotations

from typing import Any, Optional

from ..encoding import Encoding, EncodingStyle, assign_bytes, to_bytes
from ..framing import (
    DEFAULT_TIER_CONFIG,
    RAND_TIER_CONFIG,
    TierConfig,
    build_frame,
    build_rand_frame,
    compress,
    decompress,
    hex_decode,
    hex_encode,
    parse_frame,
    parse_rand_frame,
)


class Hex(Encoding):
    """Length-prefixed, tier-padded hex encoding of raw bytes.

    Example:
        >>> Hex().marshal(b"ABCD")
        b'0000000441424344'
    """

    style = EncodingStyle.BYTES

    def __init__(self, config: Optional[TierConfig] = None) -> None:
        self.config = config or DEFAULT_TIER_CONFIG

    def marshal(self, value: Any) -> bytes:
        data = to_bytes(value, self.name)
        return hex_encode(build_frame(data, self.config))

    def unmarshal(self, data: bytes, target: Any) -> None:
        frame = hex_decode(data)
        assign_bytes(target, parse_frame(frame, self.config), self.name)


class HexTier(Encoding):
    """Hex encoding with zlib compression before tier framing."""

    style = EncodingStyle.BYTES

    def __init__(self, config: Optional[TierConfig] = None) -> None:
        self.config = config or DEFAULT_TIER_CONFIG

    def marshal(self, value: Any) -> bytes:
        data = to_bytes(value, self.name)
        return hex_encode(build_frame(compress(data), self.config))

    def unmarshal(self, data: bytes, target: Any) -> None:
        frame = hex_decode(data)
        compressed = parse_frame(frame, self.config)
        assign_bytes(target, decompress(compressed), self.name)


class HexTierRand(Encoding):
    """Hex encoding with a random rolling XOR key and random padding.

    Output differs on every call; there is no integrity check.
    """

    style = EncodingStyle.BYTES

    def __init__(self, config: Optional[TierConfig] = None) -> None:
        self.config = config or RAND_TIER_CONFIG

    def marshal(self, value: Any) -> bytes:
        data = to_bytes(value, self.name)
        return hex_encode(build_rand_frame(data, self.config))

    def unmarshal(self, data: bytes, target: Any) -> None:
        frame = hex_decode(data)
        assign_bytes(target, parse_rand_frame(frame, self.config), self.name)
