"""Tiered framing primitives for encodingx.

This module provides the power-of-two tier ladder, length-prefixed frames,
the hex character layer and the zlib compression layer used by the hex codecs.
"""

from __future__ import annotations

from .config import DEFAULT_TIER_CONFIG, RAND_TIER_CONFIG, TierConfig
from .tiered import (
    build_frame,
    build_rand_frame,
    compress,
    decompress,
    find_tier_size,
    hex_decode,
    hex_encode,
    is_tier_size,
    parse_frame,
    parse_rand_frame,
)

__all__ = [
    "TierConfig",
    "DEFAULT_TIER_CONFIG",
    "RAND_TIER_CONFIG",
    "find_tier_size",
    "is_tier_size",
    "build_frame",
    "parse_frame",
    "build_rand_frame",
    "parse_rand_frame",
    "hex_encode",
    "hex_decode",
    "compress",
    "decompress",
]
