"""Tiered-length framing with a hex character layer.

The frame structure is:
- [Length (4 bytes, big-endian)] [Payload (Length bytes)] [Zero padding]

The total frame length is the smallest power of two (at least 8) that holds the
length prefix and the payload, so the hex text grows only through the ladder
16, 32, 64, 128, ... characters. Only the prefix is authoritative: padding bytes
are written as zeros but never checked on the way in, so frames that differ only
in their padding decode to the same payload.

The randomized variant prepends a 4-byte random key, XORs the length and the
payload with the rolling key and fills the padding with random bytes:
- [Key (4 bytes)] [Length ^ Key (4 bytes)] [Payload ^ Key] [Random padding]
"""

from __future__ import annotations

import binascii
import os
import struct
import zlib
from typing import Optional

from ..exceptions import InvalidDataError
from .config import DEFAULT_TIER_CONFIG, RAND_TIER_CONFIG, TierConfig

LENGTH_SIZE = 4
KEY_SIZE = 4
MAX_PAYLOAD_LENGTH = 0xFFFFFFFF


def find_tier_size(payload_length: int, min_tier: int = 8) -> int:
    """Find the smallest tier that can hold ``payload_length`` bytes.

    Args:
        payload_length: Bytes needed, including the length prefix
        min_tier: Floor of the tier ladder

    Returns:
        Smallest power of two >= both ``payload_length`` and ``min_tier``

    Example:
        >>> find_tier_size(4)
        8
        >>> find_tier_size(9)
        16
    """
    tier_size = min_tier
    while tier_size < payload_length:
        tier_size *= 2
    return tier_size


def is_tier_size(size: int, min_tier: int = 8) -> bool:
    """Check whether ``size`` is a valid tier (a power of two >= ``min_tier``)."""
    if size < min_tier:
        return False
    return size & (size - 1) == 0


def _select_tier(needed: int, config: TierConfig) -> int:
    tier_size = find_tier_size(needed, config.min_tier)
    if config.max_tier is not None and tier_size > config.max_tier:
        raise InvalidDataError(
            f"Payload needs a {tier_size}-byte frame, above max_tier={config.max_tier}"
        )
    return tier_size


def _check_tier(frame: bytes, config: TierConfig, floor: Optional[int] = None) -> None:
    if not is_tier_size(len(frame), config.min_tier if floor is None else floor):
        raise InvalidDataError(f"Frame length {len(frame)} is not a valid tier")
    if config.max_tier is not None and len(frame) > config.max_tier:
        raise InvalidDataError(
            f"Frame length {len(frame)} exceeds max_tier={config.max_tier}"
        )


def build_frame(payload: bytes, config: TierConfig = DEFAULT_TIER_CONFIG) -> bytes:
    """Wrap ``payload`` in a length-prefixed, zero-padded tier frame.

    Raises:
        InvalidDataError: If the payload does not fit the length field or the
            configured max_tier
    """
    if len(payload) > MAX_PAYLOAD_LENGTH:
        raise InvalidDataError(f"Payload too large for 32-bit length: {len(payload)} bytes")

    tier_size = _select_tier(LENGTH_SIZE + len(payload), config)

    frame = bytearray(tier_size)
    struct.pack_into(">I", frame, 0, len(payload))
    frame[LENGTH_SIZE : LENGTH_SIZE + len(payload)] = payload
    return bytes(frame)


def parse_frame(frame: bytes, config: TierConfig = DEFAULT_TIER_CONFIG) -> bytes:
    """Extract the payload from a tier frame.

    Raises:
        InvalidDataError: If the frame length is not a tier or the length
            prefix exceeds the frame body
    """
    _check_tier(frame, config)

    if len(frame) < LENGTH_SIZE:
        raise InvalidDataError(f"Frame too short for length prefix: {len(frame)} bytes")

    payload_length = struct.unpack_from(">I", frame, 0)[0]
    if payload_length > len(frame) - LENGTH_SIZE:
        raise InvalidDataError(
            f"Length prefix says {payload_length} bytes, "
            f"but frame body has {len(frame) - LENGTH_SIZE} bytes"
        )

    return frame[LENGTH_SIZE : LENGTH_SIZE + payload_length]


def build_rand_frame(payload: bytes, config: TierConfig = RAND_TIER_CONFIG) -> bytes:
    """Wrap ``payload`` in a key-obfuscated frame with random padding.

    Raises:
        InvalidDataError: If the payload does not fit the length field or the
            configured max_tier
    """
    if len(payload) > MAX_PAYLOAD_LENGTH:
        raise InvalidDataError(f"Payload too large for 32-bit length: {len(payload)} bytes")

    tier_size = _select_tier(KEY_SIZE + LENGTH_SIZE + len(payload), config)

    frame = bytearray(os.urandom(tier_size))
    key = frame[:KEY_SIZE]

    length = struct.pack(">I", len(payload))
    for i in range(LENGTH_SIZE):
        frame[KEY_SIZE + i] = length[i] ^ key[i]

    offset = KEY_SIZE + LENGTH_SIZE
    for i, byte in enumerate(payload):
        frame[offset + i] = byte ^ key[i % KEY_SIZE]

    return bytes(frame)


def parse_rand_frame(frame: bytes, config: TierConfig = RAND_TIER_CONFIG) -> bytes:
    """Extract the payload from a key-obfuscated frame.

    Frames of 8 bytes or more are accepted whatever the configured min_tier,
    so an 8-byte frame carries an empty payload.

    Raises:
        InvalidDataError: If the frame length is not a tier or the decoded
            length exceeds the frame body
    """
    _check_tier(frame, config, floor=KEY_SIZE + LENGTH_SIZE)

    if len(frame) < KEY_SIZE + LENGTH_SIZE:
        raise InvalidDataError(f"Frame too short for key and length: {len(frame)} bytes")

    key = frame[:KEY_SIZE]
    length = bytes(frame[KEY_SIZE + i] ^ key[i] for i in range(LENGTH_SIZE))
    payload_length = struct.unpack(">I", length)[0]

    offset = KEY_SIZE + LENGTH_SIZE
    if payload_length > len(frame) - offset:
        raise InvalidDataError(
            f"Length prefix says {payload_length} bytes, "
            f"but frame body has {len(frame) - offset} bytes"
        )

    return bytes(
        frame[offset + i] ^ key[i % KEY_SIZE] for i in range(payload_length)
    )


def hex_encode(frame: bytes) -> bytes:
    """Encode a frame as lowercase hex text."""
    return binascii.hexlify(frame)


def hex_decode(text: bytes) -> bytes:
    """Decode hex text into a frame.

    Raises:
        binascii.Error: On an odd number of digits or a non-hex character
    """
    return binascii.unhexlify(text)


def compress(data: bytes) -> bytes:
    """zlib-compress ``data`` at the default level."""
    return zlib.compress(data)


def decompress(data: bytes) -> bytes:
    """Inflate a zlib stream.

    Raises:
        zlib.error: On a bad header, truncated stream or checksum mismatch
    """
    return zlib.decompress(data)
