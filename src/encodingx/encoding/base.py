"""The uniform Encoding contract shared by every codec.

Every encoding, byte-oriented or structural, exposes the same five
operations: ``name``, ``style``, ``marshal``, ``unmarshal`` and ``reverse``.
Encodings are stateless and safe to call from many threads at once.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

T = TypeVar("T")


class EncodingStyle(enum.Enum):
    """What kind of values an encoding operates on."""

    BYTES = "bytes"  # raw byte payloads (bytes-like or a Bytes carrier)
    STRUCT = "struct"  # structured values delegated to a library
    MIX = "mix"  # chains of encodings


class Encoding(ABC):
    """Base class for all encodings.

    Subclasses set ``style`` and implement marshal() and unmarshal(). The
    registry key is the class name, so it is part of the public surface.

    Example:
        >>> from encodingx import Bytes, lookup
        >>> hex_tier = lookup("HexTier")
        >>> sink = Bytes()
        >>> hex_tier.unmarshal(hex_tier.marshal(b"hello"), sink)
        >>> sink.data
        b'hello'
    """

    style: ClassVar[EncodingStyle]

    @property
    def name(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} style={self.style.value}>"

    @abstractmethod
    def marshal(self, value: Any) -> bytes:
        """Convert ``value`` to its encoded byte form.

        Raises:
            WrongValueTypeError: If ``value`` is not accepted by this encoding
        """

    @abstractmethod
    def unmarshal(self, data: bytes, target: Any) -> None:
        """Decode ``data`` into the caller-provided ``target``.

        On failure the state of ``target`` is unspecified and should be discarded.

        Raises:
            WrongValueTypeError: If ``target`` is not accepted by this encoding
        """

    def reverse(self) -> Encoding:
        """Return the inverse strategy; symmetric encodings return themselves."""
        return self


def marshal(encoding: Encoding, value: Any) -> bytes:
    """Marshal ``value`` with ``encoding``."""
    return encoding.marshal(value)


def unmarshal(encoding: Encoding, data: bytes, target: Any) -> None:
    """Unmarshal ``data`` into ``target`` with ``encoding``."""
    encoding.unmarshal(data, target)


def encode(encoding: Encoding, value: Any) -> bytes:
    """Encode ``value``; an alias of marshal() for expression-style use."""
    return encoding.marshal(value)


def decode(encoding: Encoding, data: bytes, target: T) -> T:
    """Decode ``data`` into ``target`` and return ``target``.

    Example:
        >>> from encodingx import decode, lookup, new_bytes
        >>> decode(lookup("Lazy"), b"abc", new_bytes()).data
        b'abc'
    """
    encoding.unmarshal(data, target)
    return target
