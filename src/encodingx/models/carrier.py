"""The Bytes carrier used by byte-oriented encodings.

Byte-oriented encodings (style BYTES) accept a Bytes carrier as input and
require one as the sink of unmarshal(), which replaces its ``data`` attribute.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Bytes(BaseModel):
    """Mutable holder for a byte payload.

    Example:
        >>> from encodingx import Bytes, lookup
        >>> sink = Bytes()
        >>> lookup("Hex").unmarshal(b"0000000441424344", sink)
        >>> sink.data
        b'ABCD'

    Attributes:
        data: The carried payload (bytes-like values are converted on assignment)
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    data: bytes = b""

    def __len__(self) -> int:
        return len(self.data)

    def duplicate(self) -> Bytes:
        """Return an independent deep copy of this carrier."""
        return Bytes(data=bytes(self.data))

    def copy_from(self, other: Bytes) -> None:
        """Replace this carrier's payload with a copy of ``other``'s."""
        self.data = bytes(other.data)


def new_bytes() -> Bytes:
    """Create an empty carrier, typically used as an unmarshal sink."""
    return Bytes()


def make_bytes(value: Any) -> Bytes:
    """Build a carrier from an arbitrary value.

    - bytes-like values are carried as-is
    - str is UTF-8 encoded
    - a Bytes carrier is deep-copied
    - None gives an empty carrier
    - anything else carries the UTF-8 encoding of ``str(value)``
    """
    if isinstance(value, Bytes):
        return value.duplicate()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Bytes(data=bytes(value))
    if value is None:
        return Bytes()
    if isinstance(value, str):
        return Bytes(data=value.encode("utf-8"))
    return Bytes(data=str(value).encode("utf-8"))
