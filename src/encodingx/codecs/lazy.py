"""Identity encoding for raw byte payloads."""

from __future__ import annotations

from typing import Any

from ..encoding import Encoding, EncodingStyle, assign_bytes, to_bytes


class Lazy(Encoding):
    """Pass bytes through unchanged.

    Both directions copy, so the caller's buffer and the result never alias.
    """

    style = EncodingStyle.BYTES

    def marshal(self, value: Any) -> bytes:
        return bytes(bytearray(to_bytes(value, self.name)))

    def unmarshal(self, data: bytes, target: Any) -> None:
        assign_bytes(target, bytes(bytearray(data)), self.name)
