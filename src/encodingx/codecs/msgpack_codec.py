"""MessagePack encoding, more compact than JSON for the same values."""

from __future__ import annotations

import enum
from typing import Any

import msgpack

from ..encoding import Encoding, EncodingStyle, assign_value, to_plain


def _default(value: Any) -> Any:
    # msgpack calls this for types it cannot pack natively
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise TypeError(f"can not serialize {type(value).__name__!r} object")


class MsgPack(Encoding):
    """MessagePack serialization of structured values.

    Pydantic models (including the Bytes carrier) are dumped to dicts first;
    enum members are packed as their values.
    """

    style = EncodingStyle.STRUCT

    def marshal(self, value: Any) -> bytes:
        return msgpack.packb(to_plain(value), use_bin_type=True, default=_default)

    def unmarshal(self, data: bytes, target: Any) -> None:
        assign_value(target, msgpack.unpackb(data, raw=False), self.name)
