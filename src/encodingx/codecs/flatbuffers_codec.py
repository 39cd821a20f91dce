"""FlatBuffers encoding.

FlatBuffers cannot serialize arbitrary values: types opt in by implementing
the FlatBufferMarshaler and FlatBufferUnmarshaler protocols, usually by
wrapping code generated by ``flatc``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import flatbuffers

from ..encoding import Encoding, EncodingStyle
from ..exceptions import WrongValueTypeError


@runtime_checkable
class FlatBufferMarshaler(Protocol):
    """A value that serializes itself into a FlatBuffers builder.

    Implementations must call ``builder.Finish()`` on their root table.
    """

    def marshal_flatbuffer(self, builder: flatbuffers.Builder) -> None: ...


@runtime_checkable
class FlatBufferUnmarshaler(Protocol):
    """A value that initializes itself from a finished FlatBuffers buffer."""

    def unmarshal_flatbuffer(self, data: bytes) -> None: ...


class FlatBuffers(Encoding):
    """FlatBuffers serialization via the marshaler protocols.

    Raises WrongValueTypeError for values or sinks that do not implement the
    corresponding protocol; errors raised by the protocol methods propagate.
    """

    style = EncodingStyle.STRUCT

    def marshal(self, value: Any) -> bytes:
        if not isinstance(value, FlatBufferMarshaler):
            raise WrongValueTypeError(
                f"encoding {self.name} converts on wrong type value: {type(value).__name__}"
            )
        builder = flatbuffers.Builder(0)
        value.marshal_flatbuffer(builder)
        return bytes(builder.Output())

    def unmarshal(self, data: bytes, target: Any) -> None:
        if not isinstance(target, FlatBufferUnmarshaler):
            raise WrongValueTypeError(
                f"encoding {self.name} converts on wrong type value: {type(target).__name__}"
            )
        target.unmarshal_flatbuffer(bytes(data))
