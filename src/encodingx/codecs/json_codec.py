"""JSON encoding backed by the standard json module and pydantic."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from ..encoding import Encoding, EncodingStyle, assign_value, is_raw, to_bytes
from ..models import Bytes


class JSON(Encoding):
    """JSON serialization of structured values.

    Raw byte payloads are assumed to be JSON already and pass through
    unchanged in both directions. Pydantic models serialize with
    ``model_dump_json()``.
    """

    style = EncodingStyle.STRUCT

    def marshal(self, value: Any) -> bytes:
        if is_raw(value):
            return to_bytes(value, self.name)
        if isinstance(value, BaseModel):
            return value.model_dump_json().encode("utf-8")
        return json.dumps(value, separators=(",", ":")).encode("utf-8")

    def unmarshal(self, data: bytes, target: Any) -> None:
        if isinstance(target, Bytes):
            target.data = bytes(data)
            return
        assign_value(target, json.loads(data), self.name)
