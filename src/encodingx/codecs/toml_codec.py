"""TOML encoding; values must be tables (mappings) at the top level."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from typing import Any

import tomli_w

from ..encoding import Encoding, EncodingStyle, assign_value, to_plain
from ..exceptions import WrongValueTypeError


class TOML(Encoding):
    """TOML serialization of mappings and pydantic models."""

    style = EncodingStyle.STRUCT

    def marshal(self, value: Any) -> bytes:
        plain = to_plain(value, mode="json")
        if not isinstance(plain, Mapping):
            raise WrongValueTypeError(
                f"encoding {self.name} converts on wrong type value: {type(value).__name__}"
            )
        return tomli_w.dumps(plain).encode("utf-8")

    def unmarshal(self, data: bytes, target: Any) -> None:
        assign_value(target, tomllib.loads(bytes(data).decode("utf-8")), self.name)
