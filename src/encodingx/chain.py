"""Chains of encodings applied in sequence.

A chain marshals with its encoders left to right and unmarshals with its
decoders left to right. Only the first encoder and the last decoder may be
structural; every other step passes raw bytes and must be byte-oriented.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

from .encoding import Encoding, EncodingStyle, assign_bytes, to_bytes
from .exceptions import WrongEncodingStyleError
from .models import Bytes
from .registry import Registry, default_registry


class ChainEncoding(Encoding):
    """Encoding built from registered encoding names.

    Names are resolved on every call, so a chain may be built before (or
    without) its encodings being available; unknown names raise
    MissingEncodingError when used.

    Example:
        >>> chain = ChainEncoding(["JSON", "HexTier"], ["HexTier", "JSON"])
        >>> str(chain)
        '[JSON:HexTier] -> [HexTier:JSON]'
        >>> str(chain.reverse())
        '[JSON:HexTier] -> [HexTier:JSON]'
    """

    style = EncodingStyle.MIX

    def __init__(
        self,
        encoders: Sequence[str],
        decoders: Sequence[str],
        registry: Optional[Registry] = None,
    ) -> None:
        self.encoders = tuple(encoders)
        self.decoders = tuple(decoders)
        self._registry = registry

    @property
    def registry(self) -> Registry:
        return self._registry if self._registry is not None else default_registry()

    @property
    def name(self) -> str:
        return f"[{':'.join(self.encoders)}] -> [{':'.join(self.decoders)}]"

    def _resolve(self, names: Sequence[str]) -> list[Encoding]:
        return [self.registry.lookup(name) for name in names]

    def marshal(self, value: Any) -> bytes:
        encodings = self._resolve(self.encoders)
        if not encodings:
            return bytes(to_bytes(value, self.name))

        for position, encoding in enumerate(encodings):
            if position > 0 and encoding.style is not EncodingStyle.BYTES:
                raise WrongEncodingStyleError(
                    f"{encoding.name} cannot follow another encoder in {self.name}"
                )
            value = encoding.marshal(value)
        return value

    def unmarshal(self, data: bytes, target: Any) -> None:
        encodings = self._resolve(self.decoders)
        if not encodings:
            assign_bytes(target, bytes(data), self.name)
            return

        *middle, last = encodings
        for encoding in middle:
            if encoding.style is not EncodingStyle.BYTES:
                raise WrongEncodingStyleError(
                    f"{encoding.name} cannot precede another decoder in {self.name}"
                )
            scratch = Bytes()
            encoding.unmarshal(data, scratch)
            data = scratch.data
        last.unmarshal(data, target)

    def reverse(self) -> ChainEncoding:
        return ChainEncoding(
            list(reversed(self.decoders)),
            list(reversed(self.encoders)),
            registry=self._registry,
        )


def empty() -> ChainEncoding:
    """The default chain: Lazy in both directions."""
    return ChainEncoding(["Lazy"], ["Lazy"])
