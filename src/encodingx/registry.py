"""Name -> encoding registry.

Registration happens in a single construction phase: a RegistryBuilder
collects encodings and freeze() hands back a read-only Registry. The default
registry of built-in encodings is built once, when this module is imported, and
shared process-wide; since it never changes afterwards, readers need no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .codecs import (
    JSON,
    TOML,
    Base64,
    Base64URL,
    CloudFrontURLSafe,
    FlatBuffers,
    Hex,
    HexTier,
    HexTierRand,
    Lazy,
    MsgPack,
)
from .encoding import Encoding
from .exceptions import MissingEncodingError, RegistryFrozenError

logger = logging.getLogger(__name__)


class Registry(Mapping[str, Encoding]):
    """Read-only mapping of encoding names to encoding instances."""

    def __init__(self, encodings: Mapping[str, Encoding]) -> None:
        self._encodings = MappingProxyType(dict(encodings))

    def __getitem__(self, name: str) -> Encoding:
        return self._encodings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._encodings)

    def __len__(self) -> int:
        return len(self._encodings)

    def lookup(self, name: str) -> Encoding:
        """Return the encoding registered under ``name``.

        Raises:
            MissingEncodingError: If no encoding has that name
        """
        encoding = self._encodings.get(name)
        if encoding is None:
            raise MissingEncodingError(
                f"Unknown encoding: {name}. Registered: {list(self._encodings)}"
            )
        return encoding

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._encodings)


class RegistryBuilder:
    """Collects encodings before freezing them into a Registry.

    Example:
        >>> from encodingx.codecs import Hex, Lazy
        >>> registry = RegistryBuilder().register(Hex()).register(Lazy()).freeze()
        >>> registry.names()
        ['Hex', 'Lazy']
    """

    def __init__(self) -> None:
        self._encodings: dict[str, Encoding] = {}
        self._frozen = False

    def register(self, encoding: Encoding) -> RegistryBuilder:
        """Add ``encoding`` under its name.

        Re-registering the same instance is a no-op.

        Raises:
            RegistryFrozenError: If freeze() was already called
            ValueError: If a different encoding already uses the name
        """
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {encoding.name}: registry is frozen")

        existing = self._encodings.get(encoding.name)
        if existing is not None:
            if existing is not encoding:
                raise ValueError(
                    f"Encoding name {encoding.name} already registered to {existing!r}. "
                    f"Cannot register {encoding!r} with the same name."
                )
            return self

        self._encodings[encoding.name] = encoding
        logger.debug("registered encoding %s (%s)", encoding.name, encoding.style.value)
        return self

    def freeze(self) -> Registry:
        """Stop accepting registrations and return the read-only registry."""
        self._frozen = True
        logger.debug("froze registry with %d encodings", len(self._encodings))
        return Registry(self._encodings)


def _build_default_registry() -> Registry:
    builder = RegistryBuilder()
    for encoding in (
        Hex(),
        HexTier(),
        HexTierRand(),
        Lazy(),
        Base64(),
        Base64URL(),
        CloudFrontURLSafe(),
        JSON(),
        MsgPack(),
        TOML(),
        FlatBuffers(),
    ):
        builder.register(encoding)
    return builder.freeze()


_DEFAULT_REGISTRY = _build_default_registry()


def default_registry() -> Registry:
    """The process-wide registry of built-in encodings, built at import."""
    return _DEFAULT_REGISTRY


def lookup(name: str) -> Encoding:
    """Look up a built-in encoding by name.

    Raises:
        MissingEncodingError: If no built-in encoding has that name
    """
    return default_registry().lookup(name)
