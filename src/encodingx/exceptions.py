"""Exception hierarchy for encodingx.

All exceptions raised by encodingx itself inherit from EncodingxError so callers
can catch any encodingx-specific failure in one place. Errors raised by the hex
decoder (``binascii.Error``), by zlib (``zlib.error``) and by delegated codec
libraries are surfaced unchanged and are not wrapped.
"""

from __future__ import annotations


class EncodingxError(Exception):
    """Base exception for all encodingx errors."""

    pass


class WrongValueTypeError(EncodingxError, TypeError):
    """Raised when a value or sink has a shape the selected encoding does not accept.

    Examples:
        - Marshalling a str or int with a byte-oriented encoding
        - Unmarshalling a byte-oriented encoding into anything but a Bytes carrier
        - FlatBuffers value without marshal_flatbuffer()
    """

    pass


class InvalidDataError(EncodingxError, ValueError):
    """Raised when a decoded frame violates its structural invariants.

    Examples:
        - Frame length is not a valid tier
        - Frame shorter than its length prefix
        - Declared payload length exceeds the frame body
    """

    pass


class MissingEncodingError(EncodingxError, KeyError):
    """Raised when an encoding name is not present in the registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class WrongEncodingStyleError(EncodingxError):
    """Raised when a chain places a structural encoding where bytes are required."""

    pass


class RegistryFrozenError(EncodingxError):
    """Raised when registering into a registry builder that was already frozen."""

    pass
