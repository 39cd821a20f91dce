"""Input and sink dispatch shared by the codecs.

Byte-oriented encodings accept a closed set of input shapes (bytes-like
values or a Bytes carrier) and a single sink shape (a Bytes carrier).
Structural encodings additionally fill pydantic models, dicts and lists.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from ..exceptions import WrongValueTypeError
from ..models import Bytes

BytesLike = (bytes, bytearray, memoryview)


def is_raw(value: Any) -> bool:
    """Return True if ``value`` is a raw byte payload."""
    return isinstance(value, (Bytes, *BytesLike))


def to_bytes(value: Any, encoding_name: str) -> bytes:
    """Extract the raw payload from a bytes-like value or a Bytes carrier.

    Raises:
        WrongValueTypeError: For any other input, including str
    """
    if isinstance(value, Bytes):
        return value.data
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise WrongValueTypeError(
        f"encoding {encoding_name} converts on wrong type value: {type(value).__name__}"
    )


def assign_bytes(target: Any, data: bytes, encoding_name: str) -> None:
    """Deposit ``data`` into a Bytes carrier sink.

    Raises:
        WrongValueTypeError: If ``target`` is not a Bytes carrier
    """
    if not isinstance(target, Bytes):
        raise WrongValueTypeError(
            f"encoding {encoding_name} converts on wrong type value: {type(target).__name__}"
        )
    target.data = data


def assign_value(target: Any, value: Any, encoding_name: str) -> None:
    """Fill a structural sink in place with a decoded value.

    Pydantic models are re-validated against their own class and their fields
    assigned one by one; dicts are cleared and updated; lists have their
    contents replaced. A Bytes carrier only receives its own dumped shape,
    a mapping whose sole key is ``data``.

    Raises:
        WrongValueTypeError: If ``target`` cannot receive ``value``
    """
    if isinstance(target, Bytes) and not (isinstance(value, dict) and set(value) <= {"data"}):
        raise WrongValueTypeError(
            f"encoding {encoding_name} cannot decode {type(value).__name__} into Bytes"
        )

    if isinstance(target, BaseModel):
        validated = type(target).model_validate(value)
        for field_name in type(target).model_fields:
            setattr(target, field_name, getattr(validated, field_name))
        return

    if isinstance(target, dict) and isinstance(value, dict):
        target.clear()
        target.update(value)
        return

    if isinstance(target, list) and isinstance(value, list):
        target[:] = value
        return

    raise WrongValueTypeError(
        f"encoding {encoding_name} cannot decode {type(value).__name__} "
        f"into {type(target).__name__}"
    )


def to_plain(value: Any, mode: str = "python") -> Any:
    """Dump pydantic models to plain data; return other values unchanged.

    ``mode="json"`` restricts the dump to JSON-compatible types (enums become
    their values, datetimes become strings).
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode=mode)
    return value
