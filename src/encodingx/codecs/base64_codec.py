"""Base64 transport encodings.

CloudFrontURLSafe follows the CloudFront signed-URL convention: standard
base64, then ``+`` -> ``-``, ``=`` -> ``_`` and ``/`` -> ``~``.
"""

from __future__ import annotations

import base64
from typing import Any

from ..encoding import Encoding, EncodingStyle, assign_bytes, to_bytes

_CLOUDFRONT_ENCODE = bytes.maketrans(b"+=/", b"-_~")
_CLOUDFRONT_DECODE = bytes.maketrans(b"-_~", b"+=/")


class Base64(Encoding):
    """Standard base64 with padding."""

    style = EncodingStyle.BYTES

    def marshal(self, value: Any) -> bytes:
        return base64.b64encode(to_bytes(value, self.name))

    def unmarshal(self, data: bytes, target: Any) -> None:
        decoded = base64.b64decode(data, validate=True)
        assign_bytes(target, decoded, self.name)


class Base64URL(Encoding):
    """URL-safe base64 alphabet with padding."""

    style = EncodingStyle.BYTES

    def marshal(self, value: Any) -> bytes:
        return base64.urlsafe_b64encode(to_bytes(value, self.name))

    def unmarshal(self, data: bytes, target: Any) -> None:
        decoded = base64.b64decode(data, altchars=b"-_", validate=True)
        assign_bytes(target, decoded, self.name)


class CloudFrontURLSafe(Encoding):
    """CloudFront URL-safe base64.

    Example:
        >>> CloudFrontURLSafe().marshal(b"\\xfb\\xff")
        b'-~8_'
    """

    style = EncodingStyle.BYTES

    def marshal(self, value: Any) -> bytes:
        encoded = base64.b64encode(to_bytes(value, self.name))
        return encoded.translate(_CLOUDFRONT_ENCODE)

    def unmarshal(self, data: bytes, target: Any) -> None:
        standard = bytes(data).translate(_CLOUDFRONT_DECODE)
        decoded = base64.b64decode(standard, validate=True)
        assign_bytes(target, decoded, self.name)
