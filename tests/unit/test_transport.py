"""Unit tests for the Lazy and base64 transport encodings."""

from __future__ import annotations

import binascii

import pytest
from hypothesis import given
from hypothesis import strategies as st

from encodingx import (
    Base64,
    Base64URL,
    Bytes,
    CloudFrontURLSafe,
    EncodingStyle,
    Lazy,
    WrongValueTypeError,
)


class TestLazy:
    """Test the identity encoding."""

    def test_marshal_bytes(self) -> None:
        """Test bytes pass through unchanged."""
        assert Lazy().marshal(b"\x01\x02\x03") == b"\x01\x02\x03"

    def test_marshal_returns_copy(self) -> None:
        """Test the result does not alias a mutable input."""
        source = bytearray(b"abc")
        result = Lazy().marshal(source)
        source[0] = ord("z")
        assert result == b"abc"

    def test_marshal_carrier(self) -> None:
        """Test Bytes carriers pass through."""
        assert Lazy().marshal(Bytes(data=b"xyz")) == b"xyz"

    def test_unmarshal(self, sink: Bytes) -> None:
        """Test unmarshal stores the data in the carrier."""
        Lazy().unmarshal(b"abc", sink)
        assert sink.data == b"abc"

    def test_unmarshal_stores_copy(self, sink: Bytes) -> None:
        """Test the carrier does not alias the input buffer."""
        source = bytearray(b"abc")
        Lazy().unmarshal(source, sink)
        source[0] = ord("z")
        assert sink.data == b"abc"

    @pytest.mark.parametrize("value", ["text", 42, None, [1, 2, 3]])
    def test_marshal_wrong_type(self, value: object) -> None:
        """Test non-byte values are rejected."""
        with pytest.raises(WrongValueTypeError):
            Lazy().marshal(value)

    def test_unmarshal_wrong_type(self) -> None:
        """Test non-carrier sinks are rejected."""
        with pytest.raises(WrongValueTypeError):
            Lazy().unmarshal(b"abc", [])

    def test_contract(self) -> None:
        """Test name, style and reverse."""
        lazy = Lazy()
        assert lazy.name == "Lazy"
        assert lazy.style is EncodingStyle.BYTES
        assert lazy.reverse() is lazy


class TestBase64:
    """Test standard and URL-safe base64."""

    def test_standard(self) -> None:
        """Test standard alphabet with padding."""
        assert Base64().marshal(b"hello") == b"aGVsbG8="

    def test_url_alphabet(self) -> None:
        """Test URL-safe alphabet replaces + and /."""
        assert Base64().marshal(b"\xfb\xff") == b"+/8="
        assert Base64URL().marshal(b"\xfb\xff") == b"-_8="

    def test_invalid_standard(self, sink: Bytes) -> None:
        """Test invalid characters surface the base64 error."""
        with pytest.raises(binascii.Error):
            Base64().unmarshal(b"!!!not-valid-base64!!!", sink)

    def test_wrong_type(self) -> None:
        """Test structured values are rejected."""
        with pytest.raises(WrongValueTypeError):
            Base64().marshal({"a": 1})


class TestCloudFrontURLSafe:
    """Test CloudFront URL-safe base64."""

    def test_substitutions(self) -> None:
        """Test +, = and / are replaced by -, _ and ~."""
        assert CloudFrontURLSafe().marshal(b"\xfb\xff") == b"-~8_"

    def test_decode(self, sink: Bytes) -> None:
        """Test inverse substitutions on decode."""
        CloudFrontURLSafe().unmarshal(b"-~8_", sink)
        assert sink.data == b"\xfb\xff"

    def test_output_is_url_safe(self) -> None:
        """Test no reserved URL characters appear."""
        encoded = CloudFrontURLSafe().marshal(bytes(range(256)))
        assert not set(encoded.decode()) & set("+/=")

    def test_name(self) -> None:
        """Test the registry name."""
        assert CloudFrontURLSafe().name == "CloudFrontURLSafe"


@given(payload=st.binary(max_size=500))
def test_transport_round_trips(payload: bytes) -> None:
    """Test every transport encoding is invertible."""
    for encoding in (Lazy(), Base64(), Base64URL(), CloudFrontURLSafe()):
        sink = Bytes()
        encoding.unmarshal(encoding.marshal(payload), sink)
        assert sink.data == payload
