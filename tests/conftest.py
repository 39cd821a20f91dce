"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from encodingx import Bytes, Encoding, EncodingStyle, default_registry


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, encoded world!"


@pytest.fixture
def sink() -> Bytes:
    """Empty Bytes carrier to unmarshal into."""
    return Bytes()


@pytest.fixture(
    params=[
        name
        for name, encoding in default_registry().items()
        if encoding.style is EncodingStyle.BYTES
    ]
)
def bytes_encoding(request: pytest.FixtureRequest) -> Encoding:
    """Each registered byte-oriented encoding in turn."""
    return default_registry().lookup(request.param)
