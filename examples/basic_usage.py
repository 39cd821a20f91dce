#!/usr/bin/env python3
"""Basic usage example for encodingx.

This example demonstrates:
1. Looking up encodings by name
2. Tiered hex framing and how output length grows
3. Chaining a structural encoding with a transport encoding
4. Reversing a chain
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from encodingx import Bytes, ChainEncoding, default_registry, lookup


class StatusReport(BaseModel):
    """Service status report."""

    service: str = Field(description="Service name")
    healthy: bool = Field(description="Health check result")
    latency_ms: float = Field(ge=0, description="Last request latency")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("encodingx Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Registered encodings...")
    for name in default_registry().names():
        print(f"   {name:<18} {lookup(name).style.value}")
    print()

    print("2. Tiered hex framing...")
    hex_tier = lookup("HexTier")
    for size in (0, 10, 100, 1000):
        text = hex_tier.marshal(b"a" * size)
        print(f"   {size:>5} bytes in -> {len(text):>4} hex characters out")
    print()

    print("3. Encoding a report through JSON -> HexTier...")
    report = StatusReport(service="gateway", healthy=True, latency_ms=12.5)
    chain = ChainEncoding(["JSON", "HexTier"], ["HexTier", "JSON"])
    text = chain.marshal(report)
    print(f"   Chain:   {chain}")
    print(f"   Encoded: {text.decode()}")

    decoded = StatusReport(service="", healthy=False, latency_ms=0)
    chain.unmarshal(text, decoded)
    print(f"   Decoded: {decoded}")
    assert decoded == report
    print()

    print("4. Reversing a chain...")
    encode_only = ChainEncoding(["Base64"], ["Lazy"])
    reverse = encode_only.reverse()
    print(f"   Chain:         {encode_only}")
    print(f"   Reverse chain: {reverse}")
    text = encode_only.marshal(b"hello")
    sink = Bytes()
    reverse.unmarshal(text, sink)
    print(f"   {text!r} -> {sink.data!r}")
    print()

    print("=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
