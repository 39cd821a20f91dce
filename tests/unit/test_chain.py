"""Unit tests for chained encodings."""

from __future__ import annotations

import logging

import pytest
from pydantic import BaseModel

from encodingx import (
    Bytes,
    ChainEncoding,
    Encoding,
    EncodingStyle,
    Hex,
    Lazy,
    MissingEncodingError,
    RegistryBuilder,
    WrongEncodingStyleError,
    empty,
    lookup,
)


class Record(BaseModel):
    """Structured test value."""

    integer: int
    string: str
    flag: bool
    number: float


def record() -> Record:
    return Record(integer=42, string="hello", flag=True, number=3.14)


def blank() -> Record:
    return Record(integer=0, string="", flag=False, number=0.0)


class TestChainString:
    """Test the textual form of chains."""

    @pytest.mark.parametrize(
        ("encoders", "decoders", "expected"),
        [
            (["JSON", "Base64"], ["Base64", "JSON"], "[JSON:Base64] -> [Base64:JSON]"),
            (["JSON"], ["JSON"], "[JSON] -> [JSON]"),
            (
                ["JSON", "Base64", "Lazy"],
                ["Lazy", "Base64", "JSON"],
                "[JSON:Base64:Lazy] -> [Lazy:Base64:JSON]",
            ),
            ([], [], "[] -> []"),
        ],
    )
    def test_str(self, encoders: list[str], decoders: list[str], expected: str) -> None:
        """Test str() lists encoders and decoders."""
        chain = ChainEncoding(encoders, decoders)
        assert str(chain) == expected
        assert chain.name == expected


class TestChainReverse:
    """Test reversing chains."""

    def test_swaps_and_reverses(self) -> None:
        """Test encoders become reversed decoders and vice versa."""
        chain = ChainEncoding(["A", "B", "C"], ["X", "Y", "Z"])
        assert str(chain.reverse()) == "[Z:Y:X] -> [C:B:A]"

    def test_double_reverse(self) -> None:
        """Test reversing twice restores the original chain."""
        chain = ChainEncoding(["JSON", "Base64", "Lazy"], ["Lazy", "Base64", "JSON"])
        assert str(chain.reverse().reverse()) == str(chain)

    def test_reverse_is_new_chain(self) -> None:
        """Test reverse() returns a distinct chain with MIX style."""
        chain = ChainEncoding(["JSON"], ["JSON"])
        reversed_chain = chain.reverse()
        assert reversed_chain is not chain
        assert reversed_chain.style is EncodingStyle.MIX

    def test_reverse_round_trip(self) -> None:
        """Test a reversed symmetric chain decodes what the original encodes."""
        chain = ChainEncoding(["JSON", "HexTier"], ["HexTier", "JSON"])
        result = blank()
        chain.reverse().unmarshal(chain.marshal(record()), result)
        assert result.model_dump() == record().model_dump()


class TestChainMarshal:
    """Test chained marshal and unmarshal."""

    @pytest.mark.parametrize(
        "names",
        [
            ["JSON"],
            ["JSON", "Base64"],
            ["JSON", "Base64", "Lazy"],
            ["JSON", "HexTier"],
            ["MsgPack", "CloudFrontURLSafe"],
            ["TOML", "Hex", "Base64URL"],
        ],
    )
    def test_struct_round_trip(self, names: list[str]) -> None:
        """Test structured values round trip through the chain."""
        chain = ChainEncoding(names, list(reversed(names)))
        data = chain.marshal(record())
        assert data

        result = blank()
        chain.unmarshal(data, result)
        assert result.model_dump() == record().model_dump()

    def test_layers_apply_in_order(self) -> None:
        """Test the output equals applying each encoder in turn."""
        chain = ChainEncoding(["JSON", "Base64"], ["Base64", "JSON"])
        expected = lookup("Base64").marshal(lookup("JSON").marshal({"a": 1}))
        assert chain.marshal({"a": 1}) == expected

    def test_bytes_only(self, sample_payload: bytes) -> None:
        """Test byte payloads through byte-oriented layers."""
        chain = ChainEncoding(["Lazy", "Base64", "HexTier"], ["HexTier", "Base64", "Lazy"])
        sink = Bytes()
        chain.unmarshal(chain.marshal(sample_payload), sink)
        assert sink.data == sample_payload

    def test_middle_encoder_style(self) -> None:
        """Test structural encoders cannot follow another encoder."""
        for names in (["JSON", "JSON"], ["JSON", "MsgPack"], ["Lazy", "TOML"]):
            chain = ChainEncoding(names, list(reversed(names)))
            with pytest.raises(WrongEncodingStyleError):
                chain.marshal({"a": 1} if names[0] != "Lazy" else b"x")

    def test_middle_decoder_style(self) -> None:
        """Test structural decoders cannot precede another decoder."""
        data = ChainEncoding(["JSON", "Base64"], ["Base64", "JSON"]).marshal(record())
        invalid = ChainEncoding(["JSON", "Base64"], ["JSON", "JSON"])
        with pytest.raises(WrongEncodingStyleError):
            invalid.unmarshal(data, blank())

    def test_unknown_encoder(self) -> None:
        """Test unknown encoder names raise MissingEncodingError."""
        with pytest.raises(MissingEncodingError):
            ChainEncoding(["NonExistentEncoder"], ["NonExistentEncoder"]).marshal(record())
        with pytest.raises(MissingEncodingError):
            ChainEncoding(["JSON", "NonExistent"], ["NonExistent", "JSON"]).marshal(record())

    def test_unknown_decoder(self) -> None:
        """Test unknown decoder names raise MissingEncodingError."""
        chain = ChainEncoding(["Lazy"], ["NonExistentDecoder"])
        with pytest.raises(MissingEncodingError):
            chain.unmarshal(b"\x01\x02\x03", Bytes())

    def test_empty_chain(self) -> None:
        """Test an empty chain passes bytes through."""
        chain = ChainEncoding([], [])
        assert chain.marshal(b"abc") == b"abc"
        sink = Bytes()
        chain.unmarshal(b"abc", sink)
        assert sink.data == b"abc"

    def test_custom_registry(self) -> None:
        """Test chains resolve names against a given registry."""
        registry = RegistryBuilder().register(Hex()).register(Lazy()).freeze()
        chain = ChainEncoding(["Lazy", "Hex"], ["Hex", "Lazy"], registry=registry)
        assert chain.marshal(b"ABCD") == b"0000000441424344"

        with pytest.raises(MissingEncodingError):
            ChainEncoding(["JSON"], ["JSON"], registry=registry).marshal({})

    def test_reverse_keeps_registry(self) -> None:
        """Test reversed chains use the same registry."""
        registry = RegistryBuilder().register(Lazy()).freeze()
        chain = ChainEncoding(["Lazy"], ["Lazy"], registry=registry)
        assert chain.reverse().registry is registry

    def test_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test chains emit no log records while encoding."""
        chain = ChainEncoding(["JSON", "HexTier"], ["HexTier", "JSON"])
        with caplog.at_level(logging.DEBUG):
            result = blank()
            chain.unmarshal(chain.marshal(record()), result)
        assert not [entry for entry in caplog.records if entry.name.startswith("encodingx")]


class TestEmpty:
    """Test the default Lazy chain."""

    def test_str_and_style(self) -> None:
        """Test empty() is a Lazy chain with MIX style."""
        chain = empty()
        assert isinstance(chain, Encoding)
        assert str(chain) == "[Lazy] -> [Lazy]"
        assert chain.style is EncodingStyle.MIX
        assert str(empty()) == str(empty())

    def test_round_trip(self) -> None:
        """Test empty() passes bytes through."""
        chain = empty()
        data = chain.marshal(b"\x01\x02\x03\x04\x05")
        assert data == b"\x01\x02\x03\x04\x05"
        sink = Bytes()
        chain.reverse().unmarshal(data, sink)
        assert sink.data == b"\x01\x02\x03\x04\x05"
