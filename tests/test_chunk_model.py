import pytest

import chunk_model
from chunk_model import Chunk
from chunk_type import ChunkType
from png_errors import ChecksumMismatch, ChunkTooLarge, LengthMismatch


def make_chunk(code="RuSt", data=b"This is where your secret message will be!"):
    return Chunk(ChunkType.from_str(code), data)


def test_known_crc():
    # IEND always carries the same checksum
    chunk = Chunk(ChunkType.from_str("IEND"), b"")
    assert chunk.crc == 0xAE426082
    assert chunk.encode() == b"\x00\x00\x00\x00IEND\xaeB`\x82"


def test_accessors():
    chunk = make_chunk()
    assert chunk.length == 42
    assert str(chunk.chunk_type) == "RuSt"
    assert chunk.data == b"This is where your secret message will be!"
    assert chunk.encoded_size == 54


def test_encode_layout():
    chunk = make_chunk(data=b"hi")
    encoded = chunk.encode()
    assert encoded[:4] == b"\x00\x00\x00\x02"
    assert encoded[4:8] == b"RuSt"
    assert encoded[8:10] == b"hi"
    assert int.from_bytes(encoded[10:], "big") == chunk.crc
    assert len(encoded) == chunk.length + 12


@pytest.mark.parametrize("data", [b"", b"x", b"\x00\xff" * 300])
def test_round_trip(data):
    chunk = make_chunk(data=data)
    decoded = Chunk.decode(chunk.encode())
    assert decoded == chunk
    assert decoded.crc == chunk.crc


def test_decode_ignores_trailing_bytes():
    chunk = make_chunk(data=b"abc")
    assert Chunk.decode(chunk.encode() + b"trailing") == chunk


def test_every_bit_flip_fails_checksum():
    encoded = make_chunk(data=b"hello").encode()
    # type and data region: bytes 4..12
    for index in range(4, 4 + 4 + 5):
        for bit in range(8):
            damaged = bytearray(encoded)
            damaged[index] ^= 1 << bit
            with pytest.raises(ChecksumMismatch):
                Chunk.decode(bytes(damaged))


def test_bad_stored_crc():
    encoded = bytearray(make_chunk().encode())
    encoded[-1] ^= 0xFF
    with pytest.raises(ChecksumMismatch) as excinfo:
        Chunk.decode(bytes(encoded))
    assert excinfo.value.expected != excinfo.value.actual


def test_truncated_data():
    encoded = make_chunk().encode()
    with pytest.raises(LengthMismatch):
        Chunk.decode(encoded[:-1])


def test_shorter_than_frame():
    with pytest.raises(LengthMismatch):
        Chunk.decode(b"\x00\x00\x00")


def test_declared_length_too_large():
    encoded = b"\x00\x00\x10\x00RuSt" + b"x" * 10 + b"\x00\x00\x00\x00"
    with pytest.raises(LengthMismatch) as excinfo:
        Chunk.decode(encoded)
    assert excinfo.value.expected == 0x1000 + 12


def test_data_as_string():
    assert make_chunk().data_as_string() == "This is where your secret message will be!"


def test_data_as_string_invalid_utf8():
    with pytest.raises(UnicodeDecodeError):
        make_chunk(data=b"\xff\xfe\xfd").data_as_string()


def test_str():
    assert str(Chunk(ChunkType.from_str("IEND"), b"")) == "Type:IEND Length:0 CRC:ae426082 (critical)"


def test_payload_over_length_limit(monkeypatch):
    monkeypatch.setattr(chunk_model, "MAX_LENGTH", 3)
    with pytest.raises(ChunkTooLarge) as excinfo:
        make_chunk(data=b"abcd")
    assert excinfo.value.length == 4
    assert make_chunk(data=b"abc").length == 3
