import os
import struct
import zlib

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest  # noqa: E402

SIGNATURE = b"\x89PNG\r\n\x1a\n"


def raw_chunk(type_bytes, data):
    return struct.pack(">I", len(data)) + type_bytes + data + struct.pack(">I", zlib.crc32(type_bytes + data))


@pytest.fixture
def png_bytes():
    # 1x1 RGBA image
    return (
        SIGNATURE
        + raw_chunk(b"IHDR", struct.pack(">IIBBBBB", 1, 1, 8, 6, 0, 0, 0))
        + raw_chunk(b"IDAT", zlib.compress(b"\x00\x00\x00\x00\x00"))
        + raw_chunk(b"IEND", b"")
    )


@pytest.fixture
def png_file(tmp_path, png_bytes):
    path = tmp_path / "image.png"
    path.write_bytes(png_bytes)
    return path
