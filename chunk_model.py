import logging
import struct
import zlib

from chunk_type import ChunkType
from png_errors import ChecksumMismatch, ChunkTooLarge, LengthMismatch

logger = logging.getLogger(__name__)

# length + type in front of the data, crc behind it
HEADER_SIZE = 8
CRC_SIZE = 4
MAX_LENGTH = 0xFFFFFFFF


def crc_of(type_bytes, data):
    return zlib.crc32(data, zlib.crc32(type_bytes))


class Chunk:
    """
    One PNG chunk.

    Layout on the wire, big endian:
    [4B length][4B type][length B data][4B CRC of type + data]
    """

    __slots__ = ("_chunk_type", "_data", "_crc")

    def __init__(self, chunk_type: ChunkType, data: bytes):
        data = bytes(data)
        if len(data) > MAX_LENGTH:
            raise ChunkTooLarge(len(data))
        self._chunk_type = chunk_type
        self._data = data
        self._crc = crc_of(chunk_type.as_bytes(), data)

    @classmethod
    def decode(cls, raw) -> "Chunk":
        """Read the chunk at the start of ``raw``; trailing bytes are ignored."""
        raw = memoryview(raw)
        if len(raw) < HEADER_SIZE + CRC_SIZE:
            raise LengthMismatch(HEADER_SIZE + CRC_SIZE, len(raw))

        length, type_bytes = struct.unpack(">I4s", raw[:HEADER_SIZE])
        end = HEADER_SIZE + length
        if len(raw) < end + CRC_SIZE:
            raise LengthMismatch(end + CRC_SIZE, len(raw))

        data = raw[HEADER_SIZE:end].tobytes()
        (stored_crc,) = struct.unpack(">I", raw[end : end + CRC_SIZE])

        # integrity first, so a damaged type code reports as a checksum failure
        crc = crc_of(type_bytes, data)
        if crc != stored_crc:
            raise ChecksumMismatch(stored_crc, crc)

        return cls(ChunkType(type_bytes), data)

    def encode(self) -> bytes:
        return (
            struct.pack(">I4s", self.length, self._chunk_type.as_bytes())
            + self._data
            + struct.pack(">I", self._crc)
        )

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def encoded_size(self) -> int:
        return HEADER_SIZE + self.length + CRC_SIZE

    def data_as_string(self) -> str:
        return self._data.decode("utf-8")

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented
        return (
            self._chunk_type == other._chunk_type
            and self._data == other._data
            and self._crc == other._crc
        )

    def __hash__(self):
        return hash((self._chunk_type, self._data))

    def __repr__(self):
        return f"Chunk({str(self._chunk_type)!r}, length={self.length}, crc={self._crc:08x})"

    def __str__(self):
        kind = "critical" if self._chunk_type.is_critical() else "ancillary"
        return f"Type:{self._chunk_type} Length:{self.length} CRC:{self._crc:08x} ({kind})"
