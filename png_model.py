import logging

from chunk_model import Chunk
from png_errors import ChunkNotFound, InvalidSignature

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class Png:
    """
    A PNG file as its signature plus an ordered list of chunks.

    Chunk order is kept exactly as parsed or appended, so parsing and
    serializing an untouched file gives back the same bytes.
    """

    def __init__(self, chunks=()):
        self._chunks = list(chunks)

    @classmethod
    def from_chunks(cls, chunks) -> "Png":
        return cls(chunks)

    @classmethod
    def parse(cls, raw) -> "Png":
        raw = memoryview(raw)
        signature = raw[: len(PNG_SIGNATURE)].tobytes()
        if signature != PNG_SIGNATURE:
            raise InvalidSignature(signature)

        chunks = []
        offset = len(PNG_SIGNATURE)
        while offset < len(raw):
            chunk = Chunk.decode(raw[offset:])
            logger.debug("chunk %s at offset %d, length %d", chunk.chunk_type, offset, chunk.length)
            chunks.append(chunk)
            offset += chunk.encoded_size

        return cls(chunks)

    from_bytes = parse

    def header(self) -> bytes:
        return PNG_SIGNATURE

    @property
    def chunks(self):
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk):
        self._chunks.append(chunk)
        logger.debug("appended chunk %s", chunk.chunk_type)

    def _index_of(self, chunk_type: str):
        for i, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return i
        return None

    def chunk_by_type(self, chunk_type: str):
        i = self._index_of(chunk_type)
        if i is None:
            return None
        return self._chunks[i]

    def remove_chunk(self, chunk_type: str) -> Chunk:
        i = self._index_of(chunk_type)
        if i is None:
            raise ChunkNotFound(chunk_type)
        chunk = self._chunks.pop(i)
        logger.debug("removed chunk %s", chunk.chunk_type)
        return chunk

    def as_bytes(self) -> bytes:
        return PNG_SIGNATURE + b"".join(chunk.encode() for chunk in self._chunks)

    serialize = as_bytes

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    def __str__(self):
        lines = [f"PNG, {len(self._chunks)} chunks:"]
        lines.extend(f"  {chunk}" for chunk in self._chunks)
        return "\n".join(lines)
