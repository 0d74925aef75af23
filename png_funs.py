import logging
import zlib

import chardet
import matplotlib.pyplot as plt

from png_errors import ChunkFormatError
from png_model import Png

logger = logging.getLogger(__name__)

TEXT_CHUNK_TYPES = ("tEXt", "zTXt", "iTXt")


def read_all(path) -> bytes:
    with open(path, "rb") as file:
        data = file.read()
    logger.debug("read %d bytes from %s", len(data), path)
    return data


def write_all(path, data: bytes):
    with open(path, "wb") as file:
        file.write(data)
    logger.debug("wrote %d bytes to %s", len(data), path)


def read_png(path) -> Png:
    return Png.parse(read_all(path))


def write_png(path, png: Png):
    write_all(path, png.as_bytes())


def _split_keyword(data):
    if b"\0" not in data:
        raise ChunkFormatError("text chunk has no keyword separator")
    keyword, rest = data.split(b"\0", 1)
    return keyword.decode("latin-1"), rest


def _inflate(method, compressed):
    # 0 (deflate) is the only method PNG defines
    if method != 0:
        raise ChunkFormatError(f"unknown compression method {method}")
    try:
        return zlib.decompress(compressed)
    except zlib.error as e:
        raise ChunkFormatError(f"cannot inflate text chunk: {e}") from e


def _decode_guessing(text_data):
    # tEXt is Latin-1 by the standard, but writers often put other encodings in it
    detected_encoding = chardet.detect(text_data)["encoding"]
    if detected_encoding:
        try:
            return text_data.decode(detected_encoding)
        except (UnicodeDecodeError, LookupError):
            logger.debug("text does not decode as detected %s", detected_encoding)
    return text_data.decode("latin-1")


def describe_text_chunk(chunk):
    """
    Return ``(keyword, text)`` for tEXt, zTXt and iTXt chunks, ``None`` for
    anything else.
    """
    chunk_type = str(chunk.chunk_type)
    if chunk_type not in TEXT_CHUNK_TYPES:
        return None

    keyword, rest = _split_keyword(chunk.data)

    if chunk_type == "tEXt":
        return keyword, _decode_guessing(rest)

    if chunk_type == "zTXt":
        if not rest:
            raise ChunkFormatError("zTXt chunk has no compression method")
        return keyword, _inflate(rest[0], rest[1:]).decode("latin-1")

    # iTXt: flag, method, language\0, translated keyword\0, text
    if len(rest) < 2:
        raise ChunkFormatError("iTXt chunk is truncated")
    compression_flag, compression_method = rest[0], rest[1]
    parts = rest[2:].split(b"\0", 2)
    if len(parts) != 3:
        raise ChunkFormatError("iTXt chunk is missing language or translated keyword")
    text = parts[2]
    if compression_flag:
        text = _inflate(compression_method, text)
    return keyword, text.decode("utf-8")


def plot_chunk_sizes(png: Png, output=None):
    """Bar chart of the encoded size of each chunk, saved to ``output`` or shown."""
    labels = [f"{i}:{chunk.chunk_type}" for i, chunk in enumerate(png)]
    sizes = [chunk.encoded_size for chunk in png]
    colors = ["tab:red" if chunk.chunk_type.is_critical() else "tab:blue" for chunk in png]

    fig, ax = plt.subplots(figsize=(max(6, len(labels) * 0.6), 4))
    ax.bar(range(len(sizes)), sizes, color=colors)
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.set_ylabel("bytes")
    ax.set_title("Chunk sizes (red: critical, blue: ancillary)")
    fig.tight_layout()

    if output is not None:
        fig.savefig(output)
        plt.close(fig)
        logger.debug("saved chunk chart to %s", output)
    else:
        plt.show()
