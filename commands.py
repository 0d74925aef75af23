import logging

from chunk_model import Chunk
from chunk_type import ChunkType
from png_funs import describe_text_chunk, plot_chunk_sizes, read_png, write_png

logger = logging.getLogger(__name__)


def encode(input_path, chunk_type, message, output_path=None):
    chunk = Chunk(ChunkType.from_str(chunk_type), message.encode("utf-8"))

    png = read_png(input_path)
    print(png)

    png.append_chunk(chunk)
    print(png)

    if output_path is not None:
        write_png(output_path, png)
    else:
        logger.debug("no output path given, encoded image discarded")
    return png


def decode(input_path, chunk_type):
    png = read_png(input_path)
    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        logger.debug("no %s chunk in %s", chunk_type, input_path)
        return None

    message = chunk.data_as_string()
    print(f"Secret message was: {message}")
    return message


def remove(input_path, chunk_type):
    png = read_png(input_path)
    removed_chunk = png.remove_chunk(chunk_type)
    print(f"Removed chunk {removed_chunk.chunk_type}")

    write_png(input_path, png)
    return removed_chunk


def print_chunks(input_path, show_text=False, plot=None):
    png = read_png(input_path)
    print(png)

    if show_text:
        for chunk in png:
            text = describe_text_chunk(chunk)
            if text is not None:
                keyword, value = text
                print(f"Text, keyword: {keyword} data: {value}")

    if plot is not None:
        plot_chunk_sizes(png, None if plot == "-" else plot)
    return png
