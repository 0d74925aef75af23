class PngError(Exception):
    """Base class for every error raised while handling PNG chunks."""


class ChunkTypeError(PngError, ValueError):
    pass


class InvalidCharacter(ChunkTypeError):
    def __init__(self, byte):
        self.byte = byte
        super().__init__(f"unrecognized character {byte}")


class InvalidLength(ChunkTypeError):
    def __init__(self, length):
        self.length = length
        super().__init__(f"expected length 4, got {length}")


class ChunkError(PngError, ValueError):
    pass


class LengthMismatch(ChunkError):
    """The buffer holds fewer bytes than the chunk header declares."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"chunk needs {expected} bytes, only {actual} available")


class ChecksumMismatch(ChunkError):
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"chunk checksum failed: stored {expected:08x}, computed {actual:08x}")


class ChunkTooLarge(ChunkError):
    def __init__(self, length):
        self.length = length
        super().__init__(f"chunk data of {length} bytes does not fit a 32-bit length")


class ChunkFormatError(ChunkError):
    pass


class InvalidSignature(PngError, ValueError):
    def __init__(self, signature):
        self.signature = signature
        super().__init__("Not a valid PNG file")


class ChunkNotFound(PngError, LookupError):
    def __init__(self, chunk_type):
        self.chunk_type = chunk_type
        super().__init__(f"chunk {chunk_type} not found")
