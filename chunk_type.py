from png_errors import InvalidCharacter, InvalidLength


def _check_letters(raw):
    for b in raw:
        if not (65 <= b <= 90 or 97 <= b <= 122):
            raise InvalidCharacter(b)


def _is_upper(b):
    return 65 <= b <= 90


class ChunkType:
    """
    Four byte PNG chunk type code.

    The case of each letter carries one property bit:
    byte 0 ancillary, byte 1 private, byte 2 reserved, byte 3 safe-to-copy.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw):
        raw = bytes(raw)
        if len(raw) != 4:
            raise InvalidLength(len(raw))
        _check_letters(raw)
        self._raw = raw

    @classmethod
    def from_str(cls, text: str) -> "ChunkType":
        raw = text.encode("utf-8")
        if len(raw) != 4:
            raise InvalidLength(len(raw))
        return cls(raw)

    def as_bytes(self) -> bytes:
        return self._raw

    def __bytes__(self):
        return self._raw

    def is_valid(self) -> bool:
        # letters only, checked on construction
        return self.is_reserved_bit_valid()

    def is_critical(self) -> bool:
        return _is_upper(self._raw[0])

    def is_public(self) -> bool:
        return _is_upper(self._raw[1])

    def is_reserved_bit_valid(self) -> bool:
        return _is_upper(self._raw[2])

    def is_safe_to_copy(self) -> bool:
        return not _is_upper(self._raw[3])

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __str__(self):
        return self._raw.decode("ascii")

    def __repr__(self):
        return f"ChunkType({str(self)!r})"
