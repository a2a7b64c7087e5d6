"""Document source text with UTF-8 byte addressing."""

from __future__ import annotations

from bisect import bisect_left
from typing import TypeAlias

from proofmap.text import TextRange, char_utf8_len

FileId: TypeAlias = str


class Source:
    """Immutable text of one file, addressed by UTF-8 byte offsets."""

    def __init__(self, file_id: FileId, text: str) -> None:
        self._id = file_id
        self._text = text
        self._encoded = text.encode("utf-8")
        self._char_starts: list[int] | None = None

    @property
    def id(self) -> FileId:
        return self._id

    @property
    def text(self) -> str:
        return self._text

    @property
    def encoded(self) -> bytes:
        return self._encoded

    @property
    def byte_len(self) -> int:
        return len(self._encoded)

    def is_char_boundary(self, offset: int) -> bool:
        """Check that `offset` does not fall inside an encoded character."""
        if offset < 0 or offset > len(self._encoded):
            return False
        if offset == len(self._encoded):
            return True
        return (self._encoded[offset] & 0xC0) != 0x80

    def is_valid_range(self, range: TextRange) -> bool:
        """Range lies within the text and both ends sit on character boundaries."""
        start, end = range.as_tuple()
        return self.is_char_boundary(start) and self.is_char_boundary(end)

    def slice(self, range: TextRange) -> str:
        if not self.is_valid_range(range):
            raise ValueError(f"{range!r} is not a valid range of {self._id!r}")
        start, end = range.as_tuple()
        return self._encoded[start:end].decode("utf-8")

    def byte_offset(self, char_index: int) -> int:
        """Byte offset of the character at `char_index` (or of the end of text)."""
        starts = self._boundaries()
        if char_index < 0 or char_index >= len(starts):
            raise ValueError(f"Character index {char_index} out of range for {self._id!r}")
        return starts[char_index]

    def char_index(self, byte_offset: int) -> int:
        """Character index of the boundary at `byte_offset`."""
        starts = self._boundaries()
        index = bisect_left(starts, byte_offset)
        if index == len(starts) or starts[index] != byte_offset:
            raise ValueError(f"Byte offset {byte_offset} is not a character boundary of {self._id!r}")
        return index

    def _boundaries(self) -> list[int]:
        if self._char_starts is None:
            starts = [0] * (len(self._text) + 1)
            offset = 0
            for index, char in enumerate(self._text):
                starts[index] = offset
                offset += char_utf8_len(char)
            starts[len(self._text)] = offset
            self._char_starts = starts
        return self._char_starts

    def __repr__(self) -> str:
        return f"Source({self._id!r}, {self.byte_len} bytes)"
