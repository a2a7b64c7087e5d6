"""Line/column tracking on top of `StringCursor`."""

from __future__ import annotations

from dataclasses import dataclass

from proofmap.text.cursor import StringCursor
from proofmap.text.text import utf8_len


@dataclass(frozen=True, slots=True)
class Position:
    """Byte offset plus 0-based line and column (column counted in characters)."""

    utf_8: int
    line: int
    column: int


class TextWithPosition:
    """Running line/column counters that follow a `StringCursor`.

    Every query replays the characters between the previous and the new cursor
    position. Moving backward over a newline cannot recover the length of the
    previous line, so the column is set to the placeholder 1 in that case.
    """

    def __init__(self, content: str) -> None:
        self._line = 0
        self._column = 0
        self._cursor = StringCursor(content)
        self._byte_len = utf8_len(content)
        self._encoded: bytes | None = None

    @staticmethod
    def with_line(content: str, line: int) -> TextWithPosition:
        """Window over `content` whose first character sits on `line`."""
        window = TextWithPosition(content)
        window._line = line
        return window

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def char_index(self) -> int:
        return self._cursor.char_index

    def get_position(self, char_index: int, stop_at_newline: bool = False) -> Position:
        start = self._cursor.char_index
        offset = self._cursor.utf_8_offset(char_index, stop_at_newline)
        end = self._cursor.char_index
        text = self._cursor.text

        if start < end:
            for char in text[start:end]:
                if char == "\n":
                    self._line += 1
                    self._column = 0
                else:
                    self._column += 1
        elif end < start:
            for char in reversed(text[end:start]):
                if char == "\n":
                    self._line -= 1
                    self._column = 1
                else:
                    self._column = max(self._column - 1, 0)

        return Position(
            utf_8=self._byte_len if offset is None else offset,
            line=self._line,
            column=self._column,
        )

    def substring(self, start: int, end: int) -> str:
        """Text between two byte offsets."""
        if self._encoded is None:
            self._encoded = self._cursor.text.encode("utf-8")
        return self._encoded[start:end].decode("utf-8")
