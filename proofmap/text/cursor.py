"""Character index to UTF-8 byte offset cursor."""

from typing import Final

from proofmap.text.text import char_utf8_len

NEWLINES: Final[frozenset[str]] = frozenset({"\n", "\r"})


class StringCursor:
    """Stateful scanner converting character indices into UTF-8 byte offsets.

    The cursor remembers the last resolved `(char_index, utf_8_index)` pair and
    scans from there, so lookups clustered around the previous one only walk
    the distance between them.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._utf_8_index = 0
        self._char_index = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def utf_8_index(self) -> int:
        return self._utf_8_index

    @property
    def char_index(self) -> int:
        return self._char_index

    def utf_8_offset(self, char_index: int, stop_at_newline: bool = False) -> int | None:
        """Move to `char_index` and return its byte offset.

        With `stop_at_newline`, the scan halts in front of the first `\\n` or
        `\\r` it would cross and returns the offset reached there. Returns None
        if `char_index` lies beyond the text; the cursor then rests at the end
        of the text.
        """
        if char_index < 0:
            raise ValueError("char_index cannot be negative")

        if self._char_index < char_index:
            end = min(char_index, len(self._text))
            while self._char_index < end:
                char = self._text[self._char_index]
                if stop_at_newline and char in NEWLINES:
                    return self._utf_8_index
                self._utf_8_index += char_utf8_len(char)
                self._char_index += 1
        elif self._char_index > char_index:
            while self._char_index > char_index:
                char = self._text[self._char_index - 1]
                if stop_at_newline and char in NEWLINES:
                    return self._utf_8_index
                self._utf_8_index -= char_utf8_len(char)
                self._char_index -= 1

        if self._char_index == char_index:
            return self._utf_8_index
        return None

    def __repr__(self) -> str:
        return f"StringCursor(char_index={self._char_index}, utf_8_index={self._utf_8_index})"
