"""Text coordinates, cursors and positions."""

from proofmap.text.cursor import NEWLINES, StringCursor
from proofmap.text.position import Position, TextWithPosition
from proofmap.text.text import TextRange, TextSize, char_utf8_len, utf8_len

__all__ = [
    "NEWLINES",
    "Position",
    "StringCursor",
    "TextRange",
    "TextSize",
    "TextWithPosition",
    "char_utf8_len",
    "utf8_len",
]
