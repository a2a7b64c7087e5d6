from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of UTF-8 text length / byte index into text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open byte range [start, end) in UTF-8 encoded text.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        """Create a TextRange from start and end TextSizes."""
        return TextRange(start.value, end.value)

    @property
    def start(self) -> TextSize:
        """Get the start offset as a TextSize."""
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        """Get the end offset as a TextSize."""
        return TextSize(self._end)

    def len(self) -> TextSize:
        """Get the length of the range as a TextSize."""
        return TextSize(self._end - self._start)

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def contains_range(self, other: "TextRange") -> bool:
        """Check if the range fully contains another range."""
        return self._start <= other._start and other._end <= self._end

    def touches(self, other: "TextRange") -> bool:
        """Check if the ranges overlap or are directly adjacent."""
        return self._start <= other._end and other._start <= self._end

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange(min(self._start, other._start), max(self._end, other._end))

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def utf8_len(text: str) -> int:
    """Number of bytes `text` occupies when encoded as UTF-8."""
    return len(text.encode("utf-8"))


def char_utf8_len(char: str) -> int:
    """Encoded width of a single code point, without encoding it."""
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4
