"""Builder used by document converters to emit extracted text segments."""

from __future__ import annotations

from dataclasses import dataclass

from proofmap.convert.mapping import Mapping, Span
from proofmap.source import Source
from proofmap.text import TextRange, char_utf8_len


@dataclass(frozen=True, slots=True)
class TextSegment:
    """Plain text handed to a checker together with its source mapping."""

    text: str
    mapping: Mapping
    language: str | None = None


class TextBuilder:
    """Accumulates extracted text while recording where each character came from."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._spans: list[Span | None] = []

    def __len__(self) -> int:
        return len(self._spans)

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def push_source(self, source: Source, range: TextRange) -> None:
        """Copy a source slice verbatim; every character maps to its own bytes."""
        text = source.slice(range)
        offset = range.start.value
        for char in text:
            width = char_utf8_len(char)
            self._spans.append(Span(source.id, TextRange(offset, offset + width)))
            offset += width
        self._parts.append(text)

    def push_node(self, text: str, span: Span) -> None:
        """Append text standing for a whole source node, e.g. an escape sequence."""
        self._spans.extend([span] * len(text))
        self._parts.append(text)

    def push_synthetic(self, text: str) -> None:
        """Append generated text with no source location."""
        self._spans.extend([None] * len(text))
        self._parts.append(text)

    def finish(self, language: str | None = None) -> TextSegment:
        segment = TextSegment(text=self.text, mapping=Mapping(self._spans), language=language)
        self._parts = []
        self._spans = []
        return segment
