"""Correspondence between extracted text characters and source byte ranges."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from proofmap.source import FileId, Source
from proofmap.text import TextRange

if TYPE_CHECKING:
    from proofmap.diagnostics.diagnostic import Suggestion


@dataclass(frozen=True, slots=True)
class Span:
    """Byte range of a source node in one file."""

    file_id: FileId
    range: TextRange


class Mapping:
    """Per-character source spans of one extracted text segment.

    Entry `i` holds the span the `i`-th extracted character came from, or None
    for synthesized text that has no source location.
    """

    def __init__(self, spans: Sequence[Span | None] = ()) -> None:
        self._chars: tuple[Span | None, ...] = tuple(spans)

    def __len__(self) -> int:
        return len(self._chars)

    def span_at(self, char_index: int) -> Span | None:
        return self._chars[char_index]

    def location(self, suggestion: Suggestion, source: Source) -> list[TextRange]:
        """Resolve the source byte ranges covered by `suggestion`.

        Adjacent or overlapping spans collapse into one range; gaps between
        spans start a new range. Characters without a span in `source` are
        skipped, so the result may be empty.
        """
        start = min(suggestion.start, len(self._chars))
        end = min(max(suggestion.end, start), len(self._chars))

        locations: list[TextRange] = []
        for span in self._chars[start:end]:
            if span is None or span.file_id != source.id:
                continue
            if not source.is_valid_range(span.range):
                continue
            if locations:
                last = locations[-1]
                if last.contains_range(span.range):
                    continue
                if last.touches(span.range):
                    locations[-1] = last.cover(span.range)
                    continue
            locations.append(span.range)
        return locations

    def __repr__(self) -> str:
        return f"Mapping({len(self._chars)} chars)"
