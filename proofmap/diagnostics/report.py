"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from proofmap.diagnostics.diagnostic import Diagnostic
from proofmap.source import Source
from proofmap.text import Position, TextRange, TextWithPosition


@dataclass(frozen=True, slots=True)
class LocatedRange:
    range: TextRange
    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class LocatedDiagnostic:
    """Diagnostic with line/column positions for each of its locations."""

    diagnostic: Diagnostic
    ranges: tuple[LocatedRange, ...]


def locate_diagnostics(source: Source, diagnostics: Sequence[Diagnostic]) -> list[LocatedDiagnostic]:
    """Attach line/column positions to every location of `diagnostics`.

    End positions are clamped to the line the location starts on. Locations are
    visited in source order so one window serves the whole file.
    """
    requests = sorted(
        (location.start.value, index, location_index)
        for index, diagnostic in enumerate(diagnostics)
        for location_index, location in enumerate(diagnostic.locations)
    )

    window = TextWithPosition(source.text)
    resolved: dict[tuple[int, int], LocatedRange] = {}
    for _, index, location_index in requests:
        location = diagnostics[index].locations[location_index]
        start_char = source.char_index(location.start.value)
        end_char = source.char_index(location.end.value)
        if start_char < window.char_index:
            # backward moves only know placeholder columns
            window = TextWithPosition(source.text)
        start = window.get_position(start_char)
        end = window.get_position(end_char, stop_at_newline=True)
        resolved[(index, location_index)] = LocatedRange(range=location, start=start, end=end)

    return [
        LocatedDiagnostic(
            diagnostic=diagnostic,
            ranges=tuple(resolved[(index, location_index)] for location_index in range(len(diagnostic.locations))),
        )
        for index, diagnostic in enumerate(diagnostics)
    ]


def has_diagnostics(diagnostics: Sequence[Diagnostic]) -> bool:
    return any(diagnostic.is_mappable for diagnostic in diagnostics)
