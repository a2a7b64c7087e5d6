"""Per-file accumulation of checker suggestions into source diagnostics."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from loguru import logger

from proofmap.diagnostics.diagnostic import Diagnostic, Suggestion

if TYPE_CHECKING:
    from proofmap.convert import Mapping
    from proofmap.source import FileId, Source, World


class FileCollector:
    """Collects the diagnostics of one source file.

    Suggestions that do not resolve to any source range are dropped; `dropped`
    counts them.
    """

    def __init__(self, file_id: FileId, world: World) -> None:
        self._source = world.source(file_id)
        self._diagnostics: list[Diagnostic] = []
        self._dropped = 0
        self._finished = False

    @property
    def source(self) -> Source:
        return self._source

    @property
    def dropped(self) -> int:
        return self._dropped

    def add(self, suggestions: Iterable[Suggestion], mapping: Mapping) -> None:
        self._ensure_open()
        for suggestion in suggestions:
            locations = mapping.location(suggestion, self._source)
            if not locations:
                self._dropped += 1
                logger.debug(
                    f"Dropping unmappable suggestion {suggestion.rule_id} "
                    f"[{suggestion.start}, {suggestion.end}) in {self._source.id}"
                )
                continue
            self._diagnostics.append(Diagnostic.from_suggestion(suggestion, tuple(locations)))

    def finish(self) -> tuple[Source, list[Diagnostic]]:
        self._ensure_open()
        self._finished = True
        return self._source, self._diagnostics

    def _ensure_open(self) -> None:
        if self._finished:
            raise RuntimeError("FileCollector already finished")
