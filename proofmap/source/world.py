"""Document world contracts: the lookup from file ids to source text."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Protocol

from proofmap.errors import SourceLookupError
from proofmap.source.source import FileId, Source


class World(Protocol):
    """Abstract document system that owns the sources of a project."""

    def source(self, file_id: FileId) -> Source: ...


@dataclass(frozen=True, slots=True)
class MemoryWorld:
    """Simple in-memory world for tests and local wiring."""

    sources: Mapping[FileId, Source] = field(default_factory=lambda: MappingProxyType({}))

    @staticmethod
    def from_texts(texts: Mapping[FileId, str]) -> "MemoryWorld":
        return MemoryWorld(
            sources=MappingProxyType({file_id: Source(file_id, text) for file_id, text in texts.items()})
        )

    def source(self, file_id: FileId) -> Source:
        try:
            return self.sources[file_id]
        except KeyError:
            raise SourceLookupError(file_id, "unknown file") from None


@dataclass(frozen=True, slots=True)
class DirectoryWorld:
    """World backed by UTF-8 files below `root`; file ids are relative paths."""

    root: Path

    def source(self, file_id: FileId) -> Source:
        path = self.root / file_id
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceLookupError(file_id, str(exc)) from exc
        return Source(file_id, text)
