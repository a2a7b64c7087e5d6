"""Document sources and the world lookup."""

from proofmap.source.source import FileId, Source
from proofmap.source.world import DirectoryWorld, MemoryWorld, World

__all__ = [
    "DirectoryWorld",
    "FileId",
    "MemoryWorld",
    "Source",
    "World",
]
