"""Pipeline run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from proofmap.diagnostics import Diagnostic
from proofmap.source import Source


@dataclass(frozen=True, slots=True)
class FileCheckResult:
    """Result of checking all extracted segments of one file."""

    source: Source
    diagnostics: list[Diagnostic]
    dropped: int = 0
