"""Diagnostics."""

from proofmap.diagnostics.collector import FileCollector
from proofmap.diagnostics.diagnostic import Diagnostic, Suggestion
from proofmap.diagnostics.report import (
    LocatedDiagnostic,
    LocatedRange,
    has_diagnostics,
    locate_diagnostics,
)

__all__ = [
    "Diagnostic",
    "FileCollector",
    "LocatedDiagnostic",
    "LocatedRange",
    "Suggestion",
    "has_diagnostics",
    "locate_diagnostics",
]
