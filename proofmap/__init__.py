"""Map grammar checker findings on extracted text back onto source byte ranges."""

from proofmap.backends import Feature, LanguageTool, LanguageToolBackend
from proofmap.convert import Mapping, Span, TextBuilder, TextSegment
from proofmap.diagnostics import Diagnostic, FileCollector, Suggestion, locate_diagnostics
from proofmap.errors import BackendError, ConfigurationError, ProofmapError, SourceLookupError
from proofmap.options import CheckOptions, LanguageToolOptions, ProofmapConfig, load_config
from proofmap.pipeline import FileCheckResult, check_file, configure
from proofmap.source import MemoryWorld, Source, World
from proofmap.text import Position, StringCursor, TextRange, TextWithPosition

__all__ = [
    "BackendError",
    "CheckOptions",
    "ConfigurationError",
    "Diagnostic",
    "Feature",
    "FileCheckResult",
    "FileCollector",
    "LanguageTool",
    "LanguageToolBackend",
    "LanguageToolOptions",
    "Mapping",
    "MemoryWorld",
    "Position",
    "ProofmapConfig",
    "ProofmapError",
    "Source",
    "SourceLookupError",
    "Span",
    "StringCursor",
    "Suggestion",
    "TextBuilder",
    "TextRange",
    "TextSegment",
    "TextWithPosition",
    "World",
    "check_file",
    "configure",
    "load_config",
    "locate_diagnostics",
]
