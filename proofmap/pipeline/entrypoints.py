"""Entrypoints that run a checker backend over the extracted text of a file."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from proofmap.backends import LanguageToolBackend
from proofmap.convert import TextSegment
from proofmap.diagnostics import FileCollector
from proofmap.options import CheckOptions
from proofmap.pipeline.results import FileCheckResult
from proofmap.source import FileId, World


async def configure(tool: LanguageToolBackend, options: CheckOptions) -> None:
    """Register dictionary words and disabled rules with the backend."""
    for language, words in options.dictionary.items():
        await tool.allow_words(language, words)
    for language, checks in options.disabled_checks.items():
        await tool.disable_checks(language, checks)


async def check_file(
    tool: LanguageToolBackend,
    world: World,
    file_id: FileId,
    segments: Iterable[TextSegment],
    options: CheckOptions | None = None,
) -> FileCheckResult:
    """Check every segment of `file_id` and map the findings onto its source."""
    resolved_options = options if options is not None else CheckOptions()
    collector = FileCollector(file_id, world)

    for segment in segments:
        if not segment.text.strip():
            continue
        language = segment.language or resolved_options.language
        logger.debug(f"Checking {len(segment.text)} chars of {file_id} ({language})")
        suggestions = await tool.check_text(language, segment.text)
        collector.add(suggestions, segment.mapping)

    dropped = collector.dropped
    source, diagnostics = collector.finish()
    if dropped:
        logger.debug(f"{dropped} suggestions in {file_id} had no source location")
    return FileCheckResult(source=source, diagnostics=diagnostics, dropped=dropped)
