"""Bundled LanguageTool engine managed by language_tool_python."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from typing import Any, TypeAlias

from loguru import logger

from proofmap.backends.base import LanguageSettings
from proofmap.diagnostics import Suggestion
from proofmap.errors import BackendError

ToolFactory: TypeAlias = Callable[[str], Any]


class LanguageToolBundled:
    """One engine per language, created on first use.

    language_tool_python is blocking, so every engine call runs in a worker thread.
    """

    def __init__(self, *, tool_factory: ToolFactory | None = None) -> None:
        self._tool_factory = tool_factory
        self._tools: dict[str, Any] = {}
        self._settings = LanguageSettings()

    async def allow_words(self, language: str, words: Sequence[str]) -> None:
        self._settings.allow(language, words)

    async def disable_checks(self, language: str, checks: Sequence[str]) -> None:
        self._settings.disable(language, checks)

    async def check_text(self, language: str, text: str) -> list[Suggestion]:
        tool = await self._tool(language)
        tool.disabled_rules = set(self._settings.disabled(language))
        try:
            matches = await asyncio.to_thread(tool.check, text)
        except Exception as exc:
            raise BackendError(f"Bundled LanguageTool check failed: {exc}") from exc

        suggestions = [
            Suggestion(
                start=match.offset,
                end=match.offset + match.errorLength,
                message=match.message,
                replacements=tuple(match.replacements),
                # language_tool_python drops the rule description; the category is the closest label
                rule_description=match.category,
                rule_id=match.ruleId,
            )
            for match in matches
        ]
        return self._settings.filter(language, text, suggestions)

    async def aclose(self) -> None:
        tools, self._tools = self._tools, {}
        for tool in tools.values():
            await asyncio.to_thread(tool.close)

    async def _tool(self, language: str) -> Any:
        tool = self._tools.get(language)
        if tool is not None:
            return tool

        factory = self._tool_factory
        if factory is None:
            import language_tool_python

            factory = language_tool_python.LanguageTool

        logger.info(f"Starting bundled LanguageTool for {language}")
        try:
            tool = await asyncio.to_thread(factory, language)
        except Exception as exc:
            raise BackendError(f"Cannot start bundled LanguageTool for {language}: {exc}") from exc
        self._tools[language] = tool
        return tool
