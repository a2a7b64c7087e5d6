"""Checker capability contract shared by all backends."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from proofmap.diagnostics import Suggestion


class LanguageToolBackend(Protocol):
    """Capability set every grammar-checking backend provides."""

    async def allow_words(self, language: str, words: Sequence[str]) -> None: ...

    async def disable_checks(self, language: str, checks: Sequence[str]) -> None: ...

    async def check_text(self, language: str, text: str) -> list[Suggestion]: ...


class ManagedBackend(LanguageToolBackend, Protocol):
    """Backend that holds a process or connection until closed."""

    async def aclose(self) -> None: ...


@dataclass(slots=True)
class LanguageSettings:
    """Allowed words and disabled rules, kept per language on the client side."""

    allowed_words: dict[str, set[str]] = field(default_factory=dict)
    disabled_checks: dict[str, set[str]] = field(default_factory=dict)

    def allow(self, language: str, words: Iterable[str]) -> None:
        self.allowed_words.setdefault(language, set()).update(words)

    def disable(self, language: str, checks: Iterable[str]) -> None:
        self.disabled_checks.setdefault(language, set()).update(checks)

    def disabled(self, language: str) -> list[str]:
        return sorted(self.disabled_checks.get(language, ()))

    def filter(self, language: str, text: str, suggestions: Iterable[Suggestion]) -> list[Suggestion]:
        """Drop suggestions whose flagged text is an allowed word."""
        words = self.allowed_words.get(language)
        if not words:
            return list(suggestions)
        return [suggestion for suggestion in suggestions if text[suggestion.start : suggestion.end] not in words]
