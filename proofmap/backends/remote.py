"""Client for a LanguageTool server speaking the HTTP API v2."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import httpx
from loguru import logger

from proofmap.backends.base import LanguageSettings
from proofmap.diagnostics import Suggestion
from proofmap.errors import BackendError, ConfigurationError


class LanguageToolRemote:
    """Remote backend; allowed words and disabled rules are applied per request."""

    def __init__(
        self,
        host: str,
        port: str | int,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        try:
            port_number = int(port)
        except ValueError:
            raise ConfigurationError(f"Invalid LanguageTool port {port!r}") from None
        if not 0 < port_number < 65536:
            raise ConfigurationError(f"Invalid LanguageTool port {port!r}")

        host = host.rstrip("/")
        if "://" not in host:
            host = f"http://{host}"
        self._base_url = f"{host}:{port_number}"
        self._client = client if client is not None else httpx.AsyncClient(base_url=self._base_url, timeout=timeout)
        self._owns_client = client is None
        self._settings = LanguageSettings()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def allow_words(self, language: str, words: Sequence[str]) -> None:
        self._settings.allow(language, words)

    async def disable_checks(self, language: str, checks: Sequence[str]) -> None:
        self._settings.disable(language, checks)

    async def check_text(self, language: str, text: str) -> list[Suggestion]:
        data = {"text": text, "language": language}
        disabled = self._settings.disabled(language)
        if disabled:
            data["disabledRules"] = ",".join(disabled)

        try:
            response = await self._client.post("/v2/check", data=data)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise BackendError(f"LanguageTool request to {self._base_url} failed: {exc}") from exc
        except ValueError as exc:
            raise BackendError(f"LanguageTool at {self._base_url} returned invalid JSON") from exc

        suggestions = parse_matches(text, payload)
        logger.debug(f"LanguageTool reported {len(suggestions)} matches for {len(text)} chars ({language})")
        return self._settings.filter(language, text, suggestions)

    async def ping(self) -> bool:
        """Check whether the server answers; used while waiting for startup."""
        try:
            response = await self._client.get("/v2/languages")
        except httpx.TransportError:
            return False
        return response.is_success

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def parse_matches(text: str, payload: Mapping[str, Any]) -> list[Suggestion]:
    """Convert `/v2/check` matches into suggestions indexed by code point."""
    to_char = _utf16_to_char_index(text)
    suggestions: list[Suggestion] = []
    try:
        for match in payload["matches"]:
            offset = int(match["offset"])
            length = int(match["length"])
            rule = match.get("rule") or {}
            suggestions.append(
                Suggestion(
                    start=to_char(offset),
                    end=to_char(offset + length),
                    message=match["message"],
                    replacements=tuple(replacement["value"] for replacement in match.get("replacements", ())),
                    rule_description=rule.get("description", ""),
                    rule_id=rule.get("id", ""),
                )
            )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise BackendError(f"Malformed LanguageTool response: {exc}") from exc
    return suggestions


def _utf16_to_char_index(text: str) -> Callable[[int], int]:
    # the server counts Java chars, i.e. UTF-16 code units
    if all(ord(char) < 0x10000 for char in text):
        return lambda offset: offset

    boundaries = [0]
    for char in text:
        boundaries.append(boundaries[-1] + (2 if ord(char) >= 0x10000 else 1))

    def to_char(offset: int) -> int:
        return min(bisect_left(boundaries, offset), len(text))

    return to_char
