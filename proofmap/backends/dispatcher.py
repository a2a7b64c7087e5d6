"""Backend selection and forwarding."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from types import TracebackType

from loguru import logger

from proofmap.backends.base import ManagedBackend
from proofmap.backends.features import Feature, available_features
from proofmap.diagnostics import Suggestion
from proofmap.errors import ConfigurationError
from proofmap.options import LanguageToolOptions


class LanguageTool:
    """Owns exactly one checker backend and forwards capability calls to it.

    Calls must be serialized by the owner; the backend is not safe for
    concurrent use.
    """

    def __init__(self, backend: ManagedBackend, feature: Feature) -> None:
        self._backend = backend
        self._feature = feature

    @staticmethod
    def new(
        bundled: bool = False,
        jar_location: str | None = None,
        host: str | None = None,
        port: str | None = None,
        *,
        features: Iterable[Feature] | None = None,
    ) -> "LanguageTool":
        """Select a backend from exactly one of `bundled`, `jar_location` or `host` + `port`."""
        enabled = available_features() if features is None else frozenset(features)

        match (bundled, jar_location, host, port):
            case (False, None, str(), str()):
                _require(Feature.REMOTE_SERVER, enabled)
                from proofmap.backends.remote import LanguageToolRemote

                logger.info(f"Using remote LanguageTool at {host}:{port}")
                return LanguageTool(LanguageToolRemote(host, port), Feature.REMOTE_SERVER)
            case (True, None, None, None):
                _require(Feature.BUNDLE_JAR, enabled)
                from proofmap.backends.bundled import LanguageToolBundled

                logger.info("Using bundled LanguageTool")
                return LanguageTool(LanguageToolBundled(), Feature.BUNDLE_JAR)
            case (False, str(), None, None):
                # the jar runs as a local HTTP server, so bundle-jar alone is not enough
                if not enabled & {Feature.BUNDLE_JAR, Feature.EXTERN_JAR}:
                    raise ConfigurationError("Features 'bundle-jar' and 'extern-jar' are disabled.")
                _require(Feature.EXTERN_JAR, enabled)
                from proofmap.backends.jar import LanguageToolJar

                logger.info(f"Using LanguageTool jar at {jar_location}")
                return LanguageTool(LanguageToolJar(jar_location), Feature.EXTERN_JAR)
            case _:
                raise ConfigurationError(
                    "Exactly one of 'bundled', 'jar_location' or 'host and port' must be specified."
                )

    @staticmethod
    def from_options(
        options: LanguageToolOptions,
        *,
        features: Iterable[Feature] | None = None,
    ) -> "LanguageTool":
        return LanguageTool.new(
            options.bundled,
            options.jar_location,
            options.host,
            options.port,
            features=features,
        )

    @property
    def backend(self) -> ManagedBackend:
        return self._backend

    @property
    def feature(self) -> Feature:
        return self._feature

    async def allow_words(self, language: str, words: Sequence[str]) -> None:
        await self._backend.allow_words(language, words)

    async def disable_checks(self, language: str, checks: Sequence[str]) -> None:
        await self._backend.disable_checks(language, checks)

    async def check_text(self, language: str, text: str) -> list[Suggestion]:
        return await self._backend.check_text(language, text)

    async def aclose(self) -> None:
        await self._backend.aclose()

    async def __aenter__(self) -> "LanguageTool":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"LanguageTool({self._feature.value})"


def _require(feature: Feature, enabled: frozenset[Feature]) -> None:
    if feature not in enabled:
        raise ConfigurationError(f"Feature '{feature.value}' is disabled.")
