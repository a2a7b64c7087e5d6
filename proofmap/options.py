"""Backend selection and check configuration."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, Mapping

from loguru import logger

from proofmap.errors import ConfigurationError

DEFAULT_LANGUAGE: Final[str] = "en-US"


@dataclass(frozen=True, slots=True)
class LanguageToolOptions:
    """Mutually exclusive backend selection: bundled, jar location, or host and port."""

    bundled: bool = False
    jar_location: str | None = None
    host: str | None = None
    port: str | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "LanguageToolOptions":
        bundled = data.get("bundled", False)
        if not isinstance(bundled, bool):
            raise ConfigurationError("'bundled' must be a boolean")
        port = data.get("port")
        if isinstance(port, int) and not isinstance(port, bool):
            port = str(port)
        return LanguageToolOptions(
            bundled=bundled,
            jar_location=_optional_str(data, "jar_location"),
            host=_optional_str(data, "host"),
            port=_optional_str({"port": port}, "port"),
        )


@dataclass(frozen=True, slots=True)
class CheckOptions:
    """Default language plus per-language dictionaries and disabled rules."""

    language: str = DEFAULT_LANGUAGE
    dictionary: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    disabled_checks: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "CheckOptions":
        return CheckOptions(
            language=_optional_str(data, "language") or DEFAULT_LANGUAGE,
            dictionary=_string_lists(data, "dictionary"),
            disabled_checks=_string_lists(data, "disabled_checks"),
        )


@dataclass(frozen=True, slots=True)
class ProofmapConfig:
    backend: LanguageToolOptions = field(default_factory=LanguageToolOptions)
    check: CheckOptions = field(default_factory=CheckOptions)


KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {"bundled", "jar_location", "host", "port", "language", "dictionary", "disabled_checks"}
)


def config_from_mapping(data: Mapping[str, Any]) -> ProofmapConfig:
    for key in sorted(set(data) - KNOWN_KEYS):
        logger.warning(f"Ignoring unknown configuration key {key!r}")
    return ProofmapConfig(
        backend=LanguageToolOptions.from_mapping(data),
        check=CheckOptions.from_mapping(data),
    )


def load_config(path: str | Path) -> ProofmapConfig:
    """Read a TOML configuration file."""
    try:
        with open(path, "rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Cannot read configuration {path}: {exc}") from exc
    return config_from_mapping(data)


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigurationError(f"{key!r} must be a string")


def _string_lists(data: Mapping[str, Any], key: str) -> Mapping[str, tuple[str, ...]]:
    table = data.get(key, {})
    if not isinstance(table, Mapping):
        raise ConfigurationError(f"{key!r} must be a table of language to list of strings")
    result: dict[str, tuple[str, ...]] = {}
    for language, values in table.items():
        if not isinstance(values, list) or not all(isinstance(value, str) for value in values):
            raise ConfigurationError(f"{key}.{language} must be a list of strings")
        result[language] = tuple(values)
    return MappingProxyType(result)
