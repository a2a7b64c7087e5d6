"""Optional backend features available in this installation."""

from __future__ import annotations

from enum import StrEnum
from importlib.util import find_spec
from types import MappingProxyType
from typing import Final, Mapping


class Feature(StrEnum):
    """Backend feature, enabled when its extra is installed."""

    BUNDLE_JAR = "bundle-jar"
    EXTERN_JAR = "extern-jar"
    REMOTE_SERVER = "remote-server"


FEATURE_MODULES: Final[Mapping[Feature, str]] = MappingProxyType(
    {
        Feature.BUNDLE_JAR: "language_tool_python",
        Feature.EXTERN_JAR: "httpx",
        Feature.REMOTE_SERVER: "httpx",
    }
)


def available_features() -> frozenset[Feature]:
    return frozenset(feature for feature, module in FEATURE_MODULES.items() if find_spec(module) is not None)
