"""Checker backends and the dispatcher that selects one of them."""

from proofmap.backends.base import LanguageSettings, LanguageToolBackend, ManagedBackend
from proofmap.backends.dispatcher import LanguageTool
from proofmap.backends.features import Feature, available_features

__all__ = [
    "Feature",
    "LanguageSettings",
    "LanguageTool",
    "LanguageToolBackend",
    "ManagedBackend",
    "available_features",
]
