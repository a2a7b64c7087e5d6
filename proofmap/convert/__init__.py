"""Extracted text segments and their mapping back onto source bytes."""

from proofmap.convert.builder import TextBuilder, TextSegment
from proofmap.convert.mapping import Mapping, Span

__all__ = [
    "Mapping",
    "Span",
    "TextBuilder",
    "TextSegment",
]
