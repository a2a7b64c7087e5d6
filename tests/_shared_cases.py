"""Centralized text cases used across cursor/position/source tests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextCase:
    name: str
    text: str


ASCII_CASES: tuple[TextCase, ...] = (
    TextCase(name="empty", text=""),
    TextCase(name="single_word", text="hello"),
    TextCase(name="sentence", text="This is an sentence."),
    TextCase(name="lines", text="abc\ndef\nghi"),
    TextCase(name="crlf_lines", text="first line\r\nsecond line\r\n"),
)

MULTIBYTE_CASES: tuple[TextCase, ...] = (
    TextCase(name="two_umlauts", text="ÖÖ"),
    TextCase(name="latin_accents", text="naïve café"),
    TextCase(name="cjk", text="日本語のテキスト"),
    TextCase(name="astral_emoji", text="a😀b😀c"),
    TextCase(name="mixed_lines", text="Grüße\nan 世界\r\nund 🌍!"),
)

ALL_TEXT_CASES: tuple[TextCase, ...] = ASCII_CASES + MULTIBYTE_CASES


def case_id(case: TextCase) -> str:
    return case.name


def byte_offsets(text: str) -> list[int]:
    """Reference byte offset of every char boundary, computed by encoding prefixes."""
    return [len(text[:index].encode("utf-8")) for index in range(len(text) + 1)]
