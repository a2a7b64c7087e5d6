"""Checker suggestion and source diagnostic types."""

from dataclasses import dataclass

from proofmap.text import TextRange


@dataclass(frozen=True, slots=True)
class Suggestion:
    """Checker finding located by character indices within one extracted text segment."""

    start: int
    end: int
    message: str
    replacements: tuple[str, ...] = ()
    rule_description: str = ""
    rule_id: str = ""

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("Suggestion indices cannot be negative")
        if self.start > self.end:
            raise ValueError("Suggestion invariant violated: start > end")


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Suggestion resolved to byte ranges of the checked source."""

    locations: tuple[TextRange, ...]
    message: str
    replacements: tuple[str, ...] = ()
    rule_description: str = ""
    rule_id: str = ""

    @staticmethod
    def from_suggestion(suggestion: Suggestion, locations: tuple[TextRange, ...]) -> "Diagnostic":
        return Diagnostic(
            locations=locations,
            message=suggestion.message,
            replacements=suggestion.replacements,
            rule_description=suggestion.rule_description,
            rule_id=suggestion.rule_id,
        )

    @property
    def is_mappable(self) -> bool:
        return len(self.locations) > 0
