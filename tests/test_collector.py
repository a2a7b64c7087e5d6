import pytest

from proofmap.convert import TextBuilder, TextSegment
from proofmap.diagnostics import Diagnostic, FileCollector, Suggestion
from proofmap.errors import SourceLookupError
from proofmap.source import MemoryWorld
from proofmap.text import TextRange

SOURCE_TEXT = "= Title\nThis are *wrong*.\n"


def make_world() -> MemoryWorld:
    return MemoryWorld.from_texts({"main.typ": SOURCE_TEXT})


def body_segment(world: MemoryWorld) -> TextSegment:
    source = world.source("main.typ")
    builder = TextBuilder()
    builder.push_synthetic("• ")
    builder.push_source(source, TextRange(8, 17))
    builder.push_source(source, TextRange(18, 23))
    builder.push_source(source, TextRange(24, 25))
    return builder.finish()


def test_add_keeps_mappable_and_drops_unmappable_suggestions() -> None:
    world = make_world()
    segment = body_segment(world)
    assert segment.text == "• This are wrong."
    collector = FileCollector("main.typ", world)

    collector.add(
        [
            Suggestion(start=7, end=10, message="Use 'is'", replacements=("is",), rule_description="Agreement", rule_id="AGR"),
            Suggestion(start=0, end=1, message="Bullet", rule_id="BULLET"),
            Suggestion(start=11, end=16, message="Typo?", rule_id="SPELL"),
        ],
        segment.mapping,
    )
    source, diagnostics = collector.finish()

    assert source.text == SOURCE_TEXT
    assert diagnostics == [
        Diagnostic(
            locations=(TextRange(13, 16),),
            message="Use 'is'",
            replacements=("is",),
            rule_description="Agreement",
            rule_id="AGR",
        ),
        Diagnostic(locations=(TextRange(18, 23),), message="Typo?", rule_id="SPELL"),
    ]
    assert collector.dropped == 1


def test_diagnostics_keep_add_order() -> None:
    world = make_world()
    segment = body_segment(world)
    collector = FileCollector("main.typ", world)

    collector.add([Suggestion(start=11, end=16, message="second", rule_id="B")], segment.mapping)
    collector.add([Suggestion(start=2, end=6, message="first", rule_id="A")], segment.mapping)
    _, diagnostics = collector.finish()

    assert [diagnostic.rule_id for diagnostic in diagnostics] == ["B", "A"]
    assert diagnostics[1].locations == (TextRange(8, 12),)


def test_suggestion_across_stripped_markup_has_two_locations() -> None:
    world = make_world()
    segment = body_segment(world)
    collector = FileCollector("main.typ", world)

    collector.add([Suggestion(start=7, end=16, message="m", rule_id="R")], segment.mapping)
    _, diagnostics = collector.finish()

    assert diagnostics[0].locations == (TextRange(13, 17), TextRange(18, 23))


def test_finish_returns_unchanged_source_once() -> None:
    world = make_world()
    collector = FileCollector("main.typ", world)

    source, diagnostics = collector.finish()

    assert source is world.source("main.typ")
    assert source.text == SOURCE_TEXT
    assert diagnostics == []
    with pytest.raises(RuntimeError, match="already finished"):
        collector.finish()
    with pytest.raises(RuntimeError, match="already finished"):
        collector.add([], body_segment(world).mapping)


def test_missing_source_aborts_construction() -> None:
    with pytest.raises(SourceLookupError):
        FileCollector("missing.typ", make_world())
