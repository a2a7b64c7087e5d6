import asyncio

import pytest

from proofmap.backends import Feature, LanguageTool
from proofmap.backends.bundled import LanguageToolBundled
from proofmap.backends.jar import LanguageToolJar
from proofmap.backends.remote import LanguageToolRemote
from proofmap.diagnostics import Suggestion
from proofmap.errors import ConfigurationError
from proofmap.options import LanguageToolOptions
from tests._fakes import RecordingBackend

ALL_FEATURES = frozenset(Feature)
EXACTLY_ONE = "Exactly one of 'bundled', 'jar_location' or 'host and port' must be specified."


def test_host_and_port_select_remote_backend() -> None:
    tool = LanguageTool.new(host="http://localhost", port="8081", features=ALL_FEATURES)

    assert tool.feature == Feature.REMOTE_SERVER
    assert isinstance(tool.backend, LanguageToolRemote)
    assert tool.backend.base_url == "http://localhost:8081"
    asyncio.run(tool.aclose())


def test_bundled_selects_bundled_backend() -> None:
    tool = LanguageTool.new(bundled=True, features=ALL_FEATURES)

    assert tool.feature == Feature.BUNDLE_JAR
    assert isinstance(tool.backend, LanguageToolBundled)


def test_jar_location_selects_jar_backend(tmp_path) -> None:
    jar = tmp_path / "languagetool-server.jar"
    jar.touch()

    tool = LanguageTool.new(jar_location=str(jar), features=ALL_FEATURES)

    assert tool.feature == Feature.EXTERN_JAR
    assert isinstance(tool.backend, LanguageToolJar)
    assert tool.backend.classpath == jar


@pytest.mark.parametrize(
    ("bundled", "jar_location", "host", "port"),
    [
        (False, None, None, None),
        (True, "/opt/lt", None, None),
        (True, None, "http://localhost", "8081"),
        (False, "/opt/lt", "http://localhost", "8081"),
        (False, None, "http://localhost", None),
        (False, None, None, "8081"),
        (True, "/opt/lt", "http://localhost", "8081"),
    ],
)
def test_ambiguous_or_missing_selection_fails(bundled, jar_location, host, port) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        LanguageTool.new(bundled, jar_location, host, port, features=ALL_FEATURES)

    assert str(excinfo.value) == EXACTLY_ONE


@pytest.mark.parametrize(
    ("kwargs", "feature"),
    [
        ({"host": "http://localhost", "port": "8081"}, Feature.REMOTE_SERVER),
        ({"bundled": True}, Feature.BUNDLE_JAR),
        ({"jar_location": "/opt/lt"}, Feature.EXTERN_JAR),
    ],
)
def test_selection_without_feature_fails(kwargs, feature) -> None:
    others = ALL_FEATURES - {feature}

    with pytest.raises(ConfigurationError) as excinfo:
        LanguageTool.new(**kwargs, features=others)

    assert str(excinfo.value) == f"Feature '{feature.value}' is disabled."


def test_jar_location_without_any_jar_feature_fails() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        LanguageTool.new(jar_location="/opt/lt", features={Feature.REMOTE_SERVER})

    assert str(excinfo.value) == "Features 'bundle-jar' and 'extern-jar' are disabled."


def test_from_options_uses_same_selection() -> None:
    tool = LanguageTool.from_options(LanguageToolOptions(bundled=True), features={Feature.BUNDLE_JAR})

    assert tool.feature == Feature.BUNDLE_JAR
    with pytest.raises(ConfigurationError):
        LanguageTool.from_options(LanguageToolOptions(), features=ALL_FEATURES)


def test_calls_are_forwarded_verbatim() -> None:
    expected = [Suggestion(start=0, end=4, message="m", rule_id="R")]
    backend = RecordingBackend(respond=lambda language, text: expected)
    tool = LanguageTool(backend, Feature.REMOTE_SERVER)

    async def run() -> list[Suggestion]:
        async with tool:
            await tool.allow_words("de-DE", ["Typst"])
            await tool.disable_checks("de-DE", ["WHITESPACE_RULE", "COMMA_RULE"])
            return await tool.check_text("de-DE", "Ein Text.")

    result = asyncio.run(run())

    assert result is expected
    assert backend.calls == [
        ("allow_words", "de-DE", "Typst"),
        ("disable_checks", "de-DE", "WHITESPACE_RULE", "COMMA_RULE"),
        ("check_text", "de-DE", "Ein Text."),
    ]
    assert backend.closed
