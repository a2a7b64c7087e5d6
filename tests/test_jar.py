import asyncio

import pytest

from proofmap.backends.jar import SERVER_JAR_NAME, LanguageToolJar
from proofmap.errors import BackendError


def test_directory_location_resolves_server_jar(tmp_path) -> None:
    backend = LanguageToolJar(tmp_path, port=18081)

    assert backend.classpath == tmp_path / SERVER_JAR_NAME
    assert backend.port == 18081


def test_free_port_is_picked_when_not_given(tmp_path) -> None:
    backend = LanguageToolJar(tmp_path / "languagetool.jar")

    assert 0 < backend.port < 65536


def test_missing_jar_fails_on_first_check(tmp_path) -> None:
    backend = LanguageToolJar(tmp_path / "missing.jar")

    with pytest.raises(BackendError, match="not found"):
        asyncio.run(backend.check_text("en-US", "Text."))


def test_missing_java_executable_fails_on_first_check(tmp_path) -> None:
    jar = tmp_path / SERVER_JAR_NAME
    jar.touch()
    backend = LanguageToolJar(jar, java=str(tmp_path / "no-such-java"))

    with pytest.raises(BackendError, match="Cannot start"):
        asyncio.run(backend.check_text("en-US", "Text."))


def test_settings_do_not_start_server(tmp_path) -> None:
    backend = LanguageToolJar(tmp_path / "missing.jar")

    async def run() -> None:
        await backend.allow_words("en-US", ["Typst"])
        await backend.disable_checks("en-US", ["WHITESPACE_RULE"])
        await backend.aclose()

    asyncio.run(run())


def test_startup_timeout_can_be_retried(tmp_path) -> None:
    jar = tmp_path / SERVER_JAR_NAME
    jar.touch()
    java = tmp_path / "java"
    java.write_text("#!/bin/sh\nexec sleep 30\n")
    java.chmod(0o755)
    backend = LanguageToolJar(jar, java=str(java), startup_timeout=0.3)

    async def run() -> list[str]:
        messages = []
        try:
            for _ in range(2):
                with pytest.raises(BackendError) as excinfo:
                    await backend.check_text("en-US", "Text.")
                messages.append(str(excinfo.value))
        finally:
            await backend.aclose()
        return messages

    assert asyncio.run(run()) == ["LanguageTool server did not start within 0.3s"] * 2
