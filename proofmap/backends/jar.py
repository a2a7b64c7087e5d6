"""LanguageTool server started from a local jar, driven over HTTP."""

from __future__ import annotations

import asyncio
import socket
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from loguru import logger

from proofmap.backends.remote import LanguageToolRemote
from proofmap.diagnostics import Suggestion
from proofmap.errors import BackendError

SERVER_MAIN_CLASS: Final[str] = "org.languagetool.server.HTTPServer"
SERVER_JAR_NAME: Final[str] = "languagetool-server.jar"


class LanguageToolJar:
    """Local engine loaded from an explicit jar or unpacked LanguageTool directory.

    The server process starts on the first check and lives until `aclose`.
    """

    def __init__(
        self,
        jar_location: str | Path,
        *,
        java: str = "java",
        port: int | None = None,
        startup_timeout: float = 60.0,
    ) -> None:
        path = Path(jar_location).expanduser()
        if path.is_dir():
            path = path / SERVER_JAR_NAME
        self._classpath = path
        self._java = java
        self._port = port if port is not None else _free_port()
        self._startup_timeout = startup_timeout
        self._process: asyncio.subprocess.Process | None = None
        self._remote = LanguageToolRemote("http://127.0.0.1", self._port)

    @property
    def classpath(self) -> Path:
        return self._classpath

    @property
    def port(self) -> int:
        return self._port

    async def allow_words(self, language: str, words: Sequence[str]) -> None:
        await self._remote.allow_words(language, words)

    async def disable_checks(self, language: str, checks: Sequence[str]) -> None:
        await self._remote.disable_checks(language, checks)

    async def check_text(self, language: str, text: str) -> list[Suggestion]:
        await self._ensure_started()
        return await self._remote.check_text(language, text)

    async def aclose(self) -> None:
        await self._remote.aclose()
        await self._stop_process()

    async def _stop_process(self) -> None:
        process, self._process = self._process, None
        if process is None or process.returncode is not None:
            return
        process.terminate()
        try:
            await asyncio.wait_for(process.wait(), timeout=5.0)
        except TimeoutError:
            logger.warning(f"LanguageTool server on port {self._port} ignored terminate; killing it")
            process.kill()
            await process.wait()

    async def _ensure_started(self) -> None:
        if self._process is not None and self._process.returncode is None:
            return
        if not self._classpath.is_file():
            raise BackendError(f"LanguageTool jar not found at {self._classpath}")

        logger.info(f"Starting LanguageTool server from {self._classpath} on port {self._port}")
        try:
            self._process = await asyncio.create_subprocess_exec(
                self._java,
                "-cp",
                str(self._classpath),
                SERVER_MAIN_CLASS,
                "--port",
                str(self._port),
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as exc:
            raise BackendError(f"Cannot start {self._java!r}: {exc}") from exc
        await self._wait_until_ready()

    async def _wait_until_ready(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._startup_timeout
        while True:
            process = self._process
            if process is None or process.returncode is not None:
                code = None if process is None else process.returncode
                raise BackendError(f"LanguageTool server exited during startup (code {code})")
            if await self._remote.ping():
                logger.info(f"LanguageTool server ready on port {self._port}")
                return
            if loop.time() > deadline:
                await self._stop_process()
                raise BackendError(f"LanguageTool server did not start within {self._startup_timeout}s")
            await asyncio.sleep(0.25)


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
