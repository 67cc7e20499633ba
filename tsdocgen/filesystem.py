"""Asynchronous filesystem adapter.

Blocking calls run in the default executor so the event loop stays free while
many files are read or written.
"""

from __future__ import annotations

import asyncio
import glob
import logging
import os
import shutil
from dataclasses import dataclass
from fnmatch import fnmatchcase
from functools import partial
from pathlib import Path
from typing import Any, Callable, Iterable, List, Sequence

from .errors import ResourceError
from .logging import get_logger
from .tasks import gather_fail_fast


@dataclass(frozen=True)
class File:
    """A file to read from or write to disk."""

    path: str
    content: str
    overwrite: bool = False


class FileSystem:
    """Async wrappers over the local filesystem; failures become `ResourceError`."""

    async def read_file(self, path: str) -> str:
        try:
            return await self._run(Path(path).read_text, encoding="utf-8")
        except OSError as exc:
            raise ResourceError(path, f"Unable to read {path}: {exc}") from exc

    async def write_file(self, path: str, content: str) -> None:
        def _write() -> None:
            target = Path(path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")

        try:
            await self._run(_write)
        except OSError as exc:
            raise ResourceError(path, f"Unable to write {path}: {exc}") from exc

    async def exists(self, path: str) -> bool:
        return await self._run(os.path.exists, path)

    async def remove(self, pattern: str) -> None:
        """Remove files or directory trees matching `pattern`; nothing matching is fine."""

        def _remove() -> None:
            for match in glob.glob(pattern, recursive=True):
                if os.path.isdir(match) and not os.path.islink(match):
                    shutil.rmtree(match)
                else:
                    os.remove(match)

        try:
            await self._run(_remove)
        except OSError as exc:
            raise ResourceError(pattern, f"Unable to remove {pattern}: {exc}") from exc

    async def search(self, pattern: str, exclude: Sequence[str] = ()) -> List[str]:
        """Return sorted paths matching the glob `pattern`, minus `exclude` globs."""

        def _search() -> List[str]:
            matches = glob.glob(pattern, recursive=True)
            return sorted(
                path
                for path in matches
                if os.path.isfile(path) and not _is_excluded(path, exclude)
            )

        return await self._run(_search)

    @staticmethod
    async def _run(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(fn, *args, **kwargs))


def _is_excluded(path: str, exclude: Iterable[str]) -> bool:
    normalised = Path(path).as_posix()
    for pattern in exclude:
        candidate = pattern.rstrip("/")
        if fnmatchcase(normalised, candidate) or fnmatchcase(normalised, f"{candidate}/*"):
            return True
        if fnmatchcase(normalised, f"*/{candidate}") or fnmatchcase(normalised, f"*/{candidate}/*"):
            return True
    return False


async def write_files(files: Iterable[File], file_system: FileSystem, logger: logging.Logger | None = None) -> None:
    """Write every file, honouring `File.overwrite`; stops at the first failure."""
    log = logger or get_logger("filesystem")

    async def _write(file: File) -> None:
        if await file_system.exists(file.path):
            if not file.overwrite:
                log.info("File %s already exists, skipping creation", file.path)
                return
            log.info("Overwriting file %s", file.path)
        await file_system.write_file(file.path, file.content)

    await gather_fail_fast(_write(file) for file in files)


__all__ = ["File", "FileSystem", "write_files"]
