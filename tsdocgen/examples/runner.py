"""Type-checks harvested examples with an external TypeScript runner."""

from __future__ import annotations

import asyncio
import json
import os
import platform
import subprocess
from typing import Callable, Mapping, Optional, Sequence

from ..config import Settings
from ..errors import ExampleVerificationError, ResourceError
from ..filesystem import File, FileSystem, write_files
from ..logging import get_logger
from .harvester import examples_dir

Spawn = Callable[[str, str, Mapping[str, str]], None]


def default_command() -> str:
    return "ts-node.cmd" if platform.system() == "Windows" else "ts-node"


def spawn(command: str, executable: str, env: Mapping[str, str]) -> None:
    """Run `command executable`; raise `ExampleVerificationError` with stderr on a non-zero exit."""
    try:
        completed = subprocess.run(
            [command, executable],
            capture_output=True,
            text=True,
            env={**os.environ, **env},
        )
    except FileNotFoundError as exc:
        raise ExampleVerificationError(
            f"Type-check executable '{command}' not found. Install ts-node or adjust PATH."
        ) from exc
    if completed.returncode != 0:
        raise ExampleVerificationError(completed.stderr)


class ExampleRunner:
    """Writes examples into `<out_dir>/examples`, type-checks them, then cleans up."""

    def __init__(
        self,
        file_system: FileSystem | None = None,
        *,
        command: Optional[str] = None,
        spawn_fn: Optional[Spawn] = None,
    ) -> None:
        self.file_system = file_system or FileSystem()
        self.command = command or default_command()
        self._spawn = spawn_fn or spawn
        self.logger = get_logger("examples")

    async def run(self, examples: Sequence[File], settings: Settings) -> None:
        directory = examples_dir(settings.out_dir)
        if not examples:
            self.logger.debug("No examples found, removing %s", directory)
            await self.file_system.remove(directory)
            return

        try:
            await write_files(examples, self.file_system, self.logger)
            index = os.path.join(directory, "index.ts")
            tsconfig = os.path.join(directory, "tsconfig.json")
            await write_files(
                [
                    File(index, aggregator_source(examples), overwrite=True),
                    File(tsconfig, compiler_config(settings.examples_compiler_options), overwrite=True),
                ],
                self.file_system,
                self.logger,
            )
            self.logger.info("Type checking %d examples...", len(examples))
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(
                None,
                self._spawn,
                self.command,
                os.path.abspath(index),
                {"TS_NODE_PROJECT": os.path.abspath(tsconfig)},
            )
        except BaseException:
            try:
                await self.file_system.remove(directory)
            except ResourceError as cleanup:
                self.logger.warning("Unable to remove %s: %s", directory, cleanup)
            raise
        await self.file_system.remove(directory)


def aggregator_source(examples: Sequence[File]) -> str:
    """An `index.ts` importing every example so the checker visits all of them."""
    imports = "".join(f"import './{os.path.basename(example.path)}'\n" for example in examples)
    return imports + "\n"


def compiler_config(options: Mapping[str, object]) -> str:
    return json.dumps({"compilerOptions": dict(options)}, indent=2) + "\n"


__all__ = ["ExampleRunner", "aggregator_source", "compiler_config", "default_command", "spawn"]
