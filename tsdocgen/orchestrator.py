"""Pipeline orchestration for the build and check flows."""

from __future__ import annotations

import asyncio
import os
from dataclasses import replace
from pathlib import Path
from typing import List

from .assembler import parse_files
from .config import Settings, load_package_info, load_settings
from .examples import ExampleRunner, harvest_examples, prepare_examples
from .filesystem import File, FileSystem, write_files
from .logging import get_logger
from .models import Module
from .site import config_file, home_page, module_pages, modules_index, stale_pages_pattern
from .syntax import AstProvider, TreeSitterProvider
from .tasks import gather_fail_fast


class Orchestrator:
    """Runs the documentation stages in order; the first failing stage ends the run.

    Stages: read sources, parse and validate, type-check examples, render, write.
    Each stage raises a `DocsError` subclass on failure.
    """

    def __init__(
        self,
        file_system: FileSystem | None = None,
        provider: AstProvider | None = None,
        example_runner: ExampleRunner | None = None,
    ) -> None:
        self.file_system = file_system or FileSystem()
        self.provider = provider
        self.example_runner = example_runner or ExampleRunner(self.file_system)
        self.logger = get_logger("orchestrator")

    async def build(self, path: str = ".") -> List[Module]:
        """Generate the documentation site for the project rooted at `path`."""
        root = Path(path).resolve()
        settings = await self.load_settings(root)
        modules = await self._verified_modules(root, settings)

        self.logger.info("Creating markdown files...")
        outputs = await self._outputs(modules, settings)

        self.logger.info("Writing markdown files...")
        await self.file_system.remove(stale_pages_pattern(settings.out_dir))
        await write_files(outputs, self.file_system, self.logger)

        self.logger.info("Docs generation succeeded!")
        return modules

    async def check(self, path: str = ".") -> List[Module]:
        """Validate documentation and examples without writing the site."""
        root = Path(path).resolve()
        settings = await self.load_settings(root)
        modules = await self._verified_modules(root, settings)
        self.logger.info("Documentation check succeeded!")
        return modules

    async def load_settings(self, root: Path) -> Settings:
        loop = asyncio.get_running_loop()
        package = await loop.run_in_executor(None, load_package_info, root)
        settings = await loop.run_in_executor(None, load_settings, root, package)
        self.logger.debug("Using settings %s", settings)
        return replace(
            settings,
            src_dir=str(root / settings.src_dir),
            out_dir=str(root / settings.out_dir),
        )

    async def _verified_modules(self, root: Path, settings: Settings) -> List[Module]:
        files = await self._read_sources(root, settings)

        self.logger.info("Parsing files...")
        provider = self.provider or TreeSitterProvider(settings.parse_compiler_options)
        modules = (await parse_files(files, settings, provider)).unwrap()
        self.logger.debug("Parsed %d modules", len(modules))

        self.logger.info("Type checking examples...")
        examples = prepare_examples(harvest_examples(modules, settings.out_dir), settings.project_name)
        await self.example_runner.run(examples, settings)
        return modules

    async def _read_sources(self, root: Path, settings: Settings) -> List[File]:
        self.logger.info("Reading sources...")
        pattern = os.path.join(settings.src_dir, "**", "*.ts")
        paths = await self.file_system.search(pattern, settings.exclude)
        self.logger.debug("Found %d source files under %s", len(paths), settings.src_dir)

        async def _read(path: str) -> File:
            content = await self.file_system.read_file(path)
            return File(path=os.path.relpath(path, root), content=content)

        return await gather_fail_fast(_read(path) for path in paths)

    async def _outputs(self, modules: List[Module], settings: Settings) -> List[File]:
        out_dir = settings.out_dir
        return [
            home_page(out_dir),
            modules_index(out_dir),
            await config_file(settings, self.file_system),
            *module_pages(modules, out_dir),
        ]


__all__ = ["Orchestrator"]
