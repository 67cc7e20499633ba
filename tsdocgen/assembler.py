"""Builds `Module` records from source files, accumulating every error."""

from __future__ import annotations

from pathlib import PurePath
from typing import List, Optional, Sequence

from .config import Settings
from .extractors import Extractor, ParserContext, default_extractors, module_documentation, module_name
from .extractors.base import documentable
from .filesystem import File
from .logging import get_logger
from .models import Module, module_sort_key
from .syntax import AstProvider
from .tasks import settle_all
from .validation import Validation, combine

logger = get_logger("assembler")


def module_path(file_path: str) -> tuple:
    return tuple(PurePath(file_path).parts)


def parse_module(
    file: File,
    settings: Settings,
    provider: AstProvider,
    extractors: Optional[Sequence[Extractor]] = None,
) -> Validation[Module]:
    """Run module documentation and every extractor over one file."""
    path = module_path(file.path)
    context = ParserContext(path=path, settings=settings)
    source = provider.parse(file.path, file.content)
    extractors = extractors if extractors is not None else default_extractors()

    parts = {"info": module_documentation(source, context)}
    for extractor in extractors:
        parts[extractor.field] = extractor.extract(source, context)

    def _build(values: dict) -> Module:
        name = module_name(context)
        collections = {key: tuple(value) for key, value in values.items() if key != "info"}
        return Module(doc=documentable(name, values["info"]), path=path, **collections)

    return combine(**parts).map(_build)


async def parse_files(
    files: Sequence[File],
    settings: Settings,
    provider: AstProvider,
) -> Validation[List[Module]]:
    """Parse every file concurrently; errors from all files are merged.

    Deprecated modules are dropped and the rest are sorted by path.
    """

    async def _parse(file: File) -> Validation[Module]:
        logger.debug("Parsing %s", file.path)
        return parse_module(file, settings, provider)

    modules = await settle_all(_parse(file) for file in files)
    return modules.map(
        lambda parsed: sorted(
            (module for module in parsed if not module.doc.deprecated),
            key=module_sort_key,
        )
    )


__all__ = ["module_path", "parse_files", "parse_module"]
