"""Collects `@example` snippets from documented modules as scratch files."""

from __future__ import annotations

import os
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..filesystem import File
from ..models import Documentable, Module


def examples_dir(out_dir: str) -> str:
    return os.path.join(out_dir, "examples")


def harvest_examples(modules: Iterable[Module], out_dir: str) -> List[File]:
    """Return one overwrite-eligible file per example, for every module."""
    files: List[File] = []
    directory = examples_dir(out_dir)
    for module in modules:
        prefix = "-".join(module.path)
        for kind, doc in _documented(module):
            for index, example in enumerate(doc.examples):
                files.append(
                    File(
                        path=os.path.join(directory, f"{prefix}-{kind}-{doc.name}-{index}.ts"),
                        content=f"{example}\n",
                        overwrite=True,
                    )
                )
    return files


def _documented(module: Module) -> Iterator[Tuple[str, Documentable]]:
    yield "module", module.doc
    for cls in module.classes:
        yield "class", cls.doc
        yield from _members(f"{cls.doc.name}-method", (method.doc for method in cls.methods))
        yield from _members(f"{cls.doc.name}-staticmethod", (method.doc for method in cls.static_methods))
    yield from _members("interface", (interface.doc for interface in module.interfaces))
    yield from _members("typealias", (alias.doc for alias in module.type_aliases))
    yield from _members("constant", (constant.doc for constant in module.constants))
    yield from _members("function", (function.doc for function in module.functions))


def _members(kind: str, docs: Iterable[Documentable]) -> Iterator[Tuple[str, Documentable]]:
    for doc in docs:
        yield kind, doc


__all__ = ["examples_dir", "harvest_examples"]
