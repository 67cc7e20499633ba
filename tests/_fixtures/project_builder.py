"""Helpers for writing throwaway TypeScript projects and parsing snippets in tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Mapping

from tsdocgen.config import Settings
from tsdocgen.extractors import ParserContext
from tsdocgen.syntax import SourceFile, TreeSitterProvider


def dedent(source: str) -> str:
    return textwrap.dedent(source).lstrip("\n")


def parse_source(source: str, path: str = "test.ts") -> SourceFile:
    """Parse a dedented TypeScript snippet with the tree-sitter provider."""
    return TreeSitterProvider().parse(path, dedent(source))


def make_context(**overrides: object) -> ParserContext:
    """Context for a module at path `test`, as used in error messages."""
    return ParserContext(path=("test",), settings=Settings(**overrides))


class ProjectBuilder:
    """Writes package.json and sources into a temporary project directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def package(self, name: str = "demo", homepage: str = "https://github.com/acme/demo") -> None:
        self.write({"package.json": json.dumps({"name": name, "homepage": homepage})})

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dedent(content), encoding="utf-8")

    def path(self) -> Path:
        return self.root


__all__ = ["ProjectBuilder", "dedent", "make_context", "parse_source"]
