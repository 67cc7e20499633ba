"""Import rewriting so examples compile against the project sources."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable, List

from ..filesystem import File

_ASSERT_IMPORT = re.compile(r"""^\s*import\s+(?:\*\s+as\s+)?assert\b|from\s+['"]assert['"]""", re.MULTILINE)


def rewrite_imports(source: str, project_name: str) -> str:
    """Point `from '<project>[/lib][/sub]'` imports at `../../src[/sub]`."""
    pattern = re.compile(
        r"from (?P<quote>['\"])" + re.escape(project_name) + r"(?:/lib)?(?:/(?P<path>[^'\"]*))?(?P=quote)"
    )

    def _replace(match: re.Match) -> str:
        quote = match.group("quote")
        sub_path = match.group("path")
        target = f"../../src/{sub_path}" if sub_path else "../../src"
        return f"from {quote}{target}{quote}"

    return pattern.sub(_replace, source)


def add_assert_import(source: str) -> str:
    if "assert." not in source or _ASSERT_IMPORT.search(source):
        return source
    return f"import * as assert from 'assert'\n{source}"


def prepare_examples(files: Iterable[File], project_name: str) -> List[File]:
    return [
        replace(file, content=add_assert_import(rewrite_imports(file.content, project_name)))
        for file in files
    ]


__all__ = ["add_assert_import", "prepare_examples", "rewrite_imports"]
