"""JSDoc comment parsing."""

from __future__ import annotations

import re
import textwrap
from dataclasses import dataclass, field
from typing import Dict, List, Optional

_LINE_PREFIX = re.compile(r"^[ \t]*\* ?")
_TAG_LINE = re.compile(r"^@([A-Za-z][\w-]*)(?:\s+(.*))?$")
_VERBATIM_TAGS = {"example"}


@dataclass
class Comment:
    """Free-text description plus tag name -> values (None for an empty tag)."""

    description: Optional[str] = None
    tags: Dict[str, List[Optional[str]]] = field(default_factory=dict)

    def has_tag(self, name: str) -> bool:
        return name in self.tags

    def first(self, name: str) -> Optional[str]:
        values = self.tags.get(name)
        return values[0] if values else None


def parse_comment(text: str) -> Comment:
    """Parse a raw `/** ... */` (or `//`) comment into description and tags."""
    description_lines: List[str] = []
    tags: Dict[str, List[Optional[str]]] = {}
    current_tag: Optional[str] = None
    current_lines: List[str] = []

    def _flush() -> None:
        if current_tag is None:
            return
        tags.setdefault(current_tag, []).append(_tag_value(current_tag, current_lines))

    for line in _unwrap(text):
        match = _TAG_LINE.match(line.strip())
        if match:
            _flush()
            current_tag = match.group(1)
            first = match.group(2) or ""
            current_lines = [first] if first.strip() else []
            continue
        if current_tag is None:
            description_lines.append(line)
        else:
            current_lines.append(line)
    _flush()

    description = "\n".join(description_lines).strip()
    return Comment(description=description or None, tags=tags)


def _unwrap(text: str) -> List[str]:
    body = text.strip()
    if body.startswith("//"):
        return [re.sub(r"^\s*//+ ?", "", line) for line in body.splitlines()]
    if body.startswith("/**"):
        body = body[3:]
    elif body.startswith("/*"):
        body = body[2:]
    if body.endswith("*/"):
        body = body[:-2]
    return [_LINE_PREFIX.sub("", line, count=1) for line in body.splitlines()]


def _tag_value(tag: str, lines: List[str]) -> Optional[str]:
    if tag in _VERBATIM_TAGS:
        while lines and not lines[0].strip():
            lines = lines[1:]
        while lines and not lines[-1].strip():
            lines = lines[:-1]
        value = textwrap.dedent("\n".join(line.rstrip() for line in lines))
    else:
        value = "\n".join(lines).strip()
    return value or None


__all__ = ["Comment", "parse_comment"]
