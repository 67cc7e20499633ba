"""Table-of-contents generation for rendered module pages."""

from __future__ import annotations

import re
from typing import Dict, List, Tuple


class TableOfContentsBuilder:
    """Builds a nested bullet list of the headings (levels one to three) of a page."""

    max_level = 3

    def build(self, markdown: str) -> str:
        headings = self._headings(markdown)
        if not headings:
            return ""
        seen: Dict[str, int] = {}
        lines: List[str] = []
        top = min(level for level, _ in headings)
        for level, title in headings:
            anchor = self._unique(self._slugify(title), seen)
            indent = "  " * (level - top)
            lines.append(f"{indent}- [{title}](#{anchor})")
        return "\n".join(lines)

    def _headings(self, markdown: str) -> List[Tuple[int, str]]:
        headings: List[Tuple[int, str]] = []
        in_code = False
        for line in markdown.splitlines():
            stripped = line.strip()
            if stripped.startswith("```"):
                in_code = not in_code
                continue
            if in_code:
                continue
            match = re.match(r"^(#{1,6})\s+(.*)$", stripped)
            if match and len(match.group(1)) <= self.max_level:
                headings.append((len(match.group(1)), match.group(2).strip()))
        return headings

    @staticmethod
    def _unique(anchor: str, seen: Dict[str, int]) -> str:
        count = seen.get(anchor, 0)
        seen[anchor] = count + 1
        return anchor if count == 0 else f"{anchor}-{count}"

    @staticmethod
    def _slugify(title: str) -> str:
        slug = title.strip().lower()
        slug = re.sub(r"[^\w\s-]", "", slug)
        return re.sub(r"\s", "-", slug)


__all__ = ["TableOfContentsBuilder"]
