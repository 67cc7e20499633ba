"""Exported interfaces."""

from __future__ import annotations

from typing import Tuple

from ..comments import Comment
from ..models import Interface
from ..policy import should_ignore
from ..syntax.base import InterfaceNode, SourceFile
from ..validation import Validation, collect
from .base import Extractor, ParserContext, comment_info, documentable, last_comment, sort_by_name, strip_import_types


class InterfaceExtractor(Extractor):
    """Interfaces keep their verbatim declaration text as signature."""

    field = "interfaces"

    def extract(self, source: SourceFile, context: ParserContext) -> Validation[Tuple[Interface, ...]]:
        results = []
        for node in source.interfaces:
            if not node.exported:
                continue
            comment = last_comment(node.jsdocs)
            if should_ignore(comment):
                continue
            results.append(self._interface(node, comment, context))
        return collect(results).map(sort_by_name)

    @staticmethod
    def _interface(node: InterfaceNode, comment: Comment, context: ParserContext) -> Validation[Interface]:
        return comment_info(node.name, comment, context).map(
            lambda info: Interface(doc=documentable(node.name, info), signature=strip_import_types(node.text))
        )
