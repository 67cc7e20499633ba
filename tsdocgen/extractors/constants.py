"""Exported constants (variables whose initializer is not a function)."""

from __future__ import annotations

from typing import Tuple

from ..models import Constant
from ..policy import should_ignore
from ..syntax.base import SourceFile, VariableNode
from ..validation import Validation, collect
from .base import Extractor, ParserContext, comment_info, documentable, last_comment, missing_name, strip_import_types


def variable_signature(name: str, type_text: str) -> str:
    return strip_import_types(f"export declare const {name}: {type_text}")


class ConstantExtractor(Extractor):
    """Constants keep source order."""

    field = "constants"

    def extract(self, source: SourceFile, context: ParserContext) -> Validation[Tuple[Constant, ...]]:
        results = []
        for node in source.variables:
            if not node.exported or not node.has_initializer or node.is_function:
                continue
            comment = last_comment(node.jsdocs)
            if should_ignore(comment):
                continue
            results.append(self._constant(node, context))
        return collect(results).map(tuple)

    @staticmethod
    def _constant(node: VariableNode, context: ParserContext) -> Validation[Constant]:
        name = node.name
        if name is None:
            return missing_name("constant", context)
        return comment_info(name, last_comment(node.jsdocs), context).map(
            lambda info: Constant(doc=documentable(name, info), signature=variable_signature(name, node.type_text))
        )
