"""Exported functions, including function-valued constants."""

from __future__ import annotations

import re
from typing import List, Tuple

from ..models import Function
from ..policy import should_ignore
from ..syntax.base import FunctionNode, SourceFile, VariableNode
from ..validation import Validation, collect
from .base import (
    Extractor,
    ParserContext,
    comment_info,
    documentable,
    last_comment,
    missing_name,
    overload_signatures,
    sort_by_name,
    strip_import_types,
)
from .constants import variable_signature

_EXPORT_FUNCTION = re.compile(r"^export (?:async )?function\b")


def declare_function(text: str) -> str:
    """`export function f(...)` -> `export declare function f(...)`."""
    return _EXPORT_FUNCTION.sub("export declare function", text, count=1)


class FunctionExtractor(Extractor):
    field = "functions"

    def extract(self, source: SourceFile, context: ParserContext) -> Validation[Tuple[Function, ...]]:
        results: List[Validation[Function]] = []
        for node in source.functions:
            if node.exported and not should_ignore(last_comment(node.jsdocs)):
                results.append(self._declaration(node, context))
        for variable in source.variables:
            if not (variable.exported and variable.has_initializer and variable.is_function):
                continue
            if not should_ignore(last_comment(variable.jsdocs)):
                results.append(self._variable(variable, context))
        return collect(results).map(sort_by_name)

    @staticmethod
    def _declaration(node: FunctionNode, context: ParserContext) -> Validation[Function]:
        name = node.name
        if name is None:
            return missing_name("function", context)
        signatures = tuple(
            strip_import_types(declare_function(text))
            for text in overload_signatures(node.overloads, node.implementation)
        )
        return comment_info(name, last_comment(node.jsdocs), context).map(
            lambda info: Function(doc=documentable(name, info), signatures=signatures)
        )

    @staticmethod
    def _variable(node: VariableNode, context: ParserContext) -> Validation[Function]:
        name = node.name
        if name is None:
            return missing_name("function", context)
        signature = variable_signature(name, node.type_text)
        return comment_info(name, last_comment(node.jsdocs), context).map(
            lambda info: Function(doc=documentable(name, info), signatures=(signature,))
        )
