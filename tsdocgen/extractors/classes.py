"""Exported classes with their methods and properties."""

from __future__ import annotations

from typing import Tuple

from ..models import Class, Method, Property
from ..policy import should_ignore
from ..syntax.base import ClassNode, MethodNode, PropertyNode, SourceFile
from ..validation import Validation, collect, combine
from .base import (
    Extractor,
    ParserContext,
    comment_info,
    documentable,
    last_comment,
    missing_name,
    overload_signatures,
    signature_before_body,
    sort_by_name,
    strip_import_types,
)


def class_signature(node: ClassNode) -> str:
    """`export declare class Name<A>`, plus the constructor when there is one."""
    type_parameters = f"<{', '.join(node.type_parameters)}>" if node.type_parameters else ""
    signature = f"export declare class {node.name}{type_parameters}"
    if node.constructors:
        signature += f" {{ {signature_before_body(node.constructors[0])} }}"
    return strip_import_types(signature)


class ClassExtractor(Extractor):
    field = "classes"

    def extract(self, source: SourceFile, context: ParserContext) -> Validation[Tuple[Class, ...]]:
        results = []
        for node in source.classes:
            if node.exported and not should_ignore(last_comment(node.jsdocs)):
                results.append(self._class(node, context))
        return collect(results).map(sort_by_name)

    def _class(self, node: ClassNode, context: ParserContext) -> Validation[Class]:
        name = node.name
        if name is None:
            return missing_name("class", context)
        checks = combine(
            info=comment_info(name, last_comment(node.jsdocs), context),
            methods=self._methods(node, context, static=False),
            static_methods=self._methods(node, context, static=True),
            properties=self._properties(name, node, context),
        )
        return checks.map(
            lambda values: Class(
                doc=documentable(name, values["info"]),
                signature=class_signature(node),
                methods=tuple(values["methods"]),
                static_methods=tuple(values["static_methods"]),
                properties=tuple(values["properties"]),
            )
        )

    def _methods(self, node: ClassNode, context: ParserContext, *, static: bool) -> Validation[list]:
        results = []
        for method in node.methods:
            if method.is_static != static or method.is_private:
                continue
            comment = last_comment(method.jsdocs)
            if should_ignore(comment):
                continue
            results.append(self._method(method, context))
        return collect(results)

    @staticmethod
    def _method(method: MethodNode, context: ParserContext) -> Validation[Method]:
        signatures = tuple(
            strip_import_types(text) for text in overload_signatures(method.overloads, method.implementation)
        )
        return comment_info(method.name, last_comment(method.jsdocs), context).map(
            lambda info: Method(doc=documentable(method.name, info), signatures=signatures)
        )

    def _properties(self, class_name: str, node: ClassNode, context: ParserContext) -> Validation[list]:
        results = []
        for prop in node.properties:
            if prop.is_static or prop.is_private:
                continue
            comment = last_comment(prop.jsdocs)
            if should_ignore(comment):
                continue
            results.append(self._property(class_name, prop, context))
        return collect(results)

    @staticmethod
    def _property(class_name: str, prop: PropertyNode, context: ParserContext) -> Validation[Property]:
        readonly = "readonly " if prop.is_readonly else ""
        signature = strip_import_types(f"{readonly}{prop.name}: {prop.type_text}")
        return comment_info(f"{class_name}#{prop.name}", last_comment(prop.jsdocs), context).map(
            lambda info: Property(doc=documentable(prop.name, info), signature=signature)
        )
