"""Tree-sitter powered TypeScript declaration provider."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from ..logging import get_logger
from .base import (
    CallSignature,
    ClassNode,
    ExportSpecifierNode,
    FunctionNode,
    InterfaceNode,
    MethodNode,
    PropertyNode,
    SourceFile,
    TypeAliasNode,
    VariableNode,
)
from .types import FUNCTION_VALUES, UNKNOWN, annotation_text, function_type, infer_type, unwrap_parentheses

_LANGUAGES = {
    "typescript": Language(tree_sitter_typescript.language_typescript()),
    "tsx": Language(tree_sitter_typescript.language_tsx()),
}

_FUNCTION_DECLARATIONS = {"function_declaration", "generator_function_declaration"}
_CLASS_DECLARATIONS = {"class_declaration", "abstract_class_declaration"}
_VARIABLE_DECLARATIONS = {"lexical_declaration", "variable_declaration"}
_METHOD_MEMBERS = {"method_definition", "method_signature", "abstract_method_signature"}

# (form, is implementation, exported)
_FunctionForm = Tuple[CallSignature, bool, bool]
# (form, is implementation, static, private)
_MethodForm = Tuple[CallSignature, bool, bool, bool]


class TreeSitterProvider:
    """Parses TypeScript sources into declaration records."""

    def __init__(self, compiler_options: Optional[Mapping[str, Any]] = None) -> None:
        # The grammar does not depend on compiler options; they are kept for diagnostics.
        self.compiler_options = dict(compiler_options or {})
        self._parsers: Dict[str, Parser] = {}
        self.logger = get_logger("syntax")

    def parse(self, path: str, content: str) -> SourceFile:
        source = content.encode("utf-8")
        tree = self._get_parser(self._language_for(path)).parse(source)
        if tree.root_node.has_error:
            self.logger.debug("Syntax errors in %s, keeping recoverable declarations", path)
        return _SourceFileBuilder(path, source).build(tree.root_node)

    @staticmethod
    def _language_for(path: str) -> str:
        return "tsx" if path.endswith(".tsx") else "typescript"

    def _get_parser(self, language_key: str) -> Parser:
        parser = self._parsers.get(language_key)
        if parser is None:
            parser = Parser(_LANGUAGES[language_key])
            self._parsers[language_key] = parser
        return parser


class _SourceFileBuilder:
    """Walks the top-level statements of one syntax tree."""

    def __init__(self, path: str, source: bytes) -> None:
        self.path = path
        self.source = source
        self.leading_comments: Tuple[str, ...] = ()
        self.interfaces: List[InterfaceNode] = []
        self.type_aliases: List[TypeAliasNode] = []
        self.variables: List[VariableNode] = []
        self.classes: List[ClassNode] = []
        self._function_forms: List[_FunctionForm] = []
        self._specifiers: List[Tuple[str, str, Tuple[str, ...]]] = []
        self._locals: Dict[str, str] = {}

    def build(self, root: Node) -> SourceFile:
        pending: List[Node] = []
        seen_statement = False
        for child in root.children:
            if child.type == "comment":
                pending.append(child)
                continue
            if child.type == "hash_bang_line":
                continue
            if not seen_statement:
                self.leading_comments = tuple(self._text(comment) for comment in pending)
                seen_statement = True
            jsdocs = self._jsdocs(pending)
            pending = []
            self._statement(child, jsdocs)

        return SourceFile(
            path=self.path,
            leading_comments=self.leading_comments,
            interfaces=tuple(self.interfaces),
            functions=tuple(self._group_functions()),
            type_aliases=tuple(self.type_aliases),
            variables=tuple(self.variables),
            classes=tuple(self.classes),
            exports=tuple(
                ExportSpecifierNode(
                    name=name,
                    local=local,
                    type_text=self._locals.get(local, UNKNOWN),
                    leading_comments=comments,
                )
                for name, local, comments in self._specifiers
            ),
        )

    # statements -----------------------------------------------------------

    def _statement(self, node: Node, jsdocs: Tuple[str, ...]) -> None:
        if node.type == "export_statement":
            self._export_statement(node, jsdocs)
        elif node.type == "ambient_declaration":
            inner = self._ambient_inner(node)
            if inner is not None:
                self._declaration(inner, node, exported=False, jsdocs=jsdocs)
        else:
            self._declaration(node, node, exported=False, jsdocs=jsdocs)

    def _export_statement(self, node: Node, jsdocs: Tuple[str, ...]) -> None:
        declaration = node.child_by_field_name("declaration")
        if declaration is not None:
            if declaration.type == "ambient_declaration":
                declaration = self._ambient_inner(declaration)
            if declaration is not None:
                self._declaration(declaration, node, exported=True, jsdocs=jsdocs)
            return

        value = node.child_by_field_name("value")
        if value is not None:
            if value.type in FUNCTION_VALUES:
                self._function(value, node, exported=True, jsdocs=jsdocs)
            elif value.type == "class":
                self._class(value, exported=True, jsdocs=jsdocs)
            return

        for child in node.children:
            if child.type == "export_clause":
                self._export_clause(child)

    def _export_clause(self, clause: Node) -> None:
        pending: List[Node] = []
        for child in clause.children:
            if child.type == "comment":
                pending.append(child)
                continue
            if child.type == "export_specifier":
                name_node = child.child_by_field_name("name")
                alias_node = child.child_by_field_name("alias")
                if name_node is not None:
                    local = self._text(name_node)
                    name = self._text(alias_node) if alias_node is not None else local
                    comments = tuple(self._text(comment) for comment in pending)
                    self._specifiers.append((name, local, comments))
            pending = []

    def _declaration(self, node: Node, outer: Node, *, exported: bool, jsdocs: Tuple[str, ...]) -> None:
        kind = node.type
        if kind == "interface_declaration":
            name = self._name(node) or ""
            self.interfaces.append(
                InterfaceNode(name=name, text=self._text(outer), exported=exported, jsdocs=jsdocs)
            )
            self._locals.setdefault(name, name)
        elif kind == "type_alias_declaration":
            name = self._name(node) or ""
            self.type_aliases.append(
                TypeAliasNode(name=name, text=self._text(outer), exported=exported, jsdocs=jsdocs)
            )
            self._locals.setdefault(name, name)
        elif kind in _FUNCTION_DECLARATIONS or kind == "function_signature":
            self._function(node, outer, exported=exported, jsdocs=jsdocs)
        elif kind in _CLASS_DECLARATIONS:
            self._class(node, exported=exported, jsdocs=jsdocs)
        elif kind in _VARIABLE_DECLARATIONS:
            self._variables(node, exported=exported, jsdocs=jsdocs)

    def _function(self, node: Node, outer: Node, *, exported: bool, jsdocs: Tuple[str, ...]) -> None:
        body = node.child_by_field_name("body")
        name = self._name(node)
        form = CallSignature(
            name=name,
            text=self._text(outer),
            start=self._offset(outer.start_byte),
            body_start=self._offset(body.start_byte) if body is not None else None,
            jsdocs=jsdocs,
        )
        self._function_forms.append((form, body is not None, exported))
        if name:
            self._locals.setdefault(name, function_type(node, self._text))

    def _variables(self, node: Node, *, exported: bool, jsdocs: Tuple[str, ...]) -> None:
        is_const = bool(node.children) and node.children[0].type == "const"
        for declarator in node.named_children:
            if declarator.type != "variable_declarator":
                continue
            name_node = declarator.child_by_field_name("name")
            name = self._text(name_node) if name_node is not None and name_node.type == "identifier" else None
            annotation = declarator.child_by_field_name("type")
            value = declarator.child_by_field_name("value")
            if annotation is not None:
                type_text = annotation_text(annotation, self._text)
            elif value is not None:
                type_text = infer_type(value, self._text, self._locals, const=is_const)
            else:
                type_text = UNKNOWN
            self.variables.append(
                VariableNode(
                    name=name,
                    type_text=type_text,
                    has_initializer=value is not None,
                    is_function=value is not None and unwrap_parentheses(value).type in FUNCTION_VALUES,
                    exported=exported,
                    jsdocs=jsdocs,
                )
            )
            if name:
                self._locals[name] = type_text

    # classes --------------------------------------------------------------

    def _class(self, node: Node, *, exported: bool, jsdocs: Tuple[str, ...]) -> None:
        name = self._name(node)
        type_parameters: Tuple[str, ...] = ()
        parameters_node = node.child_by_field_name("type_parameters")
        if parameters_node is not None:
            type_parameters = tuple(
                self._text(parameter.child_by_field_name("name"))
                for parameter in parameters_node.named_children
                if parameter.type == "type_parameter" and parameter.child_by_field_name("name") is not None
            )

        constructors: List[CallSignature] = []
        method_forms: List[_MethodForm] = []
        properties: List[PropertyNode] = []
        body = node.child_by_field_name("body")
        pending: List[Node] = []
        for member in body.children if body is not None else []:
            if member.type == "comment":
                pending.append(member)
                continue
            if member.type == "decorator":
                continue
            member_jsdocs = self._jsdocs(pending)
            pending = []
            if member.type in _METHOD_MEMBERS:
                name_node = member.child_by_field_name("name")
                if name_node is None:
                    continue
                member_name = self._text(name_node)
                is_static, is_private, _, accessor = self._modifiers(member, name_node)
                member_body = member.child_by_field_name("body")
                form = CallSignature(
                    name=member_name,
                    text=self._text(member),
                    start=self._offset(member.start_byte),
                    body_start=self._offset(member_body.start_byte) if member_body is not None else None,
                    jsdocs=member_jsdocs,
                )
                if member_name == "constructor":
                    constructors.append(form)
                elif accessor is None:
                    is_implementation = member.type != "method_signature"
                    method_forms.append((form, is_implementation, is_static, is_private))
            elif member.type == "public_field_definition":
                field = self._property(member, member_jsdocs)
                if field is not None:
                    properties.append(field)

        self.classes.append(
            ClassNode(
                name=name,
                type_parameters=type_parameters,
                constructors=tuple(constructors),
                methods=tuple(_group_methods(method_forms)),
                properties=tuple(properties),
                exported=exported,
                jsdocs=jsdocs,
            )
        )
        if name:
            self._locals.setdefault(name, f"typeof {name}")

    def _property(self, member: Node, jsdocs: Tuple[str, ...]) -> Optional[PropertyNode]:
        name_node = member.child_by_field_name("name")
        if name_node is None:
            return None
        is_static, is_private, is_readonly, _ = self._modifiers(member, name_node)
        annotation = member.child_by_field_name("type")
        value = member.child_by_field_name("value")
        if annotation is not None:
            type_text = annotation_text(annotation, self._text)
        elif value is not None:
            type_text = infer_type(value, self._text, self._locals, const=is_readonly)
        else:
            type_text = UNKNOWN
        return PropertyNode(
            name=self._text(name_node),
            type_text=type_text,
            is_static=is_static,
            is_private=is_private,
            is_readonly=is_readonly,
            jsdocs=jsdocs,
        )

    def _modifiers(self, member: Node, name_node: Node) -> Tuple[bool, bool, bool, Optional[str]]:
        is_static = is_readonly = False
        is_private = name_node.type == "private_property_identifier"
        accessor: Optional[str] = None
        for child in member.children:
            if child.start_byte >= name_node.start_byte:
                break
            if child.type == "accessibility_modifier":
                is_private = is_private or self._text(child) == "private"
            elif child.type == "static":
                is_static = True
            elif child.type == "readonly":
                is_readonly = True
            elif child.type in ("get", "set"):
                accessor = child.type
        return is_static, is_private, is_readonly, accessor

    # helpers --------------------------------------------------------------

    def _group_functions(self) -> List[FunctionNode]:
        functions: List[FunctionNode] = []
        pending: List[CallSignature] = []
        pending_exported = False
        for form, is_implementation, exported in self._function_forms:
            if pending and pending[0].name != form.name:
                functions.append(FunctionNode(pending[-1], tuple(pending[:-1]), pending_exported))
                pending = []
            if is_implementation:
                functions.append(FunctionNode(form, tuple(pending), exported))
                pending = []
                continue
            if not pending:
                pending_exported = exported
            pending.append(form)
        if pending:
            functions.append(FunctionNode(pending[-1], tuple(pending[:-1]), pending_exported))
        return functions

    @staticmethod
    def _ambient_inner(node: Node) -> Optional[Node]:
        for child in node.named_children:
            if child.type != "comment":
                return child
        return None

    def _name(self, node: Node) -> Optional[str]:
        name_node = node.child_by_field_name("name")
        return self._text(name_node) if name_node is not None else None

    def _jsdocs(self, comments: List[Node]) -> Tuple[str, ...]:
        texts = (self._text(comment) for comment in comments)
        return tuple(text for text in texts if text.startswith("/**"))

    def _text(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def _offset(self, byte_offset: int) -> int:
        return len(self.source[:byte_offset].decode("utf-8"))


def _group_methods(forms: List[_MethodForm]) -> List[MethodNode]:
    methods: List[MethodNode] = []
    pending: List[CallSignature] = []

    def _key(form: CallSignature, is_static: bool) -> Tuple[Optional[str], bool]:
        return form.name, is_static

    pending_key: Tuple[Optional[str], bool] = (None, False)
    pending_private = False
    for form, is_implementation, is_static, is_private in forms:
        if pending and pending_key != _key(form, is_static):
            methods.append(_method(pending[-1], pending[:-1], pending_key[1], pending_private))
            pending = []
        if is_implementation:
            methods.append(_method(form, pending, is_static, is_private))
            pending = []
            continue
        if not pending:
            pending_key = _key(form, is_static)
            pending_private = is_private
        pending.append(form)
    if pending:
        methods.append(_method(pending[-1], pending[:-1], pending_key[1], pending_private))
    return methods


def _method(
    implementation: CallSignature, overloads: List[CallSignature], is_static: bool, is_private: bool
) -> MethodNode:
    return MethodNode(
        name=implementation.name or "",
        implementation=implementation,
        overloads=tuple(overloads),
        is_static=is_static,
        is_private=is_private,
    )


__all__ = ["TreeSitterProvider"]
