"""Declaration records produced by an AST provider.

Offsets are character offsets into the source text. `text` of an exported
declaration starts at its `export` keyword.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple


@dataclass(frozen=True)
class CallSignature:
    """One function-like form: an overload signature or an implementation."""

    name: Optional[str]
    text: str
    start: int
    body_start: Optional[int] = None
    jsdocs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FunctionNode:
    """Top-level function with its overload signatures in declaration order."""

    implementation: CallSignature
    overloads: Tuple[CallSignature, ...] = ()
    exported: bool = False

    @property
    def name(self) -> Optional[str]:
        return self.implementation.name

    @property
    def jsdocs(self) -> Tuple[str, ...]:
        if self.overloads:
            return self.overloads[0].jsdocs
        return self.implementation.jsdocs


@dataclass(frozen=True)
class InterfaceNode:
    name: str
    text: str
    exported: bool = False
    jsdocs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TypeAliasNode:
    name: str
    text: str
    exported: bool = False
    jsdocs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class VariableNode:
    """One declarator of a top-level `const`/`let`/`var` statement."""

    name: Optional[str]
    type_text: str
    has_initializer: bool
    is_function: bool = False
    exported: bool = False
    jsdocs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MethodNode:
    name: str
    implementation: CallSignature
    overloads: Tuple[CallSignature, ...] = ()
    is_static: bool = False
    is_private: bool = False

    @property
    def jsdocs(self) -> Tuple[str, ...]:
        if self.overloads:
            return self.overloads[0].jsdocs
        return self.implementation.jsdocs


@dataclass(frozen=True)
class PropertyNode:
    name: str
    type_text: str
    is_static: bool = False
    is_private: bool = False
    is_readonly: bool = False
    jsdocs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ClassNode:
    name: Optional[str]
    type_parameters: Tuple[str, ...] = ()
    constructors: Tuple[CallSignature, ...] = ()
    methods: Tuple[MethodNode, ...] = ()
    properties: Tuple[PropertyNode, ...] = ()
    exported: bool = False
    jsdocs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ExportSpecifierNode:
    """`export { local as name }`; `leading_comments` only holds comments directly before it."""

    name: str
    local: str
    type_text: str
    leading_comments: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SourceFile:
    """Declarations of one file, in source order."""

    path: str
    leading_comments: Tuple[str, ...] = ()
    interfaces: Tuple[InterfaceNode, ...] = ()
    functions: Tuple[FunctionNode, ...] = ()
    type_aliases: Tuple[TypeAliasNode, ...] = ()
    variables: Tuple[VariableNode, ...] = ()
    classes: Tuple[ClassNode, ...] = ()
    exports: Tuple[ExportSpecifierNode, ...] = ()


class AstProvider(Protocol):
    """Parses source text into a `SourceFile`."""

    def parse(self, path: str, content: str) -> SourceFile:
        ...


__all__ = [
    "AstProvider",
    "CallSignature",
    "ClassNode",
    "ExportSpecifierNode",
    "FunctionNode",
    "InterfaceNode",
    "MethodNode",
    "PropertyNode",
    "SourceFile",
    "TypeAliasNode",
    "VariableNode",
]
