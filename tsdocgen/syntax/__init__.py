"""AST provider contract and its tree-sitter implementation."""

from __future__ import annotations

from .base import (
    AstProvider,
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
from .tree_sitter import TreeSitterProvider

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
    "TreeSitterProvider",
    "TypeAliasNode",
    "VariableNode",
]
