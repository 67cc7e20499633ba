"""Documentation model assembled from TypeScript sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Documentable:
    """Fields shared by every documented entity."""

    name: str
    description: Optional[str] = None
    since: Optional[str] = None
    deprecated: bool = False
    examples: Tuple[str, ...] = ()
    category: Optional[str] = None


@dataclass(frozen=True)
class Method:
    """Instance or static method of an exported class."""

    doc: Documentable
    signatures: Tuple[str, ...]


@dataclass(frozen=True)
class Property:
    """Public instance property of an exported class."""

    doc: Documentable
    signature: str


@dataclass(frozen=True)
class Class:
    """Exported class declaration."""

    doc: Documentable
    signature: str
    methods: Tuple[Method, ...] = ()
    static_methods: Tuple[Method, ...] = ()
    properties: Tuple[Property, ...] = ()


@dataclass(frozen=True)
class Interface:
    """Exported interface declaration."""

    doc: Documentable
    signature: str


@dataclass(frozen=True)
class Function:
    """Exported function; one signature per overload followed by the implementation."""

    doc: Documentable
    signatures: Tuple[str, ...]


@dataclass(frozen=True)
class TypeAlias:
    """Exported type alias declaration."""

    doc: Documentable
    signature: str


@dataclass(frozen=True)
class Constant:
    """Exported non-function variable."""

    doc: Documentable
    signature: str


@dataclass(frozen=True)
class Export:
    """Named re-export (`export { a as b }`)."""

    doc: Documentable
    signature: str


Printable = Union[Class, Constant, Export, Function, Interface, TypeAlias]


@dataclass(frozen=True)
class Module:
    """Documentation for one source file."""

    doc: Documentable
    path: Tuple[str, ...]
    classes: Tuple[Class, ...] = ()
    interfaces: Tuple[Interface, ...] = ()
    functions: Tuple[Function, ...] = ()
    type_aliases: Tuple[TypeAlias, ...] = ()
    constants: Tuple[Constant, ...] = ()
    exports: Tuple[Export, ...] = ()

    @property
    def name(self) -> str:
        return self.doc.name

    @property
    def location(self) -> str:
        """Path segments joined with `/`, as used in error messages."""
        return "/".join(self.path)


def module_sort_key(module: Module) -> str:
    return "/".join(module.path).lower()


__all__ = [
    "Class",
    "Constant",
    "Documentable",
    "Export",
    "Function",
    "Interface",
    "Method",
    "Module",
    "Printable",
    "Property",
    "TypeAlias",
    "module_sort_key",
]
