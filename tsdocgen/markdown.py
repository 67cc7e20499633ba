"""Markdown rendering of documented modules."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Dict, List, Optional, Sequence

from .models import (
    Class,
    Constant,
    Documentable,
    Export,
    Function,
    Interface,
    Method,
    Module,
    Printable,
    Property,
    TypeAlias,
)
from .templating import render
from .toc import TableOfContentsBuilder

DEFAULT_CATEGORY = "utils"


def _title(doc: Documentable, suffix: str = "") -> str:
    name = f"~~{doc.name}~~" if doc.deprecated else doc.name
    return f"{name}{suffix}"


def _signature(signatures: Sequence[str]) -> str:
    return "**Signature**\n\n```ts\n" + "\n\n".join(signatures) + "\n```"


def _entry(heading: str, doc: Documentable, signatures: Sequence[str]) -> str:
    blocks: List[str] = [heading]
    if doc.description:
        blocks.append(doc.description)
    blocks.append(_signature(signatures))
    for example in doc.examples:
        blocks.append(f"**Example**\n\n```ts\n{example}\n```")
    if doc.since:
        blocks.append(f"Added in v{doc.since}")
    return "\n\n".join(blocks)


def _method(method: Method, suffix: str) -> str:
    return _entry(f"### {_title(method.doc, suffix)}", method.doc, method.signatures)


def _property(prop: Property) -> str:
    return _entry(f"### {_title(prop.doc, ' (property)')}", prop.doc, [prop.signature])


def print_class(cls: Class) -> str:
    sections = [_entry(f"## {_title(cls.doc, ' (class)')}", cls.doc, [cls.signature])]
    sections.extend(_method(method, " (static method)") for method in cls.static_methods)
    sections.extend(_method(method, " (method)") for method in cls.methods)
    sections.extend(_property(prop) for prop in cls.properties)
    return "\n\n".join(sections)


def print_constant(constant: Constant) -> str:
    return _entry(f"## {_title(constant.doc)}", constant.doc, [constant.signature])


def print_export(export: Export) -> str:
    return _entry(f"## {_title(export.doc)}", export.doc, [export.signature])


def print_function(function: Function) -> str:
    return _entry(f"## {_title(function.doc)}", function.doc, function.signatures)


def print_interface(interface: Interface) -> str:
    return _entry(f"## {_title(interface.doc, ' (interface)')}", interface.doc, [interface.signature])


def print_type_alias(alias: TypeAlias) -> str:
    return _entry(f"## {_title(alias.doc, ' (type alias)')}", alias.doc, [alias.signature])


PRINTERS: Dict[type, Callable[..., str]] = {
    Class: print_class,
    Constant: print_constant,
    Export: print_export,
    Function: print_function,
    Interface: print_interface,
    TypeAlias: print_type_alias,
}


def print_printable(printable: Printable) -> str:
    printer = PRINTERS.get(type(printable))
    if printer is None:
        raise TypeError(f"No markdown printer for {type(printable).__name__}")
    return printer(printable)


def printables(module: Module) -> List[Printable]:
    return [
        *module.classes,
        *module.constants,
        *module.exports,
        *module.functions,
        *module.interfaces,
        *module.type_aliases,
    ]


def print_content(module: Module) -> str:
    """Printables grouped by category; categories and entries sorted."""
    groups: Dict[str, List[str]] = defaultdict(list)
    for printable in printables(module):
        groups[printable.doc.category or DEFAULT_CATEGORY].append(print_printable(printable))
    sections = []
    for category in sorted(groups):
        entries = "\n\n".join(sorted(groups[category]))
        sections.append(f"# {category}\n\n{entries}")
    return "\n\n".join(sections)


def print_module(module: Module, order: int, toc_builder: Optional[TableOfContentsBuilder] = None) -> str:
    """Render the page of `module`; `order` is its zero-based position among all pages."""
    content = print_content(module)
    toc = (toc_builder or TableOfContentsBuilder()).build(content)
    return render(
        "module.md.j2",
        title="/".join(module.path[1:]),
        nav_order=order + 1,
        name=module.name,
        description=module.doc.description,
        examples=module.doc.examples,
        since=module.doc.since,
        toc=toc,
        content=content,
    )


__all__ = [
    "DEFAULT_CATEGORY",
    "PRINTERS",
    "print_class",
    "print_constant",
    "print_content",
    "print_export",
    "print_function",
    "print_interface",
    "print_module",
    "print_printable",
    "print_type_alias",
    "printables",
]
