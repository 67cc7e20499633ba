"""Tests for markdown rendering of modules."""

from __future__ import annotations

import typing

import pytest

from tsdocgen.markdown import (
    PRINTERS,
    print_class,
    print_content,
    print_function,
    print_module,
    print_printable,
)
from tsdocgen.models import (
    Class,
    Constant,
    Documentable,
    Function,
    Interface,
    Method,
    Module,
    Printable,
    Property,
)
from tsdocgen.toc import TableOfContentsBuilder


def test_every_printable_variant_has_a_printer() -> None:
    assert set(PRINTERS) == set(typing.get_args(Printable))


def test_unknown_printable_is_rejected() -> None:
    with pytest.raises(TypeError, match="Method"):
        print_printable(Method(doc=Documentable(name="m"), signatures=("m(): void",)))  # type: ignore[arg-type]


def test_function_entry_layout() -> None:
    function = Function(
        doc=Documentable(name="f", description="Adds one.", since="1.0.0", examples=("f(1)",)),
        signatures=("export declare function f(a: number): number",),
    )

    assert print_function(function) == "\n\n".join(
        [
            "## f",
            "Adds one.",
            "**Signature**\n\n```ts\nexport declare function f(a: number): number\n```",
            "**Example**\n\n```ts\nf(1)\n```",
            "Added in v1.0.0",
        ]
    )


def test_deprecated_names_are_struck_through() -> None:
    function = Function(doc=Documentable(name="old", deprecated=True), signatures=("export declare function old(): void",))

    assert print_function(function).startswith("## ~~old~~\n\n")


def test_class_lists_static_methods_then_methods_then_properties() -> None:
    cls = Class(
        doc=Documentable(name="Box", since="1.0.0"),
        signature="export declare class Box",
        methods=(Method(doc=Documentable(name="map"), signatures=("map(): Box",)),),
        static_methods=(Method(doc=Documentable(name="of"), signatures=("static of(): Box",)),),
        properties=(Property(doc=Documentable(name="size"), signature="readonly size: number"),),
    )

    rendered = print_class(cls)

    headings = [line for line in rendered.splitlines() if line.startswith("#")]
    assert headings == [
        "## Box (class)",
        "### of (static method)",
        "### map (method)",
        "### size (property)",
    ]


def test_content_is_grouped_by_sorted_category() -> None:
    module = Module(
        doc=Documentable(name="index"),
        path=("src", "index.ts"),
        interfaces=(Interface(doc=Documentable(name="Z", category="model"), signature="export interface Z {}"),),
        constants=(
            Constant(doc=Documentable(name="b"), signature="export declare const b: 2"),
            Constant(doc=Documentable(name="a"), signature="export declare const a: 1"),
        ),
    )

    content = print_content(module)

    headings = [line for line in content.splitlines() if line.startswith("#")]
    assert headings == ["# model", "## Z (interface)", "# utils", "## a", "## b"]


def test_module_page_has_front_matter_overview_and_toc() -> None:
    module = Module(
        doc=Documentable(name="index", description="Entry point.", since="1.0.0"),
        path=("src", "data", "index.ts"),
        functions=(Function(doc=Documentable(name="f"), signatures=("export declare function f(): void",)),),
    )

    page = print_module(module, order=2)

    assert page.startswith("---\ntitle: data/index.ts\nnav_order: 3\nparent: Modules\n---\n")
    assert "## index overview\n\nEntry point.\n" in page
    assert "Added in v1.0.0\n" in page
    assert "- [utils](#utils)\n  - [f](#f)" in page
    assert page.rstrip().endswith("export declare function f(): void\n```")


def test_toc_slugs_are_unique_and_code_blocks_ignored() -> None:
    markdown = "\n".join(
        [
            "# utils",
            "## Box (class)",
            "```ts",
            "# not a heading",
            "```",
            "### map (method)",
            "#### too deep",
            "## ~~old~~",
            "### map (method)",
        ]
    )

    assert TableOfContentsBuilder().build(markdown).splitlines() == [
        "- [utils](#utils)",
        "  - [Box (class)](#box-class)",
        "    - [map (method)](#map-method)",
        "  - [~~old~~](#old)",
        "    - [map (method)](#map-method-1)",
    ]


def test_toc_of_empty_page_is_empty() -> None:
    assert TableOfContentsBuilder().build("no headings here") == ""
