"""Tests for the tree-sitter TypeScript provider."""

from __future__ import annotations

from tests._fixtures.project_builder import parse_source


def test_collects_leading_comments_of_first_statement() -> None:
    source = parse_source(
        """
        /**
         * Module docs
         */
        // note
        import * as x from 'x'
        """
    )

    assert source.leading_comments[0].startswith("/**")
    assert source.leading_comments[1] == "// note"


def test_file_without_statements_has_no_leading_comments() -> None:
    assert parse_source("/** only a comment */\n").leading_comments == ()


def test_interfaces_and_type_aliases_keep_verbatim_text() -> None:
    source = parse_source(
        """
        /** @since 1.0.0 */
        export interface A {}
        interface Hidden {}
        export type Option<A> = None | Some<A>
        """
    )

    assert [(node.name, node.text, node.exported) for node in source.interfaces] == [
        ("A", "export interface A {}", True),
        ("Hidden", "interface Hidden {}", False),
    ]
    assert source.interfaces[0].jsdocs == ("/** @since 1.0.0 */",)
    assert source.type_aliases[0].text == "export type Option<A> = None | Some<A>"


def test_function_overloads_are_grouped_with_implementation() -> None:
    source = parse_source(
        """
        /** first */
        export function f(a: number): number;
        export function f(a: string): string;
        export function f(a: any): any {
          return a
        }
        export function g(): void {}
        """
    )

    f, g = source.functions
    assert f.name == "f"
    assert len(f.overloads) == 2
    assert f.jsdocs == ("/** first */",)
    assert f.implementation.body_start is not None
    body = f.implementation.text[f.implementation.body_start - f.implementation.start :]
    assert body.startswith("{")
    assert g.name == "g" and g.overloads == ()


def test_body_offsets_are_character_offsets() -> None:
    source = parse_source(
        """
        /** héllo wörld */
        export function f(a = 'ü'): string { return a }
        """
    )

    form = source.functions[0].implementation
    assert form.text[form.body_start - form.start :].startswith("{ return a }")


def test_anonymous_default_function_has_no_name() -> None:
    source = parse_source("export default function () {}\n")

    assert source.functions[0].name is None
    assert source.functions[0].exported


def test_variables_infer_literal_and_widened_types() -> None:
    source = parse_source(
        """
        export const a = 1
        export let b = 'text'
        export const c = 'text'
        export const s: string = ''
        export const f = (x: number): number => x
        export const d = new Date()
        export declare const e: number
        """
    )

    types = {node.name: node.type_text for node in source.variables}
    assert types["a"] == "1"
    assert types["b"] == "string"
    assert types["c"] == '"text"'
    assert types["s"] == "string"
    assert types["f"] == "(x: number) => number"
    assert types["d"] == "Date"
    functions = {node.name: node.is_function for node in source.variables}
    assert functions["f"] is True
    assert functions["a"] is False
    initialized = {node.name: node.has_initializer for node in source.variables}
    assert initialized["e"] is False


def test_class_members_and_modifiers() -> None:
    source = parse_source(
        """
        export class Box<A, B> {
          constructor(readonly value: A) {}
          static of(a: number): Box<number, number> {
            return new Box(a)
          }
          /** doc */
          map(f: number): number;
          map(f: any): any {
            return f
          }
          private hidden(): void {}
          get size(): number {
            return 1
          }
          readonly count: number = 0;
          private secret = 1;
          static version = '1';
        }
        """
    )

    (box,) = source.classes
    assert box.name == "Box"
    assert box.type_parameters == ("A", "B")
    assert box.exported
    assert [form.name for form in box.constructors] == ["constructor"]
    methods = {method.name: method for method in box.methods}
    assert set(methods) == {"of", "map", "hidden"}
    assert methods["of"].is_static
    assert methods["hidden"].is_private
    assert len(methods["map"].overloads) == 1
    assert methods["map"].jsdocs == ("/** doc */",)
    props = {prop.name: prop for prop in box.properties}
    assert props["count"].is_readonly and props["count"].type_text == "number"
    assert props["secret"].is_private
    assert props["version"].is_static


def test_export_specifiers_resolve_local_types() -> None:
    source = parse_source(
        """
        const a = 1;
        export {
          /** @since 1.0.0 */
          a as b,
          c
        }
        """
    )

    first, second = source.exports
    assert (first.name, first.local, first.type_text) == ("b", "a", "1")
    assert first.leading_comments == ("/** @since 1.0.0 */",)
    assert (second.name, second.type_text, second.leading_comments) == ("c", "any", ())
