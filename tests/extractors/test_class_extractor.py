"""Tests for class extraction."""

from __future__ import annotations

from tsdocgen.extractors import ClassExtractor
from tsdocgen.models import Class, Documentable, Method, Property

from tests._fixtures.project_builder import make_context, parse_source


def test_private_and_ignored_members_are_skipped() -> None:
    source = parse_source(
        """
        /**
         * a class
         * @since 1.0.0
         */
        export class MyClass<A> {
          private a: number = 1
          /** @ignore */
          b: string = 'b'
          private helper(): void {}
        }
        """
    )

    result = ClassExtractor().extract(source, make_context())

    assert result.value == (
        Class(
            doc=Documentable(name="MyClass", description="a class", since="1.0.0"),
            signature="export declare class MyClass<A>",
        ),
    )


def test_constructor_methods_and_properties() -> None:
    source = parse_source(
        """
        /** @since 1.0.0 */
        export class Box<A> {
          /** @since 1.0.0 */
          static of<A>(a: A): Box<A> {
            return new Box(a)
          }
          /** @since 1.1.0 */
          readonly size: number = 1
          constructor(readonly value: A) {}
          /**
           * @since 1.0.0
           * @deprecated
           */
          map(f: (a: A) => A): Box<A>;
          map(f: any): any {
            return this
          }
        }
        """
    )

    (cls,) = ClassExtractor().extract(source, make_context()).value

    assert cls.signature == "export declare class Box<A> { constructor(readonly value: A) }"
    assert cls.static_methods == (
        Method(doc=Documentable(name="of", since="1.0.0"), signatures=("static of<A>(a: A): Box<A>",)),
    )
    assert cls.methods == (
        Method(
            doc=Documentable(name="map", since="1.0.0", deprecated=True),
            signatures=("map(f: (a: A) => A): Box<A>", "map(f: any): any"),
        ),
    )
    assert cls.properties == (
        Property(doc=Documentable(name="size", since="1.1.0"), signature="readonly size: number"),
    )


def test_member_errors_name_methods_bare_and_properties_with_class() -> None:
    source = parse_source(
        """
        export class A {
          m(): void {}
          static s(): void {}
          p: string = ''
        }
        """
    )

    result = ClassExtractor().extract(source, make_context())

    assert result.errors == (
        'Missing "@since" tag in test#A documentation',
        'Missing "@since" tag in test#m documentation',
        'Missing "@since" tag in test#s documentation',
        'Missing "@since" tag in test#A#p documentation',
    )


def test_classes_are_sorted_and_unexported_ones_skipped() -> None:
    source = parse_source(
        """
        /** @since 1.0.0 */
        export class B {}
        class Hidden {}
        /** @since 1.0.0 */
        export class A {}
        """
    )

    result = ClassExtractor().extract(source, make_context())

    assert [cls.doc.name for cls in result.value] == ["A", "B"]


def test_anonymous_default_class_is_a_structural_error() -> None:
    source = parse_source("export default class {}\n")

    result = ClassExtractor().extract(source, make_context())

    assert result.errors == ("Missing class name in module test",)
