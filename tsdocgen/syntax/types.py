"""Type text for declarations that carry no explicit annotation.

Tree-sitter does not run the TypeScript checker, so types are inferred from
the syntax alone: annotations are used verbatim, literals give their literal
(for `const`) or widened type, and anything else falls back to `any`.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from tree_sitter import Node

UNKNOWN = "any"

FUNCTION_VALUES = frozenset({"arrow_function", "function_expression", "function", "generator_function"})

TextOf = Callable[[Node], str]


def annotation_text(annotation: Node, text: TextOf) -> str:
    """Return the type of a `type_annotation` node without its leading colon."""
    raw = text(annotation).strip()
    if raw.startswith(":"):
        return raw[1:].strip()
    return raw


def function_type(node: Node, text: TextOf) -> str:
    """Render a function-like node as a function type, e.g. `(a: number) => string`."""
    type_parameters = node.child_by_field_name("type_parameters")
    parameters = node.child_by_field_name("parameters")
    if parameters is not None:
        params = text(parameters)
    else:
        single = node.child_by_field_name("parameter")
        params = f"({text(single)})" if single is not None else "()"
    return_type = node.child_by_field_name("return_type")
    if return_type is not None:
        result = annotation_text(return_type, text)
    elif any(child.type == "async" for child in node.children):
        result = f"Promise<{UNKNOWN}>"
    else:
        result = UNKNOWN
    prefix = text(type_parameters) if type_parameters is not None else ""
    return f"{prefix}{params} => {result}"


def infer_type(
    node: Node,
    text: TextOf,
    locals_: Mapping[str, str],
    *,
    const: bool,
) -> str:
    """Infer the declared type of an initializer expression."""
    kind = node.type
    if kind == "parenthesized_expression":
        inner = _first_named(node)
        return infer_type(inner, text, locals_, const=const) if inner is not None else UNKNOWN
    if kind == "string":
        return _string_literal(text(node)) if const else "string"
    if kind == "template_string":
        return "string"
    if kind == "number":
        return text(node) if const else "number"
    if kind == "unary_expression":
        operand = node.child_by_field_name("argument")
        if operand is not None and operand.type == "number" and text(node).startswith("-"):
            return f"-{text(operand)}" if const else "number"
        return UNKNOWN
    if kind in ("true", "false"):
        return kind if const else "boolean"
    if kind == "null":
        return "null"
    if kind == "undefined":
        return "undefined"
    if kind == "identifier":
        name = text(node)
        if name == "undefined":
            return "undefined"
        return locals_.get(name, UNKNOWN)
    if kind == "regex":
        return "RegExp"
    if kind == "new_expression":
        constructor = node.child_by_field_name("constructor")
        arguments = node.child_by_field_name("type_arguments")
        if constructor is None:
            return UNKNOWN
        return text(constructor) + (text(arguments) if arguments is not None else "")
    if kind == "as_expression":
        expression = _first_named(node)
        target = node.children[-1]
        if target.type == "const":
            return infer_type(expression, text, locals_, const=True) if expression is not None else UNKNOWN
        return text(target)
    if kind == "satisfies_expression":
        expression = _first_named(node)
        return infer_type(expression, text, locals_, const=const) if expression is not None else UNKNOWN
    if kind in FUNCTION_VALUES:
        return function_type(node, text)
    if kind == "array":
        return _array_type(node, text, locals_)
    if kind == "object":
        return _object_type(node, text, locals_)
    return UNKNOWN


def unwrap_parentheses(node: Node) -> Node:
    while node.type == "parenthesized_expression":
        inner = _first_named(node)
        if inner is None:
            break
        node = inner
    return node


def _array_type(node: Node, text: TextOf, locals_: Mapping[str, str]) -> str:
    elements = [child for child in node.named_children if child.type != "comment"]
    if not elements:
        return f"{UNKNOWN}[]"
    types = {infer_type(element, text, locals_, const=False) for element in elements}
    if len(types) == 1:
        (element_type,) = types
        if "=>" not in element_type and "|" not in element_type:
            return f"{element_type}[]"
    return f"{UNKNOWN}[]"


def _object_type(node: Node, text: TextOf, locals_: Mapping[str, str]) -> str:
    members = []
    for child in node.named_children:
        if child.type == "comment":
            continue
        if child.type != "pair":
            return UNKNOWN
        key = child.child_by_field_name("key")
        value = child.child_by_field_name("value")
        if key is None or value is None or key.type not in ("property_identifier", "string", "number"):
            return UNKNOWN
        members.append(f"{text(key)}: {infer_type(value, text, locals_, const=False)};")
    if not members:
        return "{}"
    return "{ " + " ".join(members) + " }"


def _string_literal(raw: str) -> str:
    if len(raw) >= 2 and raw[0] == "'" and raw[-1] == "'":
        content = raw[1:-1].replace("\\'", "'").replace('"', '\\"')
        return f'"{content}"'
    return raw


def _first_named(node: Node) -> Optional[Node]:
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


__all__ = [
    "FUNCTION_VALUES",
    "UNKNOWN",
    "annotation_text",
    "function_type",
    "infer_type",
    "unwrap_parentheses",
]
