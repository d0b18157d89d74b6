"""Render type expressions and declarations as TypeScript source."""

import json
import re

from operation_types.types import (
    ArrayType,
    IntersectionType,
    LiteralType,
    ObjectType,
    Primitive,
    Reference,
    TypeDeclaration,
    TypeExpression,
    UnionType,
)

INDENT = "  "

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _property_name(name: str) -> str:
    return name if _IDENTIFIER.match(name) else json.dumps(name)


def print_type(expr: TypeExpression, level: int = 0) -> str:
    if isinstance(expr, Primitive):
        return expr.name
    if isinstance(expr, Reference):
        return expr.name
    if isinstance(expr, LiteralType):
        return "null" if expr.value is None else json.dumps(expr.value)
    if isinstance(expr, ArrayType):
        item = print_type(expr.items, level)
        if isinstance(expr.items, (UnionType, IntersectionType)):
            item = f"({item})"
        return f"{item}[]"
    if isinstance(expr, UnionType):
        return " | ".join(_operand(t, level) for t in expr.types)
    if isinstance(expr, IntersectionType):
        return " & ".join(_operand(t, level) for t in expr.types)
    if isinstance(expr, ObjectType):
        return _print_object(expr, level)
    raise TypeError(f"Unsupported type expression: {expr!r}")


def _operand(expr: TypeExpression, level: int) -> str:
    text = print_type(expr, level)
    # Unions nested in intersections (and vice versa) need grouping
    if isinstance(expr, (UnionType, IntersectionType)):
        return f"({text})"
    return text


def _print_object(expr: ObjectType, level: int) -> str:
    if expr.is_empty:
        return "{}"

    pad = INDENT * (level + 1)
    lines = ["{"]
    for member in expr.members:
        if member.description:
            lines.append(f"{pad}/**")
            for doc_line in member.description.splitlines():
                # `*/` inside the text would close the comment early
                doc_line = doc_line.replace("*/", "*\\/")
                lines.append(f"{pad} * {doc_line}".rstrip())
            lines.append(f"{pad} */")
        optional = "?" if member.optional else ""
        lines.append(f"{pad}{_property_name(member.name)}{optional}: {print_type(member.type, level + 1)};")
    if expr.index_type is not None:
        lines.append(f"{pad}[key: string]: {print_type(expr.index_type, level + 1)};")
    lines.append(f"{INDENT * level}}}")
    return "\n".join(lines)


def print_declaration(declaration: TypeDeclaration) -> str:
    return f"export type {declaration.name} = {print_type(declaration.type)};"


def print_declarations(declarations) -> str:
    """Render declarations as `export type` statements separated by blank lines."""
    return "\n\n".join(print_declaration(d) for d in declarations) + "\n"
