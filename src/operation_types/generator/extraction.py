"""When a derived type gets its own exported declaration."""

from operation_types.types import (
    ArrayType,
    IntersectionType,
    ObjectType,
    Reference,
    TypeDeclaration,
    TypeExpression,
)


def should_extract(expr: TypeExpression) -> bool:
    """Intersections, non-empty objects and arrays are worth a name.

    Primitives, literals, unions, references and `{}` stay inline.
    """
    if isinstance(expr, IntersectionType):
        return len(expr.types) >= 2
    if isinstance(expr, ObjectType):
        return not expr.is_empty
    return isinstance(expr, ArrayType)


def declare(name: str, expr: TypeExpression) -> tuple[Reference, tuple[TypeDeclaration, ...]]:
    """Declare `expr` as `name` and return the reference that replaces it."""
    return Reference(name=name), (TypeDeclaration(name=name, type=expr),)


def extract(
    expr: TypeExpression, name: str, force: bool = False
) -> tuple[TypeExpression, tuple[TypeDeclaration, ...]]:
    """Promote `expr` to a declaration when it passes `should_extract` (or `force` is set).

    Returns the type to use from now on and the declarations produced (none or one).
    """
    if force or should_extract(expr):
        return declare(name, expr)
    return expr, ()
