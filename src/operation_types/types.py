"""Type expression model shared by every stage of the generator.

A type expression is an immutable tree describing a TypeScript type. Nodes
carry no identity beyond their structure, so two expressions compare equal
whenever they would print the same.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class Primitive(_Node):
    """A keyword type: string, number, boolean, null, unknown, undefined..."""

    kind: Literal["primitive"] = "primitive"
    name: str


class LiteralType(_Node):
    """A single literal value, as produced by `enum` / `const`."""

    kind: Literal["literal"] = "literal"
    value: str | bool | int | float | None


class ObjectMember(_Node):
    name: str
    type: TypeExpression
    optional: bool = False
    description: str = ""


class ObjectType(_Node):
    """An object literal type. `index_type` holds an `additionalProperties` signature."""

    kind: Literal["object"] = "object"
    members: tuple[ObjectMember, ...] = ()
    index_type: TypeExpression | None = None

    @property
    def is_empty(self) -> bool:
        return not self.members and self.index_type is None


class ArrayType(_Node):
    kind: Literal["array"] = "array"
    items: TypeExpression


class UnionType(_Node):
    kind: Literal["union"] = "union"
    types: tuple[TypeExpression, ...]


class IntersectionType(_Node):
    kind: Literal["intersection"] = "intersection"
    types: tuple[TypeExpression, ...]


class Reference(_Node):
    """A reference to a named declaration."""

    kind: Literal["reference"] = "reference"
    name: str


TypeExpression = Annotated[
    Union[Primitive, LiteralType, ObjectType, ArrayType, UnionType, IntersectionType, Reference],
    Field(discriminator="kind"),
]


class TypeDeclaration(_Node):
    """An exported `type <name> = <type>` binding."""

    name: str
    type: TypeExpression


for _model in (ObjectMember, ObjectType, ArrayType, UnionType, IntersectionType, TypeDeclaration):
    _model.model_rebuild()


# The "unknown/unspecified" type used for missing responses and bodies.
UNDEFINED = Primitive(name="undefined")
UNKNOWN = Primitive(name="unknown")
EMPTY_OBJECT = ObjectType()
# OpenAPI 3.1 `false` schema: no value is valid
NEVER = Primitive(name="never")


def union_of(types: list[TypeExpression]) -> TypeExpression:
    """Union of `types` with structural duplicates removed, order kept.

    A single remaining type is returned as is; no types at all gives UNKNOWN.
    """
    unique = []
    for t in types:
        if t not in unique:
            unique.append(t)
    if not unique:
        return UNKNOWN
    if len(unique) == 1:
        return unique[0]
    return UnionType(types=tuple(unique))
