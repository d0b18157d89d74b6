"""OpenAPI schema to type expression conversion.

Only local references (`#/components/...`) are supported. Schema references
become `Reference` nodes named after the component; every other reference kind
(parameters, responses, request bodies) is looked up with `resolve_ref`.
"""

from operation_types.errors import UnresolvedReferenceError
from operation_types.naming import pascal
from operation_types.types import (
    NEVER,
    UNKNOWN,
    ArrayType,
    IntersectionType,
    LiteralType,
    ObjectMember,
    ObjectType,
    Primitive,
    Reference,
    TypeExpression,
    union_of,
)

COMPONENTS_PREFIX = "#/components/"
SCHEMAS_PREFIX = "#/components/schemas/"

MAX_REF_DEPTH = 32

_PRIMITIVES = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "null": "null",
}


def is_reference(obj) -> bool:
    return isinstance(obj, dict) and "$ref" in obj


def _unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def resolve_ref(obj: dict | bool, components: dict) -> dict | bool:
    """Follow `$ref` chains until a concrete object is reached.

    Raises UnresolvedReferenceError for non-local or dangling references.
    """
    seen = 0
    while is_reference(obj):
        ref = obj["$ref"]
        if not isinstance(ref, str) or not ref.startswith(COMPONENTS_PREFIX):
            raise UnresolvedReferenceError(str(ref))
        node = components
        for token in ref[len(COMPONENTS_PREFIX):].split("/"):
            if not isinstance(node, dict) or _unescape(token) not in node:
                raise UnresolvedReferenceError(ref)
            node = node[_unescape(token)]
        if not isinstance(node, (dict, bool)):
            raise UnresolvedReferenceError(ref)
        obj = node
        seen += 1
        if seen > MAX_REF_DEPTH:
            raise UnresolvedReferenceError(ref)
    return obj


def schema_to_type(schema: dict | bool | None, components: dict) -> TypeExpression:
    """Convert a schema (or schema reference) into a type expression.

    Boolean schemas (OpenAPI 3.1) map to `unknown` for `true` and `never` for `false`.
    """
    if schema is False:
        return NEVER
    if schema is True or not schema:
        return UNKNOWN

    if is_reference(schema):
        ref = schema["$ref"]
        if isinstance(ref, str) and ref.startswith(SCHEMAS_PREFIX) and "/" not in ref[len(SCHEMAS_PREFIX):]:
            # Make sure the target exists, but keep it named at the use site
            resolve_ref(schema, components)
            return Reference(name=pascal(_unescape(ref[len(SCHEMAS_PREFIX):])))
        # Pointers into a component (`.../Pet/properties/id`) have no declaration of their own
        return schema_to_type(resolve_ref(schema, components), components)

    result = _convert(schema, components)
    if schema.get("nullable") is True and result != Primitive(name="null"):
        result = union_of([result, Primitive(name="null")])
    return result


def _convert(schema: dict, components: dict) -> TypeExpression:
    if "allOf" in schema:
        parts = [schema_to_type(s, components) for s in schema["allOf"]]
        own = _object_type(schema, components) if "properties" in schema else None
        if own is not None:
            parts.append(own)
        if len(parts) == 1:
            return parts[0]
        return IntersectionType(types=tuple(parts))

    for keyword in ("oneOf", "anyOf"):
        if keyword in schema:
            return union_of([schema_to_type(s, components) for s in schema[keyword]])

    if "const" in schema:
        return LiteralType(value=schema["const"])

    if schema.get("enum"):
        return union_of([LiteralType(value=v) for v in schema["enum"]])

    schema_type = schema.get("type")
    if isinstance(schema_type, list):
        return union_of([_convert({**schema, "type": t}, components) for t in schema_type])

    if schema_type in _PRIMITIVES:
        return Primitive(name=_PRIMITIVES[schema_type])

    if schema_type == "array":
        return ArrayType(items=schema_to_type(schema.get("items"), components))

    if schema_type == "object" or "properties" in schema or "additionalProperties" in schema:
        return _object_type(schema, components)

    return UNKNOWN


def _object_type(schema: dict, components: dict) -> ObjectType:
    required = set(schema.get("required") or [])
    members = tuple(
        ObjectMember(
            name=name,
            type=schema_to_type(prop, components),
            optional=name not in required,
            description=_description(prop),
        )
        for name, prop in (schema.get("properties") or {}).items()
    )

    index_type = None
    additional = schema.get("additionalProperties")
    if additional is True or additional == {}:
        index_type = UNKNOWN
    elif isinstance(additional, dict):
        index_type = schema_to_type(additional, components)

    return ObjectType(members=members, index_type=index_type)


def _description(prop) -> str:
    if isinstance(prop, dict) and not is_reference(prop):
        return str(prop.get("description") or "")
    return ""
