"""Response and request body type resolution."""

from enum import Enum
from typing import Callable

from operation_types.schema import resolve_ref, schema_to_type
from operation_types.types import UNDEFINED, TypeExpression, union_of


class StatusClass(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


def classify_status(status_code: str) -> StatusClass:
    """2xx codes are successes; everything else (4xx, 5xx, default...) is an error."""
    return StatusClass.SUCCESS if str(status_code).startswith("2") else StatusClass.ERROR


def is_success(status_code: str) -> bool:
    return classify_status(status_code) is StatusClass.SUCCESS


def is_error(status_code: str) -> bool:
    return classify_status(status_code) is StatusClass.ERROR


def find_media_schema(content: dict | None) -> dict | bool | None:
    """Pick the body schema: application/json first, then any *json type, then the first one."""
    if not content:
        return None
    if "application/json" in content:
        return (content["application/json"] or {}).get("schema")
    for content_type, media in content.items():
        if content_type.split(";")[0].strip().endswith("json"):
            return (media or {}).get("schema")
    for media in content.values():
        return (media or {}).get("schema")
    return None


def _has_schema(schema) -> bool:
    # `false` is a schema too, only missing or empty ones are not
    return isinstance(schema, bool) or bool(schema)


def get_response_type(
    responses: dict[str, dict],
    components: dict,
    status_filter: Callable[[str], bool],
) -> TypeExpression:
    """Type of the responses whose status code passes `status_filter`.

    No match gives UNDEFINED, one match its own type, several a union in map order.
    """
    types = []
    for status_code, response in responses.items():
        if not status_filter(str(status_code)):
            continue
        response = resolve_ref(response or {}, components)
        schema = find_media_schema(response.get("content"))
        types.append(schema_to_type(schema, components) if _has_schema(schema) else UNDEFINED)

    if not types:
        return UNDEFINED
    return union_of(types)


def get_request_body_type(request_body: dict | None, components: dict) -> TypeExpression:
    if not request_body:
        return UNDEFINED
    request_body = resolve_ref(request_body, components)
    schema = find_media_schema(request_body.get("content"))
    if not _has_schema(schema):
        return UNDEFINED
    return schema_to_type(schema, components)


def is_request_body_optional(request_body: dict | None, components: dict) -> bool:
    """A body can be omitted when it is absent or its schema has no required field."""
    if not request_body:
        return True
    request_body = resolve_ref(request_body, components)
    schema = find_media_schema(request_body.get("content"))
    if schema is None:
        return True
    return _is_schema_optional(schema, components)


def _is_schema_optional(schema: dict | bool, components: dict) -> bool:
    schema = resolve_ref(schema, components)
    if not isinstance(schema, dict):
        # `true` requires nothing, `false` accepts nothing
        return schema is True
    if "allOf" in schema:
        return all(_is_schema_optional(part, components) for part in schema["allOf"]) and not schema.get("required")
    if schema.get("type", "object") != "object" and "properties" not in schema:
        return False
    return not schema.get("required")
