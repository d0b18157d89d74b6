"""OpenAPI 3 document parser.

Parses an OpenAPI 3.x document (YAML or JSON) into an ApiDocument.
"""

from pathlib import Path

import yaml

from operation_types.errors import DocumentError
from operation_types.naming import pascal
from operation_types.schema import resolve_ref

from .base import ApiDocument, OperationDescriptor, ParameterDescriptor

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def load_document(file_path: Path) -> dict:
    """Load the raw document mapping, rejecting anything that is not OpenAPI 3."""
    try:
        doc = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise DocumentError(f"{file_path}: not valid YAML/JSON: {e}") from e

    if not isinstance(doc, dict) or not str(doc.get("openapi", "")).startswith("3"):
        raise DocumentError(f"{file_path}: not an OpenAPI 3 document")
    return doc


def parse_openapi(file_path: Path) -> ApiDocument:
    """Parse an OpenAPI file into an ApiDocument."""
    return parse_document(load_document(file_path))


def parse_document(doc: dict) -> ApiDocument:
    components = doc.get("components") or {}
    info = doc.get("info") or {}

    operations = []
    for path, path_item in (doc.get("paths") or {}).items():
        path_item = resolve_ref(path_item or {}, components)
        path_parameters = path_item.get("parameters") or []

        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                continue

            raw_params = [*path_parameters, *(operation.get("parameters") or [])]
            operations.append(
                OperationDescriptor(
                    operation_id=_operation_id(operation, method, path),
                    method=method.upper(),
                    path=path,
                    summary=operation.get("summary") or "",
                    tags=operation.get("tags") or [],
                    parameters=_parse_parameters(raw_params, components),
                    request_body=operation.get("requestBody"),
                    responses={str(code): resp or {} for code, resp in (operation.get("responses") or {}).items()},
                )
            )

    return ApiDocument(
        title=str(info.get("title", "")),
        version=str(info.get("version", "")),
        components=components,
        operations=operations,
    )


def default_operation_id(method: str, path: str) -> str:
    """Derive an id for operations that lack one: `get /pets/{petId}` -> `getPetsPetId`."""
    return method.lower() + pascal(path)


def _operation_id(operation: dict, method: str, path: str) -> str:
    # Ids that case to nothing (punctuation only) would give bare `Response`-style names
    operation_id = str(operation.get("operationId") or "")
    if pascal(operation_id):
        return operation_id
    return default_operation_id(method, path)


def _parse_parameters(params: list[dict], components: dict) -> list[ParameterDescriptor]:
    result = []
    for p in params:
        p = resolve_ref(p, components)
        if "name" not in p or "in" not in p:
            raise DocumentError(f"Parameter without name/location: {p!r}")

        required = p.get("required", False)
        schema = p.get("schema")
        result.append(
            ParameterDescriptor(
                name=str(p["name"]),
                location=p["in"],
                required=required if isinstance(required, bool) else None,
                param_schema={} if schema is None else schema,
                description=p.get("description", "") or "",
            )
        )
    return result
