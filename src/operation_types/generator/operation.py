"""Per-operation type synthesis.

`get_operation_types` derives the data, error, body, parameter-group and
variables types of one operation, together with the declarations that the
named ones refer to. Declarations are returned in a fixed order:
path params, query params, headers, error, data, request body, variables.
"""

from pydantic import BaseModel, ConfigDict

from operation_types.config import GeneratorConfig
from operation_types.errors import DuplicateDeclarationError
from operation_types.generator.extraction import declare, extract
from operation_types.generator.optionality import evaluate_optionality
from operation_types.generator.params import group_params_by_location, params_to_schema
from operation_types.generator.responses import get_request_body_type, get_response_type, is_error, is_success
from operation_types.generator.variables import get_variables_type
from operation_types.naming import Role, declaration_name, pascal
from operation_types.parser.base import ApiDocument, OperationDescriptor, ParameterDescriptor
from operation_types.schema import schema_to_type
from operation_types.types import EMPTY_OBJECT, TypeDeclaration, TypeExpression


class OperationTypes(BaseModel):
    """Everything generated for one operation."""

    model_config = ConfigDict(frozen=True)

    data_type: TypeExpression
    error_type: TypeExpression
    request_body_type: TypeExpression
    path_params_type: TypeExpression
    query_params_type: TypeExpression
    headers_type: TypeExpression
    variables_type: TypeExpression
    declarations: tuple[TypeDeclaration, ...] = ()


def get_operation_types(
    operation: OperationDescriptor,
    components: dict,
    config: GeneratorConfig | None = None,
) -> OperationTypes:
    """Synthesize the types of `operation`.

    Errors from schema resolution propagate; nothing is returned for a
    partially processed operation.
    """
    config = config or GeneratorConfig()
    op_id = operation.operation_id

    data_type = get_response_type(operation.responses, components, is_success)
    error_type = get_response_type(operation.responses, components, is_error)
    request_body_type = get_request_body_type(operation.request_body, components)

    groups = group_params_by_location(operation.parameters)
    flags = evaluate_optionality(groups, operation.request_body, components, config.injected_headers)

    path_params_type, path_decls = _params_type(groups.path, op_id, Role.PATH_PARAMS, components)
    query_params_type, query_decls = _params_type(groups.query, op_id, Role.QUERY_PARAMS, components)
    headers_type, header_decls = _params_type(
        groups.header, op_id, Role.HEADERS, components, satisfied=config.injected_headers
    )

    error_type, error_decls = extract(error_type, declaration_name(op_id, Role.ERROR))
    data_type, data_decls = extract(data_type, declaration_name(op_id, Role.RESPONSE))
    request_body_type, body_decls = extract(request_body_type, declaration_name(op_id, Role.REQUEST_BODY))

    variables_type = get_variables_type(
        request_body_type=request_body_type,
        headers_type=headers_type,
        path_params_type=path_params_type,
        query_params_type=query_params_type,
        flags=flags,
        context_type_name=config.context_type_name,
        with_context_type=config.with_context_type,
    )
    variables_type, variables_decls = extract(
        variables_type, declaration_name(op_id, Role.VARIABLES), force=config.with_context_type
    )

    return OperationTypes(
        data_type=data_type,
        error_type=error_type,
        request_body_type=request_body_type,
        path_params_type=path_params_type,
        query_params_type=query_params_type,
        headers_type=headers_type,
        variables_type=variables_type,
        declarations=path_decls + query_decls + header_decls + error_decls + data_decls + body_decls + variables_decls,
    )


def _params_type(
    params: list[ParameterDescriptor],
    op_id: str,
    role: Role,
    components: dict,
    satisfied=(),
) -> tuple[TypeExpression, tuple[TypeDeclaration, ...]]:
    # Non-empty groups are always declared, empty ones stay `{}`
    if not params:
        return EMPTY_OBJECT, ()
    expr = schema_to_type(params_to_schema(params, satisfied), components)
    return declare(declaration_name(op_id, role), expr)


def synthesize_document(
    document: ApiDocument, config: GeneratorConfig | None = None
) -> dict[str, OperationTypes]:
    """Synthesize every operation of `document`, keyed by operation id."""
    return {
        operation.operation_id: get_operation_types(operation, document.components, config)
        for operation in document.operations
    }


def component_declarations(components: dict) -> tuple[TypeDeclaration, ...]:
    """Declarations for the `components.schemas` entries referenced by generated types."""
    return tuple(
        TypeDeclaration(name=pascal(name), type=schema_to_type(schema, components))
        for name, schema in (components.get("schemas") or {}).items()
    )


def check_unique_names(declarations) -> None:
    """Raise DuplicateDeclarationError when two declarations would be exported under one name."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for declaration in declarations:
        if declaration.name in seen and declaration.name not in duplicates:
            duplicates.append(declaration.name)
        seen.add(declaration.name)
    if duplicates:
        raise DuplicateDeclarationError(duplicates)
