"""The composite input type of an operation."""

from operation_types.generator.optionality import OptionalityFlags
from operation_types.types import (
    UNDEFINED,
    IntersectionType,
    ObjectMember,
    ObjectType,
    Reference,
    TypeExpression,
)


def get_variables_type(
    request_body_type: TypeExpression,
    headers_type: TypeExpression,
    path_params_type: TypeExpression,
    query_params_type: TypeExpression,
    flags: OptionalityFlags,
    context_type_name: str = "Context",
    with_context_type: bool = False,
) -> TypeExpression:
    """Bundle body, headers, path and query params into one object type.

    `body` is left out when the operation declares no body. Parameter groups are
    always present, as `{}` when empty, so every operation exposes the same keys.
    With `with_context_type` the object is intersected with the context type.
    """
    members = []
    if request_body_type != UNDEFINED:
        members.append(ObjectMember(name="body", type=request_body_type, optional=flags.request_body_optional))
    members.append(ObjectMember(name="headers", type=headers_type, optional=flags.headers_optional))
    members.append(ObjectMember(name="pathParams", type=path_params_type, optional=flags.path_params_optional))
    members.append(ObjectMember(name="queryParams", type=query_params_type, optional=flags.query_params_optional))

    variables_type = ObjectType(members=tuple(members))
    if with_context_type:
        return IntersectionType(types=(variables_type, Reference(name=context_type_name)))
    return variables_type
