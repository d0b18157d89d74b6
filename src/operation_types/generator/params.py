"""Parameter grouping and parameter-group schema synthesis."""

from typing import Iterable, NamedTuple

from operation_types.parser.base import ParameterDescriptor


class ParamGroups(NamedTuple):
    path: list[ParameterDescriptor]
    query: list[ParameterDescriptor]
    header: list[ParameterDescriptor]


def group_params_by_location(parameters: Iterable[ParameterDescriptor]) -> ParamGroups:
    """Split parameters into path / query / header groups.

    Input order is kept inside each group. Other locations (cookie...) are dropped.
    """
    groups = ParamGroups(path=[], query=[], header=[])
    for param in parameters:
        if param.location == "path":
            groups.path.append(param)
        elif param.location == "query":
            groups.query.append(param)
        elif param.location == "header":
            groups.header.append(param)
    return groups


def effective_params(params: Iterable[ParameterDescriptor]) -> dict[str, ParameterDescriptor]:
    """Collapse same-name parameters: last one wins, first position is kept."""
    result: dict[str, ParameterDescriptor] = {}
    for param in params:
        result[param.name] = param
    return result


def is_required(param: ParameterDescriptor) -> bool:
    # Unresolved (None) counts as required
    return param.required is not False


def params_to_schema(params: Iterable[ParameterDescriptor], satisfied: Iterable[str] = ()) -> dict:
    """Build an object schema with one property per parameter.

    Names in `satisfied` are provided by an outer layer (injected headers) and
    are never marked as required.
    """
    satisfied = set(satisfied)
    properties: dict[str, dict | bool] = {}
    required: list[str] = []

    for name, param in effective_params(params).items():
        prop = param.param_schema if isinstance(param.param_schema, bool) else dict(param.param_schema)
        if param.description and isinstance(prop, dict) and "description" not in prop and "$ref" not in prop:
            prop["description"] = param.description
        properties[name] = prop
        if is_required(param) and name not in satisfied:
            required.append(name)

    schema: dict = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema
