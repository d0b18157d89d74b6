"""Decide which parts of an operation's input the caller may omit."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from operation_types.generator.params import ParamGroups, effective_params, is_required
from operation_types.generator.responses import is_request_body_optional
from operation_types.parser.base import ParameterDescriptor


class OptionalityFlags(BaseModel):
    model_config = ConfigDict(frozen=True)

    headers_optional: bool = True
    path_params_optional: bool = True
    query_params_optional: bool = True
    request_body_optional: bool = True


def is_group_optional(params: Iterable[ParameterDescriptor], ignored: Iterable[str] = ()) -> bool:
    """True when no parameter of the group is required.

    Parameters named in `ignored` are skipped; an empty group is optional.
    """
    ignored = set(ignored)
    return all(
        not is_required(param)
        for name, param in effective_params(params).items()
        if name not in ignored
    )


def evaluate_optionality(
    groups: ParamGroups,
    request_body: dict | None,
    components: dict,
    injected_headers: Iterable[str] = (),
) -> OptionalityFlags:
    return OptionalityFlags(
        headers_optional=is_group_optional(groups.header, ignored=injected_headers),
        path_params_optional=is_group_optional(groups.path),
        query_params_optional=is_group_optional(groups.query),
        request_body_optional=is_request_body_optional(request_body, components),
    )
