from operation_types.generator.optionality import OptionalityFlags
from operation_types.generator.variables import get_variables_type
from operation_types.types import (
    EMPTY_OBJECT,
    UNDEFINED,
    IntersectionType,
    ObjectMember,
    ObjectType,
    Reference,
)


def _members(expr):
    return {m.name: m for m in expr.members}


class TestGetVariablesType:
    def test_empty_groups_are_kept_and_body_dropped(self):
        result = get_variables_type(UNDEFINED, EMPTY_OBJECT, EMPTY_OBJECT, EMPTY_OBJECT, OptionalityFlags())
        assert result == ObjectType(members=(
            ObjectMember(name="headers", type=EMPTY_OBJECT, optional=True),
            ObjectMember(name="pathParams", type=EMPTY_OBJECT, optional=True),
            ObjectMember(name="queryParams", type=EMPTY_OBJECT, optional=True),
        ))

    def test_optionality_follows_flags(self):
        flags = OptionalityFlags(
            headers_optional=True,
            path_params_optional=False,
            query_params_optional=True,
            request_body_optional=False,
        )
        result = get_variables_type(
            Reference(name="CreatePetRequestBody"),
            Reference(name="CreatePetHeaders"),
            Reference(name="CreatePetPathParams"),
            EMPTY_OBJECT,
            flags,
        )
        members = _members(result)
        assert list(members) == ["body", "headers", "pathParams", "queryParams"]
        assert members["body"].optional is False
        assert members["body"].type == Reference(name="CreatePetRequestBody")
        assert members["headers"].optional is True
        assert members["pathParams"].optional is False
        assert members["queryParams"].optional is True

    def test_context_type(self):
        result = get_variables_type(
            UNDEFINED, EMPTY_OBJECT, EMPTY_OBJECT, EMPTY_OBJECT, OptionalityFlags(),
            context_type_name="FetcherContext", with_context_type=True,
        )
        assert isinstance(result, IntersectionType)
        assert result.types[1] == Reference(name="FetcherContext")
        assert set(_members(result.types[0])) == {"headers", "pathParams", "queryParams"}
