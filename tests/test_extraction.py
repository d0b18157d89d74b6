from operation_types.generator.extraction import extract, should_extract
from operation_types.types import (
    EMPTY_OBJECT,
    UNDEFINED,
    UNKNOWN,
    ArrayType,
    IntersectionType,
    LiteralType,
    ObjectMember,
    ObjectType,
    Primitive,
    Reference,
    TypeDeclaration,
    UnionType,
)

STRING = Primitive(name="string")
OBJ = ObjectType(members=(ObjectMember(name="id", type=STRING),))


class TestShouldExtract:
    def test_extraction_worthy(self):
        assert should_extract(OBJ)
        assert should_extract(ArrayType(items=STRING))
        assert should_extract(IntersectionType(types=(OBJ, Reference(name="Context"))))
        assert should_extract(ObjectType(index_type=STRING))

    def test_stays_inline(self):
        assert not should_extract(STRING)
        assert not should_extract(UNDEFINED)
        assert not should_extract(UNKNOWN)
        assert not should_extract(LiteralType(value=1))
        assert not should_extract(EMPTY_OBJECT)
        assert not should_extract(Reference(name="Pet"))
        assert not should_extract(UnionType(types=(OBJ, STRING)))
        assert not should_extract(IntersectionType(types=(OBJ,)))


class TestExtract:
    def test_extracts_to_reference(self):
        expr, decls = extract(OBJ, "GetPetResponse")
        assert expr == Reference(name="GetPetResponse")
        assert decls == (TypeDeclaration(name="GetPetResponse", type=OBJ),)

    def test_inline_types_pass_through(self):
        assert extract(STRING, "GetPetResponse") == (STRING, ())

    def test_force(self):
        expr, decls = extract(STRING, "GetPetVariables", force=True)
        assert expr == Reference(name="GetPetVariables")
        assert decls[0].type == STRING
