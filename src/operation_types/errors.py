"""Exceptions raised while loading documents and resolving schemas."""


class OperationTypesError(Exception):
    """Base class for all errors raised by operation-types."""


class DocumentError(OperationTypesError):
    """The input is not a usable OpenAPI 3 document."""


class UnresolvedReferenceError(OperationTypesError):
    """A `$ref` points outside the document or at a missing component."""

    def __init__(self, ref: str):
        super().__init__(f"Cannot resolve reference: {ref}")
        self.ref = ref


class ConfigError(OperationTypesError):
    """The generator configuration file is invalid."""


class DuplicateDeclarationError(OperationTypesError):
    """Two declarations in one output share a name."""

    def __init__(self, names: list[str]):
        super().__init__(f"Duplicate declaration name(s): {', '.join(names)}")
        self.names = names
