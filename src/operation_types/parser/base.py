"""Data models for parsed OpenAPI documents.

The parser converts an OpenAPI 3 document into these models; the type
generator only ever reads them.
"""

from pydantic import BaseModel, ConfigDict


class ParameterDescriptor(BaseModel):
    """A single operation parameter (path, query, header, or cookie)."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str  # path / query / header / cookie
    required: bool | None = False  # None when the document gives no usable value
    param_schema: dict | bool = {}  # raw schema, {"$ref": ...}, or an OpenAPI 3.1 boolean schema
    description: str = ""


class OperationDescriptor(BaseModel):
    """One method + path pair with the raw fragments needed to derive its types."""

    model_config = ConfigDict(frozen=True)

    operation_id: str
    method: str  # GET / POST / PUT / DELETE / PATCH ...
    path: str  # /pets/{petId}
    summary: str = ""
    tags: list[str] = []
    parameters: list[ParameterDescriptor] = []  # path-item level first, operation level last
    request_body: dict | None = None  # raw request body or {"$ref": ...}
    responses: dict[str, dict] = {}  # {status_code: raw response or {"$ref": ...}}


class ApiDocument(BaseModel):
    """A parsed OpenAPI document: its operations plus the shared component table."""

    title: str = ""
    version: str = ""
    components: dict = {}
    operations: list[OperationDescriptor] = []

    def get_operation(self, operation_id: str) -> OperationDescriptor | None:
        for operation in self.operations:
            if operation.operation_id == operation_id:
                return operation
        return None
