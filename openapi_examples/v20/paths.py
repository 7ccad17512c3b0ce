from typing import Any, Optional, Union

from pydantic import Field, field_validator

from .general import Reference
from .parameter import Parameter, _In
from .schemas import Schema
from ..base import ObjectBase, PathsBase, OperationBase, PathItemBase


class Response(ObjectBase):
    """
    Describes a single response from an API Operation.

    .. _Response Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#response-object
    """

    description: str = Field(...)
    schema_: Optional[Union[Reference, Schema]] = Field(default=None, alias="schema")
    examples: Optional[dict[str, Any]] = Field(default=None)


class Operation(ObjectBase, OperationBase):
    """
    An Operation object as defined `here`_

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#operation-object
    """

    tags: Optional[list[str]] = Field(default=None)
    summary: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    operationId: Optional[str] = Field(default=None)
    consumes: list[str] = Field(default_factory=list)
    produces: list[str] = Field(default_factory=list)
    parameters: list[Union[Reference, Parameter]] = Field(default_factory=list)
    responses: dict[str, Union[Reference, Response]] = Field(default_factory=dict)

    @field_validator("responses", mode="before")
    @classmethod
    def validate_Operation_responses(cls, value):
        """status codes may be parsed as int"""
        if isinstance(value, dict):
            return {str(k): v for k, v in value.items()}
        return value

    def body(self) -> Optional[Parameter]:
        for p in self.parameters:
            if isinstance(p, Parameter) and p.in_ == _In.body:
                return p
        return None


class PathItem(ObjectBase, PathItemBase):
    """
    A Path Item, as defined `here`_.
    Describes the operations available on a single path.

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#path-item-object
    """

    ref: Optional[str] = Field(default=None, alias="$ref")
    get: Optional[Operation] = Field(default=None)
    put: Optional[Operation] = Field(default=None)
    post: Optional[Operation] = Field(default=None)
    delete: Optional[Operation] = Field(default=None)
    options: Optional[Operation] = Field(default=None)
    head: Optional[Operation] = Field(default=None)
    patch: Optional[Operation] = Field(default=None)
    parameters: list[Union[Reference, Parameter]] = Field(default_factory=list)


class Paths(PathsBase):
    paths: dict[str, PathItem]
