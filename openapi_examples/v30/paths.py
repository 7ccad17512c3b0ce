from typing import Union, Optional

from pydantic import Field, field_validator

from ..base import ObjectBase, PathsBase, OperationBase, PathItemBase
from .general import Reference
from .media import MediaType


class RequestBody(ObjectBase):
    """
    A `RequestBody`_ object describes a single request body.

    .. _RequestBody: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#request-body-object
    """

    description: Optional[str] = Field(default=None)
    content: dict[str, MediaType] = Field(...)
    required: Optional[bool] = Field(default=False)


class Response(ObjectBase):
    """
    A `Response Object`_ describes a single response from an API Operation.

    .. _Response Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#responses-object
    """

    description: str = Field(...)
    content: dict[str, MediaType] = Field(default_factory=dict)


class Operation(ObjectBase, OperationBase):
    """
    An Operation object as defined `here`_

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#operation-object
    """

    tags: Optional[list[str]] = Field(default=None)
    summary: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    operationId: Optional[str] = Field(default=None)
    requestBody: Optional[Union[Reference, RequestBody]] = Field(default=None)
    responses: dict[str, Union[Reference, Response]] = Field(...)

    @field_validator("responses", mode="before")
    @classmethod
    def validate_Operation_responses(cls, value):
        """status codes may be parsed as int"""
        if isinstance(value, dict):
            return {str(k): v for k, v in value.items()}
        return value

    def body(self) -> Optional[RequestBody]:
        if isinstance(self.requestBody, RequestBody):
            return self.requestBody
        return None


class PathItem(ObjectBase, PathItemBase):
    """
    A Path Item, as defined `here`_.
    Describes the operations available on a single path.

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#paths-object
    """

    ref: Optional[str] = Field(default=None, alias="$ref")
    summary: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    get: Optional[Operation] = Field(default=None)
    put: Optional[Operation] = Field(default=None)
    post: Optional[Operation] = Field(default=None)
    delete: Optional[Operation] = Field(default=None)
    options: Optional[Operation] = Field(default=None)
    head: Optional[Operation] = Field(default=None)
    patch: Optional[Operation] = Field(default=None)
    trace: Optional[Operation] = Field(default=None)


class Paths(PathsBase):
    paths: dict[str, PathItem]
