import enum
from typing import Any, Optional, Union

from pydantic import Field

from .general import Reference
from .schemas import Schema
from ..base import ObjectBase


class _In(str, enum.Enum):
    query = "query"
    header = "header"
    path = "path"
    formData = "formData"
    body = "body"


class Parameter(ObjectBase):
    """
    Describes a single operation parameter.

    Swagger 2.0 has no request examples, the `x-examples` extension keyed by
    media type carries them on the body parameter.

    .. _Parameter Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#parameter-object
    """

    name: str = Field()
    in_: _In = Field(alias="in")

    description: Optional[str] = Field(default=None)
    required: Optional[bool] = Field(default=None)

    schema_: Optional[Union[Reference, Schema]] = Field(default=None, alias="schema")
    examples: Optional[dict[str, Any]] = Field(default=None, alias="x-examples")
