from typing import Any, Optional

from pydantic import Field

from ..base import ObjectBase


class Schema(ObjectBase):
    """
    The Schema Object allows the definition of input and output data types.

    Only the members the examples subsystem reads are modelled, everything else
    is kept verbatim.

    https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#schema-object
    """

    ref: Optional[str] = Field(default=None, alias="$ref")
    type: Optional[str] = Field(default=None)
    example: Optional[Any] = Field(default=None)
