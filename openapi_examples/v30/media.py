from typing import Union, Optional, Dict, Any

from pydantic import Field

from ..base import ObjectBase

from .example import Example
from .general import Reference


class MediaType(ObjectBase):
    """
    A `MediaType`_ object provides schema and examples for the media type identified
    by its key.  These are used in a RequestBody object.

    .. _MediaType: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#media-type-object
    """

    schema_: Optional[Dict[str, Any]] = Field(default=None, alias="schema")
    example: Optional[Any] = Field(default=None)  # 'any' type
    examples: Dict[str, Union[Reference, Example]] = Field(default_factory=dict)
