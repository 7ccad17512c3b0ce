from typing import Any

from pydantic import Field

from ..base import ObjectBase


class Example(ObjectBase):
    """
    A `Example Object`_ is a named example of a media type

    .. _Example Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#example-object
    """

    summary: str | None = Field(default=None)
    description: str | None = Field(default=None)
    value: Any | None = Field(default=None)
    externalValue: str | None = Field(default=None)
