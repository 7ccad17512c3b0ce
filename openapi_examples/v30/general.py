from typing import Any, Optional

from pydantic import ConfigDict, Field, PrivateAttr

from ..base import ObjectBase, ReferenceBase


class Reference(ObjectBase, ReferenceBase):
    """
    A `Reference Object`_ designates a reference to another node in the description document.

    .. _Reference Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#reference-object
    """

    ref: str = Field(alias="$ref")

    _target: Any = PrivateAttr(default=None)

    model_config = ConfigDict(
        extra="forbid",
    )


class Info(ObjectBase):
    """
    An OpenAPI Info object, as defined `here`_.

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#info-object
    """

    title: str = Field(...)
    version: str = Field(...)
    description: Optional[str] = Field(default=None)
