from typing import Optional

from pydantic import Field

from .general import Info
from .paths import Paths
from ..base import ObjectBase


class Root(ObjectBase):
    """
    This is the root document object of a Swagger 2.0 description document.

    https://github.com/OAI/OpenAPI-Specification/blob/main/versions/2.0.md#swagger-object
    """

    swagger: str = Field(...)
    info: Info = Field(...)
    host: Optional[str] = Field(default=None)
    basePath: Optional[str] = Field(default=None)
    consumes: list[str] = Field(default_factory=list)
    produces: list[str] = Field(default_factory=list)
    paths: Paths = Field(default_factory=lambda: Paths.model_validate({}))
