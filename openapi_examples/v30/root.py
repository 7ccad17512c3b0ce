from typing import Any, Optional

from pydantic import Field

from ..base import ObjectBase

from .general import Info
from .paths import Paths


class Root(ObjectBase):
    """
    This class represents the root of the OpenAPI description document, as
    defined `here`_

    OpenAPI 3.1 documents share the response and media type layout and are
    parsed with the same models.

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#openapi-object
    """

    openapi: str = Field(...)
    info: Info = Field(...)
    paths: Paths = Field(default_factory=lambda: Paths.model_validate({}))
    components: Optional[dict[str, Any]] = Field(default=None)
