from typing import Any, Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

HTTP_METHODS = frozenset(["get", "delete", "head", "options", "post", "put", "patch", "trace"])


class ObjectBase(BaseModel):
    """
    The base class for all description document objects.

    Keys which are not modelled are kept as extra fields, so emitting a parsed
    document reproduces everything the examples subsystem does not touch.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, validate_assignment=False)


class ReferenceBase:
    pass


class PathsBase(ObjectBase):
    paths: Dict[str, Any]
    extensions: Dict[str, Any]

    @model_validator(mode="before")
    def validate_Paths(cls, values):
        assert values is not None and isinstance(values, dict)
        p = {}
        e = {}
        for k, v in values.items():
            if k[:2] == "x-":
                e[k] = v
            else:
                p[k] = v
        return {"paths": p, "extensions": e}

    def __getitem__(self, item):
        return self.paths[item]

    def __contains__(self, item):
        return item in self.paths

    def get(self, item, default=None):
        return self.paths.get(item, default)

    def items(self):
        return self.paths.items()

    def values(self):
        return self.paths.values()

    @model_serializer(mode="wrap")
    def serialize_Paths(self, handler):
        r = dict(handler(self).get("paths", {}))
        r.update(self.extensions)
        return r


class PathItemBase:
    def operations(self) -> Iterator[Tuple[str, "OperationBase"]]:
        for method in sorted(HTTP_METHODS):
            if (op := getattr(self, method, None)) is not None:
                yield method, op


class OperationBase:
    def response(self, status_code: str) -> Optional["ObjectBase"]:
        """
        the response for the status code, a Reference is a shared component and not returned

        :param status_code: the status code as used as key in the responses
        """
        r = self.responses.get(status_code, None)
        if r is None or isinstance(r, ReferenceBase):
            return None
        return r
