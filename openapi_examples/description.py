from typing import Any, Dict, Iterator, List, Optional, Tuple, Union, cast
import copy
import json
import logging
import re
from pathlib import Path

import yaml

from . import log
from . import v20
from . import v30
from .errors import SpecError
from .plugin import Plugin, Plugins

RootType = Union[v20.Root, v30.Root]
OperationType = Union[v20.Operation, v30.Operation]


class YAML12Loader(yaml.SafeLoader):
    """
    OpenAPI uses YAML 1.2, pyyaml is limited to 1.1

    remove all implicit tags from the SafeLoader and add the YAML 1.2 core tags,
    so e.g. status codes stay int and dates stay str
    """

    _core_resolvers = [
        ["bool", re.compile(r"""^(?:true|True|TRUE|false|False|FALSE)$""", re.X), list("tTfF")],
        [
            "int",
            re.compile(
                r"""^(?:
                                  |0o[0-7]+
                                  |[-+]?(?:[0-9]+)
                                  |0x[0-9a-fA-F]+
                                  )$""",
                re.X,
            ),
            list("-+0123456789"),
        ],
        [
            "float",
            re.compile(
                r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+(\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
                                  |[-+]?\.(?:inf|Inf|INF)
                                  |\.(?:nan|NaN|NAN))$""",
                re.X,
            ),
            list("-+0123456789."),
        ],
        ["null", re.compile(r"""^(?:~||null|Null|NULL)$""", re.X), ["~", "n", "N", ""]],
    ]
    """
    core tags from
    https://github.com/yaml/pyyaml/pull/700/files
    """


YAML12Loader.yaml_implicit_resolvers = {}
for _tag, _regex, _initial in YAML12Loader._core_resolvers:
    YAML12Loader.add_implicit_resolver(f"tag:yaml.org,2002:{_tag}", _regex, _initial)


class Description:
    """
    A description document: parsed into the object model, passed through the plugins, emitted again.
    """

    log = logging.getLogger("openapi_examples.Description")

    @classmethod
    def loads(cls, data: str, plugins: Optional[List[Plugin]] = None) -> "Description":
        """
        :param data: description document as YAML or JSON text
        :param plugins: plugins modifying the document
        """
        try:
            document = yaml.load(data, Loader=YAML12Loader)
        except yaml.YAMLError as e:
            raise SpecError(f"description document can not be parsed: {e}") from e
        if not isinstance(document, dict):
            raise SpecError(f"description document must be a mapping, got {type(document).__name__}")
        return cls(document, plugins)

    @classmethod
    def load_file(cls, path: Union[str, Path], plugins: Optional[List[Plugin]] = None) -> "Description":
        """
        :param path: path of the description document
        :param plugins: plugins modifying the document
        """
        return cls.loads(Path(path).read_text(), plugins)

    @classmethod
    def _parse_obj(cls, document: Dict[str, Any]) -> RootType:
        if (version := document.get("openapi", None)) is not None:
            v = str(version).split(".")
            if v[0] == "3" and v[1:2] in (["0"], ["1"]):
                return v30.Root.model_validate(document)
            raise SpecError(f"openapi version {version} not supported")

        if (version := document.get("swagger", None)) is not None:
            if str(version) == "2.0":
                return v20.Root.model_validate(document)
            raise SpecError(f"swagger version {version} not supported")

        raise SpecError("missing openapi/swagger field")

    def __init__(self, document: Dict[str, Any], plugins: Optional[List[Plugin]] = None) -> None:
        """
        :param document: the parsed description document, not modified
        :param plugins: plugins modifying the document
        """
        log.init()

        self.plugins = Plugins(plugins or [])

        document = self.plugins.document.parsed(document=copy.deepcopy(document)).document
        self._root: RootType = self._parse_obj(cast(Dict[str, Any], document))

        self.plugins.init.initialized(initialized=self._root)

    @property
    def root(self) -> RootType:
        return self._root

    @property
    def paths(self):
        return self._root.paths

    @property
    def version(self) -> str:
        if isinstance(self._root, v20.Root):
            return self._root.swagger
        return self._root.openapi

    def operation(self, method: str, path: str) -> Optional[OperationType]:
        if (item := self.paths.get(path)) is None:
            return None
        return getattr(item, method.lower(), None)

    def operations(self) -> Iterator[Tuple[str, str, OperationType]]:
        for path, item in self.paths.items():
            for method, operation in item.operations():
                yield method, path, operation

    def dump(self) -> Dict[str, Any]:
        return self._root.model_dump(by_alias=True, exclude_unset=True, mode="json")

    def dumps(self, fmt: str = "json") -> str:
        data = self.dump()
        if fmt == "json":
            return json.dumps(data, indent=2, ensure_ascii=False)
        elif fmt in ("yaml", "yml"):
            return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
        raise ValueError(fmt)
