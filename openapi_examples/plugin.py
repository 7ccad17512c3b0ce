import dataclasses
from typing import TYPE_CHECKING, Any, Optional, TypeGuard
import abc


if TYPE_CHECKING:
    from .description import RootType

"""
plugins are invoked while the description document passes from the raw dict to the initialized object model
"""


class Plugin(abc.ABC):
    """
    plugins hold no reference to the document, one plugin may serve several documents
    """

    @dataclasses.dataclass
    class Context: ...


class Init(Plugin):
    @dataclasses.dataclass
    class Context:
        initialized: Optional["RootType"] = None
        """available in :func:`~openapi_examples.plugin.Init.initialized`"""

    def initialized(self, ctx: "Init.Context") -> "Init.Context":  # pragma: no cover
        """the object model is initialized, modify it before it is emitted"""
        return ctx  # noqa


class Document(Plugin):
    """
    parsed(dict)
    """

    @dataclasses.dataclass
    class Context:
        document: dict[str, Any]
        """available in :func:`~openapi_examples.plugin.Document.parsed`"""

    def parsed(self, ctx: "Document.Context") -> "Document.Context":  # pragma: no cover
        """modify the parsed dict before validating the object model"""
        return ctx  # noqa


class Domain:
    def __init__(self, ctx, plugins: list[Plugin]):
        self.ctx = ctx
        self.plugins = plugins

    def __getattr__(self, name: str) -> "Method":
        return Method(name, self)


class Method:
    def __init__(self, name: str, domain: Domain):
        self.name = name
        self.domain = domain

    def __call__(self, **kwargs):
        r = self.domain.ctx(**kwargs)
        for plugin in self.domain.plugins:
            method = getattr(plugin, self.name, None)
            if method is None:
                continue
            r = method(r) or r
        return r


class Plugins:
    _domains: dict[str, type[Plugin]] = {"init": Init, "document": Document}

    def __init__(self, plugins: list[Plugin]):
        for p in plugins:
            if not isinstance(p, Plugin):
                raise TypeError(f"Plugin expected, got {type(p).__name__}")

        self._init = self._get_domain("init", plugins)
        self._document = self._get_domain("document", plugins)

    def _get_domain(self, name: str, plugins: list[Plugin]) -> "Domain":
        domain: type[Plugin] | None
        if (domain := self._domains.get(name)) is None:
            raise ValueError(name)  # noqa

        def domain_type_f(p: Plugin) -> TypeGuard[Plugin]:
            return isinstance(p, domain)

        p: list[Plugin] = list(filter(domain_type_f, plugins))
        return Domain(domain.Context, p)

    @property
    def init(self) -> Domain:
        return self._init

    @property
    def document(self) -> Domain:
        return self._document
