from typing import Any, Callable, Hashable, Union
import abc

from .errors import ConfigurationError


class Services:
    """
    The services available to a :class:`ContextualExamplesProvider`.
    """

    def __init__(self, **services: Any) -> None:
        self._services: dict[Hashable, Any] = dict(services)

    def register(self, key: Hashable, service: Any) -> "Services":
        self._services[key] = service
        return self

    def get(self, key: Hashable) -> Any:
        try:
            return self._services[key]
        except KeyError:
            raise LookupError(f"no service registered for {key!r}") from None

    __getitem__ = get

    def __contains__(self, key: Hashable) -> bool:
        return key in self._services


class ExamplesProvider(abc.ABC):
    """
    Provides the example value, must be deterministic within a generation pass.
    """

    @abc.abstractmethod
    def get_examples(self) -> Any: ...


class ContextualExamplesProvider(abc.ABC):
    """
    Provides the example value using services looked up in the :class:`Services`.
    """

    @abc.abstractmethod
    def get_examples(self, services: Services) -> Any: ...


ProviderType = Union[ExamplesProvider, ContextualExamplesProvider, Callable[[], Any]]


def check(provider: Any) -> ProviderType:
    if isinstance(provider, (ExamplesProvider, ContextualExamplesProvider)) or callable(provider):
        return provider
    raise ConfigurationError(f"examples provider expected, got {type(provider).__name__}", provider)


def provide(provider: ProviderType, services: Services) -> Any:
    if isinstance(provider, ContextualExamplesProvider):
        return provider.get_examples(services)
    elif isinstance(provider, ExamplesProvider):
        return provider.get_examples()
    return provider()
