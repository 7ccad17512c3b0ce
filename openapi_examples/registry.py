"""
The registration of example providers and their application to a description document.

::

    examples = Examples()
    examples.response("listPets", lambda: [{"id": 1, "name": "Rex"}])
    examples.response(("get", "/pets/{petId}"), PetNotFound(), status_code=404)
    api = Description.load_file("petstore.yaml", plugins=[examples])
"""

from typing import Iterator, Optional, Union
import dataclasses
import enum
import logging

from . import v20
from .base import HTTP_METHODS
from .errors import ExampleError, ProviderError
from .example import OperationType, RequestExample, ResponseExample
from .formatter import ExampleFormatter, Renderers
from .plugin import Init
from .providers import ProviderType, Services, check, provide
from .settings import Converter, Resolver, SerializerSettings, SerializerSettingsDuplicator

OperationKey = Union[str, tuple[str, str]]


class Target(str, enum.Enum):
    request = "request"
    response = "response"


@dataclasses.dataclass(frozen=True)
class Registration:
    target: Target
    operation: OperationKey
    provider: ProviderType
    status_code: Optional[int] = None
    resolver: Optional[Resolver] = None
    converter: Optional[Converter] = None

    def __str__(self):
        if isinstance(self.operation, tuple):
            name = f"{self.operation[0].upper()} {self.operation[1]}"
        else:
            name = self.operation
        if self.target == Target.response:
            return f"{name} {self.status_code}"
        return f"{name} request"


@dataclasses.dataclass
class ExampleFailure:
    """
    A single example which could not be attached during a generation pass.
    """

    registration: Registration
    error: ExampleError

    def __str__(self):
        return f"{self.registration}: {self.error}"


class Examples(Init):
    """
    The Examples plugin attaches the examples of the registered providers to the operations of the document.
    """

    log = logging.getLogger("openapi_examples.Examples")

    def __init__(
        self,
        settings: Optional[SerializerSettings] = None,
        base: Optional[SerializerSettings] = None,
        services: Optional[Services] = None,
        renderers: Optional[Renderers] = None,
    ) -> None:
        """
        :param settings: serializer settings used verbatim for all examples, overrides are ignored
        :param base: the settings duplicated for each example if no explicit settings are given
        :param services: the services for contextual providers
        :param renderers: the renderers by media type
        """
        super().__init__()
        self.services = services if services is not None else Services()
        self.duplicator = SerializerSettingsDuplicator(base)
        self.formatter = ExampleFormatter(renderers)
        self.request_example = RequestExample(self.formatter, settings, self.duplicator)
        self.response_example = ResponseExample(self.formatter, settings, self.duplicator)
        self.registrations: list[Registration] = []
        self.failures: list[ExampleFailure] = []

    @staticmethod
    def _operation_key(operation: OperationKey) -> OperationKey:
        if isinstance(operation, str):
            return operation
        method, path = operation
        if (method := method.lower()) not in HTTP_METHODS:
            raise ValueError(f"{method} is not a HTTP method")
        return method, path

    def response(
        self,
        operation: OperationKey,
        provider: ProviderType,
        status_code: int = 200,
        resolver: Optional[Resolver] = None,
        converter: Optional[Converter] = None,
    ) -> "Examples":
        """
        register a response example

        :param operation: the operationId or (method, path)
        :param provider: the examples provider
        :param status_code: the status code of the response
        """
        r = Registration(
            Target.response, self._operation_key(operation), check(provider), status_code, resolver, converter
        )
        self.registrations.append(r)
        return self

    def request(
        self,
        operation: OperationKey,
        provider: ProviderType,
        resolver: Optional[Resolver] = None,
        converter: Optional[Converter] = None,
    ) -> "Examples":
        """
        register a request body example

        :param operation: the operationId or (method, path)
        :param provider: the examples provider
        """
        r = Registration(Target.request, self._operation_key(operation), check(provider), None, resolver, converter)
        self.registrations.append(r)
        return self

    @staticmethod
    def _operations(root) -> Iterator[tuple[str, str, OperationType]]:
        for path, item in root.paths.items():
            for method, operation in item.operations():
                yield path, method, operation

    def _lookup(self, root, key: OperationKey) -> Optional[OperationType]:
        if isinstance(key, tuple):
            method, path = key
            if (item := root.paths.get(path)) is None:
                return None
            return getattr(item, method, None)
        for _, _, operation in self._operations(root):
            if operation.operationId == key:
                return operation
        return None

    def _apply(self, root, registration: Registration, operation: OperationType) -> None:
        try:
            example = provide(registration.provider, self.services)
        except Exception as e:
            raise ProviderError(registration.provider, f"{type(e).__name__}: {e}") from e

        if registration.target == Target.response:
            media_types = root.produces if isinstance(root, v20.Root) else None
            self.response_example.set_response_example_for_status_code(
                operation,
                registration.status_code,
                example,
                registration.resolver,
                registration.converter,
                media_types,
            )
        else:
            media_types = root.consumes if isinstance(root, v20.Root) else None
            self.request_example.set_request_example(
                operation, example, registration.resolver, registration.converter, media_types
            )

    def apply(self, root) -> list[ExampleFailure]:
        """
        Attach the examples of all registrations to the document, in order of registration.

        A failing example is logged and recorded, the remaining examples are attached.

        :param root: the document
        :return: the failures of this pass
        """
        failures = []
        for registration in self.registrations:
            if (operation := self._lookup(root, registration.operation)) is None:
                self.log.debug(f"{registration}: operation not declared - skipped")
                continue
            try:
                self._apply(root, registration, operation)
            except ExampleError as e:
                self.log.warning(f"{registration}: example skipped {e}")
                failures.append(ExampleFailure(registration, e))
        return failures

    def initialized(self, ctx: "Init.Context") -> "Init.Context":
        self.failures = self.apply(ctx.initialized)
        return ctx
