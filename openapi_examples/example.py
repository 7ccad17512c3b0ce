from typing import Any, Dict, Optional, Sequence, Union
import logging

from . import v20
from . import v30
from .formatter import ExampleFormatter
from .settings import Converter, Resolver, SerializerSettings, SerializerSettingsDuplicator

DEFAULT_MEDIA_TYPES = ("application/json",)

OperationType = Union[v20.Operation, v30.Operation]


class _Example:
    """
    The settings resolution shared by the request and response examples.

    Explicit settings are used verbatim, otherwise each call gets a duplicate of
    the base settings with the overrides applied.
    """

    def __init__(
        self,
        formatter: ExampleFormatter,
        settings: Optional[SerializerSettings],
        duplicator: SerializerSettingsDuplicator,
    ) -> None:
        self.formatter = formatter
        self.settings = settings
        self.duplicator = duplicator

    def _settings(self, resolver: Optional[Resolver], converter: Optional[Converter]) -> SerializerSettings:
        if self.settings is not None:
            return self.settings
        return self.duplicator.settings(resolver, converter)

    @staticmethod
    def _check(operation: Any) -> None:
        if not isinstance(operation, (v20.Operation, v30.Operation)):
            raise TypeError(f"Operation expected, got {type(operation).__name__}")

    def _install(
        self, name: str, content: Dict[str, v30.MediaType], example: Any, settings: SerializerSettings
    ) -> None:
        """
        set the example of each media type, media types with named examples are left alone
        as example and examples are mutually exclusive
        """
        content_types = []
        for content_type, media in content.items():
            if media.examples:
                self.log.debug(f"{name}: {content_type} has named examples - skipped")
                continue
            content_types.append(content_type)

        for content_type, text in self.formatter.format(example, settings, content_types).items():
            content[content_type].example = text


class ResponseExample(_Example):
    log = logging.getLogger("openapi_examples.ResponseExample")

    def set_response_example_for_status_code(
        self,
        operation: OperationType,
        status_code: Union[int, str],
        example: Any,
        resolver: Optional[Resolver] = None,
        converter: Optional[Converter] = None,
        media_types: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Attach the example to the response for the status code.

        Undeclared status codes and responses given as Reference are left alone.

        :param operation: the operation, modified in place
        :param status_code: the status code, compared to the responses keys as str
        :param example: the example value, None is a no-op
        :param resolver: resolver override for duplicated settings
        :param converter: converter override for duplicated settings
        :param media_types: Swagger 2.0 - the document produces if the operation has none
        :raises SerializationError: the example can not be serialized
        :raises ConfigurationError: an override is malformed
        """
        self._check(operation)

        if example is None:
            return

        # str() of an IntEnum such as HTTPStatus is its member name before 3.11
        key = str(int(status_code)) if isinstance(status_code, int) else str(status_code)
        name = operation.operationId or "-"

        if (response := operation.response(key)) is None:
            self.log.debug(f"{name}: no response {key} declared - skipped")
            return

        settings = self._settings(resolver, converter)

        if isinstance(operation, v20.Operation):
            content_types = operation.produces or media_types or DEFAULT_MEDIA_TYPES
            if formatted := self.formatter.format(example, settings, content_types):
                response.examples = formatted
        else:
            self._install(name, response.content, example, settings)


class RequestExample(_Example):
    log = logging.getLogger("openapi_examples.RequestExample")

    def set_request_example(
        self,
        operation: OperationType,
        example: Any,
        resolver: Optional[Resolver] = None,
        converter: Optional[Converter] = None,
        media_types: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Attach the example to the request body of the operation.

        :param operation: the operation, modified in place
        :param example: the example value, None is a no-op
        :param resolver: resolver override for duplicated settings
        :param converter: converter override for duplicated settings
        :param media_types: Swagger 2.0 - the document consumes if the operation has none
        """
        self._check(operation)

        if example is None:
            return

        name = operation.operationId or "-"

        if (body := operation.body()) is None:
            self.log.debug(f"{name}: no request body declared - skipped")
            return

        settings = self._settings(resolver, converter)

        if isinstance(operation, v20.Operation):
            content_types = operation.consumes or media_types or DEFAULT_MEDIA_TYPES
            if formatted := self.formatter.format(example, settings, content_types):
                body.examples = formatted
        else:
            self._install(name, body.content, example, settings)
