from typing import Any, Iterable, Optional, Union
import abc
import base64
import collections.abc
import datetime
import decimal
import enum
import json
import logging
import math
import re
import uuid

import yaml

from .errors import ConfigurationError, SerializationError
from .settings import SerializerSettings


class Renderer(abc.ABC):
    """
    Renders the plain value of an example as text for one family of media types.
    """

    @abc.abstractmethod
    def render(self, plain: Any, settings: SerializerSettings) -> str: ...


class JSONRenderer(Renderer):
    def render(self, plain: Any, settings: SerializerSettings) -> str:
        try:
            return json.dumps(
                plain, indent=settings.indent, sort_keys=settings.sort_keys, ensure_ascii=False, allow_nan=False
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(plain, str(e)) from e


class YAMLRenderer(Renderer):
    def render(self, plain: Any, settings: SerializerSettings) -> str:
        try:
            return yaml.safe_dump(
                plain,
                indent=settings.indent or None,
                sort_keys=settings.sort_keys,
                allow_unicode=True,
                default_flow_style=False,
            )
        except yaml.YAMLError as e:
            raise SerializationError(plain, str(e)) from e


class TextRenderer(Renderer):
    """strings as they are, everything else as compact json"""

    def render(self, plain: Any, settings: SerializerSettings) -> str:
        if isinstance(plain, str):
            return plain
        try:
            return json.dumps(plain, sort_keys=settings.sort_keys, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(plain, str(e)) from e


class Renderers:
    """
    The renderers by media type, matched in registration order.

    A pattern is either the media type as str or a compiled regular expression
    which has to match the whole media type.  Parameters such as ``charset``
    and the case of the media type are ignored for matching.
    """

    def __init__(self, defaults: bool = True) -> None:
        self._renderers: list[tuple[Union[str, re.Pattern], Renderer]] = []
        if defaults:
            self.register(re.compile(r"(application|text)/json|[^/]+/[^+]+\+json"), JSONRenderer())
            self.register(re.compile(r"(application|text)/(x-)?yaml|[^/]+/[^+]+\+yaml"), YAMLRenderer())
            self.register("text/plain", TextRenderer())

    @staticmethod
    def _normalize(media_type: str) -> str:
        return media_type.split(";", 1)[0].strip().lower()

    def register(self, pattern: Union[str, re.Pattern], renderer: Renderer, first: bool = False) -> "Renderers":
        if not isinstance(renderer, Renderer):
            raise ConfigurationError(f"renderer expected, got {type(renderer).__name__}", renderer)
        if isinstance(pattern, str):
            pattern = self._normalize(pattern)
        elif not isinstance(pattern, re.Pattern):
            raise ConfigurationError(f"media type pattern expected, got {type(pattern).__name__}", pattern)
        if first:
            self._renderers.insert(0, (pattern, renderer))
        else:
            self._renderers.append((pattern, renderer))
        return self

    def lookup(self, media_type: str) -> Optional[Renderer]:
        mt = self._normalize(media_type)
        for pattern, renderer in self._renderers:
            if (isinstance(pattern, str) and pattern == mt) or (
                isinstance(pattern, re.Pattern) and pattern.fullmatch(mt)
            ):
                return renderer
        return None


class ExampleFormatter:
    log = logging.getLogger("openapi_examples.ExampleFormatter")

    def __init__(self, renderers: Optional[Renderers] = None) -> None:
        self.renderers = renderers if renderers is not None else Renderers()

    def format(self, value: Any, settings: SerializerSettings, content_types: Iterable[str]) -> dict[str, str]:
        """
        Render value for each of the content types.

        :param value: the example
        :param settings: the serializer settings
        :param content_types: the content types declared for the response or request body
        :return: the formatted example by content type, content types without renderer are skipped
        :raises SerializationError: if the value can not be serialized
        """
        if value is None:
            return dict()

        plain = _unset = object()
        r = dict()
        for content_type in content_types:
            if (renderer := self.renderers.lookup(content_type)) is None:
                self.log.debug(f"no renderer for {content_type} - skipped")
                continue
            if plain is _unset:
                plain = self.plain(value, settings)
            try:
                r[content_type] = renderer.render(plain, settings)
            except SerializationError:
                raise
            except Exception as e:
                raise SerializationError(plain, f"{type(renderer).__name__} failed: {e}") from e
        return r

    def plain(self, value: Any, settings: SerializerSettings) -> Any:
        """
        reduce value to a tree of dict, list, str, int, float, bool and None
        """
        try:
            return self._plain(value, settings, set())
        except RecursionError as e:
            raise SerializationError(value, "maximum nesting depth exceeded") from e

    def _plain(self, value: Any, settings: SerializerSettings, seen: set[int]) -> Any:
        for converter in settings.converters:
            if converter.can_convert(value):
                try:
                    value = converter.convert(value)
                except Exception as e:
                    raise SerializationError(value, f"{type(converter).__name__} failed: {e}") from e
                break

        if value is None:
            return value
        elif isinstance(value, enum.Enum):
            return self._plain(value.value, settings, seen)
        elif isinstance(value, bool):
            return bool(value)
        elif isinstance(value, str):
            return str(value)
        elif isinstance(value, int):
            return int(value)
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise SerializationError(value, "non-finite float")
            return float(value)
        elif isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
            return value.isoformat()
        elif isinstance(value, datetime.timedelta):
            return value.total_seconds()
        elif isinstance(value, (uuid.UUID, decimal.Decimal)):
            return str(value)
        elif isinstance(value, (bytes, bytearray)):
            return base64.b64encode(value).decode()

        if id(value) in seen:
            raise SerializationError(value, "cyclic reference")
        seen.add(id(value))
        try:
            if isinstance(value, collections.abc.Mapping):
                r = dict()
                for k, v in value.items():
                    if isinstance(k, enum.Enum):
                        k = k.value
                    if not isinstance(k, (str, int, float, bool)):
                        raise SerializationError(value, f"unsupported key type {type(k).__name__}")
                    r[str(k)] = self._plain(v, settings, seen)
                return r
            elif isinstance(value, (list, tuple)):
                return [self._plain(i, settings, seen) for i in value]
            elif isinstance(value, (set, frozenset)):
                return [self._plain(i, settings, seen) for i in value]
            try:
                properties = settings.resolver.properties(value)
            except Exception as e:
                raise SerializationError(value, f"{type(settings.resolver).__name__} failed: {e}") from e
            if properties is not None:
                r = dict()
                for k, v in properties.items():
                    if v is None and settings.exclude_none:
                        continue
                    r[k] = self._plain(v, settings, seen)
                return r
            raise SerializationError(value, f"unsupported type {type(value).__name__}")
        finally:
            seen.discard(id(value))
