"""
Serializer settings for examples and their duplication.

The base settings are shared by every generation pass in the process, they
are frozen and customisation always works on a deep copy.
"""

from typing import Any, Optional, Tuple
import abc
import copy
import dataclasses
import datetime
import decimal
import enum
import re

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigurationError


class Resolver(abc.ABC):
    """
    The type resolution strategy - decides which properties an object
    serializes as and how they are named.
    """

    def name(self, name: str) -> str:
        return name

    @abc.abstractmethod
    def properties(self, value: Any) -> Optional[dict[str, Any]]:
        """
        the properties of value by their serialized name

        :param value: an object which is neither scalar, mapping nor sequence
        :return: the properties or None if the object is not supported
        """


class DefaultResolver(Resolver):
    """
    pydantic models by alias, dataclasses by field, plain objects by their public attributes
    """

    def __init__(self, by_alias: bool = True) -> None:
        self.by_alias = by_alias

    def _members(self, value: Any) -> Optional[dict[str, Any]]:
        if isinstance(value, BaseModel):
            r = dict()
            for name, field in type(value).model_fields.items():
                key = (field.serialization_alias or field.alias or name) if self.by_alias else name
                r[key] = getattr(value, name)
            return r
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        elif hasattr(value, "__dict__") and not isinstance(value, type) and not callable(value):
            return {k: v for k, v in vars(value).items() if not k.startswith("_")}
        return None

    def properties(self, value: Any) -> Optional[dict[str, Any]]:
        if (members := self._members(value)) is None:
            return None
        return {self.name(k): v for k, v in members.items()}


class CamelCaseResolver(DefaultResolver):
    """
    property names in camelCase, dictionary keys are not renamed
    """

    @staticmethod
    def _lower(name: str) -> str:
        """lower the leading run of capitals, the last one stays if a lowercase letter follows: HTTPStatus -> httpStatus"""
        chars = list(name)
        for i, c in enumerate(chars):
            if not c.isupper():
                break
            if i > 0 and i + 1 < len(chars) and not chars[i + 1].isupper():
                break
            chars[i] = c.lower()
        return "".join(chars)

    def name(self, name: str) -> str:
        head, *tail = re.split(r"_+", name.strip("_"))
        return self._lower(head) + "".join(i[:1].upper() + i[1:] for i in tail)


class Converter(abc.ABC):
    """
    A custom rule for values of a specific shape.

    The converted value is serialized again, so a converter can return any
    value the serializer supports.
    """

    @abc.abstractmethod
    def can_convert(self, value: Any) -> bool: ...

    @abc.abstractmethod
    def convert(self, value: Any) -> Any: ...


class StringEnumConverter(Converter):
    """enum members by name instead of value"""

    def can_convert(self, value: Any) -> bool:
        return isinstance(value, enum.Enum)

    def convert(self, value: enum.Enum) -> str:
        return value.name


class IsoDateTimeConverter(Converter):
    def __init__(self, format: Optional[str] = None) -> None:
        self.format = format

    def can_convert(self, value: Any) -> bool:
        return isinstance(value, (datetime.datetime, datetime.date, datetime.time))

    def convert(self, value: Any) -> str:
        if self.format:
            return value.strftime(self.format)
        return value.isoformat()


class DecimalConverter(Converter):
    def __init__(self, as_string: bool = False) -> None:
        self.as_string = as_string

    def can_convert(self, value: Any) -> bool:
        return isinstance(value, decimal.Decimal)

    def convert(self, value: decimal.Decimal) -> Any:
        if self.as_string:
            return str(value)
        return float(value)


class SerializerSettings(BaseModel):
    """
    The serialization configuration used to render examples.

    Instances are frozen, use :func:`duplicate` to derive customized settings.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    resolver: Resolver = Field(default_factory=DefaultResolver)
    converters: Tuple[Converter, ...] = Field(default=())
    indent: Optional[int] = Field(default=2)
    exclude_none: bool = Field(default=False)
    sort_keys: bool = Field(default=False)


def duplicate(
    base: SerializerSettings, resolver: Optional[Resolver] = None, converter: Optional[Converter] = None
) -> SerializerSettings:
    """
    Create an independent copy of base with the overrides applied.

    :param base: the settings to copy, never modified
    :param resolver: replaces the resolver of base
    :param converter: replaces a converter of the same class or is appended
    :raises ConfigurationError: if an override has the wrong kind
    """
    if not isinstance(base, SerializerSettings):
        raise ConfigurationError(f"base settings expected, got {type(base).__name__}", base)
    if resolver is not None and not isinstance(resolver, Resolver):
        raise ConfigurationError(f"resolver expected, got {type(resolver).__name__}", resolver)
    if converter is not None and not isinstance(converter, Converter):
        raise ConfigurationError(f"converter expected, got {type(converter).__name__}", converter)

    settings = base.model_copy(deep=True)
    update: dict[str, Any] = dict()

    if resolver is not None:
        update["resolver"] = copy.deepcopy(resolver)

    if converter is not None:
        converter = copy.deepcopy(converter)
        converters = list(settings.converters)
        for idx, c in enumerate(converters):
            if type(c) is type(converter):
                converters[idx] = converter
                break
        else:
            converters.append(converter)
        update["converters"] = tuple(converters)

    if update:
        settings = settings.model_copy(update=update)
    return settings


class SerializerSettingsDuplicator:
    """
    binds the process-wide base settings
    """

    def __init__(self, base: Optional[SerializerSettings] = None) -> None:
        self.base = base if base is not None else SerializerSettings()

    def settings(self, resolver: Optional[Resolver] = None, converter: Optional[Converter] = None) -> SerializerSettings:
        return duplicate(self.base, resolver, converter)
