from typing import Any
import dataclasses


class ErrorBase(Exception):
    pass


class SpecError(ErrorBase, ValueError):
    """
    This error class is used when an invalid format is found while parsing an
    object in the description document.
    """

    def __init__(self, message, element=None):
        self.message = message
        self.element = element

    def __str__(self):
        return self.message


class ExampleError(ErrorBase):
    """
    An example could not be attached.

    The registration facade catches these per example, so a single broken
    example never aborts the generation pass.
    """

    pass


@dataclasses.dataclass(repr=False)
class SerializationError(ExampleError):
    """the example value can not be rendered under the serializer settings"""

    value: Any
    message: str

    def __str__(self):
        return f"<{self.__class__.__name__} {type(self.value).__name__}: {self.message}>"


class ConfigurationError(ExampleError, TypeError):
    """
    A resolver or converter override is malformed.
    """

    def __init__(self, message, element=None):
        self.message = message
        self.element = element

    def __str__(self):
        return self.message


@dataclasses.dataclass(repr=False)
class ProviderError(ExampleError):
    """the example provider raised"""

    provider: Any
    message: str

    def __str__(self):
        return f"<{self.__class__.__name__} {self.provider!r}: {self.message}>"

