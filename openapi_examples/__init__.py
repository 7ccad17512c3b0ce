from .version import __version__
from .description import Description
from .errors import (
    ErrorBase,
    SpecError,
    ExampleError,
    SerializationError,
    ConfigurationError,
    ProviderError,
)
from .example import ResponseExample, RequestExample
from .formatter import ExampleFormatter, Renderers, Renderer, JSONRenderer, YAMLRenderer, TextRenderer
from .providers import ExamplesProvider, ContextualExamplesProvider, Services
from .registry import Examples, ExampleFailure, Registration
from .settings import (
    SerializerSettings,
    SerializerSettingsDuplicator,
    duplicate,
    Resolver,
    DefaultResolver,
    CamelCaseResolver,
    Converter,
    StringEnumConverter,
    IsoDateTimeConverter,
    DecimalConverter,
)

__all__ = [
    "__version__",
    "Description",
    "ErrorBase",
    "SpecError",
    "ExampleError",
    "SerializationError",
    "ConfigurationError",
    "ProviderError",
    "ResponseExample",
    "RequestExample",
    "ExampleFormatter",
    "Renderers",
    "Renderer",
    "JSONRenderer",
    "YAMLRenderer",
    "TextRenderer",
    "ExamplesProvider",
    "ContextualExamplesProvider",
    "Services",
    "Examples",
    "ExampleFailure",
    "Registration",
    "SerializerSettings",
    "SerializerSettingsDuplicator",
    "duplicate",
    "Resolver",
    "DefaultResolver",
    "CamelCaseResolver",
    "Converter",
    "StringEnumConverter",
    "IsoDateTimeConverter",
    "DecimalConverter",
]
