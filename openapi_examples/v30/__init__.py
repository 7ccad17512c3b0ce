from .example import Example
from .general import Reference, Info
from .media import MediaType
from .paths import RequestBody, Response, Operation, PathItem, Paths
from .root import Root
