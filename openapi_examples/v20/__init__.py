from .general import Reference, Info
from .parameter import Parameter
from .paths import Response, Operation, PathItem, Paths
from .root import Root
from .schemas import Schema
