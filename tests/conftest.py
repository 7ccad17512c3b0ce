import copy
import dataclasses
from pathlib import Path

import pytest
import yaml

from openapi_examples.description import YAML12Loader
from openapi_examples.testing import LoggerProvider

LOADED_FILES = {}
FIXTURES = Path(__file__).parent / "fixtures"


@dataclasses.dataclass
class _Version:
    major: int
    minor: int
    patch: int

    def __str__(self):
        return f"{self.major}.{self.minor}.{self.patch}"

    def __repr__(self):
        return f"{self.major}.{self.minor}.{self.patch}"


@pytest.fixture(scope="session", params=[_Version(3, 0, 3), _Version(3, 1, 0)])
def openapi_version(request):
    return request.param


def _get_parsed_yaml(filename, version=None):
    """
    Returns a python dict that is a parsed yaml file from the tests/fixtures
    directory.

    :param filename: The filename to load.  Must exist in tests/fixtures and
                     include extension.
    :type filename: str
    """
    if filename not in LOADED_FILES:
        raw = (FIXTURES / filename).read_text()
        LOADED_FILES[filename] = yaml.load(raw, Loader=YAML12Loader)

    data = copy.deepcopy(LOADED_FILES[filename])
    if version:
        data["openapi"] = str(version)
    return data


@pytest.fixture
def petstore_v20():
    """
    Provides the Swagger 2.0 petstore
    """
    yield _get_parsed_yaml("petstore-v20.yaml")


@pytest.fixture
def petstore_v30(openapi_version):
    """
    Provides the OpenAPI 3.x petstore
    """
    yield _get_parsed_yaml("petstore-v30.yaml", openapi_version)


@pytest.fixture
def with_fixture_path():
    """
    Provides the path of the OpenAPI 3.0 petstore
    """
    yield FIXTURES / "petstore-v30.yaml"


@pytest.fixture
def logger_provider():
    with LoggerProvider(capture=True) as provider:
        yield provider
