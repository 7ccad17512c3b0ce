import dataclasses
import datetime
import decimal
import enum
import json
import re
import uuid
from typing import Optional

import pytest
import yaml
from pydantic import BaseModel, Field

from openapi_examples import (
    CamelCaseResolver,
    ConfigurationError,
    ExampleFormatter,
    IsoDateTimeConverter,
    Renderer,
    Renderers,
    SerializationError,
    SerializerSettings,
    StringEnumConverter,
)


class Status(enum.Enum):
    AVAILABLE = "available"
    SOLD = "sold"


class Pet(BaseModel):
    pet_id: int = Field(alias="id")
    pet_name: str
    tag: Optional[str] = None
    status: Status = Status.AVAILABLE


@dataclasses.dataclass
class Owner:
    first_name: str
    pets: list
    since: datetime.date


class Node:
    def __init__(self, name):
        self.name = name
        self.children = []
        self._parent = None


@pytest.fixture
def formatter():
    return ExampleFormatter()


@pytest.fixture
def settings():
    return SerializerSettings()


def test_format_none(formatter, settings):
    assert formatter.format(None, settings, ["application/json"]) == {}


def test_format_json_round_trip(formatter, settings):
    value = {"name": "a", "tags": ["x", "y"], "age": 3, "weight": 1.5, "alive": True, "owner": None}
    r = formatter.format(value, settings, ["application/json"])
    assert list(r.keys()) == ["application/json"]
    assert json.loads(r["application/json"]) == value
    assert r["application/json"] == json.dumps(value, indent=2)


def test_format_media_types(formatter, settings):
    value = {"name": "a"}
    r = formatter.format(
        value,
        settings,
        [
            "application/json; charset=utf-8",
            "application/problem+json",
            "Text/JSON",
            "application/x-yaml",
            "text/plain",
            "application/xml",
            "application/octet-stream",
        ],
    )
    assert set(r.keys()) == {
        "application/json; charset=utf-8",
        "application/problem+json",
        "Text/JSON",
        "application/x-yaml",
        "text/plain",
    }
    assert json.loads(r["application/problem+json"]) == value
    assert yaml.safe_load(r["application/x-yaml"]) == value
    assert r["text/plain"] == '{"name": "a"}'


def test_format_text_plain_string(formatter, settings):
    assert formatter.format("pong", settings, ["text/plain"]) == {"text/plain": "pong"}


def test_format_no_renderer(formatter, settings):
    assert formatter.format({"a": 1}, settings, ["application/xml"]) == {}
    assert formatter.format({"a": 1}, settings, []) == {}


def test_plain_pydantic(formatter, settings):
    pet = Pet(id=1, pet_name="Rex")
    assert formatter.plain(pet, settings) == {"id": 1, "pet_name": "Rex", "tag": None, "status": "available"}


def test_plain_camel_case(formatter):
    settings = SerializerSettings(resolver=CamelCaseResolver(), exclude_none=True)
    owner = Owner("Jane", [Pet(id=1, pet_name="Rex")], datetime.date(2020, 1, 2))
    assert formatter.plain(owner, settings) == {
        "firstName": "Jane",
        "pets": [{"id": 1, "petName": "Rex", "status": "available"}],
        "since": "2020-01-02",
    }


def test_plain_mapping_keys_not_renamed(formatter):
    settings = SerializerSettings(resolver=CamelCaseResolver())
    assert formatter.plain({"first_name": {"last_name": 1}}, settings) == {"first_name": {"last_name": 1}}


def test_plain_object(formatter, settings):
    n = Node("root")
    n.children.append(Node("leaf"))
    assert formatter.plain(n, settings) == {"name": "root", "children": [{"name": "leaf", "children": []}]}


def test_plain_scalars(formatter, settings):
    u = uuid.UUID("12345678-1234-5678-1234-567812345678")
    value = {
        "uuid": u,
        "decimal": decimal.Decimal("89.99"),
        "bytes": b"abc",
        "when": datetime.datetime(2024, 7, 15, 19, 0, tzinfo=datetime.timezone.utc),
        "duration": datetime.timedelta(minutes=1),
        "set": {1},
        "tuple": (1, 2),
        "status": Status.SOLD,
        1: "int key",
    }
    assert formatter.plain(value, settings) == {
        "uuid": "12345678-1234-5678-1234-567812345678",
        "decimal": "89.99",
        "bytes": "YWJj",
        "when": "2024-07-15T19:00:00+00:00",
        "duration": 60.0,
        "set": [1],
        "tuple": [1, 2],
        "status": "sold",
        "1": "int key",
    }


def test_plain_converters(formatter):
    settings = SerializerSettings(converters=[StringEnumConverter(), IsoDateTimeConverter("%d.%m.%Y")])
    value = {"status": Status.SOLD, "since": datetime.date(2020, 1, 2)}
    assert formatter.plain(value, settings) == {"status": "SOLD", "since": "02.01.2020"}


def test_plain_shared_not_cyclic(formatter, settings):
    shared = {"a": 1}
    assert formatter.plain([shared, shared], settings) == [{"a": 1}, {"a": 1}]


def test_format_cyclic(formatter, settings):
    value = {"name": "a"}
    value["self"] = value
    with pytest.raises(SerializationError):
        formatter.format(value, settings, ["application/json"])

    n = Node("root")
    n.children.append(n)
    with pytest.raises(SerializationError, match="cyclic"):
        formatter.format(n, settings, ["application/json"])


@pytest.mark.parametrize("value", [lambda: None, object(), float("nan"), {(1, 2): "tuple key"}])
def test_format_unsupported(formatter, settings, value):
    with pytest.raises(SerializationError):
        formatter.format(value, settings, ["application/json"])


def test_format_unsupported_media_type_does_not_serialize(formatter, settings):
    assert formatter.format(object(), settings, ["application/xml"]) == {}


def test_converter_failure(formatter):
    class Broken(IsoDateTimeConverter):
        def convert(self, value):
            raise RuntimeError("broken")

    settings = SerializerSettings(converters=[Broken()])
    with pytest.raises(SerializationError, match="Broken failed"):
        formatter.format({"d": datetime.date.today()}, settings, ["application/json"])


def test_settings_indent_sort_keys(formatter):
    settings = SerializerSettings(indent=None, sort_keys=True)
    r = formatter.format({"b": 1, "a": 2}, settings, ["application/json"])
    assert r["application/json"] == '{"a": 2, "b": 1}'


class CSVRenderer(Renderer):
    def render(self, plain, settings):
        rows = plain if isinstance(plain, list) else [plain]
        header = list(rows[0].keys())
        lines = [",".join(header)] + [",".join(str(row[k]) for k in header) for row in rows]
        return "\n".join(lines)


def test_renderers_register():
    renderers = Renderers()
    renderers.register("text/csv", CSVRenderer())
    renderers.register(re.compile(r"application/vnd\.pets\.v[0-9]+"), CSVRenderer(), first=True)
    formatter = ExampleFormatter(renderers)
    value = [{"id": 1, "name": "Rex"}, {"id": 2, "name": "Tom"}]
    r = formatter.format(value, SerializerSettings(), ["text/csv", "application/vnd.pets.v2", "application/json"])
    assert r["text/csv"] == "id,name\n1,Rex\n2,Tom"
    assert r["application/vnd.pets.v2"] == r["text/csv"]
    assert json.loads(r["application/json"]) == value


def test_renderers_without_defaults():
    renderers = Renderers(defaults=False)
    assert renderers.lookup("application/json") is None


def test_renderers_register_invalid():
    renderers = Renderers()
    with pytest.raises(ConfigurationError):
        renderers.register("text/csv", object())
    with pytest.raises(ConfigurationError):
        renderers.register(42, CSVRenderer())


def test_renderer_failure():
    class Broken(Renderer):
        def render(self, plain, settings):
            raise KeyError("broken")

    formatter = ExampleFormatter(Renderers().register("text/csv", Broken()))
    with pytest.raises(SerializationError, match="Broken failed") as e:
        formatter.format({"a": 1}, SerializerSettings(), ["application/json", "text/csv"])
    assert isinstance(e.value.__cause__, KeyError)
