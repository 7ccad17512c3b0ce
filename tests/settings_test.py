import concurrent.futures
import datetime
import decimal

import pydantic
import pytest

from openapi_examples import (
    CamelCaseResolver,
    ConfigurationError,
    DecimalConverter,
    DefaultResolver,
    IsoDateTimeConverter,
    SerializerSettings,
    SerializerSettingsDuplicator,
    StringEnumConverter,
    duplicate,
)


class TaggedResolver(DefaultResolver):
    def __init__(self, tag):
        super().__init__()
        self.tag = tag
        self.seen = []


def test_duplicate_is_independent():
    base = SerializerSettings(resolver=TaggedResolver("base"), converters=[IsoDateTimeConverter()])

    a = duplicate(base, resolver=CamelCaseResolver())
    b = duplicate(base, converter=DecimalConverter(as_string=True))

    assert a is not base and b is not base and a is not b
    assert a.resolver is not base.resolver
    assert b.resolver is not base.resolver
    assert a.converters[0] is not base.converters[0]

    assert isinstance(a.resolver, CamelCaseResolver)
    assert isinstance(b.resolver, TaggedResolver)
    assert [type(c) for c in a.converters] == [IsoDateTimeConverter]
    assert [type(c) for c in b.converters] == [IsoDateTimeConverter, DecimalConverter]

    b.resolver.tag = "b"
    b.resolver.seen.append(1)
    b.converters[0].format = "%Y"

    assert base.resolver.tag == "base"
    assert base.resolver.seen == []
    assert base.converters[0].format is None
    assert a.converters[0].format is None


def test_duplicate_without_overrides():
    base = SerializerSettings(indent=4, exclude_none=True)
    d = duplicate(base)
    assert d is not base
    assert d.resolver is not base.resolver
    assert d.indent == 4 and d.exclude_none is True


def test_duplicate_copies_overrides():
    resolver = TaggedResolver("caller")
    d = duplicate(SerializerSettings(), resolver=resolver)
    d.resolver.tag = "changed"
    assert resolver.tag == "caller"


def test_duplicate_converter_replaces_same_kind():
    base = SerializerSettings(converters=[DecimalConverter(), StringEnumConverter()])
    d = duplicate(base, converter=DecimalConverter(as_string=True))
    assert [type(c) for c in d.converters] == [DecimalConverter, StringEnumConverter]
    assert d.converters[0].as_string is True
    assert base.converters[0].as_string is False


@pytest.mark.parametrize(
    "kwargs",
    [
        {"resolver": object()},
        {"resolver": "camelCase"},
        {"converter": lambda x: x},
        {"converter": DefaultResolver()},
    ],
)
def test_duplicate_invalid_override(kwargs):
    base = SerializerSettings()
    with pytest.raises(ConfigurationError):
        duplicate(base, **kwargs)


def test_duplicate_invalid_base():
    with pytest.raises(ConfigurationError):
        duplicate({"indent": 2})


def test_settings_frozen():
    s = SerializerSettings()
    with pytest.raises(pydantic.ValidationError):
        s.indent = 4


def test_settings_invalid_members():
    with pytest.raises(pydantic.ValidationError):
        SerializerSettings(resolver="camelCase")
    with pytest.raises(pydantic.ValidationError):
        SerializerSettings(converters=[object()])


def test_duplicator():
    base = SerializerSettings(indent=None)
    duplicator = SerializerSettingsDuplicator(base)
    assert duplicator.base is base
    s = duplicator.settings(CamelCaseResolver(), StringEnumConverter())
    assert s.indent is None
    assert isinstance(s.resolver, CamelCaseResolver)
    assert isinstance(base.resolver, DefaultResolver) and not isinstance(base.resolver, CamelCaseResolver)
    assert base.converters == ()

    assert isinstance(SerializerSettingsDuplicator().base, SerializerSettings)


def test_duplicate_concurrent():
    base = SerializerSettings(converters=[IsoDateTimeConverter()])

    def f(i):
        if i % 2:
            s = duplicate(base, resolver=TaggedResolver(i))
            return i, s
        s = duplicate(base, converter=IsoDateTimeConverter(format=str(i)))
        return i, s

    with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(f, range(200)))

    for i, s in results:
        if i % 2:
            assert s.resolver.tag == i
            assert [c.format for c in s.converters] == [None]
        else:
            assert type(s.resolver) is DefaultResolver
            assert [c.format for c in s.converters] == [str(i)]

    assert type(base.resolver) is DefaultResolver
    assert [c.format for c in base.converters] == [None]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("name", "name"),
        ("first_name", "firstName"),
        ("FirstName", "firstName"),
        ("created_at_utc", "createdAtUtc"),
    ],
)
def test_camel_case(name, expected):
    assert CamelCaseResolver().name(name) == expected


def test_converters():
    assert IsoDateTimeConverter().convert(datetime.date(2024, 7, 15)) == "2024-07-15"
    assert IsoDateTimeConverter("%d.%m.%Y").convert(datetime.date(2024, 7, 15)) == "15.07.2024"
    assert DecimalConverter().convert(decimal.Decimal("89.99")) == 89.99
    assert DecimalConverter(as_string=True).convert(decimal.Decimal("89.99")) == "89.99"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("HTTPStatus", "httpStatus"),
        ("ID", "id"),
        ("URLValue_id", "urlValueId"),
        ("petID", "petID"),
        ("_private_name", "privateName"),
    ],
)
def test_camel_case_capitals(name, expected):
    assert CamelCaseResolver().name(name) == expected
