import pytest

from conduit.json import JsonType, JsonValue, parse_json, serialize_json


# Cases carried over from the source's own tests.

def test_json_value_creation():
    null_val = JsonValue()
    assert null_val.is_null()

    bool_val = JsonValue(True)
    assert bool_val.is_bool()
    assert bool_val.value is True

    num_val = JsonValue(42.5)
    assert num_val.is_number()
    assert num_val.value == 42.5

    str_val = JsonValue("hello")
    assert str_val.is_string()
    assert str_val.value == "hello"


def test_json_parsing():
    text = """{
        "name": "Test User",
        "age": 25,
        "active": true
    }"""
    parsed = parse_json(text)
    assert parsed is not None
    assert parsed.is_object()
    assert parsed.get_string("name") == "Test User"
    assert parsed.get_int("age") == 25
    assert parsed.get_bool("active") is True


def test_json_serialization_contains_values():
    value = JsonValue({"name": "Alice", "age": 30.0, "active": True})
    serialized = serialize_json(value)
    assert "Alice" in serialized
    assert "30" in serialized
    assert "true" in serialized


# Further behaviour.

def test_serialization_sorts_keys_and_is_compact():
    value = JsonValue({"name": "Alice", "age": 30.0, "active": True})
    assert serialize_json(value) == '{"active":true,"age":30,"name":"Alice"}'


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (3.0, "3"),
        (-7, "-7"),
        (2.5, "2.500000"),
        ([], "[]"),
        ({}, "{}"),
        ([1, "a", None], '[1,"a",null]'),
    ],
)
def test_serialize_scalars_and_containers(value, expected):
    assert serialize_json(JsonValue(value)) == expected


def test_serialize_string_escapes():
    value = JsonValue('a"b\\c\nd\te\rf\bg\fh/')
    assert serialize_json(value) == '"a\\"b\\\\c\\nd\\te\\rf\\bg\\fh/"'


def test_type_property():
    assert JsonValue(True).type is JsonType.BOOLEAN
    assert JsonValue(1).type is JsonType.NUMBER
    assert JsonValue([1]).type is JsonType.ARRAY
    assert JsonValue({"a": 1}).type is JsonType.OBJECT
    assert JsonValue().type is JsonType.NULL
    assert JsonValue("x").type is JsonType.STRING


def test_nested_document_round_trip():
    text = """{
        "name": "John Doe",
        "age": 30,
        "city": "New York",
        "active": true,
        "scores": [85, 90, 78],
        "address": {"street": "123 Main St", "zip": "10001"}
    }"""
    parsed = parse_json(text)
    assert parsed.to_python() == {
        "name": "John Doe",
        "age": 30.0,
        "city": "New York",
        "active": True,
        "scores": [85.0, 90.0, 78.0],
        "address": {"street": "123 Main St", "zip": "10001"},
    }
    assert parse_json(serialize_json(parsed)) == parsed


def test_serialize_nested_pinned():
    value = JsonValue(
        {
            "name": "Jane Smith",
            "hobbies": ["reading", "coding"],
            "contact": {"email": "jane@example.com"},
        }
    )
    assert serialize_json(value) == (
        '{"contact":{"email":"jane@example.com"},'
        '"hobbies":["reading","coding"],"name":"Jane Smith"}'
    )


@pytest.mark.parametrize(
    "text",
    ["", "   ", "{", "[1,2", '{"a" 1}', '{"a":1,}', "[1,]", "01", "1.", "1e", "-",
     "tru", "nul", "{} x", '"abc', "{a:1}", "1e400", "+1", ".5"],
)
def test_malformed_input_returns_none(text):
    assert parse_json(text) is None


def test_string_escapes_are_decoded():
    parsed = parse_json(r'"a\"b\\c\/d\ne\tf\u0041"')
    assert parsed.value == 'a"b\\c/d\ne\tfu0041'


def test_numbers_parse():
    assert parse_json("-12.5e1").value == -125.0
    assert parse_json("0").value == 0.0
    assert parse_json("1E+2").value == 100.0


def test_literals_parse():
    assert parse_json("true").value is True
    assert parse_json("false").value is False
    assert parse_json("null").is_null()


def test_empty_containers_parse():
    assert parse_json("[ ]").to_python() == []
    assert parse_json("{ }").to_python() == {}


def test_duplicate_key_last_wins():
    assert parse_json('{"a": 1, "a": 2}').get_int("a") == 2


def test_get_int_truncates_toward_zero():
    parsed = parse_json('{"p": 3.9, "n": -3.9}')
    assert parsed.get_int("p") == 3
    assert parsed.get_int("n") == -3
    assert parsed.get_number("p") == 3.9


def test_getters_return_none_for_missing_or_wrong_type():
    parsed = parse_json('{"s": "x", "n": 1, "b": false}')
    assert parsed.get_int("missing") is None
    assert parsed.get_int("s") is None
    assert parsed.get_string("n") is None
    assert parsed.get_bool("s") is None
    assert parsed.get_number("b") is None
    assert parsed.get_bool("b") is False


def test_getters_on_non_object_return_none():
    assert JsonValue([1, 2]).get_int("0") is None
    assert JsonValue("text").get_string("text") is None


def test_constructor_rejects_unsupported_values():
    with pytest.raises(TypeError):
        JsonValue(object())
    with pytest.raises(TypeError):
        JsonValue({1: "a"})


def test_equality():
    assert JsonValue([1, {"a": True}]) == JsonValue([1.0, {"a": True}])
    assert not JsonValue(1) == JsonValue(True)