import pytest

from jsonval.errors import ErrorCode, JsonError
from jsonval.value import (
    JsonArray,
    JsonBoolean,
    JsonInteger,
    JsonNull,
    JsonObject,
    JsonReal,
    JsonString,
    JsonType,
    boolean,
    copy,
    deep_copy,
    equal,
    from_python,
    null,
    to_python,
)

ARRAY_DATA = [1, "foo", 3.141592, {"foo": "bar"}]
OBJECT_DATA = {"foo": "bar", "a": 1, "b": 3.141592, "c": [1, 2, 3, 4]}
OBJECT_KEYS = ["foo", "a", "b", "c"]


@pytest.mark.parametrize("func", [copy, deep_copy])
def test_copy_none(func):
    assert func(None) is None


@pytest.mark.parametrize("func", [copy, deep_copy])
@pytest.mark.parametrize("make", [lambda: boolean(True), lambda: boolean(False), null])
def test_copy_singletons_return_same(func, make):
    value = make()
    assert func(value) is value


@pytest.mark.parametrize("func", [copy, deep_copy])
@pytest.mark.parametrize(
    "make",
    [lambda: JsonString("foo"), lambda: JsonInteger(543), lambda: JsonReal(123e9)],
)
def test_copy_scalars(func, make):
    value = make()
    result = func(value)
    assert result is not value
    assert equal(result, value)


def test_copy_array_shares_elements():
    array = from_python(ARRAY_DATA)
    result = copy(array)
    assert result is not array
    assert equal(result, array)
    assert all(array.get(i) is result.get(i) for i in range(len(result)))


def test_deep_copy_array_copies_elements():
    array = from_python(ARRAY_DATA)
    result = deep_copy(array)
    assert result is not array
    assert equal(result, array)
    assert all(array.get(i) is not result.get(i) for i in range(len(result)))


def test_copy_object_shares_items_and_keeps_order():
    obj = from_python(OBJECT_DATA)
    result = copy(obj)
    assert result is not obj
    assert equal(result, obj)
    keys = []
    for key, value in obj.items():
        assert result.get(key) is value
        keys.append(key)
    assert keys == OBJECT_KEYS
    assert result.keys() == OBJECT_KEYS


def test_deep_copy_object_copies_items_and_keeps_order():
    obj = from_python(OBJECT_DATA)
    result = deep_copy(obj)
    assert result is not obj
    assert equal(result, obj)
    for key, value in obj.items():
        assert result.get(key) is not value
    assert result.keys() == OBJECT_KEYS


def test_deep_copy_rejects_cycle():
    array = JsonArray()
    array.append(array)
    with pytest.raises(ValueError):
        deep_copy(array)


def test_equal_distinguishes_types():
    assert not equal(JsonInteger(1), JsonReal(1.0))
    assert not equal(None, null())
    assert equal(from_python({"a": [1, 2]}), from_python({"a": [1, 2]}))
    assert not equal(from_python({"a": [1, 2]}), from_python({"a": [1, 3]}))


def test_python_round_trip():
    assert to_python(from_python(OBJECT_DATA)) == OBJECT_DATA
    assert to_python(from_python([True, False, None])) == [True, False, None]


def test_types():
    assert boolean(1).type == JsonType.TRUE
    assert boolean(0).type == JsonType.FALSE
    assert null().type == JsonType.NULL
    assert JsonBoolean(True) is boolean(True)
    assert JsonNull() is null()


def test_object_updates():
    target = from_python({"a": 1, "b": 2})
    other = from_python({"b": 20, "c": 30})
    existing = copy(target)
    existing.update_existing(other)
    assert to_python(existing) == {"a": 1, "b": 20}
    missing = copy(target)
    missing.update_missing(other)
    assert to_python(missing) == {"a": 1, "b": 2, "c": 30}
    target.update(other)
    assert to_python(target) == {"a": 1, "b": 20, "c": 30}


def test_object_delete_and_clear():
    obj = from_python({"a": 1, "b": 2})
    obj.delete("a")
    assert obj.get("a") is None
    with pytest.raises(KeyError):
        obj.delete("a")
    obj.clear()
    assert len(obj) == 0


def test_object_rejects_bad_values():
    obj = JsonObject()
    with pytest.raises(TypeError):
        obj.set("a", 1)
    with pytest.raises(JsonError) as info:
        obj.set("\ud800", null())
    assert info.value.code == ErrorCode.INVALID_UTF8


def test_array_operations():
    array = JsonArray()
    array.append(JsonInteger(1))
    array.insert(0, JsonInteger(0))
    array.insert(2, JsonInteger(2))
    assert to_python(array) == [0, 1, 2]
    array.set(1, JsonString("x"))
    array.remove(0)
    assert to_python(array) == ["x", 2]
    assert array.get(5) is None
    with pytest.raises(IndexError):
        array.set(2, null())
    with pytest.raises(IndexError):
        array.insert(3, null())
    with pytest.raises(IndexError):
        array.remove(2)
    array.extend(array)
    assert to_python(array) == ["x", 2, "x", 2]
    array.clear()
    assert len(array) == 0


def test_string_with_nul_and_length():
    value = JsonString("nul byte \0 in string")
    assert value.length == 20


def test_scalar_limits():
    with pytest.raises(OverflowError):
        JsonInteger(2**63)
    assert JsonInteger(-(2**63)).value == -(2**63)
    with pytest.raises(ValueError):
        JsonReal(float("inf"))
    with pytest.raises(ValueError):
        JsonReal(float("nan"))
    with pytest.raises(TypeError):
        from_python(object())