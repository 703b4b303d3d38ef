import pytest

from jsonval.hashtable import HashTable


def test_set_and_get():
    table = HashTable()
    table.set("foo", 1)
    table.set("bar", 2)
    assert table.get("foo") == 1
    assert table.get("bar") == 2
    assert len(table) == 2


def test_get_missing_returns_none():
    table = HashTable()
    table.set("foo", 1)
    assert table.get("nope") is None


def test_replace_keeps_position_and_size():
    table = HashTable()
    for key, value in [("a", 1), ("b", 2), ("c", 3)]:
        table.set(key, value)
    table.set("a", 10)
    assert len(table) == 3
    assert table.keys() == ["a", "b", "c"]
    assert table.get("a") == 10


def test_delete_and_missing_delete():
    table = HashTable()
    table.set("foo", 1)
    table.delete("foo")
    assert "foo" not in table
    assert len(table) == 0
    with pytest.raises(KeyError):
        table.delete("foo")


def test_clear():
    table = HashTable()
    for key in ["x", "y", "z"]:
        table.set(key, key)
    table.clear()
    assert len(table) == 0
    assert list(table) == []
    table.set("x", "again")
    assert table.items_from("x") is not None
    assert list(table.items()) == [("x", "again")]


def test_many_keys_keep_insertion_order():
    table = HashTable()
    keys = [f"key{n}" for n in range(200)]
    for n, key in enumerate(keys):
        table.set(key, n)
    assert table.keys() == keys
    assert all(table.get(key) == n for n, key in enumerate(keys))
    assert len(table) == len(keys)


def test_items_from_starts_at_key():
    table = HashTable()
    for key, value in [("a", 1), ("b", 2), ("c", 3)]:
        table.set(key, value)
    assert list(table.items_from("b")) == [("b", 2), ("c", 3)]
    assert list(table.items_from("missing")) == []


def test_iteration_survives_deletion():
    table = HashTable()
    for key, value in [("a", 1), ("b", 2), ("c", 3)]:
        table.set(key, value)
    seen = []
    for key, value in table.items():
        seen.append(key)
        if key == "a":
            table.delete("b")
    assert seen == ["a", "c"]


def test_contains_and_iter():
    table = HashTable()
    table.set("foo", None)
    assert "foo" in table
    assert 5 not in table
    assert list(table) == ["foo"]


def test_non_string_key_rejected():
    table = HashTable()
    with pytest.raises(TypeError):
        table.set(1, "x")
    with pytest.raises(TypeError):
        table.get(b"x")