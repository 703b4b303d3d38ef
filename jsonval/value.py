"""JSON value types, construction, equality and copying."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from jsonval.errors import ErrorCode, JsonError
from jsonval.hashtable import HashTable

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


class JsonType(enum.IntEnum):
    """The kind of a JSON value."""

    OBJECT = 0
    ARRAY = 1
    STRING = 2
    INTEGER = 3
    REAL = 4
    TRUE = 5
    FALSE = 6
    NULL = 7


def _check_utf8(text: str, what: str) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        raise JsonError(f"Invalid UTF-8 {what}", ErrorCode.INVALID_UTF8) from None
    return text


def _check_value(value: object) -> JsonValue:
    if not isinstance(value, JsonValue):
        raise TypeError(f"expected a JSON value, not {type(value).__name__}")
    return value


class JsonValue:
    """Base of all JSON values."""

    type: JsonType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return equal(self, other)

    __hash__ = None  # type: ignore[assignment]


class JsonObject(JsonValue):
    """An ordered collection of string keys and JSON values."""

    type = JsonType.OBJECT

    def __init__(
        self,
        items: Mapping[str, JsonValue] | Iterable[tuple[str, JsonValue]] | None = None,
    ) -> None:
        self._table: HashTable[JsonValue] = HashTable()
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.set(key, value)

    def get(self, key: str) -> JsonValue | None:
        """Return the value under ``key``, or None if it is absent."""
        return self._table.get(key)

    def set(self, key: str, value: JsonValue) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if not isinstance(key, str):
            raise TypeError(f"object keys must be str, not {type(key).__name__}")
        _check_utf8(key, "object key")
        self._table.set(key, _check_value(value))

    def delete(self, key: str) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        self._table.delete(key)

    def clear(self) -> None:
        """Remove every member."""
        self._table.clear()

    def _pairs_of(self, other: JsonObject) -> list[tuple[str, JsonValue]]:
        if not isinstance(other, JsonObject):
            raise TypeError(f"expected a JSON object, not {type(other).__name__}")
        return list(other.items())

    def update(self, other: JsonObject) -> None:
        """Copy every member of ``other`` into this object."""
        for key, value in self._pairs_of(other):
            self.set(key, value)

    def update_existing(self, other: JsonObject) -> None:
        """Copy the members of ``other`` whose keys are already present."""
        for key, value in self._pairs_of(other):
            if key in self._table:
                self.set(key, value)

    def update_missing(self, other: JsonObject) -> None:
        """Copy the members of ``other`` whose keys are not yet present."""
        for key, value in self._pairs_of(other):
            if key not in self._table:
                self.set(key, value)

    def items(self) -> Iterator[tuple[str, JsonValue]]:
        """Iterate over (key, value) pairs in insertion order."""
        return self._table.items()

    def keys(self) -> list[str]:
        """Return the keys in insertion order."""
        return self._table.keys()

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __repr__(self) -> str:
        inner = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"JsonObject({{{inner}}})"


class JsonArray(JsonValue):
    """An ordered sequence of JSON values."""

    type = JsonType.ARRAY

    def __init__(self, items: Iterable[JsonValue] | None = None) -> None:
        self._items: list[JsonValue] = []
        if items is not None:
            for item in items:
                self.append(item)

    def _check_index(self, index: int, limit: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("array index must be an int")
        if not 0 <= index < limit:
            raise IndexError(f"array index {index} out of range")
        return index

    def get(self, index: int) -> JsonValue | None:
        """Return the element at ``index``, or None if it is out of range."""
        if isinstance(index, int) and 0 <= index < len(self._items):
            return self._items[index]
        return None

    def set(self, index: int, value: JsonValue) -> None:
        """Replace the element at ``index``."""
        self._check_index(index, len(self._items))
        self._items[index] = _check_value(value)

    def append(self, value: JsonValue) -> None:
        """Add ``value`` to the end."""
        self._items.append(_check_value(value))

    def insert(self, index: int, value: JsonValue) -> None:
        """Insert ``value`` before ``index``; ``index`` may equal the size."""
        self._check_index(index, len(self._items) + 1)
        self._items.insert(index, _check_value(value))

    def remove(self, index: int) -> None:
        """Remove the element at ``index``."""
        self._check_index(index, len(self._items))
        del self._items[index]

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def extend(self, other: JsonArray) -> None:
        """Append every element of ``other``."""
        if not isinstance(other, JsonArray):
            raise TypeError(f"expected a JSON array, not {type(other).__name__}")
        self._items.extend(list(other._items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"JsonArray({self._items!r})"


class JsonString(JsonValue):
    """A JSON string; it may hold NUL characters."""

    type = JsonType.STRING

    def __init__(self, value: str) -> None:
        self.value = value

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"string value must be str, not {type(value).__name__}")
        self._value = _check_utf8(value, "string")

    @property
    def length(self) -> int:
        """Length of the string in UTF-8 bytes."""
        return len(self._value.encode("utf-8"))

    def __repr__(self) -> str:
        return f"JsonString({self._value!r})"


class JsonInteger(JsonValue):
    """A JSON integer, held in the signed 64-bit range."""

    type = JsonType.INTEGER

    def __init__(self, value: int) -> None:
        self.value = value

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        if not isinstance(value, int):
            raise TypeError(f"integer value must be int, not {type(value).__name__}")
        value = int(value)
        if not INT_MIN <= value <= INT_MAX:
            raise OverflowError(f"integer {value} out of range")
        self._value = value

    def __repr__(self) -> str:
        return f"JsonInteger({self._value!r})"


class JsonReal(JsonValue):
    """A JSON real number; NaN and infinities are rejected."""

    type = JsonType.REAL

    def __init__(self, value: float) -> None:
        self.value = value

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"real value must be float, not {type(value).__name__}")
        value = float(value)
        if not math.isfinite(value):
            raise ValueError("Invalid floating point value")
        self._value = value

    def __repr__(self) -> str:
        return f"JsonReal({self._value!r})"


class JsonBoolean(JsonValue):
    """``true`` or ``false``; there is exactly one instance of each."""

    _instances: dict[bool, JsonBoolean] = {}

    def __new__(cls, flag: bool = False) -> JsonBoolean:
        flag = bool(flag)
        instance = cls._instances.get(flag)
        if instance is None:
            instance = super().__new__(cls)
            instance._flag = flag
            cls._instances[flag] = instance
        return instance

    @property
    def value(self) -> bool:
        return self._flag

    @property
    def type(self) -> JsonType:  # type: ignore[override]
        return JsonType.TRUE if self._flag else JsonType.FALSE

    def __bool__(self) -> bool:
        return self._flag

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"JsonBoolean({self._flag})"


class JsonNull(JsonValue):
    """``null``; there is exactly one instance."""

    type = JsonType.NULL
    _instance: JsonNull | None = None

    def __new__(cls) -> JsonNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return "JsonNull()"


def boolean(flag: object) -> JsonBoolean:
    """Return the ``true`` or ``false`` value for ``flag``."""
    return JsonBoolean(bool(flag))


def null() -> JsonNull:
    """Return the ``null`` value."""
    return JsonNull()


def from_python(obj: Any) -> JsonValue:
    """Build a JSON value from plain Python data."""
    if isinstance(obj, JsonValue):
        return obj
    if obj is None:
        return null()
    if isinstance(obj, bool):
        return boolean(obj)
    if isinstance(obj, int):
        return JsonInteger(obj)
    if isinstance(obj, float):
        return JsonReal(obj)
    if isinstance(obj, str):
        return JsonString(obj)
    if isinstance(obj, Mapping):
        return JsonObject((key, from_python(value)) for key, value in obj.items())
    if isinstance(obj, (list, tuple)):
        return JsonArray(from_python(item) for item in obj)
    raise TypeError(f"cannot convert {type(obj).__name__} to JSON")


def to_python(value: JsonValue) -> Any:
    """Turn a JSON value into plain Python data."""
    if isinstance(value, JsonObject):
        return {key: to_python(item) for key, item in value.items()}
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value]
    if isinstance(value, (JsonString, JsonInteger, JsonReal, JsonBoolean)):
        return value.value
    if isinstance(value, JsonNull):
        return None
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def equal(value1: JsonValue | None, value2: JsonValue | None) -> bool:
    """Return True if the two values are structurally equal."""
    if value1 is None or value2 is None:
        return False
    if value1 is value2:
        return True
    if value1.type != value2.type:
        return False
    if isinstance(value1, JsonObject):
        if len(value1) != len(value2):
            return False
        return all(equal(item, value2.get(key)) for key, item in value1.items())
    if isinstance(value1, JsonArray):
        if len(value1) != len(value2):
            return False
        return all(equal(a, b) for a, b in zip(value1, value2))
    if isinstance(value1, (JsonString, JsonInteger, JsonReal)):
        return value1.value == value2.value
    return False


def copy(value: JsonValue | None) -> JsonValue | None:
    """Return a shallow copy; containers share their members with the original."""
    if value is None:
        return None
    if isinstance(value, JsonObject):
        return JsonObject(value.items())
    if isinstance(value, JsonArray):
        return JsonArray(value)
    if isinstance(value, JsonString):
        return JsonString(value.value)
    if isinstance(value, JsonInteger):
        return JsonInteger(value.value)
    if isinstance(value, JsonReal):
        return JsonReal(value.value)
    return value


def _deep_copy(value: JsonValue, parents: set[int]) -> JsonValue:
    if isinstance(value, (JsonObject, JsonArray)):
        if id(value) in parents:
            raise ValueError("cannot deep copy a value that contains itself")
        parents.add(id(value))
        try:
            if isinstance(value, JsonObject):
                result: JsonValue = JsonObject(
                    (key, _deep_copy(item, parents)) for key, item in value.items()
                )
            else:
                result = JsonArray(_deep_copy(item, parents) for item in value)
        finally:
            parents.discard(id(value))
        return result
    copied = copy(value)
    assert copied is not None
    return copied


def deep_copy(value: JsonValue | None) -> JsonValue | None:
    """Return a copy in which every container and scalar is copied too."""
    if value is None:
        return None
    return _deep_copy(value, set())