"""Human-readable outline of a JSON value."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import IO

from jsonval.value import (
    JsonArray,
    JsonBoolean,
    JsonInteger,
    JsonNull,
    JsonObject,
    JsonReal,
    JsonString,
    JsonValue,
)


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def _visible(text: str) -> str:
    # Text stops at the first NUL character.
    return text.split("\0", 1)[0]


def _lines(value: JsonValue, indent: int) -> Iterator[str]:
    pad = " " * indent
    if isinstance(value, JsonObject):
        size = len(value)
        yield f"{pad}JSON Object of {size} pair{_plural(size)}:"
        for key, item in value.items():
            yield f'{pad}  JSON Key: "{_visible(key)}"'
            yield from _lines(item, indent + 2)
    elif isinstance(value, JsonArray):
        size = len(value)
        yield f"{pad}JSON Array of {size} element{_plural(size)}:"
        for item in value:
            yield from _lines(item, indent + 2)
    elif isinstance(value, JsonString):
        yield f'{pad}JSON String: "{_visible(value.value)}"'
    elif isinstance(value, JsonInteger):
        yield f'{pad}JSON Integer: "{value.value}"'
    elif isinstance(value, JsonReal):
        yield f"{pad}JSON Real: {value.value:f}"
    elif isinstance(value, JsonBoolean):
        yield f"{pad}JSON {'True' if value.value else 'False'}"
    elif isinstance(value, JsonNull):
        yield f"{pad}JSON Null"
    else:
        raise TypeError(f"unrecognized JSON type {type(value).__name__}")


def describe(value: JsonValue) -> str:
    """Return an indented outline of ``value``, one line per node."""
    return "".join(line + "\n" for line in _lines(value, 0))


def print_json(value: JsonValue, file: IO[str] | None = None) -> None:
    """Write the outline of ``value`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(describe(value))