"""Serialisation of JSON values to text."""

from __future__ import annotations

import enum
import io
import math
import os
from collections.abc import Callable
from typing import IO

from jsonval.errors import ErrorCode, JsonError
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


class DumpFlags(enum.IntFlag):
    """Flags that control how values are written."""

    MAX_INDENT = 0x1F
    COMPACT = 0x20
    ENSURE_ASCII = 0x40
    SORT_KEYS = 0x80
    PRESERVE_ORDER = 0x100
    ENCODE_ANY = 0x200
    ESCAPE_SLASH = 0x400
    EMBED = 0x10000
    FRACTIONAL_DIGITS = 0x20000


_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "/": "\\/",
}


def indent(n: int) -> int:
    """Return the flag bits asking for ``n`` spaces of indentation (0 to 31)."""
    return n & DumpFlags.MAX_INDENT


def real_precision(n: int) -> int:
    """Return the flag bits asking for ``n`` significant digits in reals (0 to 31)."""
    return (n & 0x1F) << 11


def _indent_of(flags: int) -> int:
    return flags & 0x1F


def _precision_of(flags: int) -> int:
    return (flags >> 11) & 0x1F


def format_real(
    value: float, precision: int = 0, fractional_digits: bool = False
) -> str:
    """Format a real number the way it is written in JSON text.

    ``precision`` is the number of significant digits (17 when zero), or the
    number of digits after the point when ``fractional_digits`` is set. The
    result always reads back as a real: a ``.0`` is added when needed, and
    the exponent loses its plus sign and leading zeros.
    """
    if not math.isfinite(value):
        raise ValueError("Invalid floating point value")
    if precision == 0:
        precision = 17
    kind = "f" if fractional_digits else "g"
    text = f"{value:.{precision}{kind}}"
    if "." not in text and "e" not in text:
        text += ".0"
    mantissa, sep, exponent = text.partition("e")
    if sep:
        sign = "-" if exponent.startswith("-") else ""
        digits = exponent.lstrip("+-").lstrip("0") or "0"
        text = f"{mantissa}e{sign}{digits}"
    return text


def _escape_string(text: str, flags: int) -> str:
    escape_slash = bool(flags & DumpFlags.ESCAPE_SLASH)
    ensure_ascii = bool(flags & DumpFlags.ENSURE_ASCII)
    parts = ['"']
    for char in text:
        codepoint = ord(char)
        needs_escape = (
            char in '\\"'
            or codepoint < 0x20
            or (escape_slash and char == "/")
            or (ensure_ascii and codepoint > 0x7F)
        )
        if not needs_escape:
            parts.append(char)
        elif char in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[char])
        elif codepoint < 0x10000:
            parts.append(f"\\u{codepoint:04X}")
        else:
            offset = codepoint - 0x10000
            first = 0xD800 | ((offset & 0xFFC00) >> 10)
            last = 0xDC00 | (offset & 0x003FF)
            parts.append(f"\\u{first:04X}\\u{last:04X}")
    parts.append('"')
    return "".join(parts)


class _Dumper:
    def __init__(self, emit: Callable[[str], object], flags: int) -> None:
        self._emit = emit
        self._parents: set[int] = set()
        self._separator = ":" if flags & DumpFlags.COMPACT else ": "

    def _indent(self, flags: int, depth: int, space: bool) -> None:
        width = _indent_of(flags)
        if width > 0:
            self._emit("\n" + " " * (depth * width))
        elif space and not flags & DumpFlags.COMPACT:
            self._emit(" ")

    def _enter(self, value: JsonValue) -> None:
        if id(value) in self._parents:
            raise JsonError("circular reference", ErrorCode.INVALID_ARGUMENT)
        self._parents.add(id(value))

    def dump(self, value: JsonValue | None, flags: int, depth: int) -> None:
        embed = bool(flags & DumpFlags.EMBED)
        flags &= ~DumpFlags.EMBED

        if value is None:
            raise JsonError("no value to dump", ErrorCode.INVALID_ARGUMENT)
        if isinstance(value, JsonNull):
            self._emit("null")
        elif isinstance(value, JsonBoolean):
            self._emit("true" if value.value else "false")
        elif isinstance(value, JsonInteger):
            self._emit(str(value.value))
        elif isinstance(value, JsonReal):
            self._emit(
                format_real(
                    value.value,
                    _precision_of(flags),
                    bool(flags & DumpFlags.FRACTIONAL_DIGITS),
                )
            )
        elif isinstance(value, JsonString):
            self._emit(_escape_string(value.value, flags))
        elif isinstance(value, JsonArray):
            self._dump_array(value, flags, depth, embed)
        elif isinstance(value, JsonObject):
            self._dump_object(value, flags, depth, embed)
        else:
            raise JsonError(
                f"cannot dump {type(value).__name__}", ErrorCode.WRONG_TYPE
            )

    def _dump_array(self, array: JsonArray, flags: int, depth: int, embed: bool) -> None:
        self._enter(array)
        items = list(array)
        if not embed:
            self._emit("[")
        if items:
            self._indent(flags, depth + 1, False)
            last = len(items) - 1
            for position, item in enumerate(items):
                self.dump(item, flags, depth + 1)
                if position < last:
                    self._emit(",")
                    self._indent(flags, depth + 1, True)
                else:
                    self._indent(flags, depth, False)
        self._parents.discard(id(array))
        if not embed:
            self._emit("]")

    def _dump_object(self, obj: JsonObject, flags: int, depth: int, embed: bool) -> None:
        self._enter(obj)
        pairs = list(obj.items())
        if flags & DumpFlags.SORT_KEYS:
            pairs.sort(key=lambda pair: pair[0])
        if not embed:
            self._emit("{")
        if pairs:
            self._indent(flags, depth + 1, False)
            last = len(pairs) - 1
            for position, (key, item) in enumerate(pairs):
                self._emit(_escape_string(key, flags))
                self._emit(self._separator)
                self.dump(item, flags, depth + 1)
                if position < last:
                    self._emit(",")
                    self._indent(flags, depth + 1, True)
                else:
                    self._indent(flags, depth, False)
        self._parents.discard(id(obj))
        if not embed:
            self._emit("}")


def dump_callback(
    json: JsonValue | None, callback: Callable[[str], object], flags: int = 0
) -> None:
    """Write ``json`` as text, handing each piece to ``callback``.

    Unless ``ENCODE_ANY`` is set only arrays and objects are accepted.
    Raises JsonError on a wrong value or a circular reference; exceptions
    raised by ``callback`` propagate.
    """
    flags = int(flags)
    if not flags & DumpFlags.ENCODE_ANY and not isinstance(
        json, (JsonArray, JsonObject)
    ):
        raise JsonError(
            "top-level value must be an array or an object",
            ErrorCode.INVALID_ARGUMENT,
        )
    _Dumper(callback, flags).dump(json, flags, 0)


def dumps(json: JsonValue | None, flags: int = 0) -> str:
    """Return ``json`` as JSON text."""
    parts: list[str] = []
    dump_callback(json, parts.append, flags)
    return "".join(parts)


def dumpb(json: JsonValue | None, size: int, flags: int = 0) -> bytes:
    """Return ``json`` as UTF-8 bytes, which must fit in ``size`` bytes."""
    data = dumps(json, flags).encode("utf-8")
    if len(data) > size:
        raise JsonError(
            f"output needs {len(data)} bytes but only {size} are available",
            ErrorCode.INVALID_ARGUMENT,
        )
    return data


def dumpf(json: JsonValue | None, output: IO, flags: int = 0) -> None:
    """Write ``json`` to an open text or binary stream."""
    if isinstance(output, (io.RawIOBase, io.BufferedIOBase)):
        dump_callback(json, lambda chunk: output.write(chunk.encode("utf-8")), flags)
    else:
        dump_callback(json, output.write, flags)


def dump_file(json: JsonValue | None, path: str | os.PathLike[str], flags: int = 0) -> None:
    """Write ``json`` to the file at ``path``, replacing its contents."""
    with open(path, "w", encoding="utf-8", newline="") as output:
        dumpf(json, output, flags)