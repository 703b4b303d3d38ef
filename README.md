# jsonval

`jsonval` is a small library for building, comparing, copying and encoding
JSON values. It has no dependencies outside the standard library and needs
Python 3.10 or later.

Its modules:

- `jsonval.value` – the value model: `JsonObject`, `JsonArray`,
  `JsonString`, `JsonInteger`, `JsonReal`, `JsonBoolean` and `JsonNull`,
  tagged by `JsonType`, plus `from_python`, `to_python`, `equal`, `copy`
  and `deep_copy`;
- `jsonval.hashtable` – `HashTable`, the insertion-ordered string-keyed
  table that holds the members of a `JsonObject`;
- `jsonval.dump` – the encoder, controlled by bit flags (`DumpFlags`,
  `indent`, `real_precision`);
- `jsonval.tree` – a plain-text outline of a value (`describe`,
  `print_json`);
- `jsonval.errors` – `JsonError` and `ErrorCode`;
- `jsonval.seed` – a process-wide 32-bit seed value.

## What it does not do

There is no parser: the package cannot read JSON text. Values are built
with the constructors or with `from_python`. There is also no command-line
program.

## Building values

```python
from jsonval.value import JsonArray, JsonInteger, JsonObject, JsonString, from_python, to_python

obj = JsonObject()
obj.set("name", JsonString("barney"))
obj.set("age", JsonInteger(42))

tags = JsonArray()
tags.append(JsonString("a"))
tags.append(JsonString("b"))
obj.set("tags", tags)

print(len(obj))           # 3
print(obj.get("name"))    # JsonString('barney')
print(obj.get("missing")) # None

value = from_python({"n": [1, 2, 3], "ok": True, "nothing": None})
print(to_python(value))   # {'n': [1, 2, 3], 'ok': True, 'nothing': None}
```

Objects keep their keys in the order they were first added; replacing a
value keeps the key in place. `update`, `update_existing` and
`update_missing` merge another object in, taking all keys, only keys
already present, or only keys not yet present. `delete` raises `KeyError`
for an absent key.

Arrays support `get` (returns `None` out of range), `set`, `append`,
`insert` (the index may equal the length), `remove`, `clear` and `extend`;
`set`, `insert` and `remove` raise `IndexError` on a bad index.

Scalars check their contents:

- `JsonInteger` holds values in the signed 64-bit range and raises
  `OverflowError` outside it;
- `JsonReal` raises `ValueError` for NaN and infinities;
- `JsonString` and object keys must encode as UTF-8 (lone surrogates do
  not), otherwise `JsonError` with `ErrorCode.INVALID_UTF8` is raised.
  `JsonString.length` is the length in UTF-8 bytes.

`true`, `false` and `null` are singletons; `boolean(flag)` and `null()`
return them.

## Equality and copies

```python
from jsonval.value import copy, deep_copy, equal, from_python

original = from_python([1, "foo", 3.141592, {"foo": "bar"}])

shallow = copy(original)     # new array, same elements
deep = deep_copy(original)   # new array, new elements

assert equal(original, shallow) and original == shallow
assert shallow.get(0) is original.get(0)
assert deep.get(0) is not original.get(0)
```

Copying `true`, `false` or `null` returns the same value; `copy(None)` and
`deep_copy(None)` return `None`. `deep_copy` raises `ValueError` for a
container that contains itself.

## Encoding

```python
from jsonval.dump import DumpFlags, dumps, indent, real_precision
from jsonval.value import from_python

doc = from_python({"b": 1, "a": [1.5, 2, "x/y"]})

print(dumps(doc))                    # {"b": 1, "a": [1.5, 2, "x/y"]}
print(dumps(doc, DumpFlags.COMPACT)) # {"b":1,"a":[1.5,2,"x/y"]}
print(dumps(doc, indent(4) | DumpFlags.SORT_KEYS))
print(dumps(doc, real_precision(3)))
```

Flags combine with `|`:

- `indent(n)` – newlines and `n` spaces per level (0 to 31);
- `COMPACT` – no spaces after `,` and `:`;
- `ENSURE_ASCII` – escape every non-ASCII character as `\uXXXX`, with
  surrogate pairs above U+FFFF;
- `SORT_KEYS` – write object keys in sorted order (insertion order
  otherwise);
- `PRESERVE_ORDER` – accepted, but has no effect: insertion order is the
  default;
- `ENCODE_ANY` – allow a value other than an array or object at the top
  level;
- `ESCAPE_SLASH` – write `/` as `\/`;
- `EMBED` – leave out the outermost brackets or braces;
- `real_precision(n)` – significant digits for reals (17 when 0);
- `FRACTIONAL_DIGITS` – make the precision count digits after the point.

`format_real(value, precision, fractional_digits)` is the number formatting
used for reals; its result always reads back as a real (`1.0`, `1e-7`).

Destinations:

- `dumps(json, flags)` returns a string;
- `dumpb(json, size, flags)` returns UTF-8 bytes, raising `JsonError` if
  they need more than `size` bytes;
- `dumpf(json, output, flags)` writes to an open text or binary stream;
- `dump_file(json, path, flags)` writes a UTF-8 file by path;
- `dump_callback(json, callback, flags)` hands each piece of text to
  `callback`; exceptions from the callback propagate.

The encoder raises `JsonError` when the top-level value is not allowed by
the flags, when the value is `None`, or when a container contains itself.

## Printing a value as an outline

```python
from jsonval.tree import describe, print_json
from jsonval.value import from_python

value = from_python([True, None, 1, 0.0, "", {"name": "barney"}])
print_json(value)          # to standard output, or pass file=...
text = describe(value)     # the same text as a string
```

prints:

```
JSON Array of 6 elements:
  JSON True
  JSON Null
  JSON Integer: "1"
  JSON Real: 0.000000
  JSON String: ""
  JSON Object of 1 pair:
    JSON Key: "name"
    JSON String: "barney"
```

Strings and keys are shown up to their first NUL character.

## Errors

`jsonval.errors.JsonError` carries `text` (at most 158 characters), an
`ErrorCode` in `code`, `line`, `column` and `position` (defaulting to -1,
-1 and 0) and `source`. `format_source(source)` shortens a source
description of 80 or more characters to its tail, prefixed with `...`.

## Seed

`jsonval.seed` keeps a process-wide 32-bit seed. `current_seed()` returns
0 until `object_seed(seed)` is called; the first call with a non-zero seed
(after truncation to 32 bits) fixes it, a seed of 0 asks for one from
`generate_seed()`, and later calls change nothing. `generate_seed()`
returns a random non-zero value from the operating system, falling back
to the time and process id. The other modules do not use the seed.