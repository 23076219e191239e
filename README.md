# embjson

A small JSON library for memory-constrained use. Arrays and objects live in
a buffer with a fixed or unbounded capacity. The parser is lenient: it
accepts single quotes, unquoted words, and C and C++ style comments. Output
can be compact or pretty-printed.

## Installing

```
pip install .
```

## Parsing

```python
from embjson.buffer import DynamicJsonBuffer

buffer = DynamicJsonBuffer()
root = buffer.parse_object('{"sensor": "gps", "data": [48.75, 2.30]}')
if root.success():
    print(root["sensor"].as_string())        # gps
    print(root["data"][0].as_(float))        # 48.75
```

A failed parse does not raise. It returns the shared invalid array or object
(`JsonArray.invalid()`, `JsonObject.invalid()`), whose `success()` is
`False`. `parse_array` and `parse_object` take an optional `nesting_limit`
(default 10), which bounds how deeply containers may nest.

The parser keeps unquoted tokens such as numbers, `true` and `null` as raw
text (`embjson.variant.Unparsed`). It converts them only when you ask for a
type:

- `as_(int)`, `as_(float)`, `as_(bool)` and `as_(str)` convert the value, or
  fall back to `0`, `0.0`, `False` or `None`.
- `is_(kind)` tells whether the value is of that kind.
- `as_array()` and `as_object()` return the container, or the invalid one.

A value can also be compared directly with a Python value. The value is
converted to the other operand's type first:

```python
obj = buffer.parse_object("{'n': 42}")
assert obj["n"] == 42 and obj["n"] < 43
```

Backslash escapes cover `\b \f \n \r \t`. Any other escaped character stands
for itself, so `\u` sequences are not decoded.

## Building and printing

```python
from embjson.buffer import DynamicJsonBuffer

buffer = DynamicJsonBuffer()
obj = buffer.create_object()
obj["key"] = "value"
values = obj.create_nested_array("values")
values.add(4)
values.add(3.14159, 4)          # printed with 4 decimals (default is 2)

print(obj.to_string())          # {"key":"value","values":[4,3.1416]}
print(obj.to_pretty_string())   # two-space indentation, CRLF line endings
print(obj.measure_length())     # length of the compact form
```

Every array, object and variant has the following output methods:

- `print_to(sink)` and `pretty_print_to(sink)` write to any
  `embjson.printing.Print` sink and return the number of characters stored.
  For example, `StreamPrintAdapter(sys.stdout)` writes to a text stream.
- `print_to_buffer(capacity)` returns the compact form, truncated to
  `capacity` characters.
- `measure_pretty_length()` returns the length of the pretty form.
- `str()` returns the compact form.

Iterating over an array yields its `JsonVariant` elements. Iterating over an
object yields `JsonPair` entries, each with a `key` and a `value` that can
both be assigned:

```python
for pair in obj:
    print(pair.key, pair.value)
```

Arrays support these methods: `add`, `set`, `get`, `get_as`, `is_`,
`remove_at`, `create_nested_array` and `create_nested_object`.

Objects support these methods: `set`, `get`, `get_as`, `is_`,
`contains_key` (also `in`), `remove`, `create_nested_array` and
`create_nested_object`.

Indexing out of range, or with a missing key, gives an undefined variant
instead of raising. Two arrays or objects are equal only when they are the
same instance.

## Bounded memory

`StaticJsonBuffer(capacity)` refuses allocations beyond its capacity. Adding
to a full array returns `False` instead of growing the array.
`json_array_size(n)` and `json_object_size(n)` give the capacity needed for
a container with `n` elements.

```python
from embjson.buffer import StaticJsonBuffer, json_array_size

buffer = StaticJsonBuffer(json_array_size(1))
array = buffer.create_array()
array.add("hello")
array.add("world")      # returns False, no room left
print(array.size())     # 1
```

`DynamicJsonBuffer` has no limit. Its `size()` reports how much has been
charged to it.

## What it does not do

embjson is a library only:

- It has no command-line tool.
- It does not validate strict JSON. Malformed but lenient input, such as
  unquoted words, is accepted.
- It does not map documents to plain Python `dict` and `list` values. You
  work with `JsonObject`, `JsonArray` and `JsonVariant` instead.

## Running the tests

```
pip install .[test]
pytest
```