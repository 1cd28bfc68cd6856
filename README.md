# avrobin

A small, dependency-free reader for values in the Avro binary encoding.

`avrobin.reader.Reader` pulls bytes from any binary stream (or from an
in-memory `bytes` object) and decodes Avro primitives: booleans,
zig-zag varint ints and longs, little-endian floats and doubles,
length-prefixed bytes and UTF-8 strings, and array/map block headers.

## Installation

```
pip install avrobin
```

## Usage

```python
import io
from avrobin.reader import Reader

reader = Reader(io.BytesIO(b"\x36\x06foo"), 10)
reader.read_long()    # 27
reader.read_string()  # "foo"
```

The second argument is how many bytes are requested from the stream at
a time (4096 if left out); it must be positive when a stream is given,
otherwise `ValueError` is raised.

To read straight from memory:

```python
reader = Reader.from_bytes(b"\x01")
reader.read_bool()    # True
```

`reset(data)` detaches the reader from its stream, points it at a new
byte string, clears any recorded error and returns the reader.

### Methods

| Method | Returns |
| --- | --- |
| `read(size)` | exactly `size` raw bytes |
| `read_bool()` | `True`/`False` from a single `1`/`0` byte |
| `read_int()` | a zig-zag varint of at most 5 bytes, as a 32-bit value |
| `read_long()` | a zig-zag varint of at most 10 bytes, as a 64-bit value |
| `read_float()` | a little-endian 32-bit float |
| `read_double()` | a little-endian 64-bit double |
| `read_bytes()` | a length-prefixed byte string |
| `read_string()` | a length-prefixed UTF-8 string |
| `read_block_header()` | a `(count, byte_size)` pair |

### Errors

Every failed read raises `avrobin.reader.AvroError`:

- input that ends before a value is complete raises `AvroEOFError`,
  a subclass of both `AvroError` and `EOFError`;
- a boolean byte other than 0 or 1, a varint longer than its maximum,
  a negative bytes or string length, or a string that is not valid
  UTF-8 raises `AvroError` with a message of the form
  `avro: <operation>: <msg>`.

```python
from avrobin.reader import AvroEOFError, Reader

reader = Reader.from_bytes(b"\xe2")
try:
    reader.read_int()
except AvroEOFError:
    pass              # the input ended inside a varint
```

The error raised is also kept on the reader's `error` attribute. The
first error is kept; only an end-of-data error is replaced by a later
one. `report_error(operation, msg)` records such an error without
raising it and returns it.

### Block headers

`read_block_header()` returns a `(count, byte_size)` pair. A negative
count on the wire is returned as positive, together with the byte size
that follows it. Otherwise the size is `0`.

## What it does not do

The package reads single primitive values only. It does not parse
schemas, decode records, enums, unions, arrays or maps as a whole,
write Avro data, or read Avro container files.

## Running the tests

```
pip install -e ".[test]"
pytest
```