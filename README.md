# hessian2

Hessian 2.0 encoding and decoding of scalar values, binary data and
dates, and parsing of the 16-byte Dubbo packet header.

It needs only the standard library and runs on Python 3.10 or newer.

## Installation

```
pip install hessian2
```

## Encoding and decoding values

`hessian2.encoder.Encoder` collects encoded values in a buffer.
`hessian2.decoder.Decoder` reads them back one at a time.

```python
from hessian2.encoder import Encoder
from hessian2.decoder import Decoder

encoder = Encoder()
encoder.encode(True)
encoder.encode(2016.1024)
encoder.encode(b"\x01\x02\x03")
data = encoder.buffer()

decoder = Decoder(data)
print(decoder.decode())  # True
print(decoder.decode())  # 2016.1024
print(decoder.decode())  # b'\x01\x02\x03'
```

`Encoder.encode` accepts these values:

- `None`
- `bool`
- integers in the signed 32-bit range
- `float`
- bytes-like objects
- `datetime.datetime`

Any other value raises `HessianError`, and so does an integer outside
that range. `Encoder.append(data)` adds raw bytes to the buffer.
`Encoder.clean()` empties the buffer.

The module-level helpers in `hessian2.encoder` each return the bytes for
one value:

- `encode_null`
- `encode_bool`
- `encode_int32`
- `encode_double`
- `encode_float32`
- `encode_binary`
- `encode_date_ms`
- `encode_date_minute`

Their behaviour:

- Whole-number doubles that fit in a short are written in the short
  forms.
- `encode_float32` uses the millisecond form when it is exact.
- Binary data is split into chunks of 4096 bytes.
- The date encoders read a naive `datetime` as UTC.
- `encode_date_ms` writes `datetime.min` as null.

### Decoding

`Decoder(data, strict=False, skip=False)` reads from a byte string.
`strict` and `skip` are kept as attributes.

`Decoder.decode()` returns the next value, which is one of:

- `None`
- a `bool`
- an `int`
- a `float`
- `bytes`
- a timezone-aware UTC `datetime`

It raises `EOFError` at the end of input and on the end marker `Z`. It
raises `HessianError` for any other tag.

The typed readers are `decode_int32`, `decode_double`, `decode_binary`
and `decode_date`. Each takes a tag that has already been read. With no
argument, each reads the tag itself.

For null input:

- `decode_int32` returns `0`.
- `decode_binary` returns `b""`.
- `decode_date` returns `hessian2.decoder.ZERO_DATE`, which is
  `datetime.min`.

The lower-level methods are:

- `read_byte()` reads one byte.
- `discard(n)` skips `n` bytes.
- `buffered()` returns the number of unread bytes.
- `reset(data)` starts over on new input.
- `clean()` drops the recorded type and object references.

`TypeRefs` records type names by index.

## Fixed-width packing

`hessian2.codec` packs and unpacks big-endian numbers:

- `pack_int8`, `pack_int16`, `pack_uint16`, `pack_int32`, `pack_int64`,
  `pack_float64`
- `unpack_int16`, `unpack_uint16`, `unpack_int32`, `unpack_int64`,
  `unpack_float64`

Packing a value that does not fit raises `ValueError`. Unpacking from
too few bytes raises `NotEnoughBufferError`.

```python
from hessian2.codec import pack_int32, unpack_int32, sprint_hex

raw = pack_int32(0x12344678)
assert unpack_int32(raw) == 0x12344678
print(sprint_hex(raw))  # []byte{0x12,0x34,0x46,0x78,}
```

## Java value types

`hessian2.java8_time` has dataclasses for the `java.time` handle types:

- `Duration`
- `Instant`
- `LocalDate`
- `LocalTime`
- `LocalDateTime`
- `MonthDay`
- `ZoneOffset`
- `OffsetDateTime`
- `OffsetTime`
- `Period`
- `Year`
- `YearMonth`
- `ZonedDateTime`

Each class has a `java_class_name`. `field_names(obj)` returns the wire
field names of an instance or class, in order, for example
`("dateTime", "offset", "zoneId")`.

`hessian2.arrays` has wrappers for boxed Java arrays:

- `BooleanArray`
- `IntegerArray`
- `ByteArray`
- `ShortArray`
- `LongArray`
- `FloatArray`
- `DoubleArray`
- `CharacterArray`

`get()` returns the elements as a list. `set(values)` converts the
values and stores them. `CharacterArray.set` instead appends the given
strings to the characters it already holds.

## Dubbo header

`hessian2.protocol.HessianCodec` takes a binary stream or a bytes
object. Its `read_header()` parses the next 16-byte header into a
`DubboHeader`, whose `type` is a combination of `PackageType` flags.

```python
from hessian2.protocol import HessianCodec

codec = HessianCodec(frame_bytes)
header = codec.read_header()
print(header.serial_id, header.type, header.id, header.body_len)
```

`read_header()` raises these errors:

- `HeaderNotEnoughError` when fewer than 16 bytes are available.
- `IllegalPackageError` on a bad magic number.
- `HessianError` on a zero serialization id.
- `BodyNotEnoughError` when the stream can tell that the announced body
  is not yet there.

`Service` describes a target service. Nothing in the package consumes
it yet.

## What it does not do

- No strings, longs, lists, maps, typed objects or references.
  - `Encoder` rejects them.
  - `Decoder` raises `HessianError` on their tags.
- The `java8_time` and `arrays` types are plain value classes. The
  encoder and decoder do not serialize them.
- `HessianCodec` only reads headers. It does not write packets. It does
  not read request or response bodies or attachments.

## Errors

Every error the package defines derives from
`hessian2.constants.HessianError`. The more specific ones are:

- `NotEnoughBufferError`
- `IllegalRefIndexError`
- `HeaderNotEnoughError`
- `BodyNotEnoughError`
- `IllegalPackageError`
- `JavaExceptionError`

## Running the tests

```
pip install -e ".[test]"
pytest
```