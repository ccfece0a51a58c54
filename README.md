# logixcip

Building blocks for speaking CIP (the Common Industrial Protocol, as carried
by EtherNet/IP) the way Logix controllers do. It is meant for people writing
controller emulators, test servers and tooling that need to encode and decode
CIP messages without real hardware. It has no dependencies beyond the
standard library.

## What is inside

- `logixcip.services`
  - `CIPService` is a one-byte service code with `is_response()`,
    `as_response()` and `un_response()`. Named codes are class attributes,
    such as `CIPService.READ`, `CIPService.WRITE`, `CIPService.FORWARD_OPEN`
    and `CIPService.MULTIPLE_SERVICE`.
  - `CIPCommand` is an `IntEnum` of the encapsulation command codes
    (`REGISTER_SESSION`, `SEND_RR_DATA`, `SEND_UNIT_DATA` and the rest).
- `logixcip.types`
  - `CIPType` holds the data type codes, with `size()` and `is_atomic()`.
  - `cip_type_of(value)` returns `(CIPType, element_count)` for a Python
    value. A plain `int` maps to `DINT` and a `float` to `LREAL`. The
    fixed-width classes `Int8`, `UInt8`, `Int16`, `UInt16`, `Int32`,
    `UInt32`, `Int64`, `UInt64` and `Float32` select a specific type.
  - `read_value(cip_type, stream)` decodes one element from a binary stream
    or from `bytes`.
  - `get_bit(cip_type, value, bitpos)` reads one bit of an integer value. It
    returns `False` when the position is outside the type's width.
  - Both functions raise `CIPDataError` for types they cannot handle.
- `logixcip.headers`: `WriteResultHeader` (with sequence count) and
  `UnconnWriteResultHeader` (without one). These are the reply headers for
  read and write services, with `pack()` and `unpack()`.
- `logixcip.messages`
  - `ForwardOpenStandard` and `ForwardOpenLarge` parse forward-open requests
    with `unpack(data)`. `connection_path(data)` returns the path that
    follows the fixed part.
  - `ForwardOpenReply.pack()` builds the success reply.
  - `ListServicesReply.pack()` builds the list-services reply, which carries
    `ServiceCapabilityFlags`.
- `logixcip.connections`: `ConnectionManager` is a thread-safe collection of
  `ServerConnection` records. It looks them up or closes them by serial
  number (`get_by_id` / `close_by_id`), by O->T id (`get_by_ot` /
  `close_by_ot`) or by T->O id (`get_by_to` / `close_by_to`). A missing
  connection raises `ConnectionNotFoundError`. Closing a connection sets its
  `open` to `False`.
- `logixcip.router`
  - `PathRouter` maps CIP route bytes to `CIPEndpoint` objects through
    `handle()` and `resolve()`.
  - `MapTagProvider` is an endpoint that keeps tags in a dictionary.
- `logixcip.cipstring`: the reply form of Logix STRING values, through
  `CIPStringPacker`, `encode_cip_string()` and `decode_cip_string()`.
- `logixcip.udt`: `multi_to_dict()` and `udt_to_dict()` flatten dataclass
  instances into `{tag: value}` maps so that several tags can be written at
  once.
  - In `multi_to_dict()`, each field names its tag in
    `field(metadata={"tag": ...})`.
  - In `udt_to_dict()`, keys are `"prefix.FieldName"`.
  - Nested dataclasses are expanded. Tuple fields are skipped.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Example

```python
from logixcip.router import PathRouter, MapTagProvider
from logixcip.services import CIPService
from logixcip.cipstring import encode_cip_string, decode_cip_string

provider = MapTagProvider()
provider.tag_write("TestDint", 36)

router = PathRouter()
router.handle(bytes([0x01, 0x00]), provider)

endpoint = router.resolve(bytes([0x01, 0x00]))
assert endpoint.tag_read("testdint", 1) == 36

assert CIPService.READ.as_response().is_response()
assert decode_cip_string(encode_cip_string("Something")) == "Something"
```

### Notes on `MapTagProvider`

- Tag names ignore case.
- Array indexes and member dots in a name are part of the key; they are not
  interpreted.
- Reading a list, `bytes` or `bytearray` value returns its first `qty`
  elements.
- A path with no endpoint behind it raises `PathNotFoundError`.
- Reading a tag that was never written raises `TagNotFoundError`.
- The IO methods raise `UnsupportedOperationError`.

## What it does not do

This package gives you the parts; it is not a controller emulator you can
run. It has no command to start and opens no sockets. There is no TCP or UDP
listener, no session handling, and no dispatcher that turns incoming
encapsulation packets into calls on a `PathRouter`. There is no cyclic
class 1 IO sender. It ships no ready-made Identity object attribute table,
and it has no client for reading from or writing to a real controller. All
of that networking you wire up yourself from the pieces above.