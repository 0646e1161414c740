# berrylang

Building blocks of a small embeddable scripting language, usable on their own
from Python. The package has no runtime dependencies and supports Python 3.10
and later.

| Module | What it provides |
| --- | --- |
| `berrylang.bytesobj` | `Bytes`, a growable or fixed-size byte buffer with hex/base64 conversion, typed integer and float access, bit fields, slicing and concatenation |
| `berrylang.buffer` | `Buffer`, the low-level storage under `Bytes`, and `BytesResizeError` |
| `berrylang.codec` | `encode_base64`, `decode_base64`, `encoded_length`, `decoded_length`, `hex_to_bytes`, `bytes_to_hex` |
| `berrylang.classes` | the class model: `BerryClass`, `Instance`, `MemberKind`, `Member`, `UNDEFINED`, `is_derived` |
| `berrylang.cli` | command-line option parsing: `parse_args`, `Options`, `UsageError`, `match_option`, `split_module_paths`, `help_text`, `version_text` |
| `berrylang.fileio` | file-system helpers: `is_dir`, `is_file`, `exists`, `get_cwd`, `change_dir`, `make_dir`, `remove_file`, `list_dir`, `file_size` |

## Byte buffers

```python
from berrylang.bytesobj import Bytes

b = Bytes("01FF")
b.tohex()          # '01FF'
b.tostring()       # "bytes('01FF')"
len(b)             # 2

b.add(0x1234, 2)   # append as 16-bit little endian
b.get(2, 2)        # 0x1234
b.add(0x1234, -2)  # a negative size means big endian

c = b + Bytes("AA")            # a new Bytes
c.tob64()
Bytes().fromb64("AQI=").tohex()   # '0102'
```

`Bytes(source, size)` accepts a hex string, an int giving the capacity,
immutable `bytes` to copy, or a `bytearray` to map (which needs a size).
A negative size makes the buffer fixed-size: its length equals the size and
operations that would change the length (`add`, `clear`, `connect`, a
different-length `fromstring`/`fromhex`/`fromb64`/`resize`) raise
`BytesResizeError`. Capacity is capped at 32 KiB (`berrylang.buffer.MAX_SIZE`).

Reads outside the used length return 0 and out-of-range `set` calls are
ignored; indexing with `b[i]` raises `IndexError` instead. Four-byte `get`
reads are signed 32-bit values. `getfloat`/`setfloat` handle 32-bit floats,
`getbits`/`setbits` bit fields of up to 32 bits, and `reverse` reverses the
order of byte groups in a range.

## Encoding helpers

```python
from berrylang import codec

codec.encode_base64(b"abc")        # 'YWJj'
codec.decode_base64("YWJj")        # b'abc'
codec.bytes_to_hex(b"\x01\xab")    # '01AB'
codec.hex_to_bytes("01ab")         # b'\x01\xab'
```

Base64 decoding stops at the first character outside the alphabet; hex
decoding treats non-hex characters as zero and drops a trailing odd digit.

## Classes

```python
from berrylang.classes import BerryClass, is_derived

base = BerryClass("base", None)
base.bind_member("x", True)            # an instance variable
child = BerryClass("child", base)

obj = child.new_instance()
obj.set_member("x", 42)
obj.member("x")                        # 42
is_derived(obj, base)                  # True
```

Methods are bound with `bind_method(name, function, is_static)` and receive
the instance first. `new_instance(*args)` calls the class's `init` if it has
one. An instance with a `member` or `setmember` method uses it for names it
does not define; returning `UNDEFINED` (or `False` from `setmember`) makes the
lookup fail with `AttributeError`.

## Command-line options

```python
from berrylang.cli import parse_args, help_text, version_text

options = parse_args(["-i", "script.be", "arg1"])
options.interactive     # True
options.script          # 'script.be'
options.args            # ['script.be', 'arg1']
print(help_text())
version_text()          # 'Berry 1.1.0'
```

`parse_args` takes the arguments without the program name and raises
`UsageError` for an unknown option. `-m` paths are split on the platform's
path separator.

## What this package does not do

There is no interpreter here: no compiler, virtual machine, REPL or
bytecode file reader or writer, and no installed command. `berrylang.cli`
only parses and describes command-line options; it does not run scripts.

## Running the tests

Install the `test` extra and run pytest from the project directory.