"""The ``bytes`` value type: a mutable, optionally fixed-size byte buffer."""

from __future__ import annotations

import math
import struct

from .buffer import Buffer, BytesResizeError
from .codec import bytes_to_hex, decode_base64, decoded_length, encode_base64

__all__ = ["Bytes", "BytesResizeError"]

DEFAULT_SIZE = 28
HEADROOM = 8
_BITS_MESSAGE = "length in bits must be between 0 and 32"


def _to_raw(text: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8", errors="surrogateescape")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError("operand must be a string")


def _c_mod(value: int, divisor: int) -> int:
    """Remainder with the sign of the dividend."""
    rest = abs(value) % divisor
    return -rest if value < 0 else rest


def _mapped_buffer(target: bytearray, size: int) -> Buffer:
    if not size:
        raise ValueError("size is required")
    length = abs(size)
    if length > len(target):
        raise ValueError("mapped region is smaller than the requested size")
    buf = Buffer(0, mapped=True)
    buf.storage = target
    buf.size = length
    buf.length = length
    return buf


class Bytes:
    """A byte buffer with a capacity, a used length and typed accessors.

    ``Bytes(source, size)`` accepts a hex string, an int giving the
    capacity, immutable bytes to copy, or a ``bytearray`` to map (which
    requires *size*). A negative size makes the buffer fixed-size.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, source=None, size: int | None = None):
        if isinstance(source, bool):
            raise TypeError("unsupported source for bytes")
        if isinstance(source, int):
            size, source = source, None
        if size is not None and (isinstance(size, bool) or not isinstance(size, int)):
            raise TypeError("size must be of type 'int'")
        size_arg = size or 0
        if isinstance(source, bytearray):
            self._buf = _mapped_buffer(source, size_arg)
            return

        fixed = False
        if size_arg == 0:
            size_arg = DEFAULT_SIZE
        if size_arg >= 0:
            capacity = size_arg + HEADROOM
        else:
            capacity = -size_arg
            fixed = True

        hex_raw: bytes | None = None
        initial: bytes | None = None
        needed = 0
        if isinstance(source, str):
            hex_raw = _to_raw(source)
            needed = len(hex_raw) // 2
        elif isinstance(source, (bytes, memoryview)):
            initial = bytes(source)
            needed = len(initial)
        elif source is not None:
            raise TypeError("unsupported source for bytes")
        if needed > capacity:
            if fixed:
                raise BytesResizeError()
            capacity = needed

        self._buf = Buffer(capacity, fixed=fixed)
        if hex_raw is not None:
            self._buf.set_len(0)
            self._buf.add_hex(hex_raw)
        elif initial is not None:
            self._load(initial)
        if fixed:
            self._buf.set_len(self._buf.size)

    @classmethod
    def _from_data(cls, data: bytes) -> "Bytes":
        obj = Bytes(len(data))
        obj._load(data)
        return obj

    def _load(self, raw: bytes) -> None:
        """Replace the content with *raw*, truncated to the capacity."""
        buf = self._buf
        count = min(len(raw), buf.size)
        buf.set_len(0)
        buf.storage[0:count] = raw[:count]
        buf.length = count

    def _check_resizable(self) -> None:
        if self._buf.fixed:
            raise BytesResizeError()

    def __repr__(self) -> str:
        return self.tostring()

    def __str__(self) -> str:
        return self.tostring()

    def __bytes__(self) -> bytes:
        return self._buf.data()

    def __len__(self) -> int:
        return self._buf.length

    def tostring(self, max_len: int = 32) -> str:
        """Return ``bytes('HEX')``, truncated to *max_len* bytes (0: no limit)."""
        data = self._buf.data()
        truncated = max_len > 0 and len(data) > max_len
        if truncated:
            data = data[:max_len]
        return "bytes('" + bytes_to_hex(data) + ("..." if truncated else "") + "')"

    def tohex(self) -> str:
        """Return the content as upper-case hex digits."""
        return bytes_to_hex(self._buf.data())

    def asstring(self) -> str:
        """Return the raw content as a string."""
        return self._buf.data().decode("utf-8", errors="surrogateescape")

    def fromstring(self, text) -> "Bytes":
        """Replace the content with the bytes of *text*."""
        raw = _to_raw(text)
        buf = self._buf
        if buf.fixed and buf.length != len(raw):
            raise BytesResizeError()
        buf.resize(len(raw))
        self._load(raw)
        return self

    def tob64(self) -> str:
        """Return the content encoded in base64."""
        return encode_base64(self._buf.data())

    def fromb64(self, text) -> "Bytes":
        """Replace the content with the decoded base64 *text*."""
        raw = _to_raw(text)
        length = decoded_length(raw)
        buf = self._buf
        if buf.fixed and buf.length != length:
            raise BytesResizeError()
        buf.resize(length)
        if length > buf.size:
            raise MemoryError("cannot allocate buffer")
        self._load(decode_base64(raw))
        return self

    def fromhex(self, text, start: int = 0) -> "Bytes":
        """Replace the content with hex *text*, skipping *start* characters."""
        raw = _to_raw(text)
        start = max(0, min(start, len(raw)))
        length = (len(raw) - start) // 2
        buf = self._buf
        if buf.fixed and buf.length != length:
            raise BytesResizeError()
        buf.resize(length)
        if length > buf.size:
            raise MemoryError("cannot allocate buffer")
        buf.set_len(0)
        buf.add_hex(raw[start:])
        return self

    def add(self, value: int, size: int = 1) -> "Bytes":
        """Append an integer on 1, 2 or 4 bytes (negative size: big endian)."""
        self._buf.reserve(4)
        self._check_resizable()
        self._buf.add_int(value, size)
        return self

    def get(self, index: int, size: int = 1) -> int | None:
        """Read an unsigned integer; 4-byte reads are signed 32-bit."""
        return self._buf.get_int(index, size, signed=False)

    def geti(self, index: int, size: int = 1) -> int | None:
        """Read a signed integer."""
        return self._buf.get_int(index, size, signed=True)

    def set(self, index: int, value: int, size: int = 1) -> None:
        """Overwrite an integer in place; out-of-range writes are ignored."""
        self._buf.set_int(index, value, size)

    seti = set

    def getfloat(self, index: int, big_endian: bool = False) -> float:
        """Read a 32-bit float; out-of-range reads give 0.0."""
        bits = self._buf.get_int(index, -4 if big_endian else 4)
        raw = (bits & 0xFFFFFFFF).to_bytes(4, "little")
        return struct.unpack("<f", raw)[0]

    def setfloat(self, index: int, value: float, big_endian: bool = False) -> None:
        """Write a 32-bit float in place."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError("value must be int or real")
        try:
            packed = struct.pack("<f", float(value))
        except OverflowError:
            packed = struct.pack("<f", math.copysign(math.inf, value))
        bits = struct.unpack("<I", packed)[0]
        self._buf.set_int(index, bits, -4 if big_endian else 4)

    def setbytes(self, index: int, source, start: int = 0, length: int | None = None) -> None:
        """Copy bytes from *source* into this buffer at *index*, in place."""
        if isinstance(source, Bytes):
            src = source._buf.data()
        elif isinstance(source, (bytes, bytearray, memoryview)):
            src = bytes(source)
        else:
            raise TypeError("operand must be bytes")
        buf = self._buf
        total = len(src)
        index = max(0, min(index, buf.length))
        start = max(0, min(start, total))
        count = total - start
        if length is not None:
            count = max(0, length)
            if count >= total:
                count = total
        if index + count >= buf.length:
            count = buf.length - index
        if count > 0:
            chunk = src[start:start + count]
            buf.storage[index:index + len(chunk)] = chunk

    def reverse(self, index: int = 0, length: int | None = None, group: int = 1) -> "Bytes":
        """Reverse, in place, the order of *group*-byte packets in a range."""
        buf = self._buf
        index = max(0, min(index, buf.length))
        count = buf.length if length is None else length
        if count < 0:
            count = buf.length - index
        if index + count >= buf.length:
            count = buf.length - index
        if group <= 0:
            group = 1
        count -= count % group
        if count > 0:
            segment = bytes(buf.storage[index:index + count])
            packets = [segment[i:i + group] for i in range(0, count, group)]
            buf.storage[index:index + count] = b"".join(reversed(packets))
        return self

    def __getitem__(self, key):
        if isinstance(key, slice):
            return Bytes._from_data(self._buf.data()[key])
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError("bytes index must be int or slice")
        length = self._buf.length
        index = key + length if key < 0 else key
        if 0 <= index < length:
            return self._buf.storage[index]
        raise IndexError("bytes index out of range")

    def __setitem__(self, index: int, value: int) -> None:
        if (
            isinstance(index, int) and isinstance(value, int)
            and not isinstance(index, bool)
            and 0 <= index < self._buf.length
        ):
            self._buf.set_int(index, value, 1)
            return
        raise IndexError("bytes index out of range or value non int")

    def resize(self, size: int) -> "Bytes":
        """Set the length, padding with zeros when growing."""
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError("size must be of type 'int'")
        size = max(size, 0)
        buf = self._buf
        if buf.fixed and buf.length != size:
            raise BytesResizeError()
        buf.resize(size)
        buf.set_len(size)
        return self

    def clear(self) -> None:
        """Empty the buffer."""
        self._check_resizable()
        self._buf.set_len(0)

    def copy(self) -> "Bytes":
        """Return an independent copy."""
        return Bytes._from_data(self._buf.data())

    def __add__(self, other):
        if not isinstance(other, Bytes):
            return NotImplemented
        return Bytes._from_data(self._buf.data() + other._buf.data())

    def connect(self, other) -> "Bytes":
        """Append a byte (int) or another Bytes in place; return self."""
        self._check_resizable()
        buf = self._buf
        if isinstance(other, int) and not isinstance(other, bool):
            buf.resize(buf.length + 1)
            buf.add_int(other & 0xFF, 1)
            return self
        if isinstance(other, Bytes):
            extra = other._buf.data()
            buf.resize(buf.length + len(extra))
            buf.add_buffer(other._buf)
            return self
        raise TypeError("operand must be bytes or int")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bytes):
            return False
        return self._buf.equals(other._buf)

    def ismapped(self) -> bool:
        """Return True if the memory belongs to an external bytearray."""
        return self._buf.mapped

    def getbits(self, offset: int, length: int) -> int:
        """Read a bit field of *length* bits starting at bit *offset* (LSB first)."""
        if length <= 0 or length > 32:
            raise ValueError(_BITS_MESSAGE)
        result = 0
        byte_index = offset >> 3
        offset = _c_mod(offset, 8)
        shift = 0
        while length > 0:
            block = min(8 - offset, length)
            mask = ((1 << block) - 1) << offset
            result |= ((self[byte_index] & mask) >> offset) << shift
            shift += block
            length -= block
            offset = 0
            byte_index += 1
        return result

    def setbits(self, offset: int, length: int, value) -> "Bytes":
        """Write *value* into a bit field of *length* bits at bit *offset*."""
        if length < 0 or length > 32:
            raise ValueError(_BITS_MESSAGE)
        value = int(value)
        byte_index = offset >> 3
        offset = _c_mod(offset, 8)
        while length > 0:
            block = min(8 - offset, length)
            mask_val = (1 << block) - 1
            mask_inv = 0xFF - (mask_val << offset)
            self[byte_index] = (self[byte_index] & mask_inv) | ((value & mask_val) << offset)
            value >>= block
            length -= block
            offset = 0
            byte_index += 1
        return self