"""Growable byte storage with a capacity and a used length."""

from __future__ import annotations

from .codec import hex_to_bytes

__all__ = ["BytesResizeError", "Buffer", "MAX_SIZE", "MIN_SIZE"]

MAX_SIZE = 32 * 1024
MIN_SIZE = 4
_SHRINK_FLOOR = 64
_VALID_SIZES = (-4, -2, -1, 0, 1, 2, 4)


class BytesResizeError(Exception):
    """Raised when a fixed-size buffer would have to change size."""

    def __init__(self, message: str = "bytes object size if fixed and cannot be resized"):
        super().__init__(message)


def _check_size(size: int) -> None:
    if size not in _VALID_SIZES:
        raise ValueError("size must be -4, -2, -1, 0, 1, 2 or 4.")


class Buffer:
    """Byte storage of capacity ``size`` holding ``length`` used bytes.

    Writes that do not fit are silently dropped, as are accesses outside
    the used length; reads outside it return 0.
    """

    def __init__(self, size: int = 0, fixed: bool = False, mapped: bool = False):
        if size < 0:
            raise ValueError("size must not be negative")
        self.fixed = bool(fixed or mapped)
        self.mapped = bool(mapped)
        self.size = 0
        self.length = 0
        self.storage = bytearray()
        self._allocate(size)
        if self.fixed:
            self.set_len(self.size)

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"Buffer(size={self.size}, length={self.length}, data={self.data()!r})"

    def _allocate(self, size: int) -> None:
        if not self.fixed and size < MIN_SIZE:
            size = MIN_SIZE
        size = min(size, MAX_SIZE)
        if size > len(self.storage):
            self.storage.extend(bytes(size - len(self.storage)))
        else:
            del self.storage[size:]
        self.size = size
        self.length = min(self.length, size)

    def set_len(self, length: int) -> None:
        """Set the used length, capped at the capacity; new bytes are zero."""
        length = max(0, min(length, self.size))
        if length > self.length:
            self.storage[self.length:length] = bytes(length - self.length)
        self.length = length

    def reserve(self, add_size: int) -> None:
        """Make room for *add_size* more bytes, growing if needed."""
        if self.length + add_size > self.size:
            if self.fixed:
                raise BytesResizeError()
            self.resize(self.length + add_size)

    def resize(self, new_size: int) -> None:
        """Grow the capacity to *new_size*; shrink only when well oversized.

        Mapped buffers are left alone. A fixed buffer cannot change size.
        """
        if self.mapped:
            return
        if self.fixed:
            if new_size != self.size:
                raise BytesResizeError()
            return
        if self.size >= new_size:
            if self.size <= _SHRINK_FLOOR:
                return
            if self.size < new_size * 2:
                return
        self._allocate(new_size)

    def _append(self, raw: bytes) -> None:
        end = self.length + len(raw)
        self.storage[self.length:end] = raw
        self.length = end

    def add_int(self, value: int, size: int = 1) -> int:
        """Append *value* on |size| bytes (negative size: big endian).

        Nothing is written if there is no room. Returns the new length.
        """
        _check_size(size)
        width = abs(size)
        if width == 0:
            return self.length
        if self.length + width <= self.size:
            order = "big" if size < 0 else "little"
            masked = value & ((1 << (8 * width)) - 1)
            self._append(masked.to_bytes(width, order))
        return self.length

    def get_int(self, offset: int, size: int = 1, signed: bool = False) -> int | None:
        """Read an integer of |size| bytes at *offset*.

        Size 0 gives None; out-of-range reads give 0. Four-byte values are
        always read as signed 32-bit integers.
        """
        _check_size(size)
        width = abs(size)
        if width == 0:
            return None
        if offset < 0 or offset + width > self.length:
            return 0
        order = "big" if size < 0 else "little"
        raw = bytes(self.storage[offset:offset + width])
        return int.from_bytes(raw, order, signed=signed or width == 4)

    def set_int(self, offset: int, value: int, size: int = 1) -> None:
        """Overwrite |size| bytes at *offset*; ignored when out of range."""
        _check_size(size)
        width = abs(size)
        if width == 0 or offset < 0 or offset + width > self.length:
            return
        order = "big" if size < 0 else "little"
        masked = value & ((1 << (8 * width)) - 1)
        self.storage[offset:offset + width] = masked.to_bytes(width, order)

    def add_buffer(self, other: "Buffer") -> int:
        """Append the used bytes of *other* if they all fit."""
        if self.length + other.length <= self.size:
            self._append(other.data())
        return self.length

    def add_hex(self, text: str | bytes) -> int:
        """Append bytes decoded from hex, dropping those that do not fit."""
        room = self.size - self.length
        self._append(hex_to_bytes(text)[:max(room, 0)])
        return self.length

    def data(self) -> bytes:
        """Return the used bytes."""
        return bytes(self.storage[:self.length])

    def equals(self, other: "Buffer | None") -> bool:
        """Return True if *other* holds the same used bytes."""
        if other is self:
            return True
        if other is None:
            return False
        return self.length == other.length and self.data() == other.data()