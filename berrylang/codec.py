"""Base64 and hexadecimal conversions used by the ``bytes`` type."""

from __future__ import annotations

__all__ = [
    "encode_base64",
    "decode_base64",
    "decoded_length",
    "encoded_length",
    "hex_to_bytes",
    "bytes_to_hex",
]

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DECODE_TABLE = {ord(ch): value for value, ch in enumerate(_ALPHABET)}
_HEX_DIGITS = "0123456789ABCDEF"


def _as_bytes(text: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"expected str or bytes, not {type(text).__name__}")


def encoded_length(length: int) -> int:
    """Return the number of base64 characters needed for *length* bytes."""
    if length < 0:
        raise ValueError("length must not be negative")
    return (length + 2) // 3 * 4


def _valid_prefix(raw: bytes) -> list[int]:
    """Return the 6-bit values of the leading run of base64 characters."""
    values = []
    for byte in raw:
        value = _DECODE_TABLE.get(byte)
        if value is None:
            break
        values.append(value)
    return values


def decoded_length(text: str | bytes) -> int:
    """Return how many bytes the base64 text decodes to.

    Only the leading run of alphabet characters counts; padding or any
    other character ends the input.
    """
    count = len(_valid_prefix(_as_bytes(text)))
    length = count // 4 * 3
    remainder = count % 4
    if remainder == 2:
        return length + 1
    if remainder == 3:
        return length + 2
    return length


def encode_base64(data: bytes | bytearray | memoryview) -> str:
    """Encode *data* as padded base64 without line breaks."""
    raw = bytes(data)
    out: list[str] = []
    full = len(raw) - len(raw) % 3
    for start in range(0, full, 3):
        a, b, c = raw[start:start + 3]
        out.append(_ALPHABET[a >> 2])
        out.append(_ALPHABET[(a & 0x03) << 4 | b >> 4])
        out.append(_ALPHABET[(b & 0x0F) << 2 | c >> 6])
        out.append(_ALPHABET[c & 0x3F])
    tail = raw[full:]
    if len(tail) == 1:
        a = tail[0]
        out.append(_ALPHABET[a >> 2])
        out.append(_ALPHABET[(a & 0x03) << 4])
        out.append("==")
    elif len(tail) == 2:
        a, b = tail
        out.append(_ALPHABET[a >> 2])
        out.append(_ALPHABET[(a & 0x03) << 4 | b >> 4])
        out.append(_ALPHABET[(b & 0x0F) << 2])
        out.append("=")
    return "".join(out)


def decode_base64(text: str | bytes) -> bytes:
    """Decode base64 text, stopping at the first non-alphabet character.

    A trailing lone character that cannot form a byte is ignored.
    """
    values = _valid_prefix(_as_bytes(text))
    total = decoded_length(text)
    out = bytearray()
    pos = 0
    while len(out) + 3 <= total:
        a, b, c, d = values[pos:pos + 4]
        out.append((a << 2 | b >> 4) & 0xFF)
        out.append((b << 4 | c >> 2) & 0xFF)
        out.append((c << 6 | d) & 0xFF)
        pos += 4
    remaining = total - len(out)
    if remaining >= 1:
        a, b = values[pos], values[pos + 1]
        out.append((a << 2 | b >> 4) & 0xFF)
    if remaining == 2:
        b, c = values[pos + 1], values[pos + 2]
        out.append((b << 4 | c >> 2) & 0xFF)
    return bytes(out)


def _hex_value(byte: int) -> int:
    if 0x30 <= byte <= 0x39:
        return byte - 0x30
    if 0x41 <= byte <= 0x46:
        return byte - 0x41 + 10
    if 0x61 <= byte <= 0x66:
        return byte - 0x61 + 10
    return 0


def hex_to_bytes(text: str | bytes) -> bytes:
    """Convert hex digits to bytes.

    Characters that are not hex digits count as zero, and a trailing odd
    digit is ignored.
    """
    raw = _as_bytes(text)
    usable = len(raw) - len(raw) % 2
    return bytes(
        _hex_value(raw[i]) << 4 | _hex_value(raw[i + 1])
        for i in range(0, usable, 2)
    )


def bytes_to_hex(data: bytes | bytearray | memoryview) -> str:
    """Return *data* as upper-case hex digits."""
    return "".join(
        _HEX_DIGITS[byte >> 4] + _HEX_DIGITS[byte & 0xF] for byte in bytes(data)
    )