"""URL-safe, unpadded base64 used for compact fingerprint strings.

The alphabet is ``A-Z a-z 0-9 - _``, and no ``=`` padding is written or
expected. Decoding is lenient: characters outside the alphabet count as
zero, and a single trailing character that cannot form a byte is ignored.
"""

from __future__ import annotations

from typing import Union

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

_REVERSED = {ord(char): index for index, char in enumerate(ALPHABET)}


def encoded_size(size: int) -> int:
    """Return the length of the text that encodes ``size`` bytes."""
    return (size * 4 + 2) // 3


def decoded_size(size: int) -> int:
    """Return the number of bytes decoded from ``size`` characters."""
    return size * 3 // 4


def encode(data: Union[bytes, bytearray, memoryview]) -> str:
    """Encode bytes as unpadded URL-safe base64 text."""
    raw = memoryview(data).tobytes()
    out: list[str] = []
    full = len(raw) - len(raw) % 3
    for start in range(0, full, 3):
        s0, s1, s2 = raw[start:start + 3]
        out.append(ALPHABET[(s0 >> 2) & 63])
        out.append(ALPHABET[((s0 << 4) | (s1 >> 4)) & 63])
        out.append(ALPHABET[((s1 << 2) | (s2 >> 6)) & 63])
        out.append(ALPHABET[s2 & 63])
    tail = raw[full:]
    if len(tail) == 2:
        s0, s1 = tail
        out.append(ALPHABET[(s0 >> 2) & 63])
        out.append(ALPHABET[((s0 << 4) | (s1 >> 4)) & 63])
        out.append(ALPHABET[(s1 << 2) & 63])
    elif len(tail) == 1:
        (s0,) = tail
        out.append(ALPHABET[(s0 >> 2) & 63])
        out.append(ALPHABET[(s0 << 4) & 63])
    return "".join(out)


def _codes(data: Union[str, bytes, bytearray, memoryview]) -> list[int]:
    if isinstance(data, str):
        return [_REVERSED.get(ord(char) & 255, 0) for char in data]
    return [_REVERSED.get(byte, 0) for byte in memoryview(data).tobytes()]


def decode(data: Union[str, bytes, bytearray, memoryview]) -> bytes:
    """Decode unpadded URL-safe base64 text (``str`` or bytes) to bytes."""
    codes = _codes(data)
    out = bytearray()
    full = len(codes) - len(codes) % 4
    for start in range(0, full, 4):
        b0, b1, b2, b3 = codes[start:start + 4]
        out.append(((b0 << 2) | (b1 >> 4)) & 255)
        out.append(((b1 << 4) & 255) | (b2 >> 2))
        out.append(((b2 << 6) & 255) | b3)
    tail = codes[full:]
    if len(tail) == 3:
        b0, b1, b2 = tail
        out.append(((b0 << 2) | (b1 >> 4)) & 255)
        out.append(((b1 << 4) & 255) | (b2 >> 2))
    elif len(tail) == 2:
        b0, b1 = tail
        out.append(((b0 << 2) | (b1 >> 4)) & 255)
    return bytes(out)