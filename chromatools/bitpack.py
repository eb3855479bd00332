"""Packing of small unsigned integers into dense little-endian bit streams.

Values are stored least significant bit first, each taking a fixed number
of bits (3 or 5); bits above that width are dropped. A final partial byte
is zero-filled. Unpacking yields every complete value the bytes hold.
"""

from __future__ import annotations

from typing import Iterable, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _pack(values: Iterable[int], bits: int) -> bytes:
    mask = (1 << bits) - 1
    out = bytearray()
    acc = 0
    filled = 0
    for value in values:
        acc |= (value & mask) << filled
        filled += bits
        while filled >= 8:
            out.append(acc & 0xFF)
            acc >>= 8
            filled -= 8
    if filled:
        out.append(acc & 0xFF)
    return bytes(out)


def _unpack(data: BytesLike, bits: int) -> list[int]:
    mask = (1 << bits) - 1
    out: list[int] = []
    acc = 0
    filled = 0
    for byte in memoryview(data).tobytes():
        acc |= byte << filled
        filled += 8
        while filled >= bits:
            out.append(acc & mask)
            acc >>= bits
            filled -= bits
    return out


def packed_int3_size(size: int) -> int:
    """Return the number of bytes that ``size`` 3-bit values occupy."""
    return (size * 3 + 7) // 8


def pack_int3(values: Iterable[int]) -> bytes:
    """Pack the low 3 bits of each value into bytes."""
    return _pack(values, 3)


def unpacked_int3_size(size: int) -> int:
    """Return the number of 3-bit values held in ``size`` bytes."""
    return size * 8 // 3


def unpack_int3(data: BytesLike) -> list[int]:
    """Unpack bytes into 3-bit values."""
    return _unpack(data, 3)


def packed_int5_size(size: int) -> int:
    """Return the number of bytes that ``size`` 5-bit values occupy."""
    return (size * 5 + 7) // 8


def pack_int5(values: Iterable[int]) -> bytes:
    """Pack the low 5 bits of each value into bytes."""
    return _pack(values, 5)


def unpacked_int5_size(size: int) -> int:
    """Return the number of 5-bit values held in ``size`` bytes."""
    return size * 8 // 5


def unpack_int5(data: BytesLike) -> list[int]:
    """Unpack bytes into 5-bit values."""
    return _unpack(data, 5)