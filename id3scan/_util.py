# Copyright 2026 id3scan contributors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Utility functions for id3scan.

You should not rely on the interfaces here being stable. They are
intended for internal use in id3scan only.

All readers take a byte window (bytes, bytearray or memoryview) and an
integer offset. Multi-byte integers are big-endian.
"""

from __future__ import annotations

import struct

ByteWindow = bytes | bytearray | memoryview


class Id3ScanError(Exception):
    """Base class for all custom exceptions in id3scan"""

    __module__ = "id3scan"


class ByteWindowError(Id3ScanError, IndexError):
    """A read went past the end of the byte window"""


def _check_window(data: object, name: str = "data") -> None:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(
            "%s must be a bytes-like object, not %s" % (
                name, type(data).__name__))
    # lengths and offsets count items, so only byte sized ones work
    if isinstance(data, memoryview) and data.itemsize != 1:
        raise TypeError(
            "%s must be a byte memoryview, not format %r" % (
                name, data.format))


def _check_int(value: object, name: str) -> None:
    # bool is an int subclass but never a valid offset
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(
            "%s must be an integer, not %s" % (name, type(value).__name__))


def _unpack(fmt: str, data: ByteWindow, offset: int) -> int:
    _check_window(data)
    _check_int(offset, "offset")
    size = struct.calcsize(fmt)
    if offset < 0 or offset + size > len(data):
        raise ByteWindowError(
            "can't read %d bytes at offset %d of a %d byte window" % (
                size, offset, len(data)))
    return struct.unpack_from(fmt, data, offset)[0]


class cdata:
    """Byte window to Python numeric type conversions."""

    error = ByteWindowError

    int8 = staticmethod(lambda data, offset: _unpack('>b', data, offset))
    uint8 = staticmethod(lambda data, offset: _unpack('>B', data, offset))

    int16 = staticmethod(lambda data, offset: _unpack('>h', data, offset))
    uint16 = staticmethod(lambda data, offset: _unpack('>H', data, offset))

    int32 = staticmethod(lambda data, offset: _unpack('>i', data, offset))
    uint32 = staticmethod(lambda data, offset: _unpack('>I', data, offset))


get_int8 = cdata.int8
get_uint8 = cdata.uint8
get_int16 = cdata.int16
get_uint16 = cdata.uint16
get_int32 = cdata.int32
get_uint32 = cdata.uint32


def read_chars(data: ByteWindow, offset: int, length: int) -> str:
    """Returns `length` bytes starting at `offset` as text, cut at the
    first null byte.

    Every byte maps to the code point of the same value, so this never
    fails on undecodable data. Like slicing, a window that is too short
    gives a shorter result instead of an error.
    """

    _check_window(data)
    _check_int(offset, "offset")
    _check_int(length, "length")

    chunk = bytes(data[offset:offset + length])
    index = chunk.find(b"\x00")
    if index != -1:
        chunk = chunk[:index]
    return chunk.decode("latin-1")


def get_fixed_point16(data: ByteWindow, offset: int) -> float:
    """Two bytes joined as "<first>.<second>" in decimal"""

    first = get_uint8(data, offset)
    last = get_uint8(data, offset + 1)
    return float("%d.%d" % (first, last))


def get_fixed_point32(data: ByteWindow, offset: int) -> float:
    """Two uint16 halves joined as "<first>.<second>" in decimal"""

    first = get_uint16(data, offset)
    last = get_uint16(data, offset + 2)
    return float("%d.%d" % (first, last))


def _bitpadded(value: bytes, bits: int = 7) -> int:
    mask = (1 << bits) - 1
    numeric_value = 0
    for byte in bytearray(value):
        numeric_value = (numeric_value << bits) | (byte & mask)
    return numeric_value


def get_syncsafe_int32(data: ByteWindow, offset: int) -> int:
    """Reads a 28 bit syncsafe integer stored in 4 bytes.

    The padding bits are ignored, not validated.
    """

    value = get_uint32(data, offset)
    return ((value & 0x7f) |
            (value & 0x7f00) >> 1 |
            (value & 0x7f0000) >> 2 |
            (value & 0x7f000000) >> 3)


def get_syncsafe_int35(data: ByteWindow, offset: int) -> int:
    """Reads a 32 bit value stored as a 35 bit syncsafe integer in 5 bytes
    (used for the extended header CRC).
    """

    _check_window(data)
    _check_int(offset, "offset")
    if offset < 0 or offset + 5 > len(data):
        raise ByteWindowError(
            "can't read 5 bytes at offset %d of a %d byte window" % (
                offset, len(data)))
    return _bitpadded(bytes(data[offset:offset + 5])) & 0xffffffff


def str_to_bytes(text: str) -> bytes:
    """Maps each code point to a byte of the same value.

    Raises ValueError for code points above 0xff.
    """

    if not isinstance(text, str):
        raise TypeError("text must be a str, not %s" % type(text).__name__)
    try:
        return text.encode("latin-1")
    except UnicodeEncodeError as e:
        raise ValueError(
            "can't map %r to bytes, code point above 0xff" % text) from e


def _needle(needle: str | bytes) -> bytes:
    if isinstance(needle, str):
        return str_to_bytes(needle)
    _check_window(needle, "needle")
    return bytes(needle)


def find_markers(haystack: ByteWindow, needle: str | bytes) -> list[int]:
    """Returns all offsets where `needle` starts in `haystack`, including
    overlapping matches.

    A str needle goes through `str_to_bytes` and raises ValueError if it
    can't be mapped.
    """

    _check_window(haystack, "haystack")
    marker = _needle(needle)
    if not marker:
        return []

    data = bytes(haystack)
    positions = []
    index = data.find(marker)
    while index != -1:
        positions.append(index)
        index = data.find(marker, index + 1)
    return positions


def find_marker(haystack: ByteWindow, needle: str | bytes) -> int | None:
    """Returns the offset of the first `needle` in `haystack` or None.

    See `find_markers` for the needle types.
    """

    _check_window(haystack, "haystack")
    marker = _needle(needle)
    if not marker:
        return None

    index = bytes(haystack).find(marker)
    if index == -1:
        return None
    return index
