# Copyright 2026 id3scan contributors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""ID3v2 header and extended header reading.

http://id3.org/id3v2.4.0-structure
http://id3.org/id3v2.3.0
"""

from __future__ import annotations

import warnings
from typing import NamedTuple

from id3scan._tags import ABSENT, Absent
from id3scan._util import (
    ByteWindow,
    ByteWindowError,
    get_syncsafe_int32,
    get_syncsafe_int35,
    get_uint8,
    read_chars,
)

from ._util import (
    RESTRICTION_IMAGE_ENCODING,
    RESTRICTION_IMAGE_SIZE,
    RESTRICTION_TAG_SIZE,
    RESTRICTION_TEXT_ENCODING,
    RESTRICTION_TEXT_FIELDS_SIZE,
    ExtendedFlags,
    HeaderFlags,
    ID3ExtendedHeaderSizeError,
    ID3TruncatedTagError,
    ID3Warning,
    unpack_field,
)

HEADER_SIZE = 10

# size and flag count; anything smaller isn't an extended header
_MIN_EXTENDED_SIZE = 5

# the CRC and restrictions data is prefixed by a length byte
_CRC_DATA_SIZE = 1 + 5
_RESTRICTIONS_DATA_SIZE = 1 + 1


class TagRestrictions(NamedTuple):
    """Restrictions the tag was created with (ID3v2.4 only)"""

    tag_size: int
    """0-3, maximum number of frames and total tag size"""

    text_encoding: bool
    """True if only ISO-8859-1 and UTF-8 are used"""

    text_fields_size: int
    """0-3, maximum length of text fields"""

    image_encoding: bool
    """True if images are PNG or JPEG only"""

    image_size: int
    """0-3, maximum image dimensions"""

    @classmethod
    def from_byte(cls, value: int) -> TagRestrictions:
        return cls(
            tag_size=unpack_field(value, RESTRICTION_TAG_SIZE),
            text_encoding=bool(value & RESTRICTION_TEXT_ENCODING),
            text_fields_size=unpack_field(
                value, RESTRICTION_TEXT_FIELDS_SIZE),
            image_encoding=bool(value & RESTRICTION_IMAGE_ENCODING),
            image_size=unpack_field(value, RESTRICTION_IMAGE_SIZE),
        )


class ExtendedHeaderFlag(NamedTuple):
    """One flag byte of the extended header and the data attached to it"""

    update: bool
    crc: int | None = None
    tag_restrictions: TagRestrictions | None = None


class ExtendedHeader(NamedTuple):

    size: int
    number_of_flags: int
    flags: tuple[ExtendedHeaderFlag, ...] = ()


class ID3v2Flags(NamedTuple):

    unsynchronisation: bool = False
    extended_header: bool = False
    experimental_indicator: bool = False
    footer_present: bool = False

    @classmethod
    def from_byte(cls, value: int) -> ID3v2Flags:
        flags = HeaderFlags(value & 0xf0)
        return cls(
            unsynchronisation=HeaderFlags.UNSYNCHRONISATION in flags,
            extended_header=HeaderFlags.EXTENDED_HEADER in flags,
            experimental_indicator=HeaderFlags.EXPERIMENTAL in flags,
            footer_present=HeaderFlags.FOOTER in flags,
        )


class ID3v2Tag(NamedTuple):
    """The header of an ID3v2 tag.

    Attributes:
        version (str): e.g. "ID3v2.4.0"
        flags (ID3v2Flags): the header flags
        size (int): size of the tag excluding the 10 byte header
        extended_header (ExtendedHeader): or `None` if the extended header
            flag isn't set
    """

    __module__ = "id3scan.id3"

    version: str
    flags: ID3v2Flags
    size: int
    extended_header: ExtendedHeader | None = None


def _read_extended_header(data: ByteWindow, offset: int) -> ExtendedHeader:
    start = offset
    size = get_syncsafe_int32(data, offset)
    number_of_flags = get_uint8(data, offset + 4)
    offset += _MIN_EXTENDED_SIZE

    flags = []
    for _ in range(number_of_flags):
        value = ExtendedFlags(get_uint8(data, offset) & 0x70)
        offset += 1

        crc = None
        if ExtendedFlags.CRC in value:
            crc = get_syncsafe_int35(data, offset + 1)
            offset += _CRC_DATA_SIZE

        restrictions = None
        if ExtendedFlags.RESTRICTIONS in value:
            restrictions = TagRestrictions.from_byte(
                get_uint8(data, offset + 1))
            offset += _RESTRICTIONS_DATA_SIZE

        flags.append(ExtendedHeaderFlag(
            update=ExtendedFlags.UPDATE in value,
            crc=crc,
            tag_restrictions=restrictions))

    consumed = offset - start
    if consumed != size:
        raise ID3ExtendedHeaderSizeError(
            "extended header size is %d but its flags take %d bytes" % (
                size, consumed))

    return ExtendedHeader(size, number_of_flags, tuple(flags))


def read_id3v2(data: ByteWindow) -> ID3v2Tag | Absent:
    """Reads the ID3v2 header at the start of `data`.

    Returns :data:`id3scan.ABSENT` if `data` doesn't start with "ID3".

    Raises:
        TypeError: if `data` isn't bytes-like
        ID3TruncatedTagError: if the header or extended header is cut off
        ID3ExtendedHeaderSizeError: if the extended header size doesn't
            match its content
    """

    if read_chars(data, 0, 3) != "ID3":
        return ABSENT

    if len(data) < HEADER_SIZE:
        raise ID3TruncatedTagError(
            "ID3v2 header needs %d bytes, got %d" % (HEADER_SIZE, len(data)))

    minor = get_uint8(data, 3)
    patch = get_uint8(data, 4)
    flags = ID3v2Flags.from_byte(get_uint8(data, 5))
    size = get_syncsafe_int32(data, 6)

    if flags.footer_present:
        warnings.warn(
            "ID3v2 footer present, tag span of %d bytes excludes it" % (
                size + HEADER_SIZE), ID3Warning)

    # everything after this only looks at the tag itself
    tag = memoryview(data)[:size + HEADER_SIZE]

    extended_header = None
    if flags.extended_header:
        try:
            extended_header = _read_extended_header(tag, HEADER_SIZE)
        except ByteWindowError as e:
            raise ID3TruncatedTagError(
                "extended header runs past the tag: %s" % e) from e

    return ID3v2Tag(
        version="ID3v2.%d.%d" % (minor, patch),
        flags=flags,
        size=size,
        extended_header=extended_header,
    )
