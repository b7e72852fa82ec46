# Copyright 2026 id3scan contributors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from enum import IntFlag

from id3scan._util import Id3ScanError


class error(Id3ScanError):
    pass


class ID3TruncatedTagError(error, ValueError):
    pass


class ID3ExtendedHeaderSizeError(error, ValueError):
    pass


class ID3Warning(error, UserWarning):
    pass


class HeaderFlags(IntFlag):
    """ID3v2 header flags (byte 5)"""

    UNSYNCHRONISATION = 0x80
    EXTENDED_HEADER = 0x40
    EXPERIMENTAL = 0x20
    FOOTER = 0x10


class ExtendedFlags(IntFlag):
    """Flags of one extended header flag byte"""

    UPDATE = 0x40
    CRC = 0x20
    RESTRICTIONS = 0x10


# tag restrictions byte, see id3v2.4.0-structure 3.2
RESTRICTION_TAG_SIZE = 0xc0
RESTRICTION_TEXT_ENCODING = 0x20
RESTRICTION_TEXT_FIELDS_SIZE = 0x18
RESTRICTION_IMAGE_ENCODING = 0x04
RESTRICTION_IMAGE_SIZE = 0x03


def unpack_field(value: int, mask: int) -> int:
    """Returns the bits of `value` selected by `mask`, shifted down"""

    shift = (mask & -mask).bit_length() - 1
    return (value & mask) >> shift
