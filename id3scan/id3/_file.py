# Copyright 2026 id3scan contributors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from __future__ import annotations

from id3scan._tags import ABSENT, Absent
from id3scan._util import ByteWindow

from ._id3v1 import ID3v1Tag, read_id3v1
from ._tags import ID3v2Tag, read_id3v2


def read_id3(data: ByteWindow,
             load_v1: bool = True) -> ID3v2Tag | ID3v1Tag | Absent:
    """Reads the ID3 tag of a file from its content.

    An ID3v2 tag at the start always wins; the end of the file is only
    looked at if there is none.

    Args:
        data (bytes): the file content, or at least the ID3v2 tag at the
            start and the last 128 bytes
        load_v1 (bool): fall back to an ID3v1 tag at the end of `data`

    Returns:
        `ID3v2Tag`, `ID3v1Tag` or :data:`id3scan.ABSENT`

    Raises:
        TypeError: if `data` isn't bytes-like
        id3scan.id3.error: if the ID3v2 tag is broken. There is no fallback
            to ID3v1 in that case.
    """

    tag = read_id3v2(data)
    if not isinstance(tag, Absent):
        return tag

    if load_v1:
        return read_id3v1(data)
    return ABSENT
