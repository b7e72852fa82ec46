# Copyright 2026 id3scan contributors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""ID3v1 reading.

http://id3.org/ID3v1
"""

from __future__ import annotations

from typing import NamedTuple

from id3scan._constants import get_genre
from id3scan._tags import ABSENT, Absent
from id3scan._util import ByteWindow, _check_window, get_uint8, read_chars

TAG_SIZE = 128


class ID3v1Tag(NamedTuple):
    """An ID3v1.0 or ID3v1.1 tag.

    All text fields are cut at the first null byte and stripped.
    `track` is only set for ID3v1.1.
    """

    __module__ = "id3scan.id3"

    version: str
    title: str
    artist: str
    album: str
    year: str
    comment: str
    genre: str
    track: int | None = None


def read_id3v1(data: ByteWindow) -> ID3v1Tag | Absent:
    """Reads the ID3v1 tag in the last 128 bytes of `data`.

    Returns :data:`id3scan.ABSENT` if there is no tag.
    """

    _check_window(data)
    tag = memoryview(data)[-TAG_SIZE:]
    if len(tag) < TAG_SIZE or read_chars(tag, 0, 3) != "TAG":
        return ABSENT

    def text(offset, length):
        return read_chars(tag, offset, length).strip()

    # ID3v1.1 uses the last two comment bytes for a null and the track
    if tag[125] == 0 and tag[126] != 0:
        version = "ID3v1.1"
        comment = text(97, 28)
        track = get_uint8(tag, 126)
    else:
        version = "ID3v1.0"
        comment = text(97, 30)
        track = None

    return ID3v1Tag(
        version=version,
        title=text(3, 30),
        artist=text(33, 30),
        album=text(63, 30),
        year=text(93, 4),
        comment=comment,
        genre=get_genre(get_uint8(tag, 127)),
        track=track,
    )
