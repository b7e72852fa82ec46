# Copyright 2026 id3scan contributors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""id3scan reads the ID3 tag of an audio file from its bytes.

::

    import id3scan
    with open("song.mp3", "rb") as h:
        tag = id3scan.read_id3(h.read())

The result is an :class:`id3scan.id3.ID3v2Tag`, an
:class:`id3scan.id3.ID3v1Tag` or :data:`id3scan.ABSENT`.
"""

from id3scan._util import Id3ScanError
from id3scan._tags import Absent, ABSENT
from id3scan.id3 import read_id3


version = (1, 0, 0)
"""Version tuple."""

version_string = ".".join(map(str, version))
"""Version string."""


__all__ = ['read_id3', 'Absent', 'ABSENT', 'Id3ScanError', 'version',
           'version_string']
