# Copyright 2026 id3scan contributors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""ID3v1 and ID3v2 header reading.

This is based off of the following references:

* http://id3.org/id3v2.4.0-structure
* http://id3.org/id3v2.3.0
* http://id3.org/ID3v1

Only the ID3v2 header and extended header are read, frames are not.
"""

from ._file import read_id3 as read_id3
from ._id3v1 import ID3v1Tag as ID3v1Tag, read_id3v1 as read_id3v1
from ._tags import ID3v2Tag as ID3v2Tag, ID3v2Flags as ID3v2Flags, \
    ExtendedHeader as ExtendedHeader, \
    ExtendedHeaderFlag as ExtendedHeaderFlag, \
    TagRestrictions as TagRestrictions, read_id3v2 as read_id3v2
from ._util import error as error, ID3Warning as ID3Warning, \
    ID3TruncatedTagError as ID3TruncatedTagError, \
    ID3ExtendedHeaderSizeError as ID3ExtendedHeaderSizeError


__all__ = ['read_id3', 'read_id3v1', 'read_id3v2', 'ID3v1Tag', 'ID3v2Tag',
           'ID3v2Flags', 'ExtendedHeader', 'ExtendedHeaderFlag',
           'TagRestrictions', 'error', 'ID3Warning', 'ID3TruncatedTagError',
           'ID3ExtendedHeaderSizeError']
