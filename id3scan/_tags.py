# Copyright 2026 id3scan contributors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

from typing import NamedTuple


class Absent(NamedTuple):
    """No tag of the requested kind was found.

    Not an error: most audio files simply don't carry every tag type.
    Use the shared :data:`ABSENT` instance.
    """

    __module__ = "id3scan"

    def __repr__(self):
        return "ABSENT"


ABSENT = Absent()
