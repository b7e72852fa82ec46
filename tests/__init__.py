import re
import sys
import contextlib
from io import StringIO
from unittest import TestCase as BaseTestCase

try:
    import pytest
except ImportError:
    raise SystemExit("pytest missing: pip install pytest")


@contextlib.contextmanager
def capture_output():
    """
    with capture_output() as (stdout, stderr):
        some_action()
    print stdout.getvalue(), stderr.getvalue()
    """

    err = StringIO()
    out = StringIO()
    old_err = sys.stderr
    old_out = sys.stdout
    sys.stderr = err
    sys.stdout = out

    try:
        yield (out, err)
    finally:
        sys.stderr = old_err
        sys.stdout = old_out


def build_v1(title=b"", artist=b"", album=b"", year=b"", comment=b"",
             genre=255, track=None):
    """Returns a 128 byte ID3v1 tag, ID3v1.1 if track is given"""

    if track is None:
        comment = comment.ljust(30, b"\x00")[:30]
    else:
        comment = comment.ljust(28, b"\x00")[:28] + b"\x00" + bytes([track])
    return (b"TAG" + title.ljust(30, b"\x00")[:30] +
            artist.ljust(30, b"\x00")[:30] + album.ljust(30, b"\x00")[:30] +
            year.ljust(4, b"\x00")[:4] + comment + bytes([genre]))


def syncsafe(value, width=4):
    """Encodes value as a syncsafe integer of width bytes"""

    data = bytearray(width)
    for i in range(width):
        data[width - 1 - i] = value & 0x7f
        value >>= 7
    return bytes(data)


def build_v2(minor=4, patch=0, flags=0, body=b"", size=None):
    """Returns an ID3v2 header followed by body"""

    if size is None:
        size = len(body)
    return b"ID3" + bytes([minor, patch, flags]) + syncsafe(size) + body


class TestCase(BaseTestCase):

    def failUnlessRaisesRegexp(self, exc, re_, fun, *args, **kwargs):
        def wrapped(*args, **kwargs):
            try:
                fun(*args, **kwargs)
            except Exception as e:
                self.failUnless(re.search(re_, str(e)))
                raise
        self.failUnlessRaises(exc, wrapped, *args, **kwargs)

    # silence deprec warnings about useless renames
    failUnless = BaseTestCase.assertTrue
    failIf = BaseTestCase.assertFalse
    failUnlessEqual = BaseTestCase.assertEqual
    failUnlessRaises = BaseTestCase.assertRaises
    failIfEqual = BaseTestCase.assertNotEqual
    assertEquals = BaseTestCase.assertEqual

    def assertReallyEqual(self, a, b):
        self.assertEqual(a, b)
        self.assertEqual(b, a)
        self.assertTrue(a == b)
        self.assertTrue(b == a)
        self.assertFalse(a != b)
        self.assertFalse(b != a)


def unit(run=[], exitfirst=False):
    args = []

    if run:
        args.append("-k")
        args.append(" or ".join(run))

    if exitfirst:
        args.append("-x")

    args.append("tests")

    return pytest.main(args=args)
